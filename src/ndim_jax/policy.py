"""Configuration for dimension validation and coordinate-conversion bounds."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_CHECK_DIMENSION = "NDIM_JAX_CHECK_DIMENSION"
ENV_COORDINATE_DIMENSIONS = "NDIM_JAX_COORDINATE_DIMENSIONS"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class NdimPolicy:
    """Explicit policy for the mapper and the coordinate converter.

    - `check_dimension`: mapping past the structure's depth raises instead of
      passing scalars through unchanged.
    - `coordinate_dimensions`: dimensions `to_coordinate_map` accepts; `None`
      accepts every dimension >= 1.
    """

    check_dimension: bool = True
    coordinate_dimensions: tuple[int, ...] | None = (2, 3)

    def supports_coordinate_dimension(self, dim: object) -> bool:
        if isinstance(dim, bool) or not isinstance(dim, int):
            return False
        if self.coordinate_dimensions is None:
            return dim >= 1
        return dim in self.coordinate_dimensions


DEFAULT_POLICY = NdimPolicy()


def resolve_policy(policy: NdimPolicy | None) -> NdimPolicy:
    return DEFAULT_POLICY if policy is None else policy


def policy_from_env(environ: Mapping[str, str] | None = None) -> NdimPolicy:
    """Build a policy from `NDIM_JAX_*` variables for callers that configure by environment.

    The library never reads the environment itself; pass the result as `policy=`.
    Unset or blank variables keep the defaults.
    """
    env = os.environ if environ is None else environ

    check_dimension = DEFAULT_POLICY.check_dimension
    raw_check = env.get(ENV_CHECK_DIMENSION, "").strip()
    if raw_check:
        check_dimension = _parse_flag(raw_check, name=ENV_CHECK_DIMENSION)

    coordinate_dimensions = DEFAULT_POLICY.coordinate_dimensions
    raw_dims = env.get(ENV_COORDINATE_DIMENSIONS, "").strip()
    if raw_dims:
        coordinate_dimensions = _parse_dimensions(raw_dims, name=ENV_COORDINATE_DIMENSIONS)

    return NdimPolicy(check_dimension=check_dimension, coordinate_dimensions=coordinate_dimensions)


def _parse_flag(raw: str, *, name: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_dimensions(spec: str, *, name: str) -> tuple[int, ...] | None:
    if spec.lower() == "any":
        return None

    out: set[int] = set()
    for part in spec.split(","):
        token = part.strip()
        if not token:
            continue
        try:
            if "-" in token:
                lo_raw, hi_raw = token.split("-", 1)
                lo = int(lo_raw.strip())
                hi = int(hi_raw.strip())
                if hi < lo:
                    lo, hi = hi, lo
                out.update(range(lo, hi + 1))
                continue
            out.add(int(token))
        except ValueError:
            raise ValueError(f"{name} has a malformed entry {token!r}") from None

    if not out:
        raise ValueError(f"{name} names no dimensions")
    if min(out) < 1:
        raise ValueError(f"{name} dimensions must be >= 1")
    return tuple(sorted(out))
