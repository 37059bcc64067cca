"""Shape-preserving maps over elements at a fixed nesting depth."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .errors import DimensionMismatchError
from .policy import NdimPolicy, resolve_policy
from .values import is_container

logger = logging.getLogger(__name__)


def validate_dimension(dim: object) -> int:
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise DimensionMismatchError(f"dimension must be an integer, got {type(dim).__name__}", dimension=dim)
    if dim < 1:
        raise DimensionMismatchError(f"dimension must be >= 1, got {dim}", dimension=dim)
    return dim


def map_at_depth(
    value: list,
    dim: int,
    fn: Callable[[object], object],
    *,
    policy: NdimPolicy | None = None,
) -> list:
    """Apply `fn` to every element sitting exactly `dim` levels deep.

    The result is a new list with the same lengths at every level. Elements
    deeper than `dim` are handed to `fn` whole. Calls to `fn` happen eagerly,
    left to right and depth first.

    Descending into a scalar before reaching `dim` raises
    `DimensionMismatchError`, unless the policy disables `check_dimension`,
    in which case such scalars are kept as they are.
    """
    dim = validate_dimension(dim)
    if not is_container(value):
        raise DimensionMismatchError(
            f"cannot map at dimension {dim} over a {type(value).__name__}",
            dimension=dim,
        )
    strict = resolve_policy(policy).check_dimension
    return _map_level(value, dim, fn, strict=strict, target=dim, path=())


def _map_level(
    node: list,
    remaining: int,
    fn: Callable[[object], object],
    *,
    strict: bool,
    target: int,
    path: tuple[int, ...],
) -> list:
    if remaining == 1:
        return [fn(item) for item in node]

    out: list = []
    for idx, item in enumerate(node):
        if is_container(item):
            out.append(_map_level(item, remaining - 1, fn, strict=strict, target=target, path=path + (idx,)))
            continue
        if strict:
            logger.debug("Structure too shallow for dimension %d at %s", target, path + (idx,))
            raise DimensionMismatchError(
                f"structure is shallower than dimension {target}",
                dimension=target,
                path=path + (idx,),
            )
        out.append(item)
    return out


def map2(value: list, fn: Callable[[object], object]) -> list:
    return map_at_depth(value, 2, fn)


def map3(value: list, fn: Callable[[object], object]) -> list:
    return map_at_depth(value, 3, fn)


def map4(value: list, fn: Callable[[object], object]) -> list:
    return map_at_depth(value, 4, fn)


def map5(value: list, fn: Callable[[object], object]) -> list:
    return map_at_depth(value, 5, fn)


dmap = map_at_depth
