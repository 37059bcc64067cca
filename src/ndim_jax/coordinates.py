"""Conversion between regular nested lists and coordinate maps."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping

from .depth import get_depth
from .errors import DimensionMismatchError, StructuralError, UnsupportedDimensionError
from .mapping import validate_dimension
from .policy import NdimPolicy, resolve_policy
from .values import is_container

logger = logging.getLogger(__name__)

Coordinate = tuple[int, ...]


def iter_coordinates(value: list, dim: int) -> Iterator[tuple[Coordinate, object]]:
    """Yield `(coordinate, leaf)` pairs for elements `dim` levels deep, row-major."""
    dim = validate_dimension(dim)
    if not is_container(value):
        raise DimensionMismatchError(
            f"cannot enumerate a {type(value).__name__} at dimension {dim}",
            dimension=dim,
        )
    return _walk(value, dim, target=dim, prefix=())


def _walk(node: list, remaining: int, *, target: int, prefix: Coordinate) -> Iterator[tuple[Coordinate, object]]:
    for idx, item in enumerate(node):
        coord = prefix + (idx,)
        if remaining == 1:
            yield coord, item
            continue
        if not is_container(item):
            raise DimensionMismatchError(
                f"structure is shallower than dimension {target}",
                dimension=target,
                path=coord,
            )
        yield from _walk(item, remaining - 1, target=target, prefix=coord)


def to_coordinate_map(
    value: list,
    dim: int | None = None,
    *,
    policy: NdimPolicy | None = None,
) -> dict[Coordinate, object]:
    """Flatten a nested list into `{(i, j, ...): leaf}`.

    When `dim` is omitted it is inferred with `get_depth`, which rejects
    irregular input with `StructuralError`. Only dimensions 2 and 3 are
    converted under the default policy; other dimensions raise
    `UnsupportedDimensionError` unless the policy widens the set.

        >>> to_coordinate_map([[1, 2], [3, 4]])
        {(0, 0): 1, (0, 1): 2, (1, 0): 3, (1, 1): 4}
    """
    policy = resolve_policy(policy)
    if dim is None:
        dim = get_depth(value)
    if not policy.supports_coordinate_dimension(dim):
        logger.debug("Unsupported coordinate dimension %r", dim)
        raise UnsupportedDimensionError(dim)
    return dict(iter_coordinates(value, dim))


def from_coordinate_map(mapping: Mapping[Coordinate, object]) -> list:
    """Rebuild the nested list for a dense coordinate map.

    Keys must be non-empty tuples of non-negative integers of one common
    length covering the whole grid up to the per-axis maxima.
    """
    if not mapping:
        return []

    keys = list(mapping)
    for key in keys:
        if not _is_coordinate(key):
            raise StructuralError(f"invalid coordinate {key!r}")

    rank = len(keys[0])
    for key in keys[1:]:
        if len(key) != rank:
            raise StructuralError(f"coordinates have mixed lengths {rank} and {len(key)}")

    shape = tuple(max(key[axis] for key in keys) + 1 for axis in range(rank))
    # Distinct in-bounds keys fill the grid iff their count equals its size.
    if math.prod(shape) != len(keys):
        raise StructuralError(f"coordinate map does not cover the full {shape} grid")
    return _build(mapping, shape, prefix=())


def _is_coordinate(key: object) -> bool:
    if not isinstance(key, tuple) or not key:
        return False
    return all(isinstance(i, int) and not isinstance(i, bool) and i >= 0 for i in key)


def _build(mapping: Mapping[Coordinate, object], shape: tuple[int, ...], *, prefix: Coordinate) -> list:
    if len(shape) == 1:
        return [mapping[prefix + (idx,)] for idx in range(shape[0])]
    return [_build(mapping, shape[1:], prefix=prefix + (idx,)) for idx in range(shape[0])]
