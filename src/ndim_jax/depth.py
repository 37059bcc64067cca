"""Depth inference over regular nested lists."""

from __future__ import annotations

import logging

from .errors import StructuralError
from .regularity import is_regular
from .values import ContainerInfo, is_container, leaf_count

logger = logging.getLogger(__name__)

_IRREGULAR_MESSAGE = "list is not a regular nested structure"


def get_depth(value: object) -> int:
    """Return the dimension of a regular nested list.

    `[]` has depth 0, a flat list depth 1, and each level of regular nesting
    adds one. Raises `StructuralError` when `value` is not regular.
    """
    if not is_regular(value):
        logger.debug("Rejected irregular structure of type %s", type(value).__name__)
        raise StructuralError(_IRREGULAR_MESSAGE)
    return get_depth_unchecked(value)


def get_depth_unchecked(value: list) -> int:
    """Depth along the first branch, assuming regularity was already checked."""
    depth = 0
    node: object = value
    while is_container(node) and node:
        depth += 1
        node = node[0]
    return depth


def shape_of(value: object) -> tuple[int, ...]:
    if not is_regular(value):
        raise StructuralError(_IRREGULAR_MESSAGE)

    # Empty inner lists contribute a trailing zero axis, as array shapes do.
    shape: list[int] = []
    node: object = value
    while is_container(node):
        shape.append(len(node))
        if not node:
            break
        node = node[0]
    return tuple(shape)


def container_info(value: object) -> ContainerInfo:
    if not is_regular(value):
        return ContainerInfo(regular=False, depth=None, shape=None, size=leaf_count(value))
    return ContainerInfo(
        regular=True,
        depth=get_depth_unchecked(value),
        shape=shape_of(value),
        size=leaf_count(value),
    )
