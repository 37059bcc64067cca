"""Structural-regularity analysis for nested lists."""

from __future__ import annotations

from .values import fingerprint, is_container


def is_regular(value: object, *, exhaustive: bool = False) -> bool:
    """Return whether `value` is a uniformly shaped nested list.

    At every level either all siblings are scalars, or all siblings are lists
    of the same length whose first elements agree on being nested or not.
    Once the siblings have been checked against the first one, only the first
    branch is descended into, so the cost is usually proportional to that
    branch. `exhaustive=True` instead requires every sibling to have the same
    full shape, down to the leaves.

    Scalars are not regular lists; the empty list is.
    """
    if not is_container(value):
        return False
    if exhaustive:
        return _full_shape(value) is not None
    if not value:
        return True

    head, tail = value[0], value[1:]
    if not is_container(head):
        return not any(is_container(item) for item in tail)

    if not all(is_container(item) for item in tail):
        return False

    head_length = len(head)
    if any(len(item) != head_length for item in tail):
        return False

    head_fingerprint = fingerprint(head)
    if any(fingerprint(item) != head_fingerprint for item in tail):
        return False

    return is_regular(head)


def _full_shape(value: object) -> tuple[int, ...] | None:
    """Shape shared by every branch of `value`, or `None` if branches disagree."""
    if not is_container(value):
        return ()
    if not value:
        return (0,)

    child_shape = _full_shape(value[0])
    if child_shape is None:
        return None
    for item in value[1:]:
        if _full_shape(item) != child_shape:
            return None
    return (len(value),) + child_shape
