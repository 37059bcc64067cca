"""Value model: what counts as a nested container and what is an opaque leaf."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

Fingerprint: TypeAlias = Literal["empty", "nested", "flat"]


@dataclass(frozen=True)
class ContainerInfo:
    regular: bool
    depth: int | None
    shape: tuple[int, ...] | None
    size: int


def is_container(value: object) -> bool:
    # Tuples, strings and arrays are opaque leaves; only lists nest.
    return isinstance(value, list)


def is_scalar(value: object) -> bool:
    return not is_container(value)


def fingerprint(value: list) -> Fingerprint:
    """Cheap structural signature: whether the first element is itself nested."""
    if not value:
        return "empty"
    return "nested" if is_container(value[0]) else "flat"


def leaf_count(value: object) -> int:
    """Number of scalar leaves reachable from `value` (a scalar counts as one)."""
    if not is_container(value):
        return 1
    return sum(leaf_count(item) for item in value)
