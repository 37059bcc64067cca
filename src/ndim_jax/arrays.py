"""Bridge between regular nested lists and jax arrays."""

from __future__ import annotations

import jax.numpy as jnp

from .errors import DimensionMismatchError, StructuralError
from .regularity import is_regular


def as_jax_array(value: object, dtype=None):
    """Convert a regular nested list of numbers into a `jax.numpy` array.

    Every branch is checked, not only the first, since arrays need a fully
    rectangular input.
    """
    if not is_regular(value, exhaustive=True):
        raise StructuralError("list is not a regular nested structure")
    return jnp.asarray(value, dtype=dtype)


def from_jax_array(array) -> list:
    arr = jnp.asarray(array)
    if arr.ndim == 0:
        raise DimensionMismatchError("0-d array has no nested-list form", dimension=0)
    return arr.tolist()
