"""Structured error types for nested-list analysis and conversion."""

from __future__ import annotations


class NdimError(Exception):
    """Base class for structured ndim-jax errors."""


class StructuralError(NdimError, ValueError):
    """Input is not a regular nested structure where one is required."""


class UnsupportedDimensionError(NdimError, NotImplementedError):
    """Dimension is valid but not supported by this conversion path."""

    def __init__(self, dimension: int, *, operation: str = "to_coordinate_map") -> None:
        self.dimension = dimension
        self.operation = operation
        super().__init__(f"{operation} not implemented for {dimension} dimensional list (yet)")


class DimensionMismatchError(NdimError, ValueError):
    """Requested dimension is invalid or deeper than the structure allows."""

    def __init__(self, message: str, *, dimension: object = None, path: tuple[int, ...] = ()) -> None:
        self.dimension = dimension
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{message} at index path {list(self.path)}"
        return message
