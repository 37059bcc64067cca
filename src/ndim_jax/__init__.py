"""ndim-jax public API."""

from .coordinates import from_coordinate_map, iter_coordinates, to_coordinate_map
from .depth import container_info, get_depth, get_depth_unchecked, shape_of
from .errors import (
    DimensionMismatchError,
    NdimError,
    StructuralError,
    UnsupportedDimensionError,
)
from .mapping import dmap, map2, map3, map4, map5, map_at_depth
from .policy import DEFAULT_POLICY, NdimPolicy, policy_from_env
from .regularity import is_regular
from .values import ContainerInfo

try:
    from .arrays import as_jax_array, from_jax_array
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def as_jax_array(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for as_jax_array(). Install runtime deps first."
            ) from _jax_import_error

        def from_jax_array(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_jax_array(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "map_at_depth",
    "dmap",
    "map2",
    "map3",
    "map4",
    "map5",
    "to_coordinate_map",
    "iter_coordinates",
    "from_coordinate_map",
    "is_regular",
    "get_depth",
    "get_depth_unchecked",
    "shape_of",
    "container_info",
    "ContainerInfo",
    "as_jax_array",
    "from_jax_array",
    "NdimPolicy",
    "DEFAULT_POLICY",
    "policy_from_env",
    "NdimError",
    "StructuralError",
    "UnsupportedDimensionError",
    "DimensionMismatchError",
]
