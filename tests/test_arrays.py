from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for array-bridge tests")
class ArrayBridgeTests(unittest.TestCase):
    def test_regular_list_becomes_array(self) -> None:
        from ndim_jax import as_jax_array, shape_of

        value = [[1, 2, 3], [4, 5, 6]]
        arr = as_jax_array(value)
        self.assertEqual(tuple(arr.shape), (2, 3))
        self.assertEqual(tuple(arr.shape), shape_of(value))
        self.assertEqual(arr.tolist(), value)

    def test_dtype_is_forwarded(self) -> None:
        import jax.numpy as jnp

        from ndim_jax import as_jax_array

        arr = as_jax_array([[1, 2], [3, 4]], dtype=jnp.float32)
        self.assertEqual(arr.dtype, jnp.float32)

    def test_empty_axes_match_shape(self) -> None:
        from ndim_jax import as_jax_array, shape_of

        value = [[], []]
        self.assertEqual(tuple(as_jax_array(value).shape), shape_of(value))

    def test_irregular_lists_are_rejected_on_every_branch(self) -> None:
        from ndim_jax import StructuralError, as_jax_array

        cases = (
            [[1, 2], [3]],
            [[1, 2], [3, [4]]],
            [[[1, 2]], [[3]]],
            [[[1], [2]], [[3], [4, 5]]],
            3,
        )
        for value in cases:
            with self.subTest(value=value):
                with self.assertRaises(StructuralError):
                    as_jax_array(value)

    def test_array_back_to_lists(self) -> None:
        import jax.numpy as jnp

        from ndim_jax import from_jax_array, to_coordinate_map

        arr = jnp.reshape(jnp.arange(6), (2, 3))
        value = from_jax_array(arr)
        self.assertEqual(value, [[0, 1, 2], [3, 4, 5]])
        self.assertEqual(to_coordinate_map(value)[(1, 2)], 5)

    def test_zero_dimensional_array_is_rejected(self) -> None:
        import jax.numpy as jnp

        from ndim_jax import DimensionMismatchError, from_jax_array

        with self.assertRaises(DimensionMismatchError):
            from_jax_array(jnp.asarray(3))


if __name__ == "__main__":
    unittest.main()
