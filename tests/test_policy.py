from __future__ import annotations

import unittest

from ndim_jax import DEFAULT_POLICY, NdimPolicy, policy_from_env
from ndim_jax.policy import ENV_CHECK_DIMENSION, ENV_COORDINATE_DIMENSIONS, resolve_policy


class PolicyTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertTrue(DEFAULT_POLICY.check_dimension)
        self.assertEqual(DEFAULT_POLICY.coordinate_dimensions, (2, 3))
        self.assertIs(resolve_policy(None), DEFAULT_POLICY)

        custom = NdimPolicy(check_dimension=False)
        self.assertIs(resolve_policy(custom), custom)

    def test_supported_coordinate_dimensions(self) -> None:
        self.assertTrue(DEFAULT_POLICY.supports_coordinate_dimension(2))
        self.assertTrue(DEFAULT_POLICY.supports_coordinate_dimension(3))
        for dim in (0, 1, 4, True, 2.0, None):
            with self.subTest(dim=dim):
                self.assertFalse(DEFAULT_POLICY.supports_coordinate_dimension(dim))

        lifted = NdimPolicy(coordinate_dimensions=None)
        self.assertTrue(lifted.supports_coordinate_dimension(1))
        self.assertTrue(lifted.supports_coordinate_dimension(9))
        self.assertFalse(lifted.supports_coordinate_dimension(0))

    def test_empty_environment_gives_default(self) -> None:
        self.assertEqual(policy_from_env({}), DEFAULT_POLICY)
        self.assertEqual(policy_from_env({ENV_CHECK_DIMENSION: "  "}), DEFAULT_POLICY)

    def test_check_dimension_flag(self) -> None:
        cases = [("1", True), ("yes", True), ("ON", True), ("0", False), ("false", False), ("off", False)]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                policy = policy_from_env({ENV_CHECK_DIMENSION: raw})
                self.assertEqual(policy.check_dimension, expected)

        with self.assertRaises(ValueError):
            policy_from_env({ENV_CHECK_DIMENSION: "maybe"})

    def test_coordinate_dimension_specs(self) -> None:
        cases = [
            ("2,3", (2, 3)),
            ("4, 2", (2, 4)),
            ("2-4", (2, 3, 4)),
            ("5-3,1", (1, 3, 4, 5)),
            ("any", None),
            ("ANY", None),
        ]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                policy = policy_from_env({ENV_COORDINATE_DIMENSIONS: raw})
                self.assertEqual(policy.coordinate_dimensions, expected)

    def test_malformed_coordinate_dimension_specs(self) -> None:
        for raw in ("x", "2,y", ",", "0", "0-2"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    policy_from_env({ENV_COORDINATE_DIMENSIONS: raw})


if __name__ == "__main__":
    unittest.main()
