from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for interop tests")
class JaxInteropTests(unittest.TestCase):
    def test_to_jax_preserves_position_order(self) -> None:
        from onearray import Array, to_jax

        out = to_jax(Array(3, 1, 2))
        self.assertEqual(out.shape, (3,))
        self.assertEqual(out.tolist(), [3, 1, 2])

    def test_to_jax_with_dtype_and_empty(self) -> None:
        import jax.numpy as jnp

        from onearray import Array, to_jax

        self.assertEqual(to_jax(Array(1, 2), dtype=jnp.float32).dtype, jnp.float32)
        self.assertEqual(to_jax(Array()).shape, (0,))

    def test_to_jax_rejects_non_numeric_elements(self) -> None:
        from onearray import Array, InvalidArgumentError, to_jax

        for arr in (Array("a"), Array(1, True), Array(None)):
            with self.subTest(arr=arr):
                with self.assertRaises(InvalidArgumentError):
                    to_jax(arr)
        with self.assertRaises(InvalidArgumentError):
            to_jax([1, 2])

    def test_from_jax_round_trip(self) -> None:
        import jax.numpy as jnp

        from onearray import Array, from_jax, to_jax

        arr = from_jax(jnp.arange(1, 4))
        self.assertEqual(arr, Array(1, 2, 3))
        self.assertEqual(from_jax(to_jax(arr)), arr)

    def test_from_jax_requires_rank_one(self) -> None:
        import jax.numpy as jnp

        from onearray import InvalidArgumentError, from_jax

        for value in (jnp.zeros((2, 2)), jnp.asarray(1), [1, 2]):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError):
                    from_jax(value)

    def test_vectors_are_array_like(self) -> None:
        import jax.numpy as jnp
        import numpy as np

        from onearray import Array

        self.assertTrue(Array.is_array(np.arange(3)))
        self.assertTrue(Array.is_array(jnp.arange(3)))
        self.assertFalse(Array.is_array(np.zeros((2, 2))))
        self.assertEqual(Array.from_(np.array([4, 5])).to_list(), [4, 5])
        self.assertEqual(Array(1).merge(np.array([2, 3])), Array(1, 2, 3))

    def test_numpy_scalars_join_as_numbers(self) -> None:
        import numpy as np

        from onearray import Array

        self.assertEqual(Array(np.int64(1), np.float64(2.5)).join("|"), "1|2.5")


if __name__ == "__main__":
    unittest.main()
