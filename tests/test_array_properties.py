from __future__ import annotations

import random
import unittest


class ArrayPropertiesTests(unittest.TestCase):
    SEED = 20251018
    CASES = 40

    def _random_arrays(self):
        from onearray import Array

        rng = random.Random(self.SEED)
        yield Array()
        for _ in range(self.CASES):
            size = rng.randint(1, 12)
            yield Array(*(rng.randint(-50, 50) for _ in range(size)))

    def _assert_dense(self, arr) -> None:
        from onearray import ABSENT

        for position in range(1, arr.length + 1):
            self.assertIsNot(arr.at(position), ABSENT)
        self.assertIs(arr.at(arr.length + 1), ABSENT)
        self.assertEqual(len(arr.to_list()), arr.length)

    def test_density_after_random_mutations(self) -> None:
        from onearray import Array

        rng = random.Random(self.SEED)
        arr = Array()
        for step in range(300):
            op = rng.choice(("push", "pop", "shift", "unshift", "fill", "reverse", "set"))
            if op == "push":
                arr.push(*range(rng.randint(0, 3)))
            elif op == "pop":
                arr.pop()
            elif op == "shift":
                arr.shift()
            elif op == "unshift":
                arr.unshift(*range(rng.randint(0, 3)))
            elif op == "fill":
                arr.fill(step, rng.randint(-5, 5), rng.randint(-5, 5))
            elif op == "reverse":
                arr.reverse()
            else:
                arr[arr.length + 1] = step
            with self.subTest(step=step, op=op):
                self._assert_dense(arr)

    def test_negative_index_equivalence(self) -> None:
        for arr in self._random_arrays():
            for i in range(1, arr.length + 1):
                self.assertEqual(arr.at(-i), arr.at(arr.length - i + 1))

    def test_construction_round_trip(self) -> None:
        from onearray import Array

        self.assertEqual(Array.from_(Array.new("a", "b", "c")).join(","), "a,b,c")

    def test_map_and_filter_length_laws(self) -> None:
        for arr in self._random_arrays():
            self.assertEqual(arr.map(lambda x: x * 3).length, arr.length)
            self.assertLessEqual(arr.filter(lambda x: x > 0).length, arr.length)

    def test_reverse_involution(self) -> None:
        for arr in self._random_arrays():
            self.assertEqual(arr.to_reversed().to_reversed(), arr)

    def test_push_pop_duality(self) -> None:
        for arr in self._random_arrays():
            n = arr.length
            marker = object()
            arr.push(marker)
            self.assertIs(arr.pop(), marker)
            self.assertEqual(arr.length, n)

    def test_reduce_without_seed_matches_seeded_tail(self) -> None:
        def fold(acc, cur):
            return acc * 2 - cur

        for arr in self._random_arrays():
            if arr.length == 0:
                continue
            self.assertEqual(arr.reduce(fold), arr.slice(2).reduce(fold, arr.at(1)))

    def test_concrete_scenarios(self) -> None:
        from onearray import ABSENT, Array, InvalidKeyError

        self.assertEqual(Array.new(10, 20, 30).slice(-2), Array(20, 30))
        self.assertEqual(Array.new(10, 20, 30).reduce(lambda a, c: a + c), 60)
        self.assertEqual(Array.new(1, 2, 3).merge(Array.new(4, 5)).join("-"), "1-2-3-4-5")
        with self.assertRaises(InvalidKeyError):
            Array.new()["x"] = 1
        self.assertIs(Array.new().pop(), ABSENT)


if __name__ == "__main__":
    unittest.main()
