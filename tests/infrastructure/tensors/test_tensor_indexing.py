import unittest

import numpy as np

from ndforge import (
    ALL,
    SPECIALIZATIONS,
    OutOfBoundsError,
    ShapeMismatchError,
    Tensor,
    UnsupportedOperationError,
)
from ndforge.infrastructure.tensor.mixins.indexing import FANCY_GATHER


class TestScalarIndexing(unittest.TestCase):
    def setUp(self) -> None:
        self.arr = np.arange(12).reshape(3, 4)
        self.t = Tensor.from_numpy(self.arr)

    def test_one_based_coordinates(self) -> None:
        for i in range(1, 4):
            for j in range(1, 5):
                self.assertEqual(self.t[i, j], self.arr[i - 1, j - 1])
                self.assertEqual(self.t.ref(i, j), self.arr[i - 1, j - 1])

    def test_single_index_is_linear(self) -> None:
        flat = list(self.arr.ravel(order="F"))
        for k in range(1, 13):
            self.assertEqual(self.t[k], flat[k - 1])

    def test_rank_three_and_four(self) -> None:
        a3 = np.arange(24).reshape(2, 3, 4)
        t3 = Tensor.from_numpy(a3)
        self.assertEqual(t3[2, 1, 3], a3[1, 0, 2])
        a4 = np.arange(48).reshape(2, 3, 4, 2)
        t4 = Tensor.from_numpy(a4)
        self.assertEqual(t4[1, 3, 2, 2], a4[0, 2, 1, 1])

    def test_generic_rank_five(self) -> None:
        arr = np.arange(2 * 2 * 3 * 2 * 3).reshape(2, 2, 3, 2, 3)
        t = Tensor.from_numpy(arr)
        self.assertEqual(t[2, 1, 3, 2, 1], arr[1, 0, 2, 1, 0])
        t[1, 2, 1, 1, 3] = -5
        self.assertEqual(t.to_numpy()[0, 1, 0, 0, 2], -5)
        with self.assertRaises(OutOfBoundsError):
            t[1, 1, 4, 1, 1]

    def test_out_of_bounds(self) -> None:
        for coords in ((4, 1), (0, 1), (1, 5), (1, -1)):
            with self.assertRaises(OutOfBoundsError):
                self.t[coords]
        with self.assertRaises(OutOfBoundsError):
            self.t[13]
        with self.assertRaises(OutOfBoundsError):
            Tensor((3,))[4]

    def test_booleans_are_not_coordinates(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            self.t[True]
        with self.assertRaises(UnsupportedOperationError):
            self.t[True, 1]
        with self.assertRaises(UnsupportedOperationError):
            Tensor((3,))[np.True_]

    def test_fractional_coordinates_are_rejected(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            self.t[1.5, 1]
        with self.assertRaises(OutOfBoundsError):
            self.t[[1.5], 1]
        np.testing.assert_array_equal(
            self.t[np.array([1.0, 3.0]), 2].to_numpy(), self.arr[[0, 2], 1:2]
        )

    def test_wrong_specifier_count(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            self.t[1, 1, 1]
        with self.assertRaises(UnsupportedOperationError):
            self.t.ref()

    def test_scalar_assign(self) -> None:
        out = self.t.assign(99, 2, 3)
        self.assertIs(out, self.t)
        self.t[3, 4] = 7
        self.assertEqual(self.t[2, 3], 99)
        self.assertEqual(self.t.to_numpy()[2, 3], 7)
        self.t[1] = -1
        self.assertEqual(self.t[1, 1], -1)


class TestFancyIndexing(unittest.TestCase):
    def setUp(self) -> None:
        self.arr = np.arange(12).reshape(3, 4)
        self.t = Tensor.from_numpy(self.arr)

    def test_gather_rows(self) -> None:
        g = self.t[[1, 3], ALL]
        self.assertEqual(g.shape, (2, 4))
        np.testing.assert_array_equal(g.to_numpy(), self.arr[[0, 2], :])

    def test_scalar_axis_keeps_rank(self) -> None:
        g = self.t[2, ALL]
        self.assertEqual(g.shape, (1, 4))
        np.testing.assert_array_equal(g.to_numpy(), self.arr[1:2, :])

    def test_selectors_may_repeat_and_reorder(self) -> None:
        g = self.t.ref([3, 1, 3], range(4, 0, -1))
        np.testing.assert_array_equal(
            g.to_numpy(), self.arr[np.ix_([2, 0, 2], [3, 2, 1, 0])]
        )

    def test_selector_kinds(self) -> None:
        expected = self.arr[np.ix_([0, 2], [1])]
        for rows in ([1, 3], (1, 3), np.array([1, 3]), Tensor.from_list([1, 3]),
                     [True, False, True], np.array([True, False, True])):
            g = self.t[rows, [2]]
            np.testing.assert_array_equal(g.to_numpy(), expected)

    def test_mask_length_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.t[[True, False], ALL]

    def test_partial_slice_unsupported(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            self.t[1:2, ALL]

    def test_rank_three_gather(self) -> None:
        arr = np.arange(24).reshape(2, 3, 4)
        t = Tensor.from_numpy(arr)
        g = t[[2, 1], ALL, [4, 1]]
        self.assertEqual(g.shape, (2, 3, 2))
        np.testing.assert_array_equal(
            g.to_numpy(), arr[np.ix_([1, 0], [0, 1, 2], [3, 0])]
        )
        self.assertTrue(SPECIALIZATIONS.is_cached(FANCY_GATHER, 3))

    def test_gather_order_is_axis_one_fastest(self) -> None:
        g = self.t[[1, 2], [1, 2]]
        self.assertEqual(g.to_list(), [self.t[1, 1], self.t[2, 1], self.t[1, 2], self.t[2, 2]])

    def test_linear_gather(self) -> None:
        g = self.t[[1, 5, 12]]
        self.assertEqual(g.shape, (3,))
        flat = list(self.arr.ravel(order="F"))
        self.assertEqual(g.to_list(), [flat[0], flat[4], flat[11]])

    def test_selector_out_of_bounds(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            self.t[[1, 4], ALL]
        with self.assertRaises(OutOfBoundsError):
            self.t[ALL, [0]]

    def test_scatter_scalar_broadcast(self) -> None:
        self.t[[1, 2], [1, 2]] = 0
        expected = self.arr.copy()
        expected[np.ix_([0, 1], [0, 1])] = 0
        np.testing.assert_array_equal(self.t.to_numpy(), expected)

    def test_scatter_then_gather_round_trip(self) -> None:
        rows, cols = [1, 3], [2, 4]
        x = Tensor.from_list([[10, 20], [30, 40]])
        self.t[rows, cols] = x
        y = self.t[rows, cols]
        self.assertTrue(y.isequal(x))
        self.assertEqual(self.t[3, 2], 30)

    def test_scatter_from_sequence_in_gather_order(self) -> None:
        self.t.assign([-1, -2, -3, -4], [1, 2], [1, 2])
        self.assertEqual(
            [self.t[1, 1], self.t[2, 1], self.t[1, 2], self.t[2, 2]], [-1, -2, -3, -4]
        )

    def test_scatter_count_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.t[[1, 2], [1, 2]] = [1, 2, 3]
        with self.assertRaises(ShapeMismatchError):
            self.t[[1, 2], ALL] = Tensor((2, 3))

    def test_linear_scatter(self) -> None:
        self.t[[1, 12]] = 100
        self.assertEqual(self.t[1, 1], 100)
        self.assertEqual(self.t[3, 4], 100)


if __name__ == "__main__":
    unittest.main()
