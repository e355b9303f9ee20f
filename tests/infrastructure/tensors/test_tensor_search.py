import unittest

import numpy as np

from ndforge import (
    OutOfBoundsError,
    ShapeMismatchError,
    Tensor,
    accumarray,
    find,
    nnz,
)


class TestFind(unittest.TestCase):
    def test_vector_gives_linear_positions(self) -> None:
        v = Tensor.from_list([0, 3, 0, 5])
        self.assertEqual(find(v), [2, 4])
        self.assertEqual(v.nnz(), 2)

    def test_matrix_gives_per_axis_coordinates(self) -> None:
        m = Tensor.from_list([[0, 1], [2, 0], [0, 3]])
        rows, cols = m.find()
        self.assertEqual(rows, [2, 1, 3])
        self.assertEqual(cols, [1, 2, 2])

    def test_reports_exactly_the_nonzero_positions(self) -> None:
        rng = np.random.default_rng(0)
        arr = rng.integers(0, 3, size=(3, 4, 2)) * rng.integers(0, 2, size=(3, 4, 2))
        t = Tensor.from_numpy(arr)
        coords = find(t)
        self.assertEqual(len(coords), 3)
        self.assertEqual(len(coords[0]), nnz(t))
        self.assertEqual(nnz(t), int(np.count_nonzero(arr)))

        hits = set(zip(*coords))
        for point in hits:
            self.assertNotEqual(t[point], 0)
        for i in range(1, 4):
            for j in range(1, 5):
                for k in range(1, 3):
                    if (i, j, k) not in hits:
                        self.assertEqual(t[i, j, k], 0)

    def test_visiting_order_is_linear(self) -> None:
        t = Tensor.from_numpy(np.ones((2, 2, 2)))
        coords = find(t)
        linear = [i + 2 * (j - 1) + 4 * (k - 1) for i, j, k in zip(*coords)]
        self.assertEqual(linear, list(range(1, 9)))

    def test_all_zero(self) -> None:
        self.assertEqual(find(Tensor((2, 3))), ([], []))
        self.assertEqual(find(Tensor((3,))), [])
        self.assertEqual(nnz(Tensor((0, 4))), 0)

    def test_bool_and_complex(self) -> None:
        self.assertEqual(find(Tensor.from_list([False, True, True])), [2, 3])
        self.assertEqual(find(Tensor.from_list([0j, 1j])), [2])


class TestAccumarray(unittest.TestCase):
    def test_duplicates_accumulate(self) -> None:
        r = accumarray([1, 1], [1, 1], [3, 4], 2, 2)
        self.assertEqual(r.shape, (2, 2))
        self.assertEqual(r[1, 1], 7)
        self.assertEqual([r[2, 1], r[1, 2], r[2, 2]], [0, 0, 0])

    def test_scalar_value_is_broadcast(self) -> None:
        r = accumarray([1, 2, 2], [3, 1, 1], 1.5, 2, 3)
        self.assertEqual(r.dtype, np.float64)
        self.assertEqual(r[1, 3], 1.5)
        self.assertEqual(r[2, 1], 3.0)
        self.assertEqual(r.sum().item(), 4.5)

    def test_tensor_inputs_and_dtype(self) -> None:
        ii = Tensor.from_list([1, 2])
        jj = np.array([2, 2])
        vv = Tensor.from_list([1, 2])
        r = accumarray(ii, jj, vv, 2, 2, dtype=np.float32)
        self.assertEqual(r.dtype, np.float32)
        self.assertEqual(r.to_list(), [0.0, 0.0, 1.0, 2.0])

    def test_length_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            accumarray([1, 2], [1], [1, 1], 2, 2)
        with self.assertRaises(ShapeMismatchError):
            accumarray([1, 2], [1, 1], [1, 2, 3], 2, 2)

    def test_out_of_range_pair(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            accumarray([3], [1], [1], 2, 2)
        with self.assertRaises(OutOfBoundsError):
            accumarray([1], [0], [1], 2, 2)

    def test_fractional_coordinates_are_rejected(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            accumarray([1.7], [1.2], [5], 2, 2)
        with self.assertRaises(OutOfBoundsError):
            accumarray([1], [True], [5], 2, 2)

    def test_integral_float_coordinates(self) -> None:
        r = accumarray(np.array([2.0]), np.array([1.0]), [5], 2, 2)
        self.assertEqual(r[2, 1], 5)
        self.assertEqual(r.sum().item(), 5)

    def test_empty_coordinates(self) -> None:
        r = accumarray([], [], [], 2, 2)
        self.assertEqual(r.to_list(), [0.0] * 4)


if __name__ == "__main__":
    unittest.main()
