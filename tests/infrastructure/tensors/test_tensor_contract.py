import unittest

import numpy as np

from ndforge import (
    InvalidRankError,
    ITensor,
    OutOfBoundsError,
    ShapeMismatchError,
    Tensor,
    UnsupportedOperationError,
)


class TestTensorConstruction(unittest.TestCase):
    def test_default_zero_filled_float64(self) -> None:
        t = Tensor((2, 3))
        self.assertEqual(t.shape, (2, 3))
        self.assertEqual(t.dtype, np.float64)
        self.assertEqual(t.numel(), 6)
        self.assertEqual(t.ndim, 2)
        self.assertEqual(t.to_list(), [0.0] * 6)

    def test_int_shape_is_rank_one(self) -> None:
        self.assertEqual(Tensor(4, np.int32).shape, (4,))

    def test_rank_zero_rejected(self) -> None:
        with self.assertRaises(InvalidRankError):
            Tensor(())
        with self.assertRaises(InvalidRankError):
            Tensor.from_numpy(np.float64(1.0))

    def test_negative_axis_rejected(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Tensor((2, -1))

    def test_wrong_buffer_size_rejected(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Tensor((2, 2), data=np.zeros(3))

    def test_factories(self) -> None:
        self.assertEqual(Tensor.ones((2, 2), np.int64).to_list(), [1, 1, 1, 1])
        full = Tensor.full((3,), 2.5)
        self.assertEqual(full.dtype, np.float64)
        self.assertEqual(full.to_list(), [2.5, 2.5, 2.5])
        self.assertEqual(Tensor.full((2,), "x").dtype, np.dtype(object))
        self.assertEqual(Tensor.zeros((2,), np.int8).dtype, np.int8)

    def test_satisfies_protocol(self) -> None:
        self.assertIsInstance(Tensor((1,)), ITensor)


class TestTensorNumpyInterop(unittest.TestCase):
    def test_from_numpy_is_one_based_and_column_major(self) -> None:
        arr = np.arange(24).reshape(2, 3, 4)
        t = Tensor.from_numpy(arr)
        self.assertEqual(t.shape, (2, 3, 4))
        self.assertEqual(t[2, 3, 4], arr[1, 2, 3])
        self.assertEqual(t[1, 2, 1], arr[0, 1, 0])
        self.assertEqual(t.to_list(), list(arr.ravel(order="F")))
        np.testing.assert_array_equal(t.to_numpy(), arr)

    def test_from_list_uses_row_notation(self) -> None:
        t = Tensor.from_list([[1, 2], [3, 4]])
        self.assertEqual(t[1, 2], 2)
        self.assertEqual(t.to_list(), [1, 3, 2, 4])

    def test_item(self) -> None:
        self.assertEqual(Tensor.full((1, 1), 7).item(), 7)
        with self.assertRaises(UnsupportedOperationError):
            Tensor((2,)).item()


class TestTensorContractDefaults(unittest.TestCase):
    def setUp(self) -> None:
        self.t = Tensor.from_numpy(np.arange(1, 7).reshape(2, 3))

    def test_linear_access_bounds(self) -> None:
        self.assertEqual(self.t.get_linear(1), 1)
        for bad in (0, 7):
            with self.assertRaises(OutOfBoundsError):
                self.t.get_linear(bad)
            with self.assertRaises(OutOfBoundsError):
                self.t.set_linear(bad, 0)

    def test_size(self) -> None:
        self.assertEqual(self.t.size(), (2, 3))
        self.assertEqual(self.t.size(1), 2)
        self.assertEqual(self.t.size(2), 3)
        self.assertEqual(self.t.size(3), 1)
        with self.assertRaises(OutOfBoundsError):
            self.t.size(0)

    def test_length(self) -> None:
        self.assertEqual(Tensor((5,)).length(), 5)
        self.assertEqual(Tensor((1, 4)).length(), 4)
        self.assertEqual(Tensor((3, 1)).length(), 3)
        with self.assertRaises(UnsupportedOperationError):
            self.t.length()
        with self.assertRaises(UnsupportedOperationError):
            Tensor((2, 1, 2)).length()

    def test_fill_returns_self(self) -> None:
        out = self.t.fill(9)
        self.assertIs(out, self.t)
        self.assertEqual(self.t.to_list(), [9] * 6)

    def test_copy_is_independent(self) -> None:
        c = self.t.copy()
        self.assertTrue(c.isequal(self.t))
        c[1, 1] = 100
        self.assertEqual(self.t[1, 1], 1)

    def test_copy_of_tensor_of_tensors_is_deep(self) -> None:
        inner = Tensor.from_list([1.0, 2.0])
        outer = Tensor.from_list([inner], dtype=object)
        dup = outer.copy()
        inner[1] = 50.0
        self.assertEqual(dup[1][1], 1.0)
        self.assertEqual(outer[1][1], 50.0)

    def test_reshape_round_trip(self) -> None:
        r = self.t.reshape(3, 2)
        self.assertEqual(r.shape, (3, 2))
        self.assertEqual(r.to_list(), self.t.to_list())
        back = r.reshape(self.t.size())
        self.assertTrue(back.isequal(self.t))
        self.assertEqual(self.t.reshape((6,)).shape, (6,))

    def test_reshape_count_mismatch_raises(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.t.reshape(4, 2)

    def test_iteration_is_linear_and_restartable(self) -> None:
        self.assertEqual(list(self.t), [1, 4, 2, 5, 3, 6])
        it = iter(self.t)
        self.assertEqual(next(it), 1)
        self.assertEqual(next(it), 4)
        it.restart()
        self.assertEqual(list(it), [1, 4, 2, 5, 3, 6])
        self.assertTrue(it.done)
        self.assertEqual(list(iter(self.t)), list(self.t))

    def test_isequal(self) -> None:
        self.assertTrue(self.t.isequal(self.t.copy()))
        self.assertFalse(self.t.isequal(self.t.reshape(3, 2)))
        self.assertFalse(self.t.isequal([1, 4, 2, 5, 3, 6]))

    def test_zero_length_axis(self) -> None:
        t = Tensor((0, 3))
        self.assertEqual(t.numel(), 0)
        self.assertEqual(list(t), [])
        self.assertEqual(t.copy().shape, (0, 3))

    def test_zero_of_element_type(self) -> None:
        self.assertEqual(Tensor((1,), np.int16).zero(), 0)
        self.assertEqual(Tensor((1,), object).zero(), 0)

    def test_similar(self) -> None:
        s = self.t.similar(np.float32, (4,))
        self.assertIsInstance(s, Tensor)
        self.assertEqual((s.shape, s.dtype), ((4,), np.float32))
        self.assertEqual(self.t.similar().shape, (2, 3))


if __name__ == "__main__":
    unittest.main()
