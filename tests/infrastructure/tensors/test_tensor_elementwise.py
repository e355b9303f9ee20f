import math
import operator
import unittest

import numpy as np

from ndforge import ShapeMismatchError, Tensor, UnsupportedOperationError


class TestTensorArithmetic(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.a = rng.standard_normal((3, 4))
        self.b = rng.standard_normal((3, 4)) + 3.0
        self.ta = Tensor.from_numpy(self.a)
        self.tb = Tensor.from_numpy(self.b)

    def test_tensor_tensor_ops_match_numpy(self) -> None:
        for op in (operator.add, operator.sub, operator.mul, operator.truediv):
            np.testing.assert_allclose(op(self.ta, self.tb).to_numpy(), op(self.a, self.b))

    def test_tensor_scalar_and_reflected(self) -> None:
        np.testing.assert_allclose((self.ta + 1.5).to_numpy(), self.a + 1.5)
        np.testing.assert_allclose((2 - self.ta).to_numpy(), 2 - self.a)
        np.testing.assert_allclose((2.0 / self.tb).to_numpy(), 2.0 / self.b)
        np.testing.assert_allclose((self.ta ** 2).to_numpy(), self.a ** 2)

    def test_numpy_scalar_on_the_left(self) -> None:
        out = np.float64(3.0) * self.ta
        self.assertIsInstance(out, Tensor)
        np.testing.assert_allclose(out.to_numpy(), 3.0 * self.a)

    def test_integer_promotion(self) -> None:
        t = Tensor.from_numpy(np.array([5, 7, -3], dtype=np.int32))
        self.assertEqual((t + 1).dtype, np.int32)
        self.assertEqual((t / 2).dtype, np.float64)
        self.assertEqual((t // 2).to_list(), [2, 3, -2])
        self.assertEqual((t % 3).to_list(), [2, 1, 0])
        self.assertEqual((t + 1.5).dtype, np.float64)

    def test_modulo_sign_and_bool_subtraction(self) -> None:
        self.assertEqual((Tensor.from_list([-7, 7]) % 3).to_list(), [2, 1])
        self.assertEqual((Tensor.from_list([7]) % -3).to_list(), [-2])
        with self.assertRaises(UnsupportedOperationError):
            Tensor.from_list([True]) - Tensor.from_list([False])

    def test_shape_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.ta + Tensor((4, 3))

    def test_unsupported_operand_type(self) -> None:
        with self.assertRaises(TypeError):
            self.ta + "x"

    def test_zip_with(self) -> None:
        out = self.ta.zip_with(self.tb, max)
        np.testing.assert_allclose(out.to_numpy(), np.maximum(self.a, self.b))
        strs = Tensor.from_list(["a", "b"], dtype=object)
        self.assertEqual(strs.zip_with("!", operator.add).to_list(), ["a!", "b!"])

    def test_tensor_of_tensors(self) -> None:
        inner = Tensor.from_list([1.0, 2.0])
        outer = Tensor.from_list([inner, inner * 10], dtype=object)
        total = outer + outer
        self.assertEqual(total.dtype, np.dtype(object))
        self.assertEqual(total[2].to_list(), [20.0, 40.0])


class TestTensorUnary(unittest.TestCase):
    def test_neg_abs_map(self) -> None:
        t = Tensor.from_list([-1.0, 4.0])
        self.assertEqual((-t).to_list(), [1.0, -4.0])
        self.assertEqual(abs(t).to_list(), [1.0, 4.0])
        self.assertEqual(abs(t).map(math.sqrt).to_list(), [1.0, 2.0])

    def test_neg_bool_unsupported(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            -Tensor.from_list([True, False])

    def test_invert(self) -> None:
        self.assertEqual((~Tensor.from_list([True, False])).to_list(), [False, True])
        self.assertEqual((~Tensor.from_list([0, 1])).to_list(), [-1, -2])

    def test_complex_parts(self) -> None:
        t = Tensor.from_list([1 + 2j, 3 - 1j])
        self.assertEqual(t.conj().to_list(), [1 - 2j, 3 + 1j])
        self.assertEqual(t.real().to_list(), [1.0, 3.0])
        self.assertEqual(t.imag().to_list(), [2.0, -1.0])
        self.assertEqual(t.real().dtype, np.float64)

    def test_real_tensor_parts(self) -> None:
        t = Tensor.from_list([1.5, -2.0])
        self.assertTrue(t.conj().isequal(t))
        self.assertTrue(t.real().isequal(t))
        imag = t.imag()
        self.assertEqual(imag.to_list(), [0.0, 0.0])
        self.assertEqual(imag.dtype, t.dtype)

    def test_logical_not(self) -> None:
        out = Tensor.from_list([0, 3]).logical_not()
        self.assertEqual(out.dtype, np.bool_)
        self.assertEqual(out.to_list(), [True, False])


class TestTensorComparisonAndBitwise(unittest.TestCase):
    def test_comparisons_produce_bool(self) -> None:
        a = Tensor.from_list([1, 2, 3])
        b = Tensor.from_list([3, 2, 1])
        self.assertEqual((a < b).to_list(), [True, False, False])
        self.assertEqual((a == b).to_list(), [False, True, False])
        self.assertEqual((a != 2).to_list(), [True, False, True])
        self.assertEqual((2 <= a).to_list(), [False, True, True])
        self.assertEqual((a >= b).dtype, np.bool_)

    def test_tensors_are_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(Tensor((1,)))

    def test_truth_value_needs_a_single_element(self) -> None:
        a = Tensor.from_list([1, 2])
        b = Tensor.from_list([3, 4])
        with self.assertRaises(UnsupportedOperationError):
            bool(a == b)
        with self.assertRaises(UnsupportedOperationError):
            bool(Tensor((0,)))
        self.assertFalse(Tensor.from_list([1]) == 2)
        self.assertTrue(Tensor.from_list([[5]]) > 2)
        self.assertFalse((a == b).any().item())

    def test_bitwise(self) -> None:
        a = Tensor.from_list([0b1100, 0b1010])
        self.assertEqual((a & 0b1000).to_list(), [8, 8])
        self.assertEqual((a | 1).to_list(), [13, 11])
        self.assertEqual((a ^ a).to_list(), [0, 0])
        self.assertEqual((3 & a).to_list(), [0, 2])

    def test_bitwise_on_float_unsupported(self) -> None:
        with self.assertRaises(UnsupportedOperationError):
            Tensor.from_list([1.0]) & Tensor.from_list([2.0])

    def test_logical_and_or(self) -> None:
        a = Tensor.from_list([0, 1, 2])
        b = Tensor.from_list([1, 0, 3])
        self.assertEqual(a.logical_and(b).to_list(), [False, False, True])
        self.assertEqual(a.logical_or(b).to_list(), [True, True, True])
        self.assertEqual(a.logical_or(0).dtype, np.bool_)


if __name__ == "__main__":
    unittest.main()
