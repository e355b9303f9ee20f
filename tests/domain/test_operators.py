import math
import operator
import unittest

import numpy as np

from ndforge.domain.utils._operators import (
    ADD,
    AND,
    MAX,
    MIN,
    MUL,
    OR,
    AssociativeOp,
    identity_for,
)


class TestAssociativeOp(unittest.TestCase):
    def test_zero_argument_form_is_identity(self) -> None:
        self.assertEqual(ADD(), 0)
        self.assertEqual(MUL(), 1)
        self.assertIs(AND(), True)
        self.assertIs(OR(), False)

    def test_binary_and_variadic_forms(self) -> None:
        self.assertEqual(ADD(2, 3), 5)
        self.assertEqual(MUL(2, 3, 4), 24)
        self.assertEqual(MAX(3, 7, 5), 7)
        self.assertEqual(MIN(3, 7, 5), 3)
        self.assertFalse(AND(True, False))
        self.assertTrue(OR(False, True))

    def test_dtype_aware_identities(self) -> None:
        lo = MAX.identity(np.int32)
        self.assertEqual(lo, np.iinfo(np.int32).min)
        self.assertEqual(lo.dtype, np.int32)
        self.assertEqual(MIN.identity(np.uint8), 255)
        self.assertTrue(math.isinf(MAX.identity(np.float64)))
        self.assertLess(MAX.identity(np.float64), 0)
        self.assertIs(MIN.identity(np.bool_), True)
        self.assertEqual(MAX(), -np.inf)

    def test_non_commutative_operator(self) -> None:
        concat = AssociativeOp("concat", operator.add, "")
        self.assertEqual(concat("a", "b", "c"), "abc")
        self.assertEqual(concat(), "")

    def test_identity_for_plain_callable(self) -> None:
        def op(*args):
            return 10 if not args else args[0] + args[1]

        self.assertEqual(identity_for(op, np.float64), 10)
        self.assertEqual(identity_for(ADD, np.int64), 0)


if __name__ == "__main__":
    unittest.main()
