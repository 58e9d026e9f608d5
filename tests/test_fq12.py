import random
import pathlib
import sys
import unittest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from tz4bls.constants import CURVE_ORDER, FIELD_MODULUS as q, FINAL_EXP_HARD_PART
from tz4bls.field import Fq
from tz4bls.fqp import Fq12, optimized_final_exponentiation


def rand_fq12(rng):
    return Fq12([rng.randrange(q) for _ in range(12)])


class Fq12Tests(unittest.TestCase):
    def test_known_products(self):
        a = Fq12([1, 2, 3])
        b = Fq12([4, 5, 6])
        self.assertEqual((a * b).to_ints(), [4, 13, 28, 27, 18] + [0] * 7)
        x6 = Fq12([0] * 6 + [1])
        self.assertEqual((x6 * x6).to_ints(), [q - 2, 0, 0, 0, 0, 0, 2, 0, 0, 0, 0, 0])
        a = Fq12([0] * 10 + [1, 2])
        b = Fq12([0] * 8 + [3, 0, 0, 4])
        expected = [-12, -24, 0, -16, -32, 0, 6, 12, 0, 8, 16, 0]
        self.assertEqual((a * b).to_ints(), [e % q for e in expected])

    def test_field_axioms(self):
        rng = random.Random(0)
        for _ in range(6):
            a, b, c = rand_fq12(rng), rand_fq12(rng), rand_fq12(rng)
            self.assertEqual((a + b) + c, a + (b + c))
            self.assertEqual((a * b) * c, a * (b * c))
            self.assertEqual(a * (b + c), a * b + a * c)
            self.assertEqual(a * b, b * a)
            self.assertEqual(a + Fq12.zero(), a)
            self.assertEqual(a * Fq12.one(), a)
            self.assertTrue((a - a).is_zero())
            self.assertTrue((a * a.inv()).is_one())
            self.assertEqual(b / a * a, b)

    def test_inverse_and_pow(self):
        five = Fq12([5])
        self.assertTrue((five * five.inv()).is_one())
        rng = random.Random(1)
        a = rand_fq12(rng)
        self.assertEqual(a**0, Fq12.one())
        self.assertEqual(a**1, a)
        self.assertEqual(a**3, a * a * a)
        self.assertEqual(a**-2, (a * a).inv())
        with self.assertRaises(ZeroDivisionError):
            Fq12.zero().inv()

    def test_scalar_mul(self):
        a = Fq12(list(range(1, 13)))
        self.assertEqual(a.scalar_mul(Fq(3)).to_ints(), [3 * i for i in range(1, 13)])
        self.assertEqual(a * 3, a.scalar_mul(Fq(3)))
        self.assertEqual(3 * a, a * 3)

    def test_frobenius_is_q_power(self):
        rng = random.Random(2)
        a = rand_fq12(rng)
        self.assertEqual(a.frobenius(), a**q)
        b = rand_fq12(rng)
        self.assertEqual((a * b).frobenius(), a.frobenius() * b.frobenius())

    def test_frobenius_has_order_twelve(self):
        a = rand_fq12(random.Random(3))
        t = a
        for _ in range(12):
            t = t.frobenius()
        self.assertEqual(t, a)

    def test_hard_part_exponent(self):
        self.assertEqual((q**4 - q**2 + 1) % CURVE_ORDER, 0)
        self.assertEqual(FINAL_EXP_HARD_PART, (q**4 - q**2 + 1) // CURVE_ORDER)

    def test_optimized_final_exponentiation_matches_naive(self):
        a = rand_fq12(random.Random(4))
        naive = a ** ((q**12 - 1) // CURVE_ORDER)
        self.assertEqual(optimized_final_exponentiation(a), naive)
        self.assertTrue((naive**CURVE_ORDER).is_one())


if __name__ == "__main__":
    unittest.main()
