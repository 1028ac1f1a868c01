"""
Unit tests for the modular-arithmetic leaves.

Compares inv / powm against Python big-int reference, and factor /
modulus search against sympy's factorization of the table primes.
"""

import unittest
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

import numpy as np
import sympy
from gmpy2 import mpz

from rns_numbers.constants import PRIMES, PRIMES_SKIP_2, U128_MAX
from rns_numbers.config import set_config
from rns_numbers.tables import exp_truth_table
from rns_numbers.errors import (
    NonFactorableError, PreconditionError, WidthOverflowError,
)
from rns_numbers.rns.reference import (
    product, is_power_of_2,
    inv_ref, inv, powm,
    factor,
    base_primes_with_width, base_modulus_with_width,
    modulus_with_width, modulus_with_width_skip2,
)


class TestHelpers(unittest.TestCase):

    def test_product(self):
        self.assertEqual(product([]), 1)
        self.assertEqual(product([2, 3, 5]), 30)
        self.assertEqual(product(PRIMES[:4]), 210)

    def test_is_power_of_2(self):
        for k in range(130):
            self.assertTrue(is_power_of_2(1 << k))
        for x in [3, 5, 6, 7, 12, 100, (1 << 64) + 1]:
            self.assertFalse(is_power_of_2(x))


class TestInverse(unittest.TestCase):
    """inv_ref / inv against the defining property a*x = 1 (mod m)."""

    def setUp(self):
        self.rng = random.Random(42)

    def test_small_known(self):
        self.assertEqual(inv_ref(3, 7), 5)
        self.assertEqual(inv_ref(1, 7), 1)
        self.assertEqual(inv_ref(10, 17), 12)

    def test_modulus_one(self):
        self.assertEqual(inv_ref(5, 1), 0)
        self.assertEqual(inv(5, 1), 0)

    def test_every_table_prime(self):
        for p in PRIMES_SKIP_2:
            for a in range(1, p):
                x = inv(a, p)
                self.assertTrue(0 <= x < p)
                self.assertEqual(a * x % p, 1, f"inv({a}, {p})")

    def test_composite_moduli(self):
        for _ in range(500):
            m = self.rng.randint(2, 1 << 64)
            a = self.rng.randint(1, m - 1)
            if sympy.gcd(a, m) != 1:
                continue
            self.assertEqual(inv(a, m), pow(a, -1, m))

    def test_mpz(self):
        M = mpz(product(PRIMES))
        for p in PRIMES:
            q = M // p
            x = inv_ref(q, mpz(p))
            self.assertIsInstance(x, type(mpz(0)))
            self.assertEqual(q * x % p, 1)

    def test_numpy_scalars(self):
        x = inv(np.uint16(3), np.uint16(7))
        self.assertEqual(x, 5)
        self.assertIsInstance(x, int)
        for p in PRIMES_SKIP_2:
            for a in exp_truth_table(p)[1:]:
                self.assertEqual(int(a) * inv(a, np.uint16(p)) % p, 1)
        with self.assertRaises(PreconditionError):
            inv(np.uint16(4), np.uint16(8))

    def test_not_coprime_raises(self):
        with self.assertRaises(PreconditionError):
            inv(4, 8)
        with self.assertRaises(PreconditionError):
            inv(0, 7)
        with self.assertRaises(PreconditionError):
            inv(3, 0)


class TestPowm(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(7)

    def test_matches_pow(self):
        for _ in range(500):
            m = self.rng.randint(1, 1 << 100)
            b = self.rng.randint(0, 1 << 100)
            e = self.rng.randint(0, 1 << 40)
            self.assertEqual(powm(b, e, m), pow(b, e, m))

    def test_edge_cases(self):
        self.assertEqual(powm(5, 0, 7), 1)
        self.assertEqual(powm(5, 0, 1), 0)
        self.assertEqual(powm(0, 0, 13), 1)
        self.assertEqual(powm(0, 5, 13), 0)
        self.assertEqual(powm(2, 127, U128_MAX + 1), 1 << 127)

    def test_numpy_scalars(self):
        self.assertEqual(powm(np.uint16(113), np.uint16(112), np.uint16(65521)),
                         pow(113, 112, 65521))
        self.assertEqual(powm(np.uint8(200), 3, np.uint8(251)), pow(200, 3, 251))

    def test_fermat(self):
        for p in PRIMES_SKIP_2:
            for a in range(1, p):
                self.assertEqual(powm(a, p - 1, p), 1)

    def test_bad_arguments(self):
        with self.assertRaises(PreconditionError):
            powm(2, 3, 0)
        with self.assertRaises(PreconditionError):
            powm(2, -1, 7)


class TestFactor(unittest.TestCase):
    """factor() on square-free products of the table primes."""

    def setUp(self):
        self.rng = random.Random(1234)

    def test_small_known(self):
        self.assertEqual(factor(1), [])
        self.assertEqual(factor(2), [2])
        self.assertEqual(factor(30), [2, 3, 5])
        self.assertEqual(factor(7 * 109), [7, 109])

    def test_random_subsets(self):
        for _ in range(300):
            k = self.rng.randint(1, 20)
            fs = sorted(self.rng.sample(PRIMES, k))
            m = product(fs)
            if m > U128_MAX:
                continue
            self.assertEqual(factor(m), fs)
            self.assertEqual(sorted(sympy.factorint(m)), fs)

    def test_full_width_modulus(self):
        m = modulus_with_width(127)
        fs = factor(m)
        self.assertEqual(product(fs), m)
        self.assertEqual(fs, list(PRIMES[:len(fs)]))

    def test_repeated_factor_rejected(self):
        with self.assertRaises(NonFactorableError) as ctx:
            factor(4)
        self.assertEqual(ctx.exception.value, 4)
        self.assertEqual(ctx.exception.residual, 2)
        with self.assertRaises(NonFactorableError):
            factor(3 * 3 * 5)

    def test_foreign_prime_rejected(self):
        # 113 is in PRIMES_SKIP_2 but not in PRIMES
        with self.assertRaises(NonFactorableError) as ctx:
            factor(113)
        self.assertEqual(ctx.exception.residual, 113)
        with self.assertRaises(NonFactorableError):
            factor(2 * 127)
        with self.assertRaises(NonFactorableError):
            factor(0)

    def test_non_factorable_is_value_error(self):
        with self.assertRaises(ValueError):
            factor(4)

    def test_out_of_range(self):
        with self.assertRaises(PreconditionError):
            factor(U128_MAX + 1)
        with self.assertRaises(PreconditionError):
            factor(-6)


class TestModulusWithWidth(unittest.TestCase):

    def test_minimal_prefix(self):
        for nbits in range(1, 128):
            ps = base_primes_with_width(nbits, PRIMES)
            m = product(ps)
            self.assertGreater(m.bit_length(), nbits)
            # one prime fewer is not enough
            self.assertLessEqual(product(ps[:-1]).bit_length(), nbits)
            self.assertEqual(modulus_with_width(nbits), m)

    def test_known_widths(self):
        self.assertEqual(modulus_with_width(1), 2)
        self.assertEqual(modulus_with_width(2), 6)
        self.assertEqual(modulus_with_width(64), product(PRIMES[:16]))
        self.assertEqual(modulus_with_width(127), product(PRIMES[:26]))

    def test_skip2(self):
        for nbits in [1, 16, 32, 64, 100, 126]:
            m = modulus_with_width_skip2(nbits)
            self.assertEqual(m % 2, 1)
            self.assertGreater(m.bit_length(), nbits)
            self.assertEqual(m, base_modulus_with_width(nbits, PRIMES_SKIP_2))

    def test_overflow(self):
        with self.assertRaises(WidthOverflowError):
            modulus_with_width(128)
        with self.assertRaises(OverflowError):
            modulus_with_width_skip2(128)

    def test_table_exhausted(self):
        with self.assertRaises(PreconditionError):
            base_primes_with_width(200, PRIMES)


class TestChecksDisabled(unittest.TestCase):

    def setUp(self):
        self._prev = set_config(check_preconditions=False)

    def tearDown(self):
        set_config(self._prev)

    def test_inv_unchecked(self):
        self.assertEqual(inv(3, 7), 5)

    def test_powm_unchecked(self):
        self.assertEqual(powm(3, 4, 5), 1)


if __name__ == "__main__":
    unittest.main()
