"""
Tests for CRT encode / reconstruct and the precomputed CrtContext.

Roundtrips are compared against Python big-int reference, including
values that wrap past the modulus and moduli wider than 128 bits.
"""

import unittest
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

import numpy as np
from gmpy2 import mpz

from rns_numbers.constants import PRIMES, PRIMES_SKIP_2, U128_MAX
from rns_numbers.errors import (
    NonFactorableError, PreconditionError, UnsupportedModulusError,
    WidthOverflowError,
)
from rns_numbers.crt.codec import crt, crt_inv, crt_bigint, crt_inv_bigint
from rns_numbers.crt.context import CrtContext
from rns_numbers.rns.reference import (
    product, modulus_with_width, modulus_with_width_skip2,
)


class TestCrtCodec(unittest.TestCase):
    """crt / crt_inv against Python big-int reference."""

    def setUp(self):
        self.rng = random.Random(42)

    def test_small_known(self):
        self.assertEqual(crt([2, 3, 5], 7), [1, 1, 2])
        self.assertEqual(crt_inv([2, 3, 5], [1, 1, 2]), 7)
        self.assertEqual(crt_inv([2, 3, 5], [0, 0, 0]), 0)
        self.assertEqual(crt_inv([2, 3, 5], [1, 2, 4]), 29)

    def test_roundtrip_25_primes(self):
        ps = list(PRIMES[:25])
        M = product(ps)
        for _ in range(500):
            x = self.rng.randrange(M)
            rs = crt(ps, x)
            for r, p in zip(rs, ps):
                self.assertTrue(0 <= r < p)
            y = crt_inv(ps, rs)
            self.assertIsInstance(y, int)
            self.assertEqual(y, x)

    def test_roundtrip_random_subsets(self):
        for _ in range(200):
            ps = self.rng.sample(PRIMES_SKIP_2, self.rng.randint(1, 12))
            M = product(ps)
            x = self.rng.randrange(M)
            self.assertEqual(crt_inv(ps, crt(ps, x)), x)

    def test_wraps_modulo_product(self):
        ps = list(PRIMES[:4])
        self.assertEqual(crt_inv(ps, crt(ps, 210 + 42)), 42)
        for _ in range(100):
            x = self.rng.randrange(U128_MAX + 1)
            self.assertEqual(crt_inv(ps, crt(ps, x)), x % 210)

    def test_homomorphism(self):
        ps = list(PRIMES[:12])
        M = product(ps)
        for _ in range(100):
            a = self.rng.randrange(M)
            b = self.rng.randrange(M)
            ra, rb = crt(ps, a), crt(ps, b)
            s = [(x + y) % p for x, y, p in zip(ra, rb, ps)]
            m = [(x * y) % p for x, y, p in zip(ra, rb, ps)]
            self.assertEqual(crt_inv(ps, s), (a + b) % M)
            self.assertEqual(crt_inv(ps, m), (a * b) % M)

    def test_bigint(self):
        ps = list(PRIMES)
        M = product(ps)
        for _ in range(100):
            x = self.rng.randrange(M)
            rs = crt_bigint(ps, mpz(x))
            y = crt_inv_bigint(ps, rs)
            self.assertIsInstance(y, type(mpz(0)))
            self.assertEqual(y, x)

    def test_fixed_width_overflow(self):
        ps = list(PRIMES)
        x = product(ps) - 1
        with self.assertRaises(WidthOverflowError):
            crt_inv(ps, crt_bigint(ps, x))
        with self.assertRaises(PreconditionError):
            crt(ps, x)

    def test_fits_128_bits(self):
        ps = list(PRIMES[:26])
        x = product(ps) - 1
        self.assertLessEqual(x, U128_MAX)
        self.assertEqual(crt_inv(ps, crt(ps, x)), x)

    def test_numpy_prime_array(self):
        ps = np.array(PRIMES[:25], dtype=np.uint16)
        x = 2 ** 100 + 12345
        rs = crt(ps, x)
        self.assertEqual(rs, crt(list(PRIMES[:25]), x))
        self.assertEqual(crt_inv(ps, rs), x)
        self.assertEqual(crt_bigint(ps, mpz(x) << 20), crt(list(PRIMES[:25]), x << 20))

    def test_context_primes_with_codec(self):
        ctx = CrtContext.for_width(120)
        x = self.rng.randrange(1 << 120)
        self.assertEqual(crt_inv(ctx.primes, crt(ctx.primes, x)), x)

    def test_bad_inputs(self):
        with self.assertRaises(PreconditionError):
            crt_inv([2, 3, 5], [1, 3, 0])
        with self.assertRaises(PreconditionError):
            crt_inv([2, 3, 5], [1, 1])
        with self.assertRaises(PreconditionError):
            crt_inv([2, 4], [1, 1])
        with self.assertRaises(PreconditionError):
            crt([2, 3], -1)
        with self.assertRaises(PreconditionError):
            crt_bigint([2, 3], -1)


class TestCrtContext(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(2024)

    def test_small_known(self):
        ctx = CrtContext([2, 3, 5])
        self.assertEqual(ctx.K, 3)
        self.assertEqual(ctx.modulus, 30)
        self.assertEqual(ctx.encode(7), [1, 1, 2])
        self.assertEqual(ctx.decode([1, 1, 2]), 7)
        self.assertEqual(repr(ctx), "CrtContext(primes=[2, 3, 5])")

    def test_primes_read_only(self):
        ctx = CrtContext([2, 3, 5])
        self.assertEqual(ctx.primes.dtype, np.uint16)
        with self.assertRaises(ValueError):
            ctx.primes[0] = 7

    def test_for_width(self):
        ctx = CrtContext.for_width(64)
        self.assertEqual(ctx.modulus, modulus_with_width(64))
        self.assertEqual(list(ctx.primes), list(PRIMES[:16]))
        self.assertEqual(ctx.bits, 65)

        ctx = CrtContext.for_width(64, skip2=True)
        self.assertEqual(ctx.modulus, modulus_with_width_skip2(64))
        self.assertEqual(int(ctx.primes[0]), 3)

    def test_for_width_past_128_bits(self):
        ctx = CrtContext.for_width(140)
        self.assertGreater(ctx.bits, 140)
        for _ in range(100):
            x = self.rng.randrange(ctx.modulus)
            self.assertEqual(ctx.decode(ctx.encode(x)), x)

    def test_from_modulus(self):
        ctx = CrtContext.from_modulus(30030)
        self.assertEqual(list(ctx.primes), [2, 3, 5, 7, 11, 13])
        with self.assertRaises(NonFactorableError):
            CrtContext.from_modulus(4)

    def test_agrees_with_codec(self):
        ps = list(PRIMES_SKIP_2[:20])
        ctx = CrtContext(ps)
        for _ in range(200):
            x = self.rng.randrange(ctx.modulus)
            rs = ctx.encode(x)
            self.assertEqual(rs, crt_bigint(ps, x))
            self.assertEqual(ctx.decode(rs), crt_inv_bigint(ps, rs))

    def test_batch(self):
        ctx = CrtContext.for_width(64)
        xs = [self.rng.randrange(1 << 62) for _ in range(256)]
        res = ctx.encode_batch(xs)
        self.assertEqual(res.shape, (256, ctx.K))
        self.assertEqual(res.dtype, np.uint16)
        for row, x in zip(res, xs):
            self.assertEqual([int(r) for r in row], crt(list(PRIMES[:16]), x))
        self.assertEqual(ctx.decode_batch(res), xs)

    def test_dlog_roundtrip(self):
        ctx = CrtContext(PRIMES_SKIP_2)
        for _ in range(200):
            x = self.rng.randrange(ctx.modulus)
            rs = ctx.encode(x)
            es = ctx.to_dlog(rs)
            for r, e in zip(rs, es):
                self.assertEqual(e is None, r == 0)
            self.assertEqual(ctx.from_dlog(es), rs)

    def test_dlog_small_known(self):
        ctx = CrtContext([2, 3, 5])
        self.assertEqual(ctx.to_dlog([0, 1, 2]), [None, 0, 1])
        self.assertEqual(ctx.from_dlog([None, 0, 1]), [0, 1, 2])

    def test_dlog_multiplication(self):
        ctx = CrtContext(PRIMES_SKIP_2[:10])
        for _ in range(200):
            a = self.rng.randrange(ctx.modulus)
            b = self.rng.randrange(ctx.modulus)
            ea = ctx.to_dlog(ctx.encode(a))
            eb = ctx.to_dlog(ctx.encode(b))
            es = [None if x is None or y is None else x + y
                  for x, y in zip(ea, eb)]
            self.assertEqual(ctx.decode(ctx.from_dlog(es)),
                             a * b % ctx.modulus)

    def test_dlog_unsupported_prime(self):
        ctx = CrtContext([127, 131])
        self.assertEqual(ctx.decode(ctx.encode(1000)), 1000)
        with self.assertRaises(UnsupportedModulusError):
            ctx.to_dlog([1, 1])

    def test_bad_inputs(self):
        with self.assertRaises(PreconditionError):
            CrtContext([3, 6])
        ctx = CrtContext([2, 3, 5])
        with self.assertRaises(PreconditionError):
            ctx.decode([1, 1])
        with self.assertRaises(PreconditionError):
            ctx.to_dlog([2, 0, 0])

    def test_batch_rejects_negative(self):
        ctx = CrtContext([2, 3, 5])
        with self.assertRaises(PreconditionError):
            ctx.encode_batch([4, -1, 7])


if __name__ == "__main__":
    unittest.main()
