"""
Pure-Python modular arithmetic for the small-prime residue system.

These are the leaves everything else is built on: the extended-Euclid
inverse used by CRT reconstruction, square-and-multiply exponentiation
used to check the discrete-log tables, and factorization / modulus
search over the fixed prime table in constants.py.

All operations are exact (integer arithmetic, no floating-point) and
accept either Python ints or gmpy2.mpz values.
"""

import math
from typing import List, Sequence

from ..config import checks_enabled
from ..constants import PRIMES, PRIMES_SKIP_2, U128_MAX
from ..errors import NonFactorableError, PreconditionError, WidthOverflowError


# ---------------------------------------------------------------------------
# Small helpers
# ---------------------------------------------------------------------------

def product(xs: Sequence[int]) -> int:
    """Product of a sequence of moduli as a Python int."""
    res = 1
    for x in xs:
        res *= int(x)
    return res


def is_power_of_2(x: int) -> bool:
    """True for 0 and for exact powers of two."""
    return (x & (x - 1)) == 0


# ---------------------------------------------------------------------------
# Modular inverse and exponentiation
# ---------------------------------------------------------------------------

def inv_ref(a, m):
    """Inverse of ``a`` modulo ``m`` via the extended Euclidean algorithm.

    Iterates (a, b) <- (b, a mod b) while a > 1, carrying the Bezout
    coefficient along, and normalizes a negative result by adding m.
    ``a`` and ``m`` must be coprime; for a non-coprime pair the loop
    divides by zero.  Use inv() for a checked version.
    """
    if m == 1:
        return 0

    b = m
    x0, x1 = 0, 1

    while a > 1:
        q = a // b
        a, b = b, a % b
        x0, x1 = x1 - q * x0, x0

    if x1 < 0:
        x1 = x1 + m
    return x1


def inv(a, m):
    """Checked modular inverse: the unique x in [0, m) with a*x = 1 (mod m)."""
    a, m = int(a), int(m)
    if checks_enabled():
        if m < 1:
            raise PreconditionError(f"inv: modulus must be positive, got {m}")
        g = math.gcd(a, m)
        if g != 1:
            raise PreconditionError(
                f"inv: {a} is not invertible mod {m} (gcd={g})"
            )
    return inv_ref(a, m)


def powm(base: int, exponent: int, modulus: int) -> int:
    """base**exponent mod modulus by square-and-multiply.

    Squares the base while the exponent is even and halves it; otherwise
    multiplies the accumulator by the base and decrements the exponent.
    """
    base, exponent, modulus = int(base), int(exponent), int(modulus)
    if checks_enabled() and (modulus < 1 or exponent < 0):
        raise PreconditionError(
            f"powm: need modulus >= 1 and exponent >= 0, "
            f"got modulus={modulus} exponent={exponent}"
        )
    x = base
    z = 1
    n = exponent
    while n > 0:
        if n % 2 == 0:
            x = x * x % modulus
            n //= 2
        else:
            z = x * z % modulus
            n -= 1
    return z % modulus


# ---------------------------------------------------------------------------
# Factorization and modulus search over the prime table
# ---------------------------------------------------------------------------

def factor(inp: int) -> List[int]:
    """Factor ``inp`` into the primes of PRIMES, ascending.

    Only square-free products of the table primes are supported: each
    prime is divided out at most once, so any repeated or foreign factor
    is left in the residual and raises NonFactorableError.
    """
    if inp < 0 or inp > U128_MAX:
        raise PreconditionError(f"factor: {inp} is not a 128-bit unsigned value")
    x = inp
    fs: List[int] = []
    for p in PRIMES:
        if x % p == 0:
            fs.append(p)
            x //= p
    if x != 1:
        raise NonFactorableError(inp, x)
    return fs


def base_primes_with_width(nbits: int, ps: Sequence[int]) -> List[int]:
    """Shortest prefix of ``ps`` whose product has more than ``nbits`` bits."""
    res = 1
    for i, p in enumerate(ps):
        res *= p
        if res >> nbits:
            return list(ps[:i + 1])
    raise PreconditionError(
        f"prime table exhausted: product of all {len(ps)} primes "
        f"has only {res.bit_length()} bits, need more than {nbits}"
    )


def base_modulus_with_width(nbits: int, ps: Sequence[int]) -> int:
    """Running product of ``ps`` until it exceeds ``nbits`` bits.

    The result is a fixed-width (128-bit) modulus; wider requests raise
    WidthOverflowError.
    """
    res = product(base_primes_with_width(nbits, ps))
    if res > U128_MAX:
        raise WidthOverflowError(
            f"modulus for {nbits} bits needs {res.bit_length()} bits"
        )
    return res


def modulus_with_width(nbits: int) -> int:
    return base_modulus_with_width(nbits, PRIMES)


def modulus_with_width_skip2(nbits: int) -> int:
    return base_modulus_with_width(nbits, PRIMES_SKIP_2)
