"""
Residue-number-system encode / reconstruct over the small-prime table.

  crt(ps, x)        residues x mod p_i
  crt_inv(ps, xs)   sum_i xs[i] * inv(M/p_i, p_i) * (M/p_i)  mod M

with M = prod(ps).  The primes must be pairwise coprime, which holds
whenever they are drawn from constants.PRIMES without repeats.
Reconstruction accumulates in gmpy2.mpz; the fixed-width entry points
take and return 128-bit Python ints, the _bigint ones take any
non-negative value and return an mpz.
"""

import math
from typing import List, Sequence

from gmpy2 import mpz

from ..config import checks_enabled
from ..constants import U128_MAX
from ..errors import PreconditionError, WidthOverflowError
from ..rns.reference import inv_ref


def _check_primes(ps: Sequence[int]):
    for i, p in enumerate(ps):
        if p < 2:
            raise PreconditionError(f"modulus at position {i} is {p}")
        for q in ps[:i]:
            if math.gcd(int(p), int(q)) != 1:
                raise PreconditionError(f"moduli {q} and {p} are not coprime")


def _check_residues(ps: Sequence[int], xs: Sequence[int]):
    if len(ps) != len(xs):
        raise PreconditionError(
            f"CRT: {len(xs)} residues for {len(ps)} moduli"
        )
    for p, a in zip(ps, xs):
        if a < 0 or a >= p:
            raise PreconditionError(f"residue {a} out of range for modulus {p}")


def crt(ps: Sequence[int], x: int) -> List[int]:
    """Residues of a 128-bit ``x`` modulo each of ``ps``."""
    if x < 0 or x > U128_MAX:
        raise PreconditionError(f"value {x} is not a 128-bit unsigned integer")
    return [int(x % int(p)) for p in ps]


def crt_bigint(ps: Sequence[int], x) -> List[int]:
    """Residues of an arbitrary-precision ``x`` modulo each of ``ps``."""
    x = mpz(x)
    if x < 0:
        raise PreconditionError(f"value {x} is negative")
    return [int(x % int(p)) for p in ps]


def crt_inv_bigint(ps: Sequence[int], xs: Sequence[int]) -> mpz:
    """Reconstruct the unique value in [0, prod(ps)) with the given residues."""
    if checks_enabled():
        _check_primes(ps)
        _check_residues(ps, xs)

    ret = mpz(0)
    M = mpz(1)
    for p in ps:
        M *= int(p)

    for p, a in zip(ps, xs):
        p = mpz(int(p))
        q = M // p
        ret += mpz(int(a)) * inv_ref(q, p) * q
        ret %= M

    return ret


def crt_inv(ps: Sequence[int], xs: Sequence[int]) -> int:
    """Fixed-width reconstruction; raises WidthOverflowError past 128 bits."""
    ret = crt_inv_bigint(ps, xs)
    if ret > U128_MAX:
        raise WidthOverflowError(
            f"CRT result needs {ret.bit_length()} bits"
        )
    return int(ret)
