"""
Mixed-radix decomposition and reconstruction.

A digit vector is least-significant first; digit i lies in
[0, ms[i]).  Two integer representations share one algorithm:

  fixed width   Python int restricted to [0, 2**128)  (as_mixed_radix ...)
  big integer   gmpy2.mpz, any non-negative value     (... _bigint)

Decomposition stops early once the remaining value fits a single digit,
so natural-length vectors carry no trailing zeros.  The padded variants
restore the canonical length len(ms).

Reconstruction is Horner evaluation from the most significant digit.
The fixed-width path raises WidthOverflowError instead of wrapping.
"""

from typing import Callable, List, Sequence

import gmpy2
from gmpy2 import mpz

from ..config import checks_enabled
from ..constants import U128_BITS, U128_MAX, U16_MAX
from ..errors import PreconditionError, WidthOverflowError


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def _check_u128(x: int, what: str = "value"):
    if x < 0 or x > U128_MAX:
        raise PreconditionError(f"{what} {x} is not a 128-bit unsigned integer")


def _check_moduli(ms: Sequence[int]):
    for i, m in enumerate(ms):
        if m < 2 or m > U16_MAX:
            raise PreconditionError(
                f"modulus at position {i} is {m}; moduli must be in [2, {U16_MAX}]"
            )


def _check_digits(ds: Sequence[int], ms: Sequence[int]):
    if len(ds) > len(ms):
        raise PreconditionError(
            f"{len(ds)} digits but only {len(ms)} moduli"
        )
    for i, (d, m) in enumerate(zip(ds, ms)):
        if d < 0 or d >= m:
            raise PreconditionError(
                f"digit {d} at position {i} is out of range for modulus {m}"
            )


# ---------------------------------------------------------------------------
# Shared algorithm
# ---------------------------------------------------------------------------

def _decompose(x, ms: Sequence[int], divmod_fn: Callable) -> List[int]:
    """Peel digits off ``x`` using ``divmod_fn`` for the integer type at hand."""
    ds: List[int] = []
    for m in ms:
        m = int(m)
        if x >= m:
            x, d = divmod_fn(x, m)
            ds.append(int(d))
        else:
            ds.append(int(x))
            break
    else:
        if x and checks_enabled():
            raise PreconditionError(
                f"value does not fit in {len(ms)} digits (quotient {x} left over)"
            )
    return ds


def _horner(ds: Sequence[int], ms: Sequence[int], x, limit=None):
    """Evaluate digits ``ds`` under moduli ``ms`` starting from accumulator ``x``."""
    n = len(ds)
    for i in range(n - 1, -1, -1):
        xp = x * int(ms[i])
        if limit is not None and xp > limit:
            raise WidthOverflowError(
                f"value exceeds 128 bits while reconstructing (x={x})"
            )
        x = xp + int(ds[i])
        if limit is not None and x > limit:
            raise WidthOverflowError(
                f"value exceeds 128 bits while reconstructing (x={x})"
            )
    return x


def _pad(ds: List[int], n: int) -> List[int]:
    if len(ds) < n:
        ds.extend([0] * (n - len(ds)))
    return ds


# ---------------------------------------------------------------------------
# Fixed-width (128-bit) path
# ---------------------------------------------------------------------------

def digits_per_u128(modulus: int) -> int:
    """Number of base-``modulus`` digits used to hold a 128-bit word.

    floor(128 / ceil(log2(modulus))), computed without floats.
    """
    if modulus < 2:
        raise PreconditionError(f"modulus must be at least 2, got {modulus}")
    return U128_BITS // (modulus - 1).bit_length()


def as_mixed_radix(x: int, ms: Sequence[int]) -> List[int]:
    """Natural-length mixed-radix digits of a 128-bit ``x``."""
    _check_u128(x)
    if checks_enabled():
        _check_moduli(ms)
    return _decompose(int(x), ms, divmod)


def padded_mixed_radix(x: int, ms: Sequence[int]) -> List[int]:
    """Mixed-radix digits of ``x`` zero-padded to len(ms)."""
    return _pad(as_mixed_radix(x, ms), len(ms))


def from_mixed_radix(ds: Sequence[int], ms: Sequence[int]) -> int:
    """Inverse of as_mixed_radix; raises WidthOverflowError past 128 bits."""
    if checks_enabled():
        _check_digits(ds, ms)
    return _horner(ds, ms, 0, limit=U128_MAX)


def as_base_q(x: int, q: int) -> List[int]:
    """Natural-length base-``q`` digits of ``x``.

    ``x`` must fit in digits_per_u128(q) digits.
    """
    n = digits_per_u128(q)
    _check_u128(x)
    if x >= q ** n:
        raise PreconditionError(f"{x} does not fit in {n} base-{q} digits")
    return as_mixed_radix(x, [q] * n)


def from_base_q(ds: Sequence[int], q: int) -> int:
    """Horner evaluation of base-``q`` digits into a 128-bit int."""
    return from_mixed_radix(ds, [q] * len(ds))


def padded_base_q(x: int, q: int, n: int) -> List[int]:
    """Base-``q`` digits of ``x`` zero-padded to exactly ``n`` digits."""
    return padded_mixed_radix(x, [q] * n)


def padded_base_q_128(x: int, q: int) -> List[int]:
    """Base-``q`` digits of ``x`` padded to digits_per_u128(q)."""
    return padded_base_q(x, q, digits_per_u128(q))


# ---------------------------------------------------------------------------
# Big-integer path (gmpy2.mpz)
# ---------------------------------------------------------------------------

def as_mixed_radix_bigint(x, ms: Sequence[int]) -> List[int]:
    """Natural-length mixed-radix digits of an arbitrary-precision ``x``."""
    x = mpz(x)
    if x < 0:
        raise PreconditionError(f"value {x} is negative")
    if checks_enabled():
        _check_moduli(ms)
    return _decompose(x, ms, gmpy2.f_divmod)


def padded_mixed_radix_bigint(x, ms: Sequence[int]) -> List[int]:
    return _pad(as_mixed_radix_bigint(x, ms), len(ms))


def from_mixed_radix_bigint(ds: Sequence[int], ms: Sequence[int]) -> mpz:
    """Inverse of as_mixed_radix_bigint, returning an mpz."""
    if checks_enabled():
        _check_digits(ds, ms)
    return _horner(ds, ms, mpz(0))
