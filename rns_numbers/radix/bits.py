"""Base-2 special case of the digit codecs."""

from typing import List, Sequence

from ..constants import U128_MAX
from ..errors import PreconditionError, WidthOverflowError


def to_bits(x, n: int) -> List[int]:
    """Lowest ``n`` bits of ``x``, least-significant first.

    Accepts Python ints and gmpy2.mpz alike.
    """
    if x < 0:
        raise PreconditionError(f"value {x} is negative")
    bits: List[int] = []
    y = x
    for _ in range(n):
        b = y & 1
        bits.append(int(b))
        y -= b
        y //= 2
    return bits


def u128_to_bits(x: int, n: int) -> List[int]:
    if x < 0 or x > U128_MAX:
        raise PreconditionError(f"value {x} is not a 128-bit unsigned integer")
    return to_bits(x, n)


def u128_from_bits(bs: Sequence[int]) -> int:
    """Inverse of u128_to_bits."""
    x = 0
    for b in reversed(bs):
        x = (x << 1) + int(b)
    if x > U128_MAX:
        raise WidthOverflowError(f"{len(bs)} bits do not fit in 128 bits")
    return x
