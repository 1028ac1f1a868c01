"""
Schoolbook addition of base-q digit vectors.

The encoding layer keeps numbers as uniform base-q digit vectors with
q an arbitrary small prime or composite, so carries are propagated by
hand instead of relying on binary arithmetic.
"""

from typing import List, MutableSequence, Sequence

from ..config import checks_enabled
from ..errors import PreconditionError


def base_q_add_eq(xs: MutableSequence[int], ys: Sequence[int], q: int) -> int:
    """Add ``ys`` into ``xs`` in place, both base ``q``, least-significant first.

    ``ys`` must be no longer than ``xs``.  Once ``ys`` is exhausted the
    carry keeps rippling through ``xs`` until it resolves.  A carry that
    runs off the end of ``xs`` is dropped, so the result is the sum
    modulo q**len(xs); it is returned (0 or 1) so callers that sized
    ``xs`` with headroom can assert on it.

    Works on lists and on numpy integer arrays.
    """
    if checks_enabled() and len(xs) < len(ys):
        raise PreconditionError(
            f"q={q} xs.len()={len(xs)} ys.len()={len(ys)} xs={list(xs)} ys={list(ys)}"
        )

    c = 0
    i = 0

    while i < len(ys):
        s = int(xs[i]) + int(ys[i]) + c
        c = 0
        if s >= q:
            s -= q
            c = 1
        xs[i] = s
        i += 1

    # continue the carrying if possible
    while c and i < len(xs):
        s = int(xs[i]) + 1
        if s >= q:
            xs[i] = s - q
        else:
            xs[i] = s
            c = 0
        i += 1

    return c


def base_q_add(xs: Sequence[int], ys: Sequence[int], q: int) -> List[int]:
    """Sum of two base-``q`` digit vectors as a new list.

    The longer operand is copied and the shorter one added into it; the
    result has the length of the longer operand.
    """
    if len(ys) > len(xs):
        return base_q_add(ys, xs, q)
    ret = [int(x) for x in xs]
    base_q_add_eq(ret, ys, q)
    return ret


def num_carry_digits_to_add_n_digits(q: int, n: int) -> int:
    """Number of base-``q`` digits needed to hold the sum of ``n`` digits.

    This is ceil(log_q(n * (q - 1))), the base-q length of the worst-case
    sum n * (q - 1), computed exactly with integers.  When n * (q - 1)
    is itself a power of q (only possible for q == 2) the exact length is
    one more than the rounded logarithm, and the exact length is used.
    """
    if q < 2 or n < 0:
        raise PreconditionError(f"need q >= 2 and n >= 0, got q={q} n={n}")
    total = n * (q - 1)
    k = 0
    while total:
        total //= q
        k += 1
    return k
