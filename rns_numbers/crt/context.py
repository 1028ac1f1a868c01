"""
Precomputed CRT context for a fixed set of small primes.

crt_inv() recomputes M / p_i and its inverse on every call.  When the
same prime set is used for many values (one per circuit wire, say) a
CrtContext does that work once and keeps the primes as a read-only
numpy array so whole batches can be reduced in one vectorized step.

The context also moves residue vectors between the additive and the
multiplicative (discrete-log) representation through the tables.
"""

from typing import List, Optional, Sequence

import numpy as np
from gmpy2 import mpz

from ..config import checks_enabled
from ..constants import PRIMES, PRIMES_SKIP_2
from ..errors import PreconditionError
from ..rns.reference import base_primes_with_width, factor, inv_ref, product
from ..tables import dlog, exp
from .codec import _check_primes, _check_residues, crt_bigint


class CrtContext:
    """Residue number system over a fixed list of pairwise-coprime primes.

    Usage:
        ctx = CrtContext.for_width(64)
        residues = ctx.encode(x)
        assert ctx.decode(residues) == x
    """

    def __init__(self, primes: Sequence[int]):
        """
        Args:
            primes: Pairwise-coprime moduli, each below 2**16.
        """
        _check_primes(list(primes))
        self.primes = np.asarray(primes, dtype=np.uint16).copy()
        self.primes.setflags(write=False)
        self.K = len(self.primes)

        self._ps: List[int] = [int(p) for p in self.primes]
        self.modulus = product(self._ps)

        M = mpz(self.modulus)
        self._weights: List[mpz] = []
        for p in self._ps:
            q = M // p
            self._weights.append(q * inv_ref(q, mpz(p)) % M)

    @classmethod
    def for_width(cls, nbits: int, skip2: bool = False) -> "CrtContext":
        """Context whose modulus is the shortest table prefix above ``nbits`` bits."""
        table = PRIMES_SKIP_2 if skip2 else PRIMES
        return cls(base_primes_with_width(nbits, table))

    @classmethod
    def from_modulus(cls, modulus: int) -> "CrtContext":
        """Context for a square-free product of table primes."""
        return cls(factor(modulus))

    @property
    def bits(self) -> int:
        return self.modulus.bit_length()

    def __repr__(self) -> str:
        return f"CrtContext(primes={self._ps})"

    # -- scalar codec ------------------------------------------------------

    def encode(self, x: int) -> List[int]:
        return crt_bigint(self._ps, x)

    def decode(self, residues: Sequence[int]) -> int:
        """Value in [0, modulus) with the given residues (arbitrary precision)."""
        if checks_enabled():
            _check_residues(self._ps, residues)
        ret = mpz(0)
        for w, a in zip(self._weights, residues):
            ret += w * int(a)
        return int(ret % self.modulus)

    # -- batches -----------------------------------------------------------

    def encode_batch(self, xs) -> np.ndarray:
        """Encode many values below 2**63 at once.

        Returns:
            uint16 array of shape (len(xs), K).
        """
        arr = np.asarray(xs, dtype=np.int64)
        if arr.ndim != 1:
            arr = arr.reshape(-1)
        if (arr < 0).any():
            raise PreconditionError("encode_batch: values must be non-negative")
        res = arr[:, None] % self.primes.astype(np.int64)[None, :]
        return res.astype(np.uint16)

    def decode_batch(self, residues) -> List[int]:
        return [self.decode(row) for row in np.asarray(residues)]

    # -- discrete-log representation ---------------------------------------

    def to_dlog(self, residues: Sequence[int]) -> List[Optional[int]]:
        """Exponent of each residue w.r.t. its prime's generator.

        A zero residue has no exponent and maps to None.
        """
        if checks_enabled():
            _check_residues(self._ps, residues)
        out: List[Optional[int]] = []
        for p, r in zip(self._ps, residues):
            out.append(None if int(r) == 0 else dlog(int(r), p))
        return out

    def from_dlog(self, exponents: Sequence[Optional[int]]) -> List[int]:
        """Inverse of to_dlog (None maps back to residue 0)."""
        return [0 if e is None else exp(e, p)
                for p, e in zip(self._ps, exponents)]
