"""
Fixed small-prime catalogue used by the CRT and discrete-log layers.

Each entry of PRIME_REGISTRY pairs an odd prime with the primitive root
its dlog/exp tables are built on.  The flat tuples below are derived
from the registry once at import and are what the rest of the package
reads.

  PRIMES          2, 3, 5, ..., 109     (CRT moduli)
  PRIMES_SKIP_2   3, 5, 7, ..., 113     (moduli with a dlog table pattern)
  PRIMITIVE_ROOTS generator g for each entry of PRIMES_SKIP_2

2 is kept out of the registry because its multiplicative group is
trivial; it has a table (generator 1) but no primitive root entry.
"""

from typing import Tuple

PRIME_REGISTRY = [
    {"p": 3,   "g": 2},
    {"p": 5,   "g": 2},
    {"p": 7,   "g": 3},
    {"p": 11,  "g": 2},
    {"p": 13,  "g": 2},
    {"p": 17,  "g": 3},
    {"p": 19,  "g": 2},
    {"p": 23,  "g": 5},
    {"p": 29,  "g": 2},
    {"p": 31,  "g": 3},
    {"p": 37,  "g": 2},
    {"p": 41,  "g": 6},
    {"p": 43,  "g": 3},
    {"p": 47,  "g": 5},
    {"p": 53,  "g": 2},
    {"p": 59,  "g": 2},
    {"p": 61,  "g": 2},
    {"p": 67,  "g": 2},
    {"p": 71,  "g": 7},
    {"p": 73,  "g": 5},
    {"p": 79,  "g": 3},
    {"p": 83,  "g": 2},
    {"p": 89,  "g": 3},
    {"p": 97,  "g": 5},
    {"p": 101, "g": 2},
    {"p": 103, "g": 5},
    {"p": 107, "g": 2},
    {"p": 109, "g": 6},
    {"p": 113, "g": 3},
]

NPRIMES = 29

PRIMES_SKIP_2: Tuple[int, ...] = tuple(e["p"] for e in PRIME_REGISTRY)
PRIMITIVE_ROOTS: Tuple[int, ...] = tuple(e["g"] for e in PRIME_REGISTRY)
PRIMES: Tuple[int, ...] = (2,) + PRIMES_SKIP_2[:NPRIMES - 1]

U16_MAX = (1 << 16) - 1
U128_BITS = 128
U128_MAX = (1 << U128_BITS) - 1

assert len(PRIMES) == len(PRIMES_SKIP_2) == len(PRIMITIVE_ROOTS) == NPRIMES
