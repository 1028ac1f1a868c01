"""
CRT (Chinese Remainder Theorem) codec.

1. codec:   stateless crt / crt_inv, fixed-width and big-integer variants
2. context: CrtContext with precomputed reconstruction weights
"""

from .codec import crt, crt_inv, crt_bigint, crt_inv_bigint
from .context import CrtContext

__all__ = [
    "crt", "crt_inv", "crt_bigint", "crt_inv_bigint",
    "CrtContext",
]
