"""
Positional digit vectors: mixed-radix and uniform base-q codecs, the
base-q carry adder, and the base-2 special case.
"""

from .mixed import (
    digits_per_u128,
    as_mixed_radix, padded_mixed_radix, from_mixed_radix,
    as_mixed_radix_bigint, padded_mixed_radix_bigint, from_mixed_radix_bigint,
    as_base_q, from_base_q, padded_base_q, padded_base_q_128,
)
from .adder import base_q_add, base_q_add_eq, num_carry_digits_to_add_n_digits
from .bits import to_bits, u128_to_bits, u128_from_bits

__all__ = [
    "digits_per_u128",
    "as_mixed_radix", "padded_mixed_radix", "from_mixed_radix",
    "as_mixed_radix_bigint", "padded_mixed_radix_bigint", "from_mixed_radix_bigint",
    "as_base_q", "from_base_q", "padded_base_q", "padded_base_q_128",
    "base_q_add", "base_q_add_eq", "num_carry_digits_to_add_n_digits",
    "to_bits", "u128_to_bits", "u128_from_bits",
]
