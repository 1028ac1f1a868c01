"""
Modular arithmetic primitives over the small-prime table.

Inverse (extended Euclid), square-and-multiply exponentiation, and
factorization / modulus search against constants.PRIMES.
"""

from .reference import (
    product, is_power_of_2,
    inv_ref, inv, powm,
    factor,
    base_primes_with_width, base_modulus_with_width,
    modulus_with_width, modulus_with_width_skip2,
)

__all__ = [
    "product", "is_power_of_2",
    "inv_ref", "inv", "powm",
    "factor",
    "base_primes_with_width", "base_modulus_with_width",
    "modulus_with_width", "modulus_with_width_skip2",
]
