"""
rns-numbers: integer encodings for digit-wise and residue-wise arithmetic.

A value can be split across independent moduli so later arithmetic
(e.g. inside an arithmetic-circuit encoding layer) runs per digit or per
residue without materializing the full-width integer:

  radix    mixed-radix / base-q digit vectors, carry-correct addition
  crt      residue-number-system encode / reconstruct over small primes
  tables   discrete-log / exponentiation tables for each small prime
  rns      modular inverse, powm, factorization, modulus search

Fixed-width entry points work on 128-bit Python ints and fail loudly on
overflow; the *_bigint variants work on gmpy2.mpz.
"""

__version__ = "0.3.0"

from .constants import (
    NPRIMES, PRIMES, PRIMES_SKIP_2, PRIMITIVE_ROOTS,
    U16_MAX, U128_BITS, U128_MAX,
)
from .errors import (
    RnsNumbersError, WidthOverflowError, UnsupportedModulusError,
    NonFactorableError, PreconditionError,
)
from .config import NumbersConfig, get_config, set_config, load_config
from .rns import (
    product, is_power_of_2, inv_ref, inv, powm, factor,
    base_modulus_with_width, modulus_with_width, modulus_with_width_skip2,
)
from .tables import (
    SUPPORTED_MODULI, dlog_truth_table, exp_truth_table,
    primitive_root, dlog, exp, verify_table,
)
from .radix import (
    digits_per_u128,
    as_mixed_radix, padded_mixed_radix, from_mixed_radix,
    as_mixed_radix_bigint, padded_mixed_radix_bigint, from_mixed_radix_bigint,
    as_base_q, from_base_q, padded_base_q, padded_base_q_128,
    base_q_add, base_q_add_eq, num_carry_digits_to_add_n_digits,
    to_bits, u128_to_bits, u128_from_bits,
)
from .crt import crt, crt_inv, crt_bigint, crt_inv_bigint, CrtContext
from .logging import CheckLogger, CheckManifest, create_manifest

__all__ = [
    "NPRIMES", "PRIMES", "PRIMES_SKIP_2", "PRIMITIVE_ROOTS",
    "U16_MAX", "U128_BITS", "U128_MAX",
    "RnsNumbersError", "WidthOverflowError", "UnsupportedModulusError",
    "NonFactorableError", "PreconditionError",
    "NumbersConfig", "get_config", "set_config", "load_config",
    "product", "is_power_of_2", "inv_ref", "inv", "powm", "factor",
    "base_modulus_with_width", "modulus_with_width", "modulus_with_width_skip2",
    "SUPPORTED_MODULI", "dlog_truth_table", "exp_truth_table",
    "primitive_root", "dlog", "exp", "verify_table",
    "digits_per_u128",
    "as_mixed_radix", "padded_mixed_radix", "from_mixed_radix",
    "as_mixed_radix_bigint", "padded_mixed_radix_bigint", "from_mixed_radix_bigint",
    "as_base_q", "from_base_q", "padded_base_q", "padded_base_q_128",
    "base_q_add", "base_q_add_eq", "num_carry_digits_to_add_n_digits",
    "to_bits", "u128_to_bits", "u128_from_bits",
    "crt", "crt_inv", "crt_bigint", "crt_inv_bigint", "CrtContext",
    "CheckLogger", "CheckManifest", "create_manifest",
]
