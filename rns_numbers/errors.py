"""
Error taxonomy for rns_numbers.

Every failure the codecs can detect is raised as one of the classes
below.  All of them derive from RnsNumbersError so callers can catch the
whole family, and each also derives from the closest builtin so that
existing ``except ValueError`` / ``except OverflowError`` handlers keep
working.

  WidthOverflowError       fixed-width (128-bit) result out of range
  UnsupportedModulusError  no dlog/exp table for the requested modulus
  NonFactorableError       value has a factor outside the prime table
  PreconditionError        malformed input from the caller
"""


class RnsNumbersError(Exception):
    """Base class for all rns_numbers errors."""


class WidthOverflowError(RnsNumbersError, OverflowError):
    """A fixed-width reconstruction exceeded the 128-bit range."""


class UnsupportedModulusError(RnsNumbersError, ValueError):
    """A table was requested for a modulus outside the fixed catalogue."""

    def __init__(self, modulus: int):
        super().__init__(f"unknown modulus: {modulus}")
        self.modulus = modulus


class NonFactorableError(RnsNumbersError, ValueError):
    """A value is not a square-free product of the known small primes."""

    def __init__(self, value: int, residual: int):
        super().__init__(
            f"can only factor numbers with unique prime factors: "
            f"{value} leaves residual {residual}"
        )
        self.value = value
        self.residual = residual


class PreconditionError(RnsNumbersError, ValueError):
    """The caller violated an input contract (a programming error)."""


__all__ = [
    "RnsNumbersError", "WidthOverflowError", "UnsupportedModulusError",
    "NonFactorableError", "PreconditionError",
]
