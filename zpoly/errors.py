"""Exceptions raised by zpoly.

Each exception also derives from the built-in exception that is customary
for the situation, e.g., InvalidDivisor is a ZeroDivisionError.
"""


class PolynomialError(Exception):
    """Base class for all zpoly errors."""


class NullOperand(PolynomialError, TypeError):
    """Polynomial required but None given."""


class InvalidExponent(PolynomialError, ValueError):
    """Negative exponent given."""


class InvalidDegree(PolynomialError, ValueError):
    """Negative degree given."""


class InvalidCharacteristic(PolynomialError, ValueError):
    """Characteristic out of range."""


class IncompatibleRing(PolynomialError, TypeError):
    """Operands over coefficient rings of different characteristic."""


class InvalidDivisor(PolynomialError, ZeroDivisionError):
    """Division by None or by the zero polynomial."""


class NonIntegralResult(PolynomialError, ArithmeticError):
    """Division over the integers would require fractional coefficients."""


class UnsupportedRing(PolynomialError, ValueError):
    """Operation requires a field, but the characteristic is composite."""


class UnsupportedCharacteristic(PolynomialError, ValueError):
    """Operation not available for characteristic 0."""
