"""Error taxonomy for exact interpolation.

Every error raised by exactpoly derives from InterpolationError and from the
closest builtin exception, so callers can catch either.
"""


class InterpolationError(Exception):
    """Base class for all exactpoly errors."""


class InvalidConfiguration(InterpolationError, ValueError):
    """Required sample count k is < 1."""


class InsufficientPoints(InterpolationError, ValueError):
    """Fewer than k distinct x values were supplied."""


class DivisionByZero(InterpolationError, ZeroDivisionError):
    """Zero denominator in a Rational, or a duplicate node in the table."""


class NonIntegerEvaluation(InterpolationError, ArithmeticError):
    """Polynomial value at an integer point is not an integer."""


class InputFormatError(InterpolationError, ValueError):
    """Input document is malformed or a value cannot be decoded."""
