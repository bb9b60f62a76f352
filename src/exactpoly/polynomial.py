"""Polynomials over the rationals in ascending-power coefficient form.

coeffs[i] is the coefficient of x^i. Every operation returns a new, trimmed
Polynomial; instances are never mutated after construction.
"""

from exactpoly.errors import NonIntegerEvaluation
from exactpoly.rational import Rational


def _as_rational(v) -> Rational:
    if isinstance(v, Rational):
        return v
    if isinstance(v, int):
        return Rational(v)
    raise TypeError(f"Expected Rational or int, got {type(v).__name__}")


def trim(coeffs) -> tuple:
    """Drop trailing zero coefficients, always leaving at least one."""
    coeffs = list(coeffs)
    end = len(coeffs)
    while end > 1 and coeffs[end - 1].n == 0:
        end -= 1
    if end == 0:
        return (Rational.zero(),)
    return tuple(coeffs[:end])


class Polynomial:
    """Immutable polynomial over Q. coeffs[0] = constant term."""

    __slots__ = ('coeffs',)

    def __init__(self, coeffs=()):
        object.__setattr__(self, 'coeffs', trim(_as_rational(c) for c in coeffs))

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial is immutable")

    @staticmethod
    def zero() -> 'Polynomial':
        return Polynomial([0])

    @staticmethod
    def constant(c) -> 'Polynomial':
        return Polynomial([c])

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    @property
    def coefficients(self) -> tuple:
        return self.coeffs

    def is_zero(self) -> bool:
        return len(self.coeffs) == 1 and self.coeffs[0].n == 0

    def coeff(self, i: int) -> Rational:
        """Coefficient of x^i, zero beyond the stored length."""
        return self.coeffs[i] if i < len(self.coeffs) else Rational.zero()

    def add(self, other: 'Polynomial') -> 'Polynomial':
        """Element-wise sum, shorter operand padded with zeros."""
        n = max(len(self.coeffs), len(other.coeffs))
        return Polynomial([self.coeff(i) + other.coeff(i) for i in range(n)])

    def scale(self, k) -> 'Polynomial':
        """Multiply every coefficient by k."""
        k = _as_rational(k)
        if k.n == 0:
            return Polynomial.zero()
        return Polynomial([c * k for c in self.coeffs])

    def times_linear(self, a) -> 'Polynomial':
        """Return self * (x - a)."""
        a = _as_rational(a)
        n = len(self.coeffs)
        out = [Rational.zero()] * (n + 1)
        for i, c in enumerate(self.coeffs):
            out[i + 1] = out[i + 1] + c       # x * c_i
            out[i] = out[i] - c * a           # -a * c_i
        return Polynomial(out)

    def evaluate_rational(self, x) -> Rational:
        """Evaluate at x using Horner's method, exact over Q."""
        x = _as_rational(x)
        result = Rational.zero()
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    def evaluate(self, x) -> int:
        """Evaluate at x and return the integer value.

        Raises NonIntegerEvaluation if the value has a denominator != 1.
        """
        r = self.evaluate_rational(x)
        if not r.is_integer():
            raise NonIntegerEvaluation(f"Evaluation not integer at x={x}: {r}")
        return r.n

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if isinstance(other, (Rational, int)):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __call__(self, x) -> int:
        return self.evaluate(x)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self):
        return hash(self.coeffs)

    def __len__(self):
        return len(self.coeffs)

    def __repr__(self):
        return f"Polynomial([{', '.join(str(c) for c in self.coeffs)}])"
