"""Exact rational arithmetic over arbitrary-precision integers.

Values are always stored in lowest terms with a positive denominator, so
structural equality is numeric equality. Python int supplies the big-integer
magnitudes.
"""

from math import gcd

from exactpoly.errors import DivisionByZero


class Rational:
    """Immutable reduced fraction n/d with d > 0."""

    __slots__ = ('n', 'd')

    def __init__(self, n: int, d: int = 1):
        if d == 0:
            raise DivisionByZero(f"Denominator is zero (numerator {n})")
        if d < 0:
            n, d = -n, -d
        g = gcd(n, d)
        # gcd(0, d) == d, so zero normalizes to 0/1
        object.__setattr__(self, 'n', n // g)
        object.__setattr__(self, 'd', d // g)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @staticmethod
    def from_int(v: int) -> 'Rational':
        return Rational(v, 1)

    @staticmethod
    def zero() -> 'Rational':
        return Rational(0, 1)

    @staticmethod
    def one() -> 'Rational':
        return Rational(1, 1)

    def is_integer(self) -> bool:
        return self.d == 1

    def reciprocal(self) -> 'Rational':
        if self.n == 0:
            raise DivisionByZero("Cannot invert zero")
        return Rational(self.d, self.n)

    # Arithmetic. int operands are promoted, anything else is NotImplemented.

    def __add__(self, other):
        if isinstance(other, int):
            other = Rational(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.n * other.d + other.n * self.d, self.d * other.d)

    def __radd__(self, other):
        if isinstance(other, int):
            return Rational(other) + self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, int):
            other = Rational(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.n * other.d - other.n * self.d, self.d * other.d)

    def __rsub__(self, other):
        if isinstance(other, int):
            return Rational(other) - self
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            other = Rational(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return Rational(self.n * other.n, self.d * other.d)

    def __rmul__(self, other):
        if isinstance(other, int):
            return Rational(other) * self
        return NotImplemented

    def __truediv__(self, other):
        """a / b = a * (1/b). Raises DivisionByZero if b == 0."""
        if isinstance(other, int):
            other = Rational(other)
        elif not isinstance(other, Rational):
            return NotImplemented
        return self * other.reciprocal()

    def __rtruediv__(self, other):
        if isinstance(other, int):
            return Rational(other) / self
        return NotImplemented

    def __neg__(self):
        return Rational(-self.n, self.d)

    def __bool__(self):
        return self.n != 0

    # Comparison on the canonical form.

    def __eq__(self, other):
        if isinstance(other, int):
            return self.d == 1 and self.n == other
        if isinstance(other, Rational):
            return self.n == other.n and self.d == other.d
        return NotImplemented

    def __hash__(self):
        if self.d == 1:
            return hash(self.n)
        return hash((self.n, self.d))

    def _cmp_key(self, other):
        if isinstance(other, int):
            other = Rational(other)
        if not isinstance(other, Rational):
            return None
        return self.n * other.d, other.n * self.d

    def __lt__(self, other):
        key = self._cmp_key(other)
        if key is None:
            return NotImplemented
        return key[0] < key[1]

    def __le__(self, other):
        key = self._cmp_key(other)
        if key is None:
            return NotImplemented
        return key[0] <= key[1]

    def __gt__(self, other):
        key = self._cmp_key(other)
        if key is None:
            return NotImplemented
        return key[0] > key[1]

    def __ge__(self, other):
        key = self._cmp_key(other)
        if key is None:
            return NotImplemented
        return key[0] >= key[1]

    def __repr__(self):
        return f"Q({self})"

    def __str__(self):
        if self.d == 1:
            return str(self.n)
        return f"{self.n}/{self.d}"
