"""Newton divided-difference interpolation over Q.

Selects k points with distinct x, builds the divided-difference table with
exact Rational arithmetic, and expands the Newton form into the standard
coefficient basis.
"""

import logging
from dataclasses import dataclass

from exactpoly.errors import DivisionByZero, InsufficientPoints, InvalidConfiguration
from exactpoly.polynomial import Polynomial
from exactpoly.rational import Rational

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def select_points(points: list, k: int) -> list:
    """Pick the first k points in ascending x order, one per distinct x.

    For a repeated x the first occurrence in the input wins (the sort is
    stable). Raises InsufficientPoints if fewer than k distinct x exist.
    """
    if k < 1:
        raise InvalidConfiguration(f"k must be >= 1, got {k}")

    used = []
    last_x = None
    for p in sorted(points, key=lambda p: p.x):
        if used and p.x == last_x:
            logger.debug("Skipping duplicate x=%d", p.x)
            continue
        used.append(p)
        last_x = p.x
        if len(used) == k:
            break

    if len(used) < k:
        raise InsufficientPoints(
            f"Need {k} distinct x values, got {len(used)} from {len(points)} points")
    return used


def divided_differences(points: list) -> list:
    """Build the triangular divided-difference table.

    dd[i][j] = (dd[i+1][j-1] - dd[i][j-1]) / (x_{i+j} - x_i).
    Row i has k - i entries. Points must have distinct x.
    """
    n = len(points)
    xs = [p.x for p in points]
    dd = [[Rational.from_int(p.y)] for p in points]

    for j in range(1, n):
        for i in range(n - j):
            den = xs[i + j] - xs[i]
            if den == 0:
                # select_points guarantees distinct nodes
                raise DivisionByZero(f"Duplicate interpolation node x={xs[i]}")
            dd[i].append((dd[i + 1][j - 1] - dd[i][j - 1]) / den)

    logger.debug("Divided-difference table built for %d nodes", n)
    return dd


def newton_to_standard(xs: list, coeffs: list) -> Polynomial:
    """Expand sum_i coeffs[i] * prod_{t<i} (x - xs[t]) into standard form."""
    n = len(coeffs)
    result = Polynomial.zero()
    basis = Polynomial.constant(1)  # empty product
    for i in range(n):
        result = result.add(basis.scale(coeffs[i]))
        if i < n - 1:
            basis = basis.times_linear(xs[i])
    return result


class NewtonForm:
    """Interpolating polynomial kept in Newton form.

    O(k^2) construction, O(k) per evaluation. to_polynomial() gives the
    standard-basis expansion.
    """

    __slots__ = ('xs', 'coeffs', 'n')

    def __init__(self, points: list):
        self.xs = [p.x for p in points]
        self.coeffs = divided_differences(points)[0]
        self.n = len(points)

    def eval_at(self, t) -> Rational:
        """Nested evaluation on the Newton basis."""
        result = self.coeffs[self.n - 1]
        for i in range(self.n - 2, -1, -1):
            result = result * (t - self.xs[i]) + self.coeffs[i]
        return result

    def to_polynomial(self) -> Polynomial:
        return newton_to_standard(self.xs, self.coeffs)


def interpolate(points: list, k: int) -> Polynomial:
    """Return the polynomial of degree <= k-1 through the selected k points."""
    used = select_points(points, k)
    logger.debug("Interpolating through x=%s", [p.x for p in used])
    return NewtonForm(used).to_polynomial()
