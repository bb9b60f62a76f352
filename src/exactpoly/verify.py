"""Check an interpolated polynomial against every supplied point."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mismatch:
    x: int
    expected: int
    actual: int


@dataclass
class VerificationReport:
    all_matched: bool
    mismatches: list = field(default_factory=list)

    def __bool__(self):
        return self.all_matched


def verify(poly, points: list) -> VerificationReport:
    """Evaluate poly at every point and collect all disagreements.

    Never stops early. NonIntegerEvaluation from the polynomial propagates:
    it means the interpolation itself is broken, not the data.
    """
    mismatches = []
    for p in points:
        actual = poly.evaluate(p.x)
        if actual != p.y:
            logger.debug("Mismatch at x=%d: expected %d, got %d", p.x, p.y, actual)
            mismatches.append(Mismatch(p.x, p.y, actual))
    return VerificationReport(all_matched=not mismatches, mismatches=mismatches)
