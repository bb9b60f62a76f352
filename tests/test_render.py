"""Tests for text and JSON report rendering."""

import json
from exactpoly.interpolate import Point, interpolate
from exactpoly.polynomial import Polynomial
from exactpoly.rational import Rational
from exactpoly.render import coefficient_strings, to_dict, to_json, to_text
from exactpoly.verify import verify


class TestRender:

    def test_coefficient_strings(self):
        p = Polynomial([Rational(6), Rational(-1, 2), Rational(4, 2)])
        assert coefficient_strings(p) == ["6", "-1/2", "2"]

    def test_text_all_match(self, quadratic_points):
        poly = interpolate(quadratic_points, 3)
        text = to_text(poly, verify(poly, quadratic_points))
        assert text == (
            "Degree m = 2\n"
            "Coefficients (a0..a2):\n"
            "a0 = 6\n"
            "a1 = -3\n"
            "a2 = 1\n"
            "VERIFY: all provided points match\n"
        )

    def test_text_mismatch(self, quadratic_points):
        pts = quadratic_points + [Point(4, 100)]
        poly = interpolate(pts, 3)
        text = to_text(poly, verify(poly, pts))
        assert "VERIFY MISMATCH at x=4: expected 100, got 10\n" in text
        assert text.endswith("VERIFY: mismatches found\n")

    def test_dict(self, quadratic_points):
        pts = quadratic_points + [Point(4, 100)]
        poly = interpolate(pts, 3)
        d = to_dict(poly, verify(poly, pts))
        assert d == {
            'degree': 2,
            'coefficients': ["6", "-3", "1"],
            'verified': False,
            'mismatches': [{'x': 4, 'expected': 100, 'actual': 10}],
        }

    def test_json_round_trips(self, quadratic_points):
        poly = interpolate(quadratic_points, 3)
        report = verify(poly, quadratic_points)
        assert json.loads(to_json(poly, report)) == to_dict(poly, report)
