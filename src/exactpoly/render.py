"""Text and JSON rendering of interpolation results."""

import json


def coefficient_strings(poly) -> list:
    """Each coefficient as 'p' or reduced 'p/q'."""
    return [str(c) for c in poly.coefficients]


def to_dict(poly, report) -> dict:
    return {
        'degree': poly.degree,
        'coefficients': coefficient_strings(poly),
        'verified': report.all_matched,
        'mismatches': [
            {'x': m.x, 'expected': m.expected, 'actual': m.actual}
            for m in report.mismatches
        ],
    }


def to_json(poly, report) -> str:
    return json.dumps(to_dict(poly, report), indent=2)


def to_text(poly, report) -> str:
    m = poly.degree
    lines = [f"Degree m = {m}", f"Coefficients (a0..a{m}):"]
    for i, c in enumerate(coefficient_strings(poly)):
        lines.append(f"a{i} = {c}")
    for mm in report.mismatches:
        lines.append(f"VERIFY MISMATCH at x={mm.x}: expected {mm.expected}, got {mm.actual}")
    if report.all_matched:
        lines.append("VERIFY: all provided points match")
    else:
        lines.append("VERIFY: mismatches found")
    return '\n'.join(lines) + '\n'
