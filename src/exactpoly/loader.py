"""Input document parsing and base-b value decoding.

Expected document shape:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Each numeric top-level key is an x coordinate; its value string is read in
the given base (2..36) to give y.
"""

import json
import logging
import re
import string
from dataclasses import dataclass

from exactpoly.errors import InputFormatError, InvalidConfiguration
from exactpoly.interpolate import Point

logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36

_DIGITS = {c: i for i, c in enumerate(string.digits + string.ascii_lowercase)}
_DECIMAL_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class RunConfig:
    n: int
    k: int

    def __post_init__(self):
        if self.k < 1:
            raise InvalidConfiguration(f"k must be >= 1, got {self.k}")


def decode_value(digits: str, base: int) -> int:
    """Decode a non-negative digit string in the given base."""
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InputFormatError(f"Unsupported base: {base}")
    if not digits:
        raise InputFormatError("Empty value string")

    result = 0
    for ch in digits:
        # str.lower() maps some non-ASCII letters (e.g. KELVIN SIGN) onto a-z
        d = _DIGITS.get(ch.lower()) if ch.isascii() else None
        if d is None or d >= base:
            raise InputFormatError(f"Invalid digit {ch!r} for base {base} in {digits!r}")
        result = result * base + d
    return result


def _parse_decimal(s: str, what: str) -> int:
    """Strict ASCII decimal integer, optional leading '-'."""
    if not _DECIMAL_RE.fullmatch(s):
        raise InputFormatError(f"{what} must be a decimal integer, got {s!r}")
    if s.startswith('-'):
        return -decode_value(s[1:], 10)
    return decode_value(s, 10)


def _as_int(v, what: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(v, bool):
        raise InputFormatError(f"{what} must be an integer, got {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        return _parse_decimal(v, what)
    raise InputFormatError(f"{what} must be an integer, got {v!r}")


def parse_config(doc: dict) -> RunConfig:
    keys = doc.get('keys')
    if not isinstance(keys, dict):
        raise InputFormatError("Missing 'keys' object")
    if 'n' not in keys or 'k' not in keys:
        raise InputFormatError("'keys' must contain 'n' and 'k'")
    return RunConfig(n=_as_int(keys['n'], 'keys.n'), k=_as_int(keys['k'], 'keys.k'))


def parse_points(doc: dict) -> list:
    """Extract points in document order.

    Keys without any digit are ignored. A key containing a digit must be a
    plain decimal integer, otherwise InputFormatError.
    """
    points = []
    for key, entry in doc.items():
        if key == 'keys':
            continue
        if not any(c.isdigit() for c in key):
            logger.debug("Ignoring non-numeric key %r", key)
            continue
        x = _parse_decimal(key, "Point key")
        if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
            raise InputFormatError(f"Point {key!r} must have 'base' and 'value'")
        base = _as_int(entry['base'], f"base of point {key}")
        value = entry['value']
        if not isinstance(value, str):
            raise InputFormatError(f"Value of point {key} must be a string")
        points.append(Point(x, decode_value(value, base)))
    return points


def load_document(doc: dict) -> tuple:
    """Return (RunConfig, points) from an already-decoded JSON object."""
    if not isinstance(doc, dict):
        raise InputFormatError("Top-level JSON value must be an object")
    config = parse_config(doc)
    points = parse_points(doc)
    if config.n != len(points):
        logger.warning("keys.n=%d but %d points supplied", config.n, len(points))
    return config, points


def loads(text) -> tuple:
    """Parse a JSON str, or UTF-8 bytes, into (RunConfig, points)."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InputFormatError(f"Input is not valid UTF-8: {e}") from e
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputFormatError(f"Invalid JSON: {e}") from e
    return load_document(doc)


def load(fp) -> tuple:
    """Parse a JSON file object (text or binary) into (RunConfig, points)."""
    try:
        data = fp.read()
    except UnicodeDecodeError as e:
        raise InputFormatError(f"Input is not valid UTF-8: {e}") from e
    return loads(data)
