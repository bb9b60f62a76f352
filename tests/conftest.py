"""Shared fixtures for exactpoly tests."""

import random
import pytest
from exactpoly.interpolate import Point


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def quadratic_points():
    """Three points on x^2 - 3x + 6."""
    return [Point(1, 4), Point(2, 4), Point(3, 6)]


@pytest.fixture
def sample_document():
    """Input document for x^2 - 3x + 6 with mixed bases."""
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "100"},
        "3": {"base": "10", "value": "6"},
        "6": {"base": "4", "value": "120"},
    }
