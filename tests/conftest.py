"""Shared fixtures: a frozen clock and a seeded random source."""

import random
from datetime import datetime

import pytest

from lifeos.storage import InMemoryStore

# A Monday afternoon
FIXED_NOW = datetime(2026, 1, 5, 15, 4, 0)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return InMemoryStore()
