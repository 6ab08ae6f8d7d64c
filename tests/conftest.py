"""Pytest configuration for ray tracer tests.

Provides random sources: a seeded ``random.Random`` for statistical tests
and ``ScriptedRandom`` for tests that need to force a particular draw.
"""

import itertools
import random

import pytest


class ScriptedRandom:
    """Deterministic random source replaying a fixed list of unit fractions.

    Each call to ``uniform(lo, hi)`` takes the next fraction ``f`` and
    returns ``lo + (hi - lo) * f``. The list repeats when exhausted.
    """

    def __init__(self, fractions):
        self._fractions = itertools.cycle(fractions)
        self.calls = 0

    def uniform(self, lo, hi):
        self.calls += 1
        return lo + (hi - lo) * next(self._fractions)


class ForbiddenRandom:
    """Random source that fails the test if anything draws from it."""

    def uniform(self, lo, hi):
        raise AssertionError("unexpected draw from the random source")


@pytest.fixture
def rng():
    """Seeded random source shared by statistical tests."""
    return random.Random(1234)


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def forbidden_rng():
    return ForbiddenRandom()

