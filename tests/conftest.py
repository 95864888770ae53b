"""Pytest configuration for path tracer tests.

Provides seeded random generators and a constant sampler so material and
camera tests can pin down otherwise random choices.
"""

import random

import pytest


class FixedSampler:
    """Uniform sampler that always draws the same fraction of its range."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value

    def randint(self, a, b):
        return a


@pytest.fixture
def rng():
    """Deterministic generator shared by a single test."""
    return random.Random(1234)


@pytest.fixture
def fixed_sampler():
    return FixedSampler(0.5)
