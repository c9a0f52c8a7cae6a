"""Shared fixtures for polyinterp tests."""

import random
from fractions import Fraction

import pytest
from polyinterp.gf61 import GF61
from polyinterp.polynomial import Polynomial


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_elements(rng):
    """10 random GF(M61) elements for property testing."""
    return [GF61.random(rng) for _ in range(10)]


@pytest.fixture
def random_poly(rng):
    """Factory for random GF(M61) polynomials of a given degree."""
    def make(degree):
        coeffs = [GF61.random(rng) for _ in range(degree)]
        return Polynomial(coeffs + [GF61.random_nonzero(rng)])
    return make


@pytest.fixture
def fraction_poly(rng):
    """Factory for random polynomials with exact rational coefficients."""
    def make(degree):
        return Polynomial([
            Fraction(rng.randint(-50, 50), rng.randint(1, 9))
            for _ in range(degree + 1)
        ])
    return make
