"""
Reference distributions for likelihood tests.

Each class implements the four primitives consumed by the observation
schemes. Values are cross-checked against scipy.stats in the tests, so the
closed forms here only need to be right, not fast.
"""

import numpy as np
import pytest


class Exponential:
    """Constant hazard ``rate``. Computes in the dtype of ``t``."""

    def __init__(self, rate):
        self.rate = rate

    def log_hazard(self, t):
        return np.full_like(t, np.log(self.rate))

    def cumulative_hazard(self, t):
        return self.rate * t

    def log_cumulative_density(self, t):
        return np.log(-np.expm1(-self.rate * t))

    def survival(self, t):
        return np.exp(-self.rate * t)


class Weibull:
    """Weibull with shape ``k`` and scale ``lam``; matches scipy's weibull_min(k, scale=lam)."""

    def __init__(self, k, lam):
        self.k = k
        self.lam = lam

    def log_hazard(self, t):
        return np.log(self.k / self.lam) + (self.k - 1) * np.log(t / self.lam)

    def cumulative_hazard(self, t):
        return (t / self.lam) ** self.k

    def log_cumulative_density(self, t):
        return np.log(-np.expm1(-self.cumulative_hazard(t)))

    def survival(self, t):
        return np.exp(-self.cumulative_hazard(t))


class HazardOnly:
    """Provides cumulative_hazard and nothing else."""

    def cumulative_hazard(self, t):
        return np.asarray(t, dtype=np.float64)


class FlatSurvival:
    """S(t) is the same everywhere, so every interval carries zero mass."""

    def survival(self, t):
        return np.full_like(t, 0.5)


@pytest.fixture
def weibull():
    return Weibull(k=1.5, lam=3.0)


@pytest.fixture
def exponential():
    return Exponential(rate=0.4)


@pytest.fixture
def make_exponential():
    """Factory for exponential distributions with a chosen rate."""
    return Exponential


@pytest.fixture
def hazard_only():
    return HazardOnly()


@pytest.fixture
def flat_survival():
    return FlatSurvival()
