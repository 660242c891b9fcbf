"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two supported element types:
- FP64: log-likelihoods agree with scipy.stats reference values to
  near machine precision
- FP32: relaxed for single-precision arithmetic

Used by the test suite when comparing against reference distributions.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, matches scipy.stats reference',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision, statistically equivalent',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a given element type."""
    if np.dtype(dtype) == np.float32:
        return FP32
    return FP64
