"""
Shared compute infrastructure for pysurvlik.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers per element type
"""

from pysurvlik.core.compute.timing import Timer
from pysurvlik.core.compute.tolerances import FP32, FP64, ToleranceTier, select_tolerance

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP32",
    "FP64",
    "select_tolerance",
]
