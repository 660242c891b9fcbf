"""
Numerical precision constants.

Every time array in pysurvlik carries one of the floating dtypes listed in
SUPPORTED_DTYPES; results are produced in the same dtype as the data.
"""

import numpy as np


# Element types a scheme may hold. Integer input is promoted to float64.
SUPPORTED_DTYPES: tuple[np.dtype, ...] = (
    np.dtype(np.float32),
    np.dtype(np.float64),
)

DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Bounds applied to interval-censored log-likelihood terms after the log.
# log(0) = -inf for zero-width intervals is mapped to the lower bound.
LOG_LIKELIHOOD_MIN: float = -1e50
LOG_LIKELIHOOD_MAX: float = 1e50


def clamp_bounds(dtype: np.dtype | type) -> tuple[float, float]:
    """
    Clamp bounds representable in a given dtype.

    1e50 overflows float32, so single-precision data is clamped to the
    largest finite float32 magnitude instead.

    Args:
        dtype: NumPy floating dtype

    Returns:
        (lower, upper) bounds for np.clip
    """
    info = np.finfo(dtype)
    lower = max(LOG_LIKELIHOOD_MIN, float(info.min))
    upper = min(LOG_LIKELIHOOD_MAX, float(info.max))
    return lower, upper
