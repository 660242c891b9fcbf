"""
Leaf observation schemes.

Each scheme wraps one or two time arrays and computes its log-likelihood
directly from distribution primitives:

    Uncensored        log h(t) - H(t)
    RightCensored     -H(t)                       (log S(t))
    LeftCensored      log F(t)
    IntervalCensored  log(S(start) - S(stop)), clamped
    LeftTruncation    +H(entry)                   (correction, not negated)

Arrays are validated once at construction. float32 and float64 inputs are
held as read-only views without copying; anything else is converted to a
private float64 array.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pysurvlik.core.precision import DEFAULT_DTYPE, clamp_bounds
from pysurvlik.core.protocols import (
    CUMULATIVE_HAZARD,
    LOG_CUMULATIVE_DENSITY,
    LOG_HAZARD,
    SURVIVAL,
)
from pysurvlik.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_entry_times,
    check_records,
    read_only,
)
from pysurvlik.likelihood._base import PerObservationScheme


def _as_times(values: ArrayLike, name: str) -> NDArray:
    array = check_array(values, name)
    check_1d(array, name)
    return read_only(array)


@dataclass(frozen=True, eq=False)
class _TimeScheme(PerObservationScheme):
    """Scheme holding a single array of times."""

    time: NDArray

    # Number of values per ingested event (see likelihood.events)
    event_arity: ClassVar[int] = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, 'time', _as_times(self.time, 'time'))

    @classmethod
    def from_censored(cls, times: list, *, dtype: DTypeLike = DEFAULT_DTYPE):
        """Build from the times collected by the ingestion helper."""
        return cls(check_records(times, dtype, 'events'))

    @property
    def n_observations(self) -> int:
        return self.time.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.time.dtype


@dataclass(frozen=True, eq=False)
class Uncensored(_TimeScheme):
    """Exactly observed event times."""

    def required_primitives(self) -> tuple[str, ...]:
        return (LOG_HAZARD, CUMULATIVE_HAZARD)

    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        # log f(t) = log h(t) + log S(t) = log h(t) - H(t)
        return distribution.log_hazard(self.time) - distribution.cumulative_hazard(self.time)


@dataclass(frozen=True, eq=False)
class RightCensored(_TimeScheme):
    """Events known only to occur after ``time``."""

    def required_primitives(self) -> tuple[str, ...]:
        return (CUMULATIVE_HAZARD,)

    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        return -distribution.cumulative_hazard(self.time)


@dataclass(frozen=True, eq=False)
class LeftCensored(_TimeScheme):
    """Events known only to occur before ``time``."""

    def required_primitives(self) -> tuple[str, ...]:
        return (LOG_CUMULATIVE_DENSITY,)

    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        return distribution.log_cumulative_density(self.time)


@dataclass(frozen=True, eq=False)
class IntervalCensored(PerObservationScheme):
    """Events known to occur within ``[start, stop]``.

    Parameters
    ----------
    start : array-like
        (n,) lower interval bounds.
    stop : array-like
        (n,) upper interval bounds. ``np.inf`` is allowed and makes the
        record right-censored at ``start``.

    Raises
    ------
    DimensionError
        If start and stop differ in length or are not 1-D.

    Notes
    -----
    ``start <= stop`` is expected but not enforced; a UserWarning is
    emitted when it is violated, and those records evaluate to NaN.
    """

    start: NDArray
    stop: NDArray

    event_arity: ClassVar[int] = 2

    def __post_init__(self) -> None:
        start = _as_times(self.start, 'start')
        stop = _as_times(self.stop, 'stop')
        check_consistent_length(start, stop, names=('start', 'stop'))

        n_reversed = int(np.sum(start > stop))
        if n_reversed > 0:
            warnings.warn(
                f"IntervalCensored: {n_reversed} interval(s) have start > stop",
                UserWarning,
                stacklevel=3,
            )

        object.__setattr__(self, 'start', start)
        object.__setattr__(self, 'stop', stop)

    @classmethod
    def from_censored(
        cls,
        starts: list,
        stops: list,
        *,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> IntervalCensored:
        """Build from the parallel bounds collected by the ingestion helper."""
        return cls(
            check_records(starts, dtype, 'events'),
            check_records(stops, dtype, 'events'),
        )

    @property
    def n_observations(self) -> int:
        return self.start.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self.start, self.stop)

    def required_primitives(self) -> tuple[str, ...]:
        return (SURVIVAL,)

    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        mass = distribution.survival(self.start) - distribution.survival(self.stop)

        # Tight intervals can leave mass == 0; log gives -inf, which the
        # clip below maps to the lower bound.
        with np.errstate(divide='ignore', invalid='ignore'):
            log_mass = np.log(mass)

        lower, upper = clamp_bounds(log_mass.dtype)
        return np.clip(log_mass, lower, upper)


@dataclass(frozen=True, eq=False)
class LeftTruncation(PerObservationScheme):
    """Entry times of subjects observed only after entering the study.

    Adds back the cumulative hazard accrued before entry, H(entry_time).

    Raises
    ------
    EntryTimeError
        If any entry time is <= 0.
    """

    entry_time: NDArray

    def __post_init__(self) -> None:
        entry_time = _as_times(self.entry_time, 'entry_time')
        check_entry_times(entry_time, 'entry_time')
        object.__setattr__(self, 'entry_time', entry_time)

    @property
    def n_observations(self) -> int:
        return self.entry_time.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.entry_time.dtype

    def required_primitives(self) -> tuple[str, ...]:
        return (CUMULATIVE_HAZARD,)

    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        return distribution.cumulative_hazard(self.entry_time)
