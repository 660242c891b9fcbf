"""
Wrapper schemes built from other schemes.

    PartiallyObserved(observed, censored)
        observed.log_likelihood(d) + censored.log_likelihood(d)

    Weighted(time, weight)
        sum(weight * time.log_likelihood_vector(d)) / sum(weight)

Neither wrapper knows which concrete scheme it holds; any ObservationScheme
may be nested, including other wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterable

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pysurvlik.core.capabilities import (
    CAPABILITY_COMPOSITE,
    CAPABILITY_PER_OBSERVATION,
    CAPABILITY_WEIGHTED,
)
from pysurvlik.core.exceptions import DimensionError, ValidationError
from pysurvlik.core.precision import DEFAULT_DTYPE, SUPPORTED_DTYPES
from pysurvlik.core.validation import (
    check_1d,
    check_array,
    check_finite,
    read_only,
)
from pysurvlik.likelihood._base import ObservationScheme, merge_primitives
from pysurvlik.likelihood.schemes import RightCensored, Uncensored


@dataclass(frozen=True, eq=False)
class PartiallyObserved(ObservationScheme):
    """A dataset split into exactly observed events and a censored part.

    Parameters
    ----------
    observed : Uncensored or array-like
        Exact event times. Array-likes are wrapped in Uncensored.
    censored : ObservationScheme
        Any scheme: RightCensored, LeftCensored, IntervalCensored,
        LeftTruncation, a Weighted scheme, or another PartiallyObserved.

    Raises
    ------
    TypeError
        If censored is not an ObservationScheme.
    """

    observed: Uncensored
    censored: ObservationScheme

    _capabilities: ClassVar[frozenset[str]] = frozenset({CAPABILITY_COMPOSITE})

    def __post_init__(self) -> None:
        if not isinstance(self.observed, Uncensored):
            object.__setattr__(self, 'observed', Uncensored(self.observed))
        if not isinstance(self.censored, ObservationScheme):
            raise TypeError(
                f"censored must be an ObservationScheme, "
                f"got {type(self.censored).__name__}"
            )

    @classmethod
    def from_events(
        cls,
        events: Iterable,
        event_observed: Iterable,
        censored: type[ObservationScheme] = RightCensored,
        *,
        dtype: DTypeLike = DEFAULT_DTYPE,
    ) -> PartiallyObserved:
        """Partition raw records by their observed flag.

        See ``pysurvlik.likelihood.events.from_events``.
        """
        from pysurvlik.likelihood.events import from_events
        return from_events(events, event_observed, censored, dtype=dtype)

    @property
    def n_observations(self) -> int:
        return self.observed.n_observations + self.censored.n_observations

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self.observed.dtype, self.censored.dtype)

    @property
    def metadata(self) -> dict[str, Any]:
        meta = super().metadata
        meta['n_observed'] = self.observed.n_observations
        meta['n_censored'] = self.censored.n_observations
        meta['censored'] = self.censored.metadata
        return meta

    def required_primitives(self) -> tuple[str, ...]:
        return merge_primitives(
            self.observed.required_primitives(),
            self.censored.required_primitives(),
        )

    def log_likelihood(self, distribution: Any) -> np.floating:
        return (
            self.observed.log_likelihood(distribution)
            + self.censored.log_likelihood(distribution)
        )


@dataclass(frozen=True, eq=False)
class Weighted(ObservationScheme):
    """Any per-observation scheme with importance weights.

    The result is the weighted average of the inner per-observation terms,
    not the weighted sum. ``weight[i]`` applies to observation ``i`` of the
    inner scheme.

    Parameters
    ----------
    time : ObservationScheme
        Inner scheme; must support per-observation results.
    weight : array-like
        (n,) finite weights with a positive sum.

    Raises
    ------
    TypeError
        If time is not an ObservationScheme.
    ValidationError
        If the inner scheme cannot produce per-observation terms, or the
        weights are non-finite or sum to <= 0.
    DimensionError
        If weight is not 1-D or its length differs from the inner scheme.
    """

    time: ObservationScheme
    weight: NDArray
    total_weight: float = field(init=False, repr=False)

    _capabilities: ClassVar[frozenset[str]] = frozenset({
        CAPABILITY_COMPOSITE,
        CAPABILITY_WEIGHTED,
    })

    def __post_init__(self) -> None:
        if not isinstance(self.time, ObservationScheme):
            raise TypeError(
                f"time must be an ObservationScheme, "
                f"got {type(self.time).__name__}"
            )
        if not self.time.supports(CAPABILITY_PER_OBSERVATION):
            raise ValidationError(
                f"time: {type(self.time).__name__} does not provide "
                f"per-observation log-likelihoods and cannot be weighted"
            )

        borrowed = (
            isinstance(self.weight, np.ndarray)
            and self.weight.dtype in SUPPORTED_DTYPES
        )
        weight = check_array(self.weight, 'weight')
        if not borrowed:
            # Converted weights follow the inner scheme's precision
            weight = weight.astype(self.time.dtype, copy=False)
        check_1d(weight, 'weight')
        check_finite(weight, 'weight')
        if weight.shape[0] != self.time.n_observations:
            raise DimensionError(
                f"Inconsistent lengths: weight={weight.shape[0]}, "
                f"time={self.time.n_observations}"
            )

        total = weight.sum()
        if not total > 0:
            raise ValidationError(
                f"weight: sum of weights must be positive, got {float(total)}"
            )

        object.__setattr__(self, 'weight', read_only(weight))
        object.__setattr__(self, 'total_weight', total)

    @property
    def n_observations(self) -> int:
        return self.time.n_observations

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self.time.dtype, self.weight.dtype)

    @property
    def metadata(self) -> dict[str, Any]:
        meta = super().metadata
        meta['total_weight'] = float(self.total_weight)
        meta['inner'] = self.time.metadata
        return meta

    def required_primitives(self) -> tuple[str, ...]:
        return self.time.required_primitives()

    def log_likelihood(self, distribution: Any) -> np.floating:
        contributions = self.time.log_likelihood_vector(distribution)
        return (self.weight * contributions).sum() / self.total_weight

