"""
Abstract base for observation schemes.

An observation scheme holds time arrays tagged with their statistical
meaning and knows how to contribute a log-likelihood given a distribution.
Wrappers (PartiallyObserved, Weighted) are written against this base, not
against a closed set of concrete schemes, so censoring, truncation and
weighting compose without new classes.

Two entry points exist because the same quantity is needed in two shapes:

    log_likelihood(d)         -> aggregate scalar, used in sums
    log_likelihood_vector(d)  -> one term per observation, used by Weighted

Only schemes advertising CAPABILITY_PER_OBSERVATION provide the second.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from pysurvlik.core.capabilities import CAPABILITY_PER_OBSERVATION


class ObservationScheme(ABC):
    """Base class of every observation scheme.

    Subclasses are frozen dataclasses; they validate in ``__post_init__``
    and are never mutated afterwards. ``log_likelihood`` performs no
    validation and is safe to call from an optimizer's inner loop.
    """

    _capabilities: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    def log_likelihood(self, distribution: Any) -> np.floating:
        """Aggregate log-likelihood contribution of this scheme."""
        ...

    @abstractmethod
    def required_primitives(self) -> tuple[str, ...]:
        """Names of the distribution methods this scheme calls."""
        ...

    @property
    @abstractmethod
    def n_observations(self) -> int:
        ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype:
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'scheme': type(self).__name__,
            'n': self.n_observations,
            'dtype': str(self.dtype),
        }

    def supports(self, capability: str) -> bool:
        return capability in self._capabilities


class PerObservationScheme(ObservationScheme):
    """Scheme that can report one log-likelihood term per observation.

    The aggregate is the sum of the vector, so subclasses implement
    ``log_likelihood_vector`` only.
    """

    _capabilities: ClassVar[frozenset[str]] = frozenset({CAPABILITY_PER_OBSERVATION})

    @abstractmethod
    def log_likelihood_vector(self, distribution: Any) -> NDArray:
        """Per-observation log-likelihood terms, in input order."""
        ...

    def log_likelihood(self, distribution: Any) -> np.floating:
        return self.log_likelihood_vector(distribution).sum()


def merge_primitives(*groups: tuple[str, ...]) -> tuple[str, ...]:
    """Union of primitive names, keeping first-seen order."""
    merged: list[str] = []
    for group in groups:
        for name in group:
            if name not in merged:
                merged.append(name)
    return tuple(merged)
