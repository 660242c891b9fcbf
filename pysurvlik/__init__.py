"""
pysurvlik: composable log-likelihoods for time-to-event data.

Observation schemes (exact, right-, left- and interval-censored,
left-truncated, weighted) are small immutable containers that each
contribute a log-likelihood given a distribution exposing hazard,
cumulative hazard, log-CDF and survival primitives. Wrappers nest freely,
so any combination of censoring, truncation and weighting is expressible.

Submodules:
    core: exceptions, validation, protocols, result envelope
    likelihood: observation schemes, ingestion helper, loglik()
"""

__version__ = "0.1.0"

from pysurvlik import likelihood
from pysurvlik.likelihood import (
    Uncensored,
    RightCensored,
    LeftCensored,
    IntervalCensored,
    LeftTruncation,
    PartiallyObserved,
    Weighted,
    from_events,
    loglik,
)

__all__ = [
    "__version__",
    "likelihood",
    "Uncensored",
    "RightCensored",
    "LeftCensored",
    "IntervalCensored",
    "LeftTruncation",
    "PartiallyObserved",
    "Weighted",
    "from_events",
    "loglik",
]
