"""
Log-likelihoods for censored, truncated and weighted survival data.

Public API:
    Uncensored, RightCensored, LeftCensored, IntervalCensored,
    LeftTruncation             - leaf observation schemes
    PartiallyObserved, Weighted - wrapper schemes
    from_events(...)            - build PartiallyObserved from raw records
    loglik(scheme, dist)        - evaluate with diagnostics -> LogLikSolution
"""

from pysurvlik.likelihood._base import ObservationScheme, PerObservationScheme
from pysurvlik.likelihood.schemes import (
    Uncensored,
    RightCensored,
    LeftCensored,
    IntervalCensored,
    LeftTruncation,
)
from pysurvlik.likelihood.composite import PartiallyObserved, Weighted
from pysurvlik.likelihood.events import from_events
from pysurvlik.likelihood._common import LogLikParams
from pysurvlik.likelihood.solution import LogLikSolution
from pysurvlik.likelihood.solvers import check_distribution, loglik

__all__ = [
    "ObservationScheme",
    "PerObservationScheme",
    "Uncensored",
    "RightCensored",
    "LeftCensored",
    "IntervalCensored",
    "LeftTruncation",
    "PartiallyObserved",
    "Weighted",
    "from_events",
    "loglik",
    "check_distribution",
    "LogLikParams",
    "LogLikSolution",
]
