"""
Public API for reporting a log-likelihood.

    loglik(scheme, distribution) -> LogLikSolution

Checks that the distribution provides every primitive the scheme needs,
evaluates once, and wraps the value in a Solution with timing and
diagnostics. Optimizer loops should call ``scheme.log_likelihood``
directly; this entry point is for inspection and reporting.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pysurvlik.core.capabilities import CAPABILITY_PER_OBSERVATION
from pysurvlik.core.compute.timing import Timer
from pysurvlik.core.exceptions import ValidationError
from pysurvlik.core.protocols import PRIMITIVE_PROTOCOLS
from pysurvlik.core.result import Result
from pysurvlik.likelihood._base import ObservationScheme
from pysurvlik.likelihood._common import LogLikParams
from pysurvlik.likelihood.solution import LogLikSolution


def check_distribution(scheme: ObservationScheme, distribution: Any) -> None:
    """Verify distribution exposes every primitive the scheme calls.

    Raises
    ------
    ValidationError
        Naming each missing primitive.
    """
    missing = [
        name for name in scheme.required_primitives()
        if not isinstance(distribution, PRIMITIVE_PROTOCOLS[name])
    ]
    if missing:
        raise ValidationError(
            f"distribution: {type(distribution).__name__} does not provide "
            f"{', '.join(missing)}, required by {type(scheme).__name__}"
        )


def loglik(
    scheme: ObservationScheme,
    distribution: Any,
    *,
    per_observation: bool = False,
) -> LogLikSolution:
    """Evaluate the log-likelihood of a scheme under a distribution.

    Parameters
    ----------
    scheme : ObservationScheme
        Any leaf or composed scheme.
    distribution : object
        Provides the primitives listed by ``scheme.required_primitives()``.
    per_observation : bool
        Also return the per-observation terms. Only for schemes that
        support CAPABILITY_PER_OBSERVATION.

    Returns
    -------
    LogLikSolution

    Raises
    ------
    TypeError
        If scheme is not an ObservationScheme.
    ValidationError
        If the distribution lacks a required primitive, or per-observation
        terms are requested from a scheme that cannot produce them.
    """
    if not isinstance(scheme, ObservationScheme):
        raise TypeError(
            f"scheme must be an ObservationScheme, got {type(scheme).__name__}"
        )

    check_distribution(scheme, distribution)

    if per_observation and not scheme.supports(CAPABILITY_PER_OBSERVATION):
        raise ValidationError(
            f"per_observation: {type(scheme).__name__} only provides an "
            f"aggregate log-likelihood"
        )

    timer = Timer()
    timer.start()

    contributions = None
    with timer.section('log_likelihood'):
        if per_observation:
            contributions = np.asarray(scheme.log_likelihood_vector(distribution))
            value = contributions.sum()
        else:
            value = scheme.log_likelihood(distribution)

    timer.stop()

    warnings: list[str] = []
    if not np.isfinite(value):
        warnings.append(
            f"log-likelihood is {float(value)}; the distribution may be "
            f"undefined at some observed times"
        )

    params = LogLikParams(
        value=float(value),
        per_observation=contributions,
        n_observations=scheme.n_observations,
        scheme=type(scheme).__name__,
        dtype=str(scheme.dtype),
        primitives=scheme.required_primitives(),
    )

    result = Result(
        params=params,
        info={"method": "log-likelihood", "metadata": scheme.metadata},
        timing=timer.result(),
        backend_name="cpu_numpy",
        warnings=tuple(warnings),
    )

    return LogLikSolution(_result=result)
