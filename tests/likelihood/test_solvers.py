"""
Tests for loglik(), the reporting entry point, and check_distribution().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pysurvlik.core.exceptions import ValidationError
from pysurvlik.core.protocols import (
    PRIMITIVE_PROTOCOLS,
    CumulativeHazard,
    LogHazard,
    Survival,
)
from pysurvlik.likelihood import (
    IntervalCensored,
    LeftCensored,
    LeftTruncation,
    LogLikSolution,
    PartiallyObserved,
    RightCensored,
    Uncensored,
    Weighted,
    check_distribution,
    loglik,
)


@pytest.fixture
def dataset():
    return PartiallyObserved(Uncensored([1.0, 3.0, 5.0]), RightCensored([2.0, 4.0]))


class TestLoglik:
    """loglik() evaluates once and reports."""

    def test_value_matches_direct_evaluation(self, dataset, weibull):
        result = loglik(dataset, weibull)
        assert isinstance(result, LogLikSolution)
        assert_allclose(result.value, dataset.log_likelihood(weibull))
        assert result.per_observation is None
        assert result.n_observations == 5
        assert result.scheme == "PartiallyObserved"
        assert result.dtype == "float64"
        assert result.primitives == ("log_hazard", "cumulative_hazard")
        assert result.backend_name == "cpu_numpy"
        assert result.warnings == ()

    def test_per_observation(self, weibull):
        scheme = IntervalCensored([0.0, 1.0], [1.0, 3.0])
        result = loglik(scheme, weibull, per_observation=True)
        assert_allclose(result.per_observation, scheme.log_likelihood_vector(weibull))
        assert_allclose(result.value, result.per_observation.sum())

    def test_per_observation_requires_capability(self, dataset, weibull):
        with pytest.raises(ValidationError, match="aggregate"):
            loglik(dataset, weibull, per_observation=True)

    def test_timing_recorded(self, dataset, exponential):
        result = loglik(dataset, exponential)
        assert "total_seconds" in result.timing
        assert "log_likelihood" in result.timing
        assert result.timing["total_seconds"] >= 0.0

    def test_metadata_captured(self, dataset, exponential):
        result = loglik(dataset, exponential)
        assert result.metadata["n_observed"] == 3
        assert result.metadata["n_censored"] == 2

    def test_non_finite_value_warns(self, hazard_only):
        scheme = RightCensored([1.0, np.inf])
        result = loglik(scheme, hazard_only)
        assert result.value == -np.inf
        assert result._result.has_warning("undefined")

    def test_rejects_non_scheme(self, exponential):
        with pytest.raises(TypeError, match="ObservationScheme"):
            loglik([1.0, 2.0], exponential)

    def test_summary_and_repr(self, exponential):
        scheme = Weighted(RightCensored([1.0, 2.0]), [1.0, 1.0])
        result = loglik(scheme, exponential)
        text = result.summary()
        assert "Weighted" in text
        assert "log-likelihood" in text
        assert repr(result).startswith("LogLikSolution(scheme=Weighted")

    def test_summary_lists_terms(self, exponential):
        result = loglik(RightCensored(np.arange(1.0, 13.0)), exponential,
                        per_observation=True)
        assert "(2 more rows)" in result.summary()


class TestCheckDistribution:
    """Missing primitives are reported by name."""

    def test_complete_distribution_passes(self, dataset, weibull):
        check_distribution(dataset, weibull)

    def test_missing_primitive_named(self, dataset, hazard_only):
        with pytest.raises(ValidationError, match="log_hazard"):
            check_distribution(dataset, hazard_only)

    def test_union_over_nested_schemes(self, hazard_only):
        scheme = PartiallyObserved(Uncensored([]), IntervalCensored([1.0], [2.0]))
        with pytest.raises(ValidationError, match="log_hazard, survival"):
            loglik(scheme, hazard_only)

    def test_hazard_only_is_enough_for_right_censoring(self, hazard_only):
        result = loglik(RightCensored([1.0, 2.0]), hazard_only)
        assert result.value == -3.0


class TestDistributionProtocols:
    """Reference distributions satisfy the structural protocols."""

    def test_protocols(self, weibull, hazard_only):
        assert isinstance(weibull, LogHazard)
        assert isinstance(weibull, CumulativeHazard)
        assert isinstance(weibull, Survival)
        assert isinstance(hazard_only, CumulativeHazard)
        assert not isinstance(hazard_only, Survival)

    @pytest.mark.parametrize("scheme", [
        Uncensored([1.0]),
        RightCensored([1.0]),
        LeftCensored([1.0]),
        IntervalCensored([1.0], [2.0]),
        LeftTruncation([1.0]),
    ])
    def test_every_primitive_has_a_protocol(self, scheme):
        for name in scheme.required_primitives():
            assert name in PRIMITIVE_PROTOCOLS

    def test_non_callable_attribute_is_missing(self):
        class Broken:
            survival = None

        with pytest.raises(ValidationError, match="survival"):
            check_distribution(IntervalCensored([1.0], [2.0]), Broken())
