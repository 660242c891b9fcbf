"""
Tests for from_events(): partitioning raw records into PartiallyObserved.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pysurvlik.core.exceptions import DimensionError, ValidationError
from pysurvlik.likelihood import (
    IntervalCensored,
    LeftCensored,
    LeftTruncation,
    PartiallyObserved,
    RightCensored,
    Uncensored,
    from_events,
)


class TestScalarEvents:
    """Scalar times go verbatim to one branch or the other."""

    def test_basic_partition(self):
        scheme = from_events([1, 2, 3, 4, 5], [True, False, True, False, True])
        assert isinstance(scheme, PartiallyObserved)
        assert isinstance(scheme.observed, Uncensored)
        assert isinstance(scheme.censored, RightCensored)
        assert_array_equal(scheme.observed.time, [1.0, 3.0, 5.0])
        assert_array_equal(scheme.censored.time, [2.0, 4.0])

    def test_left_censored_target(self):
        scheme = from_events([1.5, 2.5], [False, True], LeftCensored)
        assert isinstance(scheme.censored, LeftCensored)
        assert_array_equal(scheme.censored.time, [1.5])
        assert_array_equal(scheme.observed.time, [2.5])

    def test_order_preserved_within_branches(self, rng):
        times = rng.exponential(size=50)
        flags = rng.random(50) < 0.6
        scheme = from_events(times, flags)
        assert_array_equal(scheme.observed.time, times[flags])
        assert_array_equal(scheme.censored.time, times[~flags])
        assert scheme.n_observations == 50

    def test_accepts_generators_and_integer_flags(self):
        scheme = from_events((t for t in [3.0, 1.0, 2.0]), iter([0, 1, 1]))
        assert_array_equal(scheme.observed.time, [1.0, 2.0])
        assert_array_equal(scheme.censored.time, [3.0])

    def test_all_observed_gives_empty_censored_branch(self):
        scheme = from_events([1.0, 2.0], [True, True])
        assert scheme.censored.n_observations == 0
        assert scheme.censored.time.dtype == np.float64

    def test_empty_input(self, exponential):
        scheme = from_events([], [])
        assert scheme.n_observations == 0
        assert scheme.log_likelihood(exponential) == 0.0

    def test_classmethod_alias(self):
        scheme = PartiallyObserved.from_events([1.0, 2.0], [False, True])
        assert_array_equal(scheme.censored.time, [1.0])


class TestIntervalEvents:
    """(start, stop) pairs: observed keeps stop, censored keeps both."""

    def test_basic_partition(self):
        scheme = from_events([(0, 1), (2, 2)], [False, True], IntervalCensored)
        assert isinstance(scheme.censored, IntervalCensored)
        assert_array_equal(scheme.censored.start, [0.0])
        assert_array_equal(scheme.censored.stop, [1.0])
        assert_array_equal(scheme.observed.time, [2.0])

    def test_observed_uses_stop(self):
        scheme = from_events([(1.0, 4.0), (2.0, 6.0)], [True, True], IntervalCensored)
        assert_array_equal(scheme.observed.time, [4.0, 6.0])
        assert scheme.censored.n_observations == 0

    def test_parallel_bounds_keep_order(self):
        events = [(0.0, 1.0), (5.0, 9.0), (1.0, 2.0), (3.0, 3.5)]
        scheme = from_events(events, [False, True, False, False], IntervalCensored)
        assert_array_equal(scheme.censored.start, [0.0, 1.0, 3.0])
        assert_array_equal(scheme.censored.stop, [1.0, 2.0, 3.5])
        assert_array_equal(scheme.observed.time, [9.0])

    def test_non_pair_event_rejected(self):
        with pytest.raises(DimensionError, match=r"events\[1\]"):
            from_events([(0.0, 1.0), 2.0], [False, False], IntervalCensored)

    def test_likelihood_of_ingested_intervals(self, weibull):
        scheme = from_events([(0.5, 1.0), (2.0, 2.0)], [False, True], IntervalCensored)
        expected = (Uncensored([2.0]).log_likelihood(weibull)
                    + IntervalCensored([0.5], [1.0]).log_likelihood(weibull))
        assert scheme.log_likelihood(weibull) == pytest.approx(expected)


class TestFlagLengths:
    """Excess flags are ignored; missing flags are an error."""

    def test_extra_flags_ignored(self):
        scheme = from_events([1.0, 2.0], [True, False, True, True])
        assert scheme.n_observations == 2
        assert_array_equal(scheme.observed.time, [1.0])
        assert_array_equal(scheme.censored.time, [2.0])

    def test_too_few_flags(self):
        with pytest.raises(DimensionError, match="after 2 events"):
            from_events([1.0, 2.0, 3.0], [True, False])


class TestIngestionOptions:
    """dtype and censoring-class arguments."""

    def test_float32(self):
        scheme = from_events([1.0, 2.0, 3.0], [True, False, True], dtype=np.float32)
        assert scheme.observed.time.dtype == np.float32
        assert scheme.censored.time.dtype == np.float32
        assert scheme.dtype == np.float32

    def test_float32_intervals(self):
        scheme = from_events([(0.0, 1.0)], [False], IntervalCensored, dtype="float32")
        assert scheme.censored.start.dtype == np.float32
        assert scheme.censored.stop.dtype == np.float32

    @pytest.mark.parametrize("dtype", [np.int64, np.float16, "complex128"])
    def test_unsupported_dtype(self, dtype):
        with pytest.raises(ValidationError, match="dtype"):
            from_events([1.0], [True], dtype=dtype)

    def test_censoring_class_must_be_ingestible(self):
        with pytest.raises(TypeError, match="from_censored"):
            from_events([1.0], [False], LeftTruncation)

    def test_censoring_argument_must_be_class(self):
        with pytest.raises(TypeError):
            from_events([1.0], [False], RightCensored([1.0]))


class TestRecordValues:
    """Missing or non-numeric record values raise ValidationError."""

    def test_missing_censored_time(self):
        with pytest.raises(ValidationError, match="events"):
            from_events([1.0, None, 3.0], [True, False, True])

    def test_missing_observed_time(self):
        with pytest.raises(ValidationError, match="events"):
            from_events([None, 2.0], [True, False])

    def test_text_time(self):
        with pytest.raises(ValidationError, match="events"):
            from_events([1.0, "x"], [True, False])

    def test_missing_interval_bound(self):
        with pytest.raises(ValidationError, match="events"):
            from_events([(0.0, 1.0), (None, 2.0)], [False, False], IntervalCensored)

    def test_from_censored_validates(self):
        with pytest.raises(ValidationError, match="events"):
            LeftCensored.from_censored([1.0, None])

    def test_integer_records_converted(self):
        scheme = from_events([1, 2], [True, False], dtype=np.float32)
        assert scheme.observed.time.dtype == np.float32
        assert scheme.censored.time.dtype == np.float32
