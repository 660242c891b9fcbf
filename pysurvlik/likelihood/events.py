"""
Ingestion of raw event records.

Turns a stream of event values plus a parallel stream of "was this event
observed" flags into a PartiallyObserved scheme:

    from_events([1, 2, 3, 4, 5], [True, False, True, False, True])
    # observed = Uncensored([1, 3, 5]), censored = RightCensored([2, 4])

    from_events([(0, 1), (2, 2)], [False, True], IntervalCensored)
    # observed = Uncensored([2]), censored = IntervalCensored([0], [1])

The shape of each event is decided by the censoring class: schemes with
``event_arity == 1`` take scalar times, schemes with ``event_arity == 2``
take ``(start, stop)`` pairs. For a pair flagged as observed only ``stop``
is kept, since the event is known to happen exactly then.
"""

from __future__ import annotations

from typing import Iterable

from numpy.typing import DTypeLike

from pysurvlik.core.exceptions import DimensionError
from pysurvlik.core.precision import DEFAULT_DTYPE
from pysurvlik.core.validation import check_float_dtype, check_records
from pysurvlik.likelihood._base import ObservationScheme
from pysurvlik.likelihood.composite import PartiallyObserved
from pysurvlik.likelihood.schemes import RightCensored, Uncensored

_EXHAUSTED = object()


def from_events(
    events: Iterable,
    event_observed: Iterable,
    censored: type[ObservationScheme] = RightCensored,
    *,
    dtype: DTypeLike = DEFAULT_DTYPE,
) -> PartiallyObserved:
    """Partition event records into observed and censored branches.

    Parameters
    ----------
    events : iterable
        Event times, or ``(start, stop)`` pairs when ``censored`` is
        IntervalCensored.
    event_observed : iterable of bool
        One flag per event; True means the event was observed exactly.
        Flags beyond the last event are ignored.
    censored : type
        Scheme class for the unobserved records. Must provide
        ``from_censored`` and ``event_arity`` (RightCensored, LeftCensored,
        IntervalCensored).
    dtype : dtype
        float32 or float64.

    Returns
    -------
    PartiallyObserved
        Both branches keep the input order of their records.

    Raises
    ------
    TypeError
        If ``censored`` cannot be built from ingested records.
    ValidationError
        If ``dtype`` is not a supported float type.
    DimensionError
        If there are fewer flags than events, or an interval event is not
        a pair.
    """
    dtype = check_float_dtype(dtype, 'dtype')

    if not (
        isinstance(censored, type)
        and issubclass(censored, ObservationScheme)
        and hasattr(censored, 'from_censored')
    ):
        raise TypeError(
            f"censored must be an observation scheme class with from_censored(), "
            f"got {censored!r}"
        )

    arity = censored.event_arity
    observed_times: list = []
    columns: tuple[list, ...] = tuple([] for _ in range(arity))

    flags = iter(event_observed)
    for index, event in enumerate(events):
        flag = next(flags, _EXHAUSTED)
        if flag is _EXHAUSTED:
            raise DimensionError(
                f"event_observed: ran out of flags after {index} events, "
                f"expected one flag per event"
            )

        if arity == 1:
            if flag:
                observed_times.append(event)
            else:
                columns[0].append(event)
            continue

        try:
            start, stop = event
        except (TypeError, ValueError) as e:
            raise DimensionError(
                f"events[{index}]: expected a (start, stop) pair, got {event!r}"
            ) from e

        if flag:
            observed_times.append(stop)
        else:
            columns[0].append(start)
            columns[1].append(stop)

    return PartiallyObserved(
        observed=Uncensored(check_records(observed_times, dtype, 'events')),
        censored=censored.from_censored(*columns, dtype=dtype),
    )
