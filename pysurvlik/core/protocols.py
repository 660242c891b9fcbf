"""
Core protocols for pysurvlik.

These define structural interfaces that collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any distribution object exposing the right methods can be used,
without inheriting from anything in this package.

Design Principles:
    - Minimal contracts: one primitive per protocol
    - Capability-driven: use supports() for optional features
    - Each observation scheme names the primitives it needs, and the union
      is what a distribution must provide for a composed scheme
"""

from typing import Protocol, Any, runtime_checkable

from numpy.typing import NDArray


# Primitive names, in the order they are reported by required_primitives()
LOG_HAZARD = 'log_hazard'
CUMULATIVE_HAZARD = 'cumulative_hazard'
LOG_CUMULATIVE_DENSITY = 'log_cumulative_density'
SURVIVAL = 'survival'


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for any observation scheme.

    Every scheme (leaf or wrapper) implements this protocol so that tooling
    (reporting, summaries) can inspect it without knowing its concrete type.
    """

    @property
    def n_observations(self) -> int:
        """Number of observations (statistical units) held by the scheme."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """
        Scheme-specific metadata.

        Examples:
            RightCensored: {'scheme': 'RightCensored', 'n': 4, 'dtype': 'float64'}
            PartiallyObserved: {'scheme': 'PartiallyObserved', 'n': 10,
                                'n_observed': 6, 'n_censored': 4, ...}
        """
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this scheme supports a given capability.

        Note:
            Unknown capabilities MUST return False, never raise.
            This allows forward-compatible capability checking.
        """
        ...


@runtime_checkable
class LogHazard(Protocol):
    """Distribution exposing log h(t)."""

    def log_hazard(self, t: NDArray) -> NDArray:
        """Log hazard at each time in t, same length as t."""
        ...


@runtime_checkable
class CumulativeHazard(Protocol):
    """Distribution exposing H(t) = integral of h from 0 to t."""

    def cumulative_hazard(self, t: NDArray) -> NDArray:
        """Cumulative hazard at each time in t, same length as t."""
        ...


@runtime_checkable
class LogCumulativeDensity(Protocol):
    """Distribution exposing log F(t)."""

    def log_cumulative_density(self, t: NDArray) -> NDArray:
        """Log CDF at each time in t, same length as t."""
        ...


@runtime_checkable
class Survival(Protocol):
    """Distribution exposing S(t) = 1 - F(t)."""

    def survival(self, t: NDArray) -> NDArray:
        """Survival probability at each time in t, same length as t."""
        ...


PRIMITIVE_PROTOCOLS: dict[str, type] = {
    LOG_HAZARD: LogHazard,
    CUMULATIVE_HAZARD: CumulativeHazard,
    LOG_CUMULATIVE_DENSITY: LogCumulativeDensity,
    SURVIVAL: Survival,
}
