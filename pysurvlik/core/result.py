"""
Generic result container for pysurvlik reporting.

The Result class is the envelope returned (inside a Solution) by the
reporting entry point. It carries the computed payload together with
timing and non-fatal diagnostics, while the payload type stays specific
to what was computed.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (scheme description, dtype)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Computed payload (log-likelihood value, contributions, ...)
        info: Structured metadata (scheme, dtype, primitives used)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the array substrate that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LogLikParams(value=-12.3, per_observation=None, ...),
        ...     info={'scheme': 'PartiallyObserved'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_numpy'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
