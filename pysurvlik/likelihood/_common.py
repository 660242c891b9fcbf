"""
Parameter payloads for likelihood results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class LogLikParams:
    """Log-likelihood of one observation scheme under one distribution."""

    value: float                       # aggregate log-likelihood
    per_observation: NDArray | None    # (n,) terms, when requested
    n_observations: int
    scheme: str                        # concrete scheme class name
    dtype: str                         # element type of the scheme data
    primitives: tuple[str, ...]        # distribution methods used
