"""
Solution wrapper for likelihood results.

LogLikSolution wraps a Result[LogLikParams] and exposes user-friendly
properties with a summary() method.
"""

from __future__ import annotations

from typing import Any

from pysurvlik.core.result import Result
from pysurvlik.likelihood._common import LogLikParams


class LogLikSolution:
    """Log-likelihood evaluation result."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[LogLikParams]) -> None:
        self._result = _result

    # -- Properties delegating to LogLikParams --

    @property
    def value(self) -> float:
        """Aggregate log-likelihood."""
        return self._result.params.value

    @property
    def per_observation(self):
        """Per-observation terms, or None if not requested."""
        return self._result.params.per_observation

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def scheme(self) -> str:
        return self._result.params.scheme

    @property
    def dtype(self) -> str:
        return self._result.params.dtype

    @property
    def primitives(self) -> tuple[str, ...]:
        return self._result.params.primitives

    # -- Result envelope --

    @property
    def metadata(self) -> dict[str, Any]:
        """Scheme metadata captured at evaluation time."""
        return self._result.info['metadata']

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable summary of the evaluation."""
        lines = []
        lines.append("Call: loglik()")
        lines.append("")
        lines.append(f"  scheme: {self.scheme}")
        lines.append(
            f"  n={self.n_observations}, dtype={self.dtype}"
        )
        lines.append(f"  primitives: {', '.join(self.primitives)}")
        lines.append("")
        lines.append(f"  log-likelihood = {self.value:.6g}")

        if self.per_observation is not None:
            n = len(self.per_observation)
            show = min(n, 10)
            lines.append("")
            lines.append(f"  {'obs':>6s}  {'loglik':>14s}")
            for i in range(show):
                lines.append(f"  {i:6d}  {self.per_observation[i]:14.6g}")
            if n > 10:
                lines.append(f"  ... ({n - 10} more rows)")

        if self.warnings:
            lines.append("")
            for w in self.warnings:
                lines.append(f"  Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LogLikSolution(scheme={self.scheme}, "
            f"n={self.n_observations}, "
            f"loglik={self.value:.6g})"
        )
