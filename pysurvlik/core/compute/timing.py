"""
Wall-clock timing for loglik() reports.

Only the reporting entry point uses this; scheme evaluation itself is
never timed.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """Total elapsed time plus named sections, in seconds.

    ``result()`` gives ``{'total_seconds': ..., <section>: ...}``, the
    mapping stored in ``Result.timing``. Repeated sections add up.
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section ``name``."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """Timings as a new dict; raises RuntimeError before stop()."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
