"""
Core infrastructure for pysurvlik.

This module provides shared abstractions and utilities used by the
likelihood layer.

Key components:
    protocols: DataSource protocol and distribution primitive protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Supported dtypes and clamp bounds
"""

from pysurvlik.core.protocols import (
    DataSource,
    LogHazard,
    CumulativeHazard,
    LogCumulativeDensity,
    Survival,
)
from pysurvlik.core.result import Result
from pysurvlik.core.exceptions import (
    PySurvLikError,
    ValidationError,
    DimensionError,
    EntryTimeError,
)

__all__ = [
    # Protocols
    "DataSource",
    "LogHazard",
    "CumulativeHazard",
    "LogCumulativeDensity",
    "Survival",
    # Result
    "Result",
    # Exceptions
    "PySurvLikError",
    "ValidationError",
    "DimensionError",
    "EntryTimeError",
]
