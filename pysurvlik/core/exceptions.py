"""
Exception hierarchy for pysurvlik.

All exceptions inherit from PySurvLikError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PySurvLikError(Exception):
    """Base exception for all pysurvlik errors."""
    pass


class ValidationError(PySurvLikError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks. This is the
    only error raised while building observation schemes; likelihood
    evaluation itself never validates.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when parallel arrays (interval bounds, weights, event flags) have
    inconsistent lengths.
    """
    pass


class EntryTimeError(ValidationError):
    """
    Left-truncation entry times are not strictly positive.

    Attributes:
        n_invalid: Number of entry times that are <= 0
        min_value: Smallest entry time found
    """

    def __init__(
        self,
        message: str,
        n_invalid: int | None = None,
        min_value: float | None = None
    ):
        super().__init__(message)
        self.n_invalid = n_invalid
        self.min_value = min_value
