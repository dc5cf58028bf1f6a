"""Custom exception hierarchy for rocsweep.

Never use bare except clauses. Always catch specific exceptions.
"""
from __future__ import annotations


class RocSweepError(Exception):
    """Base exception for all rocsweep errors."""


# Dataset / input exceptions
class DegenerateDatasetError(RocSweepError):
    """Only one class is present, so FPR or TPR is undefined."""

    def __init__(self, n_positive: int, n_negative: int) -> None:
        super().__init__(
            "Cannot compute ROC with only one class present "
            f"(positives={n_positive}, negatives={n_negative})"
        )
        self.n_positive = n_positive
        self.n_negative = n_negative


class InvalidInputError(RocSweepError):
    """Labels and scores cannot be turned into observations."""

    def __init__(
        self,
        message: str,
        n_labels: int | None = None,
        n_scores: int | None = None,
    ) -> None:
        super().__init__(message)
        self.n_labels = n_labels
        self.n_scores = n_scores


class InvalidThresholdError(RocSweepError):
    """Threshold is not a usable number or cannot be satisfied."""


# Curve exceptions
class EmptyCurveError(RocSweepError):
    """No observations or no curve points to work with."""


class InvalidCurveError(RocSweepError):
    """A curve violates its ordering or range invariants."""


# I/O and configuration exceptions
class UnsupportedFormatError(RocSweepError):
    """Unsupported file format."""

    def __init__(self, format: str, supported: list[str] | None = None) -> None:  # noqa: A002
        supported_str = ", ".join(supported) if supported else "unknown"
        super().__init__(f"Unsupported format '{format}'. Supported: {supported_str}")
        self.format = format
        self.supported = supported or []


class ConfigError(RocSweepError):
    """Malformed configuration file."""
