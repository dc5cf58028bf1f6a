"""Tests for the custom exception hierarchy."""
from rocsweep.core.exceptions import (
    ConfigError,
    DegenerateDatasetError,
    EmptyCurveError,
    InvalidCurveError,
    InvalidInputError,
    InvalidThresholdError,
    RocSweepError,
    UnsupportedFormatError,
)


def test_base_exception() -> None:
    err = RocSweepError("base error")
    assert str(err) == "base error"


def test_degenerate_dataset_stores_counts() -> None:
    err = DegenerateDatasetError(n_positive=3, n_negative=0)
    assert isinstance(err, RocSweepError)
    assert err.n_positive == 3
    assert err.n_negative == 0
    assert "one class" in str(err)


def test_invalid_input_stores_lengths() -> None:
    err = InvalidInputError("lengths differ", n_labels=2, n_scores=3)
    assert err.n_labels == 2
    assert err.n_scores == 3


def test_unsupported_format() -> None:
    err = UnsupportedFormatError(".xyz", supported=[".csv", ".json"])
    assert ".xyz" in str(err)
    assert err.format == ".xyz"
    assert err.supported == [".csv", ".json"]


def test_curve_and_config_errors_share_base() -> None:
    for cls in (EmptyCurveError, InvalidCurveError, InvalidThresholdError, ConfigError):
        assert issubclass(cls, RocSweepError)
