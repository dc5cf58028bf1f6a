"""Tests for the generic bootstrap helper."""
from __future__ import annotations

import pytest

from rocsweep.core.exceptions import DegenerateDatasetError
from rocsweep.roc.bootstrap import bootstrap_ci


def _mean(data: tuple[list[float], ...]) -> float:
    values = data[0]
    return sum(values) / len(values)


class TestBootstrapCI:
    """Tests for bootstrap_ci."""

    def test_constant_data_zero_width(self) -> None:
        result = bootstrap_ci(_mean, ([2.0] * 10,), n_iter=50)
        assert result.point == 2.0
        assert result.ci_lower == 2.0
        assert result.ci_upper == 2.0
        assert result.n_valid == 50

    def test_wider_confidence_wider_interval(self) -> None:
        data = ([0.1, 0.4, 0.35, 0.8, 0.9, 0.2, 0.55, 0.6],)
        narrow = bootstrap_ci(_mean, data, n_iter=500, seed=11, confidence=0.5)
        wide = bootstrap_ci(_mean, data, n_iter=500, seed=11, confidence=0.99)
        assert wide.ci_lower <= narrow.ci_lower
        assert wide.ci_upper >= narrow.ci_upper

    def test_all_resamples_skipped_collapses_to_point(self) -> None:
        calls = {"n": 0}

        def _flaky(data: tuple[list[float], ...]) -> float:
            calls["n"] += 1
            if calls["n"] > 1:
                raise DegenerateDatasetError(n_positive=1, n_negative=0)
            return 0.7

        result = bootstrap_ci(_flaky, ([1.0, 2.0],), n_iter=5)
        assert (result.point, result.ci_lower, result.ci_upper) == (0.7, 0.7, 0.7)
        assert result.n_valid == 0

    def test_invalid_confidence_raises(self) -> None:
        with pytest.raises(ValueError, match="confidence"):
            bootstrap_ci(_mean, ([1.0],), confidence=1.0)

    def test_invalid_n_iter_raises(self) -> None:
        with pytest.raises(ValueError, match="n_iter"):
            bootstrap_ci(_mean, ([1.0],), n_iter=0)
