"""Tests for operating point selection."""
from __future__ import annotations

import math

import pytest

from rocsweep.core.exceptions import InvalidThresholdError
from rocsweep.core.models import CurvePoint, ROCCurve
from rocsweep.roc.builder import build
from rocsweep.roc.selection import select_threshold, youden_j
from rocsweep.roc.sweep import ingest, sweep


@pytest.fixture
def curve() -> ROCCurve:
    """Curve with every swept point kept."""
    obs = ingest(
        [0, 0, 1, 1, 1, 0, 1, 0, 1, 0],
        [0.1, 0.3, 0.9, 0.8, 0.7, 0.2, 0.65, 0.4, 0.4, 0.05],
    )
    return build(sweep(obs), drop_intermediate=False)


def test_youden_j() -> None:
    assert youden_j(CurvePoint(threshold=0.5, fpr=0.25, tpr=0.75)) == 0.5


class TestSelectThreshold:
    """Tests for select_threshold."""

    def test_maximizes_youden(self, curve: ROCCurve) -> None:
        point = select_threshold(curve)
        # (0.0, 0.8) and (0.2, 1.0) tie on J; the higher threshold wins
        assert point.threshold == 0.4
        assert (point.fpr, point.tpr) == (0.0, 0.8)

    def test_min_tpr_lowest_fpr(self, curve: ROCCurve) -> None:
        point = select_threshold(curve, min_tpr=0.9)
        assert point.threshold == 0.3
        assert (point.fpr, point.tpr) == (0.2, 1.0)

    def test_min_tpr_prefers_higher_threshold_on_equal_fpr(
        self, curve: ROCCurve
    ) -> None:
        point = select_threshold(curve, min_tpr=0.5)
        assert (point.fpr, point.tpr) == (0.0, 0.6)
        assert point.threshold == 0.65

    def test_min_tpr_zero_returns_origin(self, curve: ROCCurve) -> None:
        point = select_threshold(curve, min_tpr=0.0)
        assert (point.fpr, point.tpr) == (0.0, 0.0)

    def test_min_tpr_out_of_range_raises(self, curve: ROCCurve) -> None:
        with pytest.raises(InvalidThresholdError):
            select_threshold(curve, min_tpr=1.5)

    def test_unreachable_min_tpr_raises(self) -> None:
        partial = ROCCurve(
            points=(
                CurvePoint(threshold=math.inf, fpr=0.0, tpr=0.0),
                CurvePoint(threshold=0.5, fpr=0.5, tpr=0.5),
            )
        )
        with pytest.raises(InvalidThresholdError, match="reaches"):
            select_threshold(partial, min_tpr=0.9)
