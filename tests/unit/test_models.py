"""Tests for core value models."""
from __future__ import annotations

import json
import math

import pydantic
import pytest

from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import DegenerateDatasetError
from rocsweep.core.models import (
    ConfusionCounts,
    CurvePoint,
    Observation,
    ROCCurve,
    ROCResult,
)


class TestObservation:
    """Tests for Observation."""

    def test_valid(self) -> None:
        obs = Observation(label=1, score=0.7)
        assert obs.label == 1
        assert obs.score == 0.7

    def test_scores_outside_unit_interval_allowed(self) -> None:
        """Scores are any finite real, e.g. SVM margins."""
        assert Observation(label=0, score=-3.5).score == -3.5

    def test_non_binary_label_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Observation(label=2, score=0.5)

    def test_nan_score_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Observation(label=1, score=math.nan)

    def test_frozen(self) -> None:
        obs = Observation(label=1, score=0.5)
        with pytest.raises(pydantic.ValidationError):
            obs.score = 0.9  # type: ignore[misc]


class TestConfusionCounts:
    """Tests for ConfusionCounts."""

    def test_totals(self) -> None:
        counts = ConfusionCounts(tp=3, fp=1, tn=4, fn=2)
        assert counts.positives == 5
        assert counts.negatives == 5

    def test_rates(self) -> None:
        counts = ConfusionCounts(tp=3, fp=1, tn=3, fn=1)
        assert counts.rates() == (0.25, 0.75)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ConfusionCounts(tp=-1, fp=0, tn=0, fn=0)

    def test_no_negatives_raises_by_default(self) -> None:
        counts = ConfusionCounts(tp=2, fp=0, tn=0, fn=1)
        with pytest.raises(DegenerateDatasetError):
            counts.rates()

    def test_undefined_rate_as_zero(self) -> None:
        counts = ConfusionCounts(tp=2, fp=0, tn=0, fn=2)
        assert counts.rates(UndefinedRatePolicy.ZERO) == (0.0, 0.5)

    def test_undefined_rate_as_one(self) -> None:
        counts = ConfusionCounts(tp=0, fp=1, tn=3, fn=0)
        assert counts.rates(UndefinedRatePolicy.ONE) == (0.25, 1.0)


class TestROCCurve:
    """Tests for ROCCurve accessors."""

    def test_columns(self) -> None:
        curve = ROCCurve(
            points=(
                CurvePoint(threshold=math.inf, fpr=0.0, tpr=0.0),
                CurvePoint(threshold=0.5, fpr=0.0, tpr=1.0),
                CurvePoint(threshold=-math.inf, fpr=1.0, tpr=1.0),
            )
        )
        assert curve.fpr == [0.0, 0.0, 1.0]
        assert curve.tpr == [0.0, 1.0, 1.0]
        assert curve.thresholds == [math.inf, 0.5, -math.inf]
        assert len(curve) == 3

    def test_result_json_nulls_infinite_thresholds(self) -> None:
        curve = ROCCurve(
            points=(
                CurvePoint(threshold=math.inf, fpr=0.0, tpr=0.0),
                CurvePoint(threshold=-math.inf, fpr=1.0, tpr=1.0),
            )
        )
        result = ROCResult(curve=curve, auc=0.5, n_positive=1, n_negative=1)
        dumped = json.loads(result.model_dump_json())
        assert dumped["curve"]["points"][0]["threshold"] is None
        assert dumped["auc"] == 0.5
