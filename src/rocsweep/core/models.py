"""Core Pydantic value models for rocsweep.

All models are frozen: they are created fresh for every computation and
never mutated afterwards.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import DegenerateDatasetError


class Observation(BaseModel):
    """A single (ground-truth label, predicted score) pair.

    Attributes:
        label: Binary ground-truth label (1 = positive, 0 = negative).
        score: Predicted score; higher means more likely positive.
    """

    label: int
    score: float = Field(allow_inf_nan=False)

    model_config = {"frozen": True}

    @field_validator("label")
    @classmethod
    def _check_binary(cls, value: int) -> int:
        if value not in (0, 1):
            msg = f"label must be 0 or 1, got {value}"
            raise ValueError(msg)
        return value


class ConfusionCounts(BaseModel):
    """Confusion matrix counts at a single threshold.

    Attributes:
        tp: Positives scored above the threshold.
        fp: Negatives scored above the threshold.
        tn: Negatives at or below the threshold.
        fn: Positives at or below the threshold.
    """

    tp: int = Field(ge=0)
    fp: int = Field(ge=0)
    tn: int = Field(ge=0)
    fn: int = Field(ge=0)

    model_config = {"frozen": True}

    @property
    def positives(self) -> int:
        return self.tp + self.fn

    @property
    def negatives(self) -> int:
        return self.fp + self.tn

    def rates(
        self,
        policy: UndefinedRatePolicy = UndefinedRatePolicy.RAISE,
    ) -> tuple[float, float]:
        """Derive (FPR, TPR) from the counts.

        Args:
            policy: How to resolve a rate with a zero denominator.

        Returns:
            Tuple of false positive rate and true positive rate.

        Raises:
            DegenerateDatasetError: If a denominator is zero and the
                policy is RAISE.
        """
        if (self.positives == 0 or self.negatives == 0) and (
            policy == UndefinedRatePolicy.RAISE
        ):
            raise DegenerateDatasetError(self.positives, self.negatives)

        fallback = 1.0 if policy == UndefinedRatePolicy.ONE else 0.0
        fpr = self.fp / self.negatives if self.negatives > 0 else fallback
        tpr = self.tp / self.positives if self.positives > 0 else fallback
        return fpr, tpr


class CurvePoint(BaseModel):
    """One point of an ROC curve.

    Attributes:
        threshold: Decision threshold (``score > threshold`` is positive).
            Synthesized anchors use +inf for (0, 0) and -inf for (1, 1).
        fpr: False positive rate at this threshold.
        tpr: True positive rate at this threshold.
    """

    threshold: float
    fpr: float
    tpr: float

    model_config = {"frozen": True}


class ROCCurve(BaseModel):
    """Ordered ROC curve from (0, 0) to (1, 1).

    Points are sorted by ascending FPR, ties by ascending TPR, with no
    duplicate (FPR, TPR) pairs.

    Attributes:
        points: Curve points in plotting order.
    """

    points: tuple[CurvePoint, ...]

    model_config = {"frozen": True}

    @property
    def fpr(self) -> list[float]:
        return [p.fpr for p in self.points]

    @property
    def tpr(self) -> list[float]:
        return [p.tpr for p in self.points]

    @property
    def thresholds(self) -> list[float]:
        return [p.threshold for p in self.points]

    def __len__(self) -> int:
        return len(self.points)


class ROCResult(BaseModel):
    """ROC curve together with its area and class counts.

    Attributes:
        curve: The assembled ROC curve.
        auc: Area under the curve.
        n_positive: Number of positive observations.
        n_negative: Number of negative observations.
    """

    curve: ROCCurve
    auc: float
    n_positive: int
    n_negative: int

    model_config = {"frozen": True}


class BootstrapResult(BaseModel):
    """Bootstrap confidence interval result.

    Attributes:
        point: Point estimate on the full data.
        ci_lower: Lower bound of the interval.
        ci_upper: Upper bound of the interval.
        n_valid: Number of resamples that produced a value.
    """

    point: float
    ci_lower: float
    ci_upper: float
    n_valid: int = 0
