"""End-to-end ROC pipeline: ingest, sweep, build, integrate."""
from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any

import structlog

from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.models import BootstrapResult, ROCResult
from rocsweep.roc.area import integrate
from rocsweep.roc.bootstrap import bootstrap_ci
from rocsweep.roc.builder import build
from rocsweep.roc.sweep import ThresholdSweep, ingest, sweep

logger = structlog.get_logger(__name__)


def compute_roc(
    labels: Sequence[Any],
    scores: Sequence[float],
    thresholds: Sequence[float] = (),
    *,
    positive_label: Hashable | None = None,
    policy: UndefinedRatePolicy = UndefinedRatePolicy.RAISE,
    drop_intermediate: bool = True,
) -> ROCResult:
    """Compute the ROC curve and its area for scored labels.

    Args:
        labels: Ground-truth labels (0/1 unless ``positive_label`` is set).
        scores: Predicted scores, higher meaning more likely positive.
        thresholds: Thresholds to sweep. Empty means every distinct score
            plus 0 and 1.
        positive_label: Label value that marks the positive class.
        policy: How to resolve an undefined FPR or TPR.
        drop_intermediate: Drop collinear interior curve points.

    Returns:
        ROCResult with the curve, AUC, and class counts.

    Raises:
        InvalidInputError: If labels and scores cannot be paired.
        EmptyCurveError: If there are no observations.
        DegenerateDatasetError: If only one class is present and the
            policy is RAISE.
    """
    observations = ingest(labels, scores, positive_label=positive_label)
    swept = ThresholdSweep(observations)
    points = swept.run(thresholds, policy)
    curve = build(points, drop_intermediate=drop_intermediate)
    auc = integrate(curve)

    logger.info(
        "roc_computed",
        n_observations=len(observations),
        n_thresholds=len(points),
        n_points=len(curve),
        auc=auc,
    )
    return ROCResult(
        curve=curve,
        auc=auc,
        n_positive=swept.n_positive,
        n_negative=swept.n_negative,
    )


def bootstrap_auc(
    labels: Sequence[Any],
    scores: Sequence[float],
    n_iter: int = 1000,
    seed: int = 42,
    confidence: float = 0.95,
    *,
    positive_label: Hashable | None = None,
    policy: UndefinedRatePolicy = UndefinedRatePolicy.RAISE,
) -> BootstrapResult:
    """Bootstrap a confidence interval for the AUC.

    Under the RAISE policy, resamples that contain a single class are
    skipped. The ZERO and ONE policies score them like any other sample.

    Args:
        labels: Ground-truth labels.
        scores: Predicted scores.
        n_iter: Number of bootstrap iterations.
        seed: Random seed for reproducibility.
        confidence: Central coverage of the interval.
        positive_label: Label value that marks the positive class.
        policy: How to resolve an undefined FPR or TPR.

    Returns:
        BootstrapResult for the AUC.
    """
    observations = ingest(labels, scores, positive_label=positive_label)

    def _auc(sample: tuple[Any, ...]) -> float:
        return integrate(build(sweep(sample[0], policy=policy)))

    result = bootstrap_ci(
        _auc, (observations,), n_iter=n_iter, seed=seed, confidence=confidence
    )
    logger.info(
        "auc_bootstrapped",
        point=result.point,
        ci_lower=result.ci_lower,
        ci_upper=result.ci_upper,
        n_valid=result.n_valid,
    )
    return result
