"""Operating point selection on an ROC curve."""
from __future__ import annotations

from rocsweep.core.exceptions import InvalidThresholdError
from rocsweep.core.models import CurvePoint, ROCCurve


def youden_j(point: CurvePoint) -> float:
    """Youden's J statistic (sensitivity + specificity - 1)."""
    return point.tpr - point.fpr


def select_threshold(
    curve: ROCCurve,
    min_tpr: float | None = None,
) -> CurvePoint:
    """Pick an operating point on the curve.

    Without a constraint the point with the largest Youden's J wins. With
    ``min_tpr``, the point with the lowest FPR among those reaching the
    required TPR wins. Ties go to the higher threshold.

    Args:
        curve: An assembled ROC curve.
        min_tpr: Minimum true positive rate the point must reach.

    Returns:
        The selected CurvePoint.

    Raises:
        InvalidThresholdError: If ``min_tpr`` is outside [0, 1] or no
            point reaches it.
    """
    if min_tpr is None:
        return max(curve.points, key=lambda p: (youden_j(p), p.threshold))

    if not 0.0 <= min_tpr <= 1.0:
        msg = f"min_tpr must be in [0, 1], got {min_tpr}"
        raise InvalidThresholdError(msg)

    eligible = [p for p in curve.points if p.tpr >= min_tpr]
    if not eligible:
        msg = f"No curve point reaches tpr >= {min_tpr}"
        raise InvalidThresholdError(msg)
    return min(eligible, key=lambda p: (p.fpr, -p.threshold))
