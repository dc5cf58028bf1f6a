"""Trapezoidal area under an ROC curve."""
from __future__ import annotations

import numpy as np

from rocsweep.core.exceptions import InvalidCurveError
from rocsweep.core.models import ROCCurve


def integrate(curve: ROCCurve) -> float:
    """Integrate TPR over FPR with the trapezoid rule.

    Args:
        curve: A curve produced by :func:`rocsweep.roc.builder.build`.

    Returns:
        Area under the curve in [0, 1].

    Raises:
        InvalidCurveError: If the curve breaks its range, ordering, or
            anchor invariants.
    """
    _check_invariants(curve)

    area = float(np.trapezoid(curve.tpr, curve.fpr))
    # rounded partial sums can overshoot by one ulp
    return min(1.0, max(0.0, area))


def _check_invariants(curve: ROCCurve) -> None:
    points = curve.points
    if len(points) < 2:
        msg = f"Curve needs at least two points, got {len(points)}"
        raise InvalidCurveError(msg)

    for i, point in enumerate(points):
        if not (0.0 <= point.fpr <= 1.0 and 0.0 <= point.tpr <= 1.0):
            msg = f"Point {i} outside the unit square: fpr={point.fpr}, tpr={point.tpr}"
            raise InvalidCurveError(msg)
        if i > 0 and point.fpr < points[i - 1].fpr:
            msg = f"FPR decreases at point {i}: {points[i - 1].fpr} -> {point.fpr}"
            raise InvalidCurveError(msg)

    first, last = points[0], points[-1]
    if (first.fpr, first.tpr) != (0.0, 0.0) or (last.fpr, last.tpr) != (1.0, 1.0):
        msg = "Curve must start at (0, 0) and end at (1, 1)"
        raise InvalidCurveError(msg)
