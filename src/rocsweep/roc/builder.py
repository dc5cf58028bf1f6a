"""Assemble swept points into an ordered, anchored ROC curve."""
from __future__ import annotations

import math
from collections.abc import Sequence

import structlog

from rocsweep.core.exceptions import EmptyCurveError
from rocsweep.core.models import CurvePoint, ROCCurve

logger = structlog.get_logger(__name__)

ORIGIN = CurvePoint(threshold=math.inf, fpr=0.0, tpr=0.0)
CORNER = CurvePoint(threshold=-math.inf, fpr=1.0, tpr=1.0)


def build(
    points: Sequence[CurvePoint],
    drop_intermediate: bool = True,
) -> ROCCurve:
    """Sort, deduplicate, and anchor curve points.

    Points are ordered by ascending FPR, then ascending TPR. Of several
    points sharing the same (FPR, TPR) only the one with the highest
    threshold is kept. (0, 0) and (1, 1) are added if missing.

    Args:
        points: Points from a threshold sweep, in any order.
        drop_intermediate: Drop interior points lying on a straight line
            between their neighbours. The area is unchanged.

    Returns:
        The assembled ROCCurve.

    Raises:
        EmptyCurveError: If ``points`` is empty.
    """
    if len(points) == 0:
        msg = "Cannot build a curve from zero points"
        raise EmptyCurveError(msg)

    ordered = sorted(points, key=lambda p: (p.fpr, p.tpr, -p.threshold))

    unique: list[CurvePoint] = []
    for point in ordered:
        if unique and (unique[-1].fpr, unique[-1].tpr) == (point.fpr, point.tpr):
            continue
        unique.append(point)

    anchors_added = 0
    if (unique[0].fpr, unique[0].tpr) != (0.0, 0.0):
        unique.insert(0, ORIGIN)
        anchors_added += 1
    if (unique[-1].fpr, unique[-1].tpr) != (1.0, 1.0):
        unique.append(CORNER)
        anchors_added += 1

    n_unique = len(unique)
    if drop_intermediate:
        unique = _drop_collinear(unique)

    logger.debug(
        "curve_built",
        n_input=len(points),
        n_unique=n_unique,
        n_points=len(unique),
        anchors_added=anchors_added,
    )
    return ROCCurve(points=tuple(unique))


def _drop_collinear(points: list[CurvePoint]) -> list[CurvePoint]:
    """Remove interior points on the segment joining their neighbours."""
    if len(points) <= 2:
        return points

    kept = [points[0]]
    for current, following in zip(points[1:-1], points[2:], strict=True):
        previous = kept[-1]
        cross = (current.fpr - previous.fpr) * (following.tpr - current.tpr) - (
            current.tpr - previous.tpr
        ) * (following.fpr - current.fpr)
        if cross != 0.0:
            kept.append(current)
    kept.append(points[-1])
    return kept
