"""Threshold sweep over scored observations.

Turns (label, score) pairs into confusion counts and ROC points for a set
of decision thresholds. An observation is predicted positive when
``score > threshold``; a score equal to the threshold counts as negative.
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Hashable, Sequence
from typing import Any

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import ValidationError

from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import (
    DegenerateDatasetError,
    EmptyCurveError,
    InvalidInputError,
    InvalidThresholdError,
)
from rocsweep.core.models import ConfusionCounts, CurvePoint, Observation

logger = structlog.get_logger(__name__)

# Always swept in addition to the observed scores.
SENTINEL_THRESHOLDS = (0.0, 1.0)

TRUE_LABELS = frozenset({"1", "true", "yes", "positive"})
FALSE_LABELS = frozenset({"0", "false", "no", "negative"})


def binary_label(value: Any) -> int:
    """Coerce a 0/1 label to an int.

    Accepts bools, any real number equal to 0 or 1 (so ``1.0`` and
    ``np.float64(0.0)`` work), and text such as ``"1"``, ``"0.0"``,
    ``"true"`` or ``"negative"``.

    Raises:
        ValueError: If the value is not recognizably binary.
    """
    if isinstance(value, bool | np.bool_):
        return int(value)
    if isinstance(value, numbers.Real):
        if value in (0, 1):
            return int(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_LABELS:
            return 1
        if text in FALSE_LABELS:
            return 0
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            if number in (0.0, 1.0):
                return int(number)
    msg = f"Label {value!r} is not binary"
    raise ValueError(msg)


def ingest(
    labels: Sequence[Any],
    scores: Sequence[float],
    positive_label: Hashable | None = None,
) -> tuple[Observation, ...]:
    """Pair labels with scores into an ordered tuple of observations.

    Args:
        labels: Ground-truth labels. Must read as 0/1 unless
            ``positive_label`` is given.
        scores: Predicted scores, one per label.
        positive_label: Label value that marks the positive class. Every
            other value becomes the negative class.

    Returns:
        Observations in input order.

    Raises:
        InvalidInputError: If lengths differ, a label is not binary, or a
            score is not a finite number.
        EmptyCurveError: If there are no observations.
    """
    n_labels = len(labels)
    n_scores = len(scores)
    if n_labels != n_scores:
        msg = f"Mismatched length: labels={n_labels}, scores={n_scores}"
        raise InvalidInputError(msg, n_labels=n_labels, n_scores=n_scores)
    if n_labels == 0:
        msg = "Observations must not be empty"
        raise EmptyCurveError(msg)

    observations: list[Observation] = []
    for i, (label, score) in enumerate(zip(labels, scores, strict=True)):
        try:
            if positive_label is not None:
                binary = 1 if label == positive_label else 0
            else:
                binary = binary_label(label)
            observations.append(Observation(label=binary, score=float(score)))
        except (TypeError, ValueError, ValidationError) as exc:
            msg = f"Invalid observation at index {i}: label={label!r}, score={score!r}"
            raise InvalidInputError(msg, n_labels=n_labels, n_scores=n_scores) from exc

    return tuple(observations)


def default_thresholds(observations: Sequence[Observation]) -> tuple[float, ...]:
    """Distinct observed scores plus the sentinels, highest first.

    A threshold strictly between two adjacent scores gives the same counts
    as the lower score, so sweeping the scores themselves yields every
    distinct point of the curve.
    """
    distinct = {obs.score for obs in observations}
    distinct.update(SENTINEL_THRESHOLDS)
    return tuple(sorted(distinct, reverse=True))


def confusion_at(
    observations: Sequence[Observation],
    threshold: float,
) -> ConfusionCounts:
    """Count the confusion matrix at one threshold in a single pass.

    Args:
        observations: Scored observations.
        threshold: Decision threshold.

    Returns:
        ConfusionCounts for ``score > threshold``.
    """
    tp = fp = tn = fn = 0
    for obs in observations:
        predicted = obs.score > threshold
        if obs.label == 1:
            if predicted:
                tp += 1
            else:
                fn += 1
        elif predicted:
            fp += 1
        else:
            tn += 1
    return ConfusionCounts(tp=tp, fp=fp, tn=tn, fn=fn)


class ThresholdSweep:
    """Confusion counts for any number of thresholds from a single sort.

    Observations are sorted once by score. The number of positives at or
    below a threshold is then a binary search into the cumulative positive
    count, so ``k`` thresholds cost ``O((n + k) log n)`` instead of
    ``O(n * k)`` for repeated :func:`confusion_at` calls.
    """

    def __init__(self, observations: Sequence[Observation]) -> None:
        if len(observations) == 0:
            msg = "Observations must not be empty"
            raise EmptyCurveError(msg)

        self._observations = tuple(observations)
        scores: NDArray[np.float64] = np.fromiter(
            (obs.score for obs in observations), dtype=np.float64
        )
        labels: NDArray[np.int64] = np.fromiter(
            (obs.label for obs in observations), dtype=np.int64
        )
        order = np.argsort(scores, kind="stable")
        self._sorted_scores = scores[order]
        # _cum_positive[i] = positives among the i lowest scores
        self._cum_positive: NDArray[np.int64] = np.concatenate(
            ([0], np.cumsum(labels[order]))
        )
        self.n_positive = int(self._cum_positive[-1])
        self.n_negative = len(self._observations) - self.n_positive

    @property
    def observations(self) -> tuple[Observation, ...]:
        return self._observations

    def counts(self, threshold: float) -> ConfusionCounts:
        """Confusion counts at a single threshold."""
        if math.isnan(threshold):
            msg = "Threshold must not be NaN"
            raise InvalidThresholdError(msg)
        return self._counts_below(self._n_at_or_below(np.asarray([threshold]))[0])

    def run(
        self,
        thresholds: Sequence[float] = (),
        policy: UndefinedRatePolicy = UndefinedRatePolicy.RAISE,
    ) -> tuple[CurvePoint, ...]:
        """Emit one curve point per threshold.

        Args:
            thresholds: Thresholds to sweep, in output order. Empty means
                :func:`default_thresholds`.
            policy: How to resolve an undefined FPR or TPR.

        Returns:
            Curve points in threshold order, not deduplicated.

        Raises:
            DegenerateDatasetError: If only one class is present and the
                policy is RAISE.
            InvalidThresholdError: If a threshold is NaN.
        """
        if policy == UndefinedRatePolicy.RAISE and (
            self.n_positive == 0 or self.n_negative == 0
        ):
            raise DegenerateDatasetError(self.n_positive, self.n_negative)

        if len(thresholds) == 0:
            thresholds = default_thresholds(self._observations)

        values = [float(t) for t in thresholds]
        if any(math.isnan(t) for t in values):
            msg = "Thresholds must not be NaN"
            raise InvalidThresholdError(msg)

        below = self._n_at_or_below(np.asarray(values, dtype=np.float64))
        points = tuple(
            CurvePoint(threshold=t, fpr=fpr, tpr=tpr)
            for t, (fpr, tpr) in zip(
                values,
                (self._counts_below(int(n)).rates(policy) for n in below),
                strict=True,
            )
        )

        logger.debug(
            "threshold_sweep",
            n_observations=len(self._observations),
            n_positive=self.n_positive,
            n_negative=self.n_negative,
            n_thresholds=len(points),
            policy=str(policy),
        )
        return points

    def _n_at_or_below(self, thresholds: NDArray[np.float64]) -> NDArray[np.intp]:
        return np.searchsorted(self._sorted_scores, thresholds, side="right")

    def _counts_below(self, n_below: int) -> ConfusionCounts:
        fn = int(self._cum_positive[n_below])
        tn = int(n_below) - fn
        return ConfusionCounts(
            tp=self.n_positive - fn,
            fp=self.n_negative - tn,
            tn=tn,
            fn=fn,
        )


def sweep(
    observations: Sequence[Observation],
    thresholds: Sequence[float] = (),
    policy: UndefinedRatePolicy = UndefinedRatePolicy.RAISE,
) -> tuple[CurvePoint, ...]:
    """Compute one ROC point per threshold.

    Args:
        observations: Non-empty sequence of observations.
        thresholds: Thresholds to sweep. Empty means every distinct score
            plus 0 and 1.
        policy: How to resolve an undefined FPR or TPR.

    Returns:
        Curve points, one per threshold, in threshold order.
    """
    return ThresholdSweep(observations).run(thresholds, policy)
