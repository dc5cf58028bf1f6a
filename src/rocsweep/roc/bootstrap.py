"""Percentile bootstrap confidence intervals."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import structlog
from numpy.typing import NDArray

from rocsweep.core.exceptions import DegenerateDatasetError
from rocsweep.core.models import BootstrapResult

logger = structlog.get_logger(__name__)


def bootstrap_ci(
    metric_fn: Callable[[tuple[Any, ...]], float],
    data: tuple[Any, ...],
    n_iter: int = 1000,
    seed: int = 42,
    confidence: float = 0.95,
) -> BootstrapResult:
    """Compute a bootstrap confidence interval for a metric function.

    Args:
        metric_fn: Function that takes a tuple of parallel sequences and
            returns a float metric value.
        data: Tuple of parallel sequences (e.g., (labels, scores)).
        n_iter: Number of bootstrap iterations.
        seed: Random seed for reproducibility.
        confidence: Central coverage of the interval, in (0, 1).

    Returns:
        BootstrapResult with point estimate and interval bounds.

    Raises:
        ValueError: If ``confidence`` or ``n_iter`` is out of range.
    """
    if not 0.0 < confidence < 1.0:
        msg = f"confidence must be in (0, 1), got {confidence}"
        raise ValueError(msg)
    if n_iter < 1:
        msg = f"n_iter must be positive, got {n_iter}"
        raise ValueError(msg)

    rng = np.random.default_rng(seed)
    n_samples = len(data[0])

    # Point estimate on full data
    point = metric_fn(data)

    bootstrap_values: list[float] = []
    for _ in range(n_iter):
        indices: NDArray[np.intp] = rng.integers(0, n_samples, size=n_samples)
        resampled = tuple(
            [arr[i] for i in indices] for arr in data
        )
        try:
            bootstrap_values.append(metric_fn(resampled))
        except DegenerateDatasetError:
            # Resample drew a single class
            continue

    n_skipped = n_iter - len(bootstrap_values)
    if n_skipped:
        logger.warning(
            "bootstrap_resamples_skipped",
            n_skipped=n_skipped,
            n_iter=n_iter,
        )

    if len(bootstrap_values) == 0:
        return BootstrapResult(point=point, ci_lower=point, ci_upper=point)

    tail = (1.0 - confidence) / 2.0 * 100.0
    return BootstrapResult(
        point=point,
        ci_lower=float(np.percentile(bootstrap_values, tail)),
        ci_upper=float(np.percentile(bootstrap_values, 100.0 - tail)),
        n_valid=len(bootstrap_values),
    )
