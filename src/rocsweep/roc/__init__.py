"""ROC computation — sweep, curve assembly, integration, and resampling."""
from __future__ import annotations

from rocsweep.roc.area import integrate
from rocsweep.roc.bootstrap import bootstrap_ci
from rocsweep.roc.builder import build
from rocsweep.roc.pipeline import bootstrap_auc, compute_roc
from rocsweep.roc.selection import select_threshold, youden_j
from rocsweep.roc.sweep import (
    ThresholdSweep,
    confusion_at,
    default_thresholds,
    ingest,
    sweep,
)

__all__ = [
    "ThresholdSweep",
    "bootstrap_auc",
    "bootstrap_ci",
    "build",
    "compute_roc",
    "confusion_at",
    "default_thresholds",
    "ingest",
    "integrate",
    "select_threshold",
    "sweep",
    "youden_j",
]
