"""I/O module — read scored observations, write ROC curves."""
from __future__ import annotations

from rocsweep.io.readers import SUPPORTED_EXTENSIONS, read_observations
from rocsweep.io.writers import SUPPORTED_WRITE_FORMATS, format_curve_csv, write_curve

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "SUPPORTED_WRITE_FORMATS",
    "format_curve_csv",
    "read_observations",
    "write_curve",
]
