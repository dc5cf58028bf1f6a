"""rocsweep — ROC curves and AUC computed from first principles.

Sweeps decision thresholds over (label, score) pairs, assembles the
ROC curve and integrates it with the trapezoid rule.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rocsweep")
except PackageNotFoundError:
    # Fallback for source-only usage before installation.
    __version__ = "0.1.0"
__license__ = "Apache-2.0"
