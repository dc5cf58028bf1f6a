"""ROC curve writers -- serialize curve points and the AUC."""
from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path

import structlog

from rocsweep.core.exceptions import UnsupportedFormatError
from rocsweep.core.models import ROCResult

logger = structlog.get_logger(__name__)

SUPPORTED_WRITE_FORMATS = {".csv", ".json"}

CURVE_FIELDS = ["threshold", "fpr", "tpr"]


def format_curve_csv(result: ROCResult) -> str:
    """Render a curve as CSV text.

    One ``threshold,fpr,tpr`` record per curve point after a header row,
    followed by a trailing ``auc,<value>`` line. Anchor thresholds are
    written as ``inf`` and ``-inf``.

    Args:
        result: ROC computation result.

    Returns:
        CSV text ending in a newline.
    """
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CURVE_FIELDS)
    for point in result.curve.points:
        writer.writerow([repr(point.threshold), repr(point.fpr), repr(point.tpr)])
    writer.writerow(["auc", repr(result.auc)])
    return buffer.getvalue()


def write_curve(
    result: ROCResult,
    path: Path,
    format_type: str | None = None,
) -> Path:
    """Write an ROC result to file. Auto-detect format from extension if not given.

    Args:
        result: ROC computation result.
        path: Output file path.
        format_type: Optional format override ("csv", "json").

    Returns:
        Path to the written file.

    Raises:
        UnsupportedFormatError: If format is not recognized.
    """
    path = Path(path)
    fmt = format_type or _detect_format(path)

    if fmt == "csv":
        text = format_curve_csv(result)
    elif fmt == "json":
        # Infinite anchor thresholds serialize as null
        text = result.model_dump_json(indent=2)
    else:
        raise UnsupportedFormatError(fmt, ["csv", "json"])

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(
        "write_curve",
        path=str(path),
        format=fmt,
        n_points=len(result.curve),
        auc=result.auc,
    )
    return path


def _detect_format(path: Path) -> str:
    """Detect write format from file extension.

    Args:
        path: Output file path.

    Returns:
        Format string.

    Raises:
        UnsupportedFormatError: If extension not recognized.
    """
    ext = path.suffix.lower()
    fmt_map = {".csv": "csv", ".json": "json"}
    if ext not in fmt_map:
        raise UnsupportedFormatError(ext, sorted(SUPPORTED_WRITE_FORMATS))
    return fmt_map[ext]
