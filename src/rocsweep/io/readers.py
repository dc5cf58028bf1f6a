"""Unified observation reader -- auto-detects format by extension."""
from __future__ import annotations

import csv
import json
from io import StringIO
from pathlib import Path
from typing import Any

import structlog

from rocsweep.core.exceptions import InvalidInputError, UnsupportedFormatError
from rocsweep.core.models import Observation
from rocsweep.roc.sweep import binary_label, ingest

logger = structlog.get_logger(__name__)

SUPPORTED_EXTENSIONS = {".csv", ".json", ".xlsx"}


def read_observations(
    path: Path,
    label_column: str = "label",
    score_column: str = "score",
    positive_label: str | None = None,
) -> tuple[Observation, ...]:
    """Read (label, score) observations from a file.

    CSV and Excel files need a header row with the label and score
    columns. JSON files hold either a list of objects with those keys or
    an object with parallel ``labels`` and ``scores`` arrays.

    Args:
        path: Path to the input file.
        label_column: Name of the ground-truth label column.
        score_column: Name of the predicted score column.
        positive_label: Label value (compared as text) that marks the
            positive class. Without it labels must read as 0/1.

    Returns:
        Observations in file order.

    Raises:
        UnsupportedFormatError: If file extension is not recognized.
        FileNotFoundError: If file does not exist.
        InvalidInputError: If a column is missing or a value is invalid.
    """
    path = Path(path)
    ext = path.suffix.lower()

    # Check extension first so unsupported formats fail fast
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(ext, sorted(SUPPORTED_EXTENSIONS))

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if ext == ".csv":
        rows = _read_csv(path)
        fmt = "csv"
    elif ext == ".json":
        rows = _read_json(path, label_column, score_column)
        fmt = "json"
    else:
        rows = _read_excel(path)
        fmt = "excel"

    labels: list[int] = []
    scores: list[Any] = []
    for i, row in enumerate(rows):
        if label_column not in row or score_column not in row:
            msg = (
                f"Row {i} of {path} is missing '{label_column}' "
                f"or '{score_column}'"
            )
            raise InvalidInputError(msg)
        labels.append(_parse_label(row[label_column], positive_label))
        scores.append(row[score_column])

    observations = ingest(labels, scores)
    logger.info(
        "read_observations",
        path=str(path),
        format=fmt,
        n_observations=len(observations),
    )
    return observations


def _parse_label(value: Any, positive_label: str | None) -> int:
    """Map a raw label cell to 0/1.

    Args:
        value: Raw cell value.
        positive_label: Text of the positive class, if given.

    Returns:
        1 for the positive class, 0 otherwise.

    Raises:
        InvalidInputError: If the label is not recognizably binary.
    """
    if positive_label is not None:
        return 1 if str(value).strip() == positive_label.strip() else 0

    try:
        return binary_label(value)
    except ValueError as exc:
        msg = f"Label {value!r} is not binary; pass positive_label to map it"
        raise InvalidInputError(msg) from exc


def _read_csv(path: Path) -> list[dict[str, Any]]:
    """Read CSV file with delimiter auto-detection.

    Args:
        path: Path to .csv file.

    Returns:
        List of raw row dicts.
    """
    text = path.read_text(encoding="utf-8-sig")
    try:
        dialect = csv.Sniffer().sniff(text[:4096], delimiters=",;\t")
        delimiter = dialect.delimiter
    except csv.Error:
        delimiter = ","

    reader = csv.DictReader(StringIO(text), delimiter=delimiter)
    return list(reader)


def _read_json(
    path: Path,
    label_column: str,
    score_column: str,
) -> list[dict[str, Any]]:
    """Read JSON rows or parallel label/score arrays.

    Args:
        path: Path to .json file.
        label_column: Key to store array labels under.
        score_column: Key to store array scores under.

    Returns:
        List of raw row dicts.

    Raises:
        InvalidInputError: If the document has neither supported shape.
    """
    data = json.loads(path.read_text(encoding="utf-8"))

    if isinstance(data, dict) and "labels" in data and "scores" in data:
        labels, scores = data["labels"], data["scores"]
        if len(labels) != len(scores):
            msg = f"Mismatched length: labels={len(labels)}, scores={len(scores)}"
            raise InvalidInputError(msg, n_labels=len(labels), n_scores=len(scores))
        return [
            {label_column: label, score_column: score}
            for label, score in zip(labels, scores, strict=True)
        ]

    if isinstance(data, list) and all(isinstance(row, dict) for row in data):
        return data

    msg = f"JSON must be a list of objects or hold 'labels' and 'scores': {path}"
    raise InvalidInputError(msg)


def _read_excel(path: Path) -> list[dict[str, Any]]:
    """Read the first sheet of an Excel file via pandas.

    Args:
        path: Path to .xlsx file.

    Returns:
        List of raw row dicts.
    """
    import pandas as pd  # noqa: PLC0415

    df = pd.read_excel(path, engine="openpyxl")
    rows: list[dict[str, Any]] = df.to_dict(orient="records")
    return rows
