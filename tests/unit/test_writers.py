"""Tests for the curve writers."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from rocsweep.core.exceptions import UnsupportedFormatError
from rocsweep.core.models import ROCResult
from rocsweep.io.writers import format_curve_csv, write_curve
from rocsweep.roc.pipeline import compute_roc


@pytest.fixture
def result() -> ROCResult:
    return compute_roc([1, 1, 0, 0], [0.9, 0.6, 0.4, 0.1])


class TestFormatCurveCSV:
    """Tests for format_curve_csv."""

    def test_records_and_trailing_auc(self, result: ROCResult) -> None:
        lines = format_curve_csv(result).splitlines()
        assert lines == [
            "threshold,fpr,tpr",
            "1.0,0.0,0.0",
            "0.4,0.0,1.0",
            "0.0,1.0,1.0",
            "auc,1.0",
        ]

    def test_synthesized_anchors_written_as_inf(self) -> None:
        text = format_curve_csv(compute_roc([1, 0], [0.5, 0.5], [0.5]))
        assert text.splitlines()[-2] == "-inf,1.0,1.0"


class TestWriteCurve:
    """Tests for write_curve."""

    def test_csv(self, result: ROCResult, tmp_path: Path) -> None:
        path = write_curve(result, tmp_path / "out" / "curve.csv")
        assert path.exists()
        assert path.read_text() == format_curve_csv(result)

    def test_json(self, result: ROCResult, tmp_path: Path) -> None:
        path = write_curve(result, tmp_path / "curve.json")
        data = json.loads(path.read_text())
        assert data["auc"] == 1.0
        assert data["n_positive"] == 2
        assert len(data["curve"]["points"]) == 3

    def test_format_override(self, result: ROCResult, tmp_path: Path) -> None:
        path = write_curve(result, tmp_path / "curve.txt", format_type="csv")
        assert path.read_text().startswith("threshold,fpr,tpr")

    def test_unsupported_extension(self, result: ROCResult, tmp_path: Path) -> None:
        with pytest.raises(UnsupportedFormatError):
            write_curve(result, tmp_path / "curve.xlsx")
