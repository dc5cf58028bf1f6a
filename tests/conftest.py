"""Shared pytest fixtures for rocsweep tests."""
from __future__ import annotations

import os

# Prevent Rich/Typer from emitting ANSI escape codes in CLI output.
os.environ["NO_COLOR"] = "1"

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from rocsweep.core.models import Observation
from rocsweep.roc.sweep import ingest


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any logging configuration a CLI invocation installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def separable() -> tuple[Observation, ...]:
    """All positives score strictly above all negatives."""
    return ingest([1, 1, 0, 0], [0.9, 0.6, 0.4, 0.1])


@pytest.fixture
def tied() -> tuple[Observation, ...]:
    """Both classes present, every score identical."""
    return ingest([1, 0, 1, 0], [0.5, 0.5, 0.5, 0.5])


@pytest.fixture
def mixed() -> tuple[Observation, ...]:
    """Overlapping classes with one tied score across classes."""
    return ingest(
        [0, 0, 1, 1, 1, 0, 1, 0, 1, 0],
        [0.1, 0.3, 0.9, 0.8, 0.7, 0.2, 0.65, 0.4, 0.4, 0.05],
    )


@pytest.fixture
def observations_csv(tmp_path: Path) -> Path:
    """A small CSV of labels and scores."""
    path = tmp_path / "scores.csv"
    path.write_text(
        "label,score\n"
        "1,0.9\n"
        "1,0.6\n"
        "0,0.4\n"
        "0,0.1\n"
    )
    return path
