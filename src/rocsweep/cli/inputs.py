"""Shared input handling for rocsweep commands."""
from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from rocsweep.config import RocSweepConfig, load_config
from rocsweep.core.exceptions import RocSweepError
from rocsweep.core.models import Observation
from rocsweep.io.readers import read_observations


def fail(exc: Exception) -> NoReturn:
    """Report a library error and exit with status 1."""
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def load_settings(config: Path | None) -> RocSweepConfig:
    """Load the YAML config if one was given, else the defaults."""
    if config is None:
        return RocSweepConfig()
    try:
        return load_config(config)
    except (FileNotFoundError, RocSweepError) as exc:
        fail(exc)


def load_input(
    path: Path,
    label_column: str,
    score_column: str,
    positive_label: str | None,
) -> tuple[Observation, ...]:
    """Read observations, exiting with a message on failure."""
    try:
        return read_observations(
            path,
            label_column=label_column,
            score_column=score_column,
            positive_label=positive_label,
        )
    except (FileNotFoundError, RocSweepError) as exc:
        fail(exc)


def split(observations: tuple[Observation, ...]) -> tuple[list[int], list[float]]:
    """Unzip observations into parallel label and score lists."""
    return [o.label for o in observations], [o.score for o in observations]
