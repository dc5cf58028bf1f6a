"""rocsweep threshold — Pick an operating point on the ROC curve."""
from __future__ import annotations

import math
from pathlib import Path

import structlog
import typer

from rocsweep.cli.inputs import fail, load_input, load_settings, split
from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import RocSweepError
from rocsweep.roc.pipeline import compute_roc
from rocsweep.roc.selection import select_threshold, youden_j

logger = structlog.get_logger(__name__)

threshold_app = typer.Typer(help="Select a decision threshold from the ROC curve.")


@threshold_app.callback(invoke_without_command=True)
def threshold(
    ctx: typer.Context,  # noqa: ARG001
    input_path: Path = typer.Option(  # noqa: B008
        ..., "--input", "-i", help="Observations file (.csv, .json, .xlsx)"
    ),
    label_column: str = typer.Option(  # noqa: B008
        "label", "--label-column", help="Ground-truth label column"
    ),
    score_column: str = typer.Option(  # noqa: B008
        "score", "--score-column", help="Predicted score column"
    ),
    positive_label: str | None = typer.Option(  # noqa: B008
        None, "--positive-label", help="Label value of the positive class"
    ),
    min_tpr: float | None = typer.Option(  # noqa: B008
        None, "--min-tpr", help="Required sensitivity (default: maximize Youden's J)"
    ),
    undefined_rate: UndefinedRatePolicy | None = typer.Option(  # noqa: B008
        None, "--undefined-rate", help="Policy for single-class data"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="YAML configuration file"
    ),
) -> None:
    """Print the threshold, FPR, and TPR of the selected operating point."""
    settings = load_settings(config)
    observations = load_input(input_path, label_column, score_column, positive_label)
    labels, scores = split(observations)

    try:
        # Every swept threshold is a candidate
        result = compute_roc(
            labels,
            scores,
            policy=undefined_rate or settings.sweep.undefined_rate,
            drop_intermediate=False,
        )
        point = select_threshold(result.curve, min_tpr=min_tpr)
    except RocSweepError as exc:
        fail(exc)

    if math.isinf(point.threshold):
        typer.echo(
            "Warning: selected point is a curve anchor, not an observed score.",
            err=True,
        )
    typer.echo(f"threshold: {point.threshold!r}")
    typer.echo(f"fpr:       {point.fpr:.4f}")
    typer.echo(f"tpr:       {point.tpr:.4f}")
    typer.echo(f"youden_j:  {youden_j(point):.4f}")
