"""rocsweep curve — Sweep thresholds and print or save the ROC curve."""
from __future__ import annotations

from pathlib import Path

import structlog
import typer

from rocsweep.cli.inputs import fail, load_input, load_settings, split
from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import RocSweepError
from rocsweep.io.writers import format_curve_csv, write_curve
from rocsweep.roc.pipeline import compute_roc

logger = structlog.get_logger(__name__)

curve_app = typer.Typer(help="Compute ROC curve points and the AUC.")


@curve_app.callback(invoke_without_command=True)
def curve(
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
    thresholds: list[float] | None = typer.Option(  # noqa: B008
        None, "--threshold", "-t", help="Threshold to sweep (repeatable)"
    ),
    undefined_rate: UndefinedRatePolicy | None = typer.Option(  # noqa: B008
        None, "--undefined-rate", help="Policy for single-class data"
    ),
    keep_intermediate: bool = typer.Option(  # noqa: B008
        False, "--keep-intermediate", help="Keep collinear curve points"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write the curve to .csv or .json"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="YAML configuration file"
    ),
) -> None:
    """Compute the ROC curve: one threshold,fpr,tpr record per point plus the AUC."""
    settings = load_settings(config)
    observations = load_input(input_path, label_column, score_column, positive_label)
    labels, scores = split(observations)

    drop_intermediate = settings.curve.drop_intermediate and not keep_intermediate
    try:
        result = compute_roc(
            labels,
            scores,
            thresholds or (),
            policy=undefined_rate or settings.sweep.undefined_rate,
            drop_intermediate=drop_intermediate,
        )
        if output is None:
            typer.echo(format_curve_csv(result), nl=False)
        else:
            write_curve(result, output)
            typer.echo(f"Curve saved to {output}")
    except RocSweepError as exc:
        fail(exc)
