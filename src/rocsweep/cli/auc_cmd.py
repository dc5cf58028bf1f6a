"""rocsweep auc — Report the AUC with an optional bootstrap interval."""
from __future__ import annotations

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from rocsweep.cli.inputs import fail, load_input, load_settings, split
from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import RocSweepError
from rocsweep.roc.pipeline import bootstrap_auc, compute_roc

logger = structlog.get_logger(__name__)

console = Console()

auc_app = typer.Typer(help="Report the area under the ROC curve.")


@auc_app.callback(invoke_without_command=True)
def auc(
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
    undefined_rate: UndefinedRatePolicy | None = typer.Option(  # noqa: B008
        None, "--undefined-rate", help="Policy for single-class data"
    ),
    bootstrap: bool = typer.Option(  # noqa: B008
        False, "--bootstrap", "-b", help="Add a bootstrap confidence interval"
    ),
    n_iter: int | None = typer.Option(  # noqa: B008
        None, "--n-iter", help="Bootstrap resamples (default from config)"
    ),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Bootstrap random seed"),  # noqa: B008
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="YAML configuration file"
    ),
) -> None:
    """Compute the AUC and summarize it in a table."""
    settings = load_settings(config)
    observations = load_input(input_path, label_column, score_column, positive_label)
    labels, scores = split(observations)
    policy = undefined_rate or settings.sweep.undefined_rate

    try:
        result = compute_roc(
            labels,
            scores,
            policy=policy,
            drop_intermediate=settings.curve.drop_intermediate,
        )
        ci = None
        if bootstrap:
            n_resamples = settings.bootstrap.n_iter if n_iter is None else n_iter
            ci = bootstrap_auc(
                labels,
                scores,
                n_iter=n_resamples,
                seed=settings.bootstrap.seed if seed is None else seed,
                confidence=settings.bootstrap.confidence,
                policy=policy,
            )
    except (RocSweepError, ValueError) as exc:
        fail(exc)

    table = Table(title="ROC Summary", border_style="cyan", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("AUC", f"{result.auc:.4f}")
    table.add_row("Positives", str(result.n_positive))
    table.add_row("Negatives", str(result.n_negative))
    table.add_row("Curve points", str(len(result.curve)))
    if ci is not None:
        coverage = int(round(settings.bootstrap.confidence * 100))
        table.add_row(
            f"{coverage}% CI",
            f"{ci.ci_lower:.4f}-{ci.ci_upper:.4f} ({ci.n_valid} valid resamples)",
        )
    console.print(table)
