"""rocsweep CLI — Typer application."""
from __future__ import annotations

import logging
import sys

import structlog
import typer

from rocsweep.cli.auc_cmd import auc_app
from rocsweep.cli.curve_cmd import curve_app
from rocsweep.cli.threshold_cmd import threshold_app

app = typer.Typer(
    name="rocsweep",
    help="rocsweep: ROC curves and AUC from labels and predicted scores.",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(curve_app, name="curve")
app.add_typer(auc_app, name="auc")
app.add_typer(threshold_app, name="threshold")


def configure_logging(verbose: bool = False) -> None:
    """Route structlog events to stderr so stdout carries only command output.

    Args:
        verbose: Emit debug events instead of warnings and above.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log sweep and curve events to stderr"
    ),
) -> None:
    """Compute ROC curves and AUC from labels and predicted scores."""
    configure_logging(verbose)


@app.command()
def version() -> None:
    """Print the installed rocsweep version."""
    from rocsweep import __version__  # noqa: PLC0415

    typer.echo(f"rocsweep {__version__}")
