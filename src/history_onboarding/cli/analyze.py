"""Analyze command: read a repository's history and report per feature."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import FeaturePipeline
from ..api import fetch_history
from ..exceptions import HistoryError, OnboardingError
from ..formatters import JsonFormatter, RichFormatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, err_console, resolve_config

logger = get_logger(__name__)


@app.command()
def analyze(
    repo: str = typer.Option(
        ...,
        "--repo",
        "-r",
        help="Repository URL or local path to analyze",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    primary_threshold: Optional[float] = typer.Option(
        None,
        "--primary-threshold",
        help="Commit share for a primary owner (default: 0.2)",
        min=0.0,
        max=1.0,
    ),
    backup_threshold: Optional[float] = typer.Option(
        None,
        "--backup-threshold",
        help="Commit share for a backup owner (default: 0.1)",
        min=0.0,
        max=1.0,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Threads used to classify features in parallel",
        min=1,
    ),
    max_commits: Optional[int] = typer.Option(
        None,
        "--max-commits",
        help="Read at most this many commits (0 = all)",
        min=0,
    ),
    include_empty: bool = typer.Option(
        False,
        "--include-empty",
        help="Also list features no commit matched",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Classify a repository's commits into features and report ownership.

    For every feature: creation and last-update dates, primary and backup
    owners with their commit share, commit count and bug-fix history.

    [bold cyan]Examples:[/bold cyan]

      history-onboarding --repo https://github.com/org/project.git

      history-onboarding -r . --json

      history-onboarding -r . --primary-threshold 0.4 --backup-threshold 0.2
    """
    try:
        settings = resolve_config(
            config=config,
            primary_threshold=primary_threshold,
            backup_threshold=backup_threshold,
            workers=workers,
            max_commits=max_commits,
            verbose=verbose,
            quiet=quiet,
        )
        pipeline = FeaturePipeline.from_config(settings)
    except OnboardingError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    setup_logging(settings.verbosity)
    logger.debug(
        "Thresholds primary=%s backup=%s, %d worker(s), %d feature(s)",
        settings.ownership.primary,
        settings.ownership.backup,
        settings.workers,
        len(pipeline.taxonomy),
    )

    try:
        commits = fetch_history(repo, settings)
    except HistoryError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    features = pipeline.run(commits)

    if json_output:
        JsonFormatter(include_empty=include_empty).render(features)
        return

    console.print(f"Found {len(commits)} commits")
    RichFormatter(include_empty=include_empty, console=console).render(features)
