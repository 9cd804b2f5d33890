"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def resolve_config(
    config: Optional[Path] = None,
    primary_threshold: Optional[float] = None,
    backup_threshold: Optional[float] = None,
    workers: Optional[int] = None,
    max_commits: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    return load_config(
        config_file=config,
        primary_threshold=primary_threshold,
        backup_threshold=backup_threshold,
        workers=workers,
        git_max_commits=max_commits,
        verbose=verbose,
        quiet=quiet,
    )
