"""Public API for git-history-onboarding.

Example:
    >>> from history_onboarding import analyze
    >>> features = analyze("https://github.com/org/repo.git")
    >>> features["Authentication"].owners
    {'alice@example.com': 0.75}
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .analysis import FeaturePipeline
from .config import AnalysisConfig, load_config
from .history import CommitRecord, GitExtractor
from .logging_config import get_logger, setup_logging
from .models import Feature

logger = get_logger(__name__)


def fetch_history(source: str, config: AnalysisConfig) -> list[CommitRecord]:
    """Clone or open ``source`` and read its commit history.

    Raises:
        HistoryError: If the repository cannot be cloned or its log read
    """
    extractor = GitExtractor(
        source,
        max_commits=config.git_max_commits,
        timeout_seconds=config.timeout_seconds,
    )
    return extractor.extract()


def analyze(
    source: str,
    config_file: Optional[Path] = None,
    **overrides,
) -> dict[str, Feature]:
    """Analyze a repository and return its features keyed by name.

    Args:
        source: Repository URL or local path
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., workers=4, primary_threshold=0.3,
            verbose=True). The resolved verbosity also configures logging.

    Raises:
        OnboardingError: If configuration is invalid
        HistoryError: If the history cannot be acquired
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity)
    commits = fetch_history(source, config)
    logger.info("Starting analysis of %d commits from %s", len(commits), source)
    return FeaturePipeline.from_config(config).run(commits)
