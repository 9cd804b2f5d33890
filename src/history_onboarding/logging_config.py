"""
Logging configuration for git-history-onboarding.

The level is driven by ``AnalysisConfig.verbosity``, so ``--verbose``/``--quiet``,
``ONBOARDING_VERBOSITY`` and the ``verbosity`` key of a config file all land
here. Records go to stderr through rich; stdout is reserved for the report.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

LOGGER_NAME = "history_onboarding"

VERBOSITY_LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Point the ``history_onboarding`` logger at stderr (and optionally a file).

    Only the package logger is configured; the root logger and other
    libraries keep whatever the host application set up. Calling this again
    replaces the handlers of the previous call.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose" (debug,
            with source paths and locals in tracebacks)
        log_file: Optional file path to append records to

    Returns:
        The configured package logger

    Raises:
        ValueError: If ``verbosity`` is not one of the known levels
    """
    if verbosity not in VERBOSITY_LEVELS:
        raise ValueError(
            f"Unknown verbosity {verbosity!r}; expected one of {', '.join(VERBOSITY_LEVELS)}"
        )
    level = VERBOSITY_LEVELS[verbosity]
    verbose = verbosity == "verbose"

    # Commit subjects and paths can contain [brackets]; never treat them as markup
    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
        log_time_format="[%X]",
    )
    handlers: list[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger below the package logger.

    Args:
        name: Module name (e.g., 'history_onboarding.analysis.pipeline')
              If None, returns the package logger itself
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
