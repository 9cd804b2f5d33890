"""Shared test fixtures for git-history-onboarding tests."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from history_onboarding.history.models import CommitRecord
from history_onboarding.logging_config import LOGGER_NAME

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler, level and propagate changes made by setup_logging."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    handlers, level, propagate = saved
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def make_commit(
    sha: str = "a" * 40,
    message: str = "chore: tidy",
    email: str = "alice@example.com",
    hours_ago: float = 0,
    files=(),
    name: str = "",
) -> CommitRecord:
    """Create a test commit ``hours_ago`` hours before BASE_TIME."""
    return CommitRecord(
        hash=sha,
        author_name=name or email.split("@")[0].title(),
        author_email=email,
        timestamp=BASE_TIME - timedelta(hours=hours_ago),
        message=message,
        files=tuple(files),
    )


@pytest.fixture
def sample_commits():
    """A small mixed history: conventional, free-form and bug fixes."""
    return [
        make_commit(
            "1" * 40,
            "feat(auth): implement login",
            "john@example.com",
            hours_ago=48,
            files=["auth/login.go", "auth/middleware.go"],
        ),
        make_commit(
            "2" * 40,
            "fix(api): handle nil response",
            "jane@example.com",
            hours_ago=24,
            files=["api/handler.go"],
        ),
        make_commit(
            "3" * 40,
            "update database schema",
            "john@example.com",
            hours_ago=12,
            files=["db/schema.go"],
        ),
        make_commit(
            "4" * 40,
            "Squash a nasty bug in the login form",
            "jane@example.com",
            hours_ago=6,
            files=["web/login.html"],
        ),
    ]
