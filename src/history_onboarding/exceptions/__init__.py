"""Exception hierarchy for git-history-onboarding."""

from .base import OnboardingError
from .config import ConfigurationError, InvalidConfigError, TaxonomyError
from .history import HistoryError, HistoryReadError, RepositoryCloneError

__all__ = [
    "OnboardingError",
    "ConfigurationError",
    "InvalidConfigError",
    "TaxonomyError",
    "HistoryError",
    "HistoryReadError",
    "RepositoryCloneError",
]
