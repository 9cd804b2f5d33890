"""History-access exceptions: cloning and reading commit logs."""

from .base import OnboardingError


class HistoryError(OnboardingError):
    """Base class for errors raised while acquiring commit history."""

    pass


class RepositoryCloneError(HistoryError):
    """Raised when a repository source cannot be cloned or opened."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Failed to clone repository: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


class HistoryReadError(HistoryError):
    """Raised when the commit log of a repository cannot be read."""

    def __init__(self, repo_path: str, reason: str):
        super().__init__(
            f"Failed to get commit history: {repo_path}",
            details={"repo_path": repo_path, "reason": reason},
        )
        self.repo_path = repo_path
        self.reason = reason
