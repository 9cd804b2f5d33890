"""Result models: features with their commits, owners and bug history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .history.models import CommitRecord


@dataclass(frozen=True)
class Bug:
    """A bug-fix commit, recorded once per feature the commit matched."""

    commit_hash: str
    description: str  # full commit message
    fixed_at: datetime
    affected_files: list[str]
    author_email: str


@dataclass
class Feature:
    """A taxonomy feature and everything the history says about it.

    ``created_at``/``last_updated`` bound every commit timestamp and stay
    None while the feature has no commits. ``owners`` and ``backup_owners``
    map author email to commit share and are replaced wholesale by the
    ownership attributor, never patched.
    """

    name: str
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    commits: list[CommitRecord] = field(default_factory=list)
    owners: dict[str, float] = field(default_factory=dict)
    backup_owners: dict[str, float] = field(default_factory=dict)
    bugs: list[Bug] = field(default_factory=list)

    @property
    def commit_count(self) -> int:
        return len(self.commits)

    @property
    def bug_count(self) -> int:
        return len(self.bugs)

    @property
    def is_empty(self) -> bool:
        return not self.commits

    def record_commit(self, commit: CommitRecord) -> None:
        """Append a matching commit and widen the created/updated window."""
        when = commit.timestamp
        if self.created_at is None or when < self.created_at:
            self.created_at = when
        if self.last_updated is None or when > self.last_updated:
            self.last_updated = when
        self.commits.append(commit)
