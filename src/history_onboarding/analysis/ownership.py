"""Two-tier ownership attribution by commit share.

Authors are identified by email. Shares are computed over the full commit
list of a feature:

- primary owners: share >= primary threshold
- backup owners: share >= backup threshold, drawn from the non-primary
  authors when a primary exists, or from everyone when nobody reached the
  primary threshold (so a fragmented feature still gets named contacts)
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from ..config import OwnershipThresholds
from ..history.models import CommitRecord
from ..models import Feature


def count_commits_by_author(commits: Sequence[CommitRecord]) -> Counter[str]:
    return Counter(c.author_email for c in commits)


class OwnershipAttributor:
    """Compute primary and backup owners from a feature's commits."""

    def __init__(self, thresholds: OwnershipThresholds | None = None):
        self.thresholds = thresholds if thresholds is not None else OwnershipThresholds()

    @property
    def primary_threshold(self) -> float:
        return self.thresholds.primary

    @property
    def backup_threshold(self) -> float:
        return self.thresholds.backup

    def analyze(
        self, commits: Sequence[CommitRecord]
    ) -> tuple[dict[str, float], dict[str, float]]:
        """Return ``(owners, backup_owners)`` mapping email -> share."""
        if not commits:
            return {}, {}

        counts = count_commits_by_author(commits)
        total = len(commits)
        shares = {email: count / total for email, count in counts.items()}

        owners = {
            email: share for email, share in shares.items() if share >= self.primary_threshold
        }
        candidates = {e: s for e, s in shares.items() if e not in owners}
        backups = {
            email: share for email, share in candidates.items() if share >= self.backup_threshold
        }
        return owners, backups

    def update_feature_ownership(self, feature: Feature) -> None:
        """Recompute both owner maps of ``feature`` from its commit list."""
        owners, backups = self.analyze(feature.commits)
        feature.owners = owners
        feature.backup_owners = backups

    @staticmethod
    def top_owners(commits: Sequence[CommitRecord], n: int) -> list[str]:
        """The ``n`` authors with the most commits, most active first.

        Equal counts are ordered by email so the ranking is reproducible.
        """
        if n <= 0 or not commits:
            return []
        counts = count_commits_by_author(commits)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return [email for email, _ in ranked[:n]]
