"""Multi-label feature classification of commits.

For each feature, checks run in priority order and the first hit wins:

1. conventional scope
2. conventional description, then body
3. changed file paths (forward-slash normalized)

A commit is tested against every feature independently, so it can land in
any number of features.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..history.models import CommitRecord
from ..logging_config import get_logger
from ..models import Feature
from .bugs import bug_from_commit, is_bug_fix
from .conventional import ConventionalCommit
from .taxonomy import FeatureTaxonomy

logger = get_logger(__name__)


class MatchSource(str, Enum):
    """Which part of a commit matched a feature."""

    SCOPE = "scope"
    DESCRIPTION = "description"
    BODY = "body"
    FILE = "file"


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


class FeatureClassifier:
    """Decide feature membership for commits and update feature state."""

    def __init__(self, taxonomy: FeatureTaxonomy):
        self.taxonomy = taxonomy

    def match(
        self,
        feature: str,
        commit: CommitRecord,
        parsed: Optional[ConventionalCommit],
    ) -> Optional[MatchSource]:
        """Return the first check that ties ``commit`` to ``feature``, or None."""
        if parsed is not None:
            if parsed.scope and self.taxonomy.matches(feature, parsed.scope):
                return MatchSource.SCOPE
            if self.taxonomy.matches(feature, parsed.description):
                return MatchSource.DESCRIPTION
            if self.taxonomy.matches(feature, parsed.body):
                return MatchSource.BODY

        for path in commit.files:
            if self.taxonomy.matches(feature, normalize_path(path)):
                return MatchSource.FILE
        return None

    def classify(
        self,
        feature: Feature,
        commit: CommitRecord,
        parsed: Optional[ConventionalCommit],
    ) -> Optional[MatchSource]:
        """Match ``commit`` against ``feature`` and record it on a hit.

        The feature's timestamps widen to include the commit, the commit is
        appended, and a Bug entry is added when the commit is a bug fix.
        """
        source = self.match(feature.name, commit, parsed)
        if source is None:
            return None

        feature.record_commit(commit)
        if is_bug_fix(commit.message, parsed):
            feature.bugs.append(bug_from_commit(commit))

        logger.debug("%s -> %s (%s)", commit.hash[:8], feature.name, source.value)
        return source
