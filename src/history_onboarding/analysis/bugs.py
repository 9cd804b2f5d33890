"""Bug-fix heuristic and Bug record construction."""

from __future__ import annotations

from typing import Optional

from ..history.models import CommitRecord
from ..models import Bug
from .conventional import ConventionalCommit

BUG_KEYWORDS = ("fix", "bug", "issue", "resolve", "patch")
FIX_TYPE = "fix"


def is_bug_fix(message: str, parsed: Optional[ConventionalCommit] = None) -> bool:
    """A commit fixes a bug if its conventional type is ``fix`` or its
    message mentions any of BUG_KEYWORDS (case-insensitive substring)."""
    if parsed is not None and parsed.type == FIX_TYPE:
        return True
    lowered = message.lower()
    return any(keyword in lowered for keyword in BUG_KEYWORDS)


def bug_from_commit(commit: CommitRecord) -> Bug:
    return Bug(
        commit_hash=commit.hash,
        description=commit.message,
        fixed_at=commit.timestamp,
        affected_files=list(commit.files),
        author_email=commit.author_email,
    )
