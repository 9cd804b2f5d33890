"""Data models for commit history supplied to the analysis pipeline."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CommitRecord:
    hash: str
    author_name: str
    author_email: str
    timestamp: datetime  # author time, timezone-aware
    message: str  # full message: subject, body and trailers
    files: tuple[str, ...] = ()  # changed vs first parent; renames list both paths

    @property
    def subject(self) -> str:
        return self.message.split("\n", 1)[0]
