"""History access: clone a repository and materialize its commit log."""

from .git_extractor import GitExtractor
from .models import CommitRecord

__all__ = [
    "CommitRecord",
    "GitExtractor",
]
