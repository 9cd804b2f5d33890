"""Acquire a repository and extract its commit history via subprocess."""

import re
import subprocess
import tempfile
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

from ..exceptions import HistoryReadError, RepositoryCloneError
from ..logging_config import get_logger
from .models import CommitRecord

logger = get_logger(__name__)

# With -z every header field, status and path is NUL-terminated. NUL cannot
# occur in a path or a commit message, so no value needs unquoting.
_LOG_FORMAT = "%H%x00%an%x00%ae%x00%aI%x00%B%x00"
_HEADER_FIELDS = 5

_HASH = re.compile(r"^(?:[0-9a-f]{40}|[0-9a-f]{64})$")
_STATUS = re.compile(r"^[ACDMRTUXB][0-9]*$")


class GitExtractor:
    """Materialize the commit history of a repository as CommitRecords.

    ``source`` is either a path to a local git working tree, which is read in
    place, or anything ``git clone`` accepts (URL, bare path), which is cloned
    into a temporary directory that is removed once the log has been read.
    """

    def __init__(self, source: str, max_commits: int = 0, timeout_seconds: int = 300):
        self.source = source
        self.max_commits = max_commits
        self.timeout_seconds = timeout_seconds

    def extract(self) -> list[CommitRecord]:
        """Return every commit reachable from HEAD, newest first.

        Raises:
            RepositoryCloneError: If the source cannot be cloned or opened
            HistoryReadError: If ``git log`` fails or its output is malformed
        """
        with self._checkout() as repo_path:
            raw = self._run_git_log(repo_path)
            commits = self._parse_log(raw, repo_path)

        logger.info("Read %d commits from %s", len(commits), self.source)
        return commits

    @contextmanager
    def _checkout(self) -> Iterator[str]:
        local = Path(self.source).expanduser()
        if local.is_dir() and self._is_git_repo(str(local)):
            logger.debug("Using local repository at %s", local)
            yield str(local.resolve())
            return

        with tempfile.TemporaryDirectory(prefix="history-onboarding-") as tmpdir:
            target = str(Path(tmpdir) / "repo")
            self._clone(target)
            yield target

    def _clone(self, target: str) -> None:
        logger.info("Cloning %s", self.source)
        try:
            result = subprocess.run(
                ["git", "clone", "--quiet", self.source, target],
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            raise RepositoryCloneError(self.source, "git executable not found")
        except subprocess.TimeoutExpired:
            raise RepositoryCloneError(
                self.source, f"clone timed out after {self.timeout_seconds}s"
            )

        if result.returncode != 0:
            raise RepositoryCloneError(self.source, result.stderr.strip() or "git clone failed")

    @staticmethod
    def _is_git_repo(path: str) -> bool:
        try:
            result = subprocess.run(
                ["git", "-C", path, "rev-parse", "--git-dir"],
                capture_output=True,
                text=True,
                timeout=5,
            )
            return result.returncode == 0
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False

    def _run_git_log(self, repo_path: str) -> str:
        cmd = [
            "git",
            "-C",
            repo_path,
            "log",
            "-z",
            f"--format={_LOG_FORMAT}",
            "--name-status",
            "-M",
            "--diff-merges=first-parent",
            "--no-color",
        ]
        if self.max_commits > 0:
            cmd.append(f"-n{self.max_commits}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            raise HistoryReadError(repo_path, "git executable not found")
        except subprocess.TimeoutExpired:
            raise HistoryReadError(repo_path, f"git log timed out after {self.timeout_seconds}s")

        if result.returncode != 0:
            raise HistoryReadError(repo_path, result.stderr.strip() or "git log failed")
        return result.stdout

    @staticmethod
    def _parse_log(raw: str, repo_path: str = "") -> list[CommitRecord]:
        """Parse ``git log -z --name-status`` output produced with ``_LOG_FORMAT``.

        The output is one stream of NUL-terminated tokens. Each commit is
        ``hash, author name, author email, ISO date, message`` followed by
        ``status, path`` pairs; renames and copies carry two paths, old then
        new, and both are kept. A token that is neither a status nor blank
        starts the next commit.
        """
        tokens = raw.split("\0")
        commits = []
        pos = 0
        while pos < len(tokens):
            sha = tokens[pos].strip("\n")
            if not sha:
                pos += 1
                continue
            if not _HASH.match(sha):
                raise HistoryReadError(repo_path, f"malformed log record: {tokens[pos][:80]!r}")
            if pos + _HEADER_FIELDS > len(tokens):
                raise HistoryReadError(repo_path, f"truncated log record for {sha}")

            name, email, date, message = tokens[pos + 1 : pos + _HEADER_FIELDS]
            pos += _HEADER_FIELDS
            try:
                timestamp = datetime.fromisoformat(date.strip())
            except ValueError:
                raise HistoryReadError(repo_path, f"bad author date {date!r} on {sha}")

            files: list[str] = []
            while pos < len(tokens):
                status = tokens[pos].strip("\n")
                if not status:
                    pos += 1
                    continue
                if not _STATUS.match(status):
                    break
                width = 2 if status[0] in ("R", "C") else 1
                paths = tokens[pos + 1 : pos + 1 + width]
                if len(paths) != width:
                    raise HistoryReadError(repo_path, f"truncated file list for {sha}")
                files.extend(paths)
                pos += 1 + width

            commits.append(
                CommitRecord(
                    hash=sha,
                    author_name=name,
                    author_email=email,
                    timestamp=timestamp,
                    message=message.rstrip("\n"),
                    files=tuple(files),
                )
            )
        return commits
