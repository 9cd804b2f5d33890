"""Conventional Commits header parser.

Pure function over the message text: no I/O, no logging.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# type(scope)!: description
CONVENTIONAL_HEADER = re.compile(
    r"^(?P<type>\w+)"
    r"(?:\((?P<scope>[\w-]+)\))?"
    r"(?P<breaking>!)?"
    r":\s*"
    r"(?P<description>.+)"
)

BREAKING_CHANGE_MARKER = "BREAKING CHANGE:"


@dataclass(frozen=True)
class ConventionalCommit:
    type: str
    scope: str = ""
    description: str = ""
    body: str = ""
    breaking: bool = False


def parse_conventional_commit(message: str) -> Optional[ConventionalCommit]:
    """Parse a full commit message as a Conventional Commit.

    Returns None when the first line does not follow the
    ``type(scope)!: description`` grammar; callers fall back to
    unstructured matching in that case.

    Lines after the header form the body, except ``BREAKING CHANGE:``
    footers, which only set the breaking flag.
    """
    if not message:
        return None

    lines = [line.rstrip("\r") for line in message.split("\n")]
    match = CONVENTIONAL_HEADER.match(lines[0])
    if match is None:
        return None

    breaking = match.group("breaking") is not None
    body_lines = []
    for line in lines[1:]:
        if line.startswith(BREAKING_CHANGE_MARKER):
            breaking = True
            continue
        body_lines.append(line)

    return ConventionalCommit(
        type=match.group("type"),
        scope=match.group("scope") or "",
        description=match.group("description"),
        body="\n".join(body_lines).strip(),
        breaking=breaking,
    )
