"""Git history lookups for program creation dates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from git import Git, Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..errors import ConfigurationError, HistoryError, TimestampError
from ..programs import ProgramPath

logger = logging.getLogger(__name__)


class HistoryQuery(Protocol):
    """Anything that can tell when a path first entered version control."""

    def earliest_addition(self, path: str) -> str:
        """Return the ISO-8601 author timestamp of the commit adding ``path``.

        Raises ``HistoryError`` when no such commit exists.
        """
        ...


@dataclass(frozen=True, slots=True)
class CreationRecord:
    """One row of the creation date report."""

    program_id: int
    creation_date: str

    def as_row(self) -> list[str]:
        return [str(self.program_id), self.creation_date]


class GitHistory:
    """Wrapper around GitPython for querying when files were added."""

    def __init__(self, rootdir: Path):
        self.rootdir = Path(rootdir).resolve()
        try:
            Repo(self.rootdir, search_parent_directories=True).close()
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise ConfigurationError(
                f"Not inside a git repository: {self.rootdir}"
            ) from e
        # Relative program paths are resolved against the program root, not the
        # top of the working tree.
        self.git = Git(str(self.rootdir))

    def earliest_addition(self, path: str) -> str:
        """Return the author timestamp of the earliest commit adding ``path``.

        ``--follow`` keeps tracking the file across renames, so moving a
        program between directories does not reset its creation date. Git
        lists newest first; the last line is the first addition.
        """

        try:
            output = self.git.log(
                "--diff-filter=A", "--follow", "--format=%aI", "--", path
            )
        except GitCommandError as e:
            logger.debug("git log failed for %s: %s", path, e.stderr)
            raise HistoryError(path, "Unable to obtain git creation date") from e

        lines = [line.strip() for line in output.splitlines() if line.strip()]
        if not lines:
            raise HistoryError(path, "No commit adds this file")
        return lines[-1]


def parse_creation_date(timestamp: str, path: str = "") -> str:
    """Convert an ISO-8601 timestamp into a ``YYYYMMDD`` date string.

    The date is taken in the timestamp's own UTC offset, so
    ``1984-12-30T20:12:09+01:00`` becomes ``19841230``.
    """

    try:
        text = timestamp.strip()
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on.
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        moment = datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampError(path, f"Unable to parse as iso8601: '{timestamp}'") from e
    # strftime("%Y") does not zero pad years before 1000 on every platform.
    return f"{moment.year:04d}{moment.month:02d}{moment.day:02d}"


def resolve_creation_record(
    program: ProgramPath, history: HistoryQuery
) -> CreationRecord:
    """Resolve a single program path into a report row.

    Raises a ``ResolutionError`` subclass when the path must be skipped.
    """

    program_id = program.program_id
    timestamp = history.earliest_addition(program.path)
    return CreationRecord(program_id, parse_creation_date(timestamp, program.path))
