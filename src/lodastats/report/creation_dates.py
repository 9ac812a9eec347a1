"""Creation date report for every program in the LODA programs repository."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import DEFAULT_PROGRAM_EXTENSION, validate_rootdir
from ..errors import ResolutionError
from ..git.history import GitHistory, HistoryQuery, resolve_creation_record
from ..programs import ProgramPath, relative_paths_for_all_programs
from .csv_writer import CreationDateWriter
from .progress import ProgressReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreationDateSummary:
    """Outcome of a report run."""

    paths: int
    rows: int
    skipped: int


def process_files(
    paths: Sequence[ProgramPath],
    history: HistoryQuery,
    writer: CreationDateWriter,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> CreationDateSummary:
    """Resolve each path in order and append a row for every success.

    Paths that cannot be resolved are logged and skipped; they never abort the
    batch.
    """

    reporter = ProgressReporter(total=len(paths), clock=clock)
    skipped = 0
    for index, program in enumerate(paths):
        reporter.show_if_needed(index, writer.rows_written)
        try:
            record = resolve_creation_record(program, history)
        except ResolutionError as e:
            logger.warning(str(e))
            skipped += 1
            continue
        writer.write(record)

    logger.info("number of rows written to csv file: %d", writer.rows_written)
    return CreationDateSummary(
        paths=len(paths), rows=writer.rows_written, skipped=skipped
    )


def write_creation_dates(
    rootdir: Path,
    output_path: Path,
    *,
    history: Optional[HistoryQuery] = None,
    extension: str = DEFAULT_PROGRAM_EXTENSION,
    limit: Optional[int] = None,
    clock: Callable[[], float] = time.monotonic,
) -> CreationDateSummary:
    """Write ``program id;creation date`` rows for all programs under ``rootdir``.

    Parameters
    ----------
    rootdir:
        Root of the program repository, inside a git working tree
    output_path:
        CSV file to create; any previous content is replaced
    history:
        History collaborator (defaults to ``GitHistory(rootdir)``)
    extension:
        Program file extension
    limit:
        Only process the first ``limit`` sorted paths

    Returns
    -------
    CreationDateSummary with discovered, written and skipped counts
    """

    root = validate_rootdir(rootdir)
    paths = relative_paths_for_all_programs(root, extension)
    if limit is not None:
        paths = paths[:limit]
    logger.debug("found %d program files under %s", len(paths), root)

    # Resolve the collaborator first: a bad root must not truncate old output.
    active_history = history if history is not None else GitHistory(root)

    with CreationDateWriter(output_path) as writer:
        return process_files(paths, active_history, writer, clock=clock)
