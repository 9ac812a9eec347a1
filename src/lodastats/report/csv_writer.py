"""Incrementally flushed CSV output."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Optional

from ..git.history import CreationRecord

HEADER = ["program id", "creation date"]
DELIMITER = ";"


class CreationDateWriter:
    """Writes creation records to a semicolon separated CSV file.

    Every row is flushed as soon as it is written, so an interrupted run leaves
    a valid file holding the rows produced so far.
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.rows_written = 0
        self._handle: Optional[IO[str]] = None
        self._writer = None

    def open(self) -> "CreationDateWriter":
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = open(self.output_path, "w", encoding="utf-8", newline="")
        self._writer = csv.writer(
            self._handle, delimiter=DELIMITER, lineterminator="\n"
        )
        self._write(HEADER)
        return self

    def write(self, record: CreationRecord) -> None:
        self._write(record.as_row())
        self.rows_written += 1

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            self._writer = None

    def _write(self, row: list[str]) -> None:
        if self._writer is None or self._handle is None:
            raise RuntimeError("CreationDateWriter is not open")
        self._writer.writerow(row)
        self._handle.flush()

    def __enter__(self) -> "CreationDateWriter":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
