"""Report generation over the program repository."""

from .creation_dates import CreationDateSummary, process_files, write_creation_dates
from .csv_writer import CreationDateWriter
from .progress import ProgressReporter, progress_interval

__all__ = [
    "CreationDateSummary",
    "CreationDateWriter",
    "ProgressReporter",
    "process_files",
    "progress_interval",
    "write_creation_dates",
]
