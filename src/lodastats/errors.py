"""Exception hierarchy shared by the lodastats commands."""

from __future__ import annotations


class LodaStatsError(Exception):
    """Base class for all errors raised by lodastats."""


class ConfigurationError(LodaStatsError):
    """The run cannot start, e.g. the program root directory is missing."""


class ResolutionError(LodaStatsError):
    """A single program path could not be turned into a report row.

    These are recoverable: the batch logs them, skips the path and continues.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}  path: {path}")
        self.path = path
        self.reason = reason


class ProgramIdError(ResolutionError):
    """The file name does not carry a positive numeric program id."""


class HistoryError(ResolutionError):
    """Version control has no usable addition record for the path."""


class TimestampError(ResolutionError):
    """The history timestamp is not valid ISO-8601."""
