"""Git integration for looking up when programs were first committed."""

from .history import (
    CreationRecord,
    GitHistory,
    HistoryQuery,
    parse_creation_date,
    resolve_creation_record,
)

__all__ = [
    "CreationRecord",
    "GitHistory",
    "HistoryQuery",
    "parse_creation_date",
    "resolve_creation_record",
]
