"""lodastats package.

Offline reports over a local checkout of the LODA programs repository.
"""

__all__ = [
    "config",
    "errors",
    "programs",
    "git",
    "report",
    "cli",
]
