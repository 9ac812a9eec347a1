"""Configuration utilities for running lodastats on a developer laptop."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_OUTPUT_PATH = Path("data") / "program_creation_dates.csv"
DEFAULT_PROGRAM_EXTENSION = ".asm"


@dataclass(slots=True)
class LocalConfig:
    """Runtime configuration for the report commands.

    Attributes
    ----------
    base_dir:
        Directory holding the persisted ``config.json``. Defaults to
        ``~/.lodastats``.
    loda_program_rootdir:
        Root of the local checkout of the LODA programs repository. Must be
        inside a git working tree for creation dates to resolve.
    output_path:
        Where the creation date CSV is written. Relative paths resolve against
        the current working directory.
    program_extension:
        File extension that identifies a program file.
    """

    base_dir: Path = field(default_factory=lambda: Path.home() / ".lodastats")
    loda_program_rootdir: Path | None = None
    output_path: Path = DEFAULT_OUTPUT_PATH
    program_extension: str = DEFAULT_PROGRAM_EXTENSION

    def config_path(self) -> Path:
        """Return path to the JSON config file."""
        return self.base_dir / "config.json"

    @classmethod
    def load(cls, base_dir: Path | None = None) -> "LocalConfig":
        """Build a config from ``config.json`` in ``base_dir``.

        A missing or unreadable file yields the defaults, so a fresh install
        works until ``config set-rootdir`` is run.
        """

        config = cls() if base_dir is None else cls(base_dir=base_dir)
        config_path = config.config_path()
        if not config_path.exists():
            return config

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return config
        if not isinstance(data, dict):
            return config

        rootdir = data.get("loda_program_rootdir")
        if rootdir:
            config.loda_program_rootdir = Path(rootdir).expanduser()
        if data.get("output_path"):
            config.output_path = Path(data["output_path"])
        if data.get("program_extension"):
            config.program_extension = data["program_extension"]
        return config

    def save(self) -> None:
        """Write the current settings to ``config.json``."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "loda_program_rootdir": (
                str(self.loda_program_rootdir) if self.loda_program_rootdir else None
            ),
            "output_path": str(self.output_path),
            "program_extension": self.program_extension,
        }
        with open(self.config_path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def resolved_rootdir(self) -> Path:
        """Return the absolute program root, failing fast when it is unusable."""

        if self.loda_program_rootdir is None:
            raise ConfigurationError(
                "LODA program rootdir is not configured. "
                "Pass --rootdir or run 'lodastats config set-rootdir'"
            )
        return validate_rootdir(self.loda_program_rootdir)


def validate_rootdir(rootdir: Path) -> Path:
    """Check that ``rootdir`` is an existing, readable directory."""

    path = Path(rootdir).expanduser().resolve()
    if not path.is_dir():
        raise ConfigurationError(f"Program rootdir does not exist: {path}")
    if not os.access(path, os.R_OK | os.X_OK):
        raise ConfigurationError(f"Program rootdir is not readable: {path}")
    return path
