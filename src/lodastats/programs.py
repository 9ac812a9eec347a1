"""Discovery of program files inside the LODA programs repository."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import DEFAULT_PROGRAM_EXTENSION, validate_rootdir
from .errors import ProgramIdError


def _program_id_pattern(extension: str) -> re.Pattern[str]:
    return re.compile(r"0*(\d+)" + re.escape(extension) + r"$")


@dataclass(frozen=True, slots=True)
class ProgramPath:
    """A program file, relative to the program root, in POSIX form."""

    path: str
    extension: str = DEFAULT_PROGRAM_EXTENSION

    @property
    def program_id(self) -> int:
        """Numeric id encoded in the file name, e.g. ``A000045.asm`` -> 45."""
        name = self.path.rsplit("/", 1)[-1]
        match = _program_id_pattern(self.extension).search(name)
        if match is None:
            raise ProgramIdError(self.path, "No program id in filename")
        program_id = int(match.group(1))
        if program_id == 0:
            raise ProgramIdError(self.path, "Program id must be positive")
        return program_id


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def relative_paths_for_all_programs(
    rootdir: Path, extension: str = DEFAULT_PROGRAM_EXTENSION
) -> List[ProgramPath]:
    """Find every program file below ``rootdir``.

    Parameters
    ----------
    rootdir:
        Root of the program repository. Must exist.
    extension:
        Program file extension including the dot.

    Returns
    -------
    Program paths sorted lexicographically, so every run visits them in the
    same order. Hidden files and directories (``.git``) are not descended.
    """

    root = validate_rootdir(rootdir)
    found: List[str] = []
    for file_path in root.glob(f"**/*{extension}"):
        relative = file_path.relative_to(root)
        if _is_hidden(relative) or not file_path.is_file():
            continue
        found.append(relative.as_posix())
    return [ProgramPath(path, extension) for path in sorted(found)]
