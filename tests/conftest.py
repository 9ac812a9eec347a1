from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

import pytest

from lodastats.errors import HistoryError


class FakeHistory:
    """In-memory stand-in for ``GitHistory``."""

    def __init__(self, timestamps: Dict[str, str]):
        self.timestamps = timestamps
        self.queried: List[str] = []

    def earliest_addition(self, path: str) -> str:
        self.queried.append(path)
        if path not in self.timestamps:
            raise HistoryError(path, "Unable to obtain git creation date")
        return self.timestamps[path]


@pytest.fixture
def make_programs(tmp_path: Path):
    def _make(names: Iterable[str]) -> Path:
        root = tmp_path / "programs"
        root.mkdir(exist_ok=True)
        for name in names:
            program = root / name
            program.parent.mkdir(parents=True, exist_ok=True)
            program.write_text("mov $0,1\n", encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # The CLI reconfigures the root logger; keep that from leaking between tests.
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
