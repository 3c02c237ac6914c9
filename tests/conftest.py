"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from rich.logging import RichHandler


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Build a directory tree below tmp_path/root.

    Entries ending in "/" become directories, everything else becomes a
    file (parents are created as needed).
    """

    def _make(entries: list[str]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for entry in entries:
            target = root / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(entry)
        return root

    return _make


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(level)
