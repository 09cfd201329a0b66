"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Iterator

import pytest

from envcmd.ui.console import Console, set_console


@pytest.fixture
def console() -> Iterator[Console]:
    """Plain (uncoloured) console installed as the global one."""
    c = Console(color=False)
    set_console(c)
    yield c
    set_console(None)


@pytest.fixture
def myfolder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory named 'myfolder'."""
    path = tmp_path / "myfolder"
    path.mkdir()
    monkeypatch.chdir(path)
    return path

