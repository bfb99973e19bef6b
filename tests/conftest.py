# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from converter import Converter

from .fakes import FixedClock, SequentialIds


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def converter(ids: SequentialIds, clock: FixedClock) -> Converter:
    """Converter wired with deterministic ids and a frozen clock."""
    return Converter(new_id=ids, clock=clock)


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(
        "(A) 2023-05-01 Buy milk +shopping +shopping\n"
        "Call mom\n"
        "\n"
        "(B) Fix bike +garage @home due:2023-06-01\n"
        "2023-04-02 Sort receipts +garage +taxes\n",
        encoding="utf-8",
    )
    return path
