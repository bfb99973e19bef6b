# tests/test_registry.py

from __future__ import annotations

import pytest

from errors import UnknownTagError
from ids import TAG_ID_LENGTH
from models import TagRegistry
from registry import build_tag_registry
from todo_parser import parse_line

from .fakes import SequentialIds


def _tasks(*lines: str):
    return [parse_line(line) for line in lines]


def test_each_distinct_label_gets_one_id_and_one_record() -> None:
    ids = SequentialIds()
    emitted: list[dict] = []
    tasks = _tasks(
        "Buy milk +shopping +shopping",
        "Fix bike +garage",
        "Buy nails +garage +shopping",
    )

    registry = build_tag_registry(tasks, ids, emitted.append)

    assert list(registry) == ["shopping", "garage"]
    assert [r["name"] for r in emitted] == ["shopping", "garage"]
    assert ids.lengths == [TAG_ID_LENGTH, TAG_ID_LENGTH]
    assert registry["shopping"] == emitted[0]["remoteId"]
    assert registry["garage"] == emitted[1]["remoteId"]


def test_tag_record_shape() -> None:
    emitted: list[dict] = []
    build_tag_registry(_tasks("Read +books"), SequentialIds(), emitted.append)

    assert emitted == [
        {
            "color": 0,
            "icon": -1,
            "name": "books",
            "order": -1,
            "remoteId": "00000000000000001",
            "tagOrdering": "[]",
        }
    ]


def test_records_are_emitted_while_scanning() -> None:
    seen_at_emit: list[int] = []
    ids = SequentialIds()

    build_tag_registry(
        _tasks("a +one", "b +two"),
        ids,
        lambda record: seen_at_emit.append(len(ids.lengths)),
    )

    assert seen_at_emit == [1, 2]


def test_no_labels_means_empty_registry() -> None:
    emitted: list[dict] = []
    registry = build_tag_registry(_tasks("Call mom"), SequentialIds(), emitted.append)
    assert len(registry) == 0
    assert emitted == []


def test_registry_is_read_only() -> None:
    registry = TagRegistry({"home": "1" * 17})
    with pytest.raises(TypeError):
        registry["home"] = "2" * 17  # type: ignore[index]


def test_resolve_missing_label_is_invariant_error() -> None:
    registry = TagRegistry({"home": "1" * 17})

    assert registry.resolve("home").tag_uid == "1" * 17
    with pytest.raises(UnknownTagError) as excinfo:
        registry.resolve("work")
    assert "work" in str(excinfo.value)
