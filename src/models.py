"""Data models for the todo.txt -> Tasks.org converter.

ParsedTask is what the line parser produces; TagRegistry and ResolvedTag
are what the record mapper consumes. All of them are immutable once built.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from errors import UnknownTagError


@dataclass(frozen=True)
class ParsedTask:
    """A single todo.txt line, split into its parts.

    Fields:
        subject: Text after the completion/priority/date header. Category
            markers are still embedded in it.
        priority: Uppercase letter A-Z, or None.
        creation_date: Date the task was created, or None.
        projects: "+label" categories with "+" stripped, in order of
            appearance. Duplicates are kept.
        finished: True for lines starting with the "x " completion marker.
        completion_date: Date following the completion marker, or None.
        contexts: "@label" tokens with "@" stripped.
        tags: "key:value" tokens as (key, value) pairs, in order.
    """
    subject: str
    priority: Optional[str] = None
    creation_date: Optional[date] = None
    projects: Tuple[str, ...] = ()
    finished: bool = False
    completion_date: Optional[date] = None
    contexts: Tuple[str, ...] = ()
    tags: Tuple[Tuple[str, str], ...] = ()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"ParsedTask(subject={self.subject!r}, priority={self.priority}, projects={self.projects})"


@dataclass(frozen=True)
class ResolvedTag:
    """A category label paired with the identifier the registry gave it."""
    name: str
    tag_uid: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'tagUid': self.tag_uid}


class TagRegistry(Mapping[str, str]):
    """Read-only label -> identifier mapping, in first-occurrence order."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, label: str) -> str:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, label: str) -> ResolvedTag:
        try:
            return ResolvedTag(name=label, tag_uid=self._entries[label])
        except KeyError:
            raise UnknownTagError(label) from None

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TagRegistry({dict(self._entries)!r})"
