"""Conversion pipeline: tag discovery, then task mapping.

The registry returned by ``discover_tags`` is the only registry
``map_tasks`` accepts, so every label is known before the first task
record is built.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Sequence
import logging
import time

from ids import IdGenerator, IdSource
from models import ParsedTask, TagRegistry
from records import Clock, map_task
from registry import build_tag_registry

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Emit = Callable[[Record], None]


class RecordSink(Protocol):
    def section(self, title: str) -> None: ...

    def record(self, record: Record) -> None: ...


@dataclass(frozen=True)
class ConversionSummary:
    tasks: int
    tags: int


class Converter:
    def __init__(self, new_id: Optional[IdSource] = None, clock: Optional[Clock] = None):
        self.new_id: IdSource = new_id if new_id is not None else IdGenerator().digits
        self.clock: Clock = clock if clock is not None else time.time

    def discover_tags(self, tasks: Sequence[ParsedTask], emit: Emit) -> TagRegistry:
        return build_tag_registry(tasks, self.new_id, emit)

    def map_tasks(self, tasks: Sequence[ParsedTask], registry: TagRegistry, emit: Emit) -> int:
        count = 0
        for task in tasks:
            emit(map_task(task, registry, self.new_id, self.clock))
            count += 1
        return count

    def convert(self, tasks: Sequence[ParsedTask], sink: RecordSink) -> ConversionSummary:
        """Run both passes, writing section headers and records to ``sink``."""
        sink.section('Tags')
        registry = self.discover_tags(tasks, sink.record)
        sink.section('Tasks')
        count = self.map_tasks(tasks, registry, sink.record)
        summary = ConversionSummary(tasks=count, tags=len(registry))
        logger.info("converted %d task(s), %d tag(s)", summary.tasks, summary.tags)
        return summary
