"""Task record mapping: the second pass, run against a finished TagRegistry.

Field mapping (todo.txt -> Tasks.org backup):

    subject minus +project markers   task.title
    (A)/(B)/(C)/other/none           task.priority 0/1/2/3/3
    creation date @ 12:00 local      task.creationDate, task.modificationDate (ms)
    no creation date                 current time (ms) for both
    +project labels                  tags[] {name, tagUid}

Everything else in the record is a fixed default the target schema requires.
"""
from datetime import date, datetime, time as dtime
from typing import Any, Callable, Dict, List, Optional, Sequence
import re

from ids import TASK_ID_LENGTH, IdSource
from models import ParsedTask, ResolvedTag, TagRegistry

Record = Dict[str, Any]
Clock = Callable[[], float]

PRIORITY_RANKS: Dict[str, int] = {'A': 0, 'B': 1, 'C': 2}
DEFAULT_PRIORITY_RANK = 3
NOON = dtime(12, 0, 0)

TASK_TEMPLATE: Record = {
    'completionDate': 0,
    'deletionDate': 0,
    'dueDate': 0,
    'elapsedSeconds': 0,
    'estimatedSeconds': 0,
    'hideUntil': 0,
    'isCollapsed': False,
    'readOnly': False,
    'reminderLast': 0,
    'repeatFrom': 0,
    'ringFlags': 0,
    'timerStart': 0,
}

EMPTY_COLLECTIONS = ('alarms', 'attachments', 'comments', 'geofences', 'google', 'locations')


def resolve_tags(task: ParsedTask, registry: TagRegistry) -> List[ResolvedTag]:
    """Resolve every project label, in order, duplicates included."""
    return [registry.resolve(label) for label in task.projects]


def to_priority_rank(priority: Optional[str]) -> int:
    if priority is None:
        return DEFAULT_PRIORITY_RANK
    return PRIORITY_RANKS.get(priority, DEFAULT_PRIORITY_RANK)


def to_epoch_millis(created: Optional[date], clock: Clock) -> int:
    """Noon local time on ``created`` in epoch ms, else the clock's now."""
    if created is None:
        return int(clock() * 1000)
    return int(datetime.combine(created, NOON).timestamp() * 1000)


def _marker_re(name: str):
    # whole "+name" tokens only; "+name" inside "+namesake" is left alone
    return re.compile(r"(?<!\S)\+" + re.escape(name) + r"(?!\S)")


def to_title(subject: str, tags: Sequence[ResolvedTag]) -> str:
    title = subject
    for tag in tags:
        title = _marker_re(tag.name).sub('', title)
    return title.strip()


def map_task(task: ParsedTask, registry: TagRegistry, new_id: IdSource, clock: Clock) -> Record:
    """Build the Tasks.org task record for one parsed line."""
    tags = resolve_tags(task, registry)
    created = to_epoch_millis(task.creation_date, clock)
    record: Record = {key: [] for key in EMPTY_COLLECTIONS}
    record['tags'] = [tag.to_dict() for tag in tags]
    record['task'] = {
        **TASK_TEMPLATE,
        'creationDate': created,
        'modificationDate': created,
        'priority': to_priority_rank(task.priority),
        'remoteId': new_id(TASK_ID_LENGTH),
        'title': to_title(task.subject, tags),
    }
    return record
