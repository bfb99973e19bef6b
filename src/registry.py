"""Tag discovery: the first pass over the parsed task list.

Every "+project" label seen anywhere in the file gets one identifier, in
first-occurrence order, before any task record is produced. A tag introduced
by the last task must already be resolvable when mapping the first one.
"""
from typing import Any, Callable, Dict, Iterable
import logging

from ids import TAG_ID_LENGTH, IdSource
from models import ParsedTask, TagRegistry

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Emit = Callable[[Record], None]

TAG_TEMPLATE: Record = {
    'color': 0,
    'icon': -1,
    'order': -1,
    'tagOrdering': '[]',
}


def tag_record(label: str, tag_uid: str) -> Record:
    """Tasks.org tag-creation record for one label."""
    return {**TAG_TEMPLATE, 'name': label, 'remoteId': tag_uid}


def build_tag_registry(tasks: Iterable[ParsedTask], new_id: IdSource, emit: Emit) -> TagRegistry:
    """Assign an id to every distinct project label and emit its tag record.

    Emission happens at first sight of each label, so the emitted order is
    the registry order. Repeated labels are neither reassigned nor re-emitted.
    """
    entries: Dict[str, str] = {}
    for task in tasks:
        for label in task.projects:
            if label in entries:
                continue
            tag_uid = new_id(TAG_ID_LENGTH)
            entries[label] = tag_uid
            logger.debug("new tag %r -> %s", label, tag_uid)
            emit(tag_record(label, tag_uid))
    return TagRegistry(entries)
