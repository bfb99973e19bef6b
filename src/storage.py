"""Input loading: read the todo.txt file and parse it line by line.

Fail-fast: the first malformed line aborts the load. Blank lines are
skipped but still counted for line numbers in error messages.
"""
from pathlib import Path
from typing import Iterable, List, Union
import logging

from models import ParsedTask
from todo_parser import parse_line

logger = logging.getLogger(__name__)

DEFAULT_TODO_FILE = 'todo.txt'


class Storage:
    @staticmethod
    def parse_lines(lines: Iterable[str]) -> List[ParsedTask]:
        tasks: List[ParsedTask] = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            tasks.append(parse_line(line, lineno))
        return tasks

    @staticmethod
    def load_tasks(path: Union[str, Path] = DEFAULT_TODO_FILE) -> List[ParsedTask]:
        """Load and parse every task in ``path`` (UTF-8).

        OSError (missing/unreadable file) and ParseError propagate; the file
        is closed on every path out.
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            tasks = Storage.parse_lines(f)
        logger.info("loaded %d task(s) from %s", len(tasks), path)
        return tasks
