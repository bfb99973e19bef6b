"""todo.txt line parser.

Header grammar (left to right, each part optional):

    x [completion-date] [(P)] [creation-date] subject...     finished task
    [(P)] [creation-date] subject...                          open task

Priority is a single uppercase letter in parentheses. Dates are YYYY-MM-DD.
The subject is kept verbatim; "+project", "@context" and "key:value" tokens
are collected from it but not removed.
"""
from datetime import date
from typing import List, Optional, Tuple
import logging
import re

from errors import ParseError
from models import ParsedTask

logger = logging.getLogger(__name__)

COMPLETED_RE = re.compile(r"x(?:\s+|$)")
PRIORITY_RE = re.compile(r"\(([A-Z])\)(?:\s+|$)")
DATE_TOKEN_RE = re.compile(r"(\S+)(?:\s+|$)")
DATE_SHAPED_RE = re.compile(r"\d+-\d+-\d+")
ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
KEY_VALUE_RE = re.compile(r"([^\s:+@][^\s:]*):([^\s:]+)")


def parse_date(token: str, line: str) -> date:
    """Parse a strict YYYY-MM-DD token, raising ParseError otherwise."""
    if not ISO_DATE_RE.fullmatch(token):
        raise ParseError(f"malformed date {token!r}", line)
    try:
        return date.fromisoformat(token)
    except ValueError:
        raise ParseError(f"invalid calendar date {token!r}", line) from None


def _take_date(rest: str, line: str) -> Tuple[Optional[date], str]:
    """Consume a leading date token from ``rest`` if there is one."""
    m = DATE_TOKEN_RE.match(rest)
    if not m or not DATE_SHAPED_RE.fullmatch(m.group(1)):
        return None, rest
    return parse_date(m.group(1), line), rest[m.end():]


def _labels(tokens: List[str], marker: str) -> Tuple[str, ...]:
    return tuple(tok[1:] for tok in tokens if tok.startswith(marker) and len(tok) > 1)


def _key_values(tokens: List[str]) -> Tuple[Tuple[str, str], ...]:
    # values are kept as written; "due:soon" is a tag like any other
    return tuple(
        (m.group(1), m.group(2))
        for m in (KEY_VALUE_RE.fullmatch(tok) for tok in tokens)
        if m
    )


def parse_line(line: str, lineno: Optional[int] = None) -> ParsedTask:
    """Parse one todo.txt line into a ParsedTask.

    Raises ParseError for blank lines, lines with nothing after the header,
    and header date tokens that are not real YYYY-MM-DD dates.
    """
    try:
        return _parse(line)
    except ParseError as exc:
        if lineno is None:
            raise
        raise exc.at_line(lineno) from None


def _parse(line: str) -> ParsedTask:
    text = line.strip()
    if not text:
        raise ParseError("empty task line", line)
    rest = text

    finished = False
    completion_date: Optional[date] = None
    creation_date: Optional[date] = None
    priority: Optional[str] = None

    m = COMPLETED_RE.match(rest)
    if m:
        finished = True
        rest = rest[m.end():]
        completion_date, rest = _take_date(rest, text)

    m = PRIORITY_RE.match(rest)
    if m:
        priority = m.group(1)
        rest = rest[m.end():]

    if finished and completion_date is None:
        completion_date, rest = _take_date(rest, text)
    creation_date, rest = _take_date(rest, text)

    subject = rest.strip()
    if not subject:
        raise ParseError("task has no subject", text)

    tokens = subject.split()
    task = ParsedTask(
        subject=subject,
        priority=priority,
        creation_date=creation_date,
        projects=_labels(tokens, '+'),
        finished=finished,
        completion_date=completion_date,
        contexts=_labels(tokens, '@'),
        tags=_key_values(tokens),
    )
    logger.debug("parsed %r -> priority=%s date=%s projects=%s",
                 text, task.priority, task.creation_date, task.projects)
    return task
