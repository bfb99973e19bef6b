"""Exception taxonomy for the todo.txt -> Tasks.org conversion.

Every error is fatal: the run aborts at the first one and the CLI surfaces
the message. OSError from reading the input file is not wrapped.
"""
from typing import Optional


class ConversionError(Exception):
    """Base class for conversion failures."""


class ParseError(ConversionError, ValueError):
    """A line does not follow the todo.txt task markup."""

    def __init__(self, reason: str, line: str = '', lineno: Optional[int] = None):
        self.reason = reason
        self.line = line
        self.lineno = lineno
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"line {self.lineno}: " if self.lineno is not None else ''
        return f"{where}{self.reason}: {self.line!r}"

    def at_line(self, lineno: int) -> 'ParseError':
        """Return a copy of this error tagged with a 1-based line number."""
        return ParseError(self.reason, self.line, lineno)


class UnknownTagError(ConversionError, KeyError):
    """A category label was mapped before the registry knew about it."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f'category "{self.label}" missing from tag registry'
