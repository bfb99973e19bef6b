"""Command-line entry: read ./todo.txt, print Tasks.org import records.

Output is a comma-separated JSON fragment interleaved with progress
headers; wrap the records in [...] before importing into Tasks.org.
"""
from typing import Any, Dict, Optional
import json
import logging

import click

from converter import Converter
from errors import ConversionError
from logging_setup import setup_logging
from storage import DEFAULT_TODO_FILE, Storage
from theme import HEADER_STYLE, SEPARATOR_STYLE, color, color_mode

logger = logging.getLogger(__name__)

SEPARATOR = '---'


def dump_record(record: Dict[str, Any]) -> str:
    return json.dumps(record, separators=(',', ':'), sort_keys=True, ensure_ascii=False)


class RecordWriter:
    """Writes section headers and one ``<json>,`` line per record."""

    def __init__(self, use_color: Optional[bool] = None):
        self.use_color = use_color

    def header(self, text: str) -> None:
        click.echo(color(text, HEADER_STYLE), color=self.use_color)

    def section(self, title: str) -> None:
        self.header(f"{title}:")
        click.echo(color(SEPARATOR, SEPARATOR_STYLE), color=self.use_color)

    def record(self, record: Dict[str, Any]) -> None:
        click.echo(dump_record(record) + ',')


@click.command()
def main() -> None:
    """Convert ./todo.txt to Tasks.org records."""
    setup_logging(logging.WARNING)
    writer = RecordWriter(color_mode())
    writer.header(f"Scanning {DEFAULT_TODO_FILE} file...")
    try:
        tasks = Storage.load_tasks(DEFAULT_TODO_FILE)
        Converter().convert(tasks, writer)
    except (ConversionError, OSError) as exc:
        logger.debug("conversion failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc


if __name__ == '__main__':  # pragma: no cover
    main()
