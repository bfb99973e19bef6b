"""Logging configuration. Everything goes to stderr; stdout carries records."""
from __future__ import annotations
import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger.

    Safe to call more than once; previous handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
    logging.captureWarnings(True)
