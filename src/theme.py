"""Header styling.

Only the progress headers are styled; JSON records are always plain.
click strips the codes when stdout is not a terminal, and NO_COLOR
disables them everywhere.
"""
from typing import Any, Dict, Optional
import os

import click

HEADER_STYLE: Dict[str, Any] = {'fg': 'blue', 'bold': True}
SEPARATOR_STYLE: Dict[str, Any] = {'fg': 'cyan', 'dim': True}


def color_mode() -> Optional[bool]:
    """False under NO_COLOR, else None so click decides per stream."""
    if os.environ.get('NO_COLOR') is not None:
        return False
    return None


def color(text: str, style: Dict[str, Any]) -> str:
    return click.style(text, **style)
