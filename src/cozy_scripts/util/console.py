"""
Shared Rich console and the colour palette used by every command.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.theme import Theme

COZY_THEME = Theme(
    {
        "orange": "rgb(255,135,0)",
        "cyan": "cyan",
        "green": "green",
        "red": "red",
        "question": "bold",
    }
)


def make_console(*, stderr: bool = False, force_terminal: Optional[bool] = None) -> Console:
    """Create a console that understands the cozy palette names."""
    return Console(theme=COZY_THEME, stderr=stderr, force_terminal=force_terminal, highlight=False)


console = make_console()
