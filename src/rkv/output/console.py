"""Rich Console factory and theme for rkv output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RKV_THEME = Theme(
    {
        "rkv.ok": "bold green",
        "rkv.error": "bold red",
        "rkv.warning": "bold yellow",
        "rkv.op": "bold cyan",
        "rkv.key": "dim",
        "rkv.path": "dim",
        "rkv.hint": "dim",
        "rkv.type.daily": "green",
        "rkv.type.weekly": "blue",
        "rkv.type.monthly": "magenta",
    }
)

_FAMILY_STYLES: dict[str, str] = {
    "morning": "rkv.type.daily",
    "evening": "rkv.type.daily",
    "weekly-start": "rkv.type.weekly",
    "weekly-end": "rkv.type.weekly",
    "monthly-start": "rkv.type.monthly",
    "monthly-end": "rkv.type.monthly",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RKV_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(entry_type: str) -> str:
    """Return the Rich style name for an entry type."""
    return _FAMILY_STYLES.get(entry_type, "")
