"""Rich Console factory and theme for shipctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHIP_THEME = Theme(
    {
        "ship.ok": "bold green",
        "ship.error": "bold red",
        "ship.warning": "bold yellow",
        "ship.op": "bold cyan",
        "ship.key": "dim",
        "ship.path": "bold blue",
        "ship.plugin": "cyan",
        "ship.release.major": "bold red",
        "ship.release.minor": "yellow",
        "ship.release.patch": "green",
        "ship.release.other": "dim",
    }
)

_RELEASE_STYLES: dict[str, str] = {
    "major": "ship.release.major",
    "minor": "ship.release.minor",
    "patch": "ship.release.patch",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=SHIP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_release_type(release_type: str | None) -> str:
    """Return the Rich style name for a label's release type."""
    return _RELEASE_STYLES.get(release_type or "", "ship.release.other")
