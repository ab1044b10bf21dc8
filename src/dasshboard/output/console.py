"""Rich Console factory and theme for dasshboard output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DASSH_THEME = Theme(
    {
        "dassh.ok": "bold green",
        "dassh.error": "bold red",
        "dassh.warning": "bold yellow",
        "dassh.op": "bold cyan",
        "dassh.key": "dim",
        "dassh.name": "bold",
        "dassh.path": "dim",
        "dassh.uri": "blue underline",
        "dassh.type.ssh": "green",
        "dassh.type.wsl": "yellow",
        "dassh.type.docker": "cyan",
    }
)

_TYPE_STYLES: dict[str, str] = {
    "ssh": "dassh.type.ssh",
    "wsl": "dassh.type.wsl",
    "docker": "dassh.type.docker",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=DASSH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(host_type: str) -> str:
    """Return the Rich style name for a host type."""
    return _TYPE_STYLES.get(host_type, "")
