"""Rich Console factory and theme for lenstr output.

Consoles render to a StringIO buffer so formatters keep a plain
``format_result() -> str`` contract. Outside a TTY (tests, pipes) Rich
emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LENSTR_THEME = Theme(
    {
        "lenstr.ok": "bold green",
        "lenstr.error": "bold red",
        "lenstr.warning": "bold yellow",
        "lenstr.op": "bold cyan",
        "lenstr.key": "dim",
        "lenstr.content": "bold",
        "lenstr.length": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=LENSTR_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
