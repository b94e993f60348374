"""Rich Console factory and theme for timelog output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  Colors are emitted only when the caller asks for
them (the CLI does so when the target stream is a terminal).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TIMELOG_THEME = Theme(
    {
        "timelog.ok": "bold green",
        "timelog.error": "bold red",
        "timelog.warning": "bold yellow",
        "timelog.op": "bold cyan",
        "timelog.key": "dim",
        "timelog.mnemonic": "bold blue",
        "timelog.time": "magenta",
        "timelog.forgot": "yellow",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles even though the buffer is not a terminal.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TIMELOG_THEME,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
