"""Allow ``python -m timelog`` invocation."""

from __future__ import annotations

from timelog.cli import cli

if __name__ == "__main__":
    cli()
