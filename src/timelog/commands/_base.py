"""Custom Click base classes with --examples and alias support.

``TimelogCommand`` accepts ``examples`` (printed by an eager
``--examples`` flag) and ``aliases`` (alternate names such as ``new`` for
``create``).  ``TimelogGroup`` resolves those aliases and lists them next
to the command name in ``--help``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TimelogCommand(click.Command):
    """Click Command subclass with ``--examples`` and visible aliases."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = tuple(aliases)
        if examples:
            _add_examples_option(self, examples)


class TimelogGroup(click.Group):
    """Click Group subclass that understands ``TimelogCommand`` aliases.

    Sets ``command_class = TimelogCommand`` so subcommands accept
    ``examples`` and ``aliases`` without explicit ``cls=`` each time.
    """

    command_class = TimelogCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        self._aliases: dict[str, str] = {}
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def add_command(self, cmd: click.Command, name: str | None = None) -> None:
        super().add_command(cmd, name)
        primary = name or cmd.name
        for alias in getattr(cmd, "aliases", ()):
            if alias in self.commands or alias in self._aliases:
                msg = f"alias {alias!r} for {primary!r} is already taken"
                raise ValueError(msg)
            self._aliases[alias] = primary  # type: ignore[assignment]

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Registration order, not alphabetical."""
        return list(self.commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        cmd_name = self._aliases.get(cmd_name, cmd_name)
        return super().get_command(ctx, cmd_name)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """List subcommands as ``name (alias)`` with their short help."""
        entries: list[tuple[str, click.Command]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            aliases = getattr(cmd, "aliases", ())
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            entries.append((label, cmd))

        if not entries:
            return

        limit = formatter.width - 6 - max(len(label) for label, _ in entries)
        rows = [(label, cmd.get_short_help_str(limit)) for label, cmd in entries]
        with formatter.section("Commands"):
            formatter.write_dl(rows)
