"""Click base classes for bookstock commands.

A command or group built with an ``examples=`` string gains an eager
``--examples`` flag that prints the examples and exits before any
settings are loaded or the catalog is opened. Subcommands of
:class:`BookGroup` default to :class:`BookCommand`, which also binds the
command name into the log context while it runs.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

from bookstock.config.logging import command_context

EXAMPLES_HEADER = "Examples:"


def format_examples(examples: str) -> str:
    """Dedent *examples* and list them, indented, under a header line."""
    body = textwrap.dedent(examples).strip("\n")
    return f"{EXAMPLES_HEADER}\n{textwrap.indent(body, '  ')}"


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and self.examples:
            click.echo(format_examples(self.examples))
            ctx.exit(0)


class BookCommand(_ExamplesMixin, click.Command):
    """Leaf command: optional ``--examples``, log lines tagged with the command."""

    def invoke(self, ctx: click.Context) -> Any:
        with command_context(ctx.info_name or self.name or ""):
            return super().invoke(ctx)


class BookGroup(_ExamplesMixin, click.Group):
    """Root group; its subcommands are :class:`BookCommand` by default."""

    command_class = BookCommand
