"""Root CLI group for bookstock with global flags and command registration."""

from __future__ import annotations

import click

from bookstock import __version__
from bookstock.commands import register_commands
from bookstock.commands._base import BookGroup
from bookstock.commands._context import AppContext
from bookstock.config.settings import BookstockSettings


@click.group(
    cls=BookGroup,
    invoke_without_command=True,
    examples="""\
  bookstock
  bookstock --offline bootstrap
  bookstock get --author Orwell --order-by date
  bookstock --json buy --id 1
  BOOKSTOCK_OFFLINE=1 bookstock shell""",
)
@click.version_option(version=__version__, prog_name="bookstock")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--offline", is_flag=True, help="Skip the Open Library import on first run.")
@click.option("--db", "db", default=None, help="Override the catalog database path.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    offline: bool,
    db: str | None,
    config_path: str | None,
) -> None:
    """bookstock — stock keeping for a small book catalog.

    Without a subcommand, starts the interactive shell.
    """
    settings = BookstockSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        offline=offline,
        db=db,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        from bookstock.commands.shell import shell

        ctx.invoke(shell)


register_commands(cli)
