"""Main CLI application and entry point.

This module defines the main Typer application and aggregates the run
command and the config command group.
"""

import typer

from arena_bot.cli.commands import config as config_commands
from arena_bot.cli.commands.run import run

app = typer.Typer(
    name="arena-bot",
    help="Autonomous bot client for the arena game",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

app.command("run")(run)
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback() -> None:
    """Arena bot CLI.

    Use the subcommands to run a bot or inspect configuration files.
    """
    pass


if __name__ == "__main__":
    app()
