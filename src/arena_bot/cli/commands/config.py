"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from arena_bot.cli.utils.output import console, print_error, print_success, print_warning
from arena_bot.config import BotConfig, StrategyStyle
from arena_bot.exceptions import ConfigError

app = typer.Typer(no_args_is_help=True)


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed configuration"),
    ] = False,
) -> None:
    """Validate a bot configuration file.

    Examples:
        arena-bot config validate bot.yaml
        arena-bot config validate bot.yaml --verbose
    """
    try:
        config = BotConfig.from_yaml(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    warnings: list[str] = []
    if config.style == StrategyStyle.REDUCER and (
        config.strategy.tracker or config.strategy.shooter
    ):
        warnings.append(
            "strategy settings are ignored by the reducer style - "
            "set style: delegated to use them"
        )
    if not config.server_url.startswith(("ws://", "wss://")):
        warnings.append(f"server_url ({config.server_url}) is not a WebSocket URL")

    print_success(f"Configuration is valid: {config_path}")

    if warnings:
        console.print()
        for warning in warnings:
            print_warning(warning)

    if verbose:
        console.print()
        console.print("[bold]Configuration Summary:[/bold]")
        console.print(f"  Server: {config.server_url}")
        console.print(f"  Player Id: {config.player_id or '(generated)'}")
        console.print(f"  Style: {config.style.value}")
        console.print(f"  Wire Format: {config.wire_format.value}")
        console.print(f"  Message Log Dir: {config.log_dir or '(disabled)'}")


@app.command("show")
def show(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Configuration file to show (default: built-in defaults)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Print the effective configuration as YAML."""
    try:
        config = BotConfig.from_yaml(config_path) if config_path else BotConfig()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    typer.echo(
        yaml.dump(config.model_dump(mode="json"), default_flow_style=False, sort_keys=False)
    )
