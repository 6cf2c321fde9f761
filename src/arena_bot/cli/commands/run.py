"""Run command: connect a bot and play until the server hangs up."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from websockets.exceptions import InvalidHandshake, InvalidURI

from arena_bot.cli.utils.output import print_error, print_success, print_warning
from arena_bot.client import ArenaClient
from arena_bot.config import BotConfig, StrategyStyle
from arena_bot.exceptions import ConfigError, MessageDecodeError, MessageLogError


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_config(
    config_path: Path | None,
    player_id: str | None,
    url: str | None,
    style: StrategyStyle | None,
    tracker: bool,
    shooter: bool,
    log_dir: Path | None,
    no_message_log: bool,
) -> BotConfig:
    """Merge command-line options over the (optional) configuration file.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    config = BotConfig.from_yaml(config_path) if config_path else BotConfig()

    updates: dict[str, object] = {}
    if player_id is not None:
        updates["player_id"] = player_id
    if url is not None:
        updates["server_url"] = url
    if style is not None:
        updates["style"] = style
    if log_dir is not None:
        updates["log_dir"] = log_dir
    if no_message_log:
        updates["log_dir"] = None

    strategy_updates: dict[str, object] = {}
    if tracker:
        strategy_updates["tracker"] = True
    if shooter:
        strategy_updates["shooter"] = True
    if strategy_updates:
        updates["strategy"] = config.strategy.model_copy(update=strategy_updates)

    return config.model_copy(update=updates)


async def play(config: BotConfig) -> None:
    """Connect, register and process frames until the connection closes."""
    async with ArenaClient(config) as client:
        await client.run()


def run(
    player_id: Annotated[
        str | None,
        typer.Option("--id", "-i", help="Player id (default: current epoch millis)"),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option("--url", help="Game server WebSocket URL"),
    ] = None,
    style: Annotated[
        StrategyStyle | None,
        typer.Option("--style", help="Decision style"),
    ] = None,
    tracker: Annotated[
        bool,
        typer.Option("--tracker", "-t", help="Planner follows the nearest player"),
    ] = False,
    shooter: Annotated[
        bool,
        typer.Option("--shooter", "-s", help="Oracle shoots at visible players"),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Path | None,
        typer.Option("--log-dir", help="Directory for the raw message log"),
    ] = None,
    no_message_log: Annotated[
        bool,
        typer.Option("--no-message-log", help="Do not write the raw message log"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Connect a bot to the game server and play until the connection closes.

    Examples:
        arena-bot run --id 42
        arena-bot run --style delegated --shooter --tracker
        arena-bot run -c bot.yaml --url ws://arena.local:8080
    """
    configure_logging(verbose)

    try:
        config = build_config(
            config_path,
            player_id,
            url,
            style,
            tracker,
            shooter,
            log_dir,
            no_message_log,
        )
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)

    try:
        asyncio.run(play(config))
    except MessageDecodeError as e:
        print_error(f"Malformed message from server: {e}")
        raise typer.Exit(1)
    except MessageLogError as e:
        print_error(f"Message log failed: {e}")
        raise typer.Exit(1)
    except (OSError, InvalidURI, InvalidHandshake) as e:
        print_error(f"Cannot connect to {config.server_url}: {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        print_warning("Interrupted")
        raise typer.Exit(130)

    print_success("Connection closed")
