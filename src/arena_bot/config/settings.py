"""Bot configuration with Pydantic validation.

This module provides type-safe configuration classes for the arena bot, with
support for YAML file loading and defaults matching the local game server.
"""

from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arena_bot.engine import ShotSprayerConfig
from arena_bot.exceptions import ConfigError
from arena_bot.protocol import WireFormat


class StrategyStyle(StrEnum):
    """How decisions are made."""

    REDUCER = "reducer"  # Status-tagged shot-sprayer state machine
    DELEGATED = "delegated"  # Oracle / Planner / Gunner collaborators


class StrategySettings(BaseModel):
    """Settings for the delegated-strategy collaborators."""

    model_config = ConfigDict(frozen=True)

    tracker: bool = Field(
        False,
        description="Planner follows the nearest visible player",
    )
    shooter: bool = Field(
        False,
        description="Oracle aims and shoots at visible players",
    )
    aim_tolerance: float = Field(
        5.0,
        ge=0,
        le=180,
        description="Degrees off target at which the oracle still fires",
    )
    edge_margin: float = Field(
        10.0,
        ge=0,
        description="Distance from the arena edge the planner refuses to cross",
    )


class BotConfig(BaseModel):
    """Complete bot configuration.

    The configuration can be:
    - Instantiated with defaults: `BotConfig()`
    - Loaded from YAML: `BotConfig.from_yaml("bot.yaml")`
    - Saved to YAML: `config.to_yaml("bot.yaml")`
    """

    model_config = ConfigDict(frozen=True)

    server_url: str = Field(
        "ws://localhost:8080",
        description="WebSocket URL of the game server",
    )
    player_id: str | None = Field(
        None,
        description="Id sent with RegisterPlayer (default: current epoch millis)",
    )
    style: StrategyStyle = Field(
        StrategyStyle.REDUCER,
        description="Decision style",
    )
    wire_format: WireFormat = Field(
        WireFormat.NESTED,
        description="Envelope shape for outbound requests",
    )
    log_dir: Path | None = Field(
        Path("."),
        description="Directory for the raw message log (null disables it)",
    )
    engine: ShotSprayerConfig = Field(
        default_factory=ShotSprayerConfig,
        description="Shot-sprayer state machine tuning",
    )
    strategy: StrategySettings = Field(
        default_factory=StrategySettings,
        description="Delegated-strategy settings",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "BotConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated BotConfig instance.

        Raises:
            ConfigError: If the file cannot be read, is not valid YAML, or
                holds invalid values.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"Configuration {path} must be a YAML mapping")

        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
