"""Configuration module for the arena bot.

This module provides Pydantic-based configuration classes with support for
YAML file loading and validation.
"""

from arena_bot.config.settings import (
    BotConfig,
    StrategySettings,
    StrategyStyle,
)

__all__ = [
    "BotConfig",
    "StrategySettings",
    "StrategyStyle",
]
