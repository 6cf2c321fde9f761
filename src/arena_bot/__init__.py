"""Autonomous bot client for the arena-combat game."""

__version__ = "0.1.0"
