"""Session layer - per-connection bot state and decision dispatch."""

from arena_bot.session.base import Session
from arena_bot.session.delegated import DelegatedSession, PlannerFactory
from arena_bot.session.factory import create_session
from arena_bot.session.shot_sprayer import ShotSprayerSession

__all__ = [
    "Session",
    "DelegatedSession",
    "PlannerFactory",
    "ShotSprayerSession",
    "create_session",
]
