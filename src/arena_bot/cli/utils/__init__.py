"""CLI utility modules."""

from arena_bot.cli.utils.output import (
    console,
    print_error,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "print_error",
    "print_success",
    "print_warning",
]
