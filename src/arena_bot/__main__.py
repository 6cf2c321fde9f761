"""Entry point for ``python -m arena_bot``."""

from arena_bot.cli.main import app

if __name__ == "__main__":
    app()
