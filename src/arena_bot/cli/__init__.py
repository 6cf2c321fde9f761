"""Command-line interface for the arena bot."""
