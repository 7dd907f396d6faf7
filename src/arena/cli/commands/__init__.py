"""CLI command implementations for the arena application.

This package contains subcommands for the arena CLI, including:
- validate: Validate a configuration file
"""

from arena.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
