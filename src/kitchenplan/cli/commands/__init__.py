"""CLI command implementations for the kitchenplan application.

This package contains subcommands for the kitchenplan CLI, including:
- validate: Validate a scene file
"""

from kitchenplan.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
