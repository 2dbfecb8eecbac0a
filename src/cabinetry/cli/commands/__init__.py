"""CLI command implementations for the cabinetry application.

This package contains subcommands for the cabinetry CLI:
- validate-config: Validate an engine configuration file
"""

from cabinetry.cli.commands.validate import validate_command

__all__ = ["validate_command"]
