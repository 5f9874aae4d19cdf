"""
Reusable Typer Options Module

This module centralizes the option definitions shared by the main callback
and the commands, so every command spells them the same way. Each option is
used as ``Annotated[<type>, <option>]`` in a command signature.
"""

from __future__ import annotations

import typer

from scenerelease.shared.constants.cli import CLIHelp, CLIOptions

# Verbose option - count-based for multiple -v flags
verbose_option = typer.Option(
    "--verbose",
    "-v",
    count=True,
    help="Enable verbose output (equivalent to --log-level DEBUG).",
)

# Log level option - enum-based with case-insensitive choices
log_level_option = typer.Option(
    "--log-level",
    case_sensitive=False,
    help="Set the logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING.",
)

# JSON output option - flag-based
json_output_option = typer.Option(
    "--json",
    help="Enable machine-readable JSON output instead of human-readable format.",
)

config_option = typer.Option(
    CLIOptions.CONFIG,
    CLIOptions.CONFIG_SHORT,
    help=CLIHelp.CONFIG_HELP,
    dir_okay=False,
)

# Release type hint; None means the configured default
release_type_option = typer.Option(
    CLIOptions.TYPE,
    CLIOptions.TYPE_SHORT,
    help=CLIHelp.TYPE_HELP,
)

# Version option - for main app only
version_option = typer.Option(
    "--version",
    "-V",
    help="Show version information and exit.",
    is_eager=True,
)
