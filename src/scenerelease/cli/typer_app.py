"""
SceneRelease Typer CLI Application

This is the Typer-based command line interface for SceneRelease. It wires
the global options into a CliContext, configures logging, and dispatches to
the command handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from scenerelease.cli.common.context import CliContext, LogLevel, get_cli_context, set_cli_context
from scenerelease.cli.common.error_handler import handle_cli_error
from scenerelease.cli.common.options import (
    config_option,
    json_output_option,
    log_level_option,
    release_type_option,
    verbose_option,
    version_option,
)
from scenerelease.cli.parse_handler import (
    handle_get_command,
    handle_parse_command,
    handle_path_command,
    resolve_config,
)
from scenerelease.core.logging import setup_logging
from scenerelease.shared.constants.cli import CLICommands, CLIDefaults, CLIHelp

__version__ = CLIDefaults.VERSION


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def _configured_log_level(configured: str) -> LogLevel:
    try:
        return LogLevel(configured.upper())
    except ValueError:
        return LogLevel.WARNING


def main_callback(
    verbose: int,
    log_level: LogLevel | None,
    json_output: bool,
    config_path: Path | None,
    version: bool,
) -> None:
    """
    Process the global options before any command runs.

    Sets the CLI context, loads the configuration it names and configures
    logging with the effective level (``--verbose`` forces DEBUG).

    Args:
        verbose: Verbosity level (count-based)
        log_level: Explicit logging level, or None for the configured one
        json_output: Whether to output in JSON format
        config_path: Explicit TOML configuration file
        version: Whether to show version information
    """
    if version:
        version_callback(value=True)

    context = CliContext(
        verbose=verbose,
        json_output=json_output,
        config_path=config_path,
    )
    set_cli_context(context)

    config = resolve_config()
    if log_level is None:
        log_level = _configured_log_level(config.log_level)
    context = context.model_copy(update={"log_level": log_level})
    set_cli_context(context)

    log_file = config.get_log_file_path()
    setup_logging(
        log_file=str(log_file) if log_file else None,
        log_level=context.get_effective_log_level(),
        log_max_bytes=config.log_max_bytes,
        log_backup_count=config.log_backup_count,
    )


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
    no_args_is_help=True,
    invoke_without_command=True,
)


@app.callback()
def main(
    verbose: Annotated[int, verbose_option] = 0,
    log_level: Annotated[Optional[LogLevel], log_level_option] = None,  # noqa: UP007
    json_output: Annotated[bool, json_output_option] = False,
    config_path: Annotated[Optional[Path], config_option] = None,  # noqa: UP007
    version: Annotated[bool, version_option] = False,
) -> None:
    """Parse scene release names and media library paths."""
    try:
        main_callback(verbose, log_level, json_output, config_path, version)
    except typer.Exit:
        raise
    except Exception as e:
        exit_code = handle_cli_error(e, "main-callback", json_output=json_output)
        raise typer.Exit(exit_code) from e


def _run(command: str, handler: Callable[..., int], *args: Any) -> None:
    """Run a handler and turn its result or error into the process exit code."""
    json_output = get_cli_context().is_json_output_enabled()
    try:
        exit_code = handler(*args)
    except Exception as e:
        exit_code = handle_cli_error(e, command, json_output=json_output)
    if exit_code:
        raise typer.Exit(exit_code)


@app.command(CLICommands.PARSE)
def parse_command(
    names: Annotated[list[str], typer.Argument(help=CLIHelp.PARSE_NAMES_HELP)],
    release_type: Annotated[Optional[str], release_type_option] = None,  # noqa: UP007
) -> None:
    """
    Parse one or more release names.

    Examples:
        # Movie release
        scenerelease parse "The.Matrix.1999.1080p.BluRay.x264-GROUP"

        # Episodes, machine readable
        scenerelease --json parse --type tv "Show.S01E02.720p.HDTV.x264-GRP"
    """
    _run(CLICommands.PARSE, handle_parse_command, names, release_type)


@app.command(CLICommands.PATH)
def path_command(
    paths: Annotated[list[str], typer.Argument(help=CLIHelp.PATH_PATHS_HELP)],
) -> None:
    """
    Decompose media library paths into directory, season and file records.

    Example:
        scenerelease path "/tv/Show (2010)/Season 01/Show (2010) - S01E01 - Pilot.mkv"
    """
    _run(CLICommands.PATH, handle_path_command, paths)


@app.command(CLICommands.GET)
def get_command(
    name: Annotated[str, typer.Argument(help=CLIHelp.GET_NAME_HELP)],
    field: Annotated[str, typer.Argument(help=CLIHelp.GET_FIELD_HELP)],
    release_type: Annotated[Optional[str], release_type_option] = None,  # noqa: UP007
) -> None:
    """
    Print a single field of a parsed release name.

    Example:
        scenerelease get --type tv "Show.S01E02.720p.HDTV.x264-GRP" episode
    """
    _run(CLICommands.GET, handle_get_command, name, field, release_type)
