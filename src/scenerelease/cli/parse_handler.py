"""Command handlers for the SceneRelease CLI.

Each handler parses its inputs with a ReleaseParser configured from the
active configuration, then prints either rich tables or a JSON envelope
depending on the CLI context. Handlers return the process exit code.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console

from scenerelease.cli.common.context import get_cli_context
from scenerelease.cli.helpers.display import display_path_info, display_release
from scenerelease.cli.json_formatter import format_field, format_paths, format_releases
from scenerelease.core.config import APP_CONFIG, Config, load_config
from scenerelease.core.parser.models import ACCESSOR_FIELDS, ReleaseType
from scenerelease.core.parser.release_parser import ReleaseParser
from scenerelease.shared.constants.cli import CLICommands, CLIDefaults, CLIMessages
from scenerelease.shared.errors import (
    ErrorCode,
    PathResolutionError,
    create_cli_error,
)

logger = logging.getLogger(__name__)


def resolve_config() -> Config:
    """Return the configuration selected by the global --config option."""
    context = get_cli_context()
    if context.config_path is not None:
        return load_config(context.config_path)
    return APP_CONFIG


def build_parser(release_type: str | None = None) -> ReleaseParser:
    """Build a parser from the active configuration.

    Args:
        release_type: Explicit type hint; the configured default when None.

    Raises:
        InvalidReleaseTypeError: If release_type is not a known type.
    """
    config = resolve_config()
    chosen = ReleaseType.coerce(release_type) if release_type else config.default_release_type
    return ReleaseParser(chosen, config.limits)


def _write_json(payload: bytes) -> None:
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()


def handle_parse_command(names: list[str], release_type: str | None = None) -> int:
    """Handle the parse command.

    Args:
        names: Release names to parse.
        release_type: Optional release type hint.

    Returns:
        Exit code (0 for success)
    """
    parser = build_parser(release_type)
    logger.info("Parsing %d release name(s) as %s", len(names), parser.release_type.value)
    records = [parser.parse(name) for name in names]

    if get_cli_context().is_json_output_enabled():
        _write_json(format_releases(records))
        return CLIDefaults.EXIT_SUCCESS

    console = Console()
    for record in records:
        display_release(record, console)
    return CLIDefaults.EXIT_SUCCESS


def handle_path_command(paths: list[str]) -> int:
    """Handle the path command.

    Every path is decomposed before anything is printed, so an unresolvable
    path fails the whole command.

    Args:
        paths: Media file paths.

    Returns:
        Exit code (0 for success)

    Raises:
        PathResolutionError: If a path has too few segments to resolve.
    """
    parser = build_parser()
    infos = []
    for path in paths:
        info = parser.parse_path(path)
        if info is None:
            raise PathResolutionError(path)
        infos.append(info)

    if get_cli_context().is_json_output_enabled():
        _write_json(format_paths(infos))
        return CLIDefaults.EXIT_SUCCESS

    console = Console()
    for info in infos:
        display_path_info(info, console)
    return CLIDefaults.EXIT_SUCCESS


def handle_get_command(name: str, field: str, release_type: str | None = None) -> int:
    """Handle the get command.

    Prints the rendered field value. An unset field prints nothing and still
    succeeds; an unknown field name is a usage error.

    Args:
        name: The release name.
        field: An accessor field name.
        release_type: Optional release type hint.

    Returns:
        Exit code (0 for success)

    Raises:
        CliError: If field is not an accessor field name (exit code 2).
    """
    if field not in ACCESSOR_FIELDS:
        raise create_cli_error(
            message=CLIMessages.Error.UNKNOWN_FIELD.format(
                field=field, fields=", ".join(ACCESSOR_FIELDS)
            ),
            command=CLICommands.GET,
            exit_code=CLIDefaults.EXIT_USAGE,
            code=ErrorCode.UNKNOWN_FIELD,
        )

    value = build_parser(release_type).parse(name).get(field)
    logger.debug("Field %s of %r: %r", field, name, value)

    if get_cli_context().is_json_output_enabled():
        _write_json(format_field(name, field, value))
        return CLIDefaults.EXIT_SUCCESS

    if value is None:
        Console(stderr=True).print(CLIMessages.Info.FIELD_ABSENT.format(field=field))
    else:
        sys.stdout.write(f"{value}\n")
    return CLIDefaults.EXIT_SUCCESS
