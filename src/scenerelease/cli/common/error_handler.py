"""
CLI Error Handling Utilities

This module provides consistent error handling across CLI commands: every
exception is mapped to a CliError carrying an exit code, logged, and
reported either as a rich message on stderr or as a JSON error envelope on
stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape

from scenerelease.cli.json_formatter import ErrorData, format_error
from scenerelease.shared.constants.cli import CLIDefaults, CLIMessages
from scenerelease.shared.errors import (
    CliError,
    ConfigurationError,
    DomainError,
    ErrorCode,
    InfrastructureError,
    SceneReleaseError,
    create_cli_error,
)

logger = logging.getLogger(__name__)

INTERRUPT_EXIT_CODE = 130


def handle_cli_error(
    error: BaseException,
    command: str,
    *,
    json_output: bool = False,
) -> int:
    """Handle CLI errors with consistent formatting and logging.

    Args:
        error: The exception that occurred
        command: The CLI command being executed
        json_output: Whether to output JSON format

    Returns:
        Exit code for the CLI command
    """
    error_context = _create_error_context(error, command, json_output=json_output)
    cli_error = _map_error_to_cli_error(error, command, error_context)
    _log_error(error, command, cli_error, error_context)
    _output_error(cli_error, error, command, error_context, json_output=json_output)

    return cli_error.exit_code


def _create_error_context(
    error: BaseException,
    command: str,
    *,
    json_output: bool,
) -> dict[str, Any]:
    """Create structured error context for logging."""
    return {
        "command": command,
        "error_type": type(error).__name__,
        "json_output": json_output,
    }


def _map_error_to_cli_error(
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
) -> CliError:
    """Map specific exception types to CLI errors."""
    if isinstance(error, CliError):
        error_context["error_code"] = error.code.value
        return error

    if isinstance(error, DomainError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"{CLIMessages.Error.DOMAIN_ERROR}{error.message}",
            command=command,
            original_error=error,
            code=error.code,
        )

    if isinstance(error, ConfigurationError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=f"{CLIMessages.Error.CONFIG_ERROR}{error.message}",
            command=command,
            original_error=error,
            code=error.code,
        )

    if isinstance(error, InfrastructureError):
        error_context["error_code"] = error.code.value
        return create_cli_error(
            message=error.message,
            command=command,
            original_error=error,
            code=error.code,
        )

    if isinstance(error, OSError):
        error_context["error_category"] = "file_system"
        return create_cli_error(
            message=f"{CLIMessages.Error.FILE_SYSTEM_ERROR}{error}",
            command=command,
            original_error=error,
            code=ErrorCode.FILE_READ_ERROR,
        )

    if isinstance(error, KeyboardInterrupt):
        error_context["interrupt_type"] = "user_interrupt"
        return create_cli_error(
            message=CLIMessages.Error.INTERRUPTED,
            command=command,
            exit_code=INTERRUPT_EXIT_CODE,
            code=ErrorCode.OPERATION_CANCELLED,
        )

    error_context["error_category"] = "unexpected"
    return create_cli_error(
        message=f"{CLIMessages.Error.UNEXPECTED_ERROR}{error}",
        command=command,
        original_error=error if isinstance(error, Exception) else None,
        exit_code=CLIDefaults.EXIT_ERROR,
    )


def _log_error(
    error: BaseException,
    command: str,
    cli_error: CliError,
    error_context: dict[str, Any],
) -> None:
    """Log the error with structured context.

    Library errors are expected outcomes of bad input and are logged without
    a traceback; anything else is logged with one.
    """
    if isinstance(error, KeyboardInterrupt):
        logger.warning(
            "Command interrupted: %s",
            cli_error.message,
            extra={"context": error_context},
        )
    elif isinstance(error, SceneReleaseError):
        logger.error(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
        )
    else:
        logger.exception(
            "CLI error in %s: %s",
            command,
            cli_error.message,
            extra={"context": error_context},
        )


def _output_error(
    cli_error: CliError,
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
    *,
    json_output: bool,
) -> None:
    """Output error message in appropriate format."""
    if json_output:
        _output_json_error(cli_error, error, command, error_context)
    else:
        Console(stderr=True).print(
            f"[red]Error:[/red] {escape(cli_error.message)}", highlight=False
        )


def _output_json_error(
    cli_error: CliError,
    error: BaseException,
    command: str,
    error_context: dict[str, Any],
) -> None:
    """Output error in JSON format."""
    try:
        error_output = format_error(
            command,
            cli_error.message,
            ErrorData(
                error_code=cli_error.code.value,
                error_type=type(error).__name__,
                exit_code=cli_error.exit_code,
                context=error_context,
            ),
        )
        sys.stdout.buffer.write(error_output)
        sys.stdout.buffer.write(b"\n")
        sys.stdout.buffer.flush()
    except (OSError, UnicodeEncodeError) as output_error:
        logger.exception(
            "JSON output error: %s",
            output_error,
            extra={"context": error_context},
        )
        sys.stderr.write(f"Error: {cli_error.message}\n")
