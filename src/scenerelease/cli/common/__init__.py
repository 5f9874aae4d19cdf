"""Common CLI building blocks: context, options and error handling."""

from __future__ import annotations

from .context import CliContext, LogLevel, clear_cli_context, get_cli_context, set_cli_context
from .error_handler import handle_cli_error

__all__ = [
    "CliContext",
    "LogLevel",
    "clear_cli_context",
    "get_cli_context",
    "handle_cli_error",
    "set_cli_context",
]
