"""SceneRelease Error Handling Module

Structured error classes with context information for the boundaries of
the library: invalid caller input, configuration loading and the command
line. The extraction engine itself never raises for any release name; a
name that matches nothing yields a record with empty fields.

The hierarchy follows these principles:
- One Source of Truth: all error codes are defined in ErrorCode
- Structured Context: ErrorContextModel carries primitive-only context
- Proper Exception Chaining: the original exception is preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for the SceneRelease library and CLI."""

    # Caller input
    INVALID_RELEASE_TYPE = "INVALID_RELEASE_TYPE"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"

    # Path decomposition
    PATH_RESOLUTION_FAILED = "PATH_RESOLUTION_FAILED"

    # Configuration
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    # File system
    FILE_READ_ERROR = "FILE_READ_ERROR"

    # CLI
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"

    # Application
    OPERATION_CANCELLED = "OPERATION_CANCELLED"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum and Decimal values to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContextModel:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are kept in
    additional_data so the context can always be serialized.

    Attributes:
        file_path: Optional file or configuration path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export the set fields as a serializable dict.

        Returns:
            Dictionary with a guaranteed additional_data key.

        Example:
            >>> context = ErrorContextModel(file_path="/tv/show.mkv")
            >>> context.safe_dict()
            {'file_path': '/tv/show.mkv', 'additional_data': {}}
        """
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = dict(self.additional_data or {})
        return data


class SceneReleaseError(Exception):
    """Base exception class for all SceneRelease errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContextModel | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize SceneReleaseError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContextModel()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output.

        Returns:
            Dictionary with code, message, context and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(SceneReleaseError):
    """Domain-specific errors.

    Raised when a caller passes input the library cannot interpret.

    Examples:
    - Unknown release type
    - Unknown accessor field
    """


class InfrastructureError(SceneReleaseError):
    """Infrastructure-related errors.

    Raised when interacting with the file system.

    Examples:
    - Configuration file not found
    - Configuration file unreadable
    """


class ConfigurationError(InfrastructureError):
    """Configuration loading and validation errors.

    Examples:
    - Invalid TOML syntax
    - Heuristic bound that is not an integer
    - Inverted heuristic range
    """


class InvalidReleaseTypeError(DomainError):
    """Raised when a release type hint is not movie, tv or series."""

    def __init__(self, value: object) -> None:
        super().__init__(
            ErrorCode.INVALID_RELEASE_TYPE,
            f"Unknown release type {value!r}; expected one of movie, tv, series",
            ErrorContextModel(
                operation="coerce_release_type",
                additional_data={"value": str(value)},
            ),
        )
        self.value = value


class PathResolutionError(DomainError):
    """Raised at the CLI boundary when a path has too few segments to resolve."""

    def __init__(self, path: str) -> None:
        super().__init__(
            ErrorCode.PATH_RESOLUTION_FAILED,
            f"Cannot resolve a directory and file name from {path!r}",
            ErrorContextModel(file_path=path, operation="parse_path"),
        )
        self.path = path


class CliError(SceneReleaseError):
    """CLI-specific error carrying the process exit code."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContextModel | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code


def create_config_error(
    message: str,
    config_path: str | Path | None = None,
    original_error: Exception | None = None,
    code: ErrorCode = ErrorCode.CONFIG_INVALID,
) -> ConfigurationError:
    """Create a configuration error with context."""
    context = ErrorContextModel(
        file_path=str(config_path) if config_path is not None else None,
        operation="load_config",
    )
    return ConfigurationError(code, message, context, original_error)


def create_cli_error(
    message: str,
    command: str | None = None,
    original_error: Exception | None = None,
    exit_code: int = 1,
    code: ErrorCode = ErrorCode.CLI_UNEXPECTED_ERROR,
) -> CliError:
    """Create a CLI error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"command": command} if command else None
    )
    context = ErrorContextModel(
        operation="cli",
        additional_data=additional_data,
    )
    return CliError(code, message, context, original_error, command, exit_code)
