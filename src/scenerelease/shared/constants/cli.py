"""
CLI Configuration Constants

This module contains all constants related to command-line interface
configuration, default values, and user interaction settings.
"""

from __future__ import annotations


class CLIDefaults:
    """Default values and exit codes for the CLI."""

    VERSION = "0.1.0"

    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_USAGE = 2


class CLICommands:
    """Command names."""

    PARSE = "parse"
    PATH = "path"
    GET = "get"


class CLIOptions:
    """Option spellings shared by several commands."""

    TYPE = "--type"
    TYPE_SHORT = "-t"
    CONFIG = "--config"
    CONFIG_SHORT = "-c"


class CLIHelp:
    """Help texts."""

    APP_NAME = "scenerelease"
    APP_DESCRIPTION = (
        "Parse scene release names and media library paths into structured metadata."
    )
    APP_STYLE = "rich"
    VERSION_TEXT = "SceneRelease CLI v{version}"

    PARSE_NAMES_HELP = "One or more release names, without file extension"
    PATH_PATHS_HELP = "One or more media file paths (/ or \\ separated)"
    GET_NAME_HELP = "The release name to parse"
    GET_FIELD_HELP = "Field to print, e.g. title, season, episodes, group"
    TYPE_HELP = "Release type hint: movie, tv or series. Defaults to the configured type."
    CONFIG_HELP = "Path to a TOML configuration file"


class CLIMessages:
    """CLI message templates."""

    class Error:
        """Error message templates."""

        UNKNOWN_FIELD = "Unknown field {field!r}; expected one of: {fields}"
        INTERRUPTED = "Command interrupted by user"
        DOMAIN_ERROR = "Invalid input: "
        CONFIG_ERROR = "Configuration error: "
        FILE_SYSTEM_ERROR = "File system error: "
        UNEXPECTED_ERROR = "Unexpected error: "

    class Info:
        """Informational message templates."""

        FIELD_ABSENT = "[dim]{field} is not set[/dim]"
        NO_DIRECTORY = "[dim]no directory[/dim]"
