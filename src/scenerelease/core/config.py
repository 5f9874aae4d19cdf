"""Configuration management for SceneRelease.

This module handles loading configuration from pyproject.toml (or an
explicit TOML file) and provides default values for all settings.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from scenerelease.core.parser.models import ReleaseType
from scenerelease.shared.constants.heuristics import DEFAULT_LIMITS, HeuristicLimits
from scenerelease.shared.errors import (
    ErrorCode,
    InvalidReleaseTypeError,
    create_config_error,
)

logger = logging.getLogger(__name__)

DEFAULT_LOG_MAX_BYTES = 10485760  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5


class Config:
    """Application configuration container."""

    def __init__(self, config_dict: dict[str, Any]) -> None:
        """Initialize configuration from dictionary.

        Args:
            config_dict: The ``[tool.scenerelease.config]`` table. A nested
                ``heuristics`` table overrides the heuristic limits.

        Raises:
            ValueError: If a heuristic bound is invalid.
            InvalidReleaseTypeError: If default_release_type is unknown.
        """
        self.log_file: str | None = config_dict.get("log_file")
        self.log_level: str = config_dict.get("log_level", "WARNING")
        self.log_max_bytes: int = config_dict.get("log_max_bytes", DEFAULT_LOG_MAX_BYTES)
        self.log_backup_count: int = config_dict.get(
            "log_backup_count", DEFAULT_LOG_BACKUP_COUNT
        )
        self.default_release_type = ReleaseType.coerce(
            config_dict.get("default_release_type", ReleaseType.MOVIE.value)
        )

        heuristics = config_dict.get("heuristics")
        if heuristics is not None and not isinstance(heuristics, dict):
            msg = f"heuristics must be a table, got {type(heuristics).__name__}"
            raise ValueError(msg)
        if heuristics:
            self.limits = HeuristicLimits.from_mapping(heuristics)
        else:
            self.limits = DEFAULT_LIMITS

    def get_log_file_path(self) -> Path | None:
        """Get the absolute path to the log file.

        Returns:
            Path object for the log file, or None when logging to the
            console only.
        """
        if not self.log_file:
            return None
        log_path = Path(self.log_file)
        if not log_path.is_absolute():
            log_path = _find_project_root() / log_path
        return log_path


def _section(data: dict[str, Any]) -> dict[str, Any]:
    """Pick the scenerelease table out of a parsed TOML document.

    A standalone config file may hold the keys at the top level; a
    pyproject.toml holds them under ``[tool.scenerelease.config]`` with the
    heuristics either nested or in ``[tool.scenerelease.heuristics]``.
    """
    tool = data.get("tool", {}).get("scenerelease")
    if tool is None:
        return dict(data)

    section = dict(tool.get("config", {}))
    if "heuristics" in tool:
        section["heuristics"] = {**section.get("heuristics", {}), **tool["heuristics"]}
    return section


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from pyproject.toml or custom config file.

    Args:
        config_path: Optional path to custom configuration file.

    Returns:
        Config object with loaded settings.

    Raises:
        ConfigurationError: If config_path is given and cannot be read or
            holds invalid values.
    """
    if config_path is not None:
        if not config_path.exists():
            raise create_config_error(
                f"Configuration file not found: {config_path}",
                config_path,
                code=ErrorCode.CONFIG_NOT_FOUND,
            )
        try:
            return Config(_section(_read_toml(config_path)))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise create_config_error(
                f"Cannot read configuration file: {e}", config_path, e
            ) from e
        except (ValueError, InvalidReleaseTypeError) as e:
            raise create_config_error(
                f"Invalid configuration value: {e}", config_path, e
            ) from e

    project_root = _find_project_root()
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return Config({})

    try:
        return Config(_section(_read_toml(pyproject_path)))
    except (OSError, ValueError, KeyError, InvalidReleaseTypeError) as e:
        logger.warning("Failed to load configuration from %s: %s", pyproject_path, e)
        return Config({})


def _find_project_root() -> Path:
    """Find the project root directory.

    Returns:
        Path to the project root directory.
    """
    current = Path.cwd()
    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return current


# Global configuration instance
APP_CONFIG = load_config()
