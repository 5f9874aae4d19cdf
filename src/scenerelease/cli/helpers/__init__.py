"""Display helpers for CLI commands."""

from __future__ import annotations

from .display import display_path_info, display_release, release_rows

__all__ = ["display_path_info", "display_release", "release_rows"]
