"""Parser module for scene release names.

This module provides release name and library path parsing built from
ordered extraction strategies over a fixed pattern catalog.
"""

from __future__ import annotations

from scenerelease.core.parser.models import ParsedRelease, PathInfo, ReleaseType
from scenerelease.core.parser.release_parser import (
    ReleaseParser,
    parse,
    parse_movie_directory,
    parse_path,
    parse_season_directory,
    parse_series_directory,
)
from scenerelease.core.parser.title import TitleResolver

__all__ = [
    "ParsedRelease",
    "PathInfo",
    "ReleaseParser",
    "ReleaseType",
    "TitleResolver",
    "parse",
    "parse_movie_directory",
    "parse_path",
    "parse_season_directory",
    "parse_series_directory",
]
