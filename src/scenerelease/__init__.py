"""
SceneRelease - Scene Release Name Parser

Turns scene release names and media library paths into structured
metadata: title, season and episode numbering, source, codecs, languages,
provider and database identifiers.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core.parser import (
    ParsedRelease,
    PathInfo,
    ReleaseParser,
    ReleaseType,
    parse,
    parse_movie_directory,
    parse_path,
    parse_season_directory,
    parse_series_directory,
)
from .shared.constants.heuristics import DEFAULT_LIMITS, HeuristicLimits
from .shared.errors import InvalidReleaseTypeError, SceneReleaseError

__all__ = [
    "DEFAULT_LIMITS",
    "HeuristicLimits",
    "InvalidReleaseTypeError",
    "ParsedRelease",
    "PathInfo",
    "ReleaseParser",
    "ReleaseType",
    "SceneReleaseError",
    "__version__",
    "parse",
    "parse_movie_directory",
    "parse_path",
    "parse_season_directory",
    "parse_series_directory",
]
