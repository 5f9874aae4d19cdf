"""Library path decomposition.

A library path is ``<series or movie dir>/[Season NN/]<file>``. The file
name is parsed as an episode first and falls back to a movie when no
numbering is found; the directory above it (or above the season
directory) is parsed with the matching directory parser.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from scenerelease.core.parser.models import PathInfo, ReleaseType
from scenerelease.shared.constants.catalogs import MEDIA_EXTENSIONS, SUBTITLE_EXTENSIONS

if TYPE_CHECKING:
    from scenerelease.core.parser.release_parser import ReleaseParser

logger = logging.getLogger(__name__)

_LIBRARY_EXTENSIONS = frozenset((*MEDIA_EXTENSIONS, *SUBTITLE_EXTENSIONS))


def strip_media_extension(file_name: str) -> str:
    """Remove a known video or subtitle extension.

    Other suffixes (``.1080p``, ``.x264``) are part of the release name and
    are kept.
    """
    suffix = PurePosixPath(file_name).suffix
    if suffix and suffix[1:].lower() in _LIBRARY_EXTENSIONS:
        return file_name[: -len(suffix)]
    return file_name


def _is_text(segment: str) -> bool:
    try:
        segment.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def parse_path(parser: ReleaseParser, path: str) -> PathInfo | None:
    """Decompose a library path into directory, season and file records.

    Both ``/`` and ``\\`` are accepted as separators.

    Args:
        parser: Parser providing the heuristic limits and directory parsers.
        path: The full path of a media file.

    Returns:
        The decomposed path, or None when the path has no file name or no
        parent directory, or a segment is not valid text.
    """
    pure = PurePosixPath(path.replace("\\", "/"))
    file_name = pure.name
    parent_name = pure.parent.name
    if not file_name or not parent_name:
        logger.debug("Path has too few segments: %s", path)
        return None
    if not (_is_text(file_name) and _is_text(parent_name)):
        logger.debug("Path has undecodable segments: %s", path)
        return None

    stem = strip_media_extension(file_name)
    file_record = parser.with_type(ReleaseType.TV).parse(stem)
    if file_record.season is None and not file_record.episodes:
        file_record = parser.with_type(ReleaseType.MOVIE).parse(stem)

    season = parser.parse_season_directory(parent_name)
    directory_name = pure.parent.parent.name if season is not None else parent_name

    directory = None
    if directory_name and _is_text(directory_name):
        if file_record.release_type.is_episodic:
            directory = parser.parse_series_directory(directory_name)
        else:
            directory = parser.parse_movie_directory(directory_name)

    return PathInfo(directory=directory, season=season, file=file_record, full_path=path)
