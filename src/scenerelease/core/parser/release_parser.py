"""Release name parser.

:class:`ReleaseParser` runs every field extractor over a release name and
assembles the results into a :class:`ParsedRelease`. Parsing is total: a
name that matches nothing still yields a record, with empty fields.
"""

from __future__ import annotations

import logging
import re

from scenerelease.core.parser.episodes import extract_episode_word, extract_season_episode
from scenerelease.core.parser.extractors import (
    extract_audio,
    extract_date,
    extract_device,
    extract_disc,
    extract_edition,
    extract_episode_number,
    extract_format,
    extract_group,
    extract_hdr,
    extract_imdb_id,
    extract_os,
    extract_resolution,
    extract_source,
    extract_tmdb_id,
    extract_tvdb_id,
    extract_version,
    extract_year,
)
from scenerelease.core.parser.models import ParsedRelease, PathInfo, ReleaseType
from scenerelease.core.parser.path_parser import parse_path as _parse_library_path
from scenerelease.core.parser.tags import extract_flags, extract_languages, extract_streaming_provider
from scenerelease.core.parser.title import TitleResolver, strip_year_and_ids
from scenerelease.shared.constants.heuristics import DEFAULT_LIMITS, HeuristicLimits

logger = logging.getLogger(__name__)

_SEASON_DIRECTORY = re.compile(r"(?i)Season\s+(\d+)")


class ReleaseParser:
    """Parse scene release names and library paths.

    The release type is a caller-supplied hint; it is never inferred from
    the name. Episodic types (``tv`` and ``series``) enable season, episode
    and episode-title extraction.

    Args:
        release_type: ``"movie"``, ``"tv"`` or ``"series"`` (or a ReleaseType).
        limits: Heuristic limits, defaults to :data:`DEFAULT_LIMITS`.

    Raises:
        InvalidReleaseTypeError: If release_type is not a known type.

    Example:
        >>> parser = ReleaseParser("tv")
        >>> parser.parse("Show.S01E02.1080p.WEB-DL-GRP").episode
        2
    """

    def __init__(
        self,
        release_type: ReleaseType | str = ReleaseType.MOVIE,
        limits: HeuristicLimits | None = None,
    ) -> None:
        self.release_type = ReleaseType.coerce(release_type)
        self.limits = limits or DEFAULT_LIMITS
        self._titles = TitleResolver(self.release_type)

    def __repr__(self) -> str:
        return f"ReleaseParser(release_type={self.release_type.value!r})"

    def with_type(self, release_type: ReleaseType | str) -> ReleaseParser:
        """Return a parser for another release type sharing these limits."""
        release_type = ReleaseType.coerce(release_type)
        if release_type is self.release_type:
            return self
        return ReleaseParser(release_type, self.limits)

    def parse(self, release: str) -> ParsedRelease:
        """Parse one release name.

        Args:
            release: The release name, without file extension.

        Returns:
            The parsed record. Never raises for any input string.
        """
        limits = self.limits
        episodic = self.release_type.is_episodic
        logger.debug("Parsing %s release: %s", self.release_type.value, release)

        group = extract_group(release, limits)

        season: int | None = None
        episodes: tuple[int, ...] = ()
        if episodic:
            numbering = extract_season_episode(release, limits) or extract_episode_word(release)
            if numbering is not None:
                season, episodes = numbering
            else:
                absolute = extract_episode_number(release, limits)
                if absolute is not None:
                    episodes = absolute

        provider = extract_streaming_provider(release, group)
        title, episode_title, title_extra = self._titles.resolve(release, group, provider)

        return ParsedRelease(
            release=release,
            release_type=self.release_type,
            title=title,
            title_extra=title_extra,
            episode_title=episode_title,
            group=group,
            year=extract_year(release, limits),
            date=extract_date(release),
            season=season,
            episodes=episodes,
            disc=extract_disc(release, limits),
            flags=extract_flags(release),
            source=extract_source(release),
            format=extract_format(release),
            resolution=extract_resolution(release),
            audio=extract_audio(release),
            device=extract_device(release),
            os=extract_os(release),
            version=extract_version(release),
            language=extract_languages(release),
            tmdb_id=extract_tmdb_id(release),
            tvdb_id=extract_tvdb_id(release),
            imdb_id=extract_imdb_id(release),
            edition=extract_edition(release),
            hdr=extract_hdr(release),
            streaming_provider=provider,
        )

    def parse_series_directory(self, name: str) -> ParsedRelease:
        """Parse a series directory such as ``Show (2010) {tvdb-123}``."""
        return ParsedRelease(
            release=name,
            release_type=ReleaseType.SERIES,
            title=strip_year_and_ids(name),
            year=extract_year(name, self.limits),
            tmdb_id=extract_tmdb_id(name),
            tvdb_id=extract_tvdb_id(name),
            imdb_id=extract_imdb_id(name),
        )

    def parse_movie_directory(self, name: str) -> ParsedRelease:
        """Parse a movie directory such as ``Movie (2010) {tmdb-123}``."""
        return ParsedRelease(
            release=name,
            release_type=ReleaseType.MOVIE,
            title=strip_year_and_ids(name),
            year=extract_year(name, self.limits),
            tmdb_id=extract_tmdb_id(name),
            imdb_id=extract_imdb_id(name),
        )

    def parse_season_directory(self, name: str) -> int | None:
        """Return the season number of a ``Season NN`` directory, else None."""
        match = _SEASON_DIRECTORY.search(name)
        return int(match.group(1)) if match else None

    def parse_path(self, path: str) -> PathInfo | None:
        """Decompose a library path into directory, season and file records."""
        return _parse_library_path(self, path)


def parse(release_type: ReleaseType | str, release: str) -> ParsedRelease:
    """Parse one release name with a throwaway parser."""
    return ReleaseParser(release_type).parse(release)


def parse_series_directory(name: str) -> ParsedRelease:
    return ReleaseParser(ReleaseType.SERIES).parse_series_directory(name)


def parse_movie_directory(name: str) -> ParsedRelease:
    return ReleaseParser(ReleaseType.MOVIE).parse_movie_directory(name)


def parse_season_directory(name: str) -> int | None:
    return ReleaseParser().parse_season_directory(name)


def parse_path(path: str) -> PathInfo | None:
    """Decompose a library path with default limits."""
    return ReleaseParser().parse_path(path)
