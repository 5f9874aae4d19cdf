"""Data models for parsed release names.

This module defines the immutable records returned by the release parser:
:class:`ParsedRelease` for a single release name and :class:`PathInfo` for
a full library path composed of a directory record and a file record.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from scenerelease.shared.errors import InvalidReleaseTypeError


class ReleaseType(str, Enum):
    """Release type hint supplied by the caller.

    The type is never inferred from the release name itself. ``SERIES``
    is used for series directories and behaves like ``TV`` wherever
    episodic extraction is concerned.
    """

    MOVIE = "movie"
    TV = "tv"
    SERIES = "series"

    @property
    def is_episodic(self) -> bool:
        """Return True for types that carry season and episode numbering."""
        return self in (ReleaseType.TV, ReleaseType.SERIES)

    @classmethod
    def coerce(cls, value: ReleaseType | str) -> ReleaseType:
        """Convert a ReleaseType or a case-insensitive name to a ReleaseType.

        Args:
            value: A ReleaseType member or one of "movie", "tv", "series".

        Returns:
            The matching ReleaseType member.

        Raises:
            InvalidReleaseTypeError: If value names no release type.

        Examples:
            >>> ReleaseType.coerce("TV")
            <ReleaseType.TV: 'tv'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidReleaseTypeError(value)


def _frozen_mapping(value: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(value or {}))


# Accessor field names mapped to the attribute holding their value
ACCESSOR_FIELDS: dict[str, str] = {
    "release": "release",
    "title": "title",
    "title_extra": "title_extra",
    "episode_title": "episode_title",
    "group": "group",
    "year": "year",
    "date": "date",
    "season": "season",
    "episode": "episode",
    "episodes": "episodes",
    "disc": "disc",
    "source": "source",
    "format": "format",
    "resolution": "resolution",
    "audio": "audio",
    "device": "device",
    "os": "os",
    "version": "version",
    "tmdb_id": "tmdb_id",
    "tvdb_id": "tvdb_id",
    "imdb_id": "imdb_id",
    "edition": "edition",
    "hdr": "hdr",
    "streaming_provider": "streaming_provider",
    "type": "release_type",
}


@dataclass(frozen=True)
class ParsedRelease:
    """Structured metadata extracted from a single release name.

    Single-value text fields are empty strings when absent. Numeric and
    identifier fields are ``None`` when absent.

    Attributes:
        release: The original, unmodified input string.
        release_type: Release type hint the record was parsed with.
        title: Cleaned main title.
        title_extra: Leftover free text after the episode marker when the
            title came from a generic ``Title SxxEyy remainder`` split.
        episode_title: Episode title bounded by a recognised episodic
            convention, otherwise empty.
        group: Distributing group name.
        year: Release year within the accepted year range.
        date: ``YYYY-MM-DD`` date for daily shows.
        season: Season number, ``None`` for episode-only numbering.
        episode: Episode number, set only when exactly one episode is known.
        episodes: All episode numbers in order (ranges are expanded).
        disc: Disc number from ``Disc1``/``CD2`` style markers.
        flags: Canonical flag names in catalog order.
        source: Canonical source (``BluRay``, ``WEB-DL``, ``Remux``, ...).
        format: Canonical video format (``x264``, ``H.265``, ...).
        resolution: Resolution such as ``1080p``.
        audio: Audio codec, with channel layout when present.
        device: Console platform.
        os: Operating system.
        version: Release version digits from a ``v2`` style token.
        language: Read-only mapping of language code to display name.
        tmdb_id: TMDB identifier.
        tvdb_id: TVDB identifier.
        imdb_id: IMDB identifier including the ``tt`` prefix.
        edition: Edition name from ``{edition-...}`` or ``[X-Edition]``.
        hdr: HDR format.
        streaming_provider: Streaming provider code.
    """

    release: str
    release_type: ReleaseType = ReleaseType.MOVIE
    title: str = ""
    title_extra: str = ""
    episode_title: str = ""
    group: str = ""
    year: int | None = None
    date: str | None = None
    season: int | None = None
    episode: int | None = None
    episodes: tuple[int, ...] = ()
    disc: int | None = None
    flags: tuple[str, ...] = ()
    source: str = ""
    format: str = ""
    resolution: str = ""
    audio: str = ""
    device: str = ""
    os: str = ""
    version: str = ""
    language: Mapping[str, str] = field(default_factory=_frozen_mapping)
    tmdb_id: str | None = None
    tvdb_id: str | None = None
    imdb_id: str | None = None
    edition: str | None = None
    hdr: str = ""
    streaming_provider: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "release_type", ReleaseType.coerce(self.release_type))
        object.__setattr__(self, "episodes", tuple(self.episodes))
        object.__setattr__(self, "flags", tuple(self.flags))
        if not isinstance(self.language, MappingProxyType):
            object.__setattr__(self, "language", _frozen_mapping(self.language))
        if len(self.episodes) == 1:
            object.__setattr__(self, "episode", self.episodes[0])
        elif self.episodes:
            object.__setattr__(self, "episode", None)
        elif self.episode is not None:
            object.__setattr__(self, "episodes", (self.episode,))

    def has_episode_info(self) -> bool:
        """Check if any season, episode or date numbering was found."""
        return self.season is not None or bool(self.episodes) or self.date is not None

    def get(self, name: str) -> str | None:
        """Return one field rendered as a string.

        Text fields are always present (possibly empty). Optional fields
        are ``None`` when unset, ``episodes`` is joined with commas and is
        ``None`` when empty. Unknown field names yield ``None``.

        Args:
            name: One of the accessor field names, e.g. ``"season"``.

        Returns:
            The rendered value, or None.

        Examples:
            >>> ParsedRelease("Show.S01E01", season=1, episodes=(1,)).get("season")
            '1'
        """
        attr = ACCESSOR_FIELDS.get(name)
        if attr is None:
            return None
        value = getattr(self, attr)
        if value is None:
            return None
        if isinstance(value, ReleaseType):
            return value.value
        if isinstance(value, tuple):
            return ",".join(str(item) for item in value) if value else None
        return str(value)

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a JSON-ready dictionary.

        The release type is stored under the ``type`` key.
        """
        return {
            "release": self.release,
            "title": self.title,
            "title_extra": self.title_extra,
            "episode_title": self.episode_title,
            "group": self.group,
            "year": self.year,
            "date": self.date,
            "season": self.season,
            "episode": self.episode,
            "episodes": list(self.episodes),
            "disc": self.disc,
            "flags": list(self.flags),
            "source": self.source,
            "format": self.format,
            "resolution": self.resolution,
            "audio": self.audio,
            "device": self.device,
            "os": self.os,
            "version": self.version,
            "language": dict(self.language),
            "tmdb_id": self.tmdb_id,
            "tvdb_id": self.tvdb_id,
            "imdb_id": self.imdb_id,
            "edition": self.edition,
            "hdr": self.hdr,
            "streaming_provider": self.streaming_provider,
            "type": self.release_type.value,
        }


@dataclass(frozen=True)
class PathInfo:
    """A library path split into directory, season and file records.

    Attributes:
        directory: Series or movie directory record, ``None`` when the path
            has no directory segment above a season directory.
        season: Season number from a ``Season NN`` directory.
        file: Record parsed from the file name without its extension.
        full_path: The path exactly as given.
    """

    directory: ParsedRelease | None
    season: int | None
    file: ParsedRelease
    full_path: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "directory": self.directory.to_dict() if self.directory else None,
            "season": self.season,
            "file": self.file.to_dict(),
            "full_path": self.full_path,
        }
