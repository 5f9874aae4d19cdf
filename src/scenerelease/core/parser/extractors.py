"""Single-value field extractors.

Each public ``extract_*`` function takes the raw release name and returns
one field value. Fields with competing conventions run an ordered tuple of
strategies through :func:`first_match`, so the position of a strategy in
its tuple is its priority. Text fields return ``""`` when nothing matches;
numeric and identifier fields return ``None``.
"""

from __future__ import annotations

import logging
import re

from scenerelease.core.parser.strategies import first_in, first_match, search_group, token_pattern
from scenerelease.shared.constants.catalogs import (
    AUDIO_FALLBACK,
    BRACKET_AUDIO,
    BRACKET_FORMATS,
    BRACKET_SOURCE_RULES,
    DEVICES,
    FORMATS,
    HDR_RULES,
    LEADING_GROUP_EXCLUSIONS,
    LEGACY_GROUP_EXCLUSIONS,
    OPERATING_SYSTEMS,
    SOURCES,
    TRAILING_GROUP_EXCLUSIONS,
)
from scenerelease.shared.constants.heuristics import DEFAULT_LIMITS, HeuristicLimits

logger = logging.getLogger(__name__)

# Group
_LEADING_BRACKET = re.compile(r"^\[([^\]]+)\]")
_TRAILING_BRACKET = re.compile(r"\[([^\]]+)\]$")
_LEGACY_GROUP = re.compile(r"\.([A-Z][a-zA-Z0-9]{2,15})$")
_DASH_GROUP_FORBIDDEN = re.compile(r"[\s\[\]{}()]")

# Year
_YEAR_PARENS = re.compile(r"\((\d{4})\)")
_YEAR_BRACKETS = re.compile(r"\[(\d{4})\]")
_YEAR_BARE = re.compile(r"\b(?:19|20|21)\d{2}\b")

# Source
_REMUX_BRACKET = re.compile(r"\[[^\]]*Remux[^\]]*\]")
_SOURCE_BRACKET = re.compile(r"\[([^\]]+?)(?:-\d+p)")
_SOURCE_PATTERNS = tuple((source, token_pattern(source, ignore_case=True)) for source in SOURCES)

# Format
_FORMAT_BRACKET = re.compile(r"\[([A-Za-z0-9]+)\]")
_FORMAT_H_DOT = re.compile(r"(?i)H\.(264|265)")

# Resolution
_RESOLUTION_BRACKET = re.compile(r"\[[^\]]*-(\d{3,4})p")
_RESOLUTION_PARENS = re.compile(r"\((\d{3,4})p\)")
_RESOLUTION_BARE = re.compile(r"(?i)(?<!\d)(\d{3,4})[pi](?![A-Za-z])")

# Audio
_BRACKET = re.compile(r"\[([^\]]+)\]")
_AUDIO_CHANNEL_PATTERNS = {
    name: re.compile(rf"({re.escape(name)})\s+(\d+\.\d+)") for name in BRACKET_AUDIO
}
_AUDIO_WITH_CHANNELS = re.compile(
    r"(?i)(AAC|AC3|DTS|MP3|FLAC|TrueHD|EAC3|DDP|Dolby Digital Plus)(\s+|\.?)(\d+\.\d+)"
)
_AUDIO_BARE = re.compile(r"(?i)\b(AAC|AC3|DTS|MP3|FLAC|TrueHD|EAC3|DDP)\b")

# Device, OS, version
_DEVICE_PATTERNS = tuple((device, token_pattern(device, alnum=True)) for device in DEVICES)
_OS_PATTERNS = tuple((name, token_pattern(name, alnum=True)) for name in OPERATING_SYSTEMS)
_VERSION = re.compile(r"(?i)\bv(\d+(?:\.\d+)*)\b")

# Identifiers and edition
_TMDB_PATTERNS = (re.compile(r"\{tmdb-(\d+)\}"), re.compile(r"\[tmdb(?:id)?-(\d+)\]"))
_TVDB_PATTERNS = (re.compile(r"\{tvdb-(\d+)\}"), re.compile(r"\[tvdb(?:id)?-(\d+)\]"))
_IMDB_PATTERNS = (re.compile(r"\{imdb-(tt\d+)\}"), re.compile(r"\[imdb(?:id)?-(tt\d+)\]"))
_EDITION_PATTERNS = (re.compile(r"\{edition-([^}]+)\}"), re.compile(r"\[([A-Z]-Edition)\]"))

# Disc, date, absolute episode numbers
_DISC = re.compile(r"(?i)(?<![A-Za-z])(?:Disc|CD|DVD)\s*(\d+)")
_DATE = re.compile(r"-\s*(\d{4}-\d{2}-\d{2})\s*-")
_ABSOLUTE_EPISODE = re.compile(r"-\s*(\d{3})(?:-(\d{3}))?\s*-")
_BRACKET_NUMBER = re.compile(r"\[(\d{1,4})\]")


def _is_name_char(char: str, *, allow_space: bool) -> bool:
    return char.isalnum() or char in "-_" or (allow_space and char == " ")


def _looks_like_group(
    candidate: str,
    length: tuple[int, int],
    density: float,
    exclusions: tuple[str, ...],
    *,
    allow_space: bool,
) -> bool:
    low, high = length
    if not low <= len(candidate) <= high:
        return False
    name_chars = sum(1 for char in candidate if _is_name_char(char, allow_space=allow_space))
    if name_chars / len(candidate) <= density:
        return False
    lowered = candidate.lower()
    return not any(lowered == tag.lower() for tag in exclusions)


def _group_leading_bracket(raw: str, limits: HeuristicLimits) -> str | None:
    match = _LEADING_BRACKET.search(raw)
    if not match:
        return None
    candidate = match.group(1).strip()
    if _looks_like_group(
        candidate,
        limits.leading_group_length,
        limits.group_density,
        LEADING_GROUP_EXCLUSIONS,
        allow_space=True,
    ):
        return candidate
    return None


def _group_trailing_bracket(raw: str, limits: HeuristicLimits) -> str | None:
    match = _TRAILING_BRACKET.search(raw)
    if not match:
        return None
    candidate = match.group(1).strip()
    if _looks_like_group(
        candidate,
        limits.trailing_group_length,
        limits.group_density,
        TRAILING_GROUP_EXCLUSIONS,
        allow_space=False,
    ):
        return candidate
    return None


def _group_after_dash(raw: str, limits: HeuristicLimits) -> str | None:
    position = raw.rfind("-")
    if position == -1:
        return None
    candidate = raw[position + 1 :].split(".", 1)[0]
    if not candidate or len(candidate) >= limits.dash_group_max_length:
        return None
    if _DASH_GROUP_FORBIDDEN.search(candidate):
        return None
    return candidate


def _group_legacy(raw: str, limits: HeuristicLimits) -> str | None:
    candidate = search_group(_LEGACY_GROUP, raw)
    if candidate is None:
        return None
    lowered = candidate.lower()
    if any(lowered == word.lower() for word in LEGACY_GROUP_EXCLUSIONS):
        return None
    return candidate


_GROUP_STRATEGIES = (
    _group_leading_bracket,
    _group_trailing_bracket,
    _group_after_dash,
    _group_legacy,
)


def extract_group(raw: str, limits: HeuristicLimits = DEFAULT_LIMITS) -> str:
    """Extract the release group.

    Tries, in order: a leading ``[Group]``, a trailing ``[Group]``, the
    token after the last hyphen (without file extension) and a final
    capitalised ``.Group`` word for hyphen-less legacy names.

    Args:
        raw: The release name.
        limits: Length and density limits for bracketed groups.

    Returns:
        The group name, or an empty string.

    Examples:
        >>> extract_group("The.Matrix.1999.1080p.BluRay.x264-GROUP")
        'GROUP'
        >>> extract_group("[SubsPlease] Show - 01 (1080p)")
        'SubsPlease'
    """
    return first_match(_GROUP_STRATEGIES, raw, limits) or ""


def _year_from(pattern: re.Pattern[str], raw: str, limits: HeuristicLimits) -> int | None:
    for match in pattern.finditer(raw):
        year = int(match.group(1) if pattern.groups else match.group(0))
        if limits.is_year(year):
            return year
        if pattern is not _YEAR_BARE:
            # Only the first parenthesised or bracketed year is considered
            return None
    return None


def _year_parens(raw: str, limits: HeuristicLimits) -> int | None:
    return _year_from(_YEAR_PARENS, raw, limits)


def _year_brackets(raw: str, limits: HeuristicLimits) -> int | None:
    return _year_from(_YEAR_BRACKETS, raw, limits)


def _year_bare(raw: str, limits: HeuristicLimits) -> int | None:
    return _year_from(_YEAR_BARE, raw, limits)


_YEAR_STRATEGIES = (_year_parens, _year_brackets, _year_bare)


def extract_year(raw: str, limits: HeuristicLimits = DEFAULT_LIMITS) -> int | None:
    """Extract the release year.

    Prefers ``(2023)``, then ``[2006]``, then the first bare 19xx/20xx/21xx
    token. Years outside ``limits.year_range`` are never returned.
    """
    return first_match(_YEAR_STRATEGIES, raw, limits)


def _source_remux(raw: str) -> str | None:
    if _REMUX_BRACKET.search(raw) or "Remux-" in raw:
        return "Remux"
    return None


def _source_bracket(raw: str) -> str | None:
    for match in _SOURCE_BRACKET.finditer(raw):
        content = match.group(1)
        for spellings, canonical in BRACKET_SOURCE_RULES:
            if any(spelling in content for spelling in spellings):
                return canonical
    return None


def _source_ma_webdl(raw: str) -> str | None:
    if "MA.WEBDL" in raw or "MA WEBDL" in raw:
        return "MA WEBDL"
    return None


def _source_catalog(raw: str) -> str | None:
    for source, pattern in _SOURCE_PATTERNS:
        if pattern.search(raw):
            return source
    return None


_SOURCE_STRATEGIES = (_source_remux, _source_bracket, _source_ma_webdl, _source_catalog)


def extract_source(raw: str) -> str:
    """Extract the canonical source.

    ``Remux`` anywhere in a bracket group (or as ``Remux-2160p``) wins over
    every other source, including the ``BluRay`` it is usually paired with.
    Bracketed ``<source>-<resolution>`` groups come next, then the source
    catalog in declaration order.
    """
    return first_match(_SOURCE_STRATEGIES, raw) or ""


def _format_bracket(raw: str) -> str | None:
    for match in _FORMAT_BRACKET.finditer(raw):
        content = match.group(1)
        if content in BRACKET_FORMATS:
            return content
        lowered = content.lower()
        found = first_in(BRACKET_FORMATS, lambda fmt, lowered=lowered: fmt.lower() == lowered)
        if found is not None:
            return found
    return None


def _format_h_dot(raw: str) -> str | None:
    version = search_group(_FORMAT_H_DOT, raw)
    return f"H.{version}" if version else None


def _format_catalog(raw: str) -> str | None:
    return first_in(FORMATS, lambda fmt: fmt in raw)


_FORMAT_STRATEGIES = (_format_bracket, _format_h_dot, _format_catalog)


def extract_format(raw: str) -> str:
    """Extract the video format (``AVC``, ``x264``, ``H.265``, ...)."""
    return first_match(_FORMAT_STRATEGIES, raw) or ""


def _resolution_from(pattern: re.Pattern[str]):
    def strategy(raw: str) -> str | None:
        value = search_group(pattern, raw)
        return f"{value}p" if value else None

    strategy.__name__ = f"_resolution_{pattern.pattern[:12]}"
    return strategy


_RESOLUTION_STRATEGIES = (
    _resolution_from(_RESOLUTION_BRACKET),
    _resolution_from(_RESOLUTION_PARENS),
    _resolution_from(_RESOLUTION_BARE),
)


def extract_resolution(raw: str) -> str:
    """Extract the resolution, always rendered as ``<lines>p``."""
    return first_match(_RESOLUTION_STRATEGIES, raw) or ""


def _audio_bracket(raw: str) -> str | None:
    for match in _BRACKET.finditer(raw):
        content = match.group(1).strip()
        name = first_in(BRACKET_AUDIO, lambda audio, content=content: audio in content)
        if name is None:
            continue
        channels = _AUDIO_CHANNEL_PATTERNS[name].search(content)
        if channels:
            return f"{channels.group(1)} {channels.group(2)}"
        return name
    return None


def _audio_with_channels(raw: str) -> str | None:
    match = _AUDIO_WITH_CHANNELS.search(raw)
    if not match:
        return None
    codec = match.group(1)
    if codec.lower() == "dolby digital plus":
        codec = "DDP"
    return f"{codec} {match.group(3)}"


def _audio_bare(raw: str) -> str | None:
    return search_group(_AUDIO_BARE, raw)


def _audio_catalog(raw: str) -> str | None:
    if "[" in raw:
        return None
    return first_in(AUDIO_FALLBACK, lambda audio: audio in raw)


_AUDIO_STRATEGIES = (_audio_bracket, _audio_with_channels, _audio_bare, _audio_catalog)


def extract_audio(raw: str) -> str:
    """Extract the audio codec, with channel layout when one is given.

    Examples:
        >>> extract_audio("Movie [DTS-HD MA 5.1][AVC]")
        'DTS-HD MA 5.1'
        >>> extract_audio("Movie.2021.1080p.WEB-DL.DDP2.0.H.264-GRP")
        'DDP 2.0'
    """
    return first_match(_AUDIO_STRATEGIES, raw) or ""


def extract_hdr(raw: str) -> str:
    """Extract the HDR format, most specific first."""
    for spellings, canonical in HDR_RULES:
        if any(spelling in raw for spelling in spellings):
            return canonical
    return ""


def _first_token(patterns: tuple[tuple[str, re.Pattern[str]], ...], raw: str) -> str:
    for name, pattern in patterns:
        if pattern.search(raw):
            return name
    return ""


def extract_device(raw: str) -> str:
    """Extract the console platform as a standalone token."""
    return _first_token(_DEVICE_PATTERNS, raw)


def extract_os(raw: str) -> str:
    """Extract the operating system as a standalone token."""
    return _first_token(_OS_PATTERNS, raw)


def extract_version(raw: str) -> str:
    """Extract the version digits from a standalone ``v2``/``v1.0.3`` token."""
    return search_group(_VERSION, raw) or ""


def _first_capture(patterns: tuple[re.Pattern[str], ...], raw: str) -> str | None:
    for pattern in patterns:
        value = search_group(pattern, raw)
        if value is not None:
            return value.strip()
    return None


def extract_tmdb_id(raw: str) -> str | None:
    """Extract a TMDB id from ``{tmdb-N}``, ``[tmdb-N]`` or ``[tmdbid-N]``."""
    return _first_capture(_TMDB_PATTERNS, raw)


def extract_tvdb_id(raw: str) -> str | None:
    """Extract a TVDB id from ``{tvdb-N}``, ``[tvdb-N]`` or ``[tvdbid-N]``."""
    return _first_capture(_TVDB_PATTERNS, raw)


def extract_imdb_id(raw: str) -> str | None:
    """Extract an IMDB id (``ttN``) from braces or brackets."""
    return _first_capture(_IMDB_PATTERNS, raw)


def extract_edition(raw: str) -> str | None:
    """Extract the edition from ``{edition-...}`` or ``[X-Edition]``."""
    return _first_capture(_EDITION_PATTERNS, raw)


def extract_disc(raw: str, limits: HeuristicLimits = DEFAULT_LIMITS) -> int | None:
    """Extract a disc number from ``Disc1``, ``CD 2`` or ``DVD3``."""
    value = search_group(_DISC, raw)
    if value is None:
        return None
    disc = int(value)
    return disc if disc <= limits.disc_max else None


def extract_date(raw: str) -> str | None:
    """Extract a ``- YYYY-MM-DD -`` air date."""
    return search_group(_DATE, raw)


def _absolute_episode(raw: str, limits: HeuristicLimits) -> tuple[int, ...] | None:
    match = _ABSOLUTE_EPISODE.search(raw)
    if not match:
        return None
    start = int(match.group(1))
    if match.group(2) is None:
        return (start,)
    return tuple(range(start, int(match.group(2)) + 1))


def _bracketed_episode(raw: str, limits: HeuristicLimits) -> tuple[int, ...] | None:
    for match in _BRACKET_NUMBER.finditer(raw):
        digits = match.group(1)
        if len(digits) == 4 and limits.is_year(int(digits)):
            continue
        return (int(digits),)
    return None


_EPISODE_NUMBER_STRATEGIES = (_absolute_episode, _bracketed_episode)


def extract_episode_number(
    raw: str, limits: HeuristicLimits = DEFAULT_LIMITS
) -> tuple[int, ...] | None:
    """Extract absolute episode numbering.

    Recognises ``- 001 -`` and ``- 001-003 -`` (expanded inclusively; a
    reversed range yields an empty tuple) and a bracketed bare number such
    as ``[119]``. Four-digit bracketed numbers inside the year range are
    treated as years and skipped.

    Returns:
        The episode numbers, or None if no marker is present.
    """
    return first_match(_EPISODE_NUMBER_STRATEGIES, raw, limits)
