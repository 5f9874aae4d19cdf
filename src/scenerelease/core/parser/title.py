"""Title resolution.

Episodic names are first matched against structural conventions that
bound the episode title explicitly (``Show.S01E01.Episode.Title.German``,
``Show (2010) - S01E01 - Episode Title [..]``, daily ``- 2013-10-30 -``
and absolute ``- 001 -`` forms). When none applies, or for movies, the
title is what remains after every recognised metadata token has been
subtracted from the name.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import NamedTuple

from scenerelease.core.parser.models import ReleaseType
from scenerelease.core.parser.spans import SpanMask
from scenerelease.core.parser.strategies import clean_title, collapse_whitespace, first_match, token_pattern
from scenerelease.shared.constants.catalogs import (
    ANIME_TITLE_REJECT_CONTAINS,
    ANIME_TITLE_REJECT_EXACT,
    BRACKET_AUDIO,
    EPISODE_ONLY_TITLE_TERMINATORS,
    EPISODE_TITLE_STOP_WORDS,
    EPISODE_TITLE_TERMINATORS,
    FORMATS,
    LANGUAGE_WORDS,
    MEDIA_EXTENSIONS,
    METADATA_BRACKET_KEYWORDS,
    SOURCES,
    STREAMING_PROVIDERS,
    TITLE_NOISE_WORDS,
)

logger = logging.getLogger(__name__)


class TitleParts(NamedTuple):
    """Resolved title fields."""

    title: str
    episode_title: str
    title_extra: str


def _alternation(words: tuple[str, ...]) -> str:
    return "|".join(re.escape(word) for word in words)


# Dotted scene names. The episode marker is located once and terminators
# are only searched after it, so every strategy is a forward scan.
_DOTTED_SEASON_EPISODE = re.compile(r"(?i)(?<=.\.)S\d{1,2}E\d{1,3}(?=\.)")
_DOTTED_EPISODE_ONLY = re.compile(r"(?i)(?<=.\.)E\d{3,}(?=\.)")
_TERMINATOR = re.compile(rf"(?i)\.(?:{_alternation(EPISODE_TITLE_TERMINATORS)}|\d{{4}})")
_TERMINATOR_NO_YEAR = re.compile(rf"(?i)\.(?:{_alternation(EPISODE_TITLE_TERMINATORS)})")
_EPISODE_ONLY_TERMINATOR = re.compile(rf"(?i)\.(?:{_alternation(EPISODE_ONLY_TITLE_TERMINATORS)})")
_STOP_WORDS = tuple(
    re.compile(rf"(?i)\.{re.escape(word)}(?:\.|$)") for word in EPISODE_TITLE_STOP_WORDS
)

# Dash-separated library names: (episode title pattern, main title marker)
_DASH_EPISODE = re.compile(
    r"(?i)-\s*S\d{1,2}E\d{1,3}(?:-E\d{1,3})?\s*-\s*(?:\d{3}(?:-\d{3})?\s*-\s*)?([^-\[\{]+)"
)
_DASH_EPISODE_MARKER = re.compile(r"(?i)-\s*S\d{1,2}E\d{1,3}")
_DASH_DATE = re.compile(r"-\s*\d{4}-\d{2}-\d{2}\s*-\s*([^-\[\{]+)")
_DASH_DATE_MARKER = re.compile(r"-\s*\d{4}-\d{2}-\d{2}")
_DASH_ABSOLUTE = re.compile(r"-\s*\d{3}(?:-\d{3})?\s*-\s*([^-\[\{]+)")
_DASH_ABSOLUTE_MARKER = re.compile(r"-\s*\d{3}")

# Year and identifier stripping
_DOTTED_YEAR = re.compile(r"\.(?:19|20|21)\d{2}(?:\.|$)")
_TRAILING_YEAR = re.compile(r"(?:19|20|21)\d{2}$")
_STANDALONE_YEAR = re.compile(r"\b(?:19|20|21)\d{2}\b")
_YEAR_PARENS = re.compile(r"\(\d{4}\)")
_ID_FORMS = (
    re.compile(r"\{(?:tmdb|tvdb|imdb)-[^}]*\}"),
    re.compile(r"\[(?:tmdb|tvdb|imdb)(?:id)?-[^\]]*\]"),
    re.compile(r"\{edition-[^}]*\}"),
)

# Metadata-only episode title guard
_WORD_SPLIT = re.compile(r"[.\s_-]+")
_RESOLUTION_WORD = re.compile(r"(?i)\d{3,4}[pi]")
_YEAR_WORD = re.compile(r"(?:19|20|21)\d{2}")
_METADATA_WORDS = frozenset(
    part.lower()
    for entry in (
        *SOURCES,
        *FORMATS,
        *BRACKET_AUDIO,
        *TITLE_NOISE_WORDS,
        *LANGUAGE_WORDS,
        *EPISODE_TITLE_TERMINATORS,
        *EPISODE_ONLY_TITLE_TERMINATORS,
    )
    for part in _WORD_SPLIT.split(entry)
    if part
)
_PROVIDERS = frozenset(STREAMING_PROVIDERS)

# Subtraction
_LEADING_BRACKET = re.compile(r"^\[([^\]]+)\]")
_BRACKET = re.compile(r"\[([^\]]*)\]")
_UPPERCASE_CONTENT = re.compile(r"[0-9A-Z\s.\-]+")
_ASCII_LETTER = re.compile(r"[A-Za-z]")
_STRUCTURE_PATTERNS = (
    re.compile(r"\[\s*\]"),
    re.compile(r"\(\s*\)"),
    *_ID_FORMS,
    re.compile(r"\(\d{4}\)"),
    re.compile(r"\[\d{4}\]"),
)
_METADATA_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"(?i)S\d{1,2}E\d{1,3}(?:-E\d{1,3})?",
        r"(?i)E\d{1,3}E\d{1,3}",
        r"(?i)\bE\d{3,}\b",
        r"(?i)S\d{1,2}\s*-\s*\d{1,3}",
        r"(?i)(?<!\d)\d{1,2}x\d{1,3}(?!\d)",
        r"(?i)Season\s*\d{1,2}\s*Episode\s*\d{1,3}",
        r"\b(?:19|20|21)\d{2}\b",
        r"\(\d{3,4}p\)",
        r"(?i)\d{3,4}[pi]",
        r"\([^)]*(?:\d+p|WEB-DL|WEBRip|WEBDL|CR|NF|AMZN|H264|H265|H\.264|H\.265|AAC|DDP|2\.0|5\.1)[^)]*\)",
        r"(?i)READ\.?NFO",
        r"(?i)\bPROPER\b",
        r"(?i)\bREPACK\b",
        r"\[Eng\.Hard\.Sub\]",
        r"\[U-Edition\]",
        r"(?i)DDP\d+\.\d+",
        r"(?i)\bDDP\d+\b",
        r"(?i)Episode\s+\d+",
        r"(?i)\b(?:AAC|AC3|DTS|DDP)\s+\d+\.\d+\b",
        rf"(?i)\.(?:{_alternation(MEDIA_EXTENSIONS)})(?=\s*$)",
    )
)
_VOCABULARY_PATTERNS = tuple(
    token_pattern(word, ignore_case=True, alnum=True)
    for word in sorted(dict.fromkeys((*SOURCES, *TITLE_NOISE_WORDS)), key=len, reverse=True)
)
_UPPERCASE_PROVIDER_PATTERNS = tuple(
    re.compile(rf"(?<![A-Za-z0-9]){re.escape(provider)}(?![A-Za-z0-9])")
    for provider in STREAMING_PROVIDERS
    if not any(char.islower() for char in provider)
)
_LEFTOVER_PATTERNS = (
    re.compile(r"\[\d{6,}\]"),
    re.compile(r"(?i)\bDDP\d+\s+\d+\b"),
)
_EMPTY_BRACKETS = re.compile(r"\[\s*\]")
_EMPTY_PARENS = re.compile(r"\(\s*\)")

# Generic episodic split
_SPLIT_SEASON_EPISODE = re.compile(r"(?i)(?<=.[.\s])S\d{1,2}E\d{1,3}(?=[.\s]+.)")
_SPLIT_BARE_NUMBERING = re.compile(r"(?<=.\s)\d{1,2}\s*-\s*\d{1,3}(?!\d)")
_SEASON_EPISODE_TOKEN = re.compile(r"(?i)S\d{1,2}E\d{1,3}(?:-E\d{1,3})?")
_TRAILING_COUNTRY = re.compile(r"\([A-Z]{2}\)\s*$")


def strip_year_and_ids(text: str) -> str:
    """Remove ``(2010)``, database identifiers and edition tags from a heading.

    Used for the main title of dash-separated names and for library
    directory names.

    Examples:
        >>> strip_year_and_ids("The Series Title! (2010) {tvdb-1520211}")
        'The Series Title!'
    """
    stripped = _YEAR_PARENS.sub(" ", text)
    for pattern in _ID_FORMS:
        stripped = pattern.sub(" ", stripped)
    return clean_title(stripped)


def _strip_dotted_year(text: str) -> str:
    stripped = _DOTTED_YEAR.sub(".", text)
    stripped = _TRAILING_YEAR.sub("", stripped)
    stripped = stripped.replace(".", " ")
    stripped = _STANDALONE_YEAR.sub("", stripped)
    stripped = clean_title(stripped)
    # A title that is only a year ("1923") keeps it
    return stripped or clean_title(text.replace(".", " "))


def _is_metadata_only(text: str) -> bool:
    words = [word for word in _WORD_SPLIT.split(text) if word]
    return all(
        word.lower() in _METADATA_WORDS
        or word in _PROVIDERS
        or _RESOLUTION_WORD.fullmatch(word)
        or _YEAR_WORD.fullmatch(word)
        for word in words
    )


def _dotted_parts(title: str, episode_title: str) -> TitleParts | None:
    if _is_metadata_only(episode_title):
        return None
    return TitleParts(_strip_dotted_year(title), clean_title(episode_title.replace(".", " ")), "")


def _dotted_between(
    raw: str, marker: re.Pattern[str], terminator: re.Pattern[str]
) -> TitleParts | None:
    """Split ``Title.<marker>.Episode.Title.<terminator>`` around the first marker.

    Only the first marker is tried: a terminator after a later marker is
    also after the first one.
    """
    token = marker.search(raw)
    if token is None:
        return None
    # The episode title holds at least one character
    end = terminator.search(raw, token.end() + 2)
    if end is None:
        return None
    return _dotted_parts(raw[: token.start() - 1], raw[token.end() + 1 : end.start()])


def _dotted_terminated(raw: str) -> TitleParts | None:
    return _dotted_between(raw, _DOTTED_SEASON_EPISODE, _TERMINATOR)


def _dotted_terminated_no_year(raw: str) -> TitleParts | None:
    return _dotted_between(raw, _DOTTED_SEASON_EPISODE, _TERMINATOR_NO_YEAR)


def _dotted_episode_only(raw: str) -> TitleParts | None:
    return _dotted_between(raw, _DOTTED_EPISODE_ONLY, _EPISODE_ONLY_TERMINATOR)


def _dotted_stop_word(raw: str) -> TitleParts | None:
    token = _DOTTED_SEASON_EPISODE.search(raw)
    if token is None:
        return None
    for pattern in _STOP_WORDS:
        end = pattern.search(raw, token.end() + 2)
        if end is None:
            continue
        parts = _dotted_parts(raw[: token.start() - 1], raw[token.end() + 1 : end.start()])
        if parts is not None:
            return parts
    return None


def _dashed(
    raw: str, episode_pattern: re.Pattern[str], marker: re.Pattern[str]
) -> TitleParts | None:
    episode = episode_pattern.search(raw)
    if not episode:
        return None
    # The main title precedes the first marker and is never empty
    main = marker.search(raw, 1)
    if not main:
        return None
    return TitleParts(strip_year_and_ids(raw[: main.start()]), clean_title(episode.group(1)), "")


def _dashed_episode(raw: str) -> TitleParts | None:
    return _dashed(raw, _DASH_EPISODE, _DASH_EPISODE_MARKER)


def _dashed_date(raw: str) -> TitleParts | None:
    return _dashed(raw, _DASH_DATE, _DASH_DATE_MARKER)


def _dashed_absolute(raw: str) -> TitleParts | None:
    return _dashed(raw, _DASH_ABSOLUTE, _DASH_ABSOLUTE_MARKER)


def _is_separator(char: str) -> bool:
    return char == "." or char.isspace()


def _heading(raw: str, end: int, separator: Callable[[str], bool] = _is_separator) -> str:
    """Return ``raw[:end]`` without the separator run before end.

    At least one character is kept.
    """
    while end > 1 and separator(raw[end - 1]):
        end -= 1
    return raw[:end]


_EPISODIC_STRATEGIES = (
    _dotted_terminated,
    _dotted_terminated_no_year,
    _dotted_episode_only,
    _dotted_stop_word,
    _dashed_episode,
    _dashed_date,
    _dashed_absolute,
)


def _same_group(candidate: str, group: str) -> bool:
    return candidate.lower() == group.lower() or candidate.replace(" ", "") == group.replace(" ", "")


def _bracketed_title(raw: str, group: str) -> str | None:
    """Pick the title bracket of a ``[Group][..][Title][..]`` anime name."""
    for match in _BRACKET.finditer(raw):
        content = match.group(1).strip()
        if not content or (group and _same_group(content, group)):
            continue
        words = content.split()
        if len(words) < 2 or not all(_ASCII_LETTER.search(word) for word in words):
            continue
        lowered = content.lower()
        if any(lowered == word.lower() for word in ANIME_TITLE_REJECT_EXACT):
            continue
        if any(word in content for word in ANIME_TITLE_REJECT_CONTAINS):
            continue
        if content.isdigit():
            continue
        return clean_title(content)
    return None


def subtract_metadata(raw: str, group: str = "", provider: str = "") -> SpanMask:
    """Consume every recognised metadata span of raw.

    Args:
        raw: The release name.
        group: The extracted release group.
        provider: The extracted streaming provider.

    Returns:
        A mask whose unconsumed characters are the title candidates.
    """
    mask = SpanMask(raw)

    if group:
        leading = _LEADING_BRACKET.match(raw)
        trailing = re.search(rf"\[{re.escape(group)}\]\s*$", raw)
        dash = raw.rfind("-")
        if leading and _same_group(leading.group(1).strip(), group):
            mask.consume(*leading.span())
        elif trailing:
            mask.consume(*trailing.span())
        elif dash != -1 and raw[dash + 1 :].startswith(group):
            mask.consume(dash, len(raw))

    for match in _BRACKET.finditer(mask.view()):
        content = match.group(1)
        if any(keyword in content for keyword in METADATA_BRACKET_KEYWORDS) or (
            _UPPERCASE_CONTENT.fullmatch(content)
        ):
            mask.consume(*match.span())

    for pattern in (*_STRUCTURE_PATTERNS, *_METADATA_PATTERNS, *_VOCABULARY_PATTERNS):
        mask.consume_pattern(pattern)

    for pattern in _UPPERCASE_PROVIDER_PATTERNS:
        mask.consume_pattern(pattern)
    if provider:
        mask.consume_pattern(
            re.compile(rf"(?<![A-Za-z0-9]){re.escape(provider)}(?![A-Za-z0-9])")
        )

    for pattern in _LEFTOVER_PATTERNS:
        mask.consume_pattern(pattern)
    return mask


def render_title(mask: SpanMask, group: str = "", start: int = 0, end: int | None = None) -> str:
    """Render the unconsumed part of a mask as a clean title."""
    text = mask.render(start, end).replace(".", " ").replace("-", " ")
    text = collapse_whitespace(text)
    text = _EMPTY_BRACKETS.sub(" ", text)
    text = _EMPTY_PARENS.sub(" ", text)
    if group:
        text = re.sub(rf"(?<!\S){re.escape(group)}(?!\S)", " ", text)
    return clean_title(text)


class TitleResolver:
    """Resolve title, episode title and title remainder for a release type.

    Args:
        release_type: Release type hint. Movies only use metadata
            subtraction; episodic types try the structural conventions
            first.
    """

    def __init__(self, release_type: ReleaseType | str = ReleaseType.MOVIE) -> None:
        self.release_type = ReleaseType.coerce(release_type)

    def resolve(self, raw: str, group: str = "", provider: str = "") -> TitleParts:
        """Resolve the title fields of raw.

        Args:
            raw: The release name.
            group: The extracted release group, removed from the title.
            provider: The extracted streaming provider, removed from the title.

        Returns:
            The resolved title parts. Fields that cannot be determined are
            empty strings.
        """
        episodic = self.release_type.is_episodic
        if episodic:
            if raw.startswith("["):
                bracketed = _bracketed_title(raw, group)
                if bracketed:
                    logger.debug("Bracketed title for %s: %s", raw, bracketed)
                    return TitleParts(bracketed, "", "")
            structured = first_match(_EPISODIC_STRATEGIES, raw)
            if structured is not None:
                return structured

        mask = subtract_metadata(raw, group, provider)
        title = render_title(mask, group)
        if not episodic:
            return TitleParts(title, "", "")
        return self._split_episodic(raw, group, mask, title)

    def _split_episodic(self, raw: str, group: str, mask: SpanMask, fallback: str) -> TitleParts:
        working = raw
        leading = _LEADING_BRACKET.match(raw)
        if leading and group and _same_group(leading.group(1).strip(), group):
            working = raw[leading.end() :]

        match = _SPLIT_SEASON_EPISODE.search(working)
        if match:
            title = _strip_dotted_year(strip_year_and_ids(_heading(working, match.start())))
            token = _SEASON_EPISODE_TOKEN.search(raw)
            extra = render_title(mask, group, token.end()) if token else ""
            return TitleParts(title or fallback, "", extra)

        match = _SPLIT_BARE_NUMBERING.search(working)
        if match:
            heading = _heading(working, match.start(), str.isspace)
            title = clean_title(_TRAILING_COUNTRY.sub(" ", heading))
            if title:
                return TitleParts(title, "", "")

        return TitleParts(fallback, "", "")
