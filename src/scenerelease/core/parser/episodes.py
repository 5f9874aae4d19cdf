"""Season and episode numbering.

Numbering conventions are tried from the most explicit to the most
ambiguous. Bare ``S5 - 02`` and ``5 - 01`` forms are only accepted inside
the configured :class:`HeuristicLimits` ranges.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from scenerelease.core.parser.strategies import first_match
from scenerelease.shared.constants.heuristics import DEFAULT_LIMITS, HeuristicLimits

logger = logging.getLogger(__name__)

_DOUBLE_EPISODE = re.compile(r"(?i)E(\d{1,3})E(\d{1,3})")
_THREE_DIGIT_EPISODE = re.compile(r"(?i)\bE(\d{3})\b")
_SEASON_PREFIX = re.compile(r"(?i)S\d+\s*$")
_SEASON_EPISODE_RANGE = re.compile(r"(?i)S(\d{1,2})E(\d{1,3})-E(\d{1,3})")
_SEASON_EPISODE_PATTERNS = (
    re.compile(r"(?i)S(\d{1,2})E(\d{1,3})"),
    re.compile(r"(?i)(?<!\d)(\d{1,2})x(\d{1,3})(?!\d)"),
    re.compile(r"(?i)Season\s*(\d{1,2})\s*Episode\s*(\d{1,3})"),
)
_SHORT_SEASON_DASH = re.compile(r"(?i)(?<![A-Za-z0-9])S(\d{1,2})\s*-\s*(\d{1,3})(?!\d)")
_BARE_DASH = re.compile(r"(?<![\d-])(\d{1,2})\s*-\s*(\d{1,3})(?!\d)")
_EPISODE_WORD = re.compile(r"(?i)Episode\s+(\d{1,3})")


class SeasonEpisode(NamedTuple):
    """Season number (None for episode-only numbering) and episode list."""

    season: int | None
    episodes: tuple[int, ...]


def _double_episode(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    match = _DOUBLE_EPISODE.search(raw)
    if not match:
        return None
    return SeasonEpisode(None, (int(match.group(1)), int(match.group(2))))


def _three_digit_episode(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    for match in _THREE_DIGIT_EPISODE.finditer(raw):
        if _SEASON_PREFIX.search(raw[: match.start()]):
            continue
        return SeasonEpisode(None, (int(match.group(1)),))
    return None


def _season_episode_range(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    match = _SEASON_EPISODE_RANGE.search(raw)
    if not match:
        return None
    first, last = int(match.group(2)), int(match.group(3))
    return SeasonEpisode(int(match.group(1)), tuple(range(first, last + 1)))


def _season_episode(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    for pattern in _SEASON_EPISODE_PATTERNS:
        match = pattern.search(raw)
        if match:
            return SeasonEpisode(int(match.group(1)), (int(match.group(2)),))
    return None


def _bounded(pattern: re.Pattern[str], raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    for match in pattern.finditer(raw):
        season, episode = int(match.group(1)), int(match.group(2))
        if limits.is_bare_season_episode(season, episode):
            return SeasonEpisode(season, (episode,))
    return None


def _short_season_dash(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    return _bounded(_SHORT_SEASON_DASH, raw, limits)


def _bare_dash(raw: str, limits: HeuristicLimits) -> SeasonEpisode | None:
    return _bounded(_BARE_DASH, raw, limits)


_STRATEGIES = (
    _double_episode,
    _three_digit_episode,
    _season_episode_range,
    _season_episode,
    _short_season_dash,
    _bare_dash,
)


def extract_season_episode(
    raw: str, limits: HeuristicLimits = DEFAULT_LIMITS
) -> SeasonEpisode | None:
    """Extract season and episode numbering.

    Recognised conventions, in priority order:

    - ``E01E02``: episode-only, several episodes
    - ``E780``: three-digit episode-only (not directly after ``S01``)
    - ``S01E01-E03``: inclusive range
    - ``S01E01``, ``1x01``, ``Season 1 Episode 1``
    - ``S5 - 02`` and bare ``5 - 01``, within ``limits``

    A season of zero (``S00E01``) is kept as season 0.

    Args:
        raw: The release name.
        limits: Accepted ranges for the bare dash forms.

    Returns:
        The numbering, or None if no convention matched.

    Examples:
        >>> extract_season_episode("Show.S01E01-E03.1080p")
        SeasonEpisode(season=1, episodes=(1, 2, 3))
    """
    return first_match(_STRATEGIES, raw, limits)


def extract_episode_word(raw: str) -> SeasonEpisode | None:
    """Extract ``Episode 61`` style numbering without a season."""
    match = _EPISODE_WORD.search(raw)
    if not match:
        return None
    return SeasonEpisode(None, (int(match.group(1)),))
