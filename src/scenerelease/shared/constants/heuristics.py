"""Numeric limits used by the extraction heuristics.

Several conventions carry no unambiguous marker. A bare ``5 - 01`` could be
season 5 episode 1 or part of an arbitrary hyphenated number, and a
bracketed ``[119]`` could be an episode or a catalogue number. These
conventions are only accepted when the numbers fall inside the ranges
below. The ranges come from observed release names and are known to be
incomplete for very long-running shows, so they are exposed as a
:class:`HeuristicLimits` value that callers can override.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Final

# Bare "S5 - 02" / "5 - 01" season-episode forms
BARE_SEASON_RANGE: Final[tuple[int, int]] = (1, 20)
BARE_EPISODE_RANGE: Final[tuple[int, int]] = (1, 200)

# Accepted release years
YEAR_RANGE: Final[tuple[int, int]] = (1900, 2100)

# Disc numbers are single-byte counters
DISC_MAX: Final = 255

# Release group detection
LEADING_GROUP_LENGTH: Final[tuple[int, int]] = (3, 30)
TRAILING_GROUP_LENGTH: Final[tuple[int, int]] = (2, 30)
GROUP_DENSITY_THRESHOLD: Final = 0.7
DASH_GROUP_MAX_LENGTH: Final = 50


@dataclass(frozen=True)
class HeuristicLimits:
    """Overridable limits for the ambiguous numbering conventions.

    Attributes:
        bare_season_range: Inclusive season bounds for ``S5 - 02`` and ``5 - 01``.
        bare_episode_range: Inclusive episode bounds for the same forms.
        year_range: Inclusive bounds for any extracted year.
        disc_max: Largest disc number that is reported.
        leading_group_length: Inclusive length bounds of a ``[Group]`` prefix.
        trailing_group_length: Inclusive length bounds of a ``[Group]`` suffix.
        group_density: Minimum share of name characters in a bracketed group.
        dash_group_max_length: Exclusive length bound of a ``-GROUP`` suffix.
    """

    bare_season_range: tuple[int, int] = BARE_SEASON_RANGE
    bare_episode_range: tuple[int, int] = BARE_EPISODE_RANGE
    year_range: tuple[int, int] = YEAR_RANGE
    disc_max: int = DISC_MAX
    leading_group_length: tuple[int, int] = LEADING_GROUP_LENGTH
    trailing_group_length: tuple[int, int] = TRAILING_GROUP_LENGTH
    group_density: float = GROUP_DENSITY_THRESHOLD
    dash_group_max_length: int = DASH_GROUP_MAX_LENGTH

    def __post_init__(self) -> None:
        for name in ("bare_season_range", "bare_episode_range", "year_range"):
            low, high = getattr(self, name)
            if low > high:
                msg = f"{name} lower bound {low} exceeds upper bound {high}"
                raise ValueError(msg)

    def is_bare_season_episode(self, season: int, episode: int) -> bool:
        """Return True when a bare ``N - M`` pair is inside the accepted ranges."""
        season_low, season_high = self.bare_season_range
        episode_low, episode_high = self.bare_episode_range
        return season_low <= season <= season_high and episode_low <= episode <= episode_high

    def is_year(self, value: int) -> bool:
        """Return True when ``value`` is an acceptable release year."""
        low, high = self.year_range
        return low <= value <= high

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> HeuristicLimits:
        """Build limits from a flat configuration table.

        Recognised keys are ``bare_season_min``, ``bare_season_max``,
        ``bare_episode_min``, ``bare_episode_max``, ``year_min`` and
        ``year_max``. Missing keys keep their defaults; unknown keys are
        ignored.

        Args:
            data: The ``heuristics`` table of the configuration file.

        Returns:
            A new HeuristicLimits instance.

        Raises:
            ValueError: If a bound is not an integer or a range is inverted.
        """
        limits = cls()
        changes: dict[str, tuple[int, int]] = {}
        for prefix, attr in (
            ("bare_season", "bare_season_range"),
            ("bare_episode", "bare_episode_range"),
            ("year", "year_range"),
        ):
            low, high = getattr(limits, attr)
            low = _as_int(data.get(f"{prefix}_min", low), f"{prefix}_min")
            high = _as_int(data.get(f"{prefix}_max", high), f"{prefix}_max")
            changes[attr] = (low, high)
        return replace(limits, **changes)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{key} must be an integer, got {value!r}"
        raise ValueError(msg)
    return value


DEFAULT_LIMITS: Final = HeuristicLimits()
