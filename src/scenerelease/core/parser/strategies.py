"""Ordered strategy evaluation and small text helpers shared by extractors.

Every field with competing conventions is extracted by a tuple of
strategy functions. Each strategy returns a value or ``None``; the first
non-``None`` value wins, so the tuple order is the priority order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from re import Pattern
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_WHITESPACE = re.compile(r"\s+")
_EMPTY_PARENS = re.compile(r"\(\s*\)")
_EMPTY_BRACKETS = re.compile(r"\[\s*\]")


def first_match(strategies: Sequence[Callable[..., T | None]], *args: Any) -> T | None:
    """Run strategies in order and return the first non-None result.

    Args:
        strategies: Strategy callables in priority order.
        *args: Arguments passed to every strategy.

    Returns:
        The first non-None strategy result, or None if all strategies miss.
    """
    for strategy in strategies:
        result = strategy(*args)
        if result is not None:
            logger.debug("Strategy %s matched: %r", strategy.__name__, result)
            return result
    return None


def search_group(pattern: Pattern[str], text: str, group: int = 1) -> str | None:
    """Return one capture group of the first match, or None."""
    match = pattern.search(text)
    return match.group(group) if match else None


def first_in(candidates: Iterable[str], predicate: Callable[[str], bool]) -> str | None:
    """Return the first candidate accepted by predicate."""
    for candidate in candidates:
        if predicate(candidate):
            return candidate
    return None


def token_pattern(spelling: str, *, ignore_case: bool = False, alnum: bool = False) -> Pattern[str]:
    """Compile a pattern matching spelling as a standalone token.

    Spaces in the spelling also match a dot so ``"Web Capture"`` finds
    ``Web.Capture``.

    Args:
        spelling: The literal token.
        ignore_case: Match case-insensitively.
        alnum: Guard with alphanumeric boundaries instead of letter boundaries.
    """
    body = r"[\s.]".join(re.escape(part) for part in spelling.split(" "))
    guard = "A-Za-z0-9" if alnum else "A-Za-z"
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"(?<![{guard}]){body}(?![{guard}])", flags)


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def clean_title(text: str) -> str:
    """Normalise a title candidate.

    Collapses whitespace and drops empty ``()`` and ``[]`` pairs.
    """
    cleaned = collapse_whitespace(text)
    cleaned = _EMPTY_PARENS.sub(" ", cleaned)
    cleaned = _EMPTY_BRACKETS.sub(" ", cleaned)
    return collapse_whitespace(cleaned)
