"""Multi-valued tags: languages, flags and the streaming provider."""

from __future__ import annotations

import logging
import re

from scenerelease.core.parser.strategies import first_match
from scenerelease.shared.constants.catalogs import (
    BRACKET_LANGUAGE_CODES,
    COUNTRY_CODES,
    FLAGS,
    LANGUAGE_NAMES,
    MULTILINGUAL_KEY,
    MULTILINGUAL_NAME,
    PROVIDER_SCAN_MASKS,
    STREAMING_PROVIDERS,
)

logger = logging.getLogger(__name__)

_BRACKET_CODE_PATTERNS = tuple(
    (code.lower(), name, re.compile(rf"\[{code}\]")) for code, name in BRACKET_LANGUAGE_CODES
)
_ENGLISH_BRACKET = re.compile(r"\[Eng(?:\.Hard\.Sub)?\]")
_MULTILINGUAL = re.compile(r"(?<![A-Za-z])(?:Multi(?![a-z])|MULTI)")
_COUNTRY = re.compile(r"\(([A-Z]{2})\)")
_COUNTRY_NAMES = dict(COUNTRY_CODES)

_FLAG_PATTERNS = tuple((name, re.compile(pattern, re.IGNORECASE)) for name, pattern in FLAGS)

_AMZN_BRACKET = re.compile(r"(?i)\[AMZN\s+WEBDL")
_PROVIDER_BEFORE_WEB = re.compile(r"(?i)(?<!\d)(\d+p)\.([A-Z0-9]+)\.(?:WEB-DL|WEBRip|WEBDL)")
_CR_BEFORE_WEB = re.compile(r"(?i)\bCR\s+(?:WEB-DL|WEBRip|WEBDL)")
_NF_BEFORE_WEB = re.compile(r"(?i)\bNF\s+(?:WEB-DL|WEBRip|WEBDL)")
_SCAN_MASKS = tuple(re.compile(mask) for mask in PROVIDER_SCAN_MASKS)


def _is_scannable(provider: str) -> bool:
    # Mixed-case dictionary words ("Apple", "Max") are too common in titles
    return not (provider.isalpha() and not provider.isupper())


_PROVIDER_SCAN = tuple(
    (provider, re.compile(rf"(?<![A-Za-z0-9]){re.escape(provider)}(?![A-Za-z0-9])"))
    for provider in STREAMING_PROVIDERS
    if _is_scannable(provider)
)


def extract_languages(raw: str) -> dict[str, str]:
    """Extract languages as an ordered code-to-name mapping.

    Bracketed codes (``[DE]``) are read first, then written language names
    (``German``, ``iTALiAN``), then multilingual markers and ``(CA)`` style
    region codes. An earlier source is never overwritten by a later one.

    Args:
        raw: The release name.

    Returns:
        Mapping of lowercase code to display name, in discovery order.

    Examples:
        >>> extract_languages("Movie.2020.German.DL.1080p.BluRay.x264-GRP")
        {'de': 'German'}
    """
    languages: dict[str, str] = {}
    for code, name, pattern in _BRACKET_CODE_PATTERNS:
        if pattern.search(raw):
            languages[code] = name
    if _ENGLISH_BRACKET.search(raw):
        languages.setdefault("en", "English")

    for spelling, code in LANGUAGE_NAMES:
        if code not in languages and spelling in raw:
            languages[code] = spelling

    if _MULTILINGUAL.search(raw):
        languages.setdefault(MULTILINGUAL_KEY, MULTILINGUAL_NAME)

    for match in _COUNTRY.finditer(raw):
        code = match.group(1)
        name = _COUNTRY_NAMES.get(code)
        if name is not None:
            languages.setdefault(code.lower(), name)
    return languages


def extract_flags(raw: str) -> tuple[str, ...]:
    """Extract release flags in catalog order, without duplicates."""
    flags: list[str] = []
    for name, pattern in _FLAG_PATTERNS:
        if name not in flags and pattern.search(raw):
            flags.append(name)
    return tuple(flags)


def _known_provider(token: str) -> str | None:
    lowered = token.lower()
    for provider in STREAMING_PROVIDERS:
        if provider.lower() == lowered:
            return provider
    return None


def _provider_amzn_bracket(raw: str, group: str) -> str | None:
    return "AMZN" if _AMZN_BRACKET.search(raw) else None


def _provider_before_web(raw: str, group: str) -> str | None:
    for match in _PROVIDER_BEFORE_WEB.finditer(raw):
        token = match.group(2)
        known = _known_provider(token)
        if known is not None:
            return known
        if 2 <= len(token) <= 6 and all(char.isupper() or char.isdigit() for char in token):
            return token
    return None


def _provider_adjacent_web(raw: str, group: str) -> str | None:
    if _CR_BEFORE_WEB.search(raw):
        return "CR"
    if _NF_BEFORE_WEB.search(raw):
        return "NF"
    return None


def _masked(raw: str, group: str) -> str:
    masked = raw
    for mask in _SCAN_MASKS:
        masked = mask.sub(lambda match: " " * len(match.group(0)), masked)
    if group:
        pattern = re.compile(rf"(?<![A-Za-z0-9]){re.escape(group)}(?![A-Za-z0-9])")
        masked = pattern.sub(" " * len(group), masked)
    return masked


def _provider_catalog_scan(raw: str, group: str) -> str | None:
    masked = _masked(raw, group)
    for provider, pattern in _PROVIDER_SCAN:
        if pattern.search(masked):
            return provider
    return None


_PROVIDER_STRATEGIES = (
    _provider_amzn_bracket,
    _provider_before_web,
    _provider_adjacent_web,
    _provider_catalog_scan,
)


def extract_streaming_provider(raw: str, group: str = "") -> str:
    """Extract the streaming provider code.

    The provider usually sits between the resolution and the web source
    (``1080p.NF.WEB-DL``). Otherwise the provider catalog is scanned for a
    standalone token. The release group is hidden from the scan so a group
    named like a provider (``-HBO``) is not reported twice.

    Args:
        raw: The release name.
        group: The already extracted release group.

    Returns:
        The provider spelling, or an empty string.
    """
    return first_match(_PROVIDER_STRATEGIES, raw, group) or ""
