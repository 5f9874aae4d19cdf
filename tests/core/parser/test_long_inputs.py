"""Parsing time stays linear on long and repetitive names."""

from __future__ import annotations

import time

import pytest

from scenerelease.core.parser import ReleaseParser, ReleaseType, parse_path

# Generous for slow CI machines; a quadratic scan over these inputs takes far longer
TIME_LIMIT_SECONDS = 2.0

LONG_NAMES = {
    "repeated_episode_markers": "a.S01E01." * 450,
    "plain_text": "x" * 4000,
    "words": "word " * 800,
    "whitespace_run": "Show" + " " * 4000 + "S01E01",
    "repeated_dash_layout": "Show - S01E01 - " * 250,
    "repeated_bare_numbering": "Show 1 - 2 " * 360,
    "repeated_dotted_years": "Show.2010." * 400,
}


def _timed_parse(parser: ReleaseParser, name: str) -> float:
    start = time.perf_counter()
    result = parser.parse(name)
    elapsed = time.perf_counter() - start
    assert result.release == name
    return elapsed


@pytest.mark.parametrize("release_type", list(ReleaseType))
@pytest.mark.parametrize("name", LONG_NAMES.values(), ids=LONG_NAMES.keys())
def test_long_name_parses_quickly(release_type: ReleaseType, name: str) -> None:
    elapsed = _timed_parse(ReleaseParser(release_type), name)
    assert elapsed < TIME_LIMIT_SECONDS, f"{len(name)} chars took {elapsed:.1f}s"


def test_repeated_markers_keep_first_episode() -> None:
    result = ReleaseParser(ReleaseType.TV).parse("a.S01E01." * 450)

    assert (result.season, result.episode) == (1, 1)
    assert result.title == "a"


def test_long_path_parses_quickly() -> None:
    path = "/tv/" + "Show " * 400 + "/Season 01/" + "a.S01E01." * 300 + "mkv"

    start = time.perf_counter()
    info = parse_path(path)
    elapsed = time.perf_counter() - start

    assert info is not None
    assert info.season == 1
    assert elapsed < TIME_LIMIT_SECONDS
