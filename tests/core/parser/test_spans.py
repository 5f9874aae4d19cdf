"""Tests for SpanMask."""

from __future__ import annotations

import re

from scenerelease.core.parser.spans import SpanMask


def test_consume_blanks_view() -> None:
    mask = SpanMask("Movie.2020.1080p")
    mask.consume(5, 10)
    assert mask.view() == "Movie     .1080p"
    assert mask.is_consumed(5)
    assert not mask.is_consumed(4)


def test_consume_clamps_bounds() -> None:
    mask = SpanMask("abc")
    mask.consume(-5, 50)
    assert mask.view() == "   "


def test_consume_pattern_counts_matches() -> None:
    mask = SpanMask("x264.x264.AAC")
    assert mask.consume_pattern(re.compile(r"x264")) == 2
    assert mask.render() == " . .AAC"


def test_consumed_text_is_not_matched_twice() -> None:
    """Later patterns run against the view, so consumed text is invisible."""
    mask = SpanMask("DTS-HD MA 5.1")
    mask.consume_pattern(re.compile(r"DTS-HD MA"))
    assert mask.consume_pattern(re.compile(r"MA")) == 0


def test_render_collapses_gaps() -> None:
    mask = SpanMask("The Matrix 1999 1080p")
    mask.consume(11, 21)
    assert mask.render() == "The Matrix  "


def test_render_range() -> None:
    mask = SpanMask("Show S01E01 Extra")
    assert mask.render(12) == "Extra"
    assert len(mask) == 17
