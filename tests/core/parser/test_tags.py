"""Tests for languages, flags and streaming providers."""

from __future__ import annotations

import pytest

from scenerelease.core.parser.tags import (
    extract_flags,
    extract_languages,
    extract_streaming_provider,
)


class TestLanguages:
    """Language extraction."""

    def test_written_name(self) -> None:
        assert extract_languages("Movie.2020.German.DL.1080p") == {"de": "German"}

    def test_spelling_is_kept(self) -> None:
        """The display name is the spelling found in the release."""
        assert extract_languages("Show.S01E01.iTALiAN.HDTV") == {"it": "iTALiAN"}

    def test_bracket_code(self) -> None:
        assert extract_languages("Show [x264][DTS 5.1][JA]-GRP") == {"ja": "Japanese"}

    def test_bracket_code_wins_over_name(self) -> None:
        """An earlier source is never overwritten."""
        assert extract_languages("Show [DE] GERMAN")["de"] == "German"

    def test_english_hard_sub(self) -> None:
        assert extract_languages("Movie[2006]DvDrip[Eng.Hard.Sub]-aXXo") == {"en": "English"}

    def test_multilingual_and_region(self) -> None:
        """Multilingual markers come before region codes, in discovery order."""
        languages = extract_languages("[Erai-raws] Show 5 - 01 (CA) [720p][MultiSub]")
        assert list(languages) == ["multi", "ca"]
        assert languages["ca"] == "Canadian"

    def test_multi_word_boundary(self) -> None:
        """``Multiple`` is not a multilingual marker."""
        assert "multi" not in extract_languages("Multiple.Choices.2020")

    def test_none(self) -> None:
        assert extract_languages("The.Matrix.1999.1080p") == {}


class TestFlags:
    """Flag extraction."""

    def test_catalog_order_without_duplicates(self) -> None:
        flags = extract_flags("Movie.PROPER.REPACK.PROPER.1080p")
        assert flags == ("PROPER", "REPACK")

    def test_case_insensitive(self) -> None:
        assert "PROPER" in extract_flags("Show [Bluray-1080p Remux Proper]")

    def test_read_nfo(self) -> None:
        assert "READNFO" in extract_flags("Show.READ.NFO-GRP")

    @pytest.mark.parametrize(
        ("raw", "flag"),
        [
            ("Movie.Directors.Cut", "Director's Cut"),
            ("Movie.Extended.Uncut", "Uncut"),
            ("Movie [IMAX HYBRID]", "IMAX HYBRID"),
            ("Movie [3D]", "3D"),
            ("Movie.ANiME.DL", "ANiME"),
        ],
    )
    def test_named_flags(self, raw: str, flag: str) -> None:
        assert flag in extract_flags(raw)


class TestStreamingProvider:
    """Streaming provider extraction."""

    def test_before_web_source(self) -> None:
        assert extract_streaming_provider("Show.S01E01.1080p.NF.WEB-DL-GRP", "GRP") == "NF"

    def test_unknown_uppercase_token_before_web(self) -> None:
        """An unlisted short uppercase token between resolution and source is kept."""
        assert extract_streaming_provider("Show.1080p.XYZ.WEB-DL-GRP", "GRP") == "XYZ"

    def test_amzn_bracket(self) -> None:
        assert extract_streaming_provider("Show [AMZN WEBDL-1080p Proper]") == "AMZN"

    def test_adjacent_crunchyroll(self) -> None:
        assert extract_streaming_provider("[Erai-raws] Show [720p CR WEB-DL AVC]") == "CR"

    def test_catalog_scan(self) -> None:
        assert extract_streaming_provider("Doctor (2012) 1080p WAVVE WEB-DL AAC", "GNom") == "WAVVE"

    def test_group_is_masked(self) -> None:
        """A group named like a provider is not reported as the provider."""
        raw = "Movie (2023) [Remux-1080p][TrueHD 5.1][AVC]-HBO"
        assert extract_streaming_provider(raw, "HBO") == ""

    def test_dotted_amzn_webdl_is_found_by_catalog_scan(self) -> None:
        assert extract_streaming_provider("Show.S01E01.AMZN.WEBDL-GRP", "GRP") == "AMZN"

    def test_group_named_amzn_before_webdl_is_masked(self) -> None:
        assert extract_streaming_provider("Show.S01E01.AMZN.WEBDL-AMZN", "AMZN") == ""

    def test_dts_hd_ma_is_not_movies_anywhere(self) -> None:
        assert extract_streaming_provider("Movie [DTS-HD MA 5.1][AVC]-GRP", "GRP") == ""

    def test_mixed_case_words_are_not_scanned(self) -> None:
        """Dictionary words such as ``Max`` inside titles are ignored."""
        assert extract_streaming_provider("Mad.Max.1979.1080p.BluRay-GRP", "GRP") == ""
