"""Release name corpus tests for ReleaseParser.

Each case lists the fields a real-world release name must produce. Titles
given under ``title_contains`` are only checked for a substring, the rest
are compared exactly.
"""

from __future__ import annotations

from typing import Any

import pytest

from scenerelease.core.parser import ParsedRelease, ReleaseParser, ReleaseType, parse


def assert_fields(parsed: ParsedRelease, expected: dict[str, Any]) -> None:
    """Compare a record against an expectation dict.

    Special keys: ``title_contains`` (substring of the title), ``flags``
    (each listed flag must be present) and ``languages`` (each listed code
    must be present).
    """
    for key, value in expected.items():
        if key == "title_contains":
            assert value in parsed.title, f"{value!r} not in title {parsed.title!r}"
        elif key == "flags":
            for flag in value:
                assert flag in parsed.flags, f"{flag!r} not in {parsed.flags!r}"
        elif key == "languages":
            for code in value:
                assert code in parsed.language, f"{code!r} not in {dict(parsed.language)!r}"
        elif key == "episodes":
            assert list(parsed.episodes) == value
        else:
            assert getattr(parsed, key) == value, f"{key}: {getattr(parsed, key)!r} != {value!r}"


MOVIE_CASES = [
    (
        "The.Matrix.1999.1080p.BluRay.x264-GROUP",
        {
            "title": "The Matrix",
            "year": 1999,
            "resolution": "1080p",
            "source": "BluRay",
            "format": "x264",
            "group": "GROUP",
        },
    ),
    (
        "12.12 The Day (2023) {tmdb-919207} [Remux-1080p][TrueHD 5.1][AVC]-HBO",
        {
            "title": "12 12 The Day",
            "year": 2023,
            "tmdb_id": "919207",
            "resolution": "1080p",
            "source": "Remux",
            "audio": "TrueHD 5.1",
            "format": "AVC",
            "group": "HBO",
        },
    ),
    (
        "A Nightmare on Elm Street Part 2 Freddys Revenge (1985) {tmdb-10014} "
        "[Bluray-2160p][HDR10][AC3 2.0][h265]-NERO",
        {
            "title_contains": "Nightmare",
            "year": 1985,
            "tmdb_id": "10014",
            "resolution": "2160p",
            "source": "BluRay",
            "hdr": "HDR10",
            "audio": "AC3 2.0",
            "format": "h265",
            "group": "NERO",
        },
    ),
    (
        "The Movie Title (2010) {imdb-tt0066921} {edition-Ultimate Extended Edition} "
        "[IMAX HYBRID][Bluray-1080p Remux Proper][3D][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {
            "imdb_id": "tt0066921",
            "edition": "Ultimate Extended Edition",
            "flags": ["IMAX HYBRID", "3D", "PROPER"],
            "hdr": "DV HDR10",
            "source": "Remux",
            "format": "x264",
        },
    ),
    (
        "The Movie Title (2010) [imdbid-tt0106145] - {edition-Ultimate Extended Edition} "
        "[IMAX HYBRID][Bluray-1080p Remux Proper][3D][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {
            "imdb_id": "tt0106145",
            "edition": "Ultimate Extended Edition",
            "source": "Remux",
        },
    ),
    (
        "The Movie Title (2010) [tmdbid-65567] - {edition-Ultimate Extended Edition} "
        "[IMAX HYBRID][Bluray-1080p Remux Proper][3D][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {"tmdb_id": "65567", "edition": "Ultimate Extended Edition"},
    ),
    (
        "The.Movie.Title.2010.MA.WEBDL-2160p.TrueHD.Atmos.7.1.DV.HDR10Plus.h265-RlsGrp",
        {
            "hdr": "DV HDR10Plus",
            "source": "MA WEBDL",
            "resolution": "2160p",
            "format": "h265",
        },
    ),
    (
        "The.Movie.Title.2010.Ultimate.Extended.Edition.3D.Hybrid.Remux-2160p."
        "TrueHD.Atmos.7.1.DV.HDR10Plus.HEVC-RlsGrp",
        {
            "title_contains": "Movie Title",
            "year": 2010,
            "resolution": "2160p",
            "source": "Remux",
            "hdr": "DV HDR10Plus",
            "format": "HEVC",
        },
    ),
    (
        "The.Movie.Title.2010.REMASTERED.1080p.BluRay.x264-RlsGrp",
        {"flags": ["REMASTERED"], "source": "BluRay"},
    ),
    (
        "Letters.From.Iwo.Jima[2006]DvDrip[Eng.Hard.Sub]-aXXo",
        {
            "title": "Letters From Iwo Jima",
            "year": 2006,
            "source": "DVDRip",
            "flags": ["Hard Sub"],
            "languages": ["en"],
            "group": "aXXo",
        },
    ),
    (
        "You.Dont.Mess.With.The.Zohan[2008][U-Edition]DvDrip-aXXo",
        {
            "title": "You Dont Mess With The Zohan",
            "year": 2008,
            "edition": "U-Edition",
            "source": "DVDRip",
            "group": "aXXo",
        },
    ),
    (
        "Zero.Man.vs.The.Half.Virgin.2012.DVDRip.x264.AC3.WahDee",
        {
            "title": "Zero Man vs The Half Virgin",
            "year": 2012,
            "source": "DVDRip",
            "format": "x264",
            "audio": "AC3",
            "group": "WahDee",
        },
    ),
    (
        "The.Christmas.Doctor.2020.NORDiC.1080p.SKST.WEB-DL.H.264-NORViNE",
        {
            "title": "The Christmas Doctor",
            "year": 2020,
            "resolution": "1080p",
            "streaming_provider": "SKST",
            "source": "WEB-DL",
            "format": "H.264",
            "languages": ["no"],
            "group": "NORViNE",
        },
    ),
    (
        "Kinder.des.Zorns.Runaway.2018.German.DL.1080P.BluRay.AVC-MRW",
        {
            "title": "Kinder des Zorns Runaway",
            "year": 2018,
            "resolution": "1080p",
            "source": "BluRay",
            "format": "AVC",
            "languages": ["de"],
            "group": "MRW",
        },
    ),
    (
        "Doctor (2012) 1080p WAVVE WEB-DL AAC H.264-GNom",
        {
            "title": "Doctor",
            "year": 2012,
            "resolution": "1080p",
            "streaming_provider": "WAVVE",
            "source": "WEB-DL",
            "audio": "AAC",
            "format": "H.264",
            "group": "GNom",
        },
    ),
    (
        "Sharks.of.the.Corn.2021.1080p.AMZN.WEB-DL.DDP2.0.H.264-SQS",
        {
            "title": "Sharks of the Corn",
            "year": 2021,
            "resolution": "1080p",
            "streaming_provider": "AMZN",
            "source": "WEB-DL",
            "audio": "DDP 2.0",
            "format": "H.264",
            "group": "SQS",
        },
    ),
    (
        "Detective Kien: The Headless Horror 2025 1080p AMZN WEB-DL DDP5.1 H.264-playWEB",
        {
            "title": "Detective Kien: The Headless Horror",
            "year": 2025,
            "resolution": "1080p",
            "streaming_provider": "AMZN",
            "source": "WEB-DL",
            "audio": "DDP 5.1",
            "format": "H.264",
            "group": "playWEB",
        },
    ),
]


TV_CASES = [
    (
        "24.S02E02.9.00.Uhr.bis.10.00.Uhr.German.DL.TV.Dubbed.DVDRip.SVCD.READ.NFO-c0nFuSed",
        {
            "title": "24",
            "episode_title": "9 00 Uhr bis 10 00 Uhr",
            "season": 2,
            "episode": 2,
            "source": "DVDRip",
            "format": "SVCD",
            "flags": ["READNFO", "TV Dubbed"],
            "languages": ["de"],
            "group": "c0nFuSed",
            "release_type": ReleaseType.TV,
        },
    ),
    (
        "Arrow (2012) - S05E04 - Penance [Bluray-1080p Remux][DTS-HD MA 5.1][AVC]-EPSiLON",
        {
            "title": "Arrow",
            "year": 2012,
            "season": 5,
            "episode": 4,
            "episodes": [4],
            "episode_title": "Penance",
            "resolution": "1080p",
            "source": "Remux",
            "audio": "DTS-HD MA 5.1",
            "format": "AVC",
            "group": "EPSiLON",
        },
    ),
    (
        "The Acolyte (2024) - S01E07 - Choice [WEBDL-2160p][DV HDR10][EAC3 Atmos 5.1][h265]",
        {
            "title_contains": "Acolyte",
            "year": 2024,
            "season": 1,
            "episode": 7,
            "episode_title": "Choice",
            "resolution": "2160p",
            "source": "WEB-DL",
            "hdr": "DV HDR10",
            "audio": "EAC3 Atmos 5.1",
            "format": "h265",
        },
    ),
    (
        "Stargate Atlantis (2004) - S01E01-E02 - Rising [Bluray-1080p Remux][DTS-HD MA 5.1][AVC]-NOGRP",
        {
            "title_contains": "Stargate",
            "year": 2004,
            "season": 1,
            "episode": None,
            "episodes": [1, 2],
            "episode_title": "Rising",
            "resolution": "1080p",
            "source": "Remux",
            "audio": "DTS-HD MA 5.1",
            "format": "AVC",
            "group": "NOGRP",
        },
    ),
    (
        "Seinfeld (1989) {tvdb-79169} - S01E01 - The Seinfeld Chronicles "
        "[Bluray-2160p Remux Proper][DV HDR10][DTS-HD MA 5.1][HEVC]-NEWMAN",
        {
            "title": "Seinfeld",
            "year": 1989,
            "tvdb_id": "79169",
            "season": 1,
            "episode": 1,
            "episodes": [1],
            "episode_title": "The Seinfeld Chronicles",
            "resolution": "2160p",
            "source": "Remux",
            "hdr": "DV HDR10",
            "audio": "DTS-HD MA 5.1",
            "format": "HEVC",
            "flags": ["PROPER"],
            "group": "NEWMAN",
        },
    ),
    (
        "The Series Title! (2010) [imdb-tt1520211] - S01E01 - Episode Title 1 "
        "[AMZN WEBDL-1080p Proper][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {
            "imdb_id": "tt1520211",
            "source": "WEBDL",
            "streaming_provider": "AMZN",
            "flags": ["PROPER"],
        },
    ),
    (
        "The Series Title! (2010) [tvdbid-1520211] - S01E01 - Episode Title 1 "
        "[AMZN WEBDL-1080p Proper][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {"tvdb_id": "1520211"},
    ),
    (
        "The Series Title! (2010) - S01E01 - 001 - Episode Title 1 "
        "[iNTERNAL HDTV-720p v2][HDR10][10bit][x264][DTS 5.1][JA]-RlsGrp",
        {
            "flags": ["10bit"],
            "source": "iNTERNAL",
            "resolution": "720p",
            "languages": ["ja"],
            "episode": 1,
        },
    ),
    (
        "The Series Title! (2010) - 2013-10-30 - Episode Title 1 "
        "[AMZN WEBDL-1080p Proper][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {"date": "2013-10-30", "episode_title": "Episode Title 1"},
    ),
    (
        "The Series Title! (2010) - S01E01-E03 - 001-003 - Episode Title "
        "[iNTERNAL HDTV-720p v2][HDR10][10bit][x264][DTS 5.1][JA]-RlsGrp",
        {"season": 1, "episode": None, "episodes": [1, 2, 3]},
    ),
    (
        "The Series Title! (2010) - S01E01-E03 - Episode Title "
        "[AMZN WEBDL-1080p Proper][DV HDR10][DTS 5.1][x264]-RlsGrp",
        {
            "title": "The Series Title!",
            "year": 2010,
            "season": 1,
            "episode": None,
            "episodes": [1, 2, 3],
            "episode_title": "Episode Title",
            "streaming_provider": "AMZN",
            "source": "WEBDL",
            "hdr": "DV HDR10",
            "audio": "DTS 5.1",
            "format": "x264",
            "flags": ["PROPER"],
            "group": "RlsGrp",
        },
    ),
    (
        "Gransbevakarna.Sverige.S06E01.SWEDiSH.1080p.MAX.WEB-DL.H.265-VARiOUS",
        {
            "title": "Gransbevakarna Sverige",
            "season": 6,
            "episode": 1,
            "resolution": "1080p",
            "streaming_provider": "MAX",
            "source": "WEB-DL",
            "format": "H.265",
            "languages": ["sv"],
            "group": "VARiOUS",
        },
    ),
    (
        "Hotellet.S01E17.NORWEGiAN.1080p.TV2.WEB-DL.H.264-NORViNE",
        {
            "title": "Hotellet",
            "season": 1,
            "episode": 17,
            "resolution": "1080p",
            "streaming_provider": "TV2",
            "source": "WEB-DL",
            "format": "H.264",
            "languages": ["no"],
            "group": "NORViNE",
        },
    ),
    (
        "Ranma.1.2.2024.S02E11.GERMAN.ANiME.WEBRiP.x264-AVTOMAT",
        {
            "title": "Ranma 1 2",
            "year": 2024,
            "season": 2,
            "episode": 11,
            "source": "WEBRip",
            "format": "x264",
            "languages": ["de"],
            "flags": ["ANiME"],
            "group": "AVTOMAT",
        },
    ),
    (
        "Kizuna.no.Allele.S02E10.Unsere.unbekannte.Groesse.German.2023.ANiME.DL.1080p.BluRay.x264-STARS",
        {
            "title": "Kizuna no Allele",
            "episode_title": "Unsere unbekannte Groesse",
            "season": 2,
            "episode": 10,
            "year": 2023,
            "resolution": "1080p",
            "source": "BluRay",
            "format": "x264",
            "languages": ["de"],
            "flags": ["ANiME"],
            "group": "STARS",
        },
    ),
    (
        "[GM-Team][国漫][仙逆][Renegade Immortal][2023][119][AVC][GB][1080P]",
        {
            "title": "Renegade Immortal",
            "year": 2023,
            "season": None,
            "episode": 119,
            "resolution": "1080p",
            "format": "AVC",
            "group": "GM-Team",
        },
    ),
    (
        "[Erai-raws] Xian Wang de Richang Shenghuo 5 - 01 (CA) [720p CR WEB-DL AVC AAC][MultiSub][2B267646]",
        {
            "title": "Xian Wang de Richang Shenghuo",
            "season": 5,
            "episode": 1,
            "resolution": "720p",
            "streaming_provider": "CR",
            "source": "WEB-DL",
            "format": "AVC",
            "audio": "AAC",
            "languages": ["multi", "ca"],
            "flags": ["MultiSub"],
            "group": "Erai-raws",
        },
    ),
    (
        "[ToonsHub] Pray Speak What Has Happened S01E09 1080p NF WEB-DL AAC2.0 H.264 "
        "(Multi-Subs, Moshimo Kono Yo ga Butai nara, Gakuya wa Doko ni Aru Darou)",
        {
            "title": "Pray Speak What Has Happened",
            "season": 1,
            "episode": 9,
            "resolution": "1080p",
            "streaming_provider": "NF",
            "source": "WEB-DL",
            "format": "H.264",
            "audio": "AAC 2.0",
            "languages": ["multi"],
            "flags": ["Multi-Subs"],
            "group": "ToonsHub",
        },
    ),
    (
        "[SubsPlease] The Daily Life of the Immortal King S5 - 02 (1080p) [66856162].mkv",
        {
            "title_contains": "Immortal King",
            "season": 5,
            "episode": 2,
            "resolution": "1080p",
            "group": "SubsPlease",
        },
    ),
    (
        "Pinoy Big Brother Celebrity Collab Edition S13E44 1080p WEB-DL AAC x264-RSG",
        {
            "title": "Pinoy Big Brother Celebrity Collab Edition",
            "season": 13,
            "episode": 44,
            "resolution": "1080p",
            "source": "WEB-DL",
            "audio": "AAC",
            "format": "x264",
            "group": "RSG",
        },
    ),
    (
        "Digimon Beatbreak (2025) S01E11 (1080p CR WEB-DL H264 AAC 2.0) [AnoZu]",
        {
            "title": "Digimon Beatbreak",
            "year": 2025,
            "season": 1,
            "episode": 11,
            "resolution": "1080p",
            "streaming_provider": "CR",
            "source": "WEB-DL",
            "format": "H264",
            "audio": "AAC 2.0",
            "group": "AnoZu",
        },
    ),
    (
        "[FSP DN] Tales of Herding Gods Episode 61 1080p HEVC AAC",
        {
            "title_contains": "Tales of Herding Gods",
            "season": None,
            "episode": 61,
            "resolution": "1080p",
            "format": "HEVC",
            "audio": "AAC",
            "group": "FSP DN",
        },
    ),
    (
        "Mondo.Senza.Fine.E01E02.iTALiAN.HDTV.x264-HWD",
        {
            "title": "Mondo Senza Fine",
            "season": None,
            "episode": None,
            "episodes": [1, 2],
            "source": "HDTV",
            "format": "x264",
            "languages": ["it"],
            "group": "HWD",
        },
    ),
    (
        "The.Simpsons.S37E05.MULTI.1080p.WEB.H264-HiggsBoson",
        {
            "title": "The Simpsons",
            "season": 37,
            "episode": 5,
            "episodes": [5],
            "resolution": "1080p",
            "source": "WEB",
            "format": "H264",
            "languages": ["multi"],
            "group": "HiggsBoson",
        },
    ),
    (
        "Running Man E780 1080p VIU WEB-DL AAC 2.0 H.264-MMR",
        {
            "title": "Running Man",
            "season": None,
            "episode": 780,
            "episodes": [780],
            "resolution": "1080p",
            "streaming_provider": "VIU",
            "source": "WEB-DL",
            "audio": "AAC 2.0",
            "format": "H.264",
            "group": "MMR",
        },
    ),
    (
        "Running.Man.E780.This.is.the.Romance.of.It.Continues.1080p.VIU.WEB-DL.H264.AAC-MMR",
        {
            "title": "Running Man",
            "season": None,
            "episode": 780,
            "episode_title": "This is the Romance of It Continues",
            "resolution": "1080p",
            "streaming_provider": "VIU",
            "source": "WEB-DL",
            "format": "H264",
            "audio": "AAC",
            "group": "MMR",
        },
    ),
]


@pytest.mark.parametrize(("release", "expected"), MOVIE_CASES, ids=[c[0][:40] for c in MOVIE_CASES])
def test_movie_corpus(movie_parser: ReleaseParser, release: str, expected: dict[str, Any]) -> None:
    """Real-world movie release names produce the expected fields."""
    parsed = movie_parser.parse(release)
    assert parsed.release == release
    assert parsed.release_type is ReleaseType.MOVIE
    assert_fields(parsed, expected)


@pytest.mark.parametrize(("release", "expected"), TV_CASES, ids=[c[0][:40] for c in TV_CASES])
def test_tv_corpus(tv_parser: ReleaseParser, release: str, expected: dict[str, Any]) -> None:
    """Real-world episode release names produce the expected fields."""
    assert_fields(tv_parser.parse(release), expected)


@pytest.mark.parametrize(
    ("release", "season", "episode"),
    [
        ("Show.S01E01.1080p.WEB-DL-GROUP", 1, 1),
        ("Show.S1E1.720p.HDTV-GROUP", 1, 1),
        ("Show.1x01.1080p-GROUP", 1, 1),
        ("Show.10x05.720p-GROUP", 10, 5),
    ],
)
def test_season_episode_conventions(
    tv_parser: ReleaseParser, release: str, season: int, episode: int
) -> None:
    """SxxEyy, short SxEy and NxM numbering all resolve."""
    parsed = tv_parser.parse(release)
    assert parsed.season == season
    assert parsed.episode == episode


@pytest.mark.parametrize(
    ("release", "year"),
    [
        ("Movie.2023.1080p-GROUP", 2023),
        ("Movie.1999.DVDRip-GROUP", 1999),
        ("Movie.2100.GROUP", 2100),
        ("Movie.1899.GROUP", None),
    ],
)
def test_year_bounds(movie_parser: ReleaseParser, release: str, year: int | None) -> None:
    """Years outside 1900..2100 are not reported."""
    assert movie_parser.parse(release).year == year


@pytest.mark.parametrize(
    ("release", "source"),
    [
        ("Movie.2023.DVDRip-GROUP", "DVDRip"),
        ("Movie.2023.WEB-DL-GROUP", "WEB-DL"),
        ("Movie.2023.HDTV-GROUP", "HDTV"),
        ("Movie.2023.BluRay-GROUP", "BluRay"),
        ("Movie.2023.Workprint.1080p-GROUP", "Workprint"),
        ("Movie.2023.PPVRip.1080p-GROUP", "PPVRip"),
        ("Movie.2023.HDRip.1080p-GROUP", "HDRip"),
        ("Movie.2023.VODRip.1080p-GROUP", "VODRip"),
        ("Movie.2023.DCP.1080p-GROUP", "DCP"),
        ("Movie.2023.DVD-R.1080p-GROUP", "DVD-R"),
    ],
)
def test_sources(movie_parser: ReleaseParser, release: str, source: str) -> None:
    """Catalog sources are reported with their canonical spelling."""
    assert movie_parser.parse(release).source == source


def test_web_capture_source(movie_parser: ReleaseParser) -> None:
    """A spaced-out web capture is recognised as a web source."""
    source = movie_parser.parse("Movie.2023.Web.Capture.1080p-GROUP").source
    assert source in {"WEB", "Web Capture", "WEB-DL"}


@pytest.mark.parametrize("resolution", ["1080p", "720p", "480p", "2160p"])
def test_resolutions(movie_parser: ReleaseParser, resolution: str) -> None:
    """Bare resolutions are extracted."""
    assert movie_parser.parse(f"Movie.{resolution}-GROUP").resolution == resolution


def test_languages(movie_parser: ReleaseParser) -> None:
    """Written language names map to codes and keep their spelling."""
    parsed = movie_parser.parse("Movie.2023.German.1080p-GROUP")
    assert parsed.language["de"] == "German"
    assert "multi" in movie_parser.parse("Movie.2023.Multi.1080p-GROUP").language


@pytest.mark.parametrize(
    ("release", "flags"),
    [
        ("Movie.2023.PROPER.1080p-GROUP", ["PROPER"]),
        ("Movie.2023.REPACK.1080p-GROUP", ["REPACK"]),
        ("Movie.2023.READNFO.1080p-GROUP", ["READNFO"]),
        ("Movie.2023.Special.Edition.REMASTERED.1080p-GROUP", ["Special Edition", "REMASTERED"]),
        ("Movie.2023.Limited.Edition.1080p-GROUP", ["Limited Edition"]),
        ("Movie.2023.Collector's.Edition.1080p-GROUP", ["Collector's Edition"]),
    ],
)
def test_flags(movie_parser: ReleaseParser, release: str, flags: list[str]) -> None:
    """Flags are reported by canonical name."""
    parsed = movie_parser.parse(release)
    for flag in flags:
        assert flag in parsed.flags


@pytest.mark.parametrize(
    ("release", "group"),
    [
        ("Movie.2023.1080p-GROUPNAME", "GROUPNAME"),
        ("Movie.2023.1080p-c0nFuSed", "c0nFuSed"),
    ],
)
def test_dash_group(movie_parser: ReleaseParser, release: str, group: str) -> None:
    """The token after the last hyphen is the group."""
    assert movie_parser.parse(release).group == group


@pytest.mark.parametrize(
    ("release", "disc"),
    [
        ("Movie.2023.Disc1.1080p-GROUP", 1),
        ("Movie.2023.CD2.1080p-GROUP", 2),
    ],
)
def test_disc(movie_parser: ReleaseParser, release: str, disc: int) -> None:
    """Disc markers are numbered."""
    assert movie_parser.parse(release).disc == disc


PROVIDER_CASES = [
    ("ATX", "ATX"),
    ("BS11", "BS11"),
    ("CX", "CX"),
    ("WOWOW", "WOWOW"),
    ("NHKG", "NHKG"),
    ("9NOW", "9NOW"),
    ("ALL4", "ALL4"),
    ("ATVP", "ATVP"),
    ("CBC", "CBC"),
    ("CRAV", "CRAV"),
    ("DSNP", "DSNP"),
    ("HMAX", "HMAX"),
    ("ITVX", "ITVX"),
    ("PMTP", "PMTP"),
    ("STAN", "STAN"),
    ("TVNZ", "TVNZ"),
    ("VIAP", "VIAP"),
    ("ABMA", "ABMA"),
    ("ADN", "ADN"),
    ("ANIMAX", "ANIMAX"),
    ("BS4", "BS4"),
    ("BS-Fuji", "BS-Fuji"),
    ("DMM", "DMM"),
    ("KBC", "KBC"),
]


@pytest.mark.parametrize(("token", "provider"), PROVIDER_CASES)
def test_streaming_providers(tv_parser: ReleaseParser, token: str, provider: str) -> None:
    """Providers between the resolution and the web source are recognised."""
    parsed = tv_parser.parse(f"Show.S01E01.1080p.{token}.WEB-DL-GROUP")
    assert parsed.streaming_provider == provider


class TestReleaseType:
    """Release type handling."""

    def test_series_behaves_like_tv(self, series_parser: ReleaseParser) -> None:
        """The series hint enables episodic extraction."""
        parsed = series_parser.parse("Show.S01E02.720p.HDTV.x264-GRP")
        assert parsed.release_type is ReleaseType.SERIES
        assert (parsed.season, parsed.episode) == (1, 2)

    def test_movie_ignores_numbering(self, movie_parser: ReleaseParser) -> None:
        """Movies never carry season or episode numbers."""
        parsed = movie_parser.parse("Show.S01E02.720p.HDTV.x264-GRP")
        assert parsed.season is None
        assert parsed.episodes == ()

    def test_string_hint_is_case_insensitive(self) -> None:
        """String hints are accepted in any case."""
        assert ReleaseParser("TV").release_type is ReleaseType.TV

    def test_with_type_shares_limits(self, movie_parser: ReleaseParser) -> None:
        """with_type returns self for the same type and keeps limits otherwise."""
        assert movie_parser.with_type("movie") is movie_parser
        tv = movie_parser.with_type(ReleaseType.TV)
        assert tv.release_type is ReleaseType.TV
        assert tv.limits is movie_parser.limits


def test_module_level_parse() -> None:
    """The module-level parse uses a throwaway parser."""
    parsed = parse("tv", "Show.S03E04.720p.HDTV.x264-GRP")
    assert (parsed.season, parsed.episode, parsed.group) == (3, 4, "GRP")


def test_accessor_on_parsed_release(tv_parser: ReleaseParser) -> None:
    """The field accessor renders parsed values as strings."""
    parsed = tv_parser.parse("Show.S01E01.1080p-GROUP")
    assert parsed.get("season") == "1"
    assert parsed.get("episode") == "1"
    assert parsed.get("group") == "GROUP"
    assert parsed.get("resolution") == "1080p"
    assert parsed.get("type") == "tv"
    assert parsed.get("nonexistent") is None


def test_empty_input_yields_empty_record(tv_parser: ReleaseParser) -> None:
    """An empty name produces a record with every field empty."""
    parsed = tv_parser.parse("")
    assert parsed.title == ""
    assert parsed.group == ""
    assert parsed.season is None
    assert parsed.episodes == ()
    assert parsed.year is None


def test_dates_are_not_bare_numbering(tv_parser: ReleaseParser) -> None:
    """A daily date is never read as a bare season-episode pair."""
    parsed = tv_parser.parse("Show - 2013-10-30 - Title [HDTV-720p]-GRP")
    assert parsed.date == "2013-10-30"
    assert parsed.season is None
