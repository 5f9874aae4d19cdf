"""Tests for library path decomposition."""

from __future__ import annotations

import pytest

from scenerelease.core.parser import ReleaseParser, ReleaseType, parse_path
from scenerelease.core.parser.path_parser import strip_media_extension


class TestTvPaths:
    """Series paths with season directories."""

    def test_tvdb_series(self, tv_parser: ReleaseParser) -> None:
        path = (
            "/tv/GBRB - Joy Pops Laugh Pops (2025) {tvdb-468780}/Season 01/"
            "GBRB - Joy Pops Laugh Pops (2025) - S01E09 - Episode 9 [WEBDL-1080p][AAC 2.0][h264]-JKCT.mkv"
        )
        info = tv_parser.parse_path(path)

        assert info is not None
        assert info.season == 1
        assert info.full_path == path
        assert info.directory is not None
        assert info.directory.title == "GBRB - Joy Pops Laugh Pops"
        assert info.directory.year == 2025
        assert info.directory.tvdb_id == "468780"
        assert info.directory.release_type is ReleaseType.SERIES
        assert "Joy Pops Laugh Pops" in info.file.title
        assert info.file.episode_title == "Episode 9"
        assert (info.file.season, info.file.episode) == (1, 9)
        assert info.file.resolution == "1080p"
        assert info.file.source == "WEB-DL"
        assert info.file.audio == "AAC 2.0"
        assert info.file.format == "h264"
        assert info.file.group == "JKCT"

    def test_windows_separators(self, tv_parser: ReleaseParser) -> None:
        path = (
            r"C:\tv\GBRB - Joy Pops Laugh Pops (2025) {tvdb-468780}\Season 01"
            r"\GBRB - Joy Pops Laugh Pops (2025) - S01E10 - Episode 10 [WEBDL-1080p][AAC 2.0][h264]-JKCT.mkv"
        )
        info = tv_parser.parse_path(path)

        assert info is not None
        assert info.season == 1
        assert info.full_path == path
        assert info.directory is not None
        assert "Joy Pops Laugh Pops" in info.directory.title
        assert info.directory.tvdb_id == "468780"
        assert (info.file.season, info.file.episode) == (1, 10)

    def test_episode_range(self, tv_parser: ReleaseParser) -> None:
        path = (
            "/mnt/ttt/shows/The Series Title! (2010)/Season 01/The Series Title! (2010) - "
            "S01E01-E03 - Episode Title [AMZN WEBDL-1080p Proper][DV HDR10][DTS 5.1][x264]-RlsGrp.mkv"
        )
        info = tv_parser.parse_path(path)

        assert info is not None
        assert info.directory is not None
        assert info.directory.title == "The Series Title!"
        assert info.directory.year == 2010
        assert info.file.title == "The Series Title!"
        assert info.file.episode is None
        assert info.file.episodes == (1, 2, 3)
        assert info.file.episode_title == "Episode Title"


class TestMoviePaths:
    """Movie paths without season directories."""

    def test_movie_with_edition(self, movie_parser: ReleaseParser) -> None:
        path = (
            "/mnt/ttt/shows/The Movie Title (2010) {tmdb-1520211}/The Movie Title (2010) "
            "[imdbid-tt0106145] - {edition-Ultimate Extended Edition} [Surround Sound x264]"
            "[Bluray-1080p Remux Proper][3D][DTS 5.1][DE][10bit][AVC]-RlsGrp.mkv"
        )
        info = movie_parser.parse_path(path)

        assert info is not None
        assert info.season is None
        assert info.directory is not None
        assert info.directory.title == "The Movie Title"
        assert info.directory.year == 2010
        assert info.directory.tmdb_id == "1520211"
        assert info.directory.release_type is ReleaseType.MOVIE
        assert info.file.title == "The Movie Title"
        assert info.file.imdb_id == "tt0106145"
        assert info.file.edition == "Ultimate Extended Edition"
        assert "de" in info.file.language

    def test_vanilla_sky(self, movie_parser: ReleaseParser) -> None:
        path = (
            "/movies/Vanilla Sky (2001) {tmdb-1903}/Vanilla Sky (2001) {tmdb-1903} "
            "[Remux-2160p Proper][DV HDR10][DTS-HD MA 5.1][HEVC]-FraMeSToR.mkv"
        )
        info = movie_parser.parse_path(path)

        assert info is not None
        assert info.directory is not None
        assert info.directory.title == "Vanilla Sky"
        assert info.directory.tmdb_id == "1903"
        assert info.file.year == 2001
        assert info.file.resolution == "2160p"
        assert info.file.source == "Remux"
        assert info.file.hdr == "DV HDR10"
        assert info.file.audio == "DTS-HD MA 5.1"
        assert info.file.format == "HEVC"
        assert "PROPER" in info.file.flags
        assert info.file.group == "FraMeSToR"

    def test_imdb_directory(self) -> None:
        info = parse_path(
            "/movies/The Movie (2010) {imdb-tt0066921}/"
            "The Movie (2010) {imdb-tt0066921} [Bluray-1080p][DTS 5.1][x264]-GROUP.mkv"
        )

        assert info is not None
        assert info.directory is not None
        assert info.directory.imdb_id == "tt0066921"
        assert info.file.source == "BluRay"
        assert info.file.audio == "DTS 5.1"
        assert info.file.group == "GROUP"


class TestEdgeCases:
    """Paths that cannot be fully decomposed."""

    def test_bare_file_name(self) -> None:
        assert parse_path("file.mkv") is None

    def test_trailing_separator(self) -> None:
        assert parse_path("/movies/") is None

    def test_season_directory_without_parent(self) -> None:
        """A season directory at the root leaves the directory record empty."""
        info = parse_path("Season 02/Show.S02E03.720p.HDTV-GRP.mkv")
        assert info is not None
        assert info.season == 2
        assert info.directory is None
        assert (info.file.season, info.file.episode) == (2, 3)

    def test_undecodable_segment(self) -> None:
        assert parse_path("/movies/Bad\udcffName/file.mkv") is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Movie.2020.1080p.mkv", "Movie.2020.1080p"),
        ("Movie.2020.MP4", "Movie.2020"),
        ("Movie.2020.1080p", "Movie.2020.1080p"),
        ("Movie.2020.x264", "Movie.2020.x264"),
        ("Movie.2020.m2ts", "Movie.2020"),
        ("Movie.2020.TS", "Movie.2020"),
        ("Movie.2020.mpg", "Movie.2020"),
        ("Movie.2020.vob", "Movie.2020"),
        ("Movie (2010).iso", "Movie (2010)"),
        ("Movie.srt", "Movie"),
        ("Movie.en.ass", "Movie.en"),
    ],
)
def test_strip_media_extension(name: str, expected: str) -> None:
    assert strip_media_extension(name) == expected


@pytest.mark.parametrize("extension", ["m2ts", "ts", "mts", "mpg", "mpeg", "vob", "divx", "srt"])
def test_container_extension_not_in_episode_title(tv_parser: ReleaseParser, extension: str) -> None:
    info = tv_parser.parse_path(f"/tv/Show (2010)/Season 01/Show (2010) - S01E01 - Pilot.{extension}")

    assert info is not None
    assert info.file.episode_title == "Pilot"
    assert info.file.title == "Show"


def test_iso_movie_title(movie_parser: ReleaseParser) -> None:
    info = movie_parser.parse_path("/movies/Movie (2010)/Movie (2010).iso")

    assert info is not None
    assert info.file.title == "Movie"
    assert info.file.year == 2010


@pytest.mark.parametrize(
    ("name", "season"),
    [("Season 01", 1), ("Season 1", 1), ("season 10", 10), ("Specials", None)],
)
def test_season_directory(movie_parser: ReleaseParser, name: str, season: int | None) -> None:
    assert movie_parser.parse_season_directory(name) == season
