"""
Pytest configuration and shared fixtures for SceneRelease tests.

This module provides parsers for each release type and keeps global state
(root logging handlers, CLI context) from leaking between tests.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from scenerelease.cli.common.context import clear_cli_context
from scenerelease.core.parser import ReleaseParser, ReleaseType


@pytest.fixture
def movie_parser() -> ReleaseParser:
    """Parser with the movie release type hint."""
    return ReleaseParser(ReleaseType.MOVIE)


@pytest.fixture
def tv_parser() -> ReleaseParser:
    """Parser with the tv release type hint."""
    return ReleaseParser(ReleaseType.TV)


@pytest.fixture
def series_parser() -> ReleaseParser:
    """Parser with the series release type hint."""
    return ReleaseParser(ReleaseType.SERIES)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None, None, None]:
    """Restore root logger handlers and clear the CLI context after each test.

    setup_logging() replaces the root handlers, which would otherwise
    outlive the CliRunner streams they were bound to.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_cli_context()
