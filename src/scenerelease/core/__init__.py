"""Core modules of SceneRelease: the parsing engine, configuration and logging."""

from __future__ import annotations

from .parser import ParsedRelease, PathInfo, ReleaseParser, ReleaseType

__all__ = ["ParsedRelease", "PathInfo", "ReleaseParser", "ReleaseType"]
