"""SceneRelease Shared Module.

This package contains the pattern catalogs, heuristic limits and error
types used across SceneRelease.
"""

__all__ = ["constants", "errors"]
