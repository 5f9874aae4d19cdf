"""Constants for SceneRelease.

The pattern catalogs and heuristic limits are the data half of the parser;
the CLI constants hold command names, help texts and exit codes.
"""

from __future__ import annotations

from .cli import CLICommands, CLIDefaults, CLIHelp, CLIMessages, CLIOptions
from .heuristics import DEFAULT_LIMITS, HeuristicLimits

__all__ = [
    "DEFAULT_LIMITS",
    "CLICommands",
    "CLIDefaults",
    "CLIHelp",
    "CLIMessages",
    "CLIOptions",
    "HeuristicLimits",
]
