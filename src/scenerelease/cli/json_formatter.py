"""
JSON Output for the SceneRelease CLI

Every command answers ``--json`` with the same envelope::

    {"command", "data", "errors", "success", "timestamp", "warnings"}

``data`` is one of the typed payloads below: the parsed releases, the
decomposed paths, a single accessor field, or the details of an error.
Keys are sorted and indented so the output is stable for diffing.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, model_validator

from scenerelease.core.parser.models import ParsedRelease, PathInfo
from scenerelease.shared.constants.cli import CLICommands

_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ReleasesData(BaseModel):
    """Payload of ``parse``: one record per release name, in input order."""

    model_config = ConfigDict(frozen=True)

    releases: list[dict[str, Any]]


class PathsData(BaseModel):
    """Payload of ``path``: one decomposition per input path."""

    model_config = ConfigDict(frozen=True)

    paths: list[dict[str, Any]]


class FieldData(BaseModel):
    """Payload of ``get``. ``value`` is None when the field is unset."""

    model_config = ConfigDict(frozen=True)

    release: str
    field: str
    value: str | None = None


class ErrorData(BaseModel):
    """Payload of a failed command."""

    model_config = ConfigDict(frozen=True)

    error_code: str
    error_type: str
    exit_code: int
    context: dict[str, Any] = Field(default_factory=dict)


CommandData = Union[ReleasesData, PathsData, FieldData, ErrorData]


class JsonEnvelope(BaseModel):
    """The JSON document written to stdout.

    A non-empty ``errors`` list always marks the envelope as failed.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    command: str
    timestamp: str = Field(default_factory=_now)
    data: CommandData | None = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _errors_mean_failure(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("errors"):
            return {**values, "success": False}
        return values

    def to_json(self) -> bytes:
        """Serialize with orjson.

        Data that orjson cannot encode is replaced by a failed envelope that
        names the serialization error.
        """
        try:
            return orjson.dumps(self.model_dump(), option=_OPTIONS)
        except TypeError as e:
            fallback = JsonEnvelope(
                success=False,
                command=self.command,
                errors=[f"JSON serialization failed: {e!s}"],
            )
            return orjson.dumps(fallback.model_dump(), option=_OPTIONS)


def format_releases(records: Iterable[ParsedRelease]) -> bytes:
    """Format the output of ``parse``."""
    data = ReleasesData(releases=[record.to_dict() for record in records])
    return JsonEnvelope(success=True, command=CLICommands.PARSE, data=data).to_json()


def format_paths(infos: Iterable[PathInfo]) -> bytes:
    """Format the output of ``path``."""
    data = PathsData(paths=[info.to_dict() for info in infos])
    return JsonEnvelope(success=True, command=CLICommands.PATH, data=data).to_json()


def format_field(release: str, field: str, value: str | None) -> bytes:
    """Format the output of ``get``.

    Example:
        >>> print(format_field("Show.S01E02", "season", "1").decode())
        {
          "command": "get",
          "data": {
            "field": "season",
            "release": "Show.S01E02",
            "value": "1"
          },
          "errors": [],
          "success": true,
          "timestamp": "2024-05-01T10:30:00+00:00",
          "warnings": []
        }
    """
    data = FieldData(release=release, field=field, value=value)
    return JsonEnvelope(success=True, command=CLICommands.GET, data=data).to_json()


def format_error(command: str, message: str, data: ErrorData) -> bytes:
    """Format a failed command."""
    return JsonEnvelope(success=False, command=command, data=data, errors=[message]).to_json()
