"""Rich rendering of parsed records.

This module turns ParsedRelease and PathInfo records into rich tables for
the human-readable output of the parse and path commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from scenerelease.core.parser.models import ACCESSOR_FIELDS, ParsedRelease, PathInfo
from scenerelease.shared.constants.cli import CLIMessages

if TYPE_CHECKING:
    from rich.console import Console


def release_rows(record: ParsedRelease) -> list[tuple[str, str]]:
    """Collect the populated fields of a record as (name, value) rows.

    Empty text fields and unset optional fields are skipped; flags and
    languages are appended after the accessor fields.
    """
    rows: list[tuple[str, str]] = []
    for name in ACCESSOR_FIELDS:
        if name == "release":
            continue
        value = record.get(name)
        if value:
            rows.append((name, value))
    if record.flags:
        rows.append(("flags", ", ".join(record.flags)))
    if record.language:
        rows.append(
            ("language", ", ".join(f"{code} ({name})" for code, name in record.language.items()))
        )
    return rows


def _release_table(record: ParsedRelease, title: str) -> Table:
    table = Table(title=escape(title), title_justify="left")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for name, value in release_rows(record):
        table.add_row(name, escape(value))
    return table


def display_release(record: ParsedRelease, console: Console) -> None:
    """Display one parsed release in a formatted table.

    Args:
        record: The parsed release.
        console: Rich console for output.
    """
    console.print(_release_table(record, record.release))


def display_path_info(info: PathInfo, console: Console) -> None:
    """Display a decomposed library path.

    Args:
        info: The decomposed path.
        console: Rich console for output.
    """
    console.print(f"[bold]{escape(info.full_path)}[/bold]")
    if info.directory is not None:
        console.print(_release_table(info.directory, f"Directory: {info.directory.release}"))
    else:
        console.print(CLIMessages.Info.NO_DIRECTORY)
    if info.season is not None:
        console.print(f"Season directory: [blue]{info.season}[/blue]")
    console.print(_release_table(info.file, f"File: {info.file.release}"))
