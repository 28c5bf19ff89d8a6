"""Profile report output: CSV file and Rich results table."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from linkprobe.domain.profile import ChangedFile

CSV_HEADER = ("filepath", "last_modification_timestamp")


def write_profile_csv(path: Path, changes: Sequence[ChangedFile]) -> Path:
    """Write ``changes`` to ``path`` as CSV, replacing any previous report.

    The header row is written unquoted; data fields are always quoted so
    paths and timestamps containing spaces or commas stay intact.

    Args:
        path: Destination CSV file.
        changes: Files reported by the comparison.

    Returns:
        The path written.
    """
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(",".join(CSV_HEADER) + "\n")
        writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for change in changes:
            writer.writerow((change.path, change.modified_display))
    return path


def render_profile_table(changes: Sequence[ChangedFile], *, console: Console | None = None) -> None:
    """Print the changed files as a table, or a notice when nothing changed.

    Args:
        changes: Files reported by the comparison.
        console: Optional Rich Console; defaults to a stdout console.
    """
    out = console if console is not None else Console()
    if not changes:
        out.print("No changes detected.")
        return
    table = Table(title="Build Profile Results")
    table.add_column(CSV_HEADER[0], overflow="fold")
    table.add_column(CSV_HEADER[1], no_wrap=True)
    for change in changes:
        table.add_row(change.path, change.modified_display)
    out.print(table)


__all__ = ["CSV_HEADER", "render_profile_table", "write_profile_csv"]
