from __future__ import annotations

from typing import Sequence

from rich import box
from rich.table import Table

from projboard.domain.models import Record, RecordStatus

_STATUS_STYLES = {
    RecordStatus.ACTIVE: "green",
    RecordStatus.FINISHED: "blue",
}


def list_title(status: RecordStatus) -> str:
    """Heading shown above a list, e.g. 'ACTIVE PROJECTS'."""
    return f"{status.value.upper()} PROJECTS"


def build_project_table(status: RecordStatus, records: Sequence[Record]) -> Table:
    """
    Build a rich table listing `records` under the heading for `status`.

    The table is built from scratch on every call; callers replace whatever
    they displayed before with the result.
    """
    table = Table(
        title=list_title(status),
        title_style=f"bold {_STATUS_STYLES[status]}",
        box=box.ROUNDED,
        caption=None if records else "No projects.",
    )

    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan")
    table.add_column("Description")
    table.add_column("People", justify="right", style="magenta")

    for record in records:
        table.add_row(record.id[:8], record.title, record.description, str(record.capacity))

    return table


__all__ = ["build_project_table", "list_title"]
