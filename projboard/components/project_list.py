"""
Project list: a filtered view of the store for one status.

Each list subscribes to the store when it is built. On every notification it
recomputes `items` from the snapshot it was handed (records whose status
matches, in snapshot order) and redraws its table from scratch.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from rich.table import Table

from projboard.components.abstract import AbstractComponent, Mount
from projboard.domain.models import Record, RecordStatus
from projboard.reporter import build_project_table
from projboard.store import RecordStore, Snapshot
from projboard.ui.elements import Screen
from projboard.utils.logging import get_logger

log = get_logger(__name__)


def select_by_status(records: Sequence[Record], status: RecordStatus) -> Tuple[Record, ...]:
    """Records of `records` whose status is `status`, in their original order."""
    return tuple(record for record in records if record.status == status)


class ProjectList(AbstractComponent):
    """
    Rendered list of the projects in one status.

    Parameters
    ----------
    status : RecordStatus
        Category this list shows; fixed for the life of the instance.
    store : RecordStore
        Store to subscribe to.
    host : Screen
        Screen the list's table is attached to.
    """

    def __init__(self, status: RecordStatus, store: RecordStore, host: Screen) -> None:
        self._status = status
        self._store = store
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.items: Tuple[Record, ...] = ()
        self.mount = Mount(host=host, element_id=f"{status.value}-projects")
        self.attach()

    @property
    def status(self) -> RecordStatus:
        return self._status

    def configure(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_snapshot)

    def renderable(self) -> Table:
        return build_project_table(self._status, self.items)

    def render(self) -> None:
        self.mount.replace(self.renderable())

    def close(self) -> None:
        """Stop following the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_snapshot(self, records: Snapshot) -> None:
        self.items = select_by_status(records, self._status)
        log.debug(
            "Project list refreshed",
            extra={"status": self._status.value, "items": len(self.items)},
        )
        self.render()


__all__ = ["ProjectList", "select_by_status"]
