"""
Composition root for the project board.

Builds the screen, the input form, and one list per status around a single
store, and hands that store to each component explicitly.

Usage (example from CLI):
    from projboard.app import build_board

    board = build_board()
    board.project_input.submit(title="Build API", description="Design and implement", people="3")
    print(board.screen.export_text())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from projboard.components.project_input import Notifier, ProjectInput
from projboard.components.project_list import ProjectList
from projboard.config import Settings, get_settings
from projboard.domain.models import Record, RecordStatus
from projboard.store import RecordStore, find_by_prefix, get_store
from projboard.ui.elements import Screen
from projboard.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class Board:
    """Everything one running board is made of."""

    store: RecordStore
    screen: Screen
    project_input: ProjectInput
    lists: Dict[RecordStatus, ProjectList]

    def finish(self, id_prefix: str) -> Optional[Record]:
        """
        Move the ACTIVE project whose id starts with `id_prefix` to FINISHED.

        Returns None when the prefix does not identify exactly one project.
        """
        record = find_by_prefix(self.store.snapshot(), id_prefix)
        if record is None:
            log.warning("No unique project for id prefix", extra={"id_prefix": id_prefix})
            return None
        return self.store.update_status(record.id, RecordStatus.FINISHED)

    def close(self) -> None:
        for project_list in self.lists.values():
            project_list.close()


def build_board(
    store: Optional[RecordStore] = None,
    settings: Optional[Settings] = None,
    notifier: Optional[Notifier] = None,
) -> Board:
    """
    Assemble a board.

    Parameters
    ----------
    store : RecordStore | None
        Store to build around. Defaults to the process-wide `get_store()`.
    settings : Settings | None
        Validation limits and render width. Defaults to `get_settings()`.
    notifier : Notifier | None
        Receives validation alerts. Defaults to a console notifier.
    """
    settings = settings or get_settings()
    store = store if store is not None else get_store()
    screen = Screen(width=settings.render_width)

    project_input = ProjectInput(store, screen, notifier=notifier, settings=settings)
    lists = {status: ProjectList(status, store, screen) for status in RecordStatus}

    log.debug("Board assembled", extra={"elements": screen.element_ids})
    return Board(store=store, screen=screen, project_input=project_input, lists=lists)


__all__ = ["Board", "build_board"]
