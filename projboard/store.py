"""
Observable record store.

`RecordStore` owns the ordered sequence of records and the ordered list of
subscribers. Every mutation hands each subscriber its own snapshot (a tuple
copy of the sequence) synchronously and in subscription order, before the
mutating call returns. Subscribing alone never triggers a notification.

One store exists per process: `get_store()` always returns the same instance,
and the composition root (`projboard.app.build_board`) passes it explicitly to
every component that needs it.

Usage:
    from projboard.store import get_store

    store = get_store()
    store.subscribe(lambda records: print(len(records)))
    store.append("Build API", "Design and implement", 3)
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from projboard.domain.models import ALLOWED_TRANSITIONS, Record, RecordStatus
from projboard.errors import InvalidStatusTransition, RecordNotFoundError
from projboard.utils.logging import get_logger

log = get_logger(__name__)

Snapshot = Tuple[Record, ...]
Listener = Callable[[Snapshot], None]


class RecordStore:
    """
    Authoritative in-memory collection of records with synchronous fan-out.
    """

    def __init__(self) -> None:
        self._records: List[Record] = []
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> Snapshot:
        """Return an independent copy of the current record sequence."""
        return tuple(self._records)

    def get(self, record_id: str) -> Record:
        return self._records[self._index_of(record_id)]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register `listener` for future mutations.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)
        log.debug("Listener subscribed", extra={"listeners": len(self._listeners)})

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, title: str, description: str, capacity: int) -> Record:
        """
        Create a new ACTIVE record, append it, and notify every listener.

        Validation is the caller's job; this call trusts its arguments.
        """
        record = Record(title=title, description=description, capacity=capacity)
        self._records.append(record)
        log.info(
            "Record appended",
            extra={"record_id": record.id, "title": record.title, "records": len(self._records)},
        )
        self._notify()
        return record

    def update_status(self, record_id: str, status: RecordStatus) -> Record:
        """
        Move a record to `status`, keeping its position in the sequence.

        Setting the status a record already has changes nothing and notifies
        nobody.
        """
        index = self._index_of(record_id)
        current = self._records[index]
        if current.status == status:
            return current
        if status not in ALLOWED_TRANSITIONS[current.status]:
            raise InvalidStatusTransition(
                f"Cannot move record '{record_id}' from {current.status.value} to {status.value}"
            )

        updated = current.with_status(status)
        self._records[index] = updated
        log.info(
            "Record status updated",
            extra={"record_id": record_id, "status": status.value},
        )
        self._notify()
        return updated

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(record_id)

    def _notify(self) -> None:
        # Iterate over a copy so a listener unsubscribing mid fan-out is safe
        for listener in list(self._listeners):
            listener(self.snapshot())


_process_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """
    Return the process-wide store, creating it on first access.

    The instance lives until the process exits; there is no reset.
    """
    global _process_store
    if _process_store is None:
        _process_store = RecordStore()
    return _process_store


def find_by_prefix(records: Snapshot, prefix: str) -> Optional[Record]:
    """
    Look up a record whose id starts with `prefix`.

    Returns None when no record, or more than one record, matches.
    """
    matches = [record for record in records if record.id.startswith(prefix)]
    if len(matches) != 1:
        return None
    return matches[0]


__all__ = ["Listener", "RecordStore", "Snapshot", "find_by_prefix", "get_store"]
