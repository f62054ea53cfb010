"""
Domain models for the project board.

A `Record` is a single submitted project. Records are frozen; the only field
allowed to change after creation is `status`, and that change is expressed
by replacing the record with a copy (see `Record.with_status`).
"""
from __future__ import annotations

import enum
import uuid

from pydantic import BaseModel, Field


class RecordStatus(str, enum.Enum):
    """Lifecycle category of a project."""

    ACTIVE = "active"
    FINISHED = "finished"


# Allowed status moves; anything not listed is rejected by the store.
ALLOWED_TRANSITIONS: dict[RecordStatus, frozenset[RecordStatus]] = {
    RecordStatus.ACTIVE: frozenset({RecordStatus.FINISHED}),
    RecordStatus.FINISHED: frozenset(),
}


def new_record_id() -> str:
    """Generate an opaque unique identifier for a record."""
    return uuid.uuid4().hex


class Record(BaseModel):
    """
    Representation of one project on the board.
    """

    id: str = Field(default_factory=new_record_id, description="Opaque unique id.")
    title: str = Field(..., description="Short project title.")
    description: str = Field(..., description="Free-form project description.")
    capacity: int = Field(..., description="Number of people assigned.")
    status: RecordStatus = Field(RecordStatus.ACTIVE, description="Lifecycle category.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def with_status(self, status: RecordStatus) -> Record:
        """Return a copy of this record carrying `status`."""
        return self.model_copy(update={"status": status})


__all__ = ["ALLOWED_TRANSITIONS", "Record", "RecordStatus", "new_record_id"]
