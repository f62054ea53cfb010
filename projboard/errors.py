"""
Error types for the project board.

Validation problems are not exceptions: they come back as a
`ValidationFailure` value from the input collector. The exceptions below
signal programming errors in how the store is driven.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


class ProjboardError(Exception):
    """Base class for project board errors."""


class RecordNotFoundError(ProjboardError, KeyError):
    """Raised when a record id is not held by the store."""

    def __init__(self, record_id: str) -> None:
        super().__init__(record_id)
        self.record_id = record_id

    def __str__(self) -> str:
        return f"No record with id '{self.record_id}'"


class InvalidStatusTransition(ProjboardError, ValueError):
    """Raised when a record is moved to a status it may not reach."""


@dataclass(frozen=True)
class ValidationFailure:
    """
    One or more field constraints unmet.

    `errors` maps a field name to the constraint names it violated.
    """

    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def fields(self) -> List[str]:
        return list(self.errors)

    def message(self) -> str:
        parts = [f"{name} ({', '.join(rules)})" for name, rules in self.errors.items()]
        return "Invalid input: " + "; ".join(parts)


__all__ = [
    "InvalidStatusTransition",
    "ProjboardError",
    "RecordNotFoundError",
    "ValidationFailure",
]
