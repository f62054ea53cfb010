"""
projboard - a small form-to-list project board.

A user submits a project through an input form; the project is validated,
stored in a single in-memory store, and immediately shown in the list for its
status. The package provides:

- A declarative field validation engine
- An observable record store with synchronous, ordered fan-out
- Filtered list views that rebuild themselves on every store change
- An input form component that validates before committing
- A typer CLI for driving the board from a terminal
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from projboard.app import Board, build_board
from projboard.components.abstract import AbstractComponent, Component, Mount
from projboard.components.project_input import ProjectInput, SubmitOutcome
from projboard.components.project_list import ProjectList
from projboard.config import Settings, get_settings
from projboard.domain.models import Record, RecordStatus
from projboard.domain.validation import ValidationRule, validate
from projboard.errors import (
    InvalidStatusTransition,
    ProjboardError,
    RecordNotFoundError,
    ValidationFailure,
)
from projboard.store import RecordStore, get_store
from projboard.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "RecordStatus",
    "ValidationRule",
    "validate",
    # State
    "RecordStore",
    "get_store",
    # Components
    "AbstractComponent",
    "Component",
    "Mount",
    "ProjectInput",
    "ProjectList",
    "SubmitOutcome",
    # Composition
    "Board",
    "build_board",
    # Errors
    "InvalidStatusTransition",
    "ProjboardError",
    "RecordNotFoundError",
    "ValidationFailure",
    # Logging
    "configure_logging",
    "get_logger",
]
