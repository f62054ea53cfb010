"""
Components package for the project board.

Re-exports the component contract and the concrete components so downstream
code can import from `projboard.components` directly.
"""

from projboard.components.abstract import AbstractComponent, Component, Mount
from projboard.components.project_input import (
    ConsoleNotifier,
    GatheredInput,
    Notifier,
    ProjectInput,
    SubmitOutcome,
)
from projboard.components.project_list import ProjectList, select_by_status

__all__ = [
    # Contract
    "AbstractComponent",
    "Component",
    "Mount",
    # Concrete components
    "ConsoleNotifier",
    "GatheredInput",
    "Notifier",
    "ProjectInput",
    "ProjectList",
    "SubmitOutcome",
    "select_by_status",
]
