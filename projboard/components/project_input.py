"""
Project input form: gathers field values, validates them, commits to the store.

On submit the handler first prevents the form's default action, then
validates the three raw fields. Valid input is appended to the store and the
fields are cleared; invalid input is reported through the notifier and the
fields are left as typed.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Union

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from projboard.components.abstract import AbstractComponent, Mount
from projboard.config import Settings, get_settings
from projboard.domain.validation import ValidationRule, check, parse_number
from projboard.errors import ValidationFailure
from projboard.store import RecordStore
from projboard.ui.elements import FormElement, Screen, SubmitEvent
from projboard.utils.logging import get_logger

log = get_logger(__name__)

FIELD_NAMES = ("title", "description", "people")


class SubmitOutcome(str, enum.Enum):
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class GatheredInput:
    """Validated, parsed form values."""

    title: str
    description: str
    capacity: int


class Notifier(Protocol):
    """Tells the user a submission was rejected."""

    def alert(self, message: str) -> None:
        ...


class ConsoleNotifier:
    """Notifier printing alerts to a rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console(stderr=True)

    def alert(self, message: str) -> None:
        self._console.print(f"[bold red]{escape(message)}[/bold red]")


class ProjectInput(AbstractComponent):
    """
    Input form for new projects.

    Parameters
    ----------
    store : RecordStore
        Store new projects are committed to.
    host : Screen
        Screen the form is attached to (at the start).
    notifier : Notifier, optional
        Receives the rejection message when validation fails.
    settings : Settings, optional
        Source of the validation limits. Defaults to `get_settings()`.
    """

    def __init__(
        self,
        store: RecordStore,
        host: Screen,
        notifier: Optional[Notifier] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._store = store
        self._notifier = notifier or ConsoleNotifier()
        self._settings = settings or get_settings()
        self._submit_handler: Optional[Callable[[SubmitEvent], None]] = None
        self.last_outcome: Optional[SubmitOutcome] = None
        self.form = FormElement.with_fields("user-input", *FIELD_NAMES)
        self.mount = Mount(host=host, element_id=self.form.element_id, at_start=True)
        self.attach()

    def configure(self) -> None:
        if self._submit_handler is not None:
            return

        # Closure captures this instance once; the form may call it from anywhere
        def submit_handler(event: SubmitEvent) -> None:
            event.prevent_default()
            self.last_outcome = self.handle_submit()

        self._submit_handler = submit_handler
        self.form.add_submit_listener(submit_handler)

    def renderable(self) -> RenderableType:
        return Panel(self.form, title="New project", expand=False)

    def render(self) -> None:
        self.mount.replace(self.renderable())

    def gather_input(self) -> Union[GatheredInput, ValidationFailure]:
        """
        Read and validate the raw field values.

        Returns the parsed values, or a `ValidationFailure` naming each field
        and the constraints it broke.
        """
        raw = self.form.values()
        capacity = parse_number(raw["people"])
        rules: Dict[str, ValidationRule] = {
            "title": ValidationRule(value=raw["title"], required=True),
            "description": ValidationRule(
                value=raw["description"],
                required=True,
                min_length=self._settings.description_min_length,
            ),
            "people": ValidationRule(
                value=capacity,
                required=True,
                min=self._settings.capacity_min,
                max=self._settings.capacity_max,
            ),
        }

        errors: Dict[str, List[str]] = {}
        for name, rule in rules.items():
            violations = check(rule)
            if violations:
                errors[name] = violations
        if errors:
            return ValidationFailure(errors=errors)
        if not isinstance(capacity, int):
            return ValidationFailure(errors={"people": ["integer"]})
        return GatheredInput(
            title=raw["title"],
            description=raw["description"],
            capacity=capacity,
        )

    def handle_submit(self) -> SubmitOutcome:
        """Validate the form and commit it to the store when valid."""
        gathered = self.gather_input()
        if isinstance(gathered, ValidationFailure):
            log.warning("Project input rejected", extra={"fields": gathered.fields})
            self._notifier.alert(gathered.message())
            return SubmitOutcome.REJECTED

        self._store.append(gathered.title, gathered.description, gathered.capacity)
        self.clear_input()
        return SubmitOutcome.COMMITTED

    def submit(self, **values: str) -> SubmitOutcome:
        """
        Fill the given fields and trigger the form's submit event.
        """
        self.form.fill(**values)
        self.last_outcome = None
        self.form.submit()
        if self.last_outcome is None:
            raise RuntimeError("submit handler is not configured")
        return self.last_outcome

    def clear_input(self) -> None:
        self.form.fill(**{name: "" for name in FIELD_NAMES})
        self.render()


__all__ = [
    "ConsoleNotifier",
    "GatheredInput",
    "Notifier",
    "ProjectInput",
    "SubmitOutcome",
]
