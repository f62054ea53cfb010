"""
In-memory stand-ins for the visual layer.

`Screen` is the host container: an ordered set of named slots, each holding a
rich renderable. `FormElement` is the input form: three text fields plus
submit listeners. Neither knows anything about projects; components drive
them.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from rich.console import Console, RenderableType
from rich.text import Text


@dataclass
class SubmitEvent:
    """Event handed to submit listeners."""

    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


SubmitListener = Callable[[SubmitEvent], None]


@dataclass
class InputElement:
    """A single text input."""

    name: str
    value: str = ""


@dataclass
class FormElement:
    """A form with named text inputs and submit listeners."""

    element_id: str
    inputs: Dict[str, InputElement] = field(default_factory=dict)
    _listeners: List[SubmitListener] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def with_fields(cls, element_id: str, *names: str) -> FormElement:
        return cls(element_id=element_id, inputs={name: InputElement(name) for name in names})

    def fill(self, **values: str) -> None:
        for name, value in values.items():
            self.inputs[name].value = value

    def values(self) -> Dict[str, str]:
        return {name: element.value for name, element in self.inputs.items()}

    def add_submit_listener(self, listener: SubmitListener) -> None:
        self._listeners.append(listener)

    def submit(self) -> SubmitEvent:
        """Dispatch a submit event to every listener and return it."""
        event = SubmitEvent()
        for listener in list(self._listeners):
            listener(event)
        return event

    def __rich__(self) -> RenderableType:
        lines = [f"{name}: {element.value}" for name, element in self.inputs.items()]
        return Text("\n".join(lines))


class Screen:
    """
    Host container holding named renderables in display order.
    """

    def __init__(self, width: int = 80) -> None:
        self.width = width
        self._slots: Dict[str, RenderableType] = {}

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._slots

    @property
    def element_ids(self) -> List[str]:
        return list(self._slots)

    def attach(self, element_id: str, renderable: RenderableType, at_start: bool = False) -> None:
        """Insert a new slot at the beginning or end of the screen."""
        if at_start:
            self._slots = {element_id: renderable, **self._slots}
        else:
            self._slots[element_id] = renderable

    def replace(self, element_id: str, renderable: RenderableType) -> None:
        """Swap the renderable of an attached slot, keeping its position."""
        if element_id not in self._slots:
            raise KeyError(element_id)
        self._slots[element_id] = renderable

    def export_text(self, element_id: Optional[str] = None) -> str:
        """
        Render one slot (or every slot, in order) to plain text.
        """
        console = Console(width=self.width, record=True, file=io.StringIO(), color_system=None)
        targets = [self._slots[element_id]] if element_id else list(self._slots.values())
        for renderable in targets:
            console.print(renderable)
        return console.export_text()


__all__ = [
    "FormElement",
    "InputElement",
    "Screen",
    "SubmitEvent",
    "SubmitListener",
]
