"""
Component interfaces for the project board.

Concrete components (the project input form and the project lists) implement
the `Component` protocol: `configure()` wires event handling once, and
`render()` rebuilds the component's visible output. Where a component is
placed is described by a `Mount`, which components hold rather than inherit.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rich.console import RenderableType

from projboard.ui.elements import Screen


@dataclass(frozen=True)
class Mount:
    """
    Placement of a component inside a host screen.

    Attributes
    ----------
    host : Screen
        Container the component attaches to.
    element_id : str
        Slot name the component occupies in the host.
    at_start : bool
        Attach at the beginning of the host instead of the end.
    """

    host: Screen
    element_id: str
    at_start: bool = False

    def attach(self, renderable: RenderableType) -> None:
        self.host.attach(self.element_id, renderable, at_start=self.at_start)

    def replace(self, renderable: RenderableType) -> None:
        self.host.replace(self.element_id, renderable)


@runtime_checkable
class Component(Protocol):
    """
    Common interface all board components implement.

    Attributes
    ----------
    mount : Mount
        Where the component is displayed.
    """

    mount: Mount

    def configure(self) -> None:
        """Register event handlers; called once after construction."""
        ...

    def render(self) -> None:
        """Rebuild the component's output in its mount slot."""
        ...


class AbstractComponent(abc.ABC):
    """
    Optional ABC helper for class-based components.

    Subclasses implement `configure` and `render`; `attach` places
    the component in its host and wires its handlers.
    """

    mount: Mount

    @abc.abstractmethod
    def configure(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def render(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def renderable(self) -> RenderableType:  # pragma: no cover - interface only
        """Build the component's current output."""
        raise NotImplementedError

    def attach(self) -> None:
        self.mount.attach(self.renderable())
        self.configure()


__all__ = ["AbstractComponent", "Component", "Mount"]
