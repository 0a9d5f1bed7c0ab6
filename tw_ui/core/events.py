"""Minimal typed publish/subscribe channel for components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TypeAlias

if TYPE_CHECKING:
    from tw_ui.components.component import Component


@dataclass(frozen=True)
class ComponentEvent:
    type: str
    component: "Component"


Listener: TypeAlias = Callable[[ComponentEvent], None]


class EventTarget:
    """Registry of listeners keyed by event type."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))

    def dispatch_event(self, event: ComponentEvent) -> None:
        # Snapshot: listeners may unsubscribe (or dispose the target) mid-dispatch.
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)
