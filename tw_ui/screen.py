"""Host screen: owns the canvas and the component tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from tw_ui.core.canvas import Canvas
from tw_ui.core.types import InteractionMethod
from tw_ui.settings import ScreenSettings

if TYPE_CHECKING:
    from tw_ui.components.component import Component

logger = logging.getLogger(__name__)


class Screen:
    def __init__(self, settings: ScreenSettings | None = None) -> None:
        self.settings = settings or ScreenSettings()
        self.canvas = Canvas(
            self.settings.columns,
            self.settings.rows,
            fill_char=self.settings.fill_char,
        )
        self._components: list["Component"] = []

    @property
    def components(self) -> list["Component"]:
        """Components in draw order: z-index, then insertion order."""
        return sorted(self._components, key=lambda component: component.z_index)

    def contains(self, component: "Component") -> bool:
        return any(existing is component for existing in self._components)

    def add(self, component: "Component") -> None:
        if self.contains(component):
            return
        self._components.append(component)

    def remove(self, component: "Component") -> bool:
        """Detach component; returns False if it was not attached."""
        for index, existing in enumerate(self._components):
            if existing is component:
                del self._components[index]
                return True
        return False

    def draw(self) -> None:
        self.canvas.clear()
        for component in self.components:
            component.draw()

    def component_at(self, column: int, row: int) -> "Component | None":
        for component in reversed(self.components):
            if component.rectangle.contains(column, row):
                return component
        return None

    def click(self, column: int, row: int) -> "Component | None":
        """Deliver a pointer interaction to the topmost component under the cell."""
        component = self.component_at(column, row)
        if component is None:
            logger.debug("Click at (%s, %s) hit nothing", column, row)
            return None
        component.interact(InteractionMethod.POINTER)
        return component

    def render(self, console: Console) -> None:
        self.draw()
        console.print(Text("\n").join(self.canvas.lines()), soft_wrap=True)
