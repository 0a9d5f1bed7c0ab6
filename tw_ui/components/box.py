from __future__ import annotations

from tw_ui.components.component import Component


class BoxComponent(Component):
    """Component that paints its whole rectangle with the current state style."""

    def draw(self) -> None:
        super().draw()
        self.screen.canvas.fill(self.rectangle, self.style)
