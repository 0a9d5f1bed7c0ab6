from __future__ import annotations

from typing import TYPE_CHECKING

from tw_ui.components.box import BoxComponent
from tw_ui.core.layout import centered_origin
from tw_ui.core.theme import Theme
from tw_ui.core.types import ComponentState, InteractionMethod, Rectangle

if TYPE_CHECKING:
    from tw_ui.screen import Screen


class ButtonComponent(BoxComponent):
    """Box with a centered label.

    The first interaction focuses the button; any further interaction while
    focused (or already active) activates it.
    """

    def __init__(
        self,
        *,
        screen: "Screen",
        rectangle: Rectangle,
        label: str = "",
        theme: Theme | None = None,
        z_index: int = 0,
    ) -> None:
        self.label = label
        super().__init__(screen=screen, rectangle=rectangle, theme=theme, z_index=z_index)

    def draw(self) -> None:
        super().draw()
        if self.label:
            column, row = centered_origin(self.rectangle, self.label)
            self.screen.canvas.draw(column, row, self.styled(self.label))

    def interact(self, method: InteractionMethod | str | None = None) -> None:
        _ = method
        if self.state in (ComponentState.FOCUSED, ComponentState.ACTIVE):
            self.state = ComponentState.ACTIVE
        else:
            self.state = ComponentState.FOCUSED
