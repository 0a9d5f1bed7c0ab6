from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text

from tw_ui.core.events import ComponentEvent, EventTarget
from tw_ui.core.theme import DEFAULT_THEME, Theme
from tw_ui.core.types import ComponentState, InteractionMethod, Rectangle

if TYPE_CHECKING:
    from tw_ui.screen import Screen

logger = logging.getLogger(__name__)

STATE_CHANGE = "stateChange"


class Component(EventTarget):
    """Base widget: geometry, theme, z-order and membership in a screen.

    Components attach themselves to ``screen`` on construction and stay
    drawn until :meth:`remove` is called.
    """

    def __init__(
        self,
        *,
        screen: "Screen",
        rectangle: Rectangle,
        theme: Theme | None = None,
        z_index: int = 0,
    ) -> None:
        super().__init__()
        self.screen = screen
        self.rectangle = rectangle
        self.theme = theme or DEFAULT_THEME
        self.z_index = z_index
        self._state = ComponentState.BASE
        screen.add(self)

    @property
    def state(self) -> ComponentState:
        return self._state

    @state.setter
    def state(self, value: ComponentState) -> None:
        if value is self._state:
            return
        self._state = value
        self.dispatch_event(ComponentEvent(STATE_CHANGE, self))

    @property
    def attached(self) -> bool:
        return self.screen.contains(self)

    @property
    def style(self) -> Style:
        return self.theme.style_for(self._state)

    def styled(self, text: str) -> Text:
        return Text(text, style=self.style)

    def draw(self) -> None:
        return None

    def interact(self, method: InteractionMethod | str | None = None) -> None:
        _ = method
        self.state = ComponentState.FOCUSED

    def remove(self) -> None:
        """Detach from the screen; safe to call more than once."""
        if self.screen.remove(self):
            logger.debug("Removed %s from screen", type(self).__name__)
