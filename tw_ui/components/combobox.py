"""Combobox: pick one value from a fixed list of options.

The combobox is closed until first interacted with. A first interaction only
focuses it; a second one opens it when it arrives within
``DOUBLE_INTERACTION_WINDOW`` seconds or comes from the keyboard. While open,
one transient :class:`ButtonComponent` per option is stacked below the
combobox. Activating one of them selects its option, publishes a
``valueChange`` event and collapses the list again.
"""

from __future__ import annotations

import logging
import math
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, Sequence

from tw_common.errors import ConfigurationError
from tw_ui.components.box import BoxComponent
from tw_ui.components.button import ButtonComponent
from tw_ui.components.component import STATE_CHANGE, Component
from tw_ui.core.events import ComponentEvent
from tw_ui.core.layout import centered_origin
from tw_ui.core.theme import Theme
from tw_ui.core.types import ComponentState, InteractionMethod, Rectangle

if TYPE_CHECKING:
    from tw_ui.screen import Screen

logger = logging.getLogger(__name__)

VALUE_CHANGE = "valueChange"
DOUBLE_INTERACTION_WINDOW = 0.5  # seconds


class ComboboxMode(str, Enum):
    CLOSED = "closed"
    FOCUSED = "focused"
    OPEN = "open"


_MODE_BY_STATE = {
    ComponentState.BASE: ComboboxMode.CLOSED,
    ComponentState.FOCUSED: ComboboxMode.FOCUSED,
    ComponentState.ACTIVE: ComboboxMode.OPEN,
}


class OptionPopup:
    """Transient option buttons owned by a single combobox.

    Buttons know nothing about the combobox; the popup keeps the mapping from
    button to option and reports activations through ``on_select``.
    """

    def __init__(self, on_select: Callable[[str], None]) -> None:
        self._on_select = on_select
        self._option_by_button: dict[ButtonComponent, str] = {}

    @property
    def buttons(self) -> tuple[ButtonComponent, ...]:
        return tuple(self._option_by_button)

    def spawn(self, owner: Component, options: Sequence[str]) -> None:
        bounds = owner.rectangle
        for index, option in enumerate(options):
            button = ButtonComponent(
                screen=owner.screen,
                rectangle=Rectangle(
                    column=bounds.column,
                    row=bounds.row + (index + 1) * bounds.height,
                    width=bounds.width,
                    height=bounds.height,
                ),
                label=option,
                theme=owner.theme,
                z_index=owner.z_index,
            )
            button.add_event_listener(STATE_CHANGE, self._on_button_state_change)
            self._option_by_button[button] = option
        logger.debug("Spawned %d option buttons", len(options))

    def dispose(self) -> None:
        buttons = list(self._option_by_button)
        self._option_by_button.clear()
        for button in buttons:
            button.remove_event_listener(STATE_CHANGE, self._on_button_state_change)
            button.remove()
        if buttons:
            logger.debug("Disposed %d option buttons", len(buttons))

    def _on_button_state_change(self, event: ComponentEvent) -> None:
        button = event.component
        if not isinstance(button, ButtonComponent) or button.state is not ComponentState.ACTIVE:
            return
        option = self._option_by_button.get(button)
        if option is None:
            return
        self._on_select(option)


class ComboboxComponent(BoxComponent):
    """Closed/open selector over a fixed, non-empty list of distinct options.

    If ``label`` is omitted the first option is both the label and the
    initial value; an explicit label leaves ``value`` unset until the user
    picks something.

    Raises:
        ConfigurationError: ``options`` is empty or contains duplicates.
    """

    def __init__(
        self,
        *,
        screen: "Screen",
        rectangle: Rectangle,
        options: Sequence[str],
        label: str | None = None,
        theme: Theme | None = None,
        z_index: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        options = tuple(options)
        if not options:
            raise ConfigurationError(
                "Combobox requires at least one option",
                context={"rectangle": rectangle},
            )
        duplicates = sorted({option for option in options if options.count(option) > 1})
        if duplicates:
            raise ConfigurationError(
                "Combobox options must be distinct",
                context={"duplicates": duplicates},
            )

        super().__init__(screen=screen, rectangle=rectangle, theme=theme, z_index=z_index)
        self.options = options
        self.label = options[0] if label is None else label
        self.value: str | None = options[0] if label is None else None

        self._clock = clock
        self._last_interaction: float | None = None
        self._popup = OptionPopup(self._select)

    @property
    def mode(self) -> ComboboxMode:
        return _MODE_BY_STATE[self.state]

    @property
    def children(self) -> tuple[ButtonComponent, ...]:
        return self._popup.buttons

    def draw(self) -> None:
        super().draw()
        if self.label:
            column, row = centered_origin(self.rectangle, self.label)
            self.screen.canvas.draw(column, row, self.styled(self.label))

    def interact(self, method: InteractionMethod | str | None = None) -> None:
        """Host entry point for keyboard or pointer interactions.

        Ignored once the combobox has been removed from its screen.
        """
        if not self.attached:
            return
        self._transition(InteractionMethod.parse(method), trigger="host")

    def remove(self) -> None:
        self._popup.dispose()
        self.state = ComponentState.BASE
        super().remove()

    def _select(self, option: str) -> None:
        self.label = option
        self.value = option
        try:
            self.dispatch_event(ComponentEvent(VALUE_CHANGE, self))
        finally:
            # A failing observer must not leave the option list open.
            self._transition(None, trigger="selection")

    def _transition(self, method: InteractionMethod | None, *, trigger: str) -> None:
        now = self._clock()
        gap = math.inf if self._last_interaction is None else now - self._last_interaction
        previous = self.mode

        if previous is ComboboxMode.FOCUSED and (
            gap < DOUBLE_INTERACTION_WINDOW or method is InteractionMethod.KEYBOARD
        ):
            self._popup.spawn(self, self.options)
            self.state = ComponentState.ACTIVE
        else:
            if previous is ComboboxMode.OPEN:
                self._popup.dispose()
            self.state = ComponentState.FOCUSED

        logger.debug(
            "Combobox %s -> %s (trigger=%s, method=%s, gap=%.3fs)",
            previous.value,
            self.mode.value,
            trigger,
            method.value if method else None,
            gap,
        )
        self._last_interaction = now
