"""
Terminal widget framework: screen, canvas, components and the combobox.
"""

from tw_ui.components import (
    BoxComponent,
    ButtonComponent,
    ComboboxComponent,
    ComboboxMode,
    Component,
)
from tw_ui.core.canvas import Canvas
from tw_ui.core.events import ComponentEvent, EventTarget
from tw_ui.core.theme import DEFAULT_THEME, Theme
from tw_ui.core.types import ComponentState, InteractionMethod, Rectangle
from tw_ui.screen import Screen
from tw_ui.settings import ScreenSettings

__all__ = [
    "BoxComponent",
    "ButtonComponent",
    "Canvas",
    "ComboboxComponent",
    "ComboboxMode",
    "Component",
    "ComponentEvent",
    "ComponentState",
    "DEFAULT_THEME",
    "EventTarget",
    "InteractionMethod",
    "Rectangle",
    "Screen",
    "ScreenSettings",
    "Theme",
]
