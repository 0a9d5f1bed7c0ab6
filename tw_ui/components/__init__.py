from tw_ui.components.box import BoxComponent
from tw_ui.components.button import ButtonComponent
from tw_ui.components.combobox import ComboboxComponent, ComboboxMode
from tw_ui.components.component import Component

__all__ = [
    "BoxComponent",
    "ButtonComponent",
    "ComboboxComponent",
    "ComboboxMode",
    "Component",
]
