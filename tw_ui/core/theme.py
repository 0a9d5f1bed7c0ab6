from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style

from tw_ui.core.types import ComponentState

ACCENT = "blue"


@dataclass(frozen=True)
class Theme:
    """Rich style strings per component state."""

    base: str = ""
    focused: str = ""
    active: str = ""

    def style_for(self, state: ComponentState) -> Style:
        if state is ComponentState.ACTIVE:
            raw = self.active or self.focused or self.base
        elif state is ComponentState.FOCUSED:
            raw = self.focused or self.base
        else:
            raw = self.base
        return Style.parse(raw) if raw else Style.null()


DEFAULT_THEME = Theme(
    base="white on grey23",
    focused=f"white on {ACCENT}",
    active="bold white on dark_blue",
)

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)
