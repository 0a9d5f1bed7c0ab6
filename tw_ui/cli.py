"""
Command-line demo for term-widgets.

Builds a screen with a single combobox, replays scripted interactions against
it and prints the resulting frame.
"""

from __future__ import annotations

from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tw_common.errors import ConfigurationError
from tw_common.logging import configure_logging
from tw_ui.components.combobox import VALUE_CHANGE, ComboboxComponent, ComboboxMode
from tw_ui.core.events import ComponentEvent
from tw_ui.core.theme import presenter_message
from tw_ui.core.types import InteractionMethod, Rectangle
from tw_ui.screen import Screen
from tw_ui.settings import ScreenSettings

app = typer.Typer(help="Render term-widgets components in the terminal.", no_args_is_help=True)

COMBOBOX_WIDTH = 20


@app.callback()
def entry() -> None:
    """Terminal widget demos."""


def _fail(console: Console, message: str) -> NoReturn:
    console.print(presenter_message("error", escape(message)))
    raise typer.Exit(1)


def _screen_settings(columns: int | None, rows: int | None) -> ScreenSettings:
    """Environment defaults, overridden by explicit command-line values."""
    values = ScreenSettings.from_env().model_dump()
    if columns is not None:
        values["columns"] = columns
    if rows is not None:
        values["rows"] = rows
    return ScreenSettings.build(**values)


@app.command("combobox")
def combobox_command(
    option: Optional[List[str]] = typer.Option(
        None, "--option", "-o", help="Option value (repeat for each option)."
    ),
    label: Optional[str] = typer.Option(None, "--label", help="Initial label text."),
    interact: Optional[List[str]] = typer.Option(
        None,
        "--interact",
        "-i",
        help="Interaction to replay: keyboard or pointer (repeatable).",
    ),
    select: Optional[int] = typer.Option(
        None, "--select", help="Activate the option button at this index."
    ),
    columns: Optional[int] = typer.Option(
        None, "--columns", help="Screen width in cells (default: TW_SCREEN_COLUMNS or 80)."
    ),
    rows: Optional[int] = typer.Option(
        None, "--rows", help="Screen height in cells (default: TW_SCREEN_ROWS or 24)."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file."),
    log_json: Optional[bool] = typer.Option(
        None, "--log-json/--no-log-json", help="Render log records as JSON."
    ),
) -> None:
    """Replay interactions against a combobox and print the frame."""
    configure_logging(level=log_level, log_file=log_file, json=log_json)
    console = Console()

    try:
        settings = _screen_settings(columns, rows)
        screen = Screen(settings)
        combobox = ComboboxComponent(
            screen=screen,
            rectangle=Rectangle(
                column=1,
                row=0,
                width=max(1, min(COMBOBOX_WIDTH, settings.columns - 2)),
                height=1,
            ),
            options=option or [],
            label=label,
        )
    except ConfigurationError as exc:
        _fail(console, str(exc))

    changes: list[str] = []

    def record_change(event: ComponentEvent) -> None:
        changes.append(str(getattr(event.component, "value", "")))

    combobox.add_event_listener(VALUE_CHANGE, record_change)

    for method in interact or []:
        if InteractionMethod.parse(method) is None:
            _fail(console, f"Unknown interaction method: {method}")
        combobox.interact(method)

    if select is not None:
        if combobox.mode is not ComboboxMode.OPEN:
            _fail(console, "Cannot select an option while the combobox is closed")
        if not 0 <= select < len(combobox.children):
            _fail(console, f"Option index out of range: {select}")
        target = combobox.children[select].rectangle
        # Option buttons need a focusing click before the activating one.
        screen.click(target.column, target.row)
        screen.click(target.column, target.row)

    screen.render(console)
    for value in changes:
        console.print(presenter_message("info", f"valueChange: {escape(value)}"))
    console.print(f"mode: {combobox.mode.value}")
    console.print(f"value: {escape(combobox.value or '')}")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
