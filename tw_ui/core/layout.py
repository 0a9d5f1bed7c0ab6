from __future__ import annotations

from tw_ui.core.types import Rectangle


def centered_origin(rectangle: Rectangle, text: str) -> tuple[float, float]:
    """Origin that centers a single line of text inside rectangle.

    Coordinates may be fractional; the canvas floors them.
    """
    column = rectangle.column + rectangle.width / 2 - len(text) / 2
    row = rectangle.row + rectangle.height / 2
    return column, row
