"""Cell buffer that components paint into once per frame."""

from __future__ import annotations

import math
from typing import TypeAlias

from rich.style import Style
from rich.text import Text

from tw_ui.core.types import Rectangle

Cell: TypeAlias = tuple[str, Style]


def _as_style(value: str | Style | None) -> Style:
    if isinstance(value, Style):
        return value
    if not value:
        return Style.null()
    return Style.parse(value)


class Canvas:
    """Fixed-size grid of styled characters.

    Anything drawn outside the grid is clipped. Fractional coordinates are
    floored so centered text lands on a cell boundary.
    """

    def __init__(self, columns: int, rows: int, *, fill_char: str = " ") -> None:
        self.columns = columns
        self.rows = rows
        self._fill_char = fill_char
        self._cells: list[list[Cell]] = []
        self.clear()

    def clear(self) -> None:
        blank: Cell = (self._fill_char, Style.null())
        self._cells = [[blank] * self.columns for _ in range(self.rows)]

    def cell(self, column: int, row: int) -> Cell:
        return self._cells[row][column]

    def fill(self, rectangle: Rectangle, style: Style) -> None:
        for row in range(rectangle.row, rectangle.row + rectangle.height):
            for column in range(rectangle.column, rectangle.column + rectangle.width):
                self._put(column, row, " ", style)

    def draw(self, column: float, row: float, text: Text | str) -> None:
        if isinstance(text, str):
            text = Text(text)
        x = math.floor(column)
        y = math.floor(row)
        if y < 0 or y >= self.rows:
            return

        plain = text.plain
        styles = [_as_style(text.style)] * len(plain)
        for span in text.spans:
            span_style = _as_style(span.style)
            for offset in range(max(span.start, 0), min(span.end, len(plain))):
                styles[offset] = styles[offset] + span_style

        for offset, char in enumerate(plain):
            if char == "\n":
                break
            target = x + offset
            if not 0 <= target < self.columns:
                continue
            # Text without a background keeps the one already painted.
            _, underneath = self._cells[y][target]
            self._cells[y][target] = (char, underneath + styles[offset])

    def _put(self, column: int, row: int, char: str, style: Style) -> None:
        if 0 <= row < self.rows and 0 <= column < self.columns:
            self._cells[row][column] = (char, style)

    def lines(self) -> list[Text]:
        rendered: list[Text] = []
        for row in self._cells:
            line = Text(no_wrap=True, end="")
            run_chars: list[str] = []
            run_style: Style | None = None
            for char, style in row:
                if run_style is not None and style != run_style:
                    line.append("".join(run_chars), style=run_style)
                    run_chars = []
                run_chars.append(char)
                run_style = style
            if run_chars:
                line.append("".join(run_chars), style=run_style)
            rendered.append(line)
        return rendered

    def plain_lines(self) -> list[str]:
        return ["".join(char for char, _ in row) for row in self._cells]
