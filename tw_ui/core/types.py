from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Rectangle:
    """Bounding box in screen cells."""

    column: int
    row: int
    width: int
    height: int

    def contains(self, column: int, row: int) -> bool:
        return (
            self.column <= column < self.column + self.width
            and self.row <= row < self.row + self.height
        )


class ComponentState(str, Enum):
    BASE = "base"
    FOCUSED = "focused"
    ACTIVE = "active"


class InteractionMethod(str, Enum):
    KEYBOARD = "keyboard"
    POINTER = "pointer"

    @classmethod
    def parse(cls, value: "InteractionMethod | str | None") -> "InteractionMethod | None":
        """Normalize a host-supplied method; unknown values map to None."""
        if value is None or isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key == "mouse":
            return cls.POINTER
        try:
            return cls(key)
        except ValueError:
            return None
