"""Shared fixtures for tw_ui tests."""

from __future__ import annotations

import pytest

from tw_ui.screen import Screen
from tw_ui.settings import ScreenSettings


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def screen() -> Screen:
    return Screen(ScreenSettings(columns=30, rows=10))
