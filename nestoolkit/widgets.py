"""Small stateful helpers for terminal user interfaces."""

from __future__ import annotations

import math
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class SinSignal:
    """Endless iterator of (x, sin(x / period) * scale) points."""

    def __init__(self, interval: float, period: float, scale: float) -> None:
        self.x = 0.0
        self.interval = interval
        self.period = period
        self.scale = scale

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return self

    def __next__(self) -> tuple[float, float]:
        point = (self.x, math.sin(self.x / self.period) * self.scale)
        self.x += self.interval
        return point


class TabsState:
    """A list of tab titles with one selected, wrapping at both ends."""

    def __init__(self, titles: Sequence[str]) -> None:
        self.titles = list(titles)
        self.index = 0

    def next(self) -> None:
        if not self.titles:
            raise IndexError("No tabs to select")
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        if not self.titles:
            raise IndexError("No tabs to select")
        self.index = self.index - 1 if self.index > 0 else len(self.titles) - 1


class StatefulList(Generic[T]):
    """A list of items with an optional selection that wraps around."""

    def __init__(self, items: Sequence[T] | None = None) -> None:
        self.items: list[T] = list(items) if items is not None else []
        self.selected: int | None = None

    @classmethod
    def with_items(cls, items: Sequence[T]) -> StatefulList[T]:
        return cls(items)

    def next(self) -> None:
        if self.selected is None:
            self.selected = 0
            return
        if not self.items:
            raise IndexError("No items to select")
        self.selected = 0 if self.selected >= len(self.items) - 1 else self.selected + 1

    def previous(self) -> None:
        if self.selected is None:
            self.selected = 0
            return
        if not self.items:
            raise IndexError("No items to select")
        self.selected = len(self.items) - 1 if self.selected == 0 else self.selected - 1

    def unselect(self) -> None:
        self.selected = None