"""The list of screen rectangles waiting to be redrawn."""

from __future__ import annotations

from typing import Iterator

from eikit.geometry import Rect


class InvalidatedRects:
    """Rectangles of the screen invalidated since the last redraw."""

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def add(self, rect: Rect) -> None:
        """Mark ``rect`` as needing a redraw."""
        if not isinstance(rect, Rect):
            raise TypeError(f"expected a Rect, got {type(rect).__name__}")
        self._rects.append(rect)

    def clear(self) -> None:
        """Forget every invalidated rectangle."""
        self._rects.clear()

    def __iter__(self) -> Iterator[Rect]:
        return iter(list(self._rects))

    def __len__(self) -> int:
        return len(self._rects)