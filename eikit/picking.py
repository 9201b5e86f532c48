"""Offscreen picking: mapping pick identifiers to widgets and to colours."""

from __future__ import annotations

from typing import Any, Sequence

from eikit.geometry import Color


class PickRegistry:
    """Widgets indexed by their pick identifier, in order of registration."""

    def __init__(self) -> None:
        self._widgets: list[Any] = []

    def add(self, widget: Any) -> int:
        """Register a widget and return its pick identifier."""
        self._widgets.append(widget)
        return len(self._widgets) - 1

    def get(self, index: int) -> Any:
        """Return the widget registered under ``index``."""
        if not 0 <= index < len(self._widgets):
            raise IndexError(f"pick id out of bounds: {index}")
        return self._widgets[index]

    def __len__(self) -> int:
        return len(self._widgets)


def pick_color(pick_id: int) -> Color:
    """Encode a pick identifier as an opaque colour."""
    if pick_id < 0:
        raise ValueError(f"pick id must not be negative: {pick_id}")
    return Color(pick_id & 0xFF, (pick_id >> 8) & 0xFF, (pick_id >> 16) & 0xFF, 255)


def decode_pick_pixel(pixel: int, channel_indices: Sequence[int]) -> int:
    """Recover the pick identifier from a packed 32-bit pixel.

    ``channel_indices`` gives the byte index of the red, green and blue
    channels within the pixel (a fourth, alpha, index is ignored).
    """
    ir, ig, ib = channel_indices[:3]
    channels = [(pixel >> (8 * k)) & 0xFF for k in range(4)]
    return channels[ir] | (channels[ig] << 8) | (channels[ib] << 16)