"""Pure string operations behind text entry editing."""

from __future__ import annotations

from typing import Callable

Measure = Callable[[str], int]

_C_SPACE = frozenset(" \t\n\v\f\r")


def _is_space(char: str) -> bool:
    return char in _C_SPACE


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _check_position(text: str, where: int) -> None:
    if not 0 <= where <= len(text):
        raise IndexError(f"position {where} outside text of length {len(text)}")


def truncate(text: str, size: int) -> str:
    """Keep the first ``size`` characters of ``text``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return text[:size]


def insert_char(text: str, char: str, where: int) -> str:
    """Return ``text`` with the single character ``char`` inserted at index ``where``."""
    if len(char) != 1:
        raise ValueError("exactly one character must be inserted")
    _check_position(text, where)
    return text[:where] + char + text[where:]


def insert_word(text: str, word: str, where: int) -> str:
    """Return ``text`` with ``word`` inserted at index ``where``."""
    _check_position(text, where)
    return text[:where] + word + text[where:]


def delete_char(text: str, where: int) -> str:
    """Delete the character just before cursor position ``where``.

    Positions outside ``1..len(text)`` leave the text unchanged.
    """
    if 0 < where <= len(text):
        return text[:where - 1] + text[where:]
    return text


def cut_text(text: str, start: int, end: int) -> str:
    """Remove the characters from ``start`` up to, not including, ``end``."""
    if not 0 <= start <= end <= len(text):
        raise IndexError(f"invalid range {start}..{end} for text of length {len(text)}")
    return text[:start] + text[end:]


def find_word(text: str, where: int) -> tuple[int, int]:
    """Bounds ``(start, end)`` of the space-delimited word around index ``where``."""
    start = 0
    for i in range(where - 1, -1, -1):
        if text[i] == " ":
            start = i + 1
            break
    end = len(text)
    for i in range(where + 1, len(text)):
        if text[i] == " ":
            end = i
            break
    return start, end


def selected_text(text: str, start: int, end: int) -> str:
    """The characters from ``start`` up to, not including, ``end``."""
    if not 0 <= start <= end <= len(text):
        raise IndexError(f"invalid range {start}..{end} for text of length {len(text)}")
    return text[start:end]


def skip_word(text: str, position: int, direction: int) -> int:
    """Position reached by a word jump (as with the control key) from ``position``.

    ``direction`` is 1 to move right and -1 to move left; whitespace is skipped
    first, then a run of alphanumeric characters.
    """
    length = len(text)
    if direction not in (1, -1):
        raise ValueError("direction must be 1 (right) or -1 (left)")
    if position < 0:
        return 0
    if position > length:
        return length

    if direction == 1:
        while position < length and _is_space(text[position]):
            position += 1
            if position >= length:
                return length
        while position < length and _is_alnum(text[position]):
            position += 1
            if position >= length:
                return length
        return position

    while position > 0 and _is_space(text[position - 1]):
        position -= 1
        if position <= 0:
            return 0
    while position > 0 and _is_alnum(text[position - 1]):
        position -= 1
        if position <= 0:
            return 0
    return position


def cursor_index(text: str, measure: Measure, origin_x: int, scroll: int, x: int) -> int:
    """Index of the character under horizontal position ``x``.

    ``measure`` gives the pixel width of a string, ``origin_x`` is the left edge
    of the text area and ``scroll`` the horizontal scroll offset.
    """
    for i in range(len(text)):
        if x < origin_x + measure(text[:i + 1]) - scroll:
            return i
    return len(text)


def cursor_x(text: str, measure: Measure, origin_x: int, scroll: int, x: int) -> int:
    """Pixel column where the cursor lands when the text is clicked at ``x``."""
    for i in range(len(text)):
        if x < origin_x + measure(text[:i + 1]) - scroll:
            return origin_x + measure(text[:i]) - scroll
    return origin_x + measure(text) - scroll