"""Cursor-based text buffer."""

from __future__ import annotations

from collections import deque
from typing import Deque, List

__all__ = ["CURSOR", "TextEditor"]

CURSOR = "|"


class TextEditor:
    """Gap-style buffer: characters left of the cursor and characters right of it.

    ``_left`` ends at the cursor; ``_right`` starts at it. Moving the cursor
    transfers one character across the boundary, so no character is ever in
    both sequences.
    """

    def __init__(self, text: str = "") -> None:
        self._left: List[str] = list(text)
        self._right: Deque[str] = deque()

    @property
    def cursor(self) -> int:
        return len(self._left)

    @property
    def text(self) -> str:
        return "".join(self._left) + "".join(self._right)

    def insert_char(self, c: str) -> None:
        """Insert ``c`` at the cursor, leaving the cursor after it."""

        self._left.extend(c)

    def delete_char(self) -> None:
        """Remove the character before the cursor, if any."""

        if self._left:
            self._left.pop()

    def move_left(self) -> None:
        if self._left:
            self._right.appendleft(self._left.pop())

    def move_right(self) -> None:
        if self._right:
            self._left.append(self._right.popleft())

    def get_text_with_cursor(self) -> str:
        return "".join(self._left) + CURSOR + "".join(self._right)

    def __len__(self) -> int:
        return len(self._left) + len(self._right)
