"""A simulated 4x6 matrix keypad."""

from __future__ import annotations

from collections import deque
from typing import Iterable

LAYOUT: tuple[str, ...] = (
    " 789*/",
    "C456-^",
    ">123+G",
    "<0.=+M",
)
ROWS = len(LAYOUT)
COLUMNS = len(LAYOUT[0])
KEYS = frozenset("".join(LAYOUT))


def key_at(row: int, col: int) -> str:
    """Return the key at a 0-based matrix position."""
    if not (0 <= row < ROWS and 0 <= col < COLUMNS):
        raise ValueError(f"no key at row {row}, column {col}")
    return LAYOUT[row][col]


class Keypad:
    """Keypad fed with key presses.

    Presses queued with ``press`` come first; when the queue is empty,
    ``wait_key`` takes the next string of keys from ``source``.
    """

    def __init__(self, source: Iterable[str] | None = None) -> None:
        self._queue: deque[str] = deque()
        self._source = iter(source if source is not None else ())

    def press(self, *args: str) -> None:
        """Queue each character of each argument as a key press."""
        keys = "".join(args)
        unknown = sorted(set(keys) - KEYS)
        if unknown:
            raise ValueError(f"not a keypad key: {''.join(unknown)!r}")
        self._queue.extend(keys)

    def get_pressed(self) -> str | None:
        """Return the next queued key, or None when nothing is pressed."""
        return self._queue.popleft() if self._queue else None

    def wait_key(self) -> str:
        """Return the next key, raising EOFError once no more keys can come."""
        while not self._queue:
            try:
                chunk = next(self._source)
            except StopIteration:
                raise EOFError("no more key presses") from None
            self.press(chunk)
        return self._queue.popleft()