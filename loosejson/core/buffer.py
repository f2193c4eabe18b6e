"""
Bounded output buffer.

The capacity includes one slot reserved for a terminator, so at most
``capacity - 1`` characters are stored. Appends are all-or-nothing.
"""

from collections.abc import Iterable

from ..security.exceptions import OutputFull


class OutputBuffer:
    """Append-only text sink with a hard capacity."""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("output capacity must be at least 1")
        self.capacity = capacity
        self.length = 0
        self._parts: list[str] = []

    @property
    def available(self) -> int:
        """Characters that can still be appended."""
        return self.capacity - 1 - self.length

    def append(self, text: str) -> None:
        """Append ``text`` or raise ``OutputFull`` without writing anything."""
        if len(text) > self.available:
            raise OutputFull(
                f"Output full: cannot append {len(text)} characters to "
                f"{self.length} of {self.capacity - 1}",
                capacity=self.capacity,
                length=self.length,
                requested=len(text),
            )
        self._parts.append(text)
        self.length += len(text)

    def extend(self, pieces: Iterable[str]) -> None:
        for piece in pieces:
            self.append(piece)

    def getvalue(self) -> str:
        return "".join(self._parts)
