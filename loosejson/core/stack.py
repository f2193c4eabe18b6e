"""
Closing-symbol stack for the traversal driver.

Each open container owes one closing bracket plus one separator for every
boundary between its children. Pushing the closer first and the separators
after it makes pops come out in document order as siblings finish.
"""

from typing import Optional

from ..security.exceptions import StackOverflow
from ..utils.config import DEFAULT_MAX_STACK_SIZE
from .constants import STACK_SYMBOLS


class ClosingSymbolStack:
    """Bounded LIFO of pending ``}``, ``]`` and ``,`` symbols."""

    def __init__(self, capacity: int = DEFAULT_MAX_STACK_SIZE):
        if capacity <= 0:
            raise ValueError("stack capacity must be positive")
        self.capacity = capacity
        self._symbols: list[str] = []

    def __len__(self) -> int:
        return len(self._symbols)

    def push(self, symbol: str) -> None:
        """Push a pending symbol; ``None`` is reserved to mean empty."""
        if symbol is None or symbol not in STACK_SYMBOLS:
            raise ValueError(f"cannot push {symbol!r} onto the closing-symbol stack")
        if len(self._symbols) >= self.capacity:
            raise StackOverflow(
                f"Closing-symbol stack exceeds capacity {self.capacity}"
            )
        self._symbols.append(symbol)

    def pop(self) -> Optional[str]:
        """Pop the most recent symbol, or ``None`` when the stack is empty."""
        if not self._symbols:
            return None
        return self._symbols.pop()
