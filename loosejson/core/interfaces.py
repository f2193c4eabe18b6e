"""
Core interfaces for the conversion engine.

The traversal driver knows nothing about output formatting; it hands every
token to a ``Writer`` together with the depth bookkeeping it computed.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .buffer import OutputBuffer
from .tokenizer import Token


class Writer(ABC):
    """Renders one token at a time into an output buffer."""

    @abstractmethod
    def write(
        self,
        output: OutputBuffer,
        token: Token,
        text: str,
        depth: int,
        next_depth: int,
        closers: Sequence[str],
    ) -> None:
        """
        Append the rendering of ``token`` to ``output``.

        Args:
            output: Buffer receiving the rendered text
            token: Token being rendered
            text: Source text covered by the token
            depth: Nesting level before the token
            next_depth: Nesting level after the token and its closers
            closers: Closing brackets that fire right after this token,
                innermost first
        """

    @staticmethod
    def needs_separator(token: Token, depth: int, next_depth: int) -> bool:
        """Whether a sibling follows this token at the same level."""
        return next_depth != 0 and depth >= next_depth and not token.is_key
