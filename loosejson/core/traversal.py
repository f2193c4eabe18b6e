"""
Traversal driver: walks the token stream once and drives a writer.

The driver keeps the running nesting depth and the closing-symbol stack.
For every token it works out which closing brackets fire right after it and
hands the token, its text and that bookkeeping to the writer.
"""

from dataclasses import dataclass
from typing import Optional

from ..security.exceptions import TokenContractError, UnknownTokenKind
from ..utils.config import ConversionLimits
from .buffer import OutputBuffer
from .constants import SEPARATOR, get_closer_map
from .interfaces import Writer
from .stack import ClosingSymbolStack
from .tokenizer import LEAF_KINDS, Token


@dataclass
class TraversalState:
    """Mutable state owned by exactly one conversion call."""

    stack: ClosingSymbolStack
    output: OutputBuffer

    @classmethod
    def create(cls, limits: Optional[ConversionLimits] = None) -> "TraversalState":
        limits = limits or ConversionLimits()
        return cls(
            stack=ClosingSymbolStack(limits.max_stack_size),
            output=OutputBuffer(limits.max_output_size),
        )


def token_text(src: str, token: Token) -> str:
    """Return the source text covered by ``token``."""
    if not 0 <= token.start <= token.end <= len(src):
        raise TokenContractError(
            f"token range [{token.start}, {token.end}) outside source of length {len(src)}"
        )
    return src[token.start : token.end]


def _drain_closers(stack: ClosingSymbolStack, closers: list[str]) -> int:
    """Pop closers until a separator or the bottom of the stack.

    Returns the number of containers closed.
    """
    closed = 0
    while True:
        symbol = stack.pop()
        if symbol is None or symbol == SEPARATOR:
            return closed
        closers.append(symbol)
        closed += 1


def iterate(
    src: str,
    tokens: list[Token],
    writer: Writer,
    state: TraversalState,
    max_roots: Optional[int] = None,
) -> int:
    """
    Render ``tokens`` through ``writer`` into ``state.output``.

    Root documents are written one after another without a separator, so
    two adjacent bare values come out joined.

    Args:
        src: Text the tokens were produced from
        tokens: Token stream in document order
        writer: Writer receiving every token
        state: Stack and output buffer for this call
        max_roots: Stop before the root document after this many, or None
            to render every root document

    Returns:
        Index of the root token of the last rendered document, or -1 if
        there were no tokens
    """
    if max_roots is not None and max_roots < 1:
        raise ValueError("max_roots must be at least 1")

    closer_map = get_closer_map()
    stack = state.stack
    depth = 0
    roots = 0
    last_root = -1

    for index, token in enumerate(tokens):
        if depth == 0:
            if max_roots is not None and roots >= max_roots:
                break
            roots += 1
            last_root = index

        text = token_text(src, token)
        next_depth = depth
        closers: list[str] = []

        if token.is_container:
            stack.push(closer_map[token.kind])
            next_depth += 1
            for _ in range(token.size - 1):
                stack.push(SEPARATOR)
        elif token.kind not in LEAF_KINDS:
            raise UnknownTokenKind(token.kind)

        # Values, including empty containers, may close enclosing containers.
        if token.size == 0:
            next_depth -= _drain_closers(stack, closers)

        writer.write(state.output, token, text, depth, next_depth, closers)
        depth = next_depth

    return last_root
