"""
Writers turning the token stream into text.

``StrictWriter`` produces standard JSON: keys quoted, single-quoted values
requoted, separators inserted. ``HumanReadableWriter`` indents objects one
key per line and keeps arrays on one line.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Optional

from ..security.exceptions import UnknownTokenKind
from ..utils.config import DEFAULT_INDENT_WIDTH, ConvertConfig
from .buffer import OutputBuffer
from .constants import ARRAY_CLOSER, OBJECT_CLOSER, SEPARATOR
from .interfaces import Writer
from .tokenizer import Token, TokenKind


class WriterKind(Enum):
    """Available output formats."""

    STRICT = "strict"
    HUMAN_READABLE = "human_readable"


def requote(text: str) -> str:
    """Turn a leading and a trailing single quote into double quotes."""
    if text.startswith("'"):
        text = '"' + text[1:]
    if text.endswith("'"):
        text = text[:-1] + '"'
    return text


class StrictWriter(Writer):
    """Renders tokens as strict JSON."""

    def write(
        self,
        output: OutputBuffer,
        token: Token,
        text: str,
        depth: int,
        next_depth: int,
        closers: Sequence[str],
    ) -> None:
        kind = token.kind

        if kind is TokenKind.OBJECT:
            output.append("{")
        elif kind is TokenKind.ARRAY:
            output.append("[")
        elif kind is TokenKind.UNDEFINED:
            # Keys that could not be classified get a placeholder name.
            output.append('"undefined":' if token.is_key else text)
        elif kind is TokenKind.STRING:
            output.append(f'"{text}":' if token.is_key else f'"{text}"')
        elif kind is TokenKind.PRIMITIVE:
            text = requote(text)
            if not token.is_key:
                output.append(text)
            elif text.startswith('"'):
                output.append(f"{text}:")
            else:
                output.append(f'"{text}":')
        else:
            raise UnknownTokenKind(kind)

        output.extend(closers)

        if self.needs_separator(token, depth, next_depth):
            output.append(SEPARATOR)


class HumanReadableWriter(Writer):
    """Renders tokens as indented, human-readable text.

    Keys are written bare. Every object key starts a new line indented by
    ``indent_width`` spaces per level, and closing braces line up with the
    key that opened the object. Arrays open and close inline.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH):
        self.indent_width = indent_width

    def _indent(self, level: int) -> str:
        return " " * (self.indent_width * max(level, 0))

    def write(
        self,
        output: OutputBuffer,
        token: Token,
        text: str,
        depth: int,
        next_depth: int,
        closers: Sequence[str],
    ) -> None:
        kind = token.kind

        if kind is TokenKind.OBJECT:
            output.append("{")
        elif kind is TokenKind.ARRAY:
            output.append("[")
        elif kind not in (TokenKind.STRING, TokenKind.PRIMITIVE, TokenKind.UNDEFINED):
            raise UnknownTokenKind(kind)
        elif token.is_key:
            output.append(f"\n{self._indent(next_depth)}{text}: ")
        elif kind is TokenKind.STRING:
            output.append(f'"{text}"')
        else:
            output.append(text)

        # An empty container's own closer comes first and sits one level
        # deeper than the token itself.
        level = depth + 1 if token.is_container else depth

        for position, symbol in enumerate(closers):
            if symbol == ARRAY_CLOSER or (token.is_container and position == 0):
                output.append(symbol)
            elif next_depth < depth:
                output.append(f"\n{self._indent(level - position - 1)}{OBJECT_CLOSER}")
            else:
                output.append(symbol)

        if self.needs_separator(token, depth, next_depth):
            output.append(SEPARATOR)


def create_writer(kind: WriterKind, config: Optional[ConvertConfig] = None) -> Writer:
    """Create the writer for ``kind``."""
    config = config or ConvertConfig()
    if kind is WriterKind.STRICT:
        return StrictWriter()
    if kind is WriterKind.HUMAN_READABLE:
        return HumanReadableWriter(config.indent_width)
    raise ValueError(f"Unknown writer kind: {kind!r}")
