"""
Common constants and mappings used across the loosejson engine.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenKind

# Characters accepted after a backslash inside a double-quoted string.
STRING_ESCAPES = frozenset('"/\\bfrnt')

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

WHITESPACE = frozenset(" \t\r\n")

OBJECT_CLOSER = "}"
ARRAY_CLOSER = "]"
SEPARATOR = ","

STACK_SYMBOLS = frozenset((OBJECT_CLOSER, ARRAY_CLOSER, SEPARATOR))


def get_closer_map() -> dict["TokenKind", str]:
    """Get the closing character owed by each container kind."""
    from .tokenizer import TokenKind  # pylint: disable=import-outside-toplevel

    return {
        TokenKind.OBJECT: OBJECT_CLOSER,
        TokenKind.ARRAY: ARRAY_CLOSER,
    }
