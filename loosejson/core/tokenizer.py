"""
Tokenizer for loosejson - turns relaxed JSON text into a flat token stream.

The stream is depth-implicit: tokens appear in document order and only the
``size`` field links a token to its children. Relaxations over strict JSON:

- anything that is not a bracket, separator or double-quoted string is read
  as a bare PRIMITIVE, which is how unquoted keys and values get through;
- a primitive that starts with a single quote runs to the matching quote,
  so single-quoted strings may contain spaces, commas and colons;
- several root documents may follow each other in the same text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import regex  # type: ignore[import-untyped]

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    IncompleteDocument,
    MalformedInput,
    Position,
    TokenCapacityExceeded,
)
from ..utils.config import DEFAULT_MAX_TOKENS
from .constants import HEX_DIGITS, STRING_ESCAPES, WHITESPACE

_PRIMITIVE_DELIMITER = regex.compile(r"[\t\r\n ,:\]}]")
_STRING_SPECIAL = regex.compile(r'["\\]')
_SINGLE_QUOTED_TAIL = regex.compile(r"(?:[^'\\]|\\.)*'", regex.DOTALL)
_CONTROL_CHAR = regex.compile(r"\p{Cc}")


class TokenKind(Enum):
    """Token kinds produced by the tokenizer."""

    UNDEFINED = "UNDEFINED"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STRING = "STRING"
    PRIMITIVE = "PRIMITIVE"


CONTAINER_KINDS = frozenset((TokenKind.OBJECT, TokenKind.ARRAY))
LEAF_KINDS = frozenset((TokenKind.UNDEFINED, TokenKind.STRING, TokenKind.PRIMITIVE))


@dataclass
class Token:
    """
    One classified syntactic unit with a range into the source text.

    ``size`` means two different things. For OBJECT and ARRAY tokens it is
    the number of immediate children (keys of an object, elements of an
    array). For leaf tokens it is a key flag: nonzero means the token is an
    object key and a value follows it, zero means the token is a value. A
    leaf with a nonzero size never has children of its own.

    STRING tokens span the text between the double quotes. Container tokens
    end one past their closing bracket.
    """

    kind: TokenKind
    start: int = -1
    end: int = -1
    size: int = 0

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    @property
    def is_key(self) -> bool:
        """True for a leaf followed by a value."""
        return self.kind not in CONTAINER_KINDS and self.size != 0

    @property
    def is_open(self) -> bool:
        return self.start != -1 and self.end == -1


class Tokenizer:
    """Single-pass tokenizer for relaxed JSON text.

    With ``final=False`` the text is treated as a prefix of a longer input:
    a primitive that runs into the end of the text may still grow, so it is
    reported as incomplete instead of being accepted.
    """

    def __init__(
        self, text: str, max_tokens: int = DEFAULT_MAX_TOKENS, final: bool = True
    ) -> None:
        self.text = text
        self.text_length = len(text)
        self.max_tokens = max_tokens
        self.final = final
        self.pos = 0
        self.tokens: list[Token] = []
        # Index of the token the next token attaches to, -1 at root level.
        self.toksuper = -1
        # Most recent child attached to each token, by token index.
        self._last_child: dict[int, int] = {}
        self._reporter: Optional[ErrorReporter] = None

    @property
    def reporter(self) -> ErrorReporter:
        if self._reporter is None:
            self._reporter = ErrorReporter(self.text)
        return self._reporter

    def current_position(self) -> Position:
        """Get current position in the text."""
        return self.reporter.position_at(self.pos)

    def tokenize(self) -> list[Token]:
        """Tokenize the whole text and return the token list."""
        text = self.text

        while self.pos < self.text_length:
            char = text[self.pos]

            if char in "{[":
                self._open_container(char)
            elif char in "}]":
                self._close_container(char)
            elif char == '"':
                self._read_string()
                self._attach_to_super()
            elif char == ":":
                self.toksuper = len(self.tokens) - 1
            elif char == ",":
                self._return_to_container()
            elif char not in WHITESPACE:
                self._read_primitive()
                self._attach_to_super()

            self.pos += 1

        for token in reversed(self.tokens):
            if token.is_open:
                opener = "{" if token.kind is TokenKind.OBJECT else "["
                raise self.reporter.create_parse_error(
                    f"Unclosed '{opener}'",
                    token.start,
                    ErrorSuggestionEngine.suggest_for_unclosed(opener),
                    IncompleteDocument,
                )

        return self.tokens

    def _allocate(self, kind: TokenKind, start: int, end: int = -1) -> Token:
        if len(self.tokens) >= self.max_tokens:
            raise self.reporter.create_security_error(
                f"Token count exceeds limit {self.max_tokens}",
                start,
                TokenCapacityExceeded,
            )
        token = Token(kind, start, end)
        self.tokens.append(token)
        return token

    def _attach_to_super(self) -> None:
        if self.toksuper == -1:
            return
        parent = self.tokens[self.toksuper]
        if not parent.is_container and parent.size != 0:
            start = self.tokens[-1].start
            raise self.reporter.create_parse_error(
                "Expected ',' or closing bracket before this value",
                start,
                ["Separate object members with ','"],
                MalformedInput,
            )
        parent.size += 1
        self._last_child[self.toksuper] = len(self.tokens) - 1

    def _check_member_has_value(self, container: int) -> None:
        """Reject an object whose latest key never received a value."""
        if self.tokens[container].kind is not TokenKind.OBJECT:
            return
        child = self._last_child.get(container)
        if child is None:
            return
        key = self.tokens[child]
        if not key.is_container and key.size == 0:
            raise self.reporter.create_parse_error(
                "Missing value for object key",
                key.start,
                ["Follow every key with ':' and a value"],
                MalformedInput,
            )

    def _open_container(self, char: str) -> None:
        kind = TokenKind.OBJECT if char == "{" else TokenKind.ARRAY
        self._allocate(kind, self.pos)
        self._attach_to_super()
        self.toksuper = len(self.tokens) - 1

    def _close_container(self, char: str) -> None:
        kind = TokenKind.OBJECT if char == "}" else TokenKind.ARRAY
        tokens = self.tokens

        for index in range(len(tokens) - 1, -1, -1):
            token = tokens[index]
            if token.is_open:
                if token.kind is not kind:
                    expected = "}" if token.kind is TokenKind.OBJECT else "]"
                    raise self.reporter.create_parse_error(
                        f"Mismatched '{char}'",
                        self.pos,
                        ErrorSuggestionEngine.suggest_for_mismatch(expected, char),
                        MalformedInput,
                    )
                self._check_member_has_value(index)
                token.end = self.pos + 1
                self.toksuper = -1
                break
        else:
            raise self.reporter.create_parse_error(
                f"Unexpected '{char}' without matching opening bracket",
                self.pos,
                error_class=MalformedInput,
            )

        for parent in range(index - 1, -1, -1):
            if tokens[parent].is_open:
                self.toksuper = parent
                break

    def _return_to_container(self) -> None:
        if self.toksuper == -1:
            return
        if not self.tokens[self.toksuper].is_container:
            for index in range(len(self.tokens) - 1, -1, -1):
                token = self.tokens[index]
                if token.is_container and token.is_open:
                    self.toksuper = index
                    break
        self._check_member_has_value(self.toksuper)

    def _read_string(self) -> None:
        text = self.text
        start = self.pos
        pos = start + 1

        while True:
            match = _STRING_SPECIAL.search(text, pos)
            if match is None:
                break
            pos = match.start()

            if text[pos] == '"':
                self._allocate(TokenKind.STRING, start + 1, pos)
                self.pos = pos
                return

            if pos + 1 >= self.text_length:
                break
            escape = text[pos + 1]
            if escape in STRING_ESCAPES:
                pos += 2
            elif escape == "u":
                digits = text[pos + 2 : pos + 6]
                for offset, digit in enumerate(digits):
                    if digit not in HEX_DIGITS:
                        raise self.reporter.create_parse_error(
                            f"Invalid unicode escape digit {digit!r}",
                            pos + 2 + offset,
                            error_class=MalformedInput,
                        )
                if len(digits) < 4:
                    break
                pos += 6
            else:
                raise self.reporter.create_parse_error(
                    f"Invalid escape sequence '\\{escape}' in string",
                    pos,
                    ErrorSuggestionEngine.suggest_for_invalid_escape(escape),
                    MalformedInput,
                )

        raise self.reporter.create_parse_error(
            "Unterminated string",
            start,
            ErrorSuggestionEngine.suggest_for_unclosed('"'),
            IncompleteDocument,
        )

    def _read_primitive(self) -> None:
        text = self.text
        start = self.pos
        scan_from = start

        if text[start] == "'":
            quoted = _SINGLE_QUOTED_TAIL.match(text, start + 1)
            if quoted is None:
                raise self.reporter.create_parse_error(
                    "Unterminated single-quoted string",
                    start,
                    ErrorSuggestionEngine.suggest_for_unclosed("'"),
                    IncompleteDocument,
                )
            scan_from = quoted.end()

        delimiter = _PRIMITIVE_DELIMITER.search(text, scan_from)
        if delimiter is not None:
            end = delimiter.start()
        elif self.final:
            end = self.text_length
        else:
            raise self.reporter.create_parse_error(
                "Value runs into the end of the input", start,
                error_class=IncompleteDocument,
            )

        control = _CONTROL_CHAR.search(text, start, end)
        if control is not None:
            raise self.reporter.create_parse_error(
                f"Invalid character {control.group()!r} in value",
                control.start(),
                error_class=MalformedInput,
            )

        self._allocate(TokenKind.PRIMITIVE, start, end)
        self.pos = end - 1


def tokenize(
    text: str, max_tokens: int = DEFAULT_MAX_TOKENS, final: bool = True
) -> list[Token]:
    """Tokenize ``text`` into at most ``max_tokens`` tokens."""
    return Tokenizer(text, max_tokens, final).tokenize()
