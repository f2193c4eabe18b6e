"""
Exception types and error reporting for loosejson.

Every failure the conversion engine can report is a subclass of
``LooseJSONError``. Violations of the token contract are programming errors
and derive from ``RuntimeError`` instead, so that callers catching conversion
failures never hide them.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass
class ErrorContext:
    """Snippet of the source surrounding an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class LooseJSONError(Exception):
    """Base class for all conversion failures."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts.append(
                f"at line {self.position.line}, column {self.position.column}"
            )

        result = " ".join(parts)

        if self.context:
            result += "\n\nContext:\n"
            result += f"  {self.context.line_text}\n"
            result += f"  {self.context.column_indicator}"

        if self.suggestions:
            result += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                result += f"\n  - {suggestion}"

        return result


class ParseError(LooseJSONError):
    """The input could not be tokenized."""


class MalformedInput(ParseError):
    """Invalid character, invalid escape or mismatched bracket in the input."""


class IncompleteDocument(ParseError):
    """The input ends before every open container or string is closed."""


class SecurityError(LooseJSONError):
    """A configured resource limit was exceeded."""


class TokenCapacityExceeded(SecurityError):
    """The input needs more tokens than the configured maximum."""


class StackOverflow(SecurityError):
    """Nesting exceeded the capacity of the closing-symbol stack."""


class InputTooLarge(SecurityError):
    """The input is longer than the configured maximum document size."""


class OutputFull(LooseJSONError):
    """The rendered output does not fit in the output buffer."""

    def __init__(self, message: str, capacity: int, length: int, requested: int):
        self.capacity = capacity
        self.length = length
        self.requested = requested
        super().__init__(message)


class TokenContractError(RuntimeError):
    """A token violates the tokenizer contract (bad range or shape)."""


class UnknownTokenKind(TokenContractError):
    """A token carries a kind outside the closed set of token kinds."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"unknown json token kind: {kind!r}")


class ErrorSuggestionEngine:
    """Generates hints for common relaxed-JSON mistakes."""

    @staticmethod
    def suggest_for_invalid_escape(escape: str) -> list[str]:
        """Hints for an unsupported escape sequence inside a string."""
        return [
            f"'\\{escape}' is not a JSON escape; use one of \\\" \\\\ \\/ "
            "\\b \\f \\n \\r \\t or \\uXXXX",
            "Escape a literal backslash as \\\\",
        ]

    @staticmethod
    def suggest_for_unclosed(opener: str) -> list[str]:
        """Hints for a container or string that never closes."""
        closer = {"{": "}", "[": "]", '"': '"', "'": "'"}.get(opener, opener)
        return [f"Add the missing '{closer}'"]

    @staticmethod
    def suggest_for_mismatch(expected: str, found: str) -> list[str]:
        """Hints for a closing bracket that does not match its opener."""
        return [f"Expected '{expected}' but found '{found}'"]


class ErrorReporter:
    """Builds positioned errors with source context from character offsets."""

    def __init__(self, text: str, context_size: int = 20):
        self.text = text
        self.lines = text.split("\n")
        self.context_size = context_size

    def position_at(self, offset: int) -> Position:
        """Translate a character offset into a line/column position."""
        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1)

    def create_context(self, position: Position) -> ErrorContext:
        """Create the context snippet for ``position``."""
        line_index = position.line - 1
        if line_index < len(self.lines):
            line_text = self.lines[line_index]
        else:
            line_text = ""

        col_index = position.column - 1
        before_start = max(0, col_index - self.context_size)
        context_before = line_text[before_start:col_index]
        context_after = line_text[col_index + 1 : col_index + 1 + self.context_size]
        error_char = line_text[col_index] if col_index < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * col_index + "^",
        )

    def create_parse_error(
        self,
        message: str,
        offset: int,
        suggestions: Optional[list[str]] = None,
        error_class: type[ParseError] = ParseError,
    ) -> ParseError:
        """Create a ``ParseError`` (or subclass) located at ``offset``."""
        position = self.position_at(offset)
        context = self.create_context(position)
        return error_class(message, position, context, suggestions)

    def create_security_error(
        self,
        message: str,
        offset: Optional[int] = None,
        error_class: type[SecurityError] = SecurityError,
    ) -> SecurityError:
        """Create a ``SecurityError`` (or subclass), optionally positioned."""
        if offset is None:
            return error_class(message)
        return error_class(message, self.position_at(offset))
