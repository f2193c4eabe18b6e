"""
loosejson errors and limit validation.
"""

from .exceptions import (
    ErrorContext, ErrorReporter, ErrorSuggestionEngine, IncompleteDocument,
    InputTooLarge, LooseJSONError, MalformedInput, OutputFull, ParseError,
    Position, SecurityError, StackOverflow, TokenCapacityExceeded,
    TokenContractError, UnknownTokenKind,
)
from .limits import LimitValidator

__all__ = [
    'ErrorContext', 'ErrorReporter', 'ErrorSuggestionEngine',
    'IncompleteDocument', 'InputTooLarge', 'LooseJSONError', 'MalformedInput',
    'OutputFull', 'ParseError', 'Position', 'SecurityError', 'StackOverflow',
    'TokenCapacityExceeded', 'TokenContractError', 'UnknownTokenKind',
    'LimitValidator',
]
