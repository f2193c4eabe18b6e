"""
loosejson - normalizes relaxed, hand-typed JSON.

loosejson rewrites the JSON people type at a prompt (unquoted keys,
single-quoted strings, bare values, several documents on one line) into
strict JSON, and renders strict JSON back as indented text.

Quick Start:
    import loosejson

    loosejson.relaxed_to_strict("{ a: 'b' }").text      # '{"a":"b"}'

    # Only the first of several documents, and where it ends
    result = loosejson.relaxed_to_strict("{ a: 1 } { $set: { b: 2 } }", first_only=True)
    rest = "{ a: 1 } { $set: { b: 2 } }"[result.consumed:]

    # Every document in turn
    list(loosejson.iter_documents("{ a: 1 }{ b: 2 }"))  # ['{"a":1}', '{"b":2}']

    print(loosejson.human_readable('{"a":{"b":[1,2]}}').text)
"""

from .core.engine import ConversionResult, convert, human_readable, iter_documents, relaxed_to_strict
from .core.writers import WriterKind
from .security.exceptions import (
    IncompleteDocument, InputTooLarge, LooseJSONError, MalformedInput,
    OutputFull, ParseError, SecurityError, StackOverflow,
    TokenCapacityExceeded, TokenContractError, UnknownTokenKind,
)
from .utils.config import ConversionLimits, ConvertConfig, FormatConfig

__version__ = "0.1.0"
__author__ = "loosejson contributors"

__all__ = [
    # Conversion functions
    "relaxed_to_strict", "human_readable", "iter_documents", "convert",
    "ConversionResult", "WriterKind",
    # Configuration classes
    "ConvertConfig", "ConversionLimits", "FormatConfig",
    # Exception classes
    "LooseJSONError", "ParseError", "MalformedInput", "IncompleteDocument",
    "SecurityError", "TokenCapacityExceeded", "StackOverflow", "InputTooLarge",
    "OutputFull", "TokenContractError", "UnknownTokenKind",
]
