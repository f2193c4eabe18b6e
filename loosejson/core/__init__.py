"""
loosejson Core Conversion Engine.

This module provides tokenization, traversal and the two writers.
"""

from .buffer import OutputBuffer
from .engine import ConversionResult, convert, human_readable, iter_documents, relaxed_to_strict
from .stack import ClosingSymbolStack
from .tokenizer import Position, Token, TokenKind, Tokenizer, tokenize
from .traversal import TraversalState, iterate
from .writers import HumanReadableWriter, StrictWriter, WriterKind

__all__ = [
    'ConversionResult', 'convert', 'human_readable', 'iter_documents',
    'relaxed_to_strict',
    'Position', 'Token', 'TokenKind', 'Tokenizer', 'tokenize',
    'ClosingSymbolStack', 'OutputBuffer', 'TraversalState', 'iterate',
    'HumanReadableWriter', 'StrictWriter', 'WriterKind',
]
