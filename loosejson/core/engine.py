"""
Conversion entry points for loosejson.

``relaxed_to_strict`` rewrites relaxed JSON into strict JSON and
``human_readable`` renders JSON as indented text. Both build a fresh
stack and output buffer per call, so concurrent calls never share state.
"""

import logging
from collections.abc import Iterator
from typing import NamedTuple, Optional

from ..security.exceptions import IncompleteDocument
from ..security.limits import LimitValidator
from ..utils.config import DEFAULT_MAX_TOKENS, ConvertConfig
from .tokenizer import Token, TokenKind, tokenize
from .traversal import TraversalState, iterate
from .writers import WriterKind, create_writer

logger = logging.getLogger(__name__)


class ConversionResult(NamedTuple):
    """Rendered text plus how much of the input it covers.

    ``end`` is the offset just past the last rendered document, including
    the closing quote of a string document. ``consumed`` is one past the end
    of the last root token, counting the position after the document as
    read, and 0 when the input held no document at all. For a string
    document the token stops before its closing quote, so ``consumed``
    equals ``end``.

    Offsets count characters of the ``str`` input, not encoded bytes:
    ``{ 한: '＄' }`` consumes 11 characters although its UTF-8 form is
    14 bytes long.
    """

    text: str
    consumed: int
    end: int


def first_document_tokens(src: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> list[Token]:
    """
    Tokenize the shortest prefix of ``src`` that holds one root document.

    Prefixes grow one character at a time until the tokenizer stops
    reporting an incomplete document and produces at least one token. Text
    after the first document is never looked at, so it may be malformed.

    Raises:
        IncompleteDocument: if even the full text does not complete a document
    """
    length = len(src)

    for prefix_length in range(length + 1):
        final = prefix_length == length
        try:
            tokens = tokenize(src[:prefix_length], max_tokens, final=final)
        except IncompleteDocument:
            if final:
                raise
            continue

        if tokens or final:
            logger.debug(
                f"First document found after {prefix_length + 1} attempts: "
                f"{len(tokens)} tokens in {prefix_length} characters"
            )
            return tokens

    return []


def convert(
    src: str,
    kind: WriterKind = WriterKind.STRICT,
    *,
    first_only: bool = False,
    max_roots: Optional[int] = None,
    config: Optional[ConvertConfig] = None,
) -> ConversionResult:
    """
    Render the root documents in ``src`` with the writer for ``kind``.

    Args:
        src: Input text
        kind: Output format
        first_only: Render only the first root document, ignoring whatever
            follows it in ``src``
        max_roots: Render at most this many root documents
        config: Limits and formatting options

    Returns:
        ConversionResult with the rendered text and the consumed length

    Raises:
        ParseError: if the input cannot be tokenized
        SecurityError: if a configured limit is exceeded
        OutputFull: if the output does not fit in the configured capacity
    """
    if first_only and max_roots not in (None, 1):
        raise ValueError("first_only renders exactly one root document")

    config = config or ConvertConfig()
    limits = config.limits
    assert limits is not None

    validator = LimitValidator(limits)
    validator.validate_input_size(src)

    if first_only:
        tokens = first_document_tokens(src, validator.max_tokens)
        max_roots = 1
    else:
        tokens = tokenize(src, validator.max_tokens)

    state = TraversalState.create(limits)
    writer = create_writer(kind, config)
    last_root = iterate(src, tokens, writer, state, max_roots)

    text = state.output.getvalue()
    if last_root < 0:
        return ConversionResult(text, 0, 0)

    root = tokens[last_root]
    # String tokens stop before their closing quote.
    end = root.end + 1 if root.kind is TokenKind.STRING else root.end
    logger.debug(
        f"Rendered {len(text)} characters of {kind.value} output "
        f"from {end} characters of input"
    )
    return ConversionResult(text, root.end + 1, end)


def relaxed_to_strict(
    src: str,
    first_only: bool = False,
    max_roots: Optional[int] = None,
    config: Optional[ConvertConfig] = None,
) -> ConversionResult:
    """
    Rewrite relaxed JSON into strict JSON.

    Unquoted keys are quoted, single-quoted values are requoted with double
    quotes and bare values are copied as they are. Concatenated root
    documents are rendered back to back with nothing between them, so
    adjacent bare values merge: ``"1 2"`` renders as ``12``. Use
    ``iter_documents`` to keep such documents apart.

    Example:
        >>> relaxed_to_strict("{ a: 'b' }")
        ConversionResult(text='{"a":"b"}', consumed=11, end=10)
    """
    return convert(
        src,
        WriterKind.STRICT,
        first_only=first_only,
        max_roots=max_roots,
        config=config,
    )


def human_readable(src: str, config: Optional[ConvertConfig] = None) -> ConversionResult:
    """Render JSON with one object key per line and inline arrays."""
    return convert(src, WriterKind.HUMAN_READABLE, config=config)


def iter_documents(src: str, config: Optional[ConvertConfig] = None) -> Iterator[str]:
    """
    Yield every root document in ``src`` as strict JSON, one at a time.

    Each document is located with the same prefix search as
    ``relaxed_to_strict(first_only=True)``, so a malformed document only
    fails once the iteration reaches it.
    """
    offset = 0
    while offset < len(src):
        result = relaxed_to_strict(src[offset:], first_only=True, config=config)
        if result.consumed == 0:
            return
        yield result.text
        offset += result.end
