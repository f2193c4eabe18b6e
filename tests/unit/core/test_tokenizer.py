"""
Test cases for the loosejson tokenizer.

Tests focus on the token contract the traversal driver relies on: token
kinds, ranges, child counts and the key flag on leaf tokens.
"""

import unittest

from loosejson.core.tokenizer import Token, TokenKind, Tokenizer, tokenize
from loosejson.security.exceptions import (
    IncompleteDocument, MalformedInput, TokenCapacityExceeded,
)


class TestTokenKinds(unittest.TestCase):
    """Test token classification."""

    def _shape(self, text):
        return [(t.kind, text[t.start:t.end], t.size) for t in tokenize(text)]

    def test_unquoted_key_and_value(self):
        """Bare words become primitives; the key carries size 1."""
        self.assertEqual(
            self._shape("{ a: b }"),
            [
                (TokenKind.OBJECT, "{ a: b }", 1),
                (TokenKind.PRIMITIVE, "a", 1),
                (TokenKind.PRIMITIVE, "b", 0),
            ],
        )

    def test_double_quoted_string_excludes_quotes(self):
        """String tokens cover the text between the quotes."""
        tokens = tokenize('{"key": "value"}')
        self.assertEqual(tokens[1].kind, TokenKind.STRING)
        self.assertEqual((tokens[1].start, tokens[1].end), (2, 5))
        self.assertEqual(tokens[2].kind, TokenKind.STRING)
        self.assertEqual('{"key": "value"}'[tokens[2].start:tokens[2].end], "value")

    def test_single_quoted_value_is_primitive_with_quotes(self):
        """Single-quoted strings are primitives that keep their quotes."""
        self.assertEqual(
            self._shape("{ a: 'b' }")[2],
            (TokenKind.PRIMITIVE, "'b'", 0),
        )

    def test_single_quoted_value_may_contain_delimiters(self):
        """Spaces, commas and colons inside single quotes stay in one token."""
        shape = self._shape("{ a: 'x, y: z' }")
        self.assertEqual(len(shape), 3)
        self.assertEqual(shape[2], (TokenKind.PRIMITIVE, "'x, y: z'", 0))

    def test_array_size_counts_elements(self):
        """Array size is the element count; elements are values."""
        shape = self._shape("[1, 2, 3]")
        self.assertEqual(shape[0], (TokenKind.ARRAY, "[1, 2, 3]", 3))
        self.assertEqual([s[2] for s in shape[1:]], [0, 0, 0])

    def test_object_size_counts_keys(self):
        """Object size is the key count, not keys plus values."""
        tokens = tokenize("{a: 1, b: 2, c: 3}")
        self.assertEqual(tokens[0].size, 3)
        self.assertEqual([t.is_key for t in tokens[1:]], [True, False] * 3)

    def test_nested_container_as_value(self):
        """A key whose value is a container still has size 1."""
        shape = self._shape("{ a: { c: d } }")
        self.assertEqual(
            [(kind, size) for kind, _, size in shape],
            [
                (TokenKind.OBJECT, 1),
                (TokenKind.PRIMITIVE, 1),
                (TokenKind.OBJECT, 1),
                (TokenKind.PRIMITIVE, 1),
                (TokenKind.PRIMITIVE, 0),
            ],
        )
        self.assertEqual(shape[2][1], "{ c: d }")

    def test_concatenated_roots(self):
        """Several root documents tokenize back to back."""
        tokens = tokenize("{ a: b }{ c: d }")
        roots = [t for t in tokens if t.kind is TokenKind.OBJECT]
        self.assertEqual([(t.start, t.end) for t in roots], [(0, 8), (8, 16)])

    def test_bare_call_value_stays_whole(self):
        """Driver-specific literals such as ObjectId(...) are one primitive."""
        text = '{ _id: ObjectId("5a") }'
        shape = self._shape(text)
        self.assertEqual(shape[2], (TokenKind.PRIMITIVE, 'ObjectId("5a")', 0))

    def test_whitespace_only(self):
        """Whitespace produces no tokens."""
        self.assertEqual(tokenize("  \t\n "), [])
        self.assertEqual(tokenize(""), [])

    def test_unicode_key(self):
        """Non-ASCII characters are allowed in bare words."""
        shape = self._shape("{ 한: '＄' }")
        self.assertEqual(shape[1], (TokenKind.PRIMITIVE, "한", 1))
        self.assertEqual(shape[2], (TokenKind.PRIMITIVE, "'＄'", 0))


class TestTokenProperties(unittest.TestCase):
    """Test the Token helper properties."""

    def test_container_is_never_a_key(self):
        token = Token(TokenKind.OBJECT, 0, 2, size=3)
        self.assertTrue(token.is_container)
        self.assertFalse(token.is_key)

    def test_leaf_key_flag(self):
        self.assertTrue(Token(TokenKind.STRING, 1, 2, size=1).is_key)
        self.assertFalse(Token(TokenKind.STRING, 1, 2, size=0).is_key)

    def test_open_token(self):
        self.assertTrue(Token(TokenKind.ARRAY, 0).is_open)
        self.assertFalse(Token(TokenKind.ARRAY, 0, 2).is_open)


class TestTokenizerErrors(unittest.TestCase):
    """Test tokenizer error classification."""

    def test_unclosed_object(self):
        with self.assertRaises(IncompleteDocument) as cm:
            tokenize("{ a: { b: c }")
        self.assertIn("Unclosed '{'", str(cm.exception))
        self.assertEqual(cm.exception.position.column, 1)

    def test_unterminated_string(self):
        with self.assertRaises(IncompleteDocument):
            tokenize('{"a": "bc')

    def test_unterminated_single_quote(self):
        with self.assertRaises(IncompleteDocument):
            tokenize("{ a: 'bc }")

    def test_invalid_escape(self):
        with self.assertRaises(MalformedInput) as cm:
            tokenize('{"a": "b\\qc"}')
        self.assertIn("Invalid escape sequence", cm.exception.message)
        self.assertTrue(cm.exception.suggestions)

    def test_valid_escapes(self):
        text = '["\\"\\\\\\/\\b\\f\\n\\r\\t\\u00e9"]'
        tokens = tokenize(text)
        self.assertEqual(len(tokens), 2)
        self.assertEqual(tokens[1].kind, TokenKind.STRING)

    def test_invalid_unicode_escape(self):
        with self.assertRaises(MalformedInput):
            tokenize('["\\u12g4"]')

    def test_truncated_unicode_escape(self):
        with self.assertRaises(IncompleteDocument):
            tokenize('["\\u12')

    def test_mismatched_closer(self):
        with self.assertRaises(MalformedInput) as cm:
            tokenize("{ a: [1, 2 }")
        self.assertIn("Mismatched '}'", str(cm.exception))

    def test_stray_closer(self):
        with self.assertRaises(MalformedInput):
            tokenize("]")

    def test_control_character_in_value(self):
        with self.assertRaises(MalformedInput):
            tokenize("{ a: b\x01c }")

    def test_token_capacity(self):
        with self.assertRaises(TokenCapacityExceeded):
            tokenize("[1, 2, 3]", max_tokens=3)
        self.assertEqual(len(tokenize("[1, 2, 3]", max_tokens=4)), 4)

    def test_error_position_on_second_line(self):
        with self.assertRaises(MalformedInput) as cm:
            tokenize('{\n  "a": "\\x"\n}')
        self.assertEqual(cm.exception.position.line, 2)
        self.assertIn("Context:", str(cm.exception))


class TestObjectStructure(unittest.TestCase):
    """Test rejection of object members that cannot form key/value pairs."""

    def test_key_without_value_before_close(self):
        for text in ("{a:}", "{a}", "{ a: 1, b }", '{"a":}'):
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput) as cm:
                    tokenize(text)
                self.assertIn("Missing value for object key", str(cm.exception))

    def test_key_without_value_before_comma(self):
        with self.assertRaises(MalformedInput):
            tokenize("{ a, b: 1 }")

    def test_missing_comma_between_members(self):
        for text in ("{a:1 b:2}", "{ a: 1 { } }", "{ a: 'x' 'y' }"):
            with self.subTest(text=text):
                with self.assertRaises(MalformedInput) as cm:
                    tokenize(text)
                self.assertIn("Expected ','", str(cm.exception))

    def test_error_points_at_offending_token(self):
        with self.assertRaises(MalformedInput) as cm:
            tokenize("{a:1 b:2}")
        self.assertEqual(cm.exception.position.column, 6)

        with self.assertRaises(MalformedInput) as cm:
            tokenize("{ a: 1, b }")
        self.assertEqual(cm.exception.position.column, 9)

    def test_well_formed_members_still_accepted(self):
        for text in ("{}", "{ a: {} }", "{ a: [], b: { c: d } }", "[a, b]"):
            with self.subTest(text=text):
                self.assertTrue(tokenize(text))


class TestPartialInput(unittest.TestCase):
    """Test the final flag used while searching for the first document."""

    def test_trailing_value_is_complete_when_final(self):
        self.assertEqual(len(tokenize("abc")), 1)

    def test_trailing_value_is_incomplete_when_not_final(self):
        with self.assertRaises(IncompleteDocument):
            tokenize("abc", final=False)

    def test_delimited_value_is_complete_when_not_final(self):
        tokens = Tokenizer("abc ", final=False).tokenize()
        self.assertEqual([(t.start, t.end) for t in tokens], [(0, 3)])

    def test_closed_object_is_complete_when_not_final(self):
        self.assertEqual(len(tokenize("{ a: b }", final=False)), 3)


if __name__ == "__main__":
    unittest.main()
