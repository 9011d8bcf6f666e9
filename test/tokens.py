"""
Tokenizer tests.

Scope
- Delimiter padding and whitespace splitting for usage patterns.
- Token kinds (open, close, pipe, ellipsis, word) and 1-based positions.
- Argv mode (no delimiters) and pre-split vectors via words().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from usagedoc import DELIMITERS, Token, TokenKind, tokenize, words


class TestTokenize(TestCase):
    """Behavioral tests for tokenize."""

    def testDelimitersBecomeStandaloneTokens(self):
        tokens = tokenize("[-v|--verbose]...")
        self.assertEqual([token.text for token in tokens], ["[", "-v", "|", "--verbose", "]", "..."])

    def testKinds(self):
        tokens = tokenize("( a | [b] ) c...", DELIMITERS)
        self.assertEqual([token.kind for token in tokens], [
            TokenKind.OPEN,
            TokenKind.WORD,
            TokenKind.PIPE,
            TokenKind.OPEN,
            TokenKind.WORD,
            TokenKind.CLOSE,
            TokenKind.CLOSE,
            TokenKind.WORD,
            TokenKind.ELLIPSIS,
        ])

    def testPositionsAreOneBased(self):
        tokens = tokenize("a  b\n c")
        self.assertEqual([token.index for token in tokens], [1, 2, 3])

    def testEmptySource(self):
        self.assertEqual(tokenize("   \n "), ())

    def testArgvModeNeverPads(self):
        tokens = tokenize("a(b --x=[1] ...", None)
        self.assertEqual([token.text for token in tokens], ["a(b", "--x=[1]", "..."])
        self.assertTrue(all(token.kind is TokenKind.WORD for token in tokens))

    def testTokenIsItsText(self):
        token = Token(TokenKind.WORD, "--verbose", 1)
        self.assertEqual(str(token), "--verbose")
        self.assertTrue(token.word)
        self.assertFalse(Token(TokenKind.PIPE, "|").word)

    def testRejectsNonString(self):
        with self.assertRaises(TypeError):
            tokenize(["a", "b"])


class TestWords(TestCase):
    """Behavioral tests for words (pre-split argument vectors)."""

    def testElementsAreNotResplit(self):
        tokens = words(["hello world", "(x)"])
        self.assertEqual([token.text for token in tokens], ["hello world", "(x)"])
        self.assertEqual([token.index for token in tokens], [1, 2])

    def testRejectsString(self):
        with self.assertRaises(TypeError):
            words("a b")

    def testRejectsNonStringElements(self):
        with self.assertRaises(TypeError):
            words(["a", 1])


if __name__ == "__main__":
    unittest.main()
