"""
Tokenizer for usage patterns and argument vectors.

Every piece of text the parsers look at goes through here first: grammar
delimiters are padded with spaces, the text is split on whitespace and each
piece is classified into one of a closed set of token kinds. The grammar and
argv parsers only ever inspect Token objects.

    >>> [token.text for token in tokenize("[-v|--verbose]...")]
    ['[', '-v', '|', '--verbose', ']', '...']
    >>> tokenize("a(b", None)[0].kind is TokenKind.WORD
    True
"""
import re
from collections.abc import Iterable
from enum import Enum
from typing import NamedTuple

# brackets, parentheses, pipe and ellipsis
DELIMITERS = re.compile(r"([\[\]()|]|\.\.\.)")


class TokenKind(Enum):
    OPEN = "open"
    CLOSE = "close"
    PIPE = "pipe"
    ELLIPSIS = "ellipsis"
    WORD = "word"


_KINDS = {
    "(": TokenKind.OPEN,
    "[": TokenKind.OPEN,
    ")": TokenKind.CLOSE,
    "]": TokenKind.CLOSE,
    "|": TokenKind.PIPE,
    "...": TokenKind.ELLIPSIS,
}

# closer expected for each opener
ENCLOSURES = {"(": ")", "[": "]"}


class Token(NamedTuple):
    kind: TokenKind
    text: str
    # 1-based position in the token stream, used in fault messages
    index: int = 0

    def __str__(self):
        return self.text

    @property
    def word(self):
        return self.kind is TokenKind.WORD


def tokenize(source, pattern=DELIMITERS, /):
    """
    split `source` into classified tokens.

    - pattern: compiled regex (or None). every match is padded with one space
      before splitting so delimiters become standalone tokens. with None no
      padding happens and every token is a WORD (argv mode).
    - order is preserved and empty pieces are dropped; a token is never
      re-split later.
    """
    if not isinstance(source, str):
        raise TypeError("tokenize() argument must be a string")
    if pattern is not None:
        source = pattern.sub(r" \1 ", source)
        return tuple(
            Token(_KINDS.get(text, TokenKind.WORD), text, index)
            for index, text in enumerate(source.split(), 1)
        )
    return words(source.split())


def words(iterable, /):
    """
    wrap an already split argument vector into WORD tokens (no re-splitting).
    """
    if isinstance(iterable, str) or not isinstance(iterable, Iterable):
        raise TypeError("words() argument must be an iterable of strings")
    tokens = []
    for index, text in enumerate(iterable, 1):
        if not isinstance(text, str):
            raise TypeError("words() argument must be an iterable of strings")
        tokens.append(Token(TokenKind.WORD, text, index))
    return tuple(tokens)


__all__ = (
    "DELIMITERS",
    "ENCLOSURES",
    "TokenKind",
    "Token",
    "tokenize",
    "words",
)
