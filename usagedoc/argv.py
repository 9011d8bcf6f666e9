"""
Command-line classification.

parse_argv() turns an invocation into a flat tuple of leaves in argv order:
Option leaves bound to the values found on the command line, and positional
Argument leaves (name None, value the raw string). Unknown options are
registered on the fly, so the registry comes back alongside the leaves.
"""
from collections.abc import Iterable

from .patterns import Argument, Option
from .switches import parse_long, parse_shorts
from .tokens import tokenize, words


def _positionals(tokens):
    return tuple(Argument(None, token.text) for token in tokens)


def parse_argv(argv, options=(), /, options_first=False):
    """
    classify an argument vector against the options registry.

    parameters
    - argv: str (split on whitespace, never re-split) or Iterable[str] (used as is).
    - options: the registry, usually the one parse_pattern returned.
    - options_first: the first positional ends option recognition.

    returns
    - (leaves, registry)

    rules, left to right
    - "--": it and everything after it are positionals.
    - "--name[=value]": long option; "-abc": short cluster ("-" alone is positional).
    - with options_first, the first positional and everything after it are positionals.
    """
    if isinstance(argv, str):
        tokens = tokenize(argv, None)
    elif isinstance(argv, Iterable):
        tokens = words(argv)
    else:
        raise TypeError("parse_argv() first argument must be a string or an iterable of strings")
    options = tuple(options)
    if not all(isinstance(option, Option) for option in options):
        raise TypeError("parse_argv() second argument must be an iterable of options")

    leaves = ()
    while tokens:
        text = tokens[0].text
        if text == "--":
            return leaves + _positionals(tokens), options
        if text.startswith("--"):
            tokens, options, parsed = parse_long(tokens, options, argv=True)
        elif text.startswith("-") and text != "-":
            tokens, options, parsed = parse_shorts(tokens, options, argv=True)
        elif options_first:
            return leaves + _positionals(tokens), options
        else:
            tokens, parsed = tokens[1:], _positionals(tokens[:1])
        leaves += parsed
    return leaves, options


__all__ = (
    "parse_argv",
)
