"""
Recursive-descent parser for usage patterns.

    expr := seq ( '|' seq )*
    seq  := ( atom [ '...' ] )*
    atom := '(' expr ')' | '[' expr ']' | 'options'
          | long-option | short-options | argument | command

Every function takes the token stream and the options registry and returns
(remaining tokens, registry, patterns); the registry returned by one step is
the one handed to the next. Nothing here keeps state between calls.
"""
from .faults import *
from .patterns import *
from .switches import parse_long, parse_shorts
from .tokens import DELIMITERS, ENCLOSURES, TokenKind, tokenize
from .utils import *


def _where(token):
    return " at %s position" % ordinal(token.index) if token.index else ""


def _required(patterns):
    # a one-child group is its child
    return patterns[0] if len(patterns) == 1 else Required(*patterns)


def parse_pattern(usage, options=(), /):
    """
    parse a formal usage string into a tree wrapped in a top-level Required.

    returns (pattern, registry): the registry is `options` extended with the
    options the usage mentions but the descriptions did not declare.

    raises UnconsumedTokensError when tokens are left over (an unmatched
    closing delimiter, or a delimiter where a word was expected).
    """
    if not isinstance(usage, str):
        raise TypeError("parse_pattern() first argument must be a string")
    options = tuple(options)
    if not all(isinstance(option, Option) for option in options):
        raise TypeError("parse_pattern() second argument must be an iterable of options")

    tokens, options, patterns = parse_expr(tokenize(usage, DELIMITERS), options)
    if tokens:
        raise UnconsumedTokensError(
            "unexpected %r%s in the usage pattern" % (tokens[0].text, _where(tokens[0])),
            title="unconsumed tokens",
            hint="check that every ')' and ']' closes an earlier '(' or '['",
            tokens=tuple(token.text for token in tokens),
        )
    return Required(*patterns), options


def parse_expr(tokens, options, /):
    """
    expr := seq ( '|' seq )*

    without a pipe the sequence is returned unchanged; with pipes every branch of
    several patterns becomes a Required and the branches an Either.
    """
    tokens, options, sequence = parse_seq(tokens, options)
    if not tokens or tokens[0].kind is not TokenKind.PIPE:
        return tokens, options, sequence

    branches = (_required(sequence),) if sequence else ()
    while tokens and tokens[0].kind is TokenKind.PIPE:
        tokens, options, sequence = parse_seq(tokens[1:], options)
        branches += (_required(sequence),) if sequence else ()

    return tokens, options, (Either(*branches),) if len(branches) > 1 else branches


def parse_seq(tokens, options, /):
    """
    seq := ( atom [ '...' ] )*, up to a closing delimiter, a pipe or the end.

    a stray '...' also ends the sequence; parse_pattern reports it as unconsumed.
    """
    sequence = ()
    while tokens and tokens[0].kind in (TokenKind.OPEN, TokenKind.WORD):
        tokens, options, atoms = parse_atom(tokens, options)
        if tokens and tokens[0].kind is TokenKind.ELLIPSIS:
            tokens, atoms = tokens[1:], (OneOrMore(*atoms),)
        sequence += atoms
    return tokens, options, sequence


def parse_atom(tokens, options, /):
    """
    atom := '(' expr ')' | '[' expr ']' | 'options'
          | long-option | short-options | argument | command

    arguments are "<name>" or all-uppercase words (str.isupper), so "-", "--"
    and digit-only words are commands and must be typed verbatim.
    """
    token = tokens[0]
    text = token.text

    if token.kind is TokenKind.OPEN:
        closer = ENCLOSURES[text]
        tokens, options, expr = parse_expr(tokens[1:], options)
        if not tokens or tokens[0].text != closer:
            raise MissingEnclosureError(
                "missing %r for the %r opened%s" % (closer, text, _where(token)),
                title="unbalanced grouping",
                hint="close the group with %r" % closer,
                enclosure=closer,
            )
        group = _required(expr) if text == "(" else Optional(*expr)
        return tokens[1:], options, (group,)
    if token.kind is not TokenKind.WORD:
        raise ValueError("parse_atom() cannot start an atom with %r" % text)

    if text == "options":
        return tokens[1:], options, (AnyOptions(),)
    if text.startswith("--") and text != "--":
        return parse_long(tokens, options, argv=False)
    if text.startswith("-") and text not in ("-", "--"):
        return parse_shorts(tokens, options, argv=False)
    if text.startswith("<") and text.endswith(">") or text.isupper():
        return tokens[1:], options, (Argument(text),)
    return tokens[1:], options, (Command(text),)


def format_pattern(pattern, /):
    """
    render a tree as canonical usage text that parse_pattern reads back into the
    same tree (given the registry the first parse returned).

    the top-level Required renders as its bare children, and a repeated short
    option cluster renders back as one cluster ("-ab ...").
    """
    if isinstance(pattern, Required):
        return " ".join(map(_format, pattern.children))
    return _format(pattern)


def _cluster(children):
    # "-ab..." repeats every option of the cluster; only the last may take a value
    if not children or not all(
        isinstance(child, Option) and child.short and len(child.short) == 2 for child in children
    ):
        return None
    if any(child.argcount for child in children[:-1]):
        return None
    cluster = "-" + "".join(child.short[1] for child in children)
    if children[-1].argcount:
        return "%s <%s>" % (cluster, children[-1].name.lstrip("-"))
    return cluster


def _format(pattern):
    match pattern:
        case Option(argcount=1):
            return "%s <%s>" % (pattern.name, pattern.name.lstrip("-"))
        case Option():
            return pattern.name
        case Argument() | Command():
            return pattern.name
        case AnyOptions():
            return "options"
        case Required():
            return "( %s )" % " ".join(map(_format, pattern.children))
        case Optional():
            return "[ %s ]" % " ".join(map(_format, pattern.children))
        case Either():
            return "( %s )" % " | ".join(map(_format, pattern.children))
        case OneOrMore(children=(child,)):
            return "%s ..." % _format(child)
        case OneOrMore(children=children) if cluster := _cluster(children):
            return "%s ..." % cluster
        case OneOrMore():
            return "( %s ) ..." % " ".join(map(_format, pattern.children))
    raise TypeError("format_pattern() argument must be a pattern, not %s" % type(pattern).__name__)


__all__ = (
    "parse_pattern",
    "parse_expr",
    "parse_seq",
    "parse_atom",
    "format_pattern",
)
