"""
Long and short option resolution, shared by the grammar and argv parsers.

Both resolvers take the token stream (a tuple of Token, the switch first) and
the current options registry, and return the triple

    (remaining tokens, registry, leaves)

The registry is a tuple of Option and is only ever extended: an option seen
for the first time is appended, a known one is looked up and left as is.

Modes
- argv=False (grammar): the result leaves are the registry declarations
  themselves; a declared value is still consumed so "--output FILE" reads as
  one option in a usage pattern.
- argv=True: the result leaves are copies bound to the value found on the
  command line (True for flags).
"""
from .faults import *
from .patterns import Option
from .tokens import TokenKind
from .utils import *


def _where(token):
    return " at %s position" % ordinal(token.index) if token.index else ""


def _consumable(tokens):
    # any word is a value, "--" included; delimiters only occur in usage text
    return bool(tokens) and tokens[0].kind is TokenKind.WORD


def parse_long(tokens, options, /, *, argv):
    """
    resolve a "--name" or "--name=value" token against the registry.

    lookup
    - exact long-name match; in argv mode, when there is none, every option whose
      long name starts with the given name (unambiguous prefix).
    - no match registers a new option (argcount 1 when an inline value was given).
    - several matches raise AmbiguousOptionError.

    arity
    - a flag given an inline value raises UnexpectedArgumentError.
    - a valued option without inline value consumes the next word, or raises
      MissingArgumentError at the end of input.
    """
    token, tokens = tokens[0], tuple(tokens[1:])

    match token.text.split("="):
        case [long]:
            value = None
        case [long, value]:
            # "--name=" reads as no inline value
            value = value or None
        case _:
            raise UnparsableOptionError(
                "cannot split option %r%s into a name and a value" % (token.text, _where(token)),
                title="unparsable option",
                hint="use a single '=' between the option and its value (for example: --name=value)",
                token=token.text,
            )

    similar = tuple(option for option in options if option.long == long)
    if argv and not similar:
        similar = tuple(option for option in options if option.long and option.long.startswith(long))

    match similar:
        case ():
            option = Option(None, long, int(value is not None))
            leaf = option.__replace__(value=True if value is None else value) if argv else option
            return tokens, options + (option,), (leaf,)
        case (option,):
            if option.argcount == 0:
                if value is not None:
                    raise UnexpectedArgumentError(
                        "flag %r%s cannot have a value" % (option.long, _where(token)),
                        title="flag cannot take a value",
                        hint="remove everything from '=' (for example: %s)" % option.long,
                        token=token.text,
                    )
                value = True
            elif value is None:
                if not _consumable(tokens):
                    raise MissingArgumentError(
                        "option %r%s requires an argument" % (option.long, _where(token)),
                        title="missing option value",
                        hint="pass a value after '=' or a space (for example: %s=<value>)" % option.long,
                        token=token.text,
                    )
                value, tokens = tokens[0].text, tokens[1:]
            return tokens, options, (option.__replace__(value=value) if argv else option,)
        case _:
            raise AmbiguousOptionError(
                "option %r%s is ambiguous, it could be %s" % (
                    long, _where(token), ", ".join(repr(option.long) for option in similar)
                ),
                title="ambiguous option",
                hint="spell out the full option name (for example: %s)" % similar[0].long,
                token=token.text,
                candidates=tuple(option.long for option in similar),
            )


def _short(token, cluster, tokens, options, /, *, argv):
    """
    resolve the first character of `cluster`.

    returns (cluster left to fold, remaining tokens, registry, leaf).
    """
    short, rest = "-" + cluster[0], cluster[1:]
    if short == "--":
        raise UnparsableOptionError(
            "cannot read %r%s as short options, '-' is not an option name" % (token.text, _where(token)),
            title="unparsable option",
            hint="pass each short option on its own (for example: -a -b)",
            token=token.text,
        )
    match tuple(option for option in options if option.short == short):
        case ():
            option = Option(short)
            return rest, tokens, options + (option,), option.__replace__(value=True) if argv else option
        case (option,) if option.argcount == 0:
            return rest, tokens, options, option.__replace__(value=True) if argv else option
        case (option,) if rest:
            # the remainder of the cluster is the value, nothing is left to fold
            return "", tokens, options, option.__replace__(value=rest) if argv else option
        case (option,):
            if not _consumable(tokens):
                raise MissingArgumentError(
                    "option %r%s requires an argument" % (short, _where(token)),
                    title="missing option value",
                    hint="pass the value right after it (for example: %sVALUE or %s VALUE)" % (short, short),
                    token=token.text,
                )
            return "", tokens[1:], options, option.__replace__(value=tokens[0].text) if argv else option
        case similar:
            raise UnparsableOptionError(
                "option %r%s is declared %d times" % (short, _where(token), len(similar)),
                title="unparsable option",
                hint="declare each short option once in the options section",
                token=token.text,
            )


def _fold(token, cluster, tokens, options, /, *, argv):
    leaves = ()
    while cluster:
        cluster, tokens, options, leaf = _short(token, cluster, tokens, options, argv=argv)
        leaves += (leaf,)
    return tokens, options, leaves


def parse_shorts(tokens, options, /, *, argv):
    """
    resolve a "-abc" cluster character by character.

    - unknown characters register a new flag.
    - a character that takes a value ends the cluster: the rest of the cluster is
      the value, or, when nothing is left, the next word.
    - leaves come back in encounter order.
    - a "-" met where an option character is expected ("-a-b") raises
      UnparsableOptionError.
    """
    token = tokens[0]
    if not token.text.startswith("-") or token.text.startswith("--") or token.text == "-":
        raise ValueError("parse_shorts() expects a short option cluster, got %r" % token.text)
    return _fold(token, token.text[1:], tuple(tokens[1:]), options, argv=argv)


__all__ = (
    "parse_long",
    "parse_shorts",
)
