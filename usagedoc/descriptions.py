"""
Option and argument description lines.

A help text declares its options one per line:

    -o FILE, --output=FILE  where to write [default: out.txt]
    -v, --verbose           print more

The options column and the description column are separated by two or more
spaces. Whatever names appear in the first column make up one Option; a
non-dashed word there (FILE) means the option takes a value, whose default is
read from the "[default: ...]" annotation of the description.
"""
import re

from .faults import MalformedOptionError
from .patterns import Argument, Option
from .values import parse_default

_COLUMNS = re.compile(r" {2,}")
_NAMES = re.compile(r"[\s,=]+")
_PLACEHOLDER = re.compile(r"<\S*?>")
# a description line: optional indentation, then a dash
_DESCRIPTION = re.compile(r"^[\t ]*(-\S+[^\n]*)", re.MULTILINE)


def parse_option(line, /, *, strict=False):
    """
    parse one option-description line into an Option.

    returns None for a line that does not decompose into a short and/or long
    name (skipped silently by parse_option_descriptions); strict=True raises
    MalformedOptionError instead.
    """
    if not isinstance(line, str):
        raise TypeError("parse_option() argument must be a string")

    columns = [column for column in _COLUMNS.split(line.strip(), maxsplit=1) if column]
    match columns:
        case [names, description]:
            pass
        case [names]:
            description = ""
        case _:
            if strict:
                raise MalformedOptionError(
                    "empty option description line",
                    title="malformed option",
                    hint="describe options as '-x, --xxx=ARG  description'",
                    line=line,
                )
            return None

    short, long, argcount = None, None, 0
    for name in filter(None, _NAMES.split(names)):
        if name.startswith("--"):
            long = name
        elif name.startswith("-"):
            short = name
        else:
            argcount = 1

    if short is None and long is None:
        if strict:
            raise MalformedOptionError(
                "no option name in %r" % names,
                title="malformed option",
                hint="start the line with -x and/or --xxx",
                line=line,
            )
        return None

    try:
        return Option(short, long, argcount, parse_default(description) if argcount else False)
    except MalformedOptionError:
        if strict:
            raise
        return None


def parse_argument(text, /):
    """
    parse an "<name>  description [default: X]" line into an Argument, or None
    when the text holds no <...> placeholder.
    """
    if not isinstance(text, str):
        raise TypeError("parse_argument() argument must be a string")
    if match := _PLACEHOLDER.search(text):
        return Argument(match[0], parse_default(text))
    return None


def parse_option_descriptions(doc, /):
    """
    collect the initial options registry from every "-..." line of a help text.
    """
    if not isinstance(doc, str):
        raise TypeError("parse_option_descriptions() argument must be a string")
    return tuple(
        option
        for line in _DESCRIPTION.findall(doc)
        if (option := parse_option(line)) is not None
    )


__all__ = (
    "parse_option",
    "parse_argument",
    "parse_option_descriptions",
)
