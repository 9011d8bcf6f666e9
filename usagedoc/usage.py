"""
Usage section extraction.

    >>> printable_usage("Naval Fate.\\n\\nUsage:\\n  naval ship new <name>...\\n  naval mine\\n\\nOptions: ...")
    'naval ship new <name>...\\n  naval mine'
    >>> formal_usage('naval ship new <name>...\\n  naval mine')
    '( ship new <name>... ) | ( mine )'
"""
import re

from .faults import *

_MARKER = re.compile(r"usage:", re.IGNORECASE)
_BLANK_LINE = re.compile(r"\n\s*\n")


def printable_usage(doc, /):
    """
    return the text after the single case-insensitive "usage:" marker, up to the
    first blank line, stripped.

    raises UsageNotFoundError (no marker) or DuplicatedUsageError (several).
    """
    if not isinstance(doc, str):
        raise TypeError("printable_usage() argument must be a string")
    sections = _MARKER.split(doc)
    if len(sections) < 2:
        raise UsageNotFoundError(
            "'usage:' (case-insensitive) not found",
            title="usage not found",
            hint="start the usage section with 'Usage:' followed by the program name",
        )
    if len(sections) > 2:
        raise DuplicatedUsageError(
            "more than one 'usage:' (case-insensitive) found",
            title="duplicated usage",
            hint="keep a single 'Usage:' section and list every invocation under it",
            count=len(sections) - 1,
        )
    return _BLANK_LINE.split(sections[1])[0].strip()


def formal_usage(section, /):
    """
    turn the usage section into one alternation: every line (every occurrence of
    the program name) becomes a parenthesized branch.
    """
    if not isinstance(section, str):
        raise TypeError("formal_usage() argument must be a string")
    match section.split():
        case []:
            raise EmptyUsageError(
                "the usage section is empty",
                title="empty usage",
                hint="write at least the program name after 'Usage:'",
            )
        case [prog, *words]:
            return "( %s )" % " ".join(") | (" if word == prog else word for word in words)


__all__ = (
    "printable_usage",
    "formal_usage",
)
