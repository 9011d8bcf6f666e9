"""
usagedoc faults (parse failures) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure the parsers
  can raise. The code is the tag of a fault: callers distinguish failure kinds by
  `fault.code` rather than by walking the class hierarchy.
- PatternException: base type carrying message + options, rendering itself with
  rich in a short, lowercased and actionable way.
- trigger(): central entry point to surface a fault (raise, or print and exit in
  shell mode).
- getdoc(): optional description lookup for a code from the host application.

Integration
- The tokenizer and parsers raise faults directly; nothing is retried or
  partially recovered.
- The entry point (usagedoc.runner.docopt) catches them and calls
  trigger(fault, **runtime) so shell tools get a rendered message and exit 1.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes raised by the usage and argv parsers (stable identifiers).

    grouping (by high-level domain)
    - help text (2110x)
      • USAGE_NOT_FOUND, DUPLICATED_USAGE, EMPTY_USAGE
    - option declarations and tokens (2111x)
      • MALFORMED_OPTION, UNPARSABLE_OPTION, UNEXPECTED_ARGUMENT,
        MISSING_ARGUMENT, AMBIGUOUS_OPTION
    - grammar structure (2112x)
      • MISSING_ENCLOSURE, UNCONSUMED_TOKENS
    - matching (2113x)
      • UNMATCHED_PATTERN

    the numeric value is what users see; normalize() lets a host relabel it.
    """
    # --- help text errors (21xxx) ---
    USAGE_NOT_FOUND     = 21101
    DUPLICATED_USAGE    = 21102
    EMPTY_USAGE         = 21103

    # --- option errors (21xxx) ---
    MALFORMED_OPTION    = 21111
    UNPARSABLE_OPTION   = 21112
    UNEXPECTED_ARGUMENT = 21113
    MISSING_ARGUMENT    = 21114
    AMBIGUOUS_OPTION    = 21115

    # --- grammar errors (21xxx) ---
    MISSING_ENCLOSURE   = 21121
    UNCONSUMED_TOKENS   = 21122

    # --- matching errors (21xxx) ---
    UNMATCHED_PATTERN   = 21131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class PatternException(Exception):
    """
    base fault for every usage/argv parsing failure.

    options (all optional, read through self.options)
    - code: FaultCode tag of the failure (defaults to the class' __code__).
    - title: short header title; hint: one actionable sentence.
    - prog: program name used in the rendered header.
    - shell / fancy / colorful: runtime rendering flags (see trigger()).
    - any context the raiser wants to keep (token, enclosure, candidates, ...).
    """
    __code__ = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType({"code": type(self).__code__} | options)

    @property
    def code(self):
        """the FaultCode tag of this fault."""
        return self.options["code"]

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "usagedoc")), styler("prog-name"))

        code = self.code.normalize() if isinstance(self.code, FaultCode) else self.code
        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, styler("code")),
            " | ",
            text(self.options.get("title", "parse error").title(), styler("error-title")),
            " ]"
        )
        message = text(self.message or "", styler("error-message"))
        parts = [message]
        if hint := self.options.get("hint"):
            parts.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if fancy:
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UsageNotFoundError(PatternException):
    __code__ = FaultCode.USAGE_NOT_FOUND
class DuplicatedUsageError(PatternException):
    __code__ = FaultCode.DUPLICATED_USAGE
class EmptyUsageError(PatternException):
    __code__ = FaultCode.EMPTY_USAGE
class MalformedOptionError(PatternException):
    __code__ = FaultCode.MALFORMED_OPTION
class UnparsableOptionError(PatternException):
    __code__ = FaultCode.UNPARSABLE_OPTION
class UnexpectedArgumentError(PatternException):
    __code__ = FaultCode.UNEXPECTED_ARGUMENT
class MissingArgumentError(PatternException):
    __code__ = FaultCode.MISSING_ARGUMENT
class AmbiguousOptionError(PatternException):
    __code__ = FaultCode.AMBIGUOUS_OPTION
class MissingEnclosureError(PatternException):
    __code__ = FaultCode.MISSING_ENCLOSURE
class UnconsumedTokensError(PatternException):
    __code__ = FaultCode.UNCONSUMED_TOKENS
class UnmatchedPatternError(PatternException):
    __code__ = FaultCode.UNMATCHED_PATTERN


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see PatternException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode the fault is printed on stderr through rich and the process
      exits with status 1; otherwise the (replaced) fault is raised.

    typical options
    - prog, shell, fancy, colorful, and any context worth showing.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "PatternException",
    "UsageNotFoundError",
    "DuplicatedUsageError",
    "EmptyUsageError",
    "MalformedOptionError",
    "UnparsableOptionError",
    "UnexpectedArgumentError",
    "MissingArgumentError",
    "AmbiguousOptionError",
    "MissingEnclosureError",
    "UnconsumedTokensError",
    "UnmatchedPatternError",
    "FaultCode",
    "trigger",
    "getdoc",
)
