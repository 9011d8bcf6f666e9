"""
usagedoc entry point: help text in, bound values out.

    from usagedoc import docopt

    doc = '''
    Usage:
      ship new <name>...
      ship move <name> <x> <y> [--speed=<kn>]

    Options:
      --speed=<kn>  speed in knots [default: 10]
    '''

    arguments = docopt(doc, "move Guardian 10 50", matcher=match)

Stages (all of them raise PatternException subclasses on failure)
1. usage extraction: printable_usage() + formal_usage()
2. option descriptions: parse_option_descriptions() -> initial registry
3. grammar: parse_pattern() -> tree, registry
4. argv: parse_argv() -> leaves, registry
5. help/version flags
6. matcher(tree, leaves) -> None | (left, collected)

The matcher is supplied by the caller. It receives the tree as built ("options"
placeholders included, unexpanded) and the argv leaves, and returns None when
the invocation does not fit the usage or a pair of leftover and bound leaves.

Faults are routed through trigger(): with shell=False they are raised, with
shell=True they are printed to stderr with rich and the process exits with 1.
"""
import sys

from rich.console import Console

from .argv import parse_argv
from .descriptions import parse_option_descriptions
from .faults import *
from .faults import console
from .grammar import parse_pattern
from .patterns import Argument, Command, Option
from .usage import formal_usage, printable_usage
from .utils import *
from .values import parse_value

# help and version go to stdout, faults and debug logs to the stderr console
stdout = Console()


def _extras(help, version, leaves, doc):
    # leaves are bound, so a flag that was passed holds True
    flags = {leaf.name for leaf in leaves if isinstance(leaf, Option) and leaf.value is True}
    if help and flags & {"-h", "--help"}:
        stdout.print(doc.strip("\n"), markup=False, highlight=False)
        sys.exit(0)
    if version is not Unset and "--version" in flags:
        stdout.print(str(version), markup=False, highlight=False)
        sys.exit(0)


def docopt(
        doc,
        argv=Unset,
        /,
        *,
        matcher,
        help=True,
        version=Unset,
        options_first=False,
        typed=False,
        shell=False,
        fancy=False,
        colorful=True,
        debug=False,
):
    """
    parse `argv` against the usage and options described in `doc`.

    parameters
    - doc: the help text ("Usage:" section plus option descriptions).
    - argv: Unset (sys.argv[1:]), a string (split on whitespace) or an iterable of strings.
    - matcher: Callable[[Pattern, tuple[Pattern, ...]], None | tuple[leaves, leaves]].
    - help: print `doc` and exit on -h/--help.
    - version: printed on --version, then exit.
    - options_first: the first positional ends option recognition.
    - typed: coerce bound string values once through parse_value.
    - shell / fancy / colorful: fault rendering (see usagedoc.faults.trigger).
    - debug: log every stage on the stderr console.

    returns
    - dict mapping each leaf name of the usage tree to its bound value.
    """
    if not isinstance(doc, str):
        raise TypeError("docopt() first argument must be a string")
    if not callable(matcher):
        raise TypeError("docopt() 'matcher' must be callable")

    runtime = {"shell": shell, "fancy": fancy, "colorful": colorful}
    try:
        section = printable_usage(doc)
        usage = formal_usage(section)
        runtime["prog"] = section.split()[0]
        options = parse_option_descriptions(doc)
        if debug:
            console.log("usage", usage)
            console.log("options", options)

        pattern, options = parse_pattern(usage, options)
        if debug:
            console.log("pattern", pattern)

        leaves, options = parse_argv(coalesce(argv, sys.argv[1:]), options, options_first)
        if debug:
            console.log("argv", leaves)

        _extras(help, version, leaves, doc)

        result = matcher(pattern, leaves)
        if result is None:
            raise UnmatchedPatternError(
                "the command line does not match any usage",
                title="pattern not matched",
                hint="run '%s --help' to see the expected usage" % runtime["prog"],
            )
        left, collected = result
        if left:
            raise UnconsumedTokensError(
                "unexpected %s" % " ".join(repr(leaf.value if leaf.name is None else leaf.name) for leaf in left),
                title="unconsumed tokens",
                hint="remove the extra arguments or run '%s --help'" % runtime["prog"],
                tokens=tuple(left),
            )
    except PatternException as fault:
        return trigger(fault, **runtime)

    if debug:
        console.log("collected", collected)

    arguments = {
        leaf.name: leaf.value
        for leaf in pattern.flat(Argument, Command, Option) + tuple(collected)
        if leaf.name is not None
    }
    if typed:
        arguments = {
            name: parse_value(value) if isinstance(value, str) else value
            for name, value in arguments.items()
        }
    return arguments


__all__ = (
    "docopt",
)
