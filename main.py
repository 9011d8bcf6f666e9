from rich.pretty import pprint

from usagedoc import *

doc = """
Naval Fate.

Usage:
  naval_fate ship new <name>...
  naval_fate ship <name> move <x> <y> [--speed=<kn>]
  naval_fate mine (set|remove) <x> <y> [--moored | --drifting]

Options:
  -h --help     Show this screen.
  --speed=<kn>  Speed in knots [default: 10].
  --moored      Moored (anchored) mine.
  --drifting    Drifting mine.
"""


if __name__ == '__main__':
    pattern, options = parse_pattern(formal_usage(printable_usage(doc)), parse_option_descriptions(doc))
    pprint(pattern)
    pprint(parse_argv("ship Guardian move 10 50 --speed=20", options))
