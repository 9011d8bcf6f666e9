r"""
usagedoc pattern tree.

Overview
- Leaves
  • Argument(name, value=None): a positional placeholder ("<file>", "FILE"), or a
    raw positional from argv (name None, value the raw string).
  • Command(name, value=False): a literal word the user must type verbatim.
  • Option(short=None, long=None, argcount=0, value=False): a -s/--long switch
    taking zero or one value.
  • AnyOptions(): the "options" placeholder, left unexpanded for the matcher.
- Branches (ordered children, Either is the unordered exception)
  • Required(*children), Optional(*children), Either(*children), OneOrMore(*children)

Construction and immutability
- PatternType (metaclass) derives __typename__ from the class name, emits
  __repr__/__rich_repr__ from __fields__ and seals concrete classes.
- Pattern.__new__ is a guarded builder: fields can only be written inside the
  `with super().__new__(cls) as self:` block of a constructor; afterwards every
  assignment raises AttributeError.
- A leaf with a new value is produced with `leaf.__replace__(value=...)`
  (the copy.replace protocol); the original leaf is left untouched.

Quick example:
    >>> from usagedoc.patterns import Required, Either, Argument
    >>> Required(Either(Argument("<a>"), Argument("<b>")))
    Required(Either(Argument('<a>', None), Argument('<b>', None)))
"""
import re
from collections import Counter
from contextlib import contextmanager

from .faults import MalformedOptionError
from .utils import *


class PatternType(type):
    """
    Metaclass for pattern nodes.

    Responsibilities
    - __typename__: hyphenated lowercase class name ("one-or-more"), used in messages.
    - __repr__: `TypeName(field, ...)`, positional and stable (tests compare reprs
      in failure output).
    - __rich_repr__: yields the field values (children for branches) so
      rich.pretty renders trees as nested calls.
    - final=True seals the class against subclassing.
    """
    __fields__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            },
        )

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield the positional constructor arguments of this node.
            """
            for field in type(self).__fields__:
                if field == "children":
                    yield from self.children
                else:
                    yield getattr(self, field)
        self.__rich_repr__ = __rich_repr__

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__name__}({', '.join(map(repr, self.__rich_repr__()))})"
        self.__repr__ = __repr__

        if options.get("final", False):
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


class Pattern(metaclass=PatternType):
    """
    Base node of the usage tree (leaf or branch).

    Equality and hashing follow the type and the fields, so trees built from
    the same usage compare equal and leaves can live in sets and Counters.
    """
    __slots__ = ("__building",)

    @contextmanager
    def __new__(cls):
        self = super().__new__(cls)
        object.__setattr__(self, "_Pattern__building", True)
        try:
            yield self
        finally:
            object.__setattr__(self, "_Pattern__building", False)

    def __setattr__(self, name, value, /):
        try:
            building = object.__getattribute__(self, "_Pattern__building")
        except AttributeError:
            building = False
        if not building:
            raise AttributeError(f"{type(self).__typename__} patterns are immutable")
        object.__setattr__(self, name, value)

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__typename__} patterns are immutable")

    def __key__(self):
        return tuple(getattr(self, field) for field in type(self).__fields__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__key__() == other.__key__()

    def __hash__(self):
        return hash((type(self), self.__key__()))

    def __replace__(self, /, **changes):
        unknown = set(changes) - set(type(self).__fields__)
        if unknown:
            raise TypeError(f"{type(self).__typename__} has no field {sorted(unknown)[0]!r}")
        return type(self)(**{field: getattr(self, field) for field in type(self).__fields__} | changes)

    def flat(self, *types):
        """
        Return the leaves of this tree in order, optionally only those of `types`.
        """
        raise NotImplementedError


class LeafPattern(Pattern):
    __slots__ = ()

    def flat(self, *types):
        return (self,) if not types or isinstance(self, types) else ()


class BranchPattern(Pattern):
    __slots__ = ("children",)
    __fields__ = ("children",)

    def __new__(cls, *children, **fields):
        if fields.keys() - {"children"}:
            raise TypeError(f"{cls.__typename__} only accepts child patterns")
        if "children" in fields:
            if children:
                raise TypeError(f"{cls.__typename__} got children both positionally and by keyword")
            children = tuple(fields["children"])
        for child in children:
            if not isinstance(child, Pattern):
                raise TypeError(f"{cls.__typename__} children must be patterns, not {type(child).__name__}")
        with super().__new__(cls) as self:
            self.children = tuple(children)
        return self

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def flat(self, *types):
        return tuple(leaf for child in self.children for leaf in child.flat(*types))


class Argument(LeafPattern, final=True):
    __slots__ = ("name", "value")
    __fields__ = ("name", "value")

    def __new__(cls, name=None, value=None):
        if not isinstance(name, str | None):
            raise TypeError("argument name must be a string")
        with super().__new__(cls) as self:
            self.name = name
            self.value = value
        return self


class Command(LeafPattern, final=True):
    __slots__ = ("name", "value")
    __fields__ = ("name", "value")

    def __new__(cls, name, value=False):
        if not isinstance(name, str) or not name:
            raise TypeError("command name must be a non-empty string")
        with super().__new__(cls) as self:
            self.name = name
            self.value = value
        return self


class Option(LeafPattern, final=True):
    """
    A named switch.

    - short: "-x" or None; long: "--xxx" or None (never both None).
    - argcount: 0 (flag, value is a bool) or 1 (value is the bound or default string).
    - name: long when declared, otherwise short.
    """
    __slots__ = ("short", "long", "argcount", "value")
    __fields__ = ("short", "long", "argcount", "value")

    def __new__(cls, short=None, long=None, argcount=0, value=False):
        # empty names are normalized to None
        short, long = short or None, long or None
        if short is None and long is None:
            raise MalformedOptionError(
                "option must declare a short or a long name",
                title="malformed option",
                hint="declare it as -x, --xxx or -x, --xxx",
            )
        if short is not None and not (isinstance(short, str) and short.startswith("-") and not short.startswith("--")):
            raise MalformedOptionError(
                "bad short option name %r" % (short,),
                title="malformed option",
                hint="short options are a single dash followed by one character (for example: -v)",
                token=short,
            )
        if long is not None and not (isinstance(long, str) and long.startswith("--") and len(long) > 2):
            raise MalformedOptionError(
                "bad long option name %r" % (long,),
                title="malformed option",
                hint="long options are two dashes followed by a name (for example: --verbose)",
                token=long,
            )
        if argcount not in (0, 1) or isinstance(argcount, bool):
            raise MalformedOptionError(
                "option %r takes 0 or 1 argument, not %r" % (long or short, argcount),
                title="malformed option",
                hint="an option is either a flag or takes exactly one value",
                token=long or short,
            )
        if argcount and value is False:
            value = ""
        if not argcount and not isinstance(value, bool):
            raise MalformedOptionError(
                "flag %r can only hold a boolean value" % (long or short),
                title="malformed option",
                hint="declare an argument (for example: %s=<value>) to accept values" % (long or short),
                token=long or short,
            )
        with super().__new__(cls) as self:
            self.short = short
            self.long = long
            self.argcount = argcount
            self.value = value
        return self

    @property
    def name(self):
        return self.long or self.short


class AnyOptions(LeafPattern, final=True):
    """Placeholder for "any declared option may appear here"; expanded by the matcher."""
    __slots__ = ()

    def __new__(cls):
        with super().__new__(cls) as self:
            pass
        return self

    @property
    def name(self):
        return None


class Required(BranchPattern, final=True):
    __slots__ = ()


class Optional(BranchPattern, final=True):
    __slots__ = ()


class Either(BranchPattern, final=True):
    """Alternatives: children compare as an unordered collection."""
    __slots__ = ()

    def __key__(self):
        return (frozenset(Counter(self.children).items()),)


class OneOrMore(BranchPattern, final=True):
    __slots__ = ()


__all__ = (
    "Pattern",
    "LeafPattern",
    "BranchPattern",
    "Argument",
    "Command",
    "Option",
    "AnyOptions",
    "Required",
    "Optional",
    "Either",
    "OneOrMore",
)
