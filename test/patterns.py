"""
Pattern tree tests.

Scope
- Leaf construction and normalization (Argument, Command, Option, AnyOptions).
- Option invariants (names, argcount, boolean flags) and their faults.
- Immutability, __replace__ (copy.replace protocol) and value equality.
- Branch construction, unordered Either equality, flat() and reprs.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from rich.pretty import pretty_repr

from usagedoc import (
    AnyOptions,
    Argument,
    Command,
    Either,
    FaultCode,
    MalformedOptionError,
    OneOrMore,
    Option,
    Optional,
    Required,
)


class TestLeaves(TestCase):
    """Behavioral tests for leaf patterns."""

    def testArgumentDefaults(self):
        argument = Argument("<file>")
        self.assertEqual(argument.name, "<file>")
        self.assertIsNone(argument.value)

    def testPositionalArgumentHasNoName(self):
        argument = Argument(None, "raw")
        self.assertIsNone(argument.name)
        self.assertEqual(argument.value, "raw")

    def testCommandDefaults(self):
        command = Command("ship")
        self.assertEqual(command.name, "ship")
        self.assertIs(command.value, False)

    def testCommandRequiresName(self):
        with self.assertRaises(TypeError):
            Command("")

    def testOptionNamePrefersLong(self):
        self.assertEqual(Option("-v", "--verbose").name, "--verbose")
        self.assertEqual(Option("-v").name, "-v")
        self.assertEqual(Option(None, "--verbose").name, "--verbose")

    def testOptionEmptyNamesAreNone(self):
        option = Option("", "--verbose")
        self.assertIsNone(option.short)

    def testOptionFlagDefaultsToFalse(self):
        self.assertIs(Option("-v").value, False)

    def testOptionWithArgumentDefaultsToEmptyString(self):
        self.assertEqual(Option("-o", "--output", 1).value, "")

    def testOptionNeedsAName(self):
        with self.assertRaises(MalformedOptionError) as context:
            Option()
        self.assertIs(context.exception.code, FaultCode.MALFORMED_OPTION)

    def testOptionRejectsBadNames(self):
        with self.assertRaises(MalformedOptionError):
            Option("--verbose")
        with self.assertRaises(MalformedOptionError):
            Option(None, "-v")
        with self.assertRaises(MalformedOptionError):
            Option(None, "--")

    def testOptionArgcountIsZeroOrOne(self):
        with self.assertRaises(MalformedOptionError):
            Option("-o", None, 2)

    def testFlagHoldsOnlyBooleans(self):
        with self.assertRaises(MalformedOptionError):
            Option("-v", None, 0, "yes")

    def testAnyOptions(self):
        self.assertEqual(AnyOptions(), AnyOptions())
        self.assertIsNone(AnyOptions().name)


class TestImmutability(TestCase):
    """Patterns cannot change once built; __replace__ produces new ones."""

    def testAssignmentRaises(self):
        option = Option("-v")
        with self.assertRaises(AttributeError):
            option.value = True
        with self.assertRaises(AttributeError):
            Required(option).children = ()

    def testDeletionRaises(self):
        with self.assertRaises(AttributeError):
            del Argument("<x>").value

    def testReplaceLeaf(self):
        option = Option("-v", "--verbose")
        bound = option.__replace__(value=True)
        self.assertEqual(bound, Option("-v", "--verbose", 0, True))
        self.assertIs(option.value, False)

    def testReplaceBranch(self):
        tree = Required(Argument("<a>"))
        self.assertEqual(tree.__replace__(children=(Command("go"),)), Required(Command("go")))

    def testReplaceUnknownField(self):
        with self.assertRaises(TypeError):
            Argument("<a>").__replace__(short="-a")

    def testConcreteClassesAreSealed(self):
        with self.assertRaises(TypeError):
            class Sub(Option):  # NOQA: F-841
                pass


class TestBranches(TestCase):
    """Behavioral tests for branch patterns."""

    def testChildrenAreOrdered(self):
        self.assertNotEqual(Required(Argument("<a>"), Argument("<b>")), Required(Argument("<b>"), Argument("<a>")))

    def testEitherIsUnordered(self):
        self.assertEqual(Either(Argument("<a>"), Argument("<b>")), Either(Argument("<b>"), Argument("<a>")))
        self.assertEqual(
            hash(Either(Argument("<a>"), Argument("<b>"))),
            hash(Either(Argument("<b>"), Argument("<a>"))),
        )

    def testEitherKeepsDuplicatesApart(self):
        self.assertNotEqual(Either(Command("a"), Command("a"), Command("b")), Either(Command("a"), Command("b")))

    def testDifferentBranchTypesDiffer(self):
        self.assertNotEqual(Required(Command("a")), Optional(Command("a")))

    def testChildrenMustBePatterns(self):
        with self.assertRaises(TypeError):
            Required("a")

    def testChildrenByKeyword(self):
        self.assertEqual(OneOrMore(children=[Command("a")]), OneOrMore(Command("a")))

    def testIterationAndLength(self):
        tree = Optional(Command("a"), Command("b"))
        self.assertEqual(len(tree), 2)
        self.assertEqual(list(tree), [Command("a"), Command("b")])

    def testFlat(self):
        tree = Required(
            Command("ship"),
            Optional(Option(None, "--speed", 1, "10"), AnyOptions()),
            OneOrMore(Argument("<name>")),
        )
        self.assertEqual(tree.flat(), (
            Command("ship"),
            Option(None, "--speed", 1, "10"),
            AnyOptions(),
            Argument("<name>"),
        ))
        self.assertEqual(tree.flat(Option, Argument), (Option(None, "--speed", 1, "10"), Argument("<name>")))


class TestRepresentation(TestCase):
    """Reprs are stable, positional and rich-aware."""

    def testRepr(self):
        self.assertEqual(
            repr(Required(Either(Argument("<a>"), Option("-v")))),
            "Required(Either(Argument('<a>', None), Option('-v', None, 0, False)))",
        )

    def testTypename(self):
        self.assertEqual(OneOrMore.__typename__, "one-or-more")
        self.assertEqual(AnyOptions.__typename__, "any-options")

    def testRichPretty(self):
        self.assertEqual(pretty_repr(Command("go")), "Command('go', False)")


if __name__ == "__main__":
    unittest.main()
