"""
Utility tests.

Scope
- Unset sentinel: falsy, singleton, sealed, union-friendly.
- coalesce(), rename() (both forms) and ordinal().

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from usagedoc.utils import Unset, UnsetType, coalesce, ordinal, rename


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndPrintable(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testSealed(self):
        with self.assertRaises(TypeError):
            class Sub(UnsetType):  # NOQA: F-841
                pass

    def testUnion(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertNotIsInstance(None, str | Unset)


class TestCoalesce(TestCase):
    """Behavioral tests for coalesce."""

    def testUnsetIsReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testFalseyValuesAreKept(self):
        self.assertIs(coalesce(False, True), False)
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")


class TestRename(TestCase):
    """Behavioral tests for rename."""

    def testDirectForm(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testDecoratorForm(self):
        @rename("__repr__")
        def function():
            pass

        self.assertEqual(function.__name__, "__repr__")

    def testRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(42, "name")
        with self.assertRaises(TypeError):
            rename(len, "name")
        with self.assertRaises(TypeError):
            rename()


class TestOrdinal(TestCase):
    """Behavioral tests for ordinal."""

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(2), "second")
        self.assertEqual(ordinal(10), "tenth")

    def testSuffixes(self):
        self.assertEqual(ordinal(11), "11th")
        self.assertEqual(ordinal(21), "21st")
        self.assertEqual(ordinal(102), "102nd")
        self.assertEqual(ordinal(113), "113th")
        self.assertEqual(ordinal(33), "33rd")

    def testRejectsNonPositive(self):
        with self.assertRaises(ValueError):
            ordinal(0)
        with self.assertRaises(ValueError):
            ordinal(True)


if __name__ == "__main__":
    unittest.main()
