# python
"""
Utility and enumeration tests.

Scope
- Unset sentinel behavior and coalesce().
- rename() as a decorator.
- mirror() copies containers (deques become lists).
- Style prefixes.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from collections import deque
from unittest import TestCase

from cmdline import Order, Style
from cmdline.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):

    def testSingletonAndFalsey(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testCannotSubclass(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testCoalesceKeepsFalseyValues(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertIsNone(coalesce(None, "fallback"))


class TestRename(TestCase):

    def testDecoratorSetsNames(self):
        @rename("decorated")
        def function():
            pass

        self.assertEqual(function.__name__, "decorated")
        self.assertEqual(function.__qualname__, "decorated")

    def testRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(1)
        with self.assertRaises(TypeError):
            rename("name")("not callable")


class TestMirror(TestCase):

    def testReturnsCopies(self):
        class Holder:
            values = mirror("values")

            def __init__(self):
                self._values = deque(["a", "b"])

        holder = Holder()
        values = holder.values
        self.assertEqual(values, ["a", "b"])
        values.append("c")
        self.assertEqual(list(holder._values), ["a", "b"])

    def testIsReadOnly(self):
        class Holder:
            name = mirror("name")
            _name = "fixed"

        with self.assertRaises(AttributeError):
            Holder().name = "changed"

    def testRequiresString(self):
        with self.assertRaises(TypeError):
            mirror(1)


class TestEnums(TestCase):

    def testStylePrefixes(self):
        self.assertEqual((Style.UNIX.short_prefix, Style.UNIX.long_prefix), ("-", "--"))
        self.assertEqual((Style.WINDOWS.short_prefix, Style.WINDOWS.long_prefix), ("/", "/"))

    def testOrderValues(self):
        self.assertEqual(Order("after-options"), Order.AFTER_OPTIONS)


if __name__ == "__main__":
    unittest.main()
