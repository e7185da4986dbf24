"""
Utility helper tests (sentinel, renaming, mirrored properties).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

import pjatext.utils
from pjatext.utils import Unset, UnsetType, mirror, rename


class _Slots:
    __slots__ = ("_value",)

    value = mirror("value")

    def __init__(self, value):
        self._value = value


class TestUnset(TestCase):

    def testSingletonAndFalsy(self):
        self.assertIs(UnsetType(), Unset)
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertEqual(repr(Unset), "Unset")

    def testSealed(self):
        with self.assertRaises(TypeError):
            class Subclass(UnsetType):
                pass


class TestRename(TestCase):

    def testRenamesFunction(self):
        @rename("__repr__")
        def generated(self):
            return ""

        self.assertEqual((generated.__name__, generated.__qualname__), ("__repr__", "__repr__"))

    def testRejectsBadInput(self):
        with self.assertRaises(TypeError):
            rename(3)
        with self.assertRaises(TypeError):
            rename("name")(3)


class TestMirror(TestCase):

    def testReadsBackingSlot(self):
        self.assertEqual(_Slots("x").value, "x")

    def testUnsetReadsAsNone(self):
        self.assertIsNone(_Slots(Unset).value)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            _Slots("x").value = "y"

    def testPublicSurface(self):
        self.assertEqual(set(pjatext.utils.__all__), {"rename", "mirror", "UnsetType", "Unset"})


if __name__ == "__main__":
    unittest.main()
