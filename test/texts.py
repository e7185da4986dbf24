"""
Text helper tests (word relations, list rendering, size scaling).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from pjatext.texts import (
    NUMBER,
    are_anagrams,
    are_palindromes,
    count_matches,
    humanize_size,
    squeeze,
    structure,
    words,
)


class TestWordRelations(TestCase):

    def testAnagrams(self):
        self.assertTrue(are_anagrams("cat", "act"))
        self.assertTrue(are_anagrams("cat", "cat"))
        self.assertFalse(are_anagrams("cat", "cats"))
        self.assertFalse(are_anagrams("aab", "abb"))

    def testAnagramsAreCaseSensitive(self):
        self.assertFalse(are_anagrams("Cat", "act"))

    def testPalindromes(self):
        self.assertTrue(are_palindromes("god", "dog"))
        self.assertTrue(are_palindromes("level", "level"))
        self.assertFalse(are_palindromes("ab", "ab"))
        self.assertFalse(are_palindromes("dog", "godd"))


class TestRendering(TestCase):

    def testEmptyStructure(self):
        self.assertEqual(structure([]), "{ }")

    def testStructure(self):
        self.assertEqual(structure(["tac", "act"]), '{\n    "tac",\n    "act",\n}')

    def testSqueezeOnlyCollapsesRuns(self):
        self.assertEqual(squeeze(["a", "a", "b", "a", "a"]), ["a", "b", "a"])
        self.assertEqual(squeeze([]), [])


class TestCounting(TestCase):

    def testWordsSplitOnAnyWhitespace(self):
        self.assertEqual(words(" one\ttwo\n\nthree  "), ["one", "two", "three"])
        self.assertEqual(words(""), [])

    def testNumbers(self):
        self.assertEqual(count_matches("12 apples 3x 45\n7", NUMBER), 3)
        self.assertEqual(count_matches("a1 22", NUMBER), 1)
        self.assertEqual(count_matches("no digits", NUMBER), 0)


class TestHumanizeSize(TestCase):

    def testScaling(self):
        cases = {
            0: "0 B",
            12: "12 B",
            999: "999 B",
            1000: "1 KB",
            1004: "1 KB",
            1005: "1.01 KB",
            1536: "1.54 KB",
            1500: "1.5 KB",
            2_500_000: "2.5 MB",
            3_000_000_000: "3 GB",
        }
        for size, expected in cases.items():
            with self.subTest(size=size):
                self.assertEqual(humanize_size(size), expected)

    def testGigabytesIsTheLastUnit(self):
        self.assertEqual(humanize_size(5 * 10 ** 12), "5000 GB")


if __name__ == "__main__":
    unittest.main()
