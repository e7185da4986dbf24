"""
Word-listing command tests (anagrams, palindromes, sorting).

Scope
- Validate placement and argument rules of the extraction commands.
- Validate listing contents and order, including length-based sorting.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from pjatext import (
    BY_LENGTH,
    FaultCode,
    Flag,
    Instruction,
    Operations,
    ShowAnagrams,
    ShowPalindromes,
    ShowWords,
    ShowWordsReverse,
)


def _listing(*items):
    if not items:
        return "{ }"
    return "{\n" + "".join('    "%s",\n' % item for item in items) + "}"


def _run(command, source, argument="", modifier=0):
    operations = Operations()
    operations.source = source
    return command.execute(Flag(command.caller, 0, argument, modifier), operations)


class TestRelatedValidation(TestCase):

    def _validate(self, command, *tokens):
        instruction = Instruction.build(tokens)
        flag = instruction.get(command.caller) or instruction.get(command.alias)
        return command.validate(flag, instruction, Operations())

    def testMustBeLast(self):
        for command in (ShowAnagrams(), ShowPalindromes()):
            with self.subTest(command=command):
                output = self._validate(command, "-f", "x", command.caller, "cat", "-w")
                self.assertTrue(output.is_err)
                self.assertEqual(output.message, "This flag should be the last one")
                self.assertIs(output.code, FaultCode.NOT_LAST)

    def testRequiresArgument(self):
        for command in (ShowAnagrams(), ShowPalindromes()):
            with self.subTest(command=command):
                output = self._validate(command, "-f", "x", command.alias)
                self.assertEqual(output.message, "This flag requires an argument!")
                self.assertIs(output.code, FaultCode.ARGUMENT_REQUIRED)

    def testPlacementIsCheckedFirst(self):
        output = self._validate(ShowAnagrams(), "-a", "-w")
        self.assertIs(output.code, FaultCode.NOT_LAST)

    def testLastWithArgument(self):
        self.assertTrue(self._validate(ShowAnagrams(), "-f", "x", "-a", "cat").is_ok)


class TestRelatedExecution(TestCase):

    def testAnagrams(self):
        output = _run(ShowAnagrams(), "tac dog act tac", "cat")
        self.assertEqual(output.message, _listing("tac", "act", "tac"))

    def testAnagramRunsAreCollapsed(self):
        output = _run(ShowAnagrams(), "tac tac act", "cat")
        self.assertEqual(output.message, _listing("tac", "act"))

    def testWordRelatedToSeveralReferencesIsCollapsed(self):
        # "tac" matches both "cat" and "act"
        output = _run(ShowAnagrams(), "tac dog", "cat act")
        self.assertEqual(output.message, _listing("tac"))

    def testPalindromes(self):
        output = _run(ShowPalindromes(), "god dog level tac", "dog level")
        self.assertEqual(output.message, _listing("god", "level"))

    def testNothingFound(self):
        output = _run(ShowPalindromes(), "alpha beta", "gamma")
        self.assertTrue(output.is_ok)
        self.assertEqual(output.message, "{ }")


class TestSorting(TestCase):

    SOURCE = "pear fig apple kiwi banana"

    def testSorted(self):
        output = _run(ShowWords(), self.SOURCE)
        self.assertEqual(output.message, _listing("apple", "banana", "fig", "kiwi", "pear"))

    def testReverseSorted(self):
        output = _run(ShowWordsReverse(), self.SOURCE)
        self.assertEqual(output.message, _listing("pear", "kiwi", "fig", "banana", "apple"))

    def testByLengthKeepsTextOrderAmongEqualLengths(self):
        output = _run(ShowWords(), self.SOURCE, modifier=BY_LENGTH)
        self.assertEqual(output.message, _listing("fig", "pear", "kiwi", "apple", "banana"))

    def testReverseByLength(self):
        output = _run(ShowWordsReverse(), self.SOURCE, modifier=BY_LENGTH)
        self.assertEqual(output.message, _listing("banana", "apple", "pear", "kiwi", "fig"))

    def testSortingIgnoresArgument(self):
        self.assertEqual(_run(ShowWords(), "b a", "ignored").message, _listing("a", "b"))

    def testEmptySource(self):
        self.assertEqual(_run(ShowWords(), "").message, "{ }")


if __name__ == "__main__":
    unittest.main()
