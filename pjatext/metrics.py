"""
Counting commands and the file-size command.

Every command here validates trivially (any position, no argument consumed)
and reports one "<Label>: <count>" line computed over the bound source text.
FileSize reports the size of the bound source file in human units instead.
"""
import string

from . import files
from .commands import Command
from .faults import FaultCode
from .outputs import Output
from .texts import NUMBER, count_matches, humanize_size, words


class CountLines(Command, caller="-n", alias="--newlines"):
    def execute(self, flag, operations, /):
        return Output.ok("New lines: %d" % operations.source.count("\n"))


class CountDigits(Command, caller="-d", alias="--digits"):
    """
    Count ASCII digit characters (0-9).
    """

    def execute(self, flag, operations, /):
        return Output.ok("Digits: %d" % sum(character in string.digits for character in operations.source))


class CountNumbers(Command, caller="-dd", alias="--numbers"):
    """
    Count numbers written as words: digit runs at the start of the text or
    after whitespace that are not glued to a following word character.
    """

    def execute(self, flag, operations, /):
        return Output.ok("Numbers: %d" % count_matches(operations.source, NUMBER))


class CountChars(Command, caller="-c", alias="--chars"):
    def execute(self, flag, operations, /):
        return Output.ok("Chars: %d" % len(operations.source))


class CountWords(Command, caller="-w", alias="--words"):
    def execute(self, flag, operations, /):
        return Output.ok("Words: %d" % len(words(operations.source)))


class FileSize(Command, caller="-si", alias="--size"):
    """
    Report the size of the source file, e.g. "1.54 KB".

    The file is measured at execution time; if it disappeared after
    validation the failure is reported and the run goes on.
    """

    def execute(self, flag, operations, /):
        try:
            size = files.get_size(operations.source_path)
        except OSError:
            return Output.err("Source file is no longer available!", code=FaultCode.VANISHED_FILE)
        return Output.ok(humanize_size(size))


__all__ = (
    "CountLines",
    "CountDigits",
    "CountNumbers",
    "CountChars",
    "CountWords",
    "FileSize",
)
