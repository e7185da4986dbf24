"""
Commands that report lists of source words.

- ShowAnagrams (-a/--anagrams) and ShowPalindromes (-p/--palindromes) compare
  every source word with every word of their argument and list the source
  words that relate to at least one of them. Both must be the last flag and
  both require an argument. Runs of the same word are collapsed (only
  consecutive repeats; the same word further down the text shows again).
- ShowWords (-s/--sorted) and ShowWordsReverse (-rs/--reverse-sorted) list
  every source word sorted ascending/descending. When the flag's modifier is
  BY_LENGTH they sort by word length instead, keeping text order among words
  of equal length.

Lists render as a braces-delimited structure (see texts.structure).
"""
from .commands import Command
from .faults import FaultCode
from .outputs import Output
from .texts import are_anagrams, are_palindromes, squeeze, structure, words

# modifier value asking the sorting commands to compare words by length
BY_LENGTH = 1


class _Related(Command):
    """
    Shared protocol of the extraction commands; `relation` decides which
    (source word, argument word) pairs match.
    """
    relation = None

    def validate(self, flag, instruction, operations, /):
        if instruction.at(flag.position + 1) is not None:
            return Output.err("This flag should be the last one", code=FaultCode.NOT_LAST)
        if flag.empty:
            return Output.err("This flag requires an argument!", code=FaultCode.ARGUMENT_REQUIRED)
        return Output.ok()

    def execute(self, flag, operations, /):
        references = words(flag.argument)
        found = [
            word
            for word in words(operations.source)
            for reference in references
            if self.relation(word, reference)
        ]
        return Output.ok(structure(squeeze(found)))


class ShowAnagrams(_Related, caller="-a", alias="--anagrams"):
    relation = staticmethod(are_anagrams)


class ShowPalindromes(_Related, caller="-p", alias="--palindromes"):
    relation = staticmethod(are_palindromes)


class ShowWords(Command, caller="-s", alias="--sorted"):
    reverse = False

    def execute(self, flag, operations, /):
        key = len if flag.modifier == BY_LENGTH else None
        return Output.ok(structure(sorted(words(operations.source), key=key, reverse=self.reverse)))


class ShowWordsReverse(ShowWords, caller="-rs", alias="--reverse-sorted"):
    reverse = True


__all__ = (
    "BY_LENGTH",
    "ShowAnagrams",
    "ShowPalindromes",
    "ShowWords",
    "ShowWordsReverse",
)
