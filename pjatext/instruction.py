"""
pjatext instruction layer: rebuild structured flags from a flat token stream.

What this module provides
- Flag: one parsed directive (name, argument, position, modifier).
- Instruction: the ordered flags of one command line, with lookups by name,
  by position, and by (caller, alias) pair.

Building rules (Instruction.build)
- Tokens are read left to right; empty tokens are skipped.
- A token starting with '-' opens a new flag; the flag being built (if any)
  is finalized and stored first.
- Any other token is appended to the open flag's argument followed by one
  space, which is how multi-word arguments are reassembled after the shell
  split them. Plain tokens seen before the first flag are dropped.
- Finalizing strips exactly one trailing character from a non-empty argument
  (the separator added by the last append), nothing more.
- Positions count flags only and always increase by one.

Nothing here raises on odd input: an unknown flag name is the engine's
business, not the builder's.

Example
    >>> instruction = Instruction.build(["-f", "notes.txt", "-a", "cat", "act"])
    >>> [(flag.name, flag.argument, flag.position) for flag in instruction]
    [('-f', 'notes.txt', 0), ('-a', 'cat act', 1)]
"""
from collections.abc import Iterable, Sequence

from .utils import mirror


class Flag:
    """
    One parsed unit of a command line.

    Fields
    - name: the literal token that opened the flag (caller or alias form).
    - argument: the space-joined plain tokens that followed it ("" if none).
    - position: zero-based ordinal among flags only.
    - modifier: integer side channel, 0 by default. It is the only mutable
      field: another flag's validation may set it to change how this flag's
      command executes (for example, sort by length instead of lexically).
    """
    __slots__ = ("_name", "_argument", "_position", "modifier")

    name = mirror("name")
    argument = mirror("argument")
    position = mirror("position")

    def __init__(self, name, position, /, argument="", modifier=0):
        if not isinstance(name, str) or not name:
            raise TypeError("Flag() name must be a non-empty string")
        if not isinstance(position, int) or position < 0:
            raise ValueError("Flag() position must be a non-negative integer")
        if not isinstance(argument, str):
            raise TypeError("Flag() argument must be a string")
        self._name = name
        self._position = position
        self._argument = argument
        self.modifier = modifier

    @property
    def empty(self):
        """
        True when no argument was given to this flag.
        """
        return not self._argument

    def name_in(self, names, /):
        return self._name in names

    def _append(self, token):
        self._argument += token + " "

    def _finalize(self):
        # drop the separator left behind by the last append
        if self._argument:
            self._argument = self._argument[:-1]
        return self

    def __rich_repr__(self):
        yield "name", self._name
        yield "argument", self._argument
        yield "position", self._position
        yield "modifier", self.modifier

    def __repr__(self):
        return f"flag({", ".join("%s=%r" % pair for pair in self.__rich_repr__())})"


class Instruction(Sequence):
    """
    Ordered, immutable sequence of the flags parsed from one command line.

    Lookups
    - get(name): first flag with exactly that name, or None.
    - at(position): the flag at a flag-position, or None.
    - exists(caller, alias): True if any flag uses either name.

    The sequence itself never changes; flags are shared by reference so a
    modifier set on one during validation is seen by whoever reads it next.
    """

    def __init__(self, flags=(), /):
        flags = tuple(flags)
        previous = -1
        for flag in flags:
            if not isinstance(flag, Flag):
                raise TypeError("Instruction() argument must be an iterable of flags")
            if flag.position <= previous:
                raise ValueError("Instruction() flags must have strictly increasing positions")
            previous = flag.position
        self._flags = flags

    @classmethod
    def build(cls, tokens, /):
        """
        Parse a flat token stream into an Instruction (see module docstring).

        Raises
        - TypeError: when tokens is not an iterable of strings.
        """
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("Instruction.build() argument must be an iterable of strings")

        flags = []
        current = None
        position = 0

        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("Instruction.build() argument must be an iterable of strings")
            if not token:
                continue
            if token.startswith("-"):
                if current is not None:
                    flags.append(current._finalize())
                current = Flag(token, position)
                position += 1
            elif current is not None:
                current._append(token)

        if current is not None:
            flags.append(current._finalize())

        return cls(flags)

    @property
    def flags(self):
        return self._flags

    def get(self, name, /):
        for flag in self._flags:
            if flag.name == name:
                return flag
        return None

    def at(self, position, /):
        for flag in self._flags:
            if flag.position == position:
                return flag
        return None

    def exists(self, caller, alias, /):
        return any(flag.name == caller or flag.name == alias for flag in self._flags)

    def __getitem__(self, index):
        return self._flags[index]

    def __len__(self):
        return len(self._flags)

    def __repr__(self):
        return f"instruction({", ".join(map(repr, self._flags))})"


__all__ = (
    "Flag",
    "Instruction",
)
