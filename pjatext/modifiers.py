"""
Modifying commands: flags that change how another flag executes.

WordsConsiderLength (-l/--by-length) reports nothing itself. During
validation it looks at the flag right after it (position + 1) and:
- fails when there is none ("This flag can't be the last one!"),
- accepts another -l/--by-length (a chain of modifiers ends on a target),
- sets the follower's modifier to BY_LENGTH when it is one of its targets,
- fails otherwise ("Missing required flag after this one!").

Because the engine validates in flag order and flags are shared by
reference, the target sees the new modifier when it executes.
"""
from .commands import Command
from .faults import FaultCode
from .listings import BY_LENGTH, ShowWords, ShowWordsReverse
from .outputs import Output


class WordsConsiderLength(Command, caller="-l", alias="--by-length"):
    """
    Make the following sorting flag compare words by length.

    Parameters
    - targets: Iterable[Command | type[Command]]
      Commands whose flags may follow this one (defaults to the two sorting
      commands). Both the caller and the alias of each target are accepted.
    """

    def __init__(self, targets=(ShowWords, ShowWordsReverse), /):
        names = set()
        for target in targets:
            if not isinstance(target, Command) and not (isinstance(target, type) and issubclass(target, Command)):
                raise TypeError("WordsConsiderLength() targets must be commands or command types")
            if target.caller is None:
                raise TypeError(f"WordsConsiderLength() target {target!r} has no caller and alias")
            names.update((target.caller, target.alias))
        self._targets = frozenset(names)

    @property
    def targets(self):
        return self._targets

    def validate(self, flag, instruction, operations, /):
        follower = instruction.at(flag.position + 1)

        if follower is None:
            return Output.err("This flag can't be the last one!", code=FaultCode.LAST_FORBIDDEN)
        if follower.name_in((self.caller, self.alias)):
            return Output.ok()
        if not follower.name_in(self._targets):
            return Output.err("Missing required flag after this one!", code=FaultCode.MISSING_FOLLOWER)

        follower.modifier = BY_LENGTH
        return Output.ok()

    def execute(self, flag, operations, /):
        return Output()

    def __rich_repr__(self):
        yield "caller", self.caller
        yield "alias", self.alias
        yield "targets", sorted(self._targets)


__all__ = (
    "WordsConsiderLength",
)
