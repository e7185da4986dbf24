"""
pjatext command layer: the command contract, its registry, and the base commands.

What this module provides
- Command: abstract unit of work bound to a flag by two names, a short
  "caller" (e.g. -w) and a long "alias" (e.g. --words). Subclasses declare
  them as class keywords and implement the two-phase protocol:
  • validate(flag, instruction, operations) → Output
    Runs in flag order before anything executes. An error Output aborts the
    run. May bind run state (source text, output path) and may set the
    modifier of another flag found by position in the instruction.
  • execute(flag, operations) → Output
    Runs only when every flag validated. Errors are reported, never fatal.
- CommandRegistry: insertion-ordered store of command instances with lookup
  by caller or alias; duplicate registrations are ignored.
- Base commands the engine depends on:
  • SourceFile  (-f/--file)   binds the source text.
  • InputFile   (-i/--input)  marker for command-line redirection (the engine
                              special-cases it by name).
  • OutputFile  (-o/--output) binds the report destination.

Declaring a command
    class CountVowels(Command, caller="-v", alias="--vowels"):
        def execute(self, flag, operations, /):
            return Output.ok("Vowels: %d" % sum(map(operations.source.count, "aeiou")))

Design notes
- Names must look like switches: -x, -xy, --name, --long-name.
- Commands never raise for user input; every failure is an Output.err with
  a FaultCode.
"""
import functools
import logging
import operator
import re
from abc import ABCMeta, abstractmethod

from . import files
from .faults import FaultCode
from .outputs import Output
from .utils import rename

logger = logging.getLogger(__name__)

# same spelling rules as any shell-style switch: -x, --name, --long-name
_SWITCH = re.compile(r"--?[^\W\d_](-?[^\W_]+)*")


class CommandType(ABCMeta):
    """
    Metaclass that binds caller/alias names to Command classes.

    Responsibilities
    - Accept `caller` and `alias` as class keywords, validate their spelling,
      and store them as class attributes (readable on the class and on every
      instance).
    - Derive __typename__ from the class name (camel-case split with hyphens)
      for logs and representations.
    - Provide stable __repr__/__rich_repr__ implementations.
    - Refuse to instantiate a command class that has no names.
    """

    def __new__(cls, name, bases, namespace, **options):
        names = {key: options.pop(key) for key in ("caller", "alias") if key in options}

        if names and len(names) != 2:
            raise TypeError(f"command {name!r} requires both a caller and an alias")
        for key, value in names.items():
            if not isinstance(value, str):
                raise TypeError(f"command {name!r} {key} must be a string")
            if not _SWITCH.fullmatch(value):
                raise ValueError(f"command {name!r} {key} {value!r} is not a valid flag name")

        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | names,
            **options
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        # a class may extend its own fields; otherwise show the names only
        if "__rich_repr__" not in namespace:
            @rename("__rich_repr__")
            def __rich_repr__(self):
                yield "caller", self.caller
                yield "alias", self.alias
            self.__rich_repr__ = __rich_repr__

        return self

    def __call__(cls, *args, **kwargs):
        if cls.caller is None:
            raise TypeError(f"can't instantiate command {cls.__name__!r} without a caller and an alias")
        return super().__call__(*args, **kwargs)


class Command(metaclass=CommandType):
    """
    Abstract command bound to a flag.

    Subclasses set `caller` and `alias` through class keywords and implement
    execute(); validate() succeeds by default.
    """
    caller = None
    alias = None

    def validate(self, flag, instruction, operations, /):
        """
        Check the flag in the context of the whole instruction.

        An error Output stops the run: nothing after this flag is validated and
        nothing executes. Success messages are discarded by the engine.
        """
        return Output.ok()

    @abstractmethod
    def execute(self, flag, operations, /):
        """
        Produce this command's result. An Output with an empty message is not reported.
        """
        raise NotImplementedError


class CommandRegistry:
    """
    Insertion-ordered collection of command instances.

    Lookups return the first match in registration order, or None.
    """

    def __init__(self):
        self._commands = []

    def register(self, command, /):
        """
        Add a command unless exists(command.caller, command.alias) says it is
        already known. Returns True when the command was added.
        """
        if not isinstance(command, Command):
            raise TypeError("register() argument must be a command")
        if self.exists(command.caller, command.alias):
            logger.debug("ignoring duplicate registration of %r", command)
            return False
        self._commands.append(command)
        return True

    def by_caller(self, name, /):
        return next((command for command in self._commands if command.caller == name), None)

    def by_alias(self, name, /):
        return next((command for command in self._commands if command.alias == name), None)

    def find(self, name, /):
        """
        Resolve a flag name: callers are searched first, then aliases.
        """
        command = self.by_caller(name)
        if command is None:
            command = self.by_alias(name)
        return command

    def exists(self, caller, alias, /):
        """
        True when some command has this caller and some command has this alias.

        The two names are matched independently, so they may belong to two
        different commands: (-x, --words) "exists" once -x and --words are both
        taken, even by unrelated commands.
        """
        return (
            any(command.caller == caller for command in self._commands) and
            any(command.alias == alias for command in self._commands)
        )

    def __iter__(self):
        return iter(tuple(self._commands))

    def __len__(self):
        return len(self._commands)

    def __contains__(self, command):
        return any(command is registered for registered in self._commands)

    def __repr__(self):
        return f"command-registry({", ".join(map(repr, self._commands))})"


class SourceFile(Command, caller="-f", alias="--file"):
    """
    Bind the source text: requires an argument naming an existing, readable file.
    """

    def validate(self, flag, instruction, operations, /):
        if flag.empty:
            return Output.err("This flag requires an argument!", code=FaultCode.ARGUMENT_REQUIRED)
        if not files.exists(flag.argument):
            return Output.err("Provided file doesn't exist!", code=FaultCode.MISSING_FILE)
        try:
            source = files.read_unchecked(flag.argument)
        except (OSError, UnicodeDecodeError):
            return Output.err("Provided file can't be read!", code=FaultCode.UNREADABLE_FILE)

        operations.source_path = flag.argument
        operations.source = source
        return Output.ok()

    def execute(self, flag, operations, /):
        return Output()


class InputFile(Command, caller="-i", alias="--input"):
    """
    Marker for command-line redirection; the engine does the work.
    """

    def execute(self, flag, operations, /):
        return Output()


class OutputFile(Command, caller="-o", alias="--output"):
    """
    Bind the report destination: requires an argument.
    """

    def validate(self, flag, instruction, operations, /):
        if flag.empty:
            return Output.err("This flag requires an argument!", code=FaultCode.ARGUMENT_REQUIRED)
        operations.output_path = flag.argument
        return Output.ok()

    def execute(self, flag, operations, /):
        return Output()


__all__ = (
    "Command",
    "CommandRegistry",
    "SourceFile",
    "InputFile",
    "OutputFile",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del CommandType
