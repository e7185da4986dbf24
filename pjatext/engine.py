"""
pjatext dispatch engine: parse, validate, execute, and report.

What this module provides
- Engine: owns a CommandRegistry and runs one command line at a time.
- create_engine(**options): an Engine with every stock command registered.

Run protocol (Engine.report / Engine.execute)
1. Build an Instruction from the prompt tokens. A string prompt that shlex
   can't split (an unclosed quote, a trailing escape) aborts the run with
   "Malformed command line!".
2. Input redirection: when -i/--input is present it must be the only flag,
   carry an argument, and name an existing file; the instruction is then
   rebuilt from the words of that file. Any violation aborts the run.
3. Validation, in flag order: each flag resolves to a command (callers first,
   then aliases) and is validated against the whole instruction and the run
   state. An unknown flag or an error Output aborts immediately; success
   messages are dropped.
4. A run that validated without binding a source aborts with
   "Source file is invalid!".
5. Execution, in validation order, for every validated flag. Error Outputs
   are reported like any other result and never stop the pass.
6. Rendering: one "[SUCCESS]: ..." or "[ERROR]: ..." line per Output with a
   message. When an output path was bound the report is written there and an
   empty report is returned.

Aborting means: append one error Output, mark the run state as panicked,
skip whatever is left, and still render. Nothing raised by user input ever
leaves the engine; TypeError is reserved for programming mistakes (adding a
non-command, passing a prompt that is not a string or strings).

Options
- base (default True): register SourceFile, InputFile and OutputFile.
- prefixed (default False): prefix command messages with "<flag-name> " and
  engine messages with "<ENGINE> " so every line names its origin.

Quick start
    from pjatext import create_engine

    engine = create_engine()
    print(engine.execute("-f notes.txt -w -l -s"), end="")
"""
import copy
import logging
import shlex
import sys
from collections.abc import Iterable

from . import files
from .commands import Command, CommandRegistry, InputFile, OutputFile, SourceFile
from .faults import FaultCode
from .instruction import Instruction
from .listings import ShowAnagrams, ShowPalindromes, ShowWords, ShowWordsReverse
from .metrics import CountChars, CountDigits, CountLines, CountNumbers, CountWords, FileSize
from .modifiers import WordsConsiderLength
from .operations import Operations
from .outputs import Output, Report
from .texts import words
from .utils import Unset

logger = logging.getLogger(__name__)


def _tokens(prompt):
    """
    Normalize a prompt into a list of tokens.

    - Unset: sys.argv[1:].
    - str: shell-like string, split with shlex.split (ValueError when the
      quoting is unbalanced).
    - Iterable[str]: used as-is.
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("engine prompt must be a string or an iterable of strings")
        return tokens
    raise TypeError("engine prompt must be a string or an iterable of strings")


class Engine:
    """
    Flag-driven command dispatcher.

    Commands are added once (add() chains) and the engine can then run any
    number of command lines; per-run state is rebuilt for every run.
    """

    def __init__(self, /, *, base=True, prefixed=False):
        self._commands = CommandRegistry()
        self._outputs = []
        self._operations = Operations()
        self._prefixed = bool(prefixed)

        if base:
            self.add(SourceFile()).add(InputFile()).add(OutputFile())

    @property
    def commands(self):
        return self._commands

    @property
    def prefixed(self):
        return self._prefixed

    def add(self, command, /):
        """
        Register a command instance (or a command class, instantiated with no
        arguments). Duplicates are ignored. Returns the engine for chaining.
        """
        if isinstance(command, type) and issubclass(command, Command):
            command = command()
        if not isinstance(command, Command):
            raise TypeError("add() argument must be a command or a command type")
        self._commands.register(command)
        return self

    def report(self, prompt=Unset, /):
        """
        Run one command line and return its Report.

        A report written to the output file comes back empty. If writing
        fails, the report is returned with an extra error line instead.
        """
        self._clear()
        try:
            try:
                tokens = _tokens(prompt)
            except ValueError as error:
                logger.debug("could not split the command line: %s", error)
                self._abort(Output.err("Malformed command line!", code=FaultCode.MALFORMED_PROMPT))
            else:
                self._evaluate(Instruction.build(tokens))
            report = Report(self._outputs)
            destination = self._operations.output_path
        finally:
            self._clear()

        if not destination:
            return report

        try:
            files.write_unchecked(destination, report.render())
        except OSError as error:
            logger.warning("could not write the report to %r: %s", destination, error)
            return Report((*report, self._contextualize(
                Output.err("Output file can't be written!", code=FaultCode.UNWRITABLE_FILE)
            )))

        logger.debug("report written to %r", destination)
        return Report()

    def execute(self, prompt=Unset, /):
        """
        Run one command line and return the rendered report ("" when it was
        written to the output file).
        """
        return self.report(prompt).render()

    def _clear(self):
        self._outputs = []
        self._operations = Operations()

    def _contextualize(self, output, flag=None):
        if not self._prefixed:
            return output
        origin = flag.name if flag is not None else "ENGINE"
        return copy.replace(output, message=f"<{origin}> {output.message}")

    def _abort(self, output, flag=None):
        if output.code is not None:
            logger.debug("run aborted with fault %s: %s", output.code.normalize(), output.message)
        self._outputs.append(self._contextualize(output, flag))
        self._operations.panicked = True

    def _redirect(self, instruction):
        """
        Replace an -i/--input instruction with the one stored in its file.

        Returns None when the run was aborted.
        """
        if len(instruction) != 1:
            self._abort(Output.err("Input file flag should be the only one!", code=FaultCode.INPUT_NOT_ALONE))
            return None

        flag = instruction[0]
        if flag.empty:
            self._abort(Output.err("Input file flag requires an argument!", code=FaultCode.INPUT_ARGUMENT_REQUIRED))
            return None

        invalid = Output.err("Input file flag has invalid file as an argument!", code=FaultCode.INPUT_INVALID_FILE)
        if not files.exists(flag.argument):
            self._abort(invalid)
            return None
        try:
            content = files.read_unchecked(flag.argument)
        except (OSError, UnicodeDecodeError):
            self._abort(invalid)
            return None

        logger.debug("reading the command line from %r", flag.argument)
        return Instruction.build(words(content))

    def _evaluate(self, instruction):
        operations = self._operations

        if instruction.exists(InputFile.caller, InputFile.alias):
            instruction = self._redirect(instruction)
            if instruction is None:
                return

        # command -> flag; a repeated command keeps its last flag, at its last place
        validated = {}

        for flag in instruction:
            command = self._commands.find(flag.name)
            if command is None:
                self._abort(Output.err("Invalid flag: [%s]" % flag.name, code=FaultCode.UNKNOWN_FLAG))
                break

            logger.debug("validating %s with %r", flag.name, command)
            output = command.validate(flag, instruction, operations)
            if output.is_err:
                self._abort(output, flag)
                break

            validated.pop(command, None)
            validated[command] = flag

        if not operations.panicked and not operations.source and not operations.source_path:
            self._abort(Output.err("Source file is invalid!", code=FaultCode.INVALID_SOURCE))

        if operations.panicked:
            return

        for command, flag in validated.items():
            output = command.execute(flag, operations)
            if output.message:
                self._outputs.append(self._contextualize(output, flag))


def create_engine(**options):
    """
    Build an Engine (forwarding options) with every stock command registered.
    """
    return (
        Engine(**options)
        .add(CountChars())
        .add(CountDigits())
        .add(CountLines())
        .add(CountNumbers())
        .add(CountWords())
        .add(ShowAnagrams())
        .add(FileSize())
        .add(ShowPalindromes())
        .add(ShowWords())
        .add(ShowWordsReverse())
        .add(WordsConsiderLength())
    )


__all__ = (
    "Engine",
    "create_engine",
)
