"""
pjatext result/output model.

What this module provides
- Result: the three states a command result can be in (ok, err, undefined).
- Output: an immutable (result, message[, fault code]) value returned by every
  validate/execute call. Failure is a first-class return value, never an
  exception crossing the command boundary.
- Report: the ordered outputs of one run, renderable as the plain-text report
  and as a Rich renderable for terminals.

Rendering rules
- Outputs with an empty message are skipped, whatever their result.
- Ok renders as "[SUCCESS]: <message>".
- Err renders as "[ERROR]: <message>".
- Undefined carries "nothing to report"; if one ever carries a message it is
  rendered with the error label, since it is not a success.

Styling
- The Rich rendering honours a __styles__ mapping in __main__ with the keys
  "success-label", "error-label" and "message".
"""
from collections import defaultdict
from collections.abc import Sequence
from enum import Enum

from rich.console import Group
from rich.text import Text

from .faults import FaultCode
from .utils import Unset, mirror


class Result(Enum):
    """
    State of an Output.

    OK        - success
    ERR       - failure
    UNDEFINED - nothing to report (distinct from an empty success)
    """
    OK = "ok"
    ERR = "err"
    UNDEFINED = "undefined"


def _styles():
    return defaultdict(str, {
        "success-label": "bold green",
        "error-label": "bold red",
        "message": "",
    } | getattr(__import__("__main__"), "__styles__", {}))


class Output:
    """
    Immutable wrapper around a command's result message.

    Construction
    - Output()                  → undefined, no message
    - Output.ok(message)        → success
    - Output.err(message, code) → failure, optionally tagged with a FaultCode
    - Output(result, message)   → any combination (used by tests and hosts)

    Properties
    - result, message, code (code is None unless a FaultCode was given)
    """
    __slots__ = ("_result", "_message", "_code")

    result = mirror("result")
    message = mirror("message")
    code = mirror("code")

    def __init__(self, result=Result.UNDEFINED, message="", /, code=Unset):
        if not isinstance(result, Result):
            raise TypeError("Output() result must be a Result")
        if not isinstance(message, str):
            raise TypeError("Output() message must be a string")
        if code is not Unset and not isinstance(code, FaultCode):
            raise TypeError("Output() code must be a FaultCode")
        self._result = result
        self._message = message
        self._code = code

    @classmethod
    def ok(cls, message="", /):
        return cls(Result.OK, message)

    @classmethod
    def err(cls, message="", /, code=Unset):
        return cls(Result.ERR, message, code=code)

    @property
    def is_ok(self):
        return self._result is Result.OK

    @property
    def is_err(self):
        return self._result is Result.ERR

    @property
    def is_undefined(self):
        return self._result is Result.UNDEFINED

    @property
    def label(self):
        return "SUCCESS" if self.is_ok else "ERROR"

    def render(self):
        """
        Return the report line for this output (without the newline).
        """
        return f"[{self.label}]: {self._message}"

    def __rich__(self):
        styles = _styles()
        return Text.assemble(
            "[",
            Text(self.label, styles["success-label" if self.is_ok else "error-label"]),
            "]: ",
            Text(self._message, styles["message"]),
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(
            overrides.get("result", self._result),
            overrides.get("message", self._message),
            code=overrides.get("code", self._code),
        )

    def __eq__(self, other):
        if not isinstance(other, Output):
            return NotImplemented
        return (self._result, self._message, self._code) == (other._result, other._message, other._code)

    def __hash__(self):
        return hash((self._result, self._message, self._code))

    def __repr__(self):
        if self._code is Unset:
            return f"output({self._result.value}, {self._message!r})"
        return f"output({self._result.value}, {self._message!r}, code={self._code.name})"


class Report(Sequence):
    """
    Ordered, immutable outputs of one engine run.

    - render() / str(report): the plain-text report, one line per output that
      carries a message, each terminated by a newline.
    - __rich__(): a Group of styled lines for rich consoles.
    """

    def __init__(self, outputs=(), /):
        outputs = tuple(outputs)
        for output in outputs:
            if not isinstance(output, Output):
                raise TypeError("Report() argument must be an iterable of outputs")
        self._outputs = outputs

    def __getitem__(self, index):
        return self._outputs[index]

    def __len__(self):
        return len(self._outputs)

    def render(self):
        return "".join(output.render() + "\n" for output in self._outputs if output.message)

    __str__ = render

    def __rich__(self):
        return Group(*(output for output in self._outputs if output.message))

    def __repr__(self):
        return f"report({", ".join(map(repr, self._outputs))})"


__all__ = (
    "Result",
    "Output",
    "Report",
)
