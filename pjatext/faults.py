"""
pjatext fault codes.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing error
  the engine or a command can report. Codes are grouped by domain so logs and
  searches stay predictable.

How faults travel
- Faults are never raised across the engine boundary. A command (or the engine
  itself) returns Output.err(message, code=FaultCode.X) and the engine decides
  whether the run aborts (validation) or continues (execution).
- The code is kept on the Output for programmatic inspection and logging; the
  rendered report only shows the message.
"""
from enum import IntEnum


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - resolution (2110x)
      • UNKNOWN_FLAG, MALFORMED_PROMPT
    - input redirection (2111x)
      • INPUT_NOT_ALONE, INPUT_ARGUMENT_REQUIRED, INPUT_INVALID_FILE
    - arguments (2112x)
      • ARGUMENT_REQUIRED
    - positions (2113x)
      • NOT_LAST, LAST_FORBIDDEN, MISSING_FOLLOWER
    - resources (2114x)
      • MISSING_FILE, UNREADABLE_FILE, UNWRITABLE_FILE, VANISHED_FILE
    - state (2115x)
      • INVALID_SOURCE
    """
    # --- resolution errors ---
    UNKNOWN_FLAG                = 21101
    MALFORMED_PROMPT            = 21102

    # --- input redirection errors ---
    INPUT_NOT_ALONE             = 21111
    INPUT_ARGUMENT_REQUIRED     = 21112
    INPUT_INVALID_FILE          = 21113

    # --- argument errors ---
    ARGUMENT_REQUIRED           = 21121

    # --- positional errors ---
    NOT_LAST                    = 21131
    LAST_FORBIDDEN              = 21132
    MISSING_FOLLOWER            = 21133

    # --- resource errors ---
    MISSING_FILE                = 21141
    UNREADABLE_FILE             = 21142
    UNWRITABLE_FILE             = 21143
    VANISHED_FILE               = 21144

    # --- state errors ---
    INVALID_SOURCE              = 21151

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


__all__ = (
    "FaultCode",
)
