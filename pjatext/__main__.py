"""
Command-line entry point.

    python -m pjatext -f notes.txt -w -c -l -s

The report is printed through a rich console (styled when the terminal
supports it) or written to the -o/--output file. The exit status is always 0:
error lines are part of the report, not process failures.

Environment
- PJATEXT_LOGLEVEL: logging level for diagnostics on stderr (default WARNING).

Host customization (attributes of the running __main__ module)
- __prog__: program name shown in the fancy panel title.
- __styles__: style overrides for "success-label", "error-label", "message".
"""
import logging
import os
import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .engine import create_engine
from .utils import Unset

console = Console(highlight=False)


def main(prompt=Unset, /, *, fancy=False):
    """
    Run the stock engine on `prompt` (sys.argv[1:] by default) and print the report.

    Parameters
    - prompt: Unset | str | Iterable[str]
    - fancy: bool (keyword-only)
      Wrap the report in a panel titled with the program name.
    """
    level = os.environ.get("PJATEXT_LOGLEVEL", "WARNING").upper()
    logging.basicConfig(
        level=logging.getLevelNamesMapping().get(level, logging.WARNING),
        format="%(levelname)s: %(name)s: %(message)s",
    )

    report = create_engine().report(prompt)
    if not report:
        return 0

    if fancy:
        prog = getattr(__import__("__main__"), "__prog__", "pjatext")
        console.print(Panel(report, title=Text(f"[ {prog} ]"), title_align="left"))
    else:
        console.print(report, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
