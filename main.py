import sys

from rich.pretty import pprint

from pjatext import create_engine
from pjatext.__main__ import main

__prog__ = "pjatext"
__styles__ = {
    "success-label": "bold #9CE19C",
    "error-label": "bold #FF4DA6",
}


if __name__ == '__main__':
    if len(sys.argv) == 1:
        pprint(create_engine().commands)
    else:
        sys.exit(main(fancy=True))
