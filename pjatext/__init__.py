__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'pjatext'
__license__ = 'MIT'
__version__ = "0.1.0"

from .commands import *
from .engine import *
from .faults import *
from .instruction import *
from .listings import *
from .metrics import *
from .modifiers import *
from .operations import *
from .outputs import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the commands
__all__ += commands.__all__  # type: ignore[attr-defined]
# Load the exposed API of the engine
__all__ += engine.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the instruction
__all__ += instruction.__all__  # type: ignore[attr-defined]
# Load the exposed API of the stock commands
__all__ += listings.__all__  # type: ignore[attr-defined]
__all__ += metrics.__all__  # type: ignore[attr-defined]
__all__ += modifiers.__all__  # type: ignore[attr-defined]
# Load the exposed API of the run state and outputs
__all__ += operations.__all__  # type: ignore[attr-defined]
__all__ += outputs.__all__  # type: ignore[attr-defined]
