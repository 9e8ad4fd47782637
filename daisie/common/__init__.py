"""Common shared constants and tools for the DAISIE checklist project."""
from . import constants
from . import errors
from . import log
from . import util
from . import vocabulary

__all__ = [
    "constants",
    "errors",
    "log",
    "util",
    "vocabulary",
]

__version__ = "1.0"
