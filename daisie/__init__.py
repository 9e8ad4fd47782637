"""Base init module."""
from . import common
from . import process
from . import provider

__all__ = [
    "common",
    "process",
    "provider",
]

__version__ = "1.0"
