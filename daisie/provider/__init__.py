"""Data provider module __init__."""
from . import constants
from . import daisie_data
from . import gbif_api

__all__ = [
    "constants",
    "daisie_data",
    "gbif_api",
]

__version__ = "1.0"
