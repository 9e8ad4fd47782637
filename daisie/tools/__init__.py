"""Command line tools __init__."""
from . import build_checklist

__all__ = []
__all__.extend(build_checklist.__all__)
