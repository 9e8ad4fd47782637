"""Data processing module __init__."""
from . import (
    assembler, checklist, description, distribution, normalize, reconcile,
    references, taxon, vernacular)

__all__ = []
__all__.extend(assembler.__all__)
__all__.extend(checklist.__all__)
__all__.extend(description.__all__)
__all__.extend(distribution.__all__)
__all__.extend(normalize.__all__)
__all__.extend(reconcile.__all__)
__all__.extend(references.__all__)
__all__.extend(taxon.__all__)
__all__.extend(vernacular.__all__)
