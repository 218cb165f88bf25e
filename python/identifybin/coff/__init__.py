"""PE/COFF identification: machine table and header decoder."""

from .identify import parse_pe
from .types import PE_MACHINES

__all__ = [
    "parse_pe",
    "PE_MACHINES",
]
