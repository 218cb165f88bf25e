"""Mach-O identification: magic layouts, cputype table and header decoder."""

from .identify import parse_macho
from .types import MACHO_CPU_TYPES, MACHO_HEADER_LAYOUTS, MachoHeaderLayout

__all__ = [
    "parse_macho",
    "MACHO_CPU_TYPES",
    "MACHO_HEADER_LAYOUTS",
    "MachoHeaderLayout",
]
