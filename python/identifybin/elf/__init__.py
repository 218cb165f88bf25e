"""ELF identification: constants and header decoder."""

from .identify import parse_elf
from .types import ELF_ENDIANNESS, ELF_MACHINES

__all__ = [
    "parse_elf",
    "ELF_ENDIANNESS",
    "ELF_MACHINES",
]
