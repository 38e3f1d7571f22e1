from __future__ import annotations
from enum import Enum

class Endian(str, Enum):
    """Byte order for multi-byte values."""
    BIG = "big"        # 0x1234 -> 12 34
    LITTLE = "little"  # 0x1234 -> 34 12

    @property
    def struct_prefix(self) -> str:
        return ">" if self is Endian.BIG else "<"
