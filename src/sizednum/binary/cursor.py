from __future__ import annotations
import logging
import struct
from typing import Union

from ..errors import UnexpectedEndError
from ..models.common import Endian

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class ReadCursor:
    """
    A borrowed, read-only view of a byte buffer paired with a read position.

    Reads never move the position: calling ``read_u32`` twice on the same
    cursor reads the same four bytes twice. Use :meth:`at` to get a cursor
    somewhere else in the same buffer.
    """
    __slots__ = ("buf", "_pos")

    def __init__(self, data: BytesLike, position: int = 0):
        if position < 0:
            raise ValueError(f"position must be non-negative, got {position}")
        # flat byte view, whatever the source item format
        self.buf = memoryview(data).cast("B").toreadonly()
        self._pos = position

    @classmethod
    def new_at(cls, data: BytesLike, position: int) -> "ReadCursor":
        # No bounds check here; an out-of-range position fails on read.
        return cls(data, position)

    def at(self, position: int) -> "ReadCursor":
        return type(self)(self.buf, position)

    def position(self) -> int: return self._pos
    def remaining(self) -> int: return max(0, len(self.buf) - self._pos)

    def __repr__(self) -> str:
        return f"ReadCursor(len={len(self.buf)}, position={self._pos})"

    def read_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"cannot read a negative number of bytes ({n})")
        if n == 0:
            return b""
        end = self._pos + n
        if end > len(self.buf):
            logger.debug("short read: %d byte(s) at %d of %d", n, self._pos, len(self.buf))
            raise UnexpectedEndError(n, self._pos, len(self.buf))
        return self.buf[self._pos:end].tobytes()

    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.read_bytes(n))[0]

    def _int(self, n: int, endian: Endian, signed: bool) -> int:
        return int.from_bytes(self.read_bytes(n), Endian(endian).value, signed=signed)

    # single bytes have no order
    def read_u8(self) -> int: return self._unpack("B", 1)
    def read_i8(self) -> int: return self._unpack("b", 1)

    def read_u16(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "H", 2)
    def read_u32(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "I", 4)
    def read_u64(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "Q", 8)
    def read_u128(self, endian: Endian) -> int: return self._int(16, endian, signed=False)

    def read_i16(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "h", 2)
    def read_i32(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "i", 4)
    def read_i64(self, endian: Endian) -> int: return self._unpack(Endian(endian).struct_prefix + "q", 8)
    def read_i128(self, endian: Endian) -> int: return self._int(16, endian, signed=True)

    def read_f32(self, endian: Endian) -> float: return self._unpack(Endian(endian).struct_prefix + "f", 4)
    def read_f64(self, endian: Endian) -> float: return self._unpack(Endian(endian).struct_prefix + "d", 8)
