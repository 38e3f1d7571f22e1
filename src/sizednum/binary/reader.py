from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Union

from .cursor import ReadCursor
from ..errors import NotRepresentableError, ReadError
from ..models.definition import NumberKind, NumericDefinition
from ..models.value import SizedFloat, SizedInteger, SizedValue

logger = logging.getLogger(__name__)


# -----------------------------
# Dispatch
# -----------------------------

_Reader = Callable[[ReadCursor, NumericDefinition], Union[int, float]]

_READERS: Dict[NumberKind, _Reader] = {
    NumberKind.U8: lambda cur, d: cur.read_u8(),
    NumberKind.U16: lambda cur, d: cur.read_u16(d.endian),
    NumberKind.U32: lambda cur, d: cur.read_u32(d.endian),
    NumberKind.U64: lambda cur, d: cur.read_u64(d.endian),
    NumberKind.U128: lambda cur, d: cur.read_u128(d.endian),
    NumberKind.I8: lambda cur, d: cur.read_i8(),
    NumberKind.I16: lambda cur, d: cur.read_i16(d.endian),
    NumberKind.I32: lambda cur, d: cur.read_i32(d.endian),
    NumberKind.I64: lambda cur, d: cur.read_i64(d.endian),
    NumberKind.I128: lambda cur, d: cur.read_i128(d.endian),
    NumberKind.F32: lambda cur, d: cur.read_f32(d.endian),
    NumberKind.F64: lambda cur, d: cur.read_f64(d.endian),
}

# Shapes that widen losslessly to 64 bits
_U64_KINDS = frozenset({NumberKind.U8, NumberKind.U16, NumberKind.U32, NumberKind.U64})
_I64_KINDS = frozenset({NumberKind.I8, NumberKind.I16, NumberKind.I32, NumberKind.I64})


def _read_raw(definition: NumericDefinition, cur: ReadCursor) -> Union[int, float]:
    return _READERS[definition.kind](cur, definition)


# -----------------------------
# Public API
# -----------------------------

def read_value(definition: NumericDefinition, cur: ReadCursor) -> SizedValue:
    """
    Read one value of the given shape at the cursor's position.

    Raises UnexpectedEndError if the buffer is too short; the cursor is
    never moved, so the same call can be repeated or re-aimed with ``cur.at``.
    """
    raw = _read_raw(definition, cur)
    shape = definition.shape
    if shape.is_float:
        return SizedFloat(value=raw, size=shape.size)
    return SizedInteger(value=raw, size=shape.size, signed=shape.signed)


def to_u64(definition: NumericDefinition, cur: ReadCursor) -> int:
    """Read and zero-extend an unsigned value of at most 64 bits."""
    if definition.kind not in _U64_KINDS:
        raise NotRepresentableError(definition.name(), "u64")
    return _read_raw(definition, cur)


def to_i64(definition: NumericDefinition, cur: ReadCursor) -> int:
    """Read and sign-extend a signed value of at most 64 bits."""
    if definition.kind not in _I64_KINDS:
        raise NotRepresentableError(definition.name(), "i64")
    return _read_raw(definition, cur)


def read_many(definition: NumericDefinition, data, offsets) -> list:
    """Read the same shape at each offset. Stops at the first failing read."""
    base = data if isinstance(data, ReadCursor) else ReadCursor(data)
    out = []
    for off in offsets:
        try:
            out.append(read_value(definition, base.at(off)))
        except ReadError:
            logger.debug("read of %s failed at offset %d", definition, off)
            raise
    return out


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: Union[str, Path, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()
