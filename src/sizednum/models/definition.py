from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .common import Endian

if TYPE_CHECKING:
    from ..binary.cursor import ReadCursor
    from .display import NumberDisplay
    from .value import SizedValue


class NumberKind(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    F32 = "f32"
    F64 = "f64"


@dataclass(frozen=True)
class Shape:
    size: int
    signed: bool
    is_float: bool = False


SHAPES: Dict[NumberKind, Shape] = {
    NumberKind.U8: Shape(1, signed=False),
    NumberKind.U16: Shape(2, signed=False),
    NumberKind.U32: Shape(4, signed=False),
    NumberKind.U64: Shape(8, signed=False),
    NumberKind.U128: Shape(16, signed=False),
    NumberKind.I8: Shape(1, signed=True),
    NumberKind.I16: Shape(2, signed=True),
    NumberKind.I32: Shape(4, signed=True),
    NumberKind.I64: Shape(8, signed=True),
    NumberKind.I128: Shape(16, signed=True),
    NumberKind.F32: Shape(4, signed=True, is_float=True),
    NumberKind.F64: Shape(8, signed=True, is_float=True),
}

_NAME_RE = re.compile(r"^(?P<kind>[uif](?:8|16|32|64|128))(?P<endian>be|le)?$")
_ENDIAN_SUFFIX = {"be": Endian.BIG, "le": Endian.LITTLE}
_KIND_NAMES = frozenset(k.value for k in NumberKind)


class NumericDefinition(BaseModel):
    """
    How to interpret a run of bytes as a number: width, signedness and,
    for anything wider than a byte, the byte order.

    Build one with the shorthand constructors (``NumericDefinition.u32(Endian.BIG)``)
    or from a short name (``NumericDefinition.from_name("u32be")``).
    """
    model_config = ConfigDict(frozen=True)

    kind: NumberKind
    endian: Optional[Endian] = None

    @model_validator(mode="after")
    def check_endian(self) -> "NumericDefinition":
        one_byte = SHAPES[self.kind].size == 1
        if one_byte and self.endian is not None:
            raise ValueError(f"{self.kind.value} is a single byte and takes no endian")
        if not one_byte and self.endian is None:
            raise ValueError(f"{self.kind.value} needs an endian")
        return self

    # Shorthand constructors
    @classmethod
    def u8(cls) -> "NumericDefinition": return cls(kind=NumberKind.U8)
    @classmethod
    def u16(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.U16, endian=endian)
    @classmethod
    def u32(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.U32, endian=endian)
    @classmethod
    def u64(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.U64, endian=endian)
    @classmethod
    def u128(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.U128, endian=endian)
    @classmethod
    def i8(cls) -> "NumericDefinition": return cls(kind=NumberKind.I8)
    @classmethod
    def i16(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.I16, endian=endian)
    @classmethod
    def i32(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.I32, endian=endian)
    @classmethod
    def i64(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.I64, endian=endian)
    @classmethod
    def i128(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.I128, endian=endian)
    @classmethod
    def f32(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.F32, endian=endian)
    @classmethod
    def f64(cls, endian: Endian) -> "NumericDefinition": return cls(kind=NumberKind.F64, endian=endian)

    @classmethod
    def from_name(cls, name: str) -> "NumericDefinition":
        """Parse ``u8``, ``i16le``, ``u32be``, ``f64le`` and friends."""
        m = _NAME_RE.match(name.strip().lower())
        if m is None or m.group("kind") not in _KIND_NAMES:
            raise ValueError(f"unknown number type {name!r}")
        suffix = m.group("endian")
        return cls(kind=NumberKind(m.group("kind")), endian=_ENDIAN_SUFFIX[suffix] if suffix else None)

    def name(self) -> str:
        if self.endian is None:
            return self.kind.value
        return self.kind.value + ("be" if self.endian is Endian.BIG else "le")

    def __str__(self) -> str:
        return self.name()

    @property
    def shape(self) -> Shape:
        return SHAPES[self.kind]

    def size(self) -> int:
        return self.shape.size

    def is_signed(self) -> bool:
        return self.shape.signed

    def is_float(self) -> bool:
        return self.shape.is_float

    # Reading lives in the binary layer
    def read(self, cursor: "ReadCursor") -> "SizedValue":
        from ..binary.reader import read_value
        return read_value(self, cursor)

    def to_u64(self, cursor: "ReadCursor") -> int:
        from ..binary.reader import to_u64
        return to_u64(self, cursor)

    def to_i64(self, cursor: "ReadCursor") -> int:
        from ..binary.reader import to_i64
        return to_i64(self, cursor)

    def to_string(self, cursor: "ReadCursor", display: "NumberDisplay") -> str:
        return self.read(cursor).to_string(display)
