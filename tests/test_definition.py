import pytest
from pydantic import ValidationError

from sizednum.binary.cursor import ReadCursor
from sizednum.errors import ConversionError, NotRepresentableError, UnexpectedEndError
from sizednum.models.common import Endian
from sizednum.models.definition import SHAPES, NumberKind, NumericDefinition
from sizednum.models.value import SizedFloat, SizedInteger

BE = Endian.BIG
LE = Endian.LITTLE


def _all_definitions(endian=BE):
    return [
        NumericDefinition(kind=kind, endian=None if shape.size == 1 else endian)
        for kind, shape in SHAPES.items()
    ]


def test_sizes():
    expected = {
        "u8": 1, "u16": 2, "u32": 4, "u64": 8, "u128": 16,
        "i8": 1, "i16": 2, "i32": 4, "i64": 8, "i128": 16,
        "f32": 4, "f64": 8,
    }
    for d in _all_definitions():
        assert d.size() == expected[d.kind.value]


def test_read_succeeds_iff_it_fits():
    data = bytes(range(8))
    for d in _all_definitions():
        for offset in range(0, 20):
            cur = ReadCursor.new_at(data, offset)
            if offset + d.size() <= len(data):
                d.read(cur)
            else:
                with pytest.raises(UnexpectedEndError):
                    d.read(cur)


def test_read_results():
    cur = ReadCursor(b"\x00\x00\x12\xab\xff\xff\xff\xff")
    assert NumericDefinition.u32(BE).read(cur) == SizedInteger(0x12AB, size=4, signed=False)
    assert NumericDefinition.i32(BE).read(cur.at(4)) == SizedInteger(-1, size=4, signed=True)
    assert NumericDefinition.u16(LE).read(cur.at(2)) == SizedInteger(0xAB12, size=2)
    assert NumericDefinition.u8().read(cur.at(2)) == SizedInteger(0x12, size=1)

    f = NumericDefinition.f32(BE).read(ReadCursor(b"\x41\xc8\x00\x00"))
    assert f == SizedFloat(25.0, size=4)


def test_to_u64():
    cur = ReadCursor(b"\xff" * 8)
    assert NumericDefinition.u8().to_u64(cur) == 0xFF
    assert NumericDefinition.u16(BE).to_u64(cur) == 0xFFFF
    assert NumericDefinition.u32(LE).to_u64(cur) == 0xFFFFFFFF
    assert NumericDefinition.u64(BE).to_u64(cur) == 0xFFFFFFFFFFFFFFFF


def test_to_i64_sign_extends_every_width():
    cur = ReadCursor(b"\x80\x00\x00\x00\x00\x00\x00\x00")
    assert NumericDefinition.i8().to_i64(cur) == -128
    assert NumericDefinition.i16(BE).to_i64(cur) == -32768
    assert NumericDefinition.i32(BE).to_i64(cur) == -2147483648
    assert NumericDefinition.i64(BE).to_i64(cur) == -(1 << 63)

    ones = ReadCursor(b"\xff" * 8)
    for d in (NumericDefinition.i16(LE), NumericDefinition.i32(LE), NumericDefinition.i64(LE)):
        assert d.to_i64(ones) == -1


def test_conversion_guards_ignore_the_bytes():
    # The empty buffer would fail any read, so the guard must fire first
    empty = ReadCursor(b"")
    full = ReadCursor(b"\x00" * 16)
    u64_ok = {NumberKind.U8, NumberKind.U16, NumberKind.U32, NumberKind.U64}
    i64_ok = {NumberKind.I8, NumberKind.I16, NumberKind.I32, NumberKind.I64}

    for endian in (BE, LE):
        for d in _all_definitions(endian):
            if d.kind not in u64_ok:
                for cur in (empty, full):
                    with pytest.raises(NotRepresentableError):
                        d.to_u64(cur)
            if d.kind not in i64_ok:
                for cur in (empty, full):
                    with pytest.raises(NotRepresentableError):
                        d.to_i64(cur)


def test_conversion_of_short_buffer_is_a_read_error():
    with pytest.raises(UnexpectedEndError):
        NumericDefinition.u32(BE).to_u64(ReadCursor(b"\x00\x00"))
    with pytest.raises(UnexpectedEndError):
        NumericDefinition.i64(BE).to_i64(ReadCursor(b"\x00" * 7))


def test_not_representable_message():
    with pytest.raises(ConversionError, match="u128be cannot be represented as u64"):
        NumericDefinition.u128(BE).to_u64(ReadCursor(bytes(16)))


def test_endian_required_only_for_multibyte():
    with pytest.raises(ValidationError):
        NumericDefinition(kind=NumberKind.U16)
    with pytest.raises(ValidationError):
        NumericDefinition(kind=NumberKind.I8, endian=BE)
    assert NumericDefinition(kind=NumberKind.F64, endian=LE).is_float()


def test_from_name():
    assert NumericDefinition.from_name("u8") == NumericDefinition.u8()
    assert NumericDefinition.from_name("u32be") == NumericDefinition.u32(BE)
    assert NumericDefinition.from_name("I16LE") == NumericDefinition.i16(LE)
    assert NumericDefinition.from_name("f64le") == NumericDefinition.f64(LE)
    assert NumericDefinition.from_name("i128be").name() == "i128be"

    for bad in ("u24be", "u32", "u8le", "f16be", "float"):
        with pytest.raises(ValueError):
            NumericDefinition.from_name(bad)


def test_signedness():
    assert not NumericDefinition.u64(BE).is_signed()
    assert NumericDefinition.i8().is_signed()
    assert str(NumericDefinition.u16(LE)) == "u16le"
