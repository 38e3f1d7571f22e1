#!/usr/bin/env python3
"""Print every number type at one offset of a file, in every display mode."""
import sys
from pathlib import Path

from sizednum.binary.cursor import ReadCursor
from sizednum.binary.reader import load_bytes
from sizednum.errors import SizedNumberError
from sizednum.models.common import Endian
from sizednum.models.definition import SHAPES, NumericDefinition
from sizednum.models.display import DecimalDisplay, OctalDisplay, binary_display, hex_display, scientific_display

DISPLAYS = [
    ("hex", hex_display()),
    ("dec", DecimalDisplay()),
    ("oct", OctalDisplay()),
    ("bin", binary_display(padded=False)),
    ("sci", scientific_display()),
]

def main(path: Path, offset: int = 0):
    cur = ReadCursor.new_at(load_bytes(path), offset)
    for kind, shape in SHAPES.items():
        endians = [None] if shape.size == 1 else [Endian.BIG, Endian.LITTLE]
        for endian in endians:
            d = NumericDefinition(kind=kind, endian=endian)
            try:
                value = d.read(cur)
            except SizedNumberError as e:
                print(f"{d.name():>6}  {e}")
                continue
            cells = []
            for label, disp in DISPLAYS:
                try:
                    cells.append(f"{label}={value.to_string(disp)}")
                except SizedNumberError:
                    cells.append(f"{label}=-")
            print(f"{d.name():>6}  " + "  ".join(cells))

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: dump_all_types.py FILE [OFFSET]", file=sys.stderr)
        sys.exit(2)
    main(Path(sys.argv[1]), int(sys.argv[2]) if len(sys.argv) > 2 else 0)
