from __future__ import annotations
import argparse, json, logging, sys

from .binary.cursor import ReadCursor
from .binary.reader import load_bytes
from .errors import SizedNumberError
from .models.definition import NumericDefinition
from .models.display import (
    DecimalDisplay,
    OctalDisplay,
    binary_display,
    hex_display,
    scientific_display,
)
from .models.stamp import SizedFormat

logger = logging.getLogger(__name__)

FORMATS = ["hex", "decimal", "octal", "binary", "scientific"]


def _display_from_args(args):
    if args.format == "hex":
        return hex_display(uppercase=args.uppercase, prefix=not args.no_prefix, padded=not args.no_padding)
    if args.format == "binary":
        return binary_display(padded=not args.no_padding)
    if args.format == "scientific":
        return scientific_display(uppercase=args.uppercase)
    if args.format == "octal":
        return OctalDisplay()
    return DecimalDisplay()

def _format_from_args(args) -> SizedFormat:
    return SizedFormat(definition=NumericDefinition.from_name(args.type), display=_display_from_args(args))

def _data_from_args(args) -> bytes:
    if args.hex is not None:
        return bytes.fromhex(args.hex)
    if args.input is None:
        raise SizedNumberError("give an input file or --hex")
    return load_bytes(args.input)


def cmd_show(args):
    fmt = _format_from_args(args)
    data = _data_from_args(args)
    logger.debug("reading %s at %d from %d byte(s)", fmt.definition, args.offset, len(data))
    print(fmt.to_string(ReadCursor.new_at(data, args.offset)))

def cmd_table(args):
    fmt = _format_from_args(args)
    data = _data_from_args(args)
    step = fmt.size()
    count = args.count
    if count is None:
        count = max(0, (len(data) - args.start) // step)
    offsets = [args.start + i * step for i in range(count)]
    for off, text in zip(offsets, fmt.stamp(data, offsets)):
        print(f"{off:08x}: {text}")

def cmd_spec(args):
    fmt = _format_from_args(args)
    print(json.dumps(fmt.model_dump(mode="json"), indent=2))


def _add_format_args(sp):
    sp.add_argument("--type", "-t", required=True, help="Number type, e.g. u8, i16le, u32be, f64le")
    sp.add_argument("--format", "-f", default="decimal", choices=FORMATS)
    sp.add_argument("--uppercase", action="store_true", help="Uppercase hex digits / exponent marker")
    sp.add_argument("--no-prefix", action="store_true", help="Omit 0x in hex output")
    sp.add_argument("--no-padding", action="store_true", help="Do not zero-pad hex or binary output")

def _add_input_args(sp):
    sp.add_argument("input", nargs="?", help="Path to a binary file")
    sp.add_argument("--hex", "-x", default=None, help="Read from these hex bytes instead of a file")

def build_parser():
    p = argparse.ArgumentParser(prog="sizednum", description="Read and render fixed-width numbers from binary data")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("show", help="render the value at one offset")
    _add_input_args(sp)
    _add_format_args(sp)
    sp.add_argument("--offset", "-o", type=int, default=0)
    sp.set_defaults(func=cmd_show)

    sp = sub.add_parser("table", help="render the same type at consecutive offsets")
    _add_input_args(sp)
    _add_format_args(sp)
    sp.add_argument("--start", type=int, default=0, help="First offset")
    sp.add_argument("--count", type=int, default=None, help="Number of values (default: as many as fit)")
    sp.set_defaults(func=cmd_table)

    sp = sub.add_parser("spec", help="print the type/format pair as JSON")
    _add_format_args(sp)
    sp.set_defaults(func=cmd_spec)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    try:
        ns.func(ns)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
