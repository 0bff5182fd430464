"""
__main__.py – CLI entry-point for the pcxdec package.

Usage:  python -m pcxdec <command> [options] <files…>

Commands
--------
info    FILE…    Print the header of each PCX file.
topng   FILE…    Decode PCX files and save them as PNG.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


_COLOUR_MODELS = {
    (8, 1): "8-bit indexed (256-colour palette)",
    (8, 3): "24-bit true colour",
}


def _colour_model(hdr) -> str:
    key = (hdr.bits_per_pixel, hdr.planes)
    if key in _COLOUR_MODELS:
        return _COLOUR_MODELS[key]
    colours = 1 << (hdr.bits_per_pixel * hdr.planes)
    return f"{hdr.planes}-plane planar ({colours} colours, header palette)"


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    """Print header fields of PCX files."""
    from pcxdec.header import parse_header

    errors = 0
    for fp in (Path(f) for f in args.files):
        try:
            data = fp.read_bytes()
            hdr = parse_header(data)
        except (OSError, ValueError) as exc:
            print(f"Error reading {fp.name}: {exc}", file=sys.stderr)
            errors += 1
            continue
        print(f"{fp.name}:")
        print(f"  File size:      {len(data)} bytes")
        print(f"  Version:        {hdr.version}")
        print(f"  Encoding:       {hdr.encoding}")
        print(f"  Dimensions:     {hdr.width} x {hdr.height}")
        print(f"  Bounding box:   ({hdr.xmin}, {hdr.ymin}) - ({hdr.xmax}, {hdr.ymax})")
        print(f"  Resolution:     {hdr.hdpi} x {hdr.vdpi} dpi")
        print(f"  Bits per pixel: {hdr.bits_per_pixel}")
        print(f"  Planes:         {hdr.planes}")
        print(f"  Bytes per line: {hdr.bytes_per_line}")
        print(f"  Colour model:   {_colour_model(hdr)}")
    return 1 if errors else 0


def cmd_topng(args: argparse.Namespace) -> int:
    """Convert PCX files to PNG."""
    from pcxdec.pcx import read_pcx

    outdir = Path(args.outdir) if args.outdir else None
    if outdir:
        outdir.mkdir(parents=True, exist_ok=True)
    errors = 0
    for fp in (Path(f) for f in args.files):
        dest = (outdir or fp.parent) / (fp.stem + ".png")
        if args.verbose:
            print(f"Converting {fp.name} → {dest.name}")
        try:
            img = read_pcx(fp)
            img.save(str(dest))
        except (OSError, ValueError) as exc:
            print(f"Error converting {fp.name}: {exc}", file=sys.stderr)
            errors += 1
    return 1 if errors else 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pcxdec",
        description="ZSoft PCX image decoder.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print progress messages.")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Log decoder details to stderr.")
    parser.add_argument("-o", "--outdir", metavar="DIR",
                        help="Output directory (default: same as input).")

    # the same flags after the sub-command; SUPPRESS keeps the global values
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                        help="Print progress messages.")
    common.add_argument("-d", "--debug", action="store_true", default=argparse.SUPPRESS,
                        help="Log decoder details to stderr.")

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    # info
    p_info = sub.add_parser("info", parents=[common],
                            help="Print PCX header information.")
    p_info.add_argument("files", nargs="+", metavar="FILE",
                        help=".pcx files to inspect.")

    # topng
    p_png = sub.add_parser("topng", parents=[common],
                           help="Convert PCX files to PNG.")
    p_png.add_argument("files", nargs="+", metavar="FILE",
                       help=".pcx files to convert.")
    p_png.add_argument("-o", "--outdir", metavar="DIR", default=argparse.SUPPRESS,
                       help="Output directory (default: same as input).")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

_COMMANDS = {
    "info":  cmd_info,
    "topng": cmd_topng,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
