"""
pcxdec.header — ZSoft PCX file header parsing.

PCX header layout (128 bytes, little-endian)
--------------------------------------------
  [0x00]        manufacturer  (uint8, always 10)
  [0x01]        version       (uint8)
  [0x02]        encoding      (uint8, 1 = RLE)
  [0x03]        bits_per_pixel per plane (uint8: 1 or 8)
  [0x04..0x0b]  xmin, ymin, xmax, ymax (4 × uint16)
  [0x0c..0x0f]  hdpi, vdpi (2 × uint16)
  [0x10..0x3f]  16-colour palette (48 bytes, RGB triples)
  [0x40]        reserved
  [0x41]        planes        (uint8)
  [0x42..0x43]  bytes_per_line per plane (uint16)
  [0x44..0x7f]  palette info, screen size, filler (ignored)
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from logging import getLogger

from .errors import DecodeError, InvalidDimensions, InvalidMagic, TruncatedStream, UnsupportedFormat

logger = getLogger(__name__)

HEADER_SIZE = 128
PCX_MAGIC = 10

_HEADER_FMT = "<BBBBHHHHHH48sxBH"
_HEADER_PALETTE_SIZE = 48

# bits_per_pixel -> accepted plane counts
_SUPPORTED_PLANES = {
    1: (1, 2, 3, 4),
    8: (1, 3),
}


@dataclass(frozen=True)
class PCXHeader:
    version: int
    encoding: int
    bits_per_pixel: int
    xmin: int
    ymin: int
    xmax: int
    ymax: int
    hdpi: int
    vdpi: int
    palette: bytes
    planes: int
    bytes_per_line: int

    def __post_init__(self) -> None:
        # also runs on dataclasses.replace()
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(
                f"invalid image size {self.width}x{self.height} "
                f"(box {self.xmin},{self.ymin}-{self.xmax},{self.ymax})"
            )
        bpp = self.bits_per_pixel
        if bpp not in _SUPPORTED_PLANES:
            raise UnsupportedFormat(bpp)
        if self.planes not in _SUPPORTED_PLANES[bpp]:
            raise UnsupportedFormat(bpp, self.planes)

        # each plane row must cover the full width; extra bytes are padding
        row_pixels = self.bytes_per_line * 8 if bpp == 1 else self.bytes_per_line
        if row_pixels < self.width:
            raise InvalidDimensions(
                f"bytes_per_line {self.bytes_per_line} too small for width {self.width}"
            )
        if len(self.palette) != _HEADER_PALETTE_SIZE:
            raise DecodeError(
                f"header palette must be {_HEADER_PALETTE_SIZE} bytes, got {len(self.palette)}"
            )

    @property
    def width(self) -> int:
        return self.xmax - self.xmin + 1

    @property
    def height(self) -> int:
        return self.ymax - self.ymin + 1

    @property
    def is_truecolor(self) -> bool:
        return self.bits_per_pixel == 8 and self.planes == 3


def is_pcx_data(data: bytes | bytearray | memoryview) -> bool:
    """Return True if *data* starts with the PCX manufacturer byte."""
    return len(data) > 0 and data[0] == PCX_MAGIC


def parse_header(data: bytes | bytearray | memoryview) -> PCXHeader:
    """
    Parse and validate the 128-byte header at the start of *data*.

    Only ever returns a header describing an image the decoder can handle;
    anything else raises a DecodeError subclass.
    """
    if not is_pcx_data(data):
        raise InvalidMagic("not a PCX file (bad manufacturer byte)")
    if len(data) < HEADER_SIZE:
        raise TruncatedStream(
            f"PCX header needs {HEADER_SIZE} bytes, got {len(data)}"
        )

    (_magic, version, encoding, bpp,
     xmin, ymin, xmax, ymax, hdpi, vdpi,
     palette, planes, bytes_per_line) = struct.unpack_from(_HEADER_FMT, data, 0)

    hdr = PCXHeader(
        version=version,
        encoding=encoding,
        bits_per_pixel=bpp,
        xmin=xmin,
        ymin=ymin,
        xmax=xmax,
        ymax=ymax,
        hdpi=hdpi,
        vdpi=vdpi,
        palette=bytes(palette),
        planes=planes,
        bytes_per_line=bytes_per_line,
    )

    logger.debug(
        "PCX v%d: %dx%d, %d bpp x %d plane(s), %d bytes/line",
        version, hdr.width, hdr.height, bpp, planes, bytes_per_line,
    )
    return hdr
