"""
pcxdec.decoder — PCX pixel data → RGBA.

Pixel data starts right after the 128-byte header. Each scanline is stored
as `planes` consecutive plane rows of `bytes_per_line` decoded bytes; bytes
(or bits) past the image width are padding and are dropped.

Supported layouts:
  8 bpp × 1 plane  — palette index per byte, 256-colour trailing palette
  8 bpp × 3 planes — one plane per channel: R, G, B
  1 bpp × 1..4     — one bit per plane per pixel, MSB first; plane p supplies
                     bit p of the index into the 16-colour header palette
"""
from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from PIL import Image as PILImage

from .errors import TruncatedStream
from .header import HEADER_SIZE, PCXHeader, parse_header
from .palette import TRAILER_SIZE, Palette
from .rle import RunLengthReader

logger = getLogger(__name__)


@dataclass(frozen=True)
class DecodedImage:
    width: int
    height: int
    pixels: bytes                # RGBA, row-major, width*height*4 bytes
    header: PCXHeader
    palette: Optional[Palette] = None

    def to_image(self) -> PILImage.Image:
        """Wrap the pixels in a Pillow RGBA image."""
        return PILImage.frombytes("RGBA", (self.width, self.height), self.pixels)


# ---------------------------------------------------------------------------
# Per-format decoders
# ---------------------------------------------------------------------------

def _check_stream_length(header: PCXHeader, end: int) -> None:
    """
    Fail before allocating the output if the compressed bytes between the
    header and *end* cannot expand to the full image.

    Each 2-byte run yields at most 63 bytes, so n decoded bytes need at least
    2 * (n // 63) + min(n % 63, 2) input bytes.
    """
    needed = header.height * header.planes * header.bytes_per_line
    runs, rest = divmod(needed, 63)
    minimum = 2 * runs + min(rest, 2)
    available = end - HEADER_SIZE
    if available < minimum:
        raise TruncatedStream(
            f"{available} byte(s) of pixel data cannot expand to the "
            f"{needed} bytes a {header.width}x{header.height} image needs"
        )


def _decode_indexed8(data, header: PCXHeader) -> tuple[bytearray, Palette]:
    """8 bpp, 1 plane: one palette index per byte."""
    palette = Palette.from_trailer(data)
    pal = palette.data
    w, h = header.width, header.height
    bpl = header.bytes_per_line
    # the trailing palette is not part of the pixel stream
    end = len(data) - TRAILER_SIZE
    _check_stream_length(header, end)
    reader = RunLengthReader(data, end=end)

    dst = bytearray(w * h * 4)
    dp = 0
    for _ in range(h):
        line = reader.read(bpl)
        for x in range(w):
            base = line[x] * 3
            dst[dp] = pal[base]
            dst[dp + 1] = pal[base + 1]
            dst[dp + 2] = pal[base + 2]
            dst[dp + 3] = 255
            dp += 4
    return dst, palette


def _decode_truecolor(data, header: PCXHeader) -> bytearray:
    """8 bpp, 3 planes: planes 0/1/2 hold the R/G/B channel of the row."""
    w, h = header.width, header.height
    bpl = header.bytes_per_line
    row_size = w * 4
    _check_stream_length(header, len(data))
    reader = RunLengthReader(data)

    dst = bytearray(w * h * 4)
    for y in range(h):
        row = y * row_size
        for p in range(header.planes):
            line = reader.read(bpl)
            dst[row + p: row + row_size: 4] = line[:w]
        # alpha once the last plane is in
        dst[row + 3: row + row_size: 4] = b"\xff" * w
    return dst


def _decode_planar(data, header: PCXHeader) -> tuple[bytearray, Palette]:
    """1 bpp, 1..4 planes: bits of each plane combine into a palette index."""
    palette = Palette.from_header(header)
    pal = palette.data
    w, h = header.width, header.height
    bpl = header.bytes_per_line
    used = (w + 7) // 8           # bytes per plane row that hold real pixels
    _check_stream_length(header, len(data))
    reader = RunLengthReader(data)

    dst = bytearray(w * h * 4)
    dp = 0
    for _ in range(h):
        index = bytearray(used * 8)
        for p in range(header.planes):
            line = reader.read(bpl)
            plane_bit = 1 << p
            for bx in range(used):
                byte = line[bx]
                if not byte:
                    continue
                x = bx * 8
                for bit in range(8):
                    if byte & (0x80 >> bit):
                        index[x + bit] |= plane_bit
        for x in range(w):
            base = index[x] * 3
            dst[dp] = pal[base]
            dst[dp + 1] = pal[base + 1]
            dst[dp + 2] = pal[base + 2]
            dst[dp + 3] = 255
            dp += 4
    return dst, palette


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def decode(data: bytes | bytearray | memoryview, header: PCXHeader) -> DecodedImage:
    """
    Decode the pixel data of *data* described by *header* into RGBA.

    Raises a DecodeError subclass on any malformed input; nothing is returned
    for a partially decoded image.
    """
    palette: Optional[Palette] = None
    # PCXHeader only admits 1 bpp x 1..4, 8 bpp x 1 and 8 bpp x 3
    if header.bits_per_pixel == 1:
        logger.debug("decoding 1 bpp image with %d plane(s)", header.planes)
        pixels, palette = _decode_planar(data, header)
    elif header.planes == 1:
        logger.debug("decoding 8 bpp indexed image")
        pixels, palette = _decode_indexed8(data, header)
    else:
        logger.debug("decoding 24-bit true-colour image")
        pixels = _decode_truecolor(data, header)

    return DecodedImage(
        width=header.width,
        height=header.height,
        pixels=bytes(pixels),
        header=header,
        palette=palette,
    )


def decode_pcx(data: bytes | bytearray | memoryview) -> DecodedImage:
    """Parse the header of *data* and decode the whole image."""
    return decode(data, parse_header(data))
