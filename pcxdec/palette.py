"""
pcxdec.palette — colour tables used by indexed PCX images.

  1 bpp images: 16 RGB entries embedded in the header at 0x10
  8 bpp images: marker byte 12 at end-769, then 256 RGB entries at end-768
"""
from __future__ import annotations

from logging import getLogger

from .errors import MissingPalette, TruncatedStream
from .header import HEADER_SIZE, PCXHeader

logger = getLogger(__name__)

PALETTE_ENTRIES = 256
PALETTE_SIZE = PALETTE_ENTRIES * 3
PALETTE_MARKER = 12
TRAILER_SIZE = PALETTE_SIZE + 1


class Palette:
    """256 RGB triples stored as 768 bytes."""

    __slots__ = ("data",)

    def __init__(self, data: bytes) -> None:
        if len(data) > PALETTE_SIZE:
            raise ValueError(f"palette too long: {len(data)} bytes")
        # short tables (the 16-colour header one) are padded with black
        self.data = bytes(data) + bytes(PALETTE_SIZE - len(data))

    def __len__(self) -> int:
        return PALETTE_ENTRIES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"Palette({self.data[:12].hex()}…)"

    def rgb(self, index: int) -> tuple[int, int, int]:
        base = index * 3
        d = self.data
        return d[base], d[base + 1], d[base + 2]

    @classmethod
    def from_header(cls, header: PCXHeader) -> Palette:
        return cls(header.palette)

    @classmethod
    def from_trailer(cls, data: bytes | bytearray | memoryview) -> Palette:
        """Read the 256-colour table appended after the pixel stream."""
        if len(data) < HEADER_SIZE + TRAILER_SIZE:
            raise TruncatedStream(
                f"file too short for a 256-colour palette ({len(data)} bytes)"
            )
        marker = data[len(data) - TRAILER_SIZE]
        if marker != PALETTE_MARKER:
            raise MissingPalette(
                f"256-colour palette marker not found "
                f"(got {marker:#04x} at offset {len(data) - TRAILER_SIZE})"
            )
        logger.debug("using trailing 256-colour palette")
        return cls(bytes(data[len(data) - PALETTE_SIZE:]))
