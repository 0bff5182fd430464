"""
pcxdec – ZSoft PCX image decoder.

Public API re-exports:

  from pcxdec.header  import PCXHeader, parse_header
  from pcxdec.rle     import RunLengthReader, decompress
  from pcxdec.palette import Palette
  from pcxdec.decoder import DecodedImage, decode, decode_pcx
  from pcxdec.pcx     import read_pcx, load_pcx, is_pcx
  from pcxdec.errors  import DecodeError, InvalidMagic, InvalidDimensions,
                             UnsupportedFormat, MissingPalette, TruncatedStream
"""

from .errors  import (
    DecodeError,
    InvalidMagic,
    InvalidDimensions,
    UnsupportedFormat,
    MissingPalette,
    TruncatedStream,
)
from .header  import HEADER_SIZE, PCX_MAGIC, PCXHeader, parse_header
from .rle     import RunLengthReader, decompress
from .palette import Palette
from .decoder import DecodedImage, decode, decode_pcx
from .pcx     import read_pcx, load_pcx, is_pcx

__version__ = "0.1.0"
__all__ = [
    "DecodeError",
    "InvalidMagic",
    "InvalidDimensions",
    "UnsupportedFormat",
    "MissingPalette",
    "TruncatedStream",
    "HEADER_SIZE", "PCX_MAGIC", "PCXHeader", "parse_header",
    "RunLengthReader", "decompress",
    "Palette",
    "DecodedImage", "decode", "decode_pcx",
    "read_pcx", "load_pcx", "is_pcx",
]
