"""
pcxdec.rle — PCX run-length decompression.

Encoding
--------
  byte & 0xC0 == 0xC0  → control byte: repeat the next byte (byte & 0x3F) times
  anything else        → literal byte, run length 1

Runs are not guaranteed to stop at scanline or plane boundaries, so the
reader keeps any unfinished run and hands it out on the next read.
"""
from __future__ import annotations

from .errors import TruncatedStream
from .header import HEADER_SIZE

_RLE_FLAG = 0xC0
_RLE_COUNT = 0x3F


class RunLengthReader:
    """
    Cursor over an RLE-compressed byte stream.

    *data* is the whole file; decoding starts at *offset* (right after the
    header by default) and must not go past *end* (default: end of data).
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        offset: int = HEADER_SIZE,
        end: int | None = None,
    ) -> None:
        self._data = data
        self._end = len(data) if end is None else end
        self.offset = offset
        self._run_value = 0
        self._run_left = 0

    @property
    def pending(self) -> int:
        """Bytes left over from the current run."""
        return self._run_left

    def _next_run(self) -> None:
        data = self._data
        sp = self.offset
        while True:
            if sp >= self._end:
                raise TruncatedStream(f"RLE stream ends at offset {sp}")
            code = data[sp]; sp += 1
            if code & _RLE_FLAG != _RLE_FLAG:
                self._run_value = code
                self._run_left = 1
                break
            if sp >= self._end:
                raise TruncatedStream(
                    f"RLE control byte at offset {sp - 1} has no value byte"
                )
            count = code & _RLE_COUNT
            value = data[sp]; sp += 1
            if count:
                self._run_value = value
                self._run_left = count
                break
            # 0xC0: zero-length run, nothing to emit
        self.offset = sp

    def read(self, count: int) -> bytes:
        """Return exactly *count* decoded bytes."""
        out = bytearray(count)
        dp = 0
        while dp < count:
            if self._run_left == 0:
                self._next_run()
            take = min(self._run_left, count - dp)
            if take == 1:
                out[dp] = self._run_value
            else:
                out[dp: dp + take] = bytes((self._run_value,)) * take
            dp += take
            self._run_left -= take
        return bytes(out)


def decompress(
    data: bytes | bytearray | memoryview,
    size: int | None = None,
) -> bytes:
    """
    Decode a bare RLE stream (no header).

    With *size* given, exactly that many bytes are produced or TruncatedStream
    is raised; otherwise the whole stream is expanded.
    """
    if size is not None:
        return RunLengthReader(data, offset=0).read(size)

    out = bytearray()
    sp = 0
    slen = len(data)
    while sp < slen:
        code = data[sp]; sp += 1
        if code & _RLE_FLAG == _RLE_FLAG:
            if sp >= slen:
                raise TruncatedStream(
                    f"RLE control byte at offset {sp - 1} has no value byte"
                )
            out += bytes((data[sp],)) * (code & _RLE_COUNT)
            sp += 1
        else:
            out.append(code)
    return bytes(out)
