from __future__ import annotations

from typing import Iterable, Tuple

from .sources import ByteSource


class BitReader:
    """
    Bit-addressable reads over a byte source.

    Bits are consumed MSB-first. At most one partially consumed byte is held
    in ``_bitbuf``; ``_bitcnt`` is the number of its bits not yet read (0..7).
    Reads past the end of the source are zero-padded, never raised.
    """

    __slots__ = ("source", "_bitbuf", "_bitcnt")

    def __init__(self, source: ByteSource):
        self.source = source
        self._bitbuf = 0
        self._bitcnt = 0

    def bit_tell(self) -> int:
        return self.source.tell() * 8 - self._bitcnt

    def tell(self) -> int:
        return self.bit_tell() // 8

    def is_aligned(self) -> bool:
        return self._bitcnt == 0

    def seek(self, pos: int) -> None:
        self.source.seek(pos)
        self._bitbuf, self._bitcnt = 0, 0

    def align_to_byte(self) -> None:
        self._bitbuf, self._bitcnt = 0, 0

    # bits (MSB-first)
    def read_bits(self, n: int) -> int:
        if not (0 < n <= 32): raise ValueError("bits 1..32")
        if self._bitcnt < n:
            more = self.source.read_some((n - self._bitcnt + 7) // 8)
            for b in more:
                self._bitbuf = (self._bitbuf << 8) | b
                self._bitcnt += 8
        if self._bitcnt < n:
            # truncated: what is left goes to the high bits, the rest is zero
            val = self._bitbuf << (n - self._bitcnt)
            self._bitbuf, self._bitcnt = 0, 0
            return val
        shift = self._bitcnt - n
        val = self._bitbuf >> shift
        self._bitbuf &= (1 << shift) - 1
        self._bitcnt = shift
        return val

    def read_bit(self) -> int: return self.read_bits(1)
    def read_flag(self) -> bool: return self.read_bits(1) == 1

    def read_fields(self, widths: Iterable[int]) -> Tuple[int, ...]:
        return tuple(self.read_bits(w) for w in widths)

    # bytes
    def read_raw_bytes(self, count: int) -> bytes:
        if self._bitcnt: raise ValueError(f"unaligned raw read at bit {self.bit_tell()}")
        return self.source.read_some(count)

    read_some = read_raw_bytes
