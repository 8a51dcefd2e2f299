from __future__ import annotations


class BitWriter:
    """MSB-first bit packer; the inverse of BitReader, used to build fixtures."""

    __slots__ = ("buffer", "_bitbuf", "_bitcnt")

    def __init__(self):
        self.buffer = bytearray()
        self._bitbuf = 0
        self._bitcnt = 0

    def bit_tell(self) -> int:
        return len(self.buffer) * 8 + self._bitcnt

    def write_bits(self, value: int, n: int) -> None:
        if not (0 < n <= 32): raise ValueError("bits 1..32")
        self._bitbuf = (self._bitbuf << n) | (value & ((1 << n) - 1))
        self._bitcnt += n
        while self._bitcnt >= 8:
            self._bitcnt -= 8
            self.buffer.append((self._bitbuf >> self._bitcnt) & 0xFF)
        self._bitbuf &= (1 << self._bitcnt) - 1

    def align(self) -> None:
        """Pad the pending byte with zero bits."""
        if self._bitcnt:
            self.buffer.append((self._bitbuf << (8 - self._bitcnt)) & 0xFF)
            self._bitbuf, self._bitcnt = 0, 0

    def write_bytes(self, data: bytes) -> None:
        self.align()
        self.buffer += data

    def getvalue(self) -> bytes:
        self.align()
        return bytes(self.buffer)
