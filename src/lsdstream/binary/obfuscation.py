from __future__ import annotations

from .keystream import KeyFn, xor_bytes
from .sources import ByteSource


class ObfuscatingSource:
    """
    Deobfuscating view over another byte source.

    The key for each byte depends only on its absolute offset, so there is no
    keystream state to keep in step with the inner position: a seek followed
    by a read returns exactly what sequential reading would have returned.
    """

    __slots__ = ("inner", "key_fn")

    def __init__(self, inner: ByteSource, key_fn: KeyFn):
        self.inner = inner
        self.key_fn = key_fn

    def tell(self) -> int: return self.inner.tell()
    def seek(self, pos: int) -> None: self.inner.seek(pos)

    def read_some(self, count: int) -> bytes:
        start = self.inner.tell()
        return xor_bytes(self.inner.read_some(count), self.key_fn, start)
