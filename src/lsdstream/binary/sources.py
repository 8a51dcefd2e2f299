from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Protocol, Union

from .errors import SourceOpenError

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Random access byte stream: bounded reads, absolute seek, tell."""

    def read_some(self, count: int) -> bytes: ...
    def seek(self, pos: int) -> None: ...
    def tell(self) -> int: ...


def _clamp(pos: int, length: int) -> int:
    return max(0, min(pos, length))


class MemorySource:
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data).cast("B")
        self.pos = 0

    @property
    def length(self) -> int:
        return len(self.buf)

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def seek(self, pos: int) -> None:
        self.pos = _clamp(pos, len(self.buf))

    def read_some(self, count: int) -> bytes:
        if count < 0: raise ValueError("negative read count")
        end = min(self.pos + count, len(self.buf))
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out


class FileSource:
    """
    File-backed source. The handle is opened at construction and owned until
    close(); use as a context manager to release it on any exit path.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        try:
            self._fh: BinaryIO = open(self.path, "rb")
        except OSError as e:
            raise SourceOpenError(e.errno, f"can't read file: {self.path}") from e
        self._length = os.fstat(self._fh.fileno()).st_size
        logger.debug("opened %s (%d bytes)", self.path, self._length)

    @property
    def length(self) -> int:
        return self._length

    @property
    def closed(self) -> bool:
        return self._fh.closed

    def tell(self) -> int:
        return self._fh.tell()

    def seek(self, pos: int) -> None:
        clamped = _clamp(pos, self._length)
        if clamped != pos:
            logger.debug("seek %d clamped to %d in %s", pos, clamped, self.path.name)
        self._fh.seek(clamped)

    def read_some(self, count: int) -> bytes:
        if count < 0: raise ValueError("negative read count")
        return self._fh.read(count)

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()
            logger.debug("closed %s", self.path)

    def __enter__(self) -> "FileSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
