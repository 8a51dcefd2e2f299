from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .bitreader import BitReader
from .obfuscation import ObfuscatingSource
from .sources import ByteSource, FileSource, MemorySource
from ..models.config import StreamConfig
from ..models.probe import ByteDump, FieldValue

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


# -----------------------------
# Opening
# -----------------------------

def open_source(inp: BytesLike) -> ByteSource:
    """In-memory view for bytes-like input, an owned file handle for paths."""
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return MemorySource(inp)
    return FileSource(Path(str(inp)))


def wrap_source(source: ByteSource, config: Optional[StreamConfig] = None) -> ByteSource:
    if config is None or config.obfuscation is None:
        return source
    obf = config.obfuscation
    logger.debug("deobfuscating with %s key 0x%02x", obf.schedule.value, obf.key)
    return ObfuscatingSource(source, obf.key_fn())


def open_reader(inp: BytesLike, config: Optional[StreamConfig] = None) -> BitReader:
    """
    Build the reader chain for one decode pass. When ``inp`` is a path the
    caller owns the file handle; prefer DictionaryStream, which closes it.
    """
    return BitReader(wrap_source(open_source(inp), config))


class DictionaryStream:
    """
    One dictionary file and its reader chain. Each instance owns its own
    source; decoding several files means one DictionaryStream per file.
    """

    def __init__(self, path: Union[str, Path], config: Optional[StreamConfig] = None):
        self.path = Path(path)
        self.config = config or StreamConfig()
        self._source = FileSource(self.path)
        self.reader = BitReader(wrap_source(self._source, self.config))

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def size(self) -> int:
        return self._source.length

    @property
    def closed(self) -> bool:
        return self._source.closed

    def close(self) -> None:
        self._source.close()

    def __enter__(self) -> "DictionaryStream":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


# -----------------------------
# Inspection
# -----------------------------

def read_fields(reader: BitReader, offset: int, widths: Iterable[int]) -> List[FieldValue]:
    reader.seek(offset)
    out: List[FieldValue] = []
    for w in widths:
        start = reader.bit_tell()
        out.append(FieldValue(bit_offset=start, width=w, value=reader.read_bits(w)))
    return out


def dump_bytes(reader: BitReader, offset: int, count: int) -> ByteDump:
    reader.seek(offset)
    return ByteDump(offset=reader.tell(), data=reader.read_raw_bytes(count))


def probe(
    inp: BytesLike,
    offset: int,
    widths: Iterable[int],
    config: Optional[StreamConfig] = None,
) -> List[FieldValue]:
    """Read consecutive bit fields starting at byte ``offset``."""
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return read_fields(open_reader(inp, config), offset, widths)
    with DictionaryStream(inp, config) as ds:
        return read_fields(ds.reader, offset, widths)
