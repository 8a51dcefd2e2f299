from array import array

import pytest

from lsdstream.binary.errors import SourceOpenError
from lsdstream.binary.sources import FileSource, MemorySource


def test_memory_read_some_short_at_end():
    src = MemorySource(b"\x01\x02\x03")
    assert src.read_some(2) == b"\x01\x02"
    assert src.read_some(5) == b"\x03"
    assert src.tell() == 3
    assert src.read_some(4) == b""
    assert src.tell() == 3


def test_memory_seek_clamps():
    src = MemorySource(b"\xAA" * 4)
    src.seek(100)
    assert src.tell() == 4
    src.seek(-3)
    assert src.tell() == 0
    src.seek(2)
    assert src.read_some(10) == b"\xAA\xAA"


def test_memory_negative_count_rejected():
    with pytest.raises(ValueError):
        MemorySource(b"x").read_some(-1)


def test_file_source_matches_memory(dict_file, sample_bytes):
    with FileSource(dict_file) as src:
        assert src.length == len(sample_bytes)
        src.seek(250)
        assert src.read_some(10) == sample_bytes[250:]
        assert src.tell() == 256
        src.seek(10_000)
        assert src.tell() == 256
        assert src.read_some(1) == b""
    assert src.closed


def test_file_source_missing_path_fails_at_construction(tmp_path):
    with pytest.raises(SourceOpenError) as ei:
        FileSource(tmp_path / "nope.lsd")
    assert isinstance(ei.value, OSError)
    assert isinstance(ei.value.__cause__, FileNotFoundError)


def test_file_source_close_is_idempotent(dict_file):
    src = FileSource(dict_file)
    src.close()
    src.close()
    assert src.closed


def test_memory_wide_item_view_counts_bytes():
    words = array("H", [0x0102, 0x0304])
    src = MemorySource(memoryview(words))
    assert src.length == 4
    assert src.read_some(2) == words.tobytes()[:2]
    assert src.tell() == 2
    assert src.read_some(5) == words.tobytes()[2:]
    assert src.tell() == 4
