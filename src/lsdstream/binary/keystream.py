from __future__ import annotations

from typing import Callable, Sequence

# Keystreams map an absolute file offset to the byte XORed into it.
KeyFn = Callable[[int], int]

DEFAULT_KEY = 0x7F


def _check_byte(key: int) -> int:
    if not (0 <= key <= 0xFF): raise ValueError(f"key byte out of range: {key}")
    return key


def constant_key(key: int = DEFAULT_KEY) -> KeyFn:
    key = _check_byte(key)
    return lambda offset: key


def rotating_key(key: int = DEFAULT_KEY) -> KeyFn:
    """Key byte incremented once per offset, wrapping at 256."""
    key = _check_byte(key)
    return lambda offset: (key + offset) & 0xFF


def table_key(table: Sequence[int], key: int = DEFAULT_KEY) -> KeyFn:
    """Substitution table indexed by the rotated key byte."""
    if len(table) != 256: raise ValueError(f"key table needs 256 entries, got {len(table)}")
    key = _check_byte(key)
    tbl = bytes(table)
    return lambda offset: tbl[(key + offset) & 0xFF]


def xor_bytes(data: bytes | bytearray | memoryview, key_fn: KeyFn, start: int = 0) -> bytes:
    """
    Apply ``key_fn`` to ``data`` as if it sat at absolute offset ``start``.
    XOR is its own inverse, so this both obfuscates and deobfuscates.
    """
    return bytes(b ^ (key_fn(start + i) & 0xFF) for i, b in enumerate(data))
