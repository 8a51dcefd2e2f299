from __future__ import annotations


class StreamError(Exception):
    pass


class SourceOpenError(StreamError, OSError):
    """The backing file could not be opened for reading."""
