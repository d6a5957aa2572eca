"""
Exceptions raised by the list codecs.

Decode failures all derive from StreamCorruptionError, which is also a
ValueError so callers that treat bad binary data as a ValueError keep working.
"""

from typing import Optional


class ListSerializationError(Exception):
    """Base class for every error raised by listserial."""


class InvalidArgumentError(ListSerializationError, ValueError):
    """A caller supplied an unusable list (None head, foreign random target, ...)."""


class StreamCorruptionError(ListSerializationError, ValueError):
    """The byte stream does not hold a well-formed list."""

    def __init__(self, message: str, offset: Optional[int] = None):
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)
        self.offset = offset


class TruncatedStreamError(StreamCorruptionError):
    """A fixed-size or length-prefixed field could not be read in full."""


class MalformedRecordError(StreamCorruptionError):
    """A field was read in full but holds a value the format does not allow."""


class UnresolvedReferenceError(StreamCorruptionError):
    """A random link points at a link id that never appears in the stream."""


class LinkIndexOutOfRangeError(StreamCorruptionError, IndexError):
    """A positional random link does not index any decoded node."""


class EmptyStreamError(StreamCorruptionError):
    """The stream holds no node records."""
