"""
Base utilities for list stream parsing.

This module provides shared pieces used by both format parsers:
- NodeRecord: one decoded node entry, before graph building
- StreamReader: checked reads of int32 and text fields from a binary stream
"""

from dataclasses import dataclass
from typing import BinaryIO, Optional

from ..constants import (
    INT32_SIZE,
    NULL_SENTINEL,
    TEXT_ENCODING,
    TEXT_ERRORS,
    TEXT_UNIT_SIZE,
)
from ..errors import MalformedRecordError, TruncatedStreamError
from ..utils.binary import decode_int32


@dataclass
class NodeRecord:
    """A single node entry read from a stream."""
    link_id: int
    data: Optional[str]
    random_link_id: Optional[int] = None  # None for the null sentinel (and in V2 node sections)
    offset: int = 0  # Offset in the stream where this record starts


class StreamReader:
    """
    Checked reader over a seekable binary stream.

    Every read either returns a complete field or raises
    TruncatedStreamError, so a stream cut short is never mistaken for a
    shorter list.

    Usage:
        reader = StreamReader(stream)   # seeks to 0
        while not reader.at_end():
            link_id = reader.read_int32("link id")
            text = reader.read_text()
    """

    def __init__(self, stream: BinaryIO):
        """
        Initialize reader and rewind the stream.

        Args:
            stream: Binary source supporting seek() and read()
        """
        self.stream = stream
        self.stream.seek(0)
        self.offset = 0
        self._peeked = b''

    def at_end(self) -> bool:
        """True if no bytes remain in the stream."""
        if self._peeked:
            return False
        self._peeked = self.stream.read(1)
        return not self._peeked

    def read_exact(self, size: int, what: str) -> bytes:
        """
        Read exactly size bytes.

        Args:
            size: Number of bytes required
            what: Field description for the error message

        Returns:
            The bytes read
        """
        start = self.offset
        data = self._peeked
        self._peeked = b''
        while len(data) < size:
            chunk = self.stream.read(size - len(data))
            if not chunk:
                raise TruncatedStreamError(
                    f"Unexpected end of stream reading {what}: expected {size} bytes, got {len(data)}",
                    start,
                )
            data += chunk

        self.offset += size
        return data

    def read_int32(self, what: str) -> int:
        """Read a signed 32-bit little-endian integer."""
        return decode_int32(self.read_exact(INT32_SIZE, what))

    def read_optional_int32(self, what: str) -> Optional[int]:
        """Read an int32 that may be the null sentinel (returned as None)."""
        start = self.offset
        value = self.read_int32(what)
        if value == NULL_SENTINEL:
            return None
        if value < 0:
            raise MalformedRecordError(f"Invalid {what}: {value}", start)
        return value

    def read_text(self) -> Optional[str]:
        """
        Read an optional text payload.

        Format:
        - null sentinel: None
        - i32 byte_length, then byte_length bytes of UTF-16LE
        """
        start = self.offset
        length = self.read_optional_int32("payload length")
        if length is None:
            return None

        if length % TEXT_UNIT_SIZE:
            raise MalformedRecordError(f"Payload length {length} is not a whole number of UTF-16 units", start)

        data = self.read_exact(length, "payload bytes")
        try:
            return data.decode(TEXT_ENCODING, TEXT_ERRORS)
        except UnicodeDecodeError as e:
            raise MalformedRecordError(f"Payload is not valid UTF-16: {e}", start) from e
