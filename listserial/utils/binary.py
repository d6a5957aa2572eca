"""
Binary Stream Utilities

Common helpers for writing the list stream formats.

All integers are written as signed 32-bit little-endian values, regardless
of host byte order.
"""

import struct
from typing import BinaryIO, Optional

from ..constants import (
    INT32_FORMAT,
    NULL_REFERENCE_BYTES,
    TEXT_ENCODING,
    TEXT_ERRORS,
)


def encode_int32(value: int) -> bytes:
    """Encode a signed 32-bit integer as 4 little-endian bytes."""
    return struct.pack(INT32_FORMAT, value)


def decode_int32(data: bytes, offset: int = 0) -> int:
    """Decode a signed 32-bit little-endian integer from data at offset."""
    return struct.unpack_from(INT32_FORMAT, data, offset)[0]


def write_int32(buffer: BinaryIO, value: int):
    """Write a signed 32-bit integer."""
    buffer.write(encode_int32(value))


def write_null(buffer: BinaryIO):
    """Write the null sentinel (0xFFFFFFFF)."""
    buffer.write(NULL_REFERENCE_BYTES)


def write_optional_int32(buffer: BinaryIO, value: Optional[int]):
    """Write value, or the null sentinel when value is None."""
    if value is None:
        write_null(buffer)
    else:
        write_int32(buffer, value)


def write_text(buffer: BinaryIO, text: Optional[str]):
    """
    Write an optional text payload.

    Format:
    - None: null sentinel
    - otherwise: i32 byte_length, then byte_length bytes of UTF-16LE

    Args:
        buffer: Output buffer (file or BytesIO)
        text: Payload, None and "" are distinct
    """
    if text is None:
        write_null(buffer)
        return

    data = text.encode(TEXT_ENCODING, TEXT_ERRORS)
    buffer.write(encode_int32(len(data)))
    buffer.write(data)
