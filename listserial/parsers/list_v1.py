"""
V1 List Stream Parser

Reads a V1 stream into NodeRecords. Graph building and random link
resolution happen in graph.builder.build_v1_list().

Stream format (one record per node, in list order, no terminator):
- i32 link_id (non-negative, assigned in first-seen order)
- payload:
  - i32 -1 (null), or
  - i32 byte_length, then byte_length bytes of UTF-16LE
- i32 random_link_id, or -1 for no random link

A random_link_id may name a record that appears later in the stream.
"""

from typing import BinaryIO, List

from .base import NodeRecord, StreamReader
from ..errors import MalformedRecordError


class ListV1Parser:
    """
    Parser for V1 list streams.

    Usage:
        parser = ListV1Parser(stream)
        for record in parser.get_records():
            print(record.link_id, record.data, record.random_link_id)
    """

    def __init__(self, stream: BinaryIO):
        """
        Parse a V1 stream from its start.

        Args:
            stream: Seekable binary source
        """
        self._records: List[NodeRecord] = []
        self._parse(StreamReader(stream))

    def _parse(self, reader: StreamReader):
        """Read records until a clean end of stream."""
        while not reader.at_end():
            start = reader.offset

            link_id = reader.read_int32("link id")
            if link_id < 0:
                raise MalformedRecordError(f"Invalid link id {link_id}", start)

            data = reader.read_text()
            random_link_id = reader.read_optional_int32("random link id")

            self._records.append(NodeRecord(
                link_id=link_id,
                data=data,
                random_link_id=random_link_id,
                offset=start,
            ))

        self.byte_count = reader.offset

    def get_records(self) -> List[NodeRecord]:
        """All records, in stream order."""
        return self._records

    @property
    def record_count(self) -> int:
        return len(self._records)
