"""
V2 List Stream Parser

Reads a V2 stream into its two sections. Graph building happens in
graph.builder.build_v2_list().

Stream format:
- Node section, one record per node in list order:
  - i32 link_id (equal to the node's 0-based position)
  - payload: i32 -1 (null), or i32 byte_length + UTF-16LE bytes
- Terminator: i32 -1
- Random section, one entry per node in the same order:
  - i32 position of the random target, or -1 for no random link
"""

from dataclasses import dataclass, field
from typing import BinaryIO, List

import numpy as np

from .base import NodeRecord, StreamReader
from ..constants import INT32_SIZE, NULL_SENTINEL
from ..errors import MalformedRecordError, TruncatedStreamError

RANDOM_LINK_DTYPE = np.dtype('<i4')


@dataclass
class V2Stream:
    """Both sections of a parsed V2 stream."""
    nodes: List[NodeRecord] = field(default_factory=list)
    random_links: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=RANDOM_LINK_DTYPE))

    @property
    def node_count(self) -> int:
        return len(self.nodes)


class ListV2Parser:
    """
    Parser for V2 list streams.

    Usage:
        parser = ListV2Parser(stream)
        sections = parser.get_sections()
        for record, random_link in zip(sections.nodes, sections.random_links):
            print(record.link_id, record.data, int(random_link))
    """

    def __init__(self, stream: BinaryIO):
        """
        Parse a V2 stream from its start.

        Args:
            stream: Seekable binary source
        """
        self._sections = V2Stream()
        reader = StreamReader(stream)
        self._parse_node_section(reader)
        self._parse_random_section(reader)
        self.byte_count = reader.offset

    def _parse_node_section(self, reader: StreamReader):
        """Read node records up to and including the terminator."""
        nodes = self._sections.nodes

        while True:
            start = reader.offset
            if reader.at_end():
                raise TruncatedStreamError("Unexpected end of stream, node section has no terminator", start)

            link_id = reader.read_int32("link id")
            if link_id == NULL_SENTINEL:
                break
            if link_id != len(nodes):
                raise MalformedRecordError(
                    f"Node link id {link_id} does not match its position {len(nodes)}", start
                )

            nodes.append(NodeRecord(link_id=link_id, data=reader.read_text(), offset=start))

    def _parse_random_section(self, reader: StreamReader):
        """Read one random link entry per node using numpy for efficiency."""
        size = self._sections.node_count * INT32_SIZE
        data = reader.read_exact(size, "random link section")
        self._sections.random_links = np.frombuffer(data, dtype=RANDOM_LINK_DTYPE)

    def get_sections(self) -> V2Stream:
        """Node records and random links."""
        return self._sections

    def get_records(self) -> List[NodeRecord]:
        """Node section records, in stream order."""
        return self._sections.nodes

    @property
    def record_count(self) -> int:
        return self._sections.node_count
