"""
V2 List Serializer

Serializes a list to the V2 stream format. A node's link id is simply its
0-based position, so no identity table is kept. The stream has two
sections: every node's payload first, then every node's random link as a
position found by a RandomLinkResolver.
"""

import io
from typing import BinaryIO

from .random_link_resolver import ConcurrentRandomLinkResolver, RandomLinkResolver
from ..graph import ListNode, iter_nodes, require_head
from ..utils import logDebug, write_int32, write_null, write_optional_int32, write_text


class ListV2Serializer:
    """
    Serialize a list to V2 binary format.

    Output structure:
    - Node section, per node: i32 position, payload
    - Terminator: i32 -1
    - Random section, per node: i32 position of random target, or -1
    """

    def __init__(self, head: ListNode, concurrent_resolver: bool = False):
        """
        Initialize serializer.

        Args:
            head: Head node of the list to serialize (not modified)
            concurrent_resolver: Search both directions on worker threads
                instead of the single-threaded two-pointer scan
        """
        self.head = require_head(head)
        self.concurrent_resolver = concurrent_resolver

    def serialize(self, sink: BinaryIO) -> int:
        """
        Write the list to sink from position 0, replacing its contents.

        Args:
            sink: Seekable binary sink

        Returns:
            Number of bytes written
        """
        sink.seek(0)

        node_count = self._serialize_nodes(sink)
        self._serialize_random_links(sink)

        byte_count = sink.tell()
        sink.truncate()

        logDebug(f"Serialized V2 list: {node_count} nodes, {byte_count:,} bytes")
        return byte_count

    def _serialize_nodes(self, sink: BinaryIO) -> int:
        """Write the node section and its terminator."""
        position = 0
        for node in iter_nodes(self.head):
            write_int32(sink, position)
            write_text(sink, node.data)
            position += 1

        write_null(sink)
        return position

    def _serialize_random_links(self, sink: BinaryIO):
        """Write the random section, one entry per node."""
        resolver_class = ConcurrentRandomLinkResolver if self.concurrent_resolver else RandomLinkResolver

        with resolver_class() as resolver:
            for position, node in enumerate(iter_nodes(self.head)):
                link_id = None if node.random is None else resolver.find_link_id(node, position)
                write_optional_int32(sink, link_id)

    def to_bytes(self) -> bytes:
        """Serialize to a new bytes object."""
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()
