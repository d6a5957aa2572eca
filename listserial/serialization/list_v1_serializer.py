"""
V1 List Serializer

Serializes a list to the V1 stream format: one self-contained record per
node, with the random link written inline as a link id. Link ids come from
an IdentityRegistry, so a random target that has not been written yet gets
its id on the spot (a forward reference) and keeps it when its own record
is written later.
"""

import io
from typing import BinaryIO

from ..graph import IdentityRegistry, ListNode, iter_nodes, require_head
from ..errors import InvalidArgumentError
from ..utils import logDebug, write_int32, write_optional_int32, write_text


class ListV1Serializer:
    """
    Serialize a list to V1 binary format.

    Output structure, per node in list order:
    - i32 link_id
    - payload (i32 -1, or i32 byte_length + UTF-16LE bytes)
    - i32 random link id, or -1
    """

    def __init__(self, head: ListNode):
        """
        Initialize serializer.

        Args:
            head: Head node of the list to serialize (not modified)
        """
        self.head = require_head(head)

    def serialize(self, sink: BinaryIO) -> int:
        """
        Write the list to sink from position 0, replacing its contents.

        Args:
            sink: Seekable binary sink

        Returns:
            Number of bytes written
        """
        sink.seek(0)

        registry = IdentityRegistry()
        node_count = 0

        for node in iter_nodes(self.head):
            write_int32(sink, registry.assign(node))
            write_text(sink, node.data)

            random_link_id = None if node.random is None else registry.assign(node.random)
            write_optional_int32(sink, random_link_id)
            node_count += 1

        # Every registered node must have had its own record written
        if len(registry) != node_count:
            raise InvalidArgumentError(
                f"{len(registry) - node_count} random link target(s) are not part of the list"
            )

        byte_count = sink.tell()
        sink.truncate()

        logDebug(f"Serialized V1 list: {node_count} nodes, {byte_count:,} bytes")
        return byte_count

    def to_bytes(self) -> bytes:
        """Serialize to a new bytes object."""
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue()
