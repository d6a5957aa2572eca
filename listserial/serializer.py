"""
List Serializers

Public entry points: serialize a list to a stream, deserialize a list from
a stream, and deep copy a list by round-tripping it through an in-memory
buffer.

Each format has a serializer class with async methods (the work runs on a
worker thread) and their synchronous counterparts. Calls share no state, so
several may run at once as long as each uses its own stream and list.

Usage:
    serializer = get_serializer("v2")
    await serializer.serialize(head, stream)
    copy = await serializer.deserialize(stream)

    copy = await deep_copy(head, format_name="v1")
"""

import asyncio
import io
from abc import ABC, abstractmethod
from typing import BinaryIO, Dict, Type

from .constants import DEFAULT_FORMAT, FORMAT_V1, FORMAT_V2
from .graph import ListNode, build_v1_list, build_v2_list, require_head
from .parsers import ListV1Parser, ListV2Parser
from .serialization import ListV1Serializer, ListV2Serializer


class ListSerializerBase(ABC):
    """Serialize, deserialize and deep copy lists in one stream format."""

    format_name: str = None

    @abstractmethod
    def serialize_sync(self, head: ListNode, sink: BinaryIO) -> int:
        """Write the list to sink from position 0. Returns bytes written."""

    @abstractmethod
    def deserialize_sync(self, source: BinaryIO) -> ListNode:
        """Read a list from source, starting at position 0. Returns the new head."""

    def deep_copy_sync(self, head: ListNode) -> ListNode:
        """Copy a list through a temporary in-memory stream."""
        require_head(head)
        with io.BytesIO() as buffer:
            self.serialize_sync(head, buffer)
            return self.deserialize_sync(buffer)

    async def serialize(self, head: ListNode, sink: BinaryIO) -> int:
        """Serializes all nodes in the list, including the random link topology, into sink."""
        return await asyncio.to_thread(self.serialize_sync, head, sink)

    async def deserialize(self, source: BinaryIO) -> ListNode:
        """Deserializes a list from source and returns its head node."""
        return await asyncio.to_thread(self.deserialize_sync, source)

    async def deep_copy(self, head: ListNode) -> ListNode:
        """Makes a deep copy of the list and returns the new head node."""
        return await asyncio.to_thread(self.deep_copy_sync, head)


class ListSerializer(ListSerializerBase):
    """V1 format: registry link ids, random links inline, forward links resolved after reading."""

    format_name = FORMAT_V1

    def serialize_sync(self, head: ListNode, sink: BinaryIO) -> int:
        return ListV1Serializer(head).serialize(sink)

    def deserialize_sync(self, source: BinaryIO) -> ListNode:
        return build_v1_list(ListV1Parser(source).get_records())


class ListSerializerV2(ListSerializerBase):
    """V2 format: positional link ids, random links in a second section."""

    format_name = FORMAT_V2

    def __init__(self, concurrent_resolver: bool = False):
        self.concurrent_resolver = concurrent_resolver

    def serialize_sync(self, head: ListNode, sink: BinaryIO) -> int:
        return ListV2Serializer(head, concurrent_resolver=self.concurrent_resolver).serialize(sink)

    def deserialize_sync(self, source: BinaryIO) -> ListNode:
        return build_v2_list(ListV2Parser(source).get_sections())


SERIALIZERS: Dict[str, Type[ListSerializerBase]] = {
    FORMAT_V1: ListSerializer,
    FORMAT_V2: ListSerializerV2,
}


def get_serializer(format_name: str = DEFAULT_FORMAT, **options) -> ListSerializerBase:
    """
    Create the serializer for a format.

    Args:
        format_name: "v1" or "v2"
        **options: Passed to the serializer class (e.g. concurrent_resolver for v2)
    """
    try:
        serializer_class = SERIALIZERS[format_name]
    except KeyError:
        known = ", ".join(sorted(SERIALIZERS))
        raise ValueError(f"Unknown list format {format_name!r} (expected one of: {known})") from None
    return serializer_class(**options)


async def serialize(head: ListNode, sink: BinaryIO, format_name: str = DEFAULT_FORMAT) -> int:
    return await get_serializer(format_name).serialize(head, sink)


async def deserialize(source: BinaryIO, format_name: str = DEFAULT_FORMAT) -> ListNode:
    return await get_serializer(format_name).deserialize(source)


async def deep_copy(head: ListNode, format_name: str = DEFAULT_FORMAT) -> ListNode:
    return await get_serializer(format_name).deep_copy(head)
