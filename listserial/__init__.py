"""
listserial

Binary serialization and deep copy of doubly linked lists whose nodes carry
an extra "random" link to any node of the same list.

Two stream formats are provided:
- v1: link ids from an identity registry, random links written inline
- v2: positional link ids, random links in a second section

Usage:
    from listserial import build_list, deep_copy, get_serializer

    head = build_list([("x", 2), (None, None), ("y", 0)])
    copy = await deep_copy(head, format_name="v2")
"""

from .constants import DEFAULT_FORMAT, FORMAT_V1, FORMAT_V2, NULL_SENTINEL
from .errors import (
    ListSerializationError,
    InvalidArgumentError,
    StreamCorruptionError,
    TruncatedStreamError,
    MalformedRecordError,
    UnresolvedReferenceError,
    LinkIndexOutOfRangeError,
    EmptyStreamError,
)
from .graph import ListNode, build_list, iter_nodes, list_length, snapshot
from .serializer import (
    ListSerializerBase,
    ListSerializer,
    ListSerializerV2,
    SERIALIZERS,
    get_serializer,
    serialize,
    deserialize,
    deep_copy,
)

__version__ = "1.0.0"
