"""
Serialization Package

Handles binary serialization of lists with random links.

- list_v1_serializer: V1 format, registry link ids, inline random links
- list_v2_serializer: V2 format, positional link ids, separate random section
- random_link_resolver: bidirectional position search used by V2
"""

from .list_v1_serializer import ListV1Serializer
from .list_v2_serializer import ListV2Serializer
from .random_link_resolver import RandomLinkResolver, ConcurrentRandomLinkResolver
