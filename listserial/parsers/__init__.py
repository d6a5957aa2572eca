"""
List Stream Parsers

This package reads the binary list formats into plain records:

- base: Shared pieces (NodeRecord, StreamReader)
- list_v1: ListV1Parser for V1 streams (inline random links)
- list_v2: ListV2Parser for V2 streams (node section + random section)

Usage:
    from listserial.parsers import ListV1Parser, ListV2Parser

    records = ListV1Parser(stream).get_records()
    sections = ListV2Parser(stream).get_sections()
"""

from .base import NodeRecord, StreamReader
from .list_v1 import ListV1Parser
from .list_v2 import ListV2Parser, V2Stream, RANDOM_LINK_DTYPE

__all__ = [
    'NodeRecord',
    'StreamReader',
    'ListV1Parser',
    'ListV2Parser',
    'V2Stream',
    'RANDOM_LINK_DTYPE',
]
