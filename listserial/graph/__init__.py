"""
List graph model.

This package provides:
- ListNode: the node type the codecs serialize
- IdentityRegistry: per-call node <-> link id mapping
- build_v1_list / build_v2_list: graph construction from parsed records
"""

from .list_node import ListNode, iter_nodes, list_length, build_list, snapshot, require_head
from .registry import IdentityRegistry
from .builder import PendingLink, build_v1_list, build_v2_list

__all__ = [
    'ListNode',
    'iter_nodes',
    'list_length',
    'build_list',
    'snapshot',
    'require_head',
    'IdentityRegistry',
    'PendingLink',
    'build_v1_list',
    'build_v2_list',
]
