"""
List Graph Builder

Turns parsed stream records into a fresh ListNode graph.

V1 random links may point forward to records not read yet. Those are queued
as pending links while the list is built and resolved in a final pass once
every record has been bound to a node.

V2 random links are positions, so every target already exists by the time
the random section is applied.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .list_node import ListNode
from .registry import IdentityRegistry
from ..constants import NULL_SENTINEL
from ..errors import EmptyStreamError, LinkIndexOutOfRangeError, UnresolvedReferenceError
from ..parsers.base import NodeRecord
from ..parsers.list_v2 import V2Stream
from ..utils import logDebug, logWarning


@dataclass
class PendingLink:
    """A random link whose target had not been decoded yet."""
    source: ListNode
    target_link_id: int
    offset: int  # Offset of the source record, for error messages


def _chain_nodes(records: Sequence[NodeRecord]) -> List[ListNode]:
    """Allocate one node per record and chain them in order."""
    nodes = [ListNode(record.data) for record in records]
    for i in range(len(nodes) - 1):
        nodes[i].link_after(nodes[i + 1])
    return nodes


def build_v1_list(records: Sequence[NodeRecord]) -> ListNode:
    """
    Build a list from V1 records, resolving forward random links.

    Args:
        records: Records in stream order

    Returns:
        Head node of the new list
    """
    if not records:
        raise EmptyStreamError("Stream holds no node records", 0)

    registry = IdentityRegistry()
    pending: List[PendingLink] = []
    nodes = _chain_nodes(records)

    for node, record in zip(nodes, records):
        if not registry.bind(record.link_id, node):
            logWarning(f"Duplicate link id {record.link_id} at byte offset {record.offset}, keeping first node")

        if record.random_link_id is None:
            continue

        target = registry.node_of(record.random_link_id)
        if target is not None:
            node.random = target
        else:
            pending.append(PendingLink(node, record.random_link_id, record.offset))

    for link in pending:
        target = registry.node_of(link.target_link_id)
        if target is None:
            raise UnresolvedReferenceError(
                f"Random link id {link.target_link_id} never appears in the stream", link.offset
            )
        link.source.random = target

    logDebug(f"Built V1 list: {len(nodes)} nodes, {len(pending)} forward links resolved")
    return nodes[0]


def build_v2_list(sections: V2Stream) -> ListNode:
    """
    Build a list from a parsed V2 stream.

    Args:
        sections: Node records and random link positions

    Returns:
        Head node of the new list
    """
    if sections.node_count == 0:
        raise EmptyStreamError("Stream holds no node records", 0)

    nodes = _chain_nodes(sections.nodes)
    links = sections.random_links

    invalid = (links < NULL_SENTINEL) | (links >= len(nodes))
    if invalid.any():
        index = int(np.flatnonzero(invalid)[0])
        raise LinkIndexOutOfRangeError(
            f"Random link {int(links[index])} of node {index} out of range [0, {len(nodes)})"
        )

    for node, link in zip(nodes, links.tolist()):
        if link != NULL_SENTINEL:
            node.random = nodes[link]

    logDebug(f"Built V2 list: {len(nodes)} nodes")
    return nodes[0]
