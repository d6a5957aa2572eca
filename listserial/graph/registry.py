"""
Identity Registry

Bidirectional mapping between list nodes and integer link ids for the
duration of a single encode or decode call.

Nodes live in an arena list, so the reverse table can be keyed on id(node):
an id stays unique while the arena keeps its node alive. Ids handed out by
assign() are arena indexes; ids passed to bind() come from the stream.
"""

from typing import Dict, List, Optional

from .list_node import ListNode


class IdentityRegistry:
    """
    Link id registry for one encode or decode call.

    Encode side:
        registry = IdentityRegistry()
        link_id = registry.assign(node)       # new id, or the existing one

    Decode side:
        registry.bind(link_id, node)          # first binding wins
        node = registry.node_of(link_id)      # None if not bound yet
    """

    def __init__(self):
        self._arena: List[ListNode] = []
        self._ids: Dict[int, int] = {}
        self._nodes: Dict[int, ListNode] = {}

    def __len__(self) -> int:
        return len(self._arena)

    def __contains__(self, node: ListNode) -> bool:
        return id(node) in self._ids

    def assign(self, node: ListNode) -> int:
        """Return node's link id, assigning the next free one if unseen."""
        link_id = self._ids.get(id(node))
        if link_id is not None:
            return link_id

        link_id = len(self._arena)
        self._arena.append(node)
        self._ids[id(node)] = link_id
        self._nodes[link_id] = node
        return link_id

    def bind(self, link_id: int, node: ListNode) -> bool:
        """
        Bind a link id read from a stream to a freshly decoded node.

        Returns:
            True if bound, False if link_id was already bound (binding kept)
        """
        if link_id in self._nodes:
            return False

        self._arena.append(node)
        self._ids[id(node)] = link_id
        self._nodes[link_id] = node
        return True

    def link_id_of(self, node: ListNode) -> Optional[int]:
        """Link id of node, or None if it was never registered."""
        return self._ids.get(id(node))

    def node_of(self, link_id: int) -> Optional[ListNode]:
        """Node bound to link_id, or None if not bound yet."""
        return self._nodes.get(link_id)
