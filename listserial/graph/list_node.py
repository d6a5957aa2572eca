"""
List Node Data Structure

The doubly linked list with one extra "random" edge per node that the
codecs serialize. Nodes compare and hash by identity, so two nodes holding
the same payload are still different nodes.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import InvalidArgumentError


@dataclass(eq=False)
class ListNode:
    """
    A single node of the list.

    data is optional text; None and "" are different payloads.
    previous mirrors next. random may point at any node of the same list,
    including the node itself, or be None.
    """
    data: Optional[str] = None
    next: Optional['ListNode'] = field(default=None, repr=False)
    previous: Optional['ListNode'] = field(default=None, repr=False)
    random: Optional['ListNode'] = field(default=None, repr=False)

    def append(self, data: Optional[str] = None) -> 'ListNode':
        """Create a node holding data after this one and return it."""
        node = ListNode(data)
        self.link_after(node)
        return node

    def link_after(self, node: 'ListNode'):
        """Chain node directly after this (tail) node."""
        self.next = node
        node.previous = self


def iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Iterate a list from head to tail via next."""
    current = head
    while current is not None:
        yield current
        current = current.next


def list_length(head: Optional[ListNode]) -> int:
    """Number of nodes reachable from head."""
    return sum(1 for _ in iter_nodes(head))


def build_list(data: Sequence[Tuple[Optional[str], Optional[int]]]) -> ListNode:
    """
    Build a list with random links from positional tuples.

    data: sequence of (payload, random_index) tuples, random_index None
    meaning no random link.
    Example: [("x", 2), (None, None), ("y", 0)]

    Returns:
        Head node of the new list
    """
    if not data:
        raise InvalidArgumentError("Cannot build an empty list")

    nodes = [ListNode(payload) for payload, _ in data]
    for i in range(len(nodes) - 1):
        nodes[i].link_after(nodes[i + 1])

    for i, (_, random_index) in enumerate(data):
        if random_index is None:
            continue
        if not 0 <= random_index < len(nodes):
            raise InvalidArgumentError(
                f"Random index {random_index} of node {i} out of range [0, {len(nodes)})"
            )
        nodes[i].random = nodes[random_index]

    return nodes[0]


def snapshot(head: ListNode) -> List[Tuple[Optional[str], Optional[int]]]:
    """
    Positional view of a list: [(payload, random_index), ...].

    The inverse of build_list(). Two lists with equal snapshots hold the
    same payload sequence and the same random topology.
    """
    nodes = list(iter_nodes(head))
    positions = {id(node): index for index, node in enumerate(nodes)}

    result = []
    for node in nodes:
        if node.random is None:
            result.append((node.data, None))
            continue
        if id(node.random) not in positions:
            raise InvalidArgumentError("Random link points outside the list")
        result.append((node.data, positions[id(node.random)]))
    return result


def require_head(head) -> ListNode:
    """Reject anything that is not the head node of a list."""
    if head is None:
        raise InvalidArgumentError("List head must not be None")
    if not isinstance(head, ListNode):
        raise InvalidArgumentError(f"Expected a ListNode head, got {type(head).__name__}")
    if head.previous is not None:
        raise InvalidArgumentError("Node is not the head of its list (previous is set)")
    return head
