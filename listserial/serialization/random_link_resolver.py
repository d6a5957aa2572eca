"""
Random Link Resolver

Finds the 0-based position of a node's random target without keeping an
identity table, by searching outward from the node in both directions at
once. The scan stops as soon as either direction hits the target, so each
lookup walks at most min(distance backward, distance forward) steps per
direction. Encoding a whole list is still quadratic in the worst case;
that is the price of not holding a node dictionary during encode.

Two interchangeable implementations:
- RandomLinkResolver: single thread, alternating one step back and one
  step forward
- ConcurrentRandomLinkResolver: the two directions run as two tasks on a
  thread pool and share one cancellation event
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ..errors import InvalidArgumentError
from ..graph import ListNode


class RandomLinkResolver:
    """
    Two-pointer resolver.

    Usage:
        with RandomLinkResolver() as resolver:
            link_id = resolver.find_link_id(node, position)
    """

    def __enter__(self) -> 'RandomLinkResolver':
        return self

    def __exit__(self, exc_type, exc, tb):
        return None

    def find_link_id(self, node: ListNode, position: int) -> int:
        """
        Position of node.random.

        Args:
            node: Node whose random link is set
            position: 0-based position of node in its list

        Returns:
            0-based position of node.random
        """
        target = node.random
        backward, backward_id = node, position
        forward, forward_id = node, position

        while backward is not None or forward is not None:
            if backward is not None:
                if backward is target:
                    return backward_id
                backward = backward.previous
                backward_id -= 1

            if forward is not None:
                if forward is target:
                    return forward_id
                forward = forward.next
                forward_id += 1

        raise _outside_list(position)


class ConcurrentRandomLinkResolver(RandomLinkResolver):
    """
    Resolver running the backward and forward searches concurrently.

    The winning search sets the shared cancellation event; the other search
    checks it at every step and gives up with no result. A cancelled search
    is not an error.

    Usage:
        with ConcurrentRandomLinkResolver() as resolver:
            link_id = resolver.find_link_id(node, position)
    """

    def __init__(self):
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self) -> 'ConcurrentRandomLinkResolver':
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='random-link')
        return self

    def __exit__(self, exc_type, exc, tb):
        self._executor.shutdown(wait=True)
        self._executor = None
        return None

    def find_link_id(self, node: ListNode, position: int) -> int:
        if self._executor is None:
            raise RuntimeError("ConcurrentRandomLinkResolver used outside its 'with' block")

        cancel = threading.Event()
        backward = self._executor.submit(_seek, node, position, 'previous', -1, cancel)
        forward = self._executor.submit(_seek, node, position, 'next', 1, cancel)

        for search in (backward, forward):
            link_id = search.result()
            if link_id is not None:
                return link_id

        raise _outside_list(position)


def _seek(node: ListNode, position: int, step: str, delta: int, cancel: threading.Event) -> Optional[int]:
    """
    Walk from node along step ('previous' or 'next') looking for node.random.

    Returns:
        Position of the target, or None if not found in this direction or
        the search was cancelled
    """
    target = node.random
    current = node
    link_id = position

    while current is not None:
        if cancel.is_set():
            return None
        if current is target:
            cancel.set()
            return link_id
        current = getattr(current, step)
        link_id += delta

    return None


def _outside_list(position: int) -> InvalidArgumentError:
    return InvalidArgumentError(f"Random link of node {position} points outside the list")
