"""Navigation history with back/forward and forward-branch pruning."""

import itertools
import logging
from dataclasses import dataclass

from .address import Address

logger = logging.getLogger(__name__)


@dataclass
class HistoryNode:
    """A visited location and whatever was fetched for it."""

    node_id: int
    address: Address
    content: bytes | None = None
    error: str | None = None
    prev: int | None = None
    next: int | None = None

    def needs_fetch(self) -> bool:
        """Check whether nothing has been fetched or failed here yet."""
        return self.content is None and self.error is None


class NavigationHistory:
    """A single chain of visited locations.

    Nodes are kept in an arena keyed by id and refer to their neighbours
    by id. Going somewhere new from the middle of the chain discards the
    old forward branch, so there is never more than one.
    """

    def __init__(self):
        self._nodes: dict[int, HistoryNode] = {}
        self._ids = itertools.count(1)
        self._current: int | None = None

    @property
    def current(self) -> HistoryNode | None:
        """The node being viewed, or None before the first go_to."""
        if self._current is None:
            return None
        return self._nodes[self._current]

    def go_to(self, address: Address) -> HistoryNode:
        """
        Visit a new address.

        Args:
            address: Where to go.

        Returns:
            The newly created node, now current.
        """
        node = HistoryNode(node_id=next(self._ids), address=address)
        current = self.current

        if current is not None:
            self._destroy_forward(current)
            current.next = node.node_id
            node.prev = current.node_id

        self._nodes[node.node_id] = node
        self._current = node.node_id
        logger.debug(f"History: go to {address} (node {node.node_id})")
        return node

    def back(self) -> bool:
        """Step back one node. Returns False if already at the start."""
        current = self.current
        if current is None or current.prev is None:
            return False
        self._current = current.prev
        return True

    def forward(self) -> bool:
        """Step forward one node. Returns False if there is no forward step."""
        current = self.current
        if current is None or current.next is None:
            return False
        self._current = current.next
        return True

    def can_go_back(self) -> bool:
        """Check if back() would move."""
        current = self.current
        return current is not None and current.prev is not None

    def can_go_forward(self) -> bool:
        """Check if forward() would move."""
        current = self.current
        return current is not None and current.next is not None

    def drop_content(self) -> None:
        """Forget what was fetched for the current node so it is fetched again."""
        current = self.current
        if current is not None:
            current.content = None
            current.error = None

    def destroy_all(self) -> None:
        """Release every node, wherever the current position is."""
        logger.debug(f"History: destroying {len(self._nodes)} node(s)")
        self._nodes.clear()
        self._current = None

    def _destroy_forward(self, node: HistoryNode) -> None:
        forward_id = node.next
        removed = 0
        while forward_id is not None:
            forward_id = self._nodes.pop(forward_id).next
            removed += 1
        node.next = None
        if removed:
            logger.debug(f"History: discarded {removed} forward node(s)")

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes
