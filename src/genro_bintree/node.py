# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTree node storage.

Nodes live in a NodeArena and reference each other by integer index.
Each arena slot carries a generation counter, bumped every time the slot
is released, so that handles to a released node can be told apart from
handles to a later node reusing the same slot.
"""

from __future__ import annotations

from typing import Any, Iterator


class BinaryTreeNode:
    """A storage record in a NodeArena.

    Each node has:
    - element: The stored value
    - parent: Arena index of the parent, or None for the root
    - left: Arena index of the left child, or None
    - right: Arena index of the right child, or None
    - generation: Incremented each time the slot is released
    - live: False while the slot sits on the free list

    Example:
        >>> node = BinaryTreeNode('A')
        >>> node.element
        'A'
        >>> node.is_leaf
        True
    """

    __slots__ = ('element', 'parent', 'left', 'right', 'generation', 'live')

    def __init__(
        self,
        element: Any = None,
        parent: int | None = None,
        left: int | None = None,
        right: int | None = None,
    ) -> None:
        """Initialize a BinaryTreeNode.

        Args:
            element: The value stored in the node.
            parent: Arena index of the parent node.
            left: Arena index of the left child.
            right: Arena index of the right child.
        """
        self.element = element
        self.parent = parent
        self.left = left
        self.right = right
        self.generation = 0
        self.live = True

    def __repr__(self) -> str:
        return (
            f"BinaryTreeNode({self.element!r}, parent={self.parent}, "
            f"left={self.left}, right={self.right})"
        )

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    @property
    def num_children(self) -> int:
        """Number of existing children (0, 1 or 2)."""
        return (self.left is not None) + (self.right is not None)


class NodeArena:
    """Slot storage for the nodes of a single tree.

    Released slots go on a free list and are handed out again by
    allocate() with their bumped generation.
    """

    __slots__ = ('_nodes', '_free')

    def __init__(self) -> None:
        self._nodes: list[BinaryTreeNode] = []
        self._free: list[int] = []

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return len(self._nodes) - len(self._free)

    def __repr__(self) -> str:
        return f"NodeArena(live={len(self)}, slots={len(self._nodes)})"

    def allocate(self, element: Any, parent: int | None = None) -> int:
        """Store a new childless node and return its index.

        Args:
            element: The value to store.
            parent: Arena index of the parent, if any.

        Returns:
            The index of the new node.
        """
        if self._free:
            index = self._free.pop()
            node = self._nodes[index]
            node.element = element
            node.parent = parent
            node.live = True
            return index
        self._nodes.append(BinaryTreeNode(element, parent))
        return len(self._nodes) - 1

    def release(self, index: int) -> None:
        """Free the slot at index.

        The node is fully unlinked and its generation bumped, so every
        handle issued for it stops validating.
        """
        node = self._nodes[index]
        node.element = None
        node.parent = node.left = node.right = None
        node.generation += 1
        node.live = False
        self._free.append(index)

    def clear(self) -> None:
        """Release every live slot."""
        for index in self.live_indices():
            self.release(index)

    def live_indices(self) -> list[int]:
        """Return the indices of all live nodes."""
        return [i for i, node in enumerate(self._nodes) if node.live]

    def is_live(self, index: int, generation: int) -> bool:
        """True if index holds a live node of the given generation."""
        if not 0 <= index < len(self._nodes):
            return False
        node = self._nodes[index]
        return node.live and node.generation == generation

    def __getitem__(self, index: int) -> BinaryTreeNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[BinaryTreeNode]:
        """Iterate over live nodes in slot order."""
        return (node for node in self._nodes if node.live)
