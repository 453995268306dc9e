# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTree - A linked binary tree with a positional interface.

This module provides the BinaryTree class, the tree engine of the
genro-bintree library. Callers never touch nodes directly: every query and
mutator takes and returns Position handles, and the tree enforces the
binary shape (at most one left and one right child per node) on every
mutation.

Key Features:
    - **Positional API**: Stable, comparable Position handles
    - **Arena storage**: Nodes addressed by index, stale handles fail fast
    - **Splicing removal**: A node with one child is replaced by that child
    - **Attach**: Graft two donor trees under a leaf, emptying the donors
    - **Lazy traversal**: Inorder (default), preorder, postorder, breadth-first

Error handling:
    Every mutator checks all of its preconditions before touching the
    structure, so a rejected call leaves the tree exactly as it was.

    - RootExistsError: add_root on a non-empty tree
    - SlotOccupiedError: add_left/add_right on an occupied slot
    - TwoChildrenError: remove on a node with two children
    - NotALeafError: attach onto an internal node
    - InvalidPositionError: stale, foreign, or non-Position argument

Example:
    Basic usage::

        tree = BinaryTree()
        a = tree.add_root('A')
        b = tree.add_left(a, 'B')
        tree.add_right(a, 'C')

        print(list(tree))  # ['B', 'A', 'C']
        print(tree.parent(b) == a)  # True

    Grafting::

        left, right = BinaryTree(), BinaryTree()
        left.add_root('X')
        right.add_root('Y')
        tree.attach(b, left, right)
        print(len(tree), left.is_empty())  # 5 True
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .config import TraversalOrder
from .exceptions import (
    InvalidPositionError,
    NotALeafError,
    RootExistsError,
    SlotOccupiedError,
    TreeArgumentError,
    TwoChildrenError,
)
from .node import BinaryTreeNode, NodeArena
from .position import Position
from .traversal import breadth_first, inorder, postorder, preorder

logger = logging.getLogger(__name__)

_TRAVERSALS = {
    TraversalOrder.INORDER: inorder,
    TraversalOrder.PREORDER: preorder,
    TraversalOrder.POSTORDER: postorder,
    TraversalOrder.BREADTH_FIRST: breadth_first,
}


class BinaryTree:
    """A binary tree of arbitrary elements with a positional interface.

    BinaryTree provides:
    - add_root / add_left / add_right: Grow the tree
    - remove(p): Remove a node with at most one child, splicing
    - attach(p, t1, t2): Graft two donor trees under a leaf
    - root / parent / left / right / sibling / children: Navigation
    - positions() / iter(tree): Lazy traversal, inorder by default

    Not thread-safe. Concurrent use must be serialized by the caller, and
    the tree must not be mutated while a traversal is being consumed.

    Attributes:
        order: The TraversalOrder used by positions() and iteration.

    Example:
        >>> tree = BinaryTree()
        >>> root = tree.add_root(10)
        >>> tree.add_left(root, 5).get_element()
        5
        >>> len(tree)
        2
    """

    __slots__ = ('_arena', '_root', '_size', '_order')

    def __init__(
        self, order: TraversalOrder | str = TraversalOrder.INORDER
    ) -> None:
        """Initialize an empty BinaryTree.

        Args:
            order: Traversal order for positions() and iteration, either a
                TraversalOrder member or its string value ('inorder',
                'preorder', 'postorder', 'breadth_first').

        Raises:
            ValueError: If order is not a known traversal order.
        """
        self._arena = NodeArena()
        self._root: int | None = None
        self._size = 0
        self._order = TraversalOrder(order)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation with size and root element."""
        if self._root is None:
            return "BinaryTree(empty)"
        root = self._arena[self._root].element
        return f"BinaryTree(size={self._size}, root={root!r})"

    def __len__(self) -> int:
        """Return the number of nodes in the tree."""
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over elements in the configured traversal order."""
        for p in self.positions():
            yield p.get_element()

    @property
    def order(self) -> TraversalOrder:
        """The traversal order used by positions() and iteration."""
        return self._order

    # ==================== Position Utilities ====================

    def _validate(self, p: Position) -> BinaryTreeNode:
        """Return the node denoted by p.

        Raises:
            InvalidPositionError: If p is not a Position, belongs to another
                tree, or denotes a node that is no longer in the tree.
        """
        if not isinstance(p, Position):
            raise InvalidPositionError(
                f"Expected a Position, not {type(p).__name__}"
            )
        if p._tree is not self:
            raise InvalidPositionError("Position belongs to a different tree")
        if not self._arena.is_live(p._index, p._generation):
            raise InvalidPositionError("Position is no longer valid")
        return self._arena[p._index]

    def _make_position(self, index: int | None) -> Position | None:
        """Wrap an arena index in a Position (None passes through)."""
        if index is None:
            return None
        return Position(self, index, self._arena[index].generation)

    # ==================== Queries ====================

    def size(self) -> int:
        """Return the number of nodes in the tree."""
        return self._size

    def is_empty(self) -> bool:
        """True if the tree has no nodes."""
        return self._size == 0

    def root(self) -> Position | None:
        """Return the root position, or None if the tree is empty."""
        return self._make_position(self._root)

    def parent(self, p: Position) -> Position | None:
        """Return the parent of p, or None if p is the root."""
        return self._make_position(self._validate(p).parent)

    def left(self, p: Position) -> Position | None:
        """Return the left child of p, or None."""
        return self._make_position(self._validate(p).left)

    def right(self, p: Position) -> Position | None:
        """Return the right child of p, or None."""
        return self._make_position(self._validate(p).right)

    def sibling(self, p: Position) -> Position | None:
        """Return the other child of p's parent, or None."""
        node = self._validate(p)
        if node.parent is None:
            return None
        parent = self._arena[node.parent]
        if parent.left == p._index:
            return self._make_position(parent.right)
        return self._make_position(parent.left)

    def children(self, p: Position) -> Iterator[Position]:
        """Iterate over the existing children of p, left first."""
        node = self._validate(p)
        for index in (node.left, node.right):
            if index is not None:
                yield self._make_position(index)

    def num_children(self, p: Position) -> int:
        """Return the number of children of p (0, 1 or 2)."""
        return self._validate(p).num_children

    def is_root(self, p: Position) -> bool:
        """True if p is the root of the tree."""
        self._validate(p)
        return p._index == self._root

    def is_internal(self, p: Position) -> bool:
        """True if p has at least one child."""
        return not self._validate(p).is_leaf

    def is_external(self, p: Position) -> bool:
        """True if p is a leaf."""
        return self._validate(p).is_leaf

    def depth(self, p: Position) -> int:
        """Return the number of ancestors of p (0 for the root)."""
        node = self._validate(p)
        depth = 0
        while node.parent is not None:
            node = self._arena[node.parent]
            depth += 1
        return depth

    def height(self, p: Position | None = None) -> int:
        """Return the height of the subtree rooted at p.

        Args:
            p: Subtree root. Defaults to the tree's root.

        Returns:
            Number of edges on the longest downward path from p. A leaf
            has height 0 and an empty tree has height -1.
        """
        if p is None:
            p = self.root()
            if p is None:
                return -1
        level = [p]
        height = -1
        while level:
            height += 1
            level = [c for q in level for c in self.children(q)]
        return height

    # ==================== Mutators ====================

    def add_root(self, e: Any) -> Position:
        """Store e at the root of an empty tree.

        Returns:
            The root position.

        Raises:
            RootExistsError: If the tree already has a root.
        """
        if self._root is not None:
            raise RootExistsError("Tree already has a root")
        self._root = self._arena.allocate(e)
        self._size = 1
        logger.debug("Added root %r", e)
        return self._make_position(self._root)

    def add_left(self, p: Position, e: Any) -> Position:
        """Create a left child of p storing e.

        Returns:
            The new child's position.

        Raises:
            SlotOccupiedError: If p already has a left child.
        """
        return self._add_child(p, e, 'left')

    def add_right(self, p: Position, e: Any) -> Position:
        """Create a right child of p storing e.

        Returns:
            The new child's position.

        Raises:
            SlotOccupiedError: If p already has a right child.
        """
        return self._add_child(p, e, 'right')

    def _add_child(self, p: Position, e: Any, side: str) -> Position:
        node = self._validate(p)
        if getattr(node, side) is not None:
            raise SlotOccupiedError(f"Position already has a {side} child")
        child = self._arena.allocate(e, parent=p._index)
        setattr(node, side, child)
        self._size += 1
        logger.debug("Added %s child %r under %r", side, e, node.element)
        return self._make_position(child)

    def replace(self, p: Position, e: Any) -> Any:
        """Store e at p and return the element it replaces."""
        node = self._validate(p)
        old = node.element
        node.element = e
        return old

    def remove(self, p: Position) -> Any:
        """Remove the node at p and return its element.

        If the node has one child, the child takes the node's place under
        its parent (or becomes the root). Every handle to the removed node
        becomes stale.

        Raises:
            TwoChildrenError: If the node at p has two children.
        """
        node = self._validate(p)
        if node.left is not None and node.right is not None:
            raise TwoChildrenError("Cannot remove a node with two children")

        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            self._arena[child].parent = parent
        if parent is None:
            self._root = child
        else:
            parent_node = self._arena[parent]
            if parent_node.left == p._index:
                parent_node.left = child
            else:
                parent_node.right = child

        element = node.element
        self._size -= 1
        self._arena.release(p._index)
        logger.debug("Removed %r (spliced child: %s)", element, child is not None)
        return element

    def attach(self, p: Position, t1: BinaryTree, t2: BinaryTree) -> None:
        """Attach t1 and t2 as the left and right subtrees of leaf p.

        The donors' nodes move into this tree and both donors are left
        empty. Positions previously obtained from a donor become stale.
        An empty donor leaves the matching slot of p empty.

        Raises:
            NotALeafError: If p has any child.
            TreeArgumentError: If a donor is not a BinaryTree, is this tree,
                or the same non-empty tree is given twice.
        """
        node = self._validate(p)
        if not node.is_leaf:
            raise NotALeafError("Can only attach subtrees to a leaf")
        for donor in (t1, t2):
            if not isinstance(donor, BinaryTree):
                raise TreeArgumentError(
                    f"Expected a BinaryTree donor, not {type(donor).__name__}"
                )
            if donor is self:
                raise TreeArgumentError("A tree cannot be attached to itself")
        if t1 is t2 and not t1.is_empty():
            raise TreeArgumentError("The same tree cannot be attached twice")

        added = t1._size + t2._size
        if not t1.is_empty():
            node.left = self._adopt(t1, p._index)
        if not t2.is_empty():
            node.right = self._adopt(t2, p._index)
        self._size += added
        logger.debug("Attached %d nodes under %r", added, node.element)

    def _adopt(self, donor: BinaryTree, parent: int) -> int:
        """Move all nodes of donor into this arena under parent.

        The donor's shape is rebuilt node by node, then the donor is
        emptied.

        Returns:
            Arena index of the adopted subtree root.
        """
        source = donor._arena
        top = self._arena.allocate(source[donor._root].element, parent)
        pending = [(donor._root, top)]
        while pending:
            old, new = pending.pop()
            old_node, new_node = source[old], self._arena[new]
            if old_node.left is not None:
                new_node.left = self._arena.allocate(
                    source[old_node.left].element, new
                )
                pending.append((old_node.left, new_node.left))
            if old_node.right is not None:
                new_node.right = self._arena.allocate(
                    source[old_node.right].element, new
                )
                pending.append((old_node.right, new_node.right))
        donor._reset()
        return top

    def _reset(self) -> None:
        """Drop every node, invalidating all positions handed out."""
        self._arena.clear()
        self._root = None
        self._size = 0

    # ==================== Traversal ====================

    def positions(self) -> Iterator[Position]:
        """Iterate over all positions in the configured order (inorder by default)."""
        return _TRAVERSALS[self._order](self)

    def traverse(self, order: TraversalOrder | str) -> Iterator[Position]:
        """Iterate over all positions in the given order.

        Raises:
            ValueError: If order is not a known traversal order.
        """
        return _TRAVERSALS[TraversalOrder(order)](self)

    def inorder(self) -> Iterator[Position]:
        """Iterate over positions in inorder."""
        return inorder(self)

    def preorder(self) -> Iterator[Position]:
        """Iterate over positions in preorder."""
        return preorder(self)

    def postorder(self) -> Iterator[Position]:
        """Iterate over positions in postorder."""
        return postorder(self)

    def breadth_first(self) -> Iterator[Position]:
        """Iterate over positions level by level."""
        return breadth_first(self)
