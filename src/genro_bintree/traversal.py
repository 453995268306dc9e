# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal generators for BinaryTree.

Every generator works through the public positional API (root, left,
right, children) and keeps its pending work on an explicit stack or queue,
so deep, degenerate trees never hit the recursion limit.

Each call returns a fresh generator over the tree's shape at the time it
is consumed. Mutating the tree while a generator is running is not
supported: the result is undefined.

Example:
    >>> for p in inorder(tree):
    ...     print(p.get_element())
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .position import Position
    from .tree import BinaryTree


def inorder(tree: BinaryTree) -> Iterator[Position]:
    """Yield positions left subtree first, then the node, then the right subtree."""
    stack: list[Position] = []
    walk = tree.root()
    while stack or walk is not None:
        while walk is not None:
            stack.append(walk)
            walk = tree.left(walk)
        walk = stack.pop()
        yield walk
        walk = tree.right(walk)


def preorder(tree: BinaryTree) -> Iterator[Position]:
    """Yield each node before its left and right subtrees."""
    root = tree.root()
    if root is None:
        return
    stack = [root]
    while stack:
        p = stack.pop()
        yield p
        # right pushed first so the left subtree comes out first
        right = tree.right(p)
        if right is not None:
            stack.append(right)
        left = tree.left(p)
        if left is not None:
            stack.append(left)


def postorder(tree: BinaryTree) -> Iterator[Position]:
    """Yield the left subtree, then the right subtree, then the node."""
    root = tree.root()
    if root is None:
        return
    stack: list[tuple[Position, bool]] = [(root, False)]
    while stack:
        p, expanded = stack.pop()
        if expanded:
            yield p
            continue
        stack.append((p, True))
        right = tree.right(p)
        if right is not None:
            stack.append((right, False))
        left = tree.left(p)
        if left is not None:
            stack.append((left, False))


def breadth_first(tree: BinaryTree) -> Iterator[Position]:
    """Yield positions level by level, left to right."""
    root = tree.root()
    if root is None:
        return
    fringe = deque([root])
    while fringe:
        p = fringe.popleft()
        yield p
        fringe.extend(tree.children(p))
