# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTree exceptions."""

from __future__ import annotations


class BinaryTreeError(Exception):
    """Base exception for BinaryTree errors."""

    pass


class TreeStateError(BinaryTreeError, RuntimeError):
    """Raised when an operation is not allowed in the tree's current state."""

    pass


class RootExistsError(TreeStateError):
    """Raised when a root is added to a tree that already has one."""

    pass


class TreeArgumentError(BinaryTreeError, ValueError):
    """Raised when an argument violates a structural precondition."""

    pass


class SlotOccupiedError(TreeArgumentError):
    """Raised when a child is added to an already occupied slot."""

    pass


class TwoChildrenError(TreeArgumentError):
    """Raised when removing a node that has two children."""

    pass


class NotALeafError(TreeArgumentError):
    """Raised when subtrees are attached to an internal node."""

    pass


class InvalidPositionError(TreeArgumentError):
    """Raised for a position that is stale, foreign, or not a Position."""

    pass
