# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-BinTree - Linked binary tree with a positional interface.

A lightweight, zero-dependency library providing a binary tree ADT
for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .config import TraversalOrder
from .exceptions import (
    BinaryTreeError,
    InvalidPositionError,
    NotALeafError,
    RootExistsError,
    SlotOccupiedError,
    TreeArgumentError,
    TreeStateError,
    TwoChildrenError,
)
from .position import Position
from .traversal import breadth_first, inorder, postorder, preorder
from .tree import BinaryTree

__all__ = [
    # Core classes
    "BinaryTree",
    "Position",
    # Configuration
    "TraversalOrder",
    # Traversals
    "inorder",
    "preorder",
    "postorder",
    "breadth_first",
    # Exceptions
    "BinaryTreeError",
    "TreeStateError",
    "RootExistsError",
    "TreeArgumentError",
    "SlotOccupiedError",
    "TwoChildrenError",
    "NotALeafError",
    "InvalidPositionError",
]
