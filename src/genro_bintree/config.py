# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BinaryTree configuration options."""

from __future__ import annotations

from enum import Enum


class TraversalOrder(Enum):
    """Order in which positions are visited.

    The value is the accepted string form, so TraversalOrder('preorder')
    and TraversalOrder.PREORDER are the same member.
    """

    INORDER = 'inorder'              # Left subtree, node, right subtree
    PREORDER = 'preorder'            # Node before its children
    POSTORDER = 'postorder'          # Children before node
    BREADTH_FIRST = 'breadth_first'  # Level by level, left to right
