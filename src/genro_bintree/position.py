# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Position handles for BinaryTree nodes."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .tree import BinaryTree


class Position:
    """An opaque handle to one node of a BinaryTree.

    A Position is an (owner tree, arena index, generation) triple. The tree
    creates a new Position object for every query, but two positions for
    the same live node always compare equal and hash alike.

    Reading the element of a stale position (its node was removed, or its
    tree gave the node away through attach) raises InvalidPositionError.

    Example:
        >>> tree = BinaryTree()
        >>> root = tree.add_root('A')
        >>> root.get_element()
        'A'
        >>> root == tree.root()
        True
    """

    __slots__ = ('_tree', '_index', '_generation')

    def __init__(self, tree: BinaryTree, index: int, generation: int) -> None:
        self._tree = tree
        self._index = index
        self._generation = generation

    def __repr__(self) -> str:
        if self.is_valid:
            return f"Position({self._tree._arena[self._index].element!r})"
        return f"Position(<stale #{self._index}>)"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            other._tree is self._tree
            and other._index == self._index
            and other._generation == self._generation
        )

    def __hash__(self) -> int:
        return hash((id(self._tree), self._index, self._generation))

    @property
    def is_valid(self) -> bool:
        """True while the node this position denotes is still in its tree."""
        return self._tree._arena.is_live(self._index, self._generation)

    def get_element(self) -> Any:
        """Return the element stored at this position.

        Raises:
            InvalidPositionError: If the position is stale.
        """
        return self._tree._validate(self).element

    @property
    def element(self) -> Any:
        """The element stored at this position."""
        return self.get_element()
