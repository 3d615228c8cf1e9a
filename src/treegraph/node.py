# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph node class."""

from __future__ import annotations

from typing import Any, Hashable, TYPE_CHECKING

if TYPE_CHECKING:
    from .graph import TreeGraph


class TreeGraphNode:
    """A node in a TreeGraph.

    Each node has:
    - data: The payload supplied by the caller
    - key: The node's unique key within the tree
    - parent_key: Key of the parent node, or None for the root
    - children: Keys of the child nodes, in append order
    - graph: Reference to the owning TreeGraph (None until appended)

    The children list is maintained by the owning TreeGraph only.

    Example:
        >>> node = TreeGraphNode('Pizza or pasta?', 'food', 'start')
        >>> node.key
        'food'
        >>> node.children
        ()
    """

    __slots__ = ('data', 'key', 'parent_key', 'graph', '_children')

    def __init__(
        self,
        data: Any,
        key: Hashable,
        parent_key: Hashable | None = None,
    ) -> None:
        """Initialize a TreeGraphNode.

        The parent key is not validated here; the TreeGraph checks it
        when the node is appended.

        Args:
            data: The node's payload.
            key: The node's unique key.
            parent_key: Key of the parent node. Only the root has none.
        """
        self.data = data
        self.key = key
        self.parent_key = parent_key
        self.graph: TreeGraph | None = None
        self._children: list[Hashable] = []

    def __repr__(self) -> str:
        return (
            f"TreeGraphNode({self.key!r}, parent_key={self.parent_key!r}, "
            f"data={self.data!r})"
        )

    @property
    def children(self) -> tuple[Hashable, ...]:
        """Keys of the child nodes in append order."""
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        """True if this node has no parent key."""
        return self.parent_key is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._children

    def has_child(self, key: Hashable) -> bool:
        """Return True if key is listed among this node's children."""
        return key in self._children
