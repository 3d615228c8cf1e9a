# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph - A keyed, rooted tree of payload nodes.

This module provides the TreeGraph class, the container of the treegraph
library. Nodes are built by the caller, handed over with append_node() and
linked to their parent by key. The tree can then be navigated with routes
of child keys and pruned one subtree at a time.

Key Features:
    - **Keyed nodes**: Every node is addressed by a unique, hashable key
    - **O(1) lookup**: Internal dict index next to the append-ordered list
    - **Route navigation**: travel_to_node(['a', 'b']) descends from the root
    - **Cascading removal**: A node is removed together with its subtree
    - **Permissive mode**: Structural violations can be collected instead
      of raised

Example:
    Building a small dialogue tree::

        graph = TreeGraph()
        graph.append_node(TreeGraphNode('Eat or book a seat?', 'start'))
        graph.append_node(TreeGraphNode('Pizza or pasta?', 'food', 'start'))
        graph.append_node(TreeGraphNode('Window or aisle?', 'seat', 'start'))
        graph.append_node(TreeGraphNode('Aisle it is. Bye!', 'aisle', 'seat'))

        graph.travel_to_node(['seat', 'aisle']).data  # 'Aisle it is. Bye!'

        graph.remove_node_with_children('seat')
        len(graph)  # 2
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator

from ..exceptions import (
    DuplicateKeyError,
    MissingParentKeyError,
    NodeOwnershipError,
    ParentNotFoundError,
    RootHasParentError,
    StructuralViolation,
)
from ..node import TreeGraphNode

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class TreeGraph:
    """A rooted tree of keyed nodes with O(1) lookup.

    TreeGraph provides:
    - append_node(node): Link a node under its declared parent
    - travel_to_node(route): Follow child keys from the root
    - remove_node_with_children(key): Drop a node and its whole subtree
    - len(graph) / is_empty(): Count of live nodes

    The first appended node is the root and must not declare a parent key.
    Every later node must name a parent already in the tree.

    Attributes:
        violations: Structural violations collected while
            raise_on_error is False, in the order they happened.

    Example:
        >>> graph = TreeGraph([('Hello', 'start'), ('Bye', 'end', 'start')])
        >>> graph.travel_to_node(['end']).data
        'Bye'
    """

    __slots__ = ('_nodes', '_order', '_raise_on_error', '_prune_parent', 'violations')

    def __init__(
        self,
        source: Iterable[TreeGraphNode | tuple] | None = None,
        raise_on_error: bool = True,
        prune_parent: bool = True,
    ) -> None:
        """Initialize a TreeGraph.

        Args:
            source: Optional nodes to append, in order. Items can be
                TreeGraphNode instances or tuples (data, key) for the root
                and (data, key, parent_key) for the other nodes.
            raise_on_error: If True (default), append_node raises a
                StructuralViolation subclass on invalid nodes. If False,
                the violation is returned, logged and collected in
                self.violations instead.
            prune_parent: If True (default), removing a subtree also drops
                its key from the parent's children. If False, the parent
                keeps a dangling reference to the removed key.

        Example:
            >>> TreeGraph()
            >>> TreeGraph([('root', 'r'), ('leaf', 'l', 'r')])
            >>> TreeGraph(raise_on_error=False)  # permissive mode
        """
        self._nodes: dict[Hashable, TreeGraphNode] = {}
        self._order: list[TreeGraphNode] = []
        self._raise_on_error = raise_on_error
        self._prune_parent = prune_parent
        self.violations: list[StructuralViolation] = []

        if source is not None:
            self.extend(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing node keys."""
        return f"TreeGraph({self.keys()})"

    def __len__(self) -> int:
        """Return the number of nodes in the tree."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeGraphNode]:
        """Iterate over nodes in append order."""
        return iter(self._order)

    def __contains__(self, key: Hashable) -> bool:
        """Check if a node with the given key is in the tree."""
        return key in self._nodes

    @property
    def raise_on_error(self) -> bool:
        return self._raise_on_error

    @property
    def prune_parent(self) -> bool:
        return self._prune_parent

    # ==================== Loading ====================

    def _coerce_node(self, item: TreeGraphNode | tuple) -> TreeGraphNode:
        """Return item as a TreeGraphNode, building it from a tuple if needed.

        Raises:
            TypeError: If item is neither a TreeGraphNode nor a tuple.
            ValueError: If a tuple has other than 2 or 3 elements.
        """
        if isinstance(item, TreeGraphNode):
            return item
        if isinstance(item, tuple):
            if len(item) not in (2, 3):
                raise ValueError(
                    f"Node tuple must be (data, key) or (data, key, parent_key), "
                    f"got {len(item)} elements"
                )
            return TreeGraphNode(*item)
        raise TypeError(
            f"source items must be TreeGraphNode or tuple, not {type(item).__name__}"
        )

    def extend(self, nodes: Iterable[TreeGraphNode | tuple]) -> list[StructuralViolation]:
        """Append several nodes in order.

        Args:
            nodes: TreeGraphNode instances or (data, key[, parent_key]) tuples.

        Returns:
            The violations collected for these nodes. Always empty when
            raise_on_error is True, since the first violation raises.
        """
        collected = []
        for item in nodes:
            violation = self.append_node(self._coerce_node(item))
            if violation is not None:
                collected.append(violation)
        return collected

    # ==================== Core API ====================

    def _check_append(self, node: TreeGraphNode) -> StructuralViolation | None:
        """Return the violation node would cause if appended, or None."""
        if node.graph is not None:
            return NodeOwnershipError(
                f"Node {node.key!r} already belongs to a tree", node
            )
        if not self._order:
            if node.parent_key is not None:
                return RootHasParentError(
                    f"Root node {node.key!r} cannot have a parent key "
                    f"(got {node.parent_key!r})",
                    node,
                )
            return None
        if node.parent_key is None:
            return MissingParentKeyError(
                f"Node {node.key!r} needs a parent key, the tree already has a root",
                node,
            )
        if node.key in self._nodes:
            return DuplicateKeyError(f"Key {node.key!r} is already in the tree", node)
        if node.parent_key not in self._nodes:
            return ParentNotFoundError(
                f"Parent {node.parent_key!r} of node {node.key!r} not found", node
            )
        return None

    def append_node(self, node: TreeGraphNode) -> StructuralViolation | None:
        """Append node under its declared parent.

        The first node becomes the root and must have no parent key. Every
        other node must have a parent key naming a node already in the
        tree; its key is then added to that parent's children. The tree is
        left untouched when the node is rejected.

        Args:
            node: The node to append. It is owned by this tree afterwards.

        Returns:
            None on success. In permissive mode (raise_on_error=False) the
            StructuralViolation describing a rejected node.

        Raises:
            RootHasParentError: The tree is empty and node has a parent key.
            MissingParentKeyError: The tree has a root and node has no parent key.
            ParentNotFoundError: The parent key is not in the tree.
            DuplicateKeyError: The key is already in the tree.
            NodeOwnershipError: node already belongs to a tree.
        """
        violation = self._check_append(node)
        if violation is not None:
            if self._raise_on_error:
                raise violation
            logger.warning("Rejected node %r: %s", node.key, violation)
            self.violations.append(violation)
            return violation

        self._nodes[node.key] = node
        if node.parent_key is not None:
            self._nodes[node.parent_key]._children.append(node.key)
        node._children.clear()
        node.graph = self
        self._order.append(node)
        logger.debug("Appended node %r under %r", node.key, node.parent_key)
        return None

    def _live_child(self, parent: TreeGraphNode, key: Hashable) -> TreeGraphNode | None:
        """Return the node for a child key of parent, or None if dangling.

        A key is dangling when no node has it, or when the node with that
        key was appended under a different parent after the original child
        was removed.
        """
        child = self._nodes.get(key)
        if child is None or child.parent_key != parent.key:
            return None
        return child

    def travel_to_node(self, route: Iterable[Hashable]) -> TreeGraphNode | None:
        """Follow a route of child keys starting from the root.

        Args:
            route: Keys to descend through, one level per key.

        Returns:
            The node reached at the end of the route, the root for an empty
            route, or None when the tree is empty or a key is not a child
            of the current node.

        Example:
            >>> graph.travel_to_node([])  # root
            >>> graph.travel_to_node(['seat', 'aisle'])
        """
        current = self.root
        if current is None:
            return None

        for key in route:
            if not current.has_child(key):
                return None
            child = self._live_child(current, key)
            if child is None:
                logger.warning(
                    "Key %r is listed as child of %r but has no node", key, current.key
                )
                return None
            current = child

        return current

    def descendants(self, key: Hashable) -> list[Hashable]:
        """Return the keys of every transitive descendant of key.

        Keys come in post-order: each node follows all of its own
        descendants, and siblings keep their append order. Dangling child
        keys are skipped. Returns an empty list if key is not in the tree.
        """
        start = self._nodes.get(key)
        if start is None:
            return []

        collected: list[Hashable] = []
        seen = {key}
        stack = [(start, iter(start._children))]
        while stack:
            current, pending = stack[-1]
            child_key = next(pending, _EXHAUSTED)
            if child_key is _EXHAUSTED:
                stack.pop()
                if stack:
                    collected.append(current.key)
                continue
            # a key re-appended after removal can be listed twice
            if child_key in seen:
                continue
            child = self._live_child(current, child_key)
            if child is not None:
                seen.add(child_key)
                stack.append((child, iter(child._children)))
        return collected

    def remove_node_with_children(self, key: Hashable) -> list[TreeGraphNode]:
        """Remove the node with the given key and its whole subtree.

        Descendants are removed before their ancestors. Removing a key that
        is not in the tree does nothing.

        With prune_parent=True the key is also dropped from its parent's
        children; otherwise the parent keeps listing it.

        Args:
            key: Key of the subtree root to remove.

        Returns:
            The removed nodes in removal order (empty if key was absent).
        """
        target = self._nodes.get(key)
        if target is None:
            logger.debug("Nothing to remove for key %r", key)
            return []

        doomed = self.descendants(key)
        doomed.append(key)
        removed = [self._nodes.pop(k) for k in doomed]
        gone = set(doomed)
        self._order = [n for n in self._order if n.key not in gone]
        for node in removed:
            node.graph = None

        if self._prune_parent and target.parent_key is not None:
            parent = self._nodes.get(target.parent_key)
            if parent is not None:
                parent._children = [k for k in parent._children if k != key]

        logger.debug("Removed node %r with %d descendants", key, len(removed) - 1)
        return removed

    def is_empty(self) -> bool:
        """True if the tree holds no nodes."""
        return not self._nodes

    def clear(self) -> None:
        """Remove all nodes. Collected violations are kept."""
        for node in self._order:
            node.graph = None
        self._nodes.clear()
        self._order.clear()

    # ==================== Lookup & Navigation ====================

    @property
    def root(self) -> TreeGraphNode | None:
        """The node without parent key, or None if the tree is empty."""
        for node in self._order:
            if node.parent_key is None:
                return node
        return None

    def get(self, key: Hashable, default: Any = None) -> TreeGraphNode | None:
        """Get node by key, with default.

        Args:
            key: Node key to find.
            default: Value to return if not found.

        Returns:
            TreeGraphNode if found, default otherwise.
        """
        return self._nodes.get(key, default)

    def route_to(self, key: Hashable) -> list[Hashable] | None:
        """Return the route from the root to the node with the given key.

        The result can be passed to travel_to_node(). The root's route is
        an empty list. Returns None if key is not in the tree.
        """
        node = self._nodes.get(key)
        if node is None:
            return None
        route = []
        while node.parent_key is not None:
            route.append(node.key)
            node = self._nodes[node.parent_key]
        route.reverse()
        return route

    # ==================== Iteration ====================

    def keys(self) -> list[Hashable]:
        """Return list of keys in append order."""
        return [n.key for n in self._order]

    def nodes(self) -> list[TreeGraphNode]:
        """Return list of nodes in append order."""
        return list(self._order)

    def walk(self) -> Iterator[tuple[tuple[Hashable, ...], TreeGraphNode]]:
        """Walk the tree depth-first from the root.

        Yields:
            Tuples of (route, node), where route is the tuple of keys that
            travel_to_node() follows to reach node. The root comes first
            with an empty route; children follow their append order.

        Example:
            >>> for route, node in graph.walk():
            ...     print('  ' * len(route), node.key)
        """
        root = self.root
        if root is None:
            return
        stack: list[tuple[tuple[Hashable, ...], TreeGraphNode]] = [((), root)]
        while stack:
            route, node = stack.pop()
            yield route, node
            children = [self._live_child(node, k) for k in dict.fromkeys(node._children)]
            for child in reversed(children):
                if child is not None:
                    stack.append((route + (child.key,), child))
