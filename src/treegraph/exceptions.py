# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph exceptions."""

from __future__ import annotations

from typing import Any, Hashable, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import TreeGraphNode


class TreeGraphError(Exception):
    """Base exception for TreeGraph errors."""

    pass


class StructuralViolation(TreeGraphError):
    """Raised when an appended node breaks the parent/child contract.

    The tree is left unchanged when this is raised (or returned, in
    permissive mode).

    Attributes:
        node: The rejected node.
        key: Key of the rejected node.
        parent_key: Parent key declared by the rejected node.
    """

    def __init__(self, message: str, node: TreeGraphNode | None = None) -> None:
        super().__init__(message)
        self.node = node
        self.key: Hashable | None = node.key if node is not None else None
        self.parent_key: Any = node.parent_key if node is not None else None


class RootHasParentError(StructuralViolation):
    """Raised when the first node of a tree declares a parent key."""

    pass


class MissingParentKeyError(StructuralViolation):
    """Raised when a non-root node has no parent key."""

    pass


class ParentNotFoundError(StructuralViolation):
    """Raised when the declared parent key is not in the tree."""

    pass


class DuplicateKeyError(StructuralViolation):
    """Raised when a node key is already used in the tree."""

    pass


class NodeOwnershipError(StructuralViolation):
    """Raised when a node already belongs to a tree."""

    pass
