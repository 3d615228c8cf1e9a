# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph - Keyed tree container for dialogue, decision and menu trees.

A lightweight, zero-dependency library: nodes carry a payload, a key and
the key of their parent; the tree links them, follows routes of keys from
the root and removes whole subtrees.
"""

__version__ = "0.1.0"

from .exceptions import (
    DuplicateKeyError,
    MissingParentKeyError,
    NodeOwnershipError,
    ParentNotFoundError,
    RootHasParentError,
    StructuralViolation,
    TreeGraphError,
)
from .graph import TreeGraph
from .node import TreeGraphNode

__all__ = [
    # Core classes
    "TreeGraph",
    "TreeGraphNode",
    # Exceptions
    "TreeGraphError",
    "StructuralViolation",
    "RootHasParentError",
    "MissingParentKeyError",
    "ParentNotFoundError",
    "DuplicateKeyError",
    "NodeOwnershipError",
]
