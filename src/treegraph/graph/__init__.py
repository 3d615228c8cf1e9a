# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeGraph package - Keyed tree container.

This package provides the TreeGraph class, a rooted tree of keyed nodes
with O(1) lookup, route navigation and cascading subtree removal.

Example:
    >>> from treegraph import TreeGraph, TreeGraphNode
    >>> graph = TreeGraph()
    >>> graph.append_node(TreeGraphNode('Hello', 'start'))
    >>> graph.travel_to_node([]).data
    'Hello'
"""

from ..node import TreeGraphNode
from .core import TreeGraph

__all__ = ["TreeGraph", "TreeGraphNode"]
