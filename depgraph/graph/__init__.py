"""
Graph module for depgraph.

This module provides the worklist traversal that turns a DependencyIndex
and a root set into an ordered list of dependency edges.
"""

from depgraph.graph.builder import (
    GraphBuilder,
    build_edges,
)

__all__ = [
    "GraphBuilder",
    "build_edges",
]
