"""
depgraph

Core package for computing the transitive "project requires project"
edge list reachable from a set of startup projects.
"""

from depgraph.models import ProjectRecord, Edge, BuildState, BuildResult, MissingPolicy
from depgraph.index import DependencyIndex
from depgraph.exceptions import DependencyGraphError, UnknownProjectError
from depgraph.graph import GraphBuilder, build_edges

__all__ = [
    "ProjectRecord",
    "Edge",
    "BuildState",
    "BuildResult",
    "MissingPolicy",
    "DependencyIndex",
    "DependencyGraphError",
    "UnknownProjectError",
    "GraphBuilder",
    "build_edges",
]
__version__ = "0.1.0"
