"""
NetworkX renderer.

Builds a NetworkX MultiDiGraph from the edge list so downstream tools
(layout, drawing, analysis) can work on it.

Design Decisions:
    - MultiDiGraph keeps parallel edges, one per emitted Edge
    - Nodes are keyed by display name, matching the edge endpoints
    - Each edge stores its position in the traversal as ``order``
"""

from collections.abc import Sequence

import networkx as nx

from depgraph.models import Edge
from depgraph.render.base import EdgeSink


class NetworkXSink(EdgeSink):
    """
    Renders edges into a networkx.MultiDiGraph.

    Attributes:
        name: Value stored in the graph's ``name`` attribute
    """

    def __init__(self, name: str = "dependencies") -> None:
        self.name = name

    def render(self, edges: Sequence[Edge]) -> nx.MultiDiGraph:
        """
        Add each edge as a directed connection.

        Args:
            edges: Edges in traversal order

        Returns:
            A MultiDiGraph with one edge per input edge
        """
        graph = nx.MultiDiGraph(name=self.name)
        for order, edge in enumerate(edges):
            graph.add_node(edge.from_name, label=edge.from_name)
            graph.add_node(edge.to_name, label=edge.to_name)
            graph.add_edge(edge.from_name, edge.to_name, order=order)
        return graph
