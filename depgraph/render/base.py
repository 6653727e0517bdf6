"""
Abstract edge sink interface.

An EdgeSink consumes the ordered edge list produced by the graph builder
and turns it into something a viewer can display. The builder has no
knowledge of how its edges are rendered.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from depgraph.models import Edge


class EdgeSink(ABC):
    """Abstract interface for edge renderers."""

    @abstractmethod
    def render(self, edges: Sequence[Edge]) -> Any:
        """Render the edges.

        Args:
            edges: Edges in traversal order. Parallel edges are
                meaningful and must not be collapsed by the sink unless
                its output format cannot express them.

        Returns:
            The rendered form (a graph object or text).
        """
        raise NotImplementedError
