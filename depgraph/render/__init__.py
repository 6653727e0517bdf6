"""
Render module for depgraph.

This module provides the sinks that turn an edge list into a graph
object or a textual graph description.
"""

from depgraph.render.base import EdgeSink
from depgraph.render.networkx_sink import NetworkXSink
from depgraph.render.text import DotSink, JsonSink, MermaidSink

SINKS = {
    "dot": DotSink,
    "mermaid": MermaidSink,
    "json": JsonSink,
}


def get_sink(format_name: str) -> EdgeSink:
    """
    Create a text sink by format name.

    Args:
        format_name: One of "dot", "mermaid" or "json" (case-insensitive)

    Raises:
        ValueError: If the format is not known
    """
    try:
        sink_class = SINKS[format_name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown format {format_name!r}; expected one of {', '.join(SINKS)}"
        ) from None
    return sink_class()


__all__ = [
    "EdgeSink",
    "NetworkXSink",
    "DotSink",
    "MermaidSink",
    "JsonSink",
    "SINKS",
    "get_sink",
]
