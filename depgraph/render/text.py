"""
Text renderers: Graphviz DOT, Mermaid and JSON.

Each sink returns a string with one entry per edge, in traversal order.
Parallel edges are written out as separate lines.
"""

import json
import re
from collections.abc import Sequence

from depgraph.models import Edge
from depgraph.render.base import EdgeSink


class DotSink(EdgeSink):
    """Renders edges as a Graphviz ``digraph``."""

    def __init__(self, name: str = "dependencies", rankdir: str = "LR") -> None:
        self.name = name
        self.rankdir = rankdir

    def render(self, edges: Sequence[Edge]) -> str:
        lines = [f"digraph {_dot_quote(self.name)} {{"]
        lines.append(f"    rankdir={self.rankdir};")
        lines.append("    node [shape=box];")
        for edge in edges:
            lines.append(f"    {_dot_quote(edge.from_name)} -> {_dot_quote(edge.to_name)};")
        lines.append("}")
        return "\n".join(lines) + "\n"


class MermaidSink(EdgeSink):
    """
    Renders edges as a Mermaid flowchart.

    Node ids are the display names sanitized and prefixed with ``n_``, so
    no id collides with a Mermaid keyword such as ``end``. Names that
    sanitize to the same id get a numeric suffix.
    """

    def __init__(self, direction: str = "LR") -> None:
        self.direction = direction

    def render(self, edges: Sequence[Edge]) -> str:
        ids: dict[str, str] = {}
        lines = [f"graph {self.direction}"]
        for edge in edges:
            source = self._node(edge.from_name, ids)
            target = self._node(edge.to_name, ids)
            lines.append(f"    {source} --> {target}")
        return "\n".join(lines) + "\n"

    def _node(self, name: str, ids: dict[str, str]) -> str:
        """Return the node reference, with a label the first time a name is seen."""
        if name in ids:
            return ids[name]

        base = "n_" + re.sub(r"[^A-Za-z0-9_]", "_", name)
        node_id = base
        taken = set(ids.values())
        suffix = 2
        while node_id in taken:
            node_id = f"{base}_{suffix}"
            suffix += 1

        ids[name] = node_id
        label = name.replace('"', "#quot;")
        return f'{node_id}["{label}"]'


class JsonSink(EdgeSink):
    """Renders edges as a JSON array of ``{"from": ..., "to": ...}`` objects."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, edges: Sequence[Edge]) -> str:
        payload = [{"from": e.from_name, "to": e.to_name} for e in edges]
        return json.dumps(payload, indent=self.indent) + "\n"


def _dot_quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
