"""
Graph Builder for depgraph

This module computes the directed "requires" edges reachable from a set
of root projects in a DependencyIndex.

Design Decisions:
    - Depth-first traversal over an explicit stack (list push/pop at the end)
    - Visited check happens on pop, not on push, so an id may be pushed many times
    - Hash-set membership for the visited check
    - Edges are emitted in record order when a project is first popped
    - Edges are never deduplicated; parallel edges reach the renderer as-is

Graph Properties:
    - Directed: edges point from dependent to dependency
    - May have cycles (the visited set guarantees termination)
    - May have self-edges (a project that lists itself)
    - Edge endpoints are display names, not ids
"""

import logging
from collections.abc import Callable, Iterable
from typing import Optional

from depgraph.exceptions import (
    BuildCancelledError,
    DependencyGraphError,
    UnknownProjectError,
)
from depgraph.index import DependencyIndex
from depgraph.models import BuildResult, BuildState, Edge, MissingPolicy

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Runs the worklist traversal over a DependencyIndex.

    The builder only holds configuration. Every call to ``run`` or
    ``build`` works on its own visited set, stack and BuildResult, so one
    builder can serve concurrent builds.

    Attributes:
        index: The dependency snapshot being traversed
        policy: How unknown project ids are handled

    Usage:
        builder = GraphBuilder(index)
        for edge in builder.build(["app"]):
            print(edge.from_name, "->", edge.to_name)
    """

    def __init__(
        self,
        index: DependencyIndex,
        policy: MissingPolicy = MissingPolicy.RAISE,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> None:
        """
        Args:
            index: The dependency snapshot to traverse
            policy: RAISE (default) aborts on unknown ids, SKIP drops them
            should_cancel: Optional callable checked before every pop;
                returning True aborts the build with BuildCancelledError
        """
        self.index = index
        self.policy = policy
        self._should_cancel = should_cancel

    def build(self, roots: Iterable[str]) -> list[Edge]:
        """
        Compute the edges reachable from the given roots.

        Roots are pushed in the order given, so the last root is
        processed first.

        Args:
            roots: Root project ids

        Returns:
            The edges in traversal order

        Raises:
            UnknownProjectError: If a root or required id is not in the
                index and the policy is RAISE
            BuildCancelledError: If should_cancel returned True
        """
        return self.run(roots).edges

    def run(self, roots: Iterable[str]) -> BuildResult:
        """
        Like ``build``, but return the whole BuildResult.

        On failure the error propagates. Package errors carry the failed
        result (state FAILED, no edges) in their ``result`` attribute.
        """
        result = BuildResult(state=BuildState.RUNNING)

        try:
            self._traverse(list(roots), result)
        except BaseException as e:
            result.state = BuildState.FAILED
            result.edges = []
            if isinstance(e, DependencyGraphError):
                e.result = result
            raise

        result.state = BuildState.COMPLETED
        logger.info(
            "Built %d edge(s) from %d reachable project(s)",
            result.edge_count,
            result.reachable_count,
        )
        return result

    def _traverse(self, roots: list[str], result: BuildResult) -> None:
        worklist = self._seed(roots, result)
        visited: set[str] = set()

        while worklist:
            if self._should_cancel is not None and self._should_cancel():
                raise BuildCancelledError()

            current_id = worklist.pop()
            if current_id in visited:
                continue

            visited.add(current_id)
            result.visited_ids.append(current_id)

            current = self.index.lookup(current_id)
            logger.debug(
                "Processing %s (%d requirement(s))",
                current_id,
                len(current.required_ids),
            )

            for required_id in current.required_ids:
                if required_id not in self.index and self.policy is MissingPolicy.SKIP:
                    _skip(result, required_id, current_id)
                    continue

                worklist.append(required_id)
                required = self.index.lookup(required_id)
                result.edges.append(Edge(current.display_name, required.display_name))

    def _seed(self, roots: list[str], result: BuildResult) -> list[str]:
        """Validate roots up front so an unknown root fails before any edge is computed."""
        worklist: list[str] = []
        for root_id in roots:
            if root_id not in self.index:
                if self.policy is MissingPolicy.RAISE:
                    raise UnknownProjectError(root_id)
                _skip(result, root_id, None)
                continue
            worklist.append(root_id)
        return worklist


def _skip(result: BuildResult, project_id: str, required_by: Optional[str]) -> None:
    result.skipped_ids.append(project_id)
    if required_by is None:
        logger.warning("Skipping unknown root project %r", project_id)
    else:
        logger.warning(
            "Skipping unknown project %r required by %r", project_id, required_by
        )


def build_edges(
    index: DependencyIndex,
    roots: Iterable[str],
    policy: MissingPolicy = MissingPolicy.RAISE,
) -> list[Edge]:
    """
    Compute the edges reachable from roots in a single call.

    Args:
        index: The dependency snapshot
        roots: Root project ids, in the order they should be pushed
        policy: How unknown ids are handled

    Returns:
        The edges in traversal order

    Example:
        >>> index = DependencyIndex.from_records([
        ...     ProjectRecord("a", "A", ("b",)),
        ...     ProjectRecord("b", "B"),
        ... ])
        >>> [e.as_tuple() for e in build_edges(index, ["a"])]
        [('A', 'B')]
    """
    return GraphBuilder(index, policy=policy).build(roots)
