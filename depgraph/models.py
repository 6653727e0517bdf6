"""
Core Data Models for depgraph

This module defines the canonical data structures used throughout the system:
- ProjectRecord: A project with its display name and direct dependencies
- Edge: A directed "requires" relationship between two display names
- BuildState: Lifecycle of a single graph build
- BuildResult: Edges and bookkeeping of one finished build
- MissingPolicy: How a build treats references to unknown projects

These models are designed to be:
- Immutable where possible (using frozen dataclasses)
- Independent of where the dependency data came from
- Independent of how the edges will be rendered
"""

from dataclasses import dataclass, field
from enum import Enum


class BuildState(Enum):
    """
    Lifecycle of a graph build.

    States:
        NOT_STARTED: No build has been run yet.
        RUNNING: The traversal is in progress.
        COMPLETED: The traversal finished and returned its edges.
        FAILED: The traversal aborted; no edges were returned.
    """

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class MissingPolicy(Enum):
    """
    Treatment of project ids that have no entry in the index.

    RAISE aborts the build with UnknownProjectError. SKIP drops the
    reference (no push, no edge) and keeps going.
    """

    RAISE = "raise"
    SKIP = "skip"


@dataclass(frozen=True)
class ProjectRecord:
    """
    A single buildable project as seen by the dependency loader.

    Attributes:
        id: Globally unique project identifier (exact string equality)
        display_name: Human-readable name used on rendered edges
        required_ids: Ids of the projects this one directly requires,
            in declaration order

    Note:
        required_ids may be empty, may repeat an id and may name ids that
        are not in the index. None of these are rejected here; unknown ids
        only fail once the traversal dereferences them.
    """

    id: str
    display_name: str
    required_ids: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize required_ids to a tuple so records stay hashable."""
        if not isinstance(self.required_ids, tuple):
            object.__setattr__(self, "required_ids", tuple(self.required_ids))

    @property
    def is_leaf(self) -> bool:
        """True if the project requires nothing."""
        return not self.required_ids


@dataclass(frozen=True)
class Edge:
    """
    A directed dependency edge between two projects.

    Attributes:
        from_name: Display name of the dependent project
        to_name: Display name of the project it requires
    """

    from_name: str
    to_name: str

    def as_tuple(self) -> tuple[str, str]:
        """Return the edge as a (from_name, to_name) pair."""
        return (self.from_name, self.to_name)


@dataclass
class BuildResult:
    """
    Outcome of a single graph build.

    Each build owns its own BuildResult, so concurrent builds never
    share one.

    Attributes:
        edges: Edges in traversal order (empty if the build failed)
        visited_ids: Ids processed, in pop order
        skipped_ids: Unknown ids dropped under MissingPolicy.SKIP
        state: Where the build ended up
    """

    edges: list[Edge] = field(default_factory=list)
    visited_ids: list[str] = field(default_factory=list)
    skipped_ids: list[str] = field(default_factory=list)
    state: BuildState = BuildState.NOT_STARTED

    @property
    def edge_count(self) -> int:
        """Total number of edges emitted."""
        return len(self.edges)

    @property
    def reachable_count(self) -> int:
        """Number of projects processed."""
        return len(self.visited_ids)
