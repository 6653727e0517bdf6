"""
Custom exception classes for depgraph.

All errors raised by the package derive from DependencyGraphError so
callers (the CLI in particular) can catch them in one place.
"""

from pathlib import Path
from typing import Optional, Union


class DependencyGraphError(Exception):
    """Base exception class for all depgraph errors.

    Attributes:
        message: Human-readable error message describing the error.
        result: The failed BuildResult when raised from a graph build,
            None otherwise.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.result = None
        super().__init__(self.message)


class UnknownProjectError(DependencyGraphError):
    """Raised when a root or required id has no entry in the index.

    Fatal to the build that hit it: the traversal aborts and no partial
    edge list is returned.

    Attributes:
        project_id: The id that could not be resolved.
    """

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Unknown project: {project_id!r}")


class DuplicateProjectError(DependencyGraphError):
    """Raised when two records share the same project id.

    Attributes:
        project_id: The repeated id.
    """

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Duplicate project id: {project_id!r}")


class BuildCancelledError(DependencyGraphError):
    """Raised when a build is cancelled between worklist pops."""

    def __init__(self, message: str = "Build cancelled") -> None:
        super().__init__(message)


class SourceError(DependencyGraphError):
    """Raised when dependency data cannot be loaded.

    Covers missing files, unsupported formats and malformed content.

    Attributes:
        message: Error message describing what went wrong.
        path: The file being loaded, if any.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{self.path}: {message}"
        super().__init__(message)
