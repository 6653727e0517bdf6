"""
Abstract dependency source interface.

A DependencySource turns some external description of a set of projects
(a manifest, a solution file, an IDE model) into a DependencyIndex plus
the ordered list of root ids to traverse from. The graph builder never
talks to the external system directly.
"""

from abc import ABC, abstractmethod

from depgraph.index import DependencyIndex


class DependencySource(ABC):
    """Abstract interface for dependency data loaders.

    Example:
        >>> class StaticSource(DependencySource):
        ...     def load(self):
        ...         index = DependencyIndex.from_records([ProjectRecord("a", "A")])
        ...         return index, ["a"]
    """

    @abstractmethod
    def load(self) -> tuple[DependencyIndex, list[str]]:
        """Load the dependency snapshot.

        Returns:
            A (index, roots) pair. Roots are in push order.

        Raises:
            SourceError: If the underlying data cannot be read or parsed.
        """
        raise NotImplementedError
