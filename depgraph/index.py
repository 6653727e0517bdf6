"""
Dependency Index for depgraph

An immutable snapshot mapping each project id to its ProjectRecord.

Design Decisions:
    - Built once by a loader, read-only afterwards
    - Backed by a dict wrapped in MappingProxyType (O(1) average lookup)
    - Cross-references are not validated; the builder reports unknown ids
    - Safe to share between concurrent builds since nothing mutates it
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from depgraph.exceptions import DuplicateProjectError, UnknownProjectError
from depgraph.models import ProjectRecord


class DependencyIndex(Mapping[str, ProjectRecord]):
    """
    Read-only view of the project dependency data.

    Implements the Mapping protocol (``in``, ``len``, iteration in
    insertion order, ``[]`` raising KeyError) plus ``lookup``, which
    raises UnknownProjectError instead.

    Usage:
        index = DependencyIndex.from_records([
            ProjectRecord("a", "A", ("b",)),
            ProjectRecord("b", "B"),
        ])
        index.lookup("a").display_name  # "A"
    """

    def __init__(self, records: Mapping[str, ProjectRecord]) -> None:
        """
        Wrap an id -> record mapping.

        The mapping is copied, so later changes to the argument do not
        leak into the index.

        Args:
            records: Mapping from project id to its record
        """
        self._records: Mapping[str, ProjectRecord] = MappingProxyType(dict(records))

    @classmethod
    def from_records(cls, records: Iterable[ProjectRecord]) -> "DependencyIndex":
        """
        Build an index from an iterable of records.

        Args:
            records: Records with unique ids

        Returns:
            A new DependencyIndex

        Raises:
            DuplicateProjectError: If two records share an id
        """
        by_id: dict[str, ProjectRecord] = {}
        for record in records:
            if record.id in by_id:
                raise DuplicateProjectError(record.id)
            by_id[record.id] = record
        return cls(by_id)

    def lookup(self, project_id: str) -> ProjectRecord:
        """
        Retrieve the record for a project id.

        Args:
            project_id: The id to resolve

        Returns:
            The matching ProjectRecord

        Raises:
            UnknownProjectError: If the id is not in the index
        """
        try:
            return self._records[project_id]
        except KeyError:
            raise UnknownProjectError(project_id) from None

    def top_level_ids(self) -> list[str]:
        """
        Ids of projects that no other project requires.

        Self-references do not count, so a project that only lists
        itself is still top level. Order follows the index.
        """
        required: set[str] = set()
        for record in self._records.values():
            required.update(rid for rid in record.required_ids if rid != record.id)
        return [pid for pid in self._records if pid not in required]

    def default_roots(self) -> list[str]:
        """
        Roots to use when the data names no startup projects.

        The top-level projects, or every project in index order when
        each one is required by another (all of them sit on cycles).
        """
        return self.top_level_ids() or list(self._records)

    def __getitem__(self, project_id: str) -> ProjectRecord:
        return self._records[project_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"DependencyIndex({len(self._records)} projects)"
