"""
Sources module for depgraph.

This module provides the loaders that turn external project descriptions
into a DependencyIndex and a root list.
"""

from pathlib import Path
from typing import Union

from depgraph.exceptions import SourceError
from depgraph.sources.base import DependencySource
from depgraph.sources.manifest import ManifestSource
from depgraph.sources.solution import SolutionSource, parse_solution


def load_source(
    path: Union[str, Path],
    include_references: bool = True,
) -> DependencySource:
    """
    Pick a loader for a file based on its suffix.

    Args:
        path: A .json manifest or a .sln solution file
        include_references: Passed to SolutionSource

    Returns:
        A DependencySource ready to load

    Raises:
        SourceError: If the suffix is not recognized
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return ManifestSource.from_file(path)
    if suffix == ".sln":
        return SolutionSource(path, include_references=include_references)

    raise SourceError(f"unsupported source type {suffix or '(none)'!r}", path)


__all__ = [
    "DependencySource",
    "ManifestSource",
    "SolutionSource",
    "parse_solution",
    "load_source",
]
