"""
JSON manifest loader.

Reads a document of the form::

    {
        "startup": ["app"],
        "projects": [
            {"id": "app", "name": "App", "requires": ["core", "ui"]},
            {"id": "core", "name": "Core"},
            {"id": "ui", "name": "UI", "requires": ["core"]}
        ]
    }

``name`` defaults to ``id`` and ``requires`` to an empty list. When
``startup`` is missing or empty the roots are the top-level projects, or
every project when each one is required by another.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from depgraph.exceptions import DependencyGraphError, SourceError
from depgraph.index import DependencyIndex
from depgraph.models import ProjectRecord
from depgraph.sources.base import DependencySource

logger = logging.getLogger(__name__)


class ManifestSource(DependencySource):
    """Loads dependency data from a parsed JSON manifest.

    Attributes:
        data: The manifest document
        path: File the document came from, used in error messages
    """

    def __init__(self, data: Any, path: Optional[Union[str, Path]] = None) -> None:
        self.data = data
        self.path = path

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ManifestSource":
        """Read and parse a manifest file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceError(f"cannot read manifest ({e.strerror})", path) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceError(f"invalid JSON at line {e.lineno}: {e.msg}", path) from e

        return cls(data, path=path)

    def load(self) -> tuple[DependencyIndex, list[str]]:
        if not isinstance(self.data, dict):
            raise SourceError("manifest must be a JSON object", self.path)

        projects = self.data.get("projects", [])
        if not isinstance(projects, list):
            raise SourceError("'projects' must be a list", self.path)

        records = [self._parse_project(entry, i) for i, entry in enumerate(projects)]
        try:
            index = DependencyIndex.from_records(records)
        except DependencyGraphError as e:
            raise SourceError(e.message, self.path) from e

        startup = self.data.get("startup") or []
        if not _is_string_list(startup):
            raise SourceError("'startup' must be a list of project ids", self.path)

        roots = list(startup)
        if not roots:
            roots = index.default_roots()
            logger.info("No startup projects listed; using %d default root(s)", len(roots))

        return index, roots

    def _parse_project(self, entry: Any, position: int) -> ProjectRecord:
        if not isinstance(entry, dict):
            raise SourceError(f"project #{position} must be an object", self.path)

        project_id = entry.get("id")
        if not isinstance(project_id, str) or not project_id:
            raise SourceError(f"project #{position} has no string 'id'", self.path)

        name = entry.get("name", project_id)
        if not isinstance(name, str):
            raise SourceError(f"project {project_id!r}: 'name' must be a string", self.path)

        requires = entry.get("requires", [])
        if not _is_string_list(requires):
            raise SourceError(
                f"project {project_id!r}: 'requires' must be a list of ids", self.path
            )

        return ProjectRecord(id=project_id, display_name=name, required_ids=tuple(requires))


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)
