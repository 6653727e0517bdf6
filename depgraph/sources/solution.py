"""
Visual Studio solution loader.

Reads the build dependencies recorded in a ``.sln`` file, the on-disk
form of the solution model an IDE exposes at runtime.

Design Decisions:
    - Project ids are solution-relative project paths (the IDE's unique name)
    - Display names are the project names from the ``Project(...)`` line
    - Explicit dependencies come from ``ProjectSection(ProjectDependencies)``
    - MSBuild ``<ProjectReference>`` items add implicit dependencies when
      the project file is present on disk
    - Solution folders are not projects and are skipped

Limitation:
    Startup projects live in per-user IDE state, not in the solution file,
    so the roots default to the projects nothing else depends on (or to
    every project when all of them sit on dependency cycles).
"""

import logging
import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath
from typing import Union

from depgraph.exceptions import DependencyGraphError, SourceError
from depgraph.index import DependencyIndex
from depgraph.models import ProjectRecord
from depgraph.sources.base import DependencySource

logger = logging.getLogger(__name__)

SOLUTION_FOLDER_TYPE = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

_PROJECT_RE = re.compile(
    r'^Project\("\{(?P<type>[0-9A-Fa-f-]+)\}"\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[0-9A-Fa-f-]+)\}"'
)
_SECTION_RE = re.compile(r"^ProjectSection\((?P<kind>\w+)\)")
_DEPENDENCY_RE = re.compile(r"^\{(?P<guid>[0-9A-Fa-f-]+)\}\s*=\s*\{[0-9A-Fa-f-]+\}")


@dataclass
class SolutionProject:
    """
    A project entry as written in the solution file.

    Attributes:
        name: Project name shown in the IDE
        path: Project file path relative to the solution, as written
        guid: Project GUID, upper-cased
        type_guid: Project type GUID, upper-cased
        dependency_guids: GUIDs listed under ProjectDependencies, in order
    """

    name: str
    path: str
    guid: str
    type_guid: str
    dependency_guids: list[str] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        return self.type_guid == SOLUTION_FOLDER_TYPE


def parse_solution(text: str) -> list[SolutionProject]:
    """
    Extract project entries from solution file text.

    Args:
        text: Contents of a .sln file

    Returns:
        Projects in file order, solution folders included
    """
    projects: list[SolutionProject] = []
    current = None
    in_dependencies = False

    for raw_line in text.splitlines():
        line = raw_line.strip()

        match = _PROJECT_RE.match(line)
        if match:
            current = SolutionProject(
                name=match.group("name"),
                path=match.group("path"),
                guid=match.group("guid").upper(),
                type_guid=match.group("type").upper(),
            )
            projects.append(current)
            continue

        if current is None:
            continue

        if line == "EndProject":
            current = None
            in_dependencies = False
            continue

        section = _SECTION_RE.match(line)
        if section:
            in_dependencies = section.group("kind") == "ProjectDependencies"
            continue

        if line == "EndProjectSection":
            in_dependencies = False
            continue

        if in_dependencies:
            dependency = _DEPENDENCY_RE.match(line)
            if dependency:
                current.dependency_guids.append(dependency.group("guid").upper())

    return projects


class SolutionSource(DependencySource):
    """Loads dependency data from a Visual Studio solution file.

    Attributes:
        path: Path to the .sln file
        include_references: Also follow <ProjectReference> items found in
            the project files
    """

    def __init__(self, path: Union[str, Path], include_references: bool = True) -> None:
        self.path = Path(path)
        self.include_references = include_references

    def load(self) -> tuple[DependencyIndex, list[str]]:
        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise SourceError(f"cannot read solution ({e.strerror})", self.path) from e

        projects = []
        for project in parse_solution(text):
            if project.is_folder:
                logger.debug("Skipping solution folder %s", project.name)
                continue
            projects.append(project)

        if not projects:
            raise SourceError("no projects found in solution", self.path)

        by_guid = {p.guid: p.path for p in projects}
        by_key = {_path_key(p.path): p.path for p in projects}

        records = []
        for project in projects:
            # Unmatched GUIDs are kept as raw ids; the builder reports them.
            required = [by_guid.get(guid, f"{{{guid}}}") for guid in project.dependency_guids]
            if self.include_references:
                for reference in self._project_references(project, by_key):
                    if reference not in required:
                        required.append(reference)
            records.append(
                ProjectRecord(id=project.path, display_name=project.name, required_ids=tuple(required))
            )

        try:
            index = DependencyIndex.from_records(records)
        except DependencyGraphError as e:
            raise SourceError(e.message, self.path) from e

        return index, index.default_roots()

    def _project_references(
        self, project: SolutionProject, by_key: dict[str, str]
    ) -> list[str]:
        """Solution paths of the projects referenced from a project file."""
        project_file = self.path.parent / PureWindowsPath(project.path).as_posix()
        if not project_file.is_file():
            logger.info("Project file not found, skipping references: %s", project_file)
            return []

        try:
            root = ET.parse(project_file).getroot()
        except ET.ParseError as e:
            raise SourceError(f"invalid project file: {e}", project_file) from e

        references = []
        for element in root.iter():
            if not element.tag.endswith("ProjectReference"):
                continue
            include = element.get("Include")
            if not include:
                continue

            target = os.path.normpath(
                project_file.parent / PureWindowsPath(include).as_posix()
            )
            relative = os.path.relpath(target, self.path.parent)
            solution_path = by_key.get(_path_key(relative))
            if solution_path is None:
                logger.warning(
                    "%s references %s, which is not part of the solution",
                    project.name,
                    include,
                )
                continue
            references.append(solution_path)

        return references


def _path_key(path: str) -> str:
    """Case-insensitive, separator-neutral key for a solution-relative path."""
    return PureWindowsPath(os.path.normpath(path.replace("\\", "/"))).as_posix().lower()
