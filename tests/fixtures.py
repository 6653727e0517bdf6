"""
Test fixtures for depgraph.

This module provides sample dependency data and helpers for building
indexes in tests.
"""

from pathlib import Path

from depgraph.index import DependencyIndex
from depgraph.models import ProjectRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MANIFEST = FIXTURES_DIR / "sample_manifest.json"
SAMPLE_SOLUTION = FIXTURES_DIR / "sample_solution" / "Sample.sln"


def make_index(graph: dict[str, list[str]]) -> DependencyIndex:
    """Build an index where every project's display name is its id."""
    return DependencyIndex.from_records(
        ProjectRecord(id=pid, display_name=pid, required_ids=tuple(reqs))
        for pid, reqs in graph.items()
    )


def pairs(edges) -> list[tuple[str, str]]:
    """Convert edges to (from, to) tuples for easy comparison."""
    return [edge.as_tuple() for edge in edges]


# A requires B and C, B requires C
DIAMOND_LITE = {"A": ["B", "C"], "B": ["C"], "C": []}

# Mutual dependency
CYCLE = {"A": ["B"], "B": ["A"]}

# Project that lists itself
SELF_LOOP = {"A": ["A"]}

# Two dependents sharing a dependency
SHARED = {"R": ["C", "D"], "C": ["E"], "D": ["E"], "E": []}

# Dependency on a project that is not in the index
DANGLING = {"A": ["B", "ghost"], "B": []}

# Two independent trees
FOREST = {"X": ["X1"], "X1": [], "Y": ["Y1"], "Y1": []}

SAMPLE_MANIFEST_EDGES = [
    ("App", "UI"),
    ("App", "Core"),
    ("UI", "Core"),
    ("UI", "Widgets"),
    ("Widgets", "Core"),
]

SOLUTION_WITH_DEPENDENCIES = r"""
Microsoft Visual Studio Solution File, Format Version 12.00
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Web", "src\Web\Web.csproj", "{AAAAAAAA-0000-0000-0000-000000000001}"
	ProjectSection(ProjectDependencies) = postProject
		{aaaaaaaa-0000-0000-0000-000000000002} = {aaaaaaaa-0000-0000-0000-000000000002}
		{AAAAAAAA-0000-0000-0000-000000000003} = {AAAAAAAA-0000-0000-0000-000000000003}
	EndProjectSection
EndProject
Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "src", "src", "{AAAAAAAA-0000-0000-0000-0000000000FF}"
EndProject
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Domain", "src\Domain\Domain.csproj", "{AAAAAAAA-0000-0000-0000-000000000002}"
EndProject
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Infra", "src\Infra\Infra.csproj", "{AAAAAAAA-0000-0000-0000-000000000003}"
	ProjectSection(ProjectDependencies) = postProject
		{AAAAAAAA-0000-0000-0000-000000000002} = {AAAAAAAA-0000-0000-0000-000000000002}
	EndProjectSection
EndProject
Global
EndGlobal
"""

SOLUTION_WITH_MISSING_DEPENDENCY = r"""
Microsoft Visual Studio Solution File, Format Version 12.00
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Web", "Web\Web.csproj", "{AAAAAAAA-0000-0000-0000-000000000001}"
	ProjectSection(ProjectDependencies) = postProject
		{DEADBEEF-0000-0000-0000-000000000000} = {DEADBEEF-0000-0000-0000-000000000000}
	EndProjectSection
EndProject
Global
EndGlobal
"""

# Two projects that depend on each other, so neither is top level
SOLUTION_WITH_CYCLE = r"""
Microsoft Visual Studio Solution File, Format Version 12.00
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Left", "Left\Left.csproj", "{BBBBBBBB-0000-0000-0000-000000000001}"
	ProjectSection(ProjectDependencies) = postProject
		{BBBBBBBB-0000-0000-0000-000000000002} = {BBBBBBBB-0000-0000-0000-000000000002}
	EndProjectSection
EndProject
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Right", "Right\Right.csproj", "{BBBBBBBB-0000-0000-0000-000000000002}"
	ProjectSection(ProjectDependencies) = postProject
		{BBBBBBBB-0000-0000-0000-000000000001} = {BBBBBBBB-0000-0000-0000-000000000001}
	EndProjectSection
EndProject
Global
EndGlobal
"""
