"""
Project Topology

Discovers the .csproj files under a directory and classifies each project
as a standalone Blazor app, the server half of a hosted app, the client
half of a hosted app, or something else.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from bionic.scaffold.logging_config import get_logger

logger = get_logger(__name__)


class ProjectRole(Enum):
    STANDALONE = "standalone"
    HOSTED_SERVER = "hosted-server"
    HOSTED_CLIENT = "hosted-client"
    UNKNOWN = "unknown"


# Evaluated in order, first match wins
CLASSIFICATION_RULES: List[Tuple[str, ProjectRole]] = [
    ("Microsoft.AspNetCore.Blazor.Cli", ProjectRole.STANDALONE),
    ("Microsoft.AspNetCore.Blazor.Server", ProjectRole.HOSTED_SERVER),
    ("Microsoft.AspNetCore.Blazor.Build", ProjectRole.HOSTED_CLIENT),
]

DESCRIPTOR_GLOB = "*.csproj"

# Build output and tooling directories never hold project files of interest
SKIP_DIRS = frozenset({"bin", "obj", "node_modules"})


@dataclass(frozen=True)
class ProjectDescriptor:
    """One discovered project file."""
    path: Path
    filename: str
    dir: Path
    role: ProjectRole


@dataclass(frozen=True)
class ProjectSet:
    """Projects found by one scan.

    root is the directory that was actually scanned. It differs from origin
    when the scan was escalated to the parent directory.
    """
    projects: Tuple[ProjectDescriptor, ...] = ()
    root: Path = field(default_factory=Path)
    origin: Path = field(default_factory=Path)
    escalated: bool = False

    def __iter__(self) -> Iterator[ProjectDescriptor]:
        return iter(self.projects)

    def __len__(self) -> int:
        return len(self.projects)

    def is_empty(self) -> bool:
        return not self.projects

    def first_with_role(self, role: ProjectRole) -> Optional[ProjectDescriptor]:
        for project in self.projects:
            if project.role == role:
                return project
        return None


def classify(text: str) -> ProjectRole:
    """Classify project file contents using CLASSIFICATION_RULES."""
    for marker, role in CLASSIFICATION_RULES:
        if marker in text:
            return role
    return ProjectRole.UNKNOWN


def describe(path: Union[str, Path]) -> ProjectDescriptor:
    """Build a descriptor for a project file."""
    path = Path(path)
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    return ProjectDescriptor(
        path=path,
        filename=path.name,
        dir=path.parent,
        role=classify(text),
    )


def find_descriptors(root: Path, pattern: str = DESCRIPTOR_GLOB) -> List[Path]:
    """Recursively list project files under root, sorted by path."""
    found = []
    for dirpath, dirnames, _ in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in SKIP_DIRS and not d.startswith(".")
        )
        found.extend(sorted(Path(dirpath).glob(pattern)))
    return [p for p in found if p.is_file()]


def _scan_once(root: Path, pattern: str) -> Tuple[ProjectDescriptor, ...]:
    projects = tuple(describe(p) for p in find_descriptors(root, pattern))
    for project in projects:
        logger.debug("Found %s (%s)", project.path, project.role.value)
    return projects


def scan(root: Union[str, Path], pattern: str = DESCRIPTOR_GLOB) -> ProjectSet:
    """Discover and classify the projects under root.

    A single hosted project means the scan started inside one half of a
    hosted solution; the parent directory is scanned instead, once.

    Args:
        root: Directory to scan
        pattern: Glob for project files

    Returns:
        The projects found (possibly none)
    """
    origin = Path(root).resolve()
    projects = _scan_once(origin, pattern)

    if len(projects) == 1 and projects[0].role != ProjectRole.STANDALONE:
        parent = origin.parent
        if parent != origin:
            logger.info(
                "Only a %s project found in %s, scanning %s",
                projects[0].role.value, origin, parent
            )
            return ProjectSet(
                projects=_scan_once(parent, pattern),
                root=parent,
                origin=origin,
                escalated=True,
            )

    return ProjectSet(projects=projects, root=origin, origin=origin, escalated=False)
