"""
Build Hooks Step

Add MSBuild hooks to the project file: a Watch item so `dotnet watch`
picks up .cshtml and .scss changes, and a target that compiles App.scss
before every build.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from bionic.scaffold.config import BionicConfig, DEFAULT_CONFIG
from bionic.scaffold.exceptions import TopologyError
from bionic.scaffold.patcher import patch_file
from bionic.scaffold.topology import ProjectDescriptor, ProjectRole

if TYPE_CHECKING:
    from bionic.scaffold.orchestrator import SetupOrchestrator


WATCH_HOOK = """
    <ItemGroup>
        <Watch Include="{0}**/*.cshtml;{0}**/*.scss" Visible="false"/>
    </ItemGroup>"""

SCSS_COMPILER_HOOK = """
    <Target Name="CompileSCSS" BeforeTargets="Build" Condition="Exists('App.scss')">
        <Message Importance="high" Text="Compiling SCSS" />
        <Exec Command="scss --no-cache --update ./App.scss:./wwwroot/css/App.css" />
    </Target>"""


def watch_hook(relative_path: str = "") -> str:
    """Watch hook for files under relative_path ("" = the project itself)."""
    if relative_path and not relative_path.endswith("/"):
        relative_path += "/"
    return WATCH_HOOK.format(relative_path)


def hooks_for_role(role: ProjectRole, relative_path: str = "") -> Optional[str]:
    """The hook block a project of the given role receives."""
    if role == ProjectRole.STANDALONE:
        return f"{watch_hook(relative_path)}\n\n{SCSS_COMPILER_HOOK}"
    if role == ProjectRole.HOSTED_SERVER:
        return watch_hook(relative_path)
    if role == ProjectRole.HOSTED_CLIENT:
        return SCSS_COMPILER_HOOK
    return None


def client_relative_path(server: ProjectDescriptor, client: ProjectDescriptor) -> str:
    """Client directory relative to the server's, with forward slashes."""
    return Path(os.path.relpath(client.dir, server.dir)).as_posix()


def introduce_build_hooks(
    project: ProjectDescriptor,
    relative_path: str = "",
    config: BionicConfig = DEFAULT_CONFIG
) -> bool:
    """Insert the role's hooks before the closing </Project> line.

    Returns:
        True if the project file was changed
    """
    content = hooks_for_role(project.role, relative_path)
    if content is None:
        return False
    return patch_file(project.path, config.descriptor_anchor, content, insert_after=False)


def build_hooks_step(orchestrator: "SetupOrchestrator", project: ProjectDescriptor) -> bool:
    ui = orchestrator.ui
    config = orchestrator.config_for(project)

    relative_path = ""
    if project.role == ProjectRole.HOSTED_SERVER:
        client = orchestrator.project_set.first_with_role(ProjectRole.HOSTED_CLIENT)
        if client is None:
            raise TopologyError(
                "Unable to start project. Client directory for Hosted Blazor project was not found.",
                project=str(project.path)
            )
        relative_path = client_relative_path(project, client)

    if introduce_build_hooks(project, relative_path, config):
        ui.print_success(f"Added build hooks to {project.filename}")
    else:
        ui.print_warning(f"No {config.descriptor_anchor} line in {project.filename}; build hooks not added")
    return True
