"""
Artifact Generator

`bionic generate <kind> <name>`: render a page, component, provider or
service from the Bionic templates, then wire it into the project. Pages and
components get an @import in App.scss; providers and services get a
registration in Program.cs.
"""

import re
from pathlib import Path
from typing import List, Optional

from bionic.scaffold.config import BionicConfig, DEFAULT_CONFIG
from bionic.scaffold.exceptions import ArtifactError
from bionic.scaffold.logging_config import get_logger
from bionic.scaffold.registrar import register_service
from bionic.scaffold.steps.stylesheet import add_stylesheet_import
from bionic.scaffold.toolchain import ToolRunner, dotnet

logger = get_logger(__name__)

GENERATE_OPTIONS = ("component", "page", "provider", "service")
STYLED_KINDS = ("component", "page")
REGISTERED_KINDS = ("provider", "service")

_PAGE_WORD = re.compile("[pP]age")


def to_page_name(artifact: str) -> str:
    """Route name for a page: HomePage -> home."""
    name = _PAGE_WORD.sub("", artifact).lower()
    return name or artifact.lower()


def output_directory(kind: str) -> str:
    """Directory artifacts of a kind are written to: page -> Pages."""
    return f"{kind[:1].upper()}{kind[1:]}s"


def validate_kind(kind: Optional[str]) -> str:
    if kind not in GENERATE_OPTIONS:
        raise ArtifactError(
            f"Can't generate \"{kind}\"",
            kind=kind,
            valid_kinds=list(GENERATE_OPTIONS)
        )
    return kind


def template_arguments(kind: str, name: str, config: BionicConfig = DEFAULT_CONFIG) -> List[str]:
    """Arguments for `dotnet new` rendering one artifact."""
    args = ["new", f"{config.template_prefix}.{kind}", "-n", name]
    if kind == "page":
        args.extend(["-p", f"/{to_page_name(name)}"])
    args.extend(["-o", f"./{output_directory(kind)}"])
    return args


def generate_artifact(
    kind: str,
    name: str,
    project_dir: Path,
    runner: ToolRunner,
    config: BionicConfig = DEFAULT_CONFIG
) -> int:
    """Generate an artifact and wire it into the project.

    Args:
        kind: One of GENERATE_OPTIONS
        name: Artifact (class) name
        project_dir: Directory holding the project file
        runner: Runs the template engine
        config: Project configuration

    Returns:
        Exit code of the template engine; the project is only patched when
        it is 0
    """
    kind = validate_kind(kind)
    project_dir = Path(project_dir)

    exit_code = dotnet(runner, template_arguments(kind, name, config), cwd=project_dir)
    if exit_code != 0:
        logger.warning("Template engine exited with %d; %s %s not wired in", exit_code, kind, name)
        return exit_code

    if kind in STYLED_KINDS:
        add_stylesheet_import(project_dir, output_directory(kind), name, config)
    elif kind in REGISTERED_KINDS:
        register_service(project_dir / config.program_source, name)

    return 0
