"""
Stylesheet Step

Create the consolidated App.scss that generated pages and components import
their styles into.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from bionic.scaffold.config import BionicConfig, DEFAULT_CONFIG
from bionic.scaffold.exceptions import PatchTargetError
from bionic.scaffold.patcher import patch_file

if TYPE_CHECKING:
    from bionic.scaffold.orchestrator import SetupOrchestrator
    from bionic.scaffold.topology import ProjectDescriptor


def stylesheet_contents(config: BionicConfig = DEFAULT_CONFIG) -> str:
    """Header comment followed by one empty section per category."""
    lines = [config.stylesheet_header, ""]
    for category in config.categories:
        lines.extend([f"// {category}", ""])
    return "\n".join(lines) + "\n"


def init_stylesheet(project_dir: Path, config: BionicConfig = DEFAULT_CONFIG) -> bool:
    """Create the stylesheet unless it exists.

    Returns:
        True if the stylesheet was already there (the project was started
        before), False if it was just created
    """
    path = Path(project_dir) / config.stylesheet
    if path.exists():
        return True
    try:
        path.write_text(stylesheet_contents(config), encoding="utf-8")
    except OSError as e:
        raise PatchTargetError(f"Cannot create {path}", path=path, details=str(e))
    return False


def add_stylesheet_import(
    project_dir: Path,
    category: str,
    artifact_name: str,
    config: BionicConfig = DEFAULT_CONFIG
) -> bool:
    """Import <category>/<artifact_name>.scss under the category marker."""
    return patch_file(
        Path(project_dir) / config.stylesheet,
        f"// {category}",
        f'@import "{category}/{artifact_name}.scss";'
    )


def stylesheet_step(orchestrator: "SetupOrchestrator", project: "ProjectDescriptor") -> bool:
    """Create App.scss, asking before touching a project that has one."""
    ui = orchestrator.ui
    config = orchestrator.config_for(project)

    already_started = init_stylesheet(project.dir, config)
    if not already_started:
        ui.print_success(f"Created {config.stylesheet}")
        return True

    return ui.prompt_confirm(
        "Project seems to have already been started. Are you sure you want to continue?",
        default=False
    )
