"""
Markup Step

Reference the compiled App.css from the markup entry point.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from bionic.scaffold.config import BionicConfig, DEFAULT_CONFIG
from bionic.scaffold.patcher import patch_file

if TYPE_CHECKING:
    from bionic.scaffold.orchestrator import SetupOrchestrator
    from bionic.scaffold.topology import ProjectDescriptor


def inject_stylesheet_link(project_dir: Path, config: BionicConfig = DEFAULT_CONFIG) -> bool:
    """Insert the App.css link before the default site.css link."""
    return patch_file(
        Path(project_dir) / config.index_html,
        config.link_anchor,
        config.link_line,
        insert_after=False
    )


def markup_step(orchestrator: "SetupOrchestrator", project: "ProjectDescriptor") -> bool:
    ui = orchestrator.ui
    config = orchestrator.config_for(project)

    if inject_stylesheet_link(project.dir, config):
        ui.print_success(f"Linked App.css in {config.index_html}")
    else:
        ui.print_warning(
            f"No line starting with '{config.link_anchor.strip()}' in {config.index_html}; "
            "add the App.css link manually"
        )
    return True
