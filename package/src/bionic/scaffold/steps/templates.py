"""
Templates Step

Install the artifact templates used by `bionic generate`.
"""

from typing import TYPE_CHECKING

from bionic.scaffold.config import BionicConfig, DEFAULT_CONFIG
from bionic.scaffold.toolchain import ToolRunner, dotnet

if TYPE_CHECKING:
    from bionic.scaffold.orchestrator import SetupOrchestrator
    from bionic.scaffold.topology import ProjectDescriptor


def install_templates(runner: ToolRunner, config: BionicConfig = DEFAULT_CONFIG) -> int:
    """Run `dotnet new -i <template package>`."""
    return dotnet(runner, ["new", "-i", config.template_package])


def templates_step(orchestrator: "SetupOrchestrator", project: "ProjectDescriptor") -> bool:
    ui = orchestrator.ui
    config = orchestrator.config_for(project)

    exit_code = install_templates(orchestrator.runner, config)
    if exit_code == 0:
        ui.print_success(f"Installed {config.template_package}")
    else:
        ui.print_warning(f"Installing {config.template_package} failed (exit code {exit_code})")
        orchestrator.record_exit_code(exit_code)
    return True
