"""
Bionic Setup Orchestrator

Runs the setup steps over every project found by the topology scan and
collects a per-project report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, List, Callable, Sequence
from rich.console import Console

from bionic.scaffold.config import BionicConfig, load_config
from bionic.scaffold.exceptions import BionicError, get_error_code
from bionic.scaffold.logging_config import get_logger
from bionic.scaffold.toolchain import SubprocessRunner, ToolRunner
from bionic.scaffold.topology import ProjectDescriptor, ProjectRole, ProjectSet
from bionic.scaffold.ui import ScaffoldUI

logger = get_logger(__name__)


class ProjectStatus(Enum):
    CONFIGURED = "configured"
    SKIPPED = "skipped"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass
class ProjectResult:
    """Outcome of setting up one project."""
    project: ProjectDescriptor
    status: ProjectStatus
    message: str = ""


@dataclass
class SetupReport:
    """Outcome of a whole setup run."""
    results: List[ProjectResult] = field(default_factory=list)
    exit_code: int = 0

    @property
    def aborted(self) -> bool:
        return any(r.status == ProjectStatus.ABORTED for r in self.results)

    def add(self, project: ProjectDescriptor, status: ProjectStatus, message: str = ""):
        self.results.append(ProjectResult(project, status, message))


@dataclass
class StepDefinition:
    """Definition of a setup step."""
    name: str
    title: str
    description: str
    handler: Callable[["SetupOrchestrator", ProjectDescriptor], bool]
    roles: Sequence[ProjectRole] = ()


class SetupOrchestrator:
    """Orchestrates `bionic start` over a set of projects."""

    def __init__(
        self,
        console: Optional[Console] = None,
        ui: Optional[ScaffoldUI] = None,
        runner: Optional[ToolRunner] = None,
        config: Optional[BionicConfig] = None
    ):
        self.console = console or Console()
        self.ui = ui or ScaffoldUI(self.console)
        self.runner = runner or SubprocessRunner()
        self.steps: List[StepDefinition] = []
        self.project_set = ProjectSet()
        self.report = SetupReport()
        self._config = config
        self._configs: Dict[str, BionicConfig] = {}

    def add_step(
        self,
        name: str,
        title: str,
        description: str,
        handler: Callable[["SetupOrchestrator", ProjectDescriptor], bool],
        roles: Sequence[ProjectRole] = ()
    ):
        """Add a step; it runs for projects whose role is in roles."""
        self.steps.append(StepDefinition(
            name=name,
            title=title,
            description=description,
            handler=handler,
            roles=tuple(roles)
        ))

    def add_default_steps(self):
        """Add the standard SETUP_STEPS."""
        from bionic.scaffold.steps import SETUP_STEPS

        for step in SETUP_STEPS:
            self.add_step(
                name=step["name"],
                title=step["title"],
                description=step["description"],
                handler=step["handler"],
                roles=step["roles"],
            )

    def config_for(self, project: ProjectDescriptor) -> BionicConfig:
        """Configuration for a project: explicit config, else its bionic.yaml."""
        if self._config is not None:
            return self._config
        key = str(project.dir)
        if key not in self._configs:
            self._configs[key] = load_config(project.dir)
        return self._configs[key]

    def record_exit_code(self, exit_code: int):
        """Keep the first non-zero exit code reported by a step."""
        if exit_code and not self.report.exit_code:
            self.report.exit_code = exit_code

    def _run_project(self, project: ProjectDescriptor) -> bool:
        """Run the applicable steps. Returns False if the user cancelled."""
        for step in self.steps:
            if project.role not in step.roles:
                continue
            logger.debug("Step %s for %s", step.name, project.path)
            if not step.handler(self, project):
                return False
        return True

    def run(self, project_set: ProjectSet) -> SetupReport:
        """Set up every project in project_set.

        A failing project is reported and the run moves on; earlier projects
        keep their changes. Cancelling at a prompt stops the run.

        Returns:
            The report; its exit_code is 0 for success or cancellation
        """
        self.project_set = project_set
        self.report = SetupReport()
        total = len(project_set)

        for index, project in enumerate(project_set, 1):
            if project.role == ProjectRole.UNKNOWN:
                logger.info("Skipping %s: not a Blazor project", project.path)
                self.report.add(project, ProjectStatus.SKIPPED, "not a Blazor project")
                continue

            self.ui.print_project_header(index, total, project.filename, project.role.value)

            try:
                completed = self._run_project(project)
            except BionicError as e:
                self.ui.print_error(e.message)
                if e.remediation:
                    self.ui.print_info(f"To fix: {e.remediation}")
                self.report.add(project, ProjectStatus.FAILED, e.message)
                self.record_exit_code(get_error_code(e))
                continue

            if not completed:
                self.ui.print_info("Ok! Bionic start canceled.")
                self.report.add(project, ProjectStatus.ABORTED, "canceled by user")
                return self.report

            self.report.add(project, ProjectStatus.CONFIGURED)

        return self.report
