"""
Bionic Command Line Interface

Main entry point for the bionic CLI.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from bionic import __version__
from bionic.scaffold.config import DEFAULT_CONFIG, load_config
from bionic.scaffold.exceptions import BionicError, DiscoveryError, get_error_code
from bionic.scaffold.logging_config import get_logger, setup_logging
from bionic.scaffold.toolchain import SubprocessRunner, dotnet, open_url
from bionic.scaffold.ui import ScaffoldUI

console = Console()
logger = get_logger("cli")


def _runner(ctx: click.Context):
    """The ToolRunner for this invocation (tests pass one in via obj)."""
    ctx.ensure_object(dict)
    return ctx.obj.setdefault("runner", SubprocessRunner())


def _fail(error: BionicError):
    """Print a Bionic error and exit with its code."""
    ui = ScaffoldUI(console)
    ui.print_error(error.message)
    if error.details:
        console.print(f"   [dim]{error.details}[/dim]")
    if error.remediation:
        console.print(f"   {error.remediation}")
    sys.exit(get_error_code(error))


def _crash(error: Exception):
    """Print an unexpected error and exit 1. --verbose adds the traceback."""
    logger.debug("Unhandled error", exc_info=True)
    console.print(f"[red]Error:[/red] {error}")
    sys.exit(1)


@click.group()
@click.version_option(__version__, "--version", "-V", message="🤖 Bionic v%(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """🤖 Bionic - An Ionic CLI clone for Blazor projects"""
    ctx.ensure_object(dict)
    setup_logging(level=logging.DEBUG if verbose else None)


@main.command()
@click.option("--path", type=click.Path(file_okay=False), help="Directory to scan (default: current directory)")
@click.pass_context
def start(ctx: click.Context, path: str):
    """Prepare a Blazor project to mimic the Ionic structure.

    Creates App.scss, links the compiled App.css from wwwroot/index.html,
    adds watch and SCSS compile hooks to the project file(s) and installs
    the Bionic templates. Works from the root of a standalone project, or
    from either the solution directory or one project of a hosted app.

    Examples:
        bionic start
        bionic start --path ./MyApp
    """
    from bionic.scaffold.orchestrator import SetupOrchestrator, ProjectStatus
    from bionic.scaffold.topology import scan

    root = Path(path) if path else Path.cwd()
    ui = ScaffoldUI(console)
    ui.print_header()

    try:
        project_set = scan(root)
        if project_set.is_empty():
            raise DiscoveryError(root=root)

        orchestrator = SetupOrchestrator(console=console, ui=ui, runner=_runner(ctx))
        orchestrator.add_default_steps()
        report = orchestrator.run(project_set)
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)

    if report.aborted:
        sys.exit(0)

    console.print()
    ui.show_summary_table(
        "Bionic start",
        [
            (str(r.project.path.relative_to(project_set.root)), r.project.role.value, r.status.value)
            for r in report.results
        ]
    )
    if report.exit_code == 0 and any(r.status == ProjectStatus.CONFIGURED for r in report.results):
        ui.print_success("Your Bionic project is ready.")
    sys.exit(report.exit_code)


@main.command()
@click.argument("kind", required=False)
@click.argument("name", required=False)
@click.option("--path", type=click.Path(exists=True, file_okay=False), help="Project directory (default: current directory)")
@click.pass_context
def generate(ctx: click.Context, kind: str, name: str, path: str):
    """Generate components, pages, and providers/services.

    Prompts for anything that is missing.

    Examples:
        bionic generate page HomePage
        bionic generate component Counter
        bionic generate service Weather
    """
    from bionic.scaffold.generator import GENERATE_OPTIONS, generate_artifact, validate_kind

    ui = ScaffoldUI(console)
    project_dir = Path(path) if path else Path.cwd()

    try:
        if kind is not None:
            validate_kind(kind)
        else:
            kind = ui.prompt_choice("What would you like to generate?", list(GENERATE_OPTIONS))

        if not name:
            name = ui.prompt_text(f"How would you like to name your {kind}?", required=True)

        console.print(f"🚀  Generating a {kind} named {name}")
        exit_code = generate_artifact(kind, name, project_dir, _runner(ctx), load_config(project_dir))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)

    sys.exit(exit_code)


@main.command()
@click.pass_context
def serve(ctx: click.Context):
    """Build and serve the project, rebuilding on changes (dotnet watch run)."""
    try:
        sys.exit(dotnet(_runner(ctx), ["watch", "run"]))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)


@main.command()
@click.pass_context
def docs(ctx: click.Context):
    """Open the Blazor documentation in the browser."""
    try:
        sys.exit(open_url(DEFAULT_CONFIG.docs_url, _runner(ctx)))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)


@main.command()
@click.pass_context
def info(ctx: click.Context):
    """Show the Bionic version and the dotnet environment."""
    console.print(f"🤖 Bionic v{__version__}")
    console.print()
    try:
        sys.exit(dotnet(_runner(ctx), ["--info"]))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)


@main.command()
@click.pass_context
def update(ctx: click.Context):
    """Update the Bionic global tool."""
    try:
        sys.exit(dotnet(_runner(ctx), ["tool", "update", "-g", DEFAULT_CONFIG.tool_package]))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)


@main.command()
@click.pass_context
def uninstall(ctx: click.Context):
    """Uninstall the Bionic global tool."""
    try:
        sys.exit(dotnet(_runner(ctx), ["tool", "uninstall", "-g", DEFAULT_CONFIG.tool_package]))
    except BionicError as e:
        _fail(e)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        _crash(e)


if __name__ == "__main__":
    main()
