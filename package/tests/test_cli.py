"""Tests for the Bionic CLI."""

import subprocess
import sys

import pytest
from click.testing import CliRunner


class TestCLI:
    """Test CLI entry points and basic functionality."""

    @pytest.mark.slow
    def test_version(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "bionic.cli", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "Bionic v" in result.stdout

    @pytest.mark.slow
    def test_help(self):
        """Test --help flag lists every command."""
        result = subprocess.run(
            [sys.executable, "-m", "bionic.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        for command in ("docs", "generate", "info", "serve", "start", "uninstall", "update"):
            assert command in result.stdout

    def test_unknown_command(self):
        from bionic.cli import main

        result = CliRunner().invoke(main, ["launch"])
        assert result.exit_code != 0
        assert "No such command" in result.output


class TestStartCommand:
    """bionic start."""

    def test_no_project(self, tmp_path, runner):
        from bionic.cli import main

        result = CliRunner().invoke(main, ["start", "--path", str(tmp_path)], obj={"runner": runner})

        assert result.exit_code == 10
        assert "No C# project found" in result.output
        assert runner.calls == []

    def test_standalone(self, standalone_project, runner):
        from bionic.cli import main

        result = CliRunner().invoke(main, ["start", "--path", str(standalone_project)], obj={"runner": runner})

        assert result.exit_code == 0, result.output
        assert (standalone_project / "App.scss").exists()
        assert runner.args == [["new", "-i", "BionicTemplates"]]

    def test_already_started_declined(self, standalone_project, runner):
        """Answering no to the confirmation is a clean exit with no writes."""
        from bionic.cli import main

        CliRunner().invoke(main, ["start", "--path", str(standalone_project)], obj={"runner": runner})
        csproj = (standalone_project / "App.csproj").read_text()

        result = CliRunner().invoke(
            main, ["start", "--path", str(standalone_project)], obj={"runner": runner}, input="n\n"
        )

        assert result.exit_code == 0
        assert "canceled" in result.output
        assert (standalone_project / "App.csproj").read_text() == csproj
        assert len(runner.calls) == 1

    def test_template_failure_exit_code(self, standalone_project):
        from conftest import FakeRunner
        from bionic.cli import main

        result = CliRunner().invoke(
            main, ["start", "--path", str(standalone_project)], obj={"runner": FakeRunner(exit_code=5)}
        )
        assert result.exit_code == 5


class TestGenerateCommand:
    """bionic generate."""

    def test_generate_page(self, standalone_project, runner):
        from bionic.cli import main
        from bionic.scaffold.steps.stylesheet import init_stylesheet

        init_stylesheet(standalone_project)
        result = CliRunner().invoke(
            main, ["generate", "page", "HomePage", "--path", str(standalone_project)], obj={"runner": runner}
        )

        assert result.exit_code == 0, result.output
        assert "Generating a page named HomePage" in result.output
        assert '@import "Pages/HomePage.scss";' in (standalone_project / "App.scss").read_text()

    def test_invalid_kind(self, standalone_project, runner):
        from bionic.cli import main

        result = CliRunner().invoke(
            main, ["generate", "widget", "Foo", "--path", str(standalone_project)], obj={"runner": runner}
        )

        assert result.exit_code == 15
        assert "Can't generate" in result.output
        assert "component, page, provider, service" in result.output
        assert runner.calls == []

    def test_prompts_for_missing_values(self, standalone_project, runner):
        """Kind and name are asked for when not given."""
        from bionic.cli import main

        result = CliRunner().invoke(
            main,
            ["generate", "--path", str(standalone_project)],
            obj={"runner": runner},
            input="service\nWeather\n",
        )

        assert result.exit_code == 0, result.output
        assert "services.AddSingleton<IWeather, Weather>();" in (standalone_project / "Program.cs").read_text()

    def test_service_without_registrar(self, standalone_project, runner):
        from bionic.cli import main

        (standalone_project / "Program.cs").write_text("class Program { }\n")
        result = CliRunner().invoke(
            main, ["generate", "service", "Weather", "--path", str(standalone_project)], obj={"runner": runner}
        )

        assert result.exit_code == 12
        assert "Registrar block not found" in result.output


    def test_unreadable_program_source(self, standalone_project, runner):
        """A Program.cs that is not UTF-8 ends in a Bionic error, not a traceback."""
        from bionic.cli import main

        (standalone_project / "Program.cs").write_bytes(b"\xff\xfe not utf-8")
        result = CliRunner().invoke(
            main, ["generate", "service", "Weather", "--path", str(standalone_project)], obj={"runner": runner}
        )

        assert result.exit_code == 13
        assert "Cannot read" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_unexpected_error(self, standalone_project, runner):
        """Anything that is not a BionicError prints Error: and exits 1."""
        from unittest.mock import patch
        from bionic.cli import main

        with patch("bionic.scaffold.generator.generate_artifact", side_effect=RuntimeError("disk on fire")):
            result = CliRunner().invoke(
                main, ["generate", "page", "Home", "--path", str(standalone_project)], obj={"runner": runner}
            )

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "disk on fire" in result.output

    def test_keyboard_interrupt(self, standalone_project, runner):
        from unittest.mock import patch
        from bionic.cli import main

        with patch("bionic.scaffold.generator.generate_artifact", side_effect=KeyboardInterrupt):
            result = CliRunner().invoke(
                main, ["generate", "page", "Home", "--path", str(standalone_project)], obj={"runner": runner}
            )

        assert result.exit_code == 130

class TestToolCommands:
    """Commands that only delegate to dotnet."""

    @pytest.mark.parametrize("command,args", [
        ("serve", ["watch", "run"]),
        ("info", ["--info"]),
        ("update", ["tool", "update", "-g", "Bionic"]),
        ("uninstall", ["tool", "uninstall", "-g", "Bionic"]),
    ])
    def test_delegates(self, command, args, runner):
        from bionic.cli import main

        result = CliRunner().invoke(main, [command], obj={"runner": runner})

        assert result.exit_code == 0
        assert runner.args == [args]

    def test_exit_code_passthrough(self):
        from conftest import FakeRunner
        from bionic.cli import main

        result = CliRunner().invoke(main, ["serve"], obj={"runner": FakeRunner(exit_code=9)})
        assert result.exit_code == 9

    def test_docs(self, runner):
        from unittest.mock import patch
        from bionic.cli import main

        with patch("bionic.scaffold.toolchain.webbrowser.open", return_value=True) as mock_open:
            result = CliRunner().invoke(main, ["docs"], obj={"runner": runner})

        assert result.exit_code == 0
        mock_open.assert_called_once_with("https://blazor.net")
