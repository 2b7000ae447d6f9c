"""
External toolchain

Launches the dotnet CLI and the system URL handler. Everything goes through
a ToolRunner so tests can substitute a fake.
"""

import os
import shutil
import subprocess
import sys
import webbrowser
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from bionic.scaffold.exceptions import ExternalToolError
from bionic.scaffold.logging_config import get_logger

logger = get_logger(__name__)


class ToolRunner(Protocol):
    """Runs an external command to completion and returns its exit code."""

    def run(self, command: str, args: Sequence[str], cwd: Optional[Path] = None) -> int:
        ...


class SubprocessRunner:
    """ToolRunner backed by subprocess; output goes straight to the terminal."""

    def run(self, command: str, args: Sequence[str], cwd: Optional[Path] = None) -> int:
        argv = [command, *args]
        logger.debug("Running: %s (in %s)", " ".join(argv), cwd or ".")
        try:
            result = subprocess.run(argv, cwd=str(cwd) if cwd else None)
        except (FileNotFoundError, OSError) as e:
            raise ExternalToolError(
                f"Could not launch {command}",
                command=command,
                details=str(e)
            )
        logger.debug("%s exited with %d", command, result.returncode)
        return result.returncode


def dotnet_executable() -> str:
    """Locate the dotnet executable.

    BIONIC_DOTNET wins, then DOTNET_HOST_PATH (set when running under the
    dotnet host), then dotnet on PATH.
    """
    for var in ("BIONIC_DOTNET", "DOTNET_HOST_PATH"):
        value = os.environ.get(var)
        if value:
            return value
    return shutil.which("dotnet") or "dotnet"


def dotnet(runner: ToolRunner, args: Sequence[str], cwd: Optional[Path] = None) -> int:
    """Run `dotnet <args>`, optionally inside cwd."""
    return runner.run(dotnet_executable(), list(args), cwd=cwd)


def _url_fallback_command(url: str) -> Optional[List[str]]:
    if sys.platform.startswith("win"):
        return ["cmd", "/c", "start", url.replace("&", "^&")]
    if sys.platform == "darwin":
        return ["open", url]
    if sys.platform.startswith("linux"):
        return ["xdg-open", url]
    return None


def open_url(url: str, runner: Optional[ToolRunner] = None) -> int:
    """Open url with the default handler.

    Returns:
        0 on success, otherwise the exit code of the platform opener (1 if
        there is none)
    """
    try:
        if webbrowser.open(url):
            return 0
    except webbrowser.Error as e:
        logger.debug("webbrowser failed for %s: %s", url, e)

    fallback = _url_fallback_command(url)
    if fallback is None:
        return 1
    runner = runner or SubprocessRunner()
    return runner.run(fallback[0], fallback[1:])
