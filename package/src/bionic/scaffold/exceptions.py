"""
Bionic Scaffold Exceptions

Custom exception types for better error handling and remediation suggestions.
"""

from pathlib import Path
from typing import Optional, List, Union


class BionicError(Exception):
    """Base exception for all Bionic errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class DiscoveryError(BionicError):
    """No build descriptor was found under the scan root."""

    def __init__(
        self,
        message: str = "No C# project found.",
        root: Optional[Union[str, Path]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.root = str(root) if root is not None else None
        if not remediation:
            remediation = "Make sure you are in the root of a C# project."
        if not details and self.root:
            details = f"Searched for *.csproj under {self.root}"
        super().__init__(message, remediation, details)


class TopologyError(BionicError):
    """A hosted project is missing one of its halves."""

    def __init__(
        self,
        message: str,
        project: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.project = project
        if not remediation:
            remediation = "Run 'bionic start' from the solution directory that holds both the Client and Server projects"
        super().__init__(message, remediation, details)


class RegistrarNotFoundError(BionicError):
    """The service registration block could not be located."""

    def __init__(
        self,
        message: str = "Registrar block not found.",
        source_file: Optional[Union[str, Path]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.source_file = str(source_file) if source_file is not None else None
        if not remediation and self.source_file:
            remediation = (
                f"Check that {self.source_file} constructs a BrowserServiceProvider "
                "with a lambda, e.g. new BrowserServiceProvider(services => { ... })"
            )
        super().__init__(message, remediation, details)


class PatchTargetError(BionicError):
    """A file that should be patched is missing or unreadable."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.path = str(path) if path is not None else None
        if not remediation and self.path:
            remediation = f"Make sure {self.path} exists and is readable"
        super().__init__(message, remediation, details)


class ExternalToolError(BionicError):
    """The external toolchain could not be launched or failed."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.command = command
        self.exit_code = exit_code
        if not remediation and command:
            remediation = f"Make sure '{command}' is installed and on your PATH (or set BIONIC_DOTNET)"
        super().__init__(message, remediation, details)


class ArtifactError(BionicError):
    """An artifact kind that cannot be generated."""

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        valid_kinds: Optional[List[str]] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.kind = kind
        self.valid_kinds = list(valid_kinds or [])
        if not remediation and self.valid_kinds:
            remediation = f"You can only generate: {', '.join(self.valid_kinds)}"
        super().__init__(message, remediation, details)


class ConfigError(BionicError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_key = config_key
        if not remediation and config_key:
            remediation = f"Check the value of '{config_key}' in bionic.yaml"
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    DiscoveryError: 10,
    TopologyError: 11,
    RegistrarNotFoundError: 12,
    PatchTargetError: 13,
    ExternalToolError: 14,
    ArtifactError: 15,
    ConfigError: 16,
    BionicError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type.

    A failed external tool keeps its own exit code when it reported one.
    """
    if isinstance(error, ExternalToolError) and error.exit_code:
        return error.exit_code
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
