"""
Bionic Configuration

File names, anchors and package ids the scaffolder depends on. Defaults
match the standard Blazor project templates; a project may override them
with an optional bionic.yaml next to its .csproj.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from bionic.scaffold.exceptions import ConfigError
from bionic.scaffold.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILE = "bionic.yaml"


@dataclass(frozen=True)
class BionicConfig:
    """Literal values used when patching a project."""
    stylesheet: str = "App.scss"
    program_source: str = "Program.cs"
    index_html: str = "wwwroot/index.html"
    link_anchor: str = '    <link href="css/site.css'
    link_line: str = '    <link href="css/App.css" rel="stylesheet" />'
    descriptor_anchor: str = "</Project>"
    stylesheet_header: str = "// WARNING - This file is automatically updated by Bionic CLI, please do not remove"
    categories: List[str] = field(default_factory=lambda: ["Components", "Pages"])
    template_package: str = "BionicTemplates"
    template_prefix: str = "bionic"
    tool_package: str = "Bionic"
    docs_url: str = "https://blazor.net"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BionicConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown configuration key: {unknown[0]}",
                config_key=unknown[0],
                details=f"Valid keys: {', '.join(sorted(known))}"
            )
        for key, value in data.items():
            if key == "categories":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError("categories must be a list of strings", config_key=key)
            elif not isinstance(value, str):
                raise ConfigError(f"{key} must be a string", config_key=key)
        return replace(cls(), **data)


DEFAULT_CONFIG = BionicConfig()


def load_config(project_dir: Optional[Path] = None) -> BionicConfig:
    """Load configuration for a project directory.

    Args:
        project_dir: Directory that may contain bionic.yaml

    Returns:
        Defaults overlaid with the values from bionic.yaml, if any
    """
    if project_dir is None:
        return DEFAULT_CONFIG

    config_path = Path(project_dir) / CONFIG_FILE
    if not config_path.exists():
        return DEFAULT_CONFIG

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Could not parse {config_path}",
            details=str(e),
            remediation="Fix the YAML syntax or remove the file to use defaults"
        )

    if not isinstance(data, dict):
        raise ConfigError(
            f"{config_path} must contain a mapping",
            remediation="Use 'key: value' pairs at the top level"
        )

    logger.debug("Loaded configuration overrides from %s: %s", config_path, sorted(data))
    return BionicConfig.from_dict(data)
