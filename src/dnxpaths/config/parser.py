"""Options file parser (.dnxpaths.toml)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".dnxpaths.toml"


@dataclass
class AspNet5Options:
    """Runtime selection options."""

    alias: Optional[str] = None  # Used when global.json pins no version


@dataclass
class DnxPathsConfig:
    """Complete dnxpaths configuration."""

    aspnet5: AspNet5Options = field(default_factory=AspNet5Options)

    # Project root the options were loaded for
    project_root: Path = field(default_factory=Path.cwd)


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .dnxpaths.toml in the project directory.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .dnxpaths.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.is_file():
        return config_file
    return None


def load_config(project_path: Path) -> DnxPathsConfig:
    """Load configuration from .dnxpaths.toml or use defaults.

    Args:
        project_path: Root path of the project

    Returns:
        DnxPathsConfig with loaded or default configuration
    """
    config = DnxPathsConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if not config_file:
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # Options only supply defaults
        logger.warning("Ignoring unreadable options file '%s': %s", config_file, e)
        return config

    aspnet5_data = data.get("aspnet5")
    if isinstance(aspnet5_data, dict):
        alias = aspnet5_data.get("alias")
        if isinstance(alias, str) and alias.strip():
            config.aspnet5.alias = alias.strip()
        elif alias is not None:
            logger.warning("Ignoring invalid aspnet5.alias in '%s': %r", config_file, alias)

    return config
