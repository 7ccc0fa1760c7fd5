"""Configuration management for dnxpaths."""

from .parser import (
    AspNet5Options,
    DnxPathsConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "AspNet5Options",
    "DnxPathsConfig",
    "find_config_file",
    "load_config",
]
