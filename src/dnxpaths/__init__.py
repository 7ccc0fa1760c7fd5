"""Locate an installed DNX runtime and its tool executables for a project."""

from .config import DnxPathsConfig, load_config
from .errors import AliasFileError, DnxPathsError, GlobalJsonError
from .runtime import (
    DnxPaths,
    ResolutionError,
    ResolutionRequest,
    RuntimePathResult,
    RuntimeResolver,
    VersionOrAliasToken,
    resolve_dnx_paths,
)
from .utils import HostEnvironment, Platform

__version__ = "0.1.0"

__all__ = [
    "AliasFileError",
    "DnxPaths",
    "DnxPathsConfig",
    "DnxPathsError",
    "GlobalJsonError",
    "HostEnvironment",
    "Platform",
    "ResolutionError",
    "ResolutionRequest",
    "RuntimePathResult",
    "RuntimeResolver",
    "VersionOrAliasToken",
    "load_config",
    "resolve_dnx_paths",
]
