"""Runtime resolution: locate the installed runtime and its tools."""

from .executables import first_path, resolve_dnx_paths
from .locations import iter_runtime_locations
from .project import read_version_or_alias, resolve_root_directory
from .resolver import RuntimeResolver, iter_runtime_paths, runtime_path_for_generation
from .specs import FORMAT_GENERATIONS, TOOL_SPECS, FormatGeneration, ToolSpec
from .types import (
    DnxPaths,
    ResolutionError,
    ResolutionRequest,
    RuntimePathResult,
    VersionOrAliasToken,
)

__all__ = [
    "RuntimeResolver",
    "resolve_dnx_paths",
    "first_path",
    "iter_runtime_locations",
    "iter_runtime_paths",
    "runtime_path_for_generation",
    "read_version_or_alias",
    "resolve_root_directory",
    "FORMAT_GENERATIONS",
    "TOOL_SPECS",
    "FormatGeneration",
    "ToolSpec",
    "DnxPaths",
    "ResolutionError",
    "ResolutionRequest",
    "RuntimePathResult",
    "VersionOrAliasToken",
]
