"""Declarative specifications for runtime layouts and tools.

This is DATA, not code. Supporting another on-disk naming convention or
another tool means adding an entry here.
"""

from dataclasses import dataclass
from typing import Tuple

GLOBAL_JSON = "global.json"
DEFAULT_ALIAS = "default"

# Runtime home variables, in priority order
RUNTIME_HOME_VARIABLES: Tuple[str, ...] = ("DNX_HOME", "KRE_HOME")

# %HOME% and %USERPROFILE% might point to different places
USER_HOME_VARIABLES: Tuple[str, ...] = ("HOME", "USERPROFILE")

ALIAS_FOLDER = "alias"
ALIAS_FILE_FORMATS: Tuple[str, ...] = ("{0}.alias", "{0}.txt")

BIN_FOLDER = "bin"


@dataclass(frozen=True)
class FormatGeneration:
    """One historical naming convention for installed runtimes.

    Attributes:
        subfolder_name: Folder under the user's home holding the runtimes
        mono_executable_format: Runtime folder name on POSIX hosts
        windows_executable_format: Runtime folder name on Windows hosts
        packages_folder_name: Folder under the runtime home holding installs
    """

    subfolder_name: str
    mono_executable_format: str
    windows_executable_format: str
    packages_folder_name: str


# Newest first; the order is the search order
FORMAT_GENERATIONS: Tuple[FormatGeneration, ...] = (
    FormatGeneration(
        subfolder_name=".dnx",
        mono_executable_format="dnx-mono.{0}",
        windows_executable_format="dnx-clr-win-x86.{0}",
        packages_folder_name="runtimes",
    ),
    FormatGeneration(
        subfolder_name=".k",
        mono_executable_format="kre-mono.{0}",
        windows_executable_format="kre-clr-win-x86.{0}",
        packages_folder_name="runtimes",
    ),
    FormatGeneration(
        subfolder_name=".kre",
        mono_executable_format="KRE-Mono.{0}",
        windows_executable_format="KRE-CLR-x86.{0}",
        packages_folder_name="packages",
    ),
)


@dataclass(frozen=True)
class ToolSpec:
    """A tool executable and its file names, tried in order."""

    name: str
    candidates: Tuple[str, ...]


TOOL_SPECS: Tuple[ToolSpec, ...] = (
    ToolSpec(name="dnx", candidates=("dnx", "dnx.exe")),
    ToolSpec(name="dnu", candidates=("dnu", "dnu.cmd")),
    ToolSpec(name="klr", candidates=("klr", "klr.exe")),
    ToolSpec(name="kpm", candidates=("kpm", "kpm.cmd")),
    ToolSpec(name="k", candidates=("k", "k.cmd")),
)
