"""Host environment abstraction: project path, environment variables, platform."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

PROJECT_PATH_ENV = "DNXPATHS_PROJECT_PATH"

# $NAME, ${NAME} and %NAME%
_VARIABLE_PATTERN = re.compile(
    r"\$\{(?P<braced>[^}]+)\}|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)|%(?P<percent>[^%]+)%"
)


class Platform(enum.Enum):
    """Platform family, used to pick a runtime folder naming format."""

    POSIX = "posix"
    WINDOWS = "windows"


def current_platform() -> Platform:
    """Return the platform family of the running interpreter."""
    return Platform.WINDOWS if os.name == "nt" else Platform.POSIX


def expand_variables(value: str, environ: Mapping[str, str]) -> str:
    """Expand environment variable references in a string.

    Supports ``$NAME``, ``${NAME}`` and ``%NAME%``. References to variables
    that are not set are left untouched.

    Args:
        value: String that may contain variable references
        environ: Environment to look variables up in

    Returns:
        The expanded string

    Examples:
        >>> expand_variables("%USERPROFILE%/.dnx", {"USERPROFILE": "C:/Users/me"})
        'C:/Users/me/.dnx'
    """

    def _replace(match: re.Match) -> str:
        name = match.group("braced") or match.group("bare") or match.group("percent")
        if name in environ:
            return environ[name]
        return match.group(0)

    return _VARIABLE_PATTERN.sub(_replace, value)


@dataclass(frozen=True)
class HostEnvironment:
    """Everything resolution reads from the host.

    Attributes:
        path: Directory the resolution starts from
        environ: Environment variables (read-only)
        platform: Platform family, resolved once
    """

    path: Path
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    platform: Platform = field(default_factory=current_platform)

    @classmethod
    def from_os(cls, path: Optional[Union[str, Path]] = None) -> "HostEnvironment":
        """Build the environment of the running process.

        The project path falls back to ``DNXPATHS_PROJECT_PATH`` and then to
        the current working directory.
        """
        project_path = path or os.getenv(PROJECT_PATH_ENV) or os.getcwd()
        return cls(path=Path(project_path))

    def get(self, name: str) -> str:
        """Return an environment variable, or an empty string when unset."""
        return self.environ.get(name) or ""

    def expand(self, value: str) -> str:
        return expand_variables(value, self.environ)
