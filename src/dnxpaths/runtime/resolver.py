"""Runtime resolver: finds the installed runtime directory for a project."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from ..errors import AliasFileError
from ..utils.environment import HostEnvironment, Platform
from .locations import iter_runtime_locations
from .project import read_version_or_alias, resolve_root_directory
from .specs import (
    ALIAS_FILE_FORMATS,
    ALIAS_FOLDER,
    DEFAULT_ALIAS,
    FORMAT_GENERATIONS,
    GLOBAL_JSON,
    FormatGeneration,
)
from .types import (
    ResolutionError,
    ResolutionRequest,
    RuntimePathResult,
    VersionOrAliasToken,
)

logger = logging.getLogger(__name__)

INSTALL_GUIDE_URL = "https://github.com/aspnet/Home"


def _read_alias_file(alias_file: Path) -> str:
    try:
        return alias_file.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise AliasFileError(alias_file, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise AliasFileError(alias_file, f"not valid UTF-8 ({e.reason})") from e


def runtime_path_for_generation(
    version_or_alias: str,
    runtime_home: str,
    generation: FormatGeneration,
    platform: Platform,
) -> Optional[str]:
    """Compute where a runtime would be installed under one naming convention.

    Alias files (``alias/<name>.alias``, then ``alias/<name>.txt``) take
    precedence; their trimmed contents name the runtime folder. Otherwise the
    input is treated as a version and formatted with the platform's folder
    name pattern. Nothing is checked for existence here.

    Args:
        version_or_alias: Requested version or alias
        runtime_home: Runtime home directory
        generation: Naming convention to apply
        platform: Platform family selecting the folder name pattern

    Returns:
        Candidate runtime directory, or None if ``runtime_home`` is empty

    Raises:
        AliasFileError: If a matching alias file exists but cannot be read
    """
    if not runtime_home:
        return None

    alias_directory = Path(runtime_home, ALIAS_FOLDER)

    # Check alias first
    for alias_format in ALIAS_FILE_FORMATS:
        alias_file = alias_directory / alias_format.format(version_or_alias)
        if alias_file.is_file():
            full_name = _read_alias_file(alias_file)
            return os.path.join(runtime_home, generation.packages_folder_name, full_name)

    # There was no alias, look for the input as a version
    if platform is Platform.WINDOWS:
        folder_format = generation.windows_executable_format
    else:
        folder_format = generation.mono_executable_format

    return os.path.join(
        runtime_home,
        generation.packages_folder_name,
        folder_format.format(version_or_alias),
    )


def iter_runtime_paths(
    version_or_alias: str,
    runtime_home: str,
    platform: Platform,
) -> Iterator[Optional[str]]:
    """Yield one candidate per naming convention, newest first."""
    for generation in FORMAT_GENERATIONS:
        yield runtime_path_for_generation(version_or_alias, runtime_home, generation, platform)


class RuntimeResolver:
    """Finds the runtime directory a project should use.

    Searches every runtime home (outer loop) under every naming convention,
    newest first (inner loop), and returns the first directory that exists.
    A runtime under an earlier home always wins over one under a later
    home, whatever its naming convention.
    """

    def __init__(self, environment: HostEnvironment, config=None):
        """Initialize resolver.

        Args:
            environment: Host environment (project path, variables, platform)
            config: Optional DnxPathsConfig supplying the fallback alias
        """
        self.environment = environment
        self.config = config

    def default_request(self) -> ResolutionRequest:
        """Build the request for the environment's project path."""
        alias = self.config.aspnet5.alias if self.config else None
        return ResolutionRequest(start_directory=self.environment.path, configured_alias=alias)

    def resolve(self, request: Optional[ResolutionRequest] = None) -> RuntimePathResult:
        """Resolve the runtime directory.

        Version precedence:
        1. ``sdk.version`` in the project's global.json
        2. The alias in the request
        3. The alias in the options file
        4. ``"default"``

        Args:
            request: What to resolve; defaults to ``default_request()``

        Returns:
            RuntimePathResult with the directory, or with a ResolutionError
            listing every searched location

        Raises:
            GlobalJsonError: If global.json is unreadable or malformed
            AliasFileError: If a matching alias file is unreadable
        """
        if request is None:
            request = self.default_request()

        root = resolve_root_directory(request.start_directory)
        global_json = root / GLOBAL_JSON
        token = read_version_or_alias(global_json)
        version_or_alias = self._version_or_alias(token, request)

        searched_locations: List[str] = []
        for path in self._iter_candidates(version_or_alias):
            if os.path.isdir(path):
                logger.info("Using runtime '%s'.", path)
                return RuntimePathResult.found(path)

            searched_locations.append(path)

        error = self._not_found(version_or_alias, searched_locations, token)
        logger.error(error.message)
        return RuntimePathResult.failed(error)

    def _version_or_alias(
        self,
        token: Optional[VersionOrAliasToken],
        request: ResolutionRequest,
    ) -> str:
        if token is not None:
            return token.value
        if request.configured_alias:
            return request.configured_alias
        if self.config and self.config.aspnet5.alias:
            return self.config.aspnet5.alias
        return DEFAULT_ALIAS

    def _iter_candidates(self, version_or_alias: str) -> Iterator[str]:
        """Lazily yield candidate directories in search order."""
        platform = self.environment.platform
        for location in iter_runtime_locations(self.environment):
            for path in iter_runtime_paths(version_or_alias, location, platform):
                if not path:
                    continue
                yield path

    @staticmethod
    def _not_found(
        version_or_alias: str,
        searched_locations: List[str],
        token: Optional[VersionOrAliasToken],
    ) -> ResolutionError:
        searched = "\n".join(searched_locations)
        message = (
            f"The specified runtime path '{version_or_alias}' does not exist. "
            f"Searched locations {searched}.\n"
            f"Visit {INSTALL_GUIDE_URL} for an installation guide."
        )
        if token is None:
            return ResolutionError(message=message, searched_paths=tuple(searched_locations))

        return ResolutionError(
            message=message,
            searched_paths=tuple(searched_locations),
            source_file=token.source_file,
            source_line=token.source_line,
            source_column=token.source_column,
        )
