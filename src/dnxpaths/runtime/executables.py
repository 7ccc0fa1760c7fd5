"""Tool executables inside a resolved runtime."""

from __future__ import annotations

import os
from typing import Dict, Optional

from ..utils.environment import HostEnvironment
from .resolver import RuntimeResolver
from .specs import BIN_FOLDER, TOOL_SPECS
from .types import DnxPaths, ResolutionRequest


def first_path(runtime_path: Optional[str], *candidates: str) -> Optional[str]:
    """Return the first ``<runtime_path>/bin/<candidate>`` file that exists.

    Args:
        runtime_path: Resolved runtime directory, or None
        *candidates: File names to try, in order

    Returns:
        Path of the first existing candidate, or None
    """
    if runtime_path is None:
        return None

    for candidate in candidates:
        path = os.path.join(runtime_path, BIN_FOLDER, candidate)
        if os.path.isfile(path):
            return path
    return None


def resolve_dnx_paths(
    environment: HostEnvironment,
    config=None,
    request: Optional[ResolutionRequest] = None,
) -> DnxPaths:
    """Resolve the runtime directory and every tool executable in it.

    Args:
        environment: Host environment to resolve in
        config: Optional DnxPathsConfig
        request: Optional explicit request (defaults to the environment path)

    Returns:
        DnxPaths with the runtime result and one path (or None) per tool
    """
    runtime_path = RuntimeResolver(environment, config).resolve(request)

    tools: Dict[str, Optional[str]] = {
        spec.name: first_path(runtime_path.value, *spec.candidates) for spec in TOOL_SPECS
    }
    return DnxPaths(runtime_path=runtime_path, **tools)
