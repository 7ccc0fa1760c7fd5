"""MCP Server for dnxpaths.

Exposes runtime resolution as MCP tools using FastMCP, so editors and agents
can ask which runtime and tools a project would use.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from mcp.server import FastMCP

from .config import find_config_file, load_config
from .errors import DnxPathsError
from .runtime import ResolutionRequest, resolve_dnx_paths
from .utils import HostEnvironment
from .utils.environment import PROJECT_PATH_ENV

_project_path: Optional[str] = None

mcp = FastMCP("dnxpaths")


def set_project_path(path: str) -> None:
    """Set the project path the server answers for."""
    global _project_path
    _project_path = str(Path(path).resolve())


def get_project_path() -> str:
    """Get the current project path."""
    return _project_path or os.getenv(PROJECT_PATH_ENV) or os.getcwd()


def _resolve(project_path: Path, alias: Optional[str] = None) -> Dict[str, Any]:
    environment = HostEnvironment.from_os(project_path)
    config = load_config(project_path)
    request = ResolutionRequest(
        start_directory=project_path,
        configured_alias=alias or config.aspnet5.alias,
    )
    try:
        paths = resolve_dnx_paths(environment, config, request)
    except DnxPathsError as e:
        return {
            "available": False,
            "error": {"message": str(e)},
        }
    return paths.to_dict()


@mcp.tool()
async def get_dnx_paths() -> Dict[str, Any]:
    """Get the runtime and tool paths for the project this server runs on.

    Returns:
        Dict with:
        - project_path: Project the server is configured for
        - config_file: Path to .dnxpaths.toml (if exists)
        - available: Whether a runtime directory was found
        - runtime_path: Resolved runtime directory (or None)
        - tools: dnx, dnu, klr, kpm and k executables (None when missing)
        - error: message, searched_paths and global.json location when
          nothing was found
    """
    project_path = Path(get_project_path())
    config_file = find_config_file(project_path)

    result = {
        "project_path": str(project_path),
        "config_file": str(config_file) if config_file else None,
    }
    result.update(_resolve(project_path))
    return result


@mcp.tool()
async def get_runtime_paths(project_path: str, alias: str | None = None) -> Dict[str, Any]:
    """Preview which runtime a different project would use.

    Does NOT change the server's project.

    Args:
        project_path: Path to the project to resolve for
        alias: Optional alias or version used when the project's global.json
               does not pin one

    Returns:
        Same shape as get_dnx_paths(), or an error if the path does not exist
    """
    target_path = Path(project_path)
    if not target_path.exists():
        return {
            "available": False,
            "error": {"message": f"Project path does not exist: {project_path}"},
            "project_path": project_path,
        }

    result: Dict[str, Any] = {"project_path": project_path}
    result.update(_resolve(target_path, alias))
    return result


@mcp.resource("project://info")
def get_project_info_resource() -> str:
    """Get information about the project this server resolves runtimes for."""
    project_path = get_project_path()
    return f"""# dnxpaths Server Information

**Project Name:** {Path(project_path).name}
**Project Path:** {project_path}

Tools:
- get_dnx_paths: runtime directory and tool executables for this project
- get_runtime_paths: the same for any other project directory
"""


def main():
    """Run the MCP server.

    The project path can be set via:
    1. First command line argument
    2. DNXPATHS_PROJECT_PATH environment variable
    3. Current working directory (default)
    """
    if len(sys.argv) > 1 and not sys.argv[1].startswith("-"):
        set_project_path(sys.argv[1])
        # Remove the argument so FastMCP doesn't see it
        sys.argv = [sys.argv[0]] + sys.argv[2:]

    project_path = get_project_path()
    if not _project_path:
        set_project_path(project_path)

    # stdout is used for the MCP protocol
    print(f"Starting dnxpaths MCP server for {project_path}", file=sys.stderr)

    mcp.run()


if __name__ == "__main__":
    main()
