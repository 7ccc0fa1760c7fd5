"""Project root discovery and global.json version pinning."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from json_source_map import calculate

from ..errors import GlobalJsonError
from .specs import GLOBAL_JSON
from .types import VersionOrAliasToken

logger = logging.getLogger(__name__)

_VERSION_POINTER = "/sdk/version"


def resolve_root_directory(project_path: Union[str, Path]) -> Path:
    """Find the nearest directory containing global.json.

    Walks from ``project_path`` up through its ancestors. The filesystem
    root itself is never treated as a project root.

    Args:
        project_path: Directory to start from

    Returns:
        The closest directory holding global.json, or ``project_path``
        unchanged when there is none
    """
    directory = Path(project_path).absolute()
    while directory.parent != directory:
        if (directory / GLOBAL_JSON).is_file():
            return directory
        directory = directory.parent

    # If we don't find any files then make the project folder the root
    return Path(project_path)


def read_version_or_alias(global_json: Path) -> Optional[VersionOrAliasToken]:
    """Read ``sdk.version`` from a global.json file.

    Args:
        global_json: Path to the global.json file

    Returns:
        The pinned version or alias with its line/column, or None when the
        file does not exist or does not pin one

    Raises:
        GlobalJsonError: If the file cannot be read, is not valid JSON, or
            has an unexpected shape
    """
    if not global_json.is_file():
        logger.debug("No global.json at '%s'.", global_json)
        return None

    logger.info("Looking for sdk version in '%s'.", global_json)

    try:
        text = global_json.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise GlobalJsonError(global_json, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise GlobalJsonError(global_json, f"not valid UTF-8 ({e.reason})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GlobalJsonError(global_json, e.msg, line=e.lineno, column=e.colno) from e

    if not isinstance(data, dict):
        raise GlobalJsonError(global_json, "expected a JSON object at the top level")

    sdk = data.get("sdk")
    if sdk is None:
        return None
    if not isinstance(sdk, dict):
        raise GlobalJsonError(global_json, "'sdk' must be an object")

    version = sdk.get("version")
    if version is None:
        return None
    if not isinstance(version, str):
        raise GlobalJsonError(global_json, "'sdk.version' must be a string")

    # json_source_map positions are 0-based
    start = calculate(text)[_VERSION_POINTER].value_start
    return VersionOrAliasToken(
        value=version,
        source_file=global_json,
        source_line=start.line + 1,
        source_column=start.column + 1,
    )
