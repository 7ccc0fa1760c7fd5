"""Fatal errors raised while resolving a runtime.

A runtime that simply is not installed is not an exception: it is reported as
a ``ResolutionError`` record inside ``RuntimePathResult``. The exceptions here
cover configuration that cannot be trusted, where guessing a runtime would be
worse than stopping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DnxPathsError(Exception):
    """Base error for all dnxpaths exceptions."""


class GlobalJsonError(DnxPathsError):
    """Raised when global.json exists but cannot be read or understood."""

    def __init__(
        self,
        path: Path,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(self._format_error_message())

    def _format_error_message(self) -> str:
        location = str(self.path)
        if self.line is not None:
            location += f"({self.line},{self.column})"
        return f"Invalid global.json {location}: {self.reason}"


class AliasFileError(DnxPathsError):
    """Raised when an alias file exists but cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read alias file '{path}': {reason}")
