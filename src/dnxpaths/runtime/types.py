"""Data types for runtime resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ResolutionRequest:
    """Input to a single resolution.

    Attributes:
        start_directory: Directory the project root search starts from
        configured_alias: Alias or version supplied by the caller, used when
            global.json does not pin one
    """

    start_directory: Path
    configured_alias: Optional[str] = None


@dataclass(frozen=True)
class VersionOrAliasToken:
    """A requested version or alias plus where it was read from.

    Line and column are 1-based and point at the first character of the
    value token. All provenance fields are None when the value did not come
    from a file.
    """

    value: str
    source_file: Optional[Path] = None
    source_line: Optional[int] = None
    source_column: Optional[int] = None


@dataclass(frozen=True)
class ResolutionError:
    """Why no runtime directory could be found.

    This is a plain record, not an exception.

    Attributes:
        message: Human readable description naming the requested version
        searched_paths: Every candidate directory checked, in search order
        source_file: global.json the version came from (if any)
        source_line: 1-based line of the version value
        source_column: 1-based column of the version value
    """

    message: str
    searched_paths: Tuple[str, ...] = ()
    source_file: Optional[Path] = None
    source_line: Optional[int] = None
    source_column: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "searched_paths": list(self.searched_paths),
            "source_file": str(self.source_file) if self.source_file else None,
            "source_line": self.source_line,
            "source_column": self.source_column,
        }


@dataclass(frozen=True)
class RuntimePathResult:
    """Either the resolved runtime directory or the reason it was not found."""

    value: Optional[str] = None
    error: Optional[ResolutionError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("RuntimePathResult needs exactly one of value or error")

    @classmethod
    def found(cls, path: str) -> "RuntimePathResult":
        return cls(value=path)

    @classmethod
    def failed(cls, error: ResolutionError) -> "RuntimePathResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.value is not None

    def __repr__(self) -> str:
        if self.ok:
            return f"<RuntimePathResult {self.value}>"
        return f"<RuntimePathResult error ({len(self.error.searched_paths)} searched)>"


@dataclass(frozen=True)
class DnxPaths:
    """Resolved runtime directory plus the tool executables inside it.

    Tool attributes are None when the runtime was not found or the tool is
    not present in its ``bin`` folder.
    """

    runtime_path: RuntimePathResult
    dnx: Optional[str] = None
    dnu: Optional[str] = None
    klr: Optional[str] = None
    kpm: Optional[str] = None
    k: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render for JSON consumers (CLI output, MCP tools)."""
        error = self.runtime_path.error
        return {
            "available": self.runtime_path.ok,
            "runtime_path": self.runtime_path.value,
            "error": error.to_dict() if error else None,
            "tools": {
                "dnx": self.dnx,
                "dnu": self.dnu,
                "klr": self.klr,
                "kpm": self.kpm,
                "k": self.k,
            },
        }
