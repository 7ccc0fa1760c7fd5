"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, Optional

import pytest

from dnxpaths.utils import HostEnvironment, Platform

GLOBAL_JSON_100 = '{"sdk":{"version":"1.0.0"}}'


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project with a global.json pinning 1.0.0.

    Creates:
        temp_dir/
            proj/
                global.json
                src/
    """
    project_root = temp_dir / "proj"
    (project_root / "src").mkdir(parents=True)
    (project_root / "global.json").write_text(GLOBAL_JSON_100)
    return project_root


@pytest.fixture
def runtime_home(temp_dir: Path) -> Path:
    """Create an empty runtime home directory (temp_dir/opt/runtime)."""
    home = temp_dir / "opt" / "runtime"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def make_environment() -> Callable[..., HostEnvironment]:
    """Factory for host environments with an explicit variable mapping.

    Nothing is read from the real process environment, so the searched
    locations are fully determined by the test.
    """

    def _make(
        path: Path,
        environ: Optional[Dict[str, str]] = None,
        platform: Platform = Platform.POSIX,
    ) -> HostEnvironment:
        return HostEnvironment(path=path, environ=dict(environ or {}), platform=platform)

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo logging configuration done by CLI tests."""
    yield
    package_logger = logging.getLogger("dnxpaths")
    package_logger.handlers[:] = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
