"""Unit tests for tool executable lookup."""

import os

from dnxpaths.runtime import TOOL_SPECS, first_path, resolve_dnx_paths


class TestFirstPath:
    """Test first_path()."""

    def test_no_runtime(self):
        assert first_path(None, "dnx", "dnx.exe") is None

    def test_missing_tool(self, runtime_home):
        (runtime_home / "bin").mkdir()
        assert first_path(str(runtime_home), "dnx", "dnx.exe") is None

    def test_second_candidate(self, runtime_home):
        (runtime_home / "bin").mkdir()
        (runtime_home / "bin" / "dnx.exe").touch()

        assert first_path(str(runtime_home), "dnx", "dnx.exe") == os.path.join(
            str(runtime_home), "bin", "dnx.exe"
        )

    def test_candidate_order(self, runtime_home):
        (runtime_home / "bin").mkdir()
        (runtime_home / "bin" / "dnu").touch()
        (runtime_home / "bin" / "dnu.cmd").touch()

        assert first_path(str(runtime_home), "dnu", "dnu.cmd").endswith(os.path.join("bin", "dnu"))

    def test_directories_are_not_executables(self, runtime_home):
        (runtime_home / "bin" / "k").mkdir(parents=True)
        assert first_path(str(runtime_home), "k") is None


class TestResolveDnxPaths:
    """Test resolving the runtime and all tools together."""

    def test_tool_specs(self):
        assert [spec.name for spec in TOOL_SPECS] == ["dnx", "dnu", "klr", "kpm", "k"]
        assert dict((spec.name, spec.candidates) for spec in TOOL_SPECS)["kpm"] == ("kpm", "kpm.cmd")

    def test_resolves_tools_in_runtime(self, project_dir, runtime_home, make_environment):
        runtime = runtime_home / "runtimes" / "dnx-mono.1.0.0"
        (runtime / "bin").mkdir(parents=True)
        (runtime / "bin" / "dnx").touch()
        (runtime / "bin" / "dnu.cmd").touch()
        environment = make_environment(project_dir / "src", {"DNX_HOME": str(runtime_home)})

        paths = resolve_dnx_paths(environment)

        assert paths.runtime_path.value == str(runtime)
        assert paths.dnx == os.path.join(str(runtime), "bin", "dnx")
        assert paths.dnu == os.path.join(str(runtime), "bin", "dnu.cmd")
        assert paths.klr is None
        assert paths.kpm is None
        assert paths.k is None

    def test_runtime_found_without_tools(self, project_dir, runtime_home, make_environment):
        (runtime_home / "runtimes" / "dnx-mono.1.0.0").mkdir(parents=True)
        environment = make_environment(project_dir, {"DNX_HOME": str(runtime_home)})

        paths = resolve_dnx_paths(environment)

        assert paths.runtime_path.ok
        assert paths.dnx is None

    def test_not_found(self, project_dir, runtime_home, make_environment):
        environment = make_environment(project_dir, {"DNX_HOME": str(runtime_home)})

        paths = resolve_dnx_paths(environment)

        assert not paths.runtime_path.ok
        assert (paths.dnx, paths.dnu, paths.klr, paths.kpm, paths.k) == (None,) * 5

    def test_to_dict(self, project_dir, runtime_home, make_environment):
        environment = make_environment(project_dir, {"DNX_HOME": str(runtime_home)})

        data = resolve_dnx_paths(environment).to_dict()

        assert data["available"] is False
        assert data["runtime_path"] is None
        assert data["tools"] == {"dnx": None, "dnu": None, "klr": None, "kpm": None, "k": None}
        assert data["error"]["source_file"] == str(project_dir / "global.json")
        assert data["error"]["source_line"] == 1
        assert len(data["error"]["searched_paths"]) == 3
