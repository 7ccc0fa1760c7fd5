"""Unit tests for the command line front end."""

import json
import os

import pytest

from dnxpaths import cli
from dnxpaths.runtime import resolve_dnx_paths

RUNTIME_ENV_VARS = ("DNX_HOME", "KRE_HOME", "HOME", "USERPROFILE")


@pytest.fixture
def clean_env(monkeypatch, runtime_home):
    """Point DNX_HOME at an empty runtime home and clear the other homes."""
    for name in RUNTIME_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("DNXPATHS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("DNX_HOME", str(runtime_home))
    return runtime_home


def _install_default_alias(runtime_home):
    runtime = runtime_home / "runtimes" / "dnx-custom"
    (runtime / "bin").mkdir(parents=True)
    (runtime / "bin" / "dnx").touch()
    (runtime_home / "alias").mkdir()
    (runtime_home / "alias" / "default.alias").write_text("dnx-custom")
    return runtime


class TestCli:
    """Test cli.main()."""

    def test_found(self, temp_dir, clean_env, capsys):
        runtime = _install_default_alias(clean_env)

        exit_code = cli.main([str(temp_dir)])

        output = json.loads(capsys.readouterr().out)
        assert exit_code == cli.EXIT_OK
        assert output["available"] is True
        assert output["runtime_path"] == str(runtime)
        assert output["tools"]["dnx"] == os.path.join(str(runtime), "bin", "dnx")

    def test_not_found_prints_diagnostic(self, project_dir, clean_env, capsys):
        exit_code = cli.main([str(project_dir / "src")])

        captured = capsys.readouterr()
        output = json.loads(captured.out)
        assert exit_code == cli.EXIT_NOT_FOUND
        assert output["available"] is False
        assert len(output["error"]["searched_paths"]) == 3
        assert f"{project_dir / 'global.json'}(1,19): error:" in captured.err

    def test_not_found_without_global_json_has_no_diagnostic(self, temp_dir, clean_env, capsys):
        exit_code = cli.main([str(temp_dir)])

        assert exit_code == cli.EXIT_NOT_FOUND
        assert ": error:" not in capsys.readouterr().err

    def test_alias_option(self, temp_dir, clean_env, capsys):
        cli.main([str(temp_dir), "--alias", "beta4"])

        output = json.loads(capsys.readouterr().out)
        assert "'beta4'" in output["error"]["message"]

    def test_alias_from_options_file(self, temp_dir, clean_env, capsys):
        (temp_dir / ".dnxpaths.toml").write_text('[aspnet5]\nalias = "rc1"\n')

        cli.main([str(temp_dir)])

        output = json.loads(capsys.readouterr().out)
        assert "'rc1'" in output["error"]["message"]

    def test_malformed_global_json(self, project_dir, clean_env, capsys):
        (project_dir / "global.json").write_text("{not json")

        exit_code = cli.main([str(project_dir)])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        assert "Invalid global.json" in capsys.readouterr().err

    def test_log_level_info(self, temp_dir, clean_env, capsys):
        _install_default_alias(clean_env)

        cli.main([str(temp_dir), "--log-level", "info"])

        assert "[INFO] Using runtime" in capsys.readouterr().err


class TestFormatDiagnostic:
    """Test diagnostic rendering."""

    def test_only_first_message_line(self, project_dir, runtime_home, make_environment):
        environment = make_environment(project_dir, {"DNX_HOME": str(runtime_home)})
        diagnostic = cli.format_diagnostic(resolve_dnx_paths(environment))

        assert diagnostic.startswith(str(project_dir / "global.json"))
        assert "\n" not in diagnostic
