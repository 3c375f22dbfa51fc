"""Tests for the `bx config` commands."""

import json

import yaml
from typer.testing import CliRunner

from bx_cli import __version__
from bx_cli.cli import app

runner = CliRunner()


class TestConfigPath:
    def test_default(self, workdir):
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert "./bonnie.toml" in result.output
        assert "default" in result.output

    def test_env_override(self, workdir, clean_env):
        clean_env.setenv("BX_CONF", "/a.toml")
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert "/a.toml" in result.output
        assert "BX_CONF" in result.output


class TestConfigShow:
    def test_json(self, project):
        result = runner.invoke(app, ["config", "show", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["version"] == __version__
        assert data["env_files"] == [".env"]

    def test_yaml(self, project):
        result = runner.invoke(app, ["config", "show", "--yaml"])
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout)["version"] == __version__

    def test_plain(self, project):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "basic" in result.output

    def test_missing_config(self, workdir):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 1
        assert "bonnie.toml" in result.output


class TestConfigCache:
    def test_cache_then_check(self, project):
        result = runner.invoke(app, ["config", "cache"])
        assert result.exit_code == 0
        assert (project / ".bx.cache.json").is_file()

        result = runner.invoke(app, ["config", "check"])
        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_check_stale(self, project):
        (project / ".bx.cache.json").write_text(
            json.dumps({"version": "0.0.1", "scripts": {}})
        )
        result = runner.invoke(app, ["config", "check"])
        assert result.exit_code == 1
        assert "STALE" in result.output

    def test_check_missing(self, workdir):
        result = runner.invoke(app, ["config", "check"])
        assert result.exit_code == 1

    def test_custom_cache_path(self, project):
        result = runner.invoke(app, ["config", "cache", "--cache-path", "custom.json"])
        assert result.exit_code == 0
        assert (project / "custom.json").is_file()

    def test_clear_cache(self, project):
        runner.invoke(app, ["config", "cache"])
        result = runner.invoke(app, ["config", "clear-cache"])
        assert result.exit_code == 0
        assert not (project / ".bx.cache.json").exists()

        result = runner.invoke(app, ["config", "clear-cache"])
        assert result.exit_code == 0
        assert "No cache" in result.output


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
