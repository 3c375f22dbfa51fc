"""Tests for environment lookup and env-file loading."""

import logging
import os
import sys

import pytest

from bx_cli.settings.env_files import load_env_files
from bx_cli.settings.errors import EnvFileLoadFailed
from bx_cli.shared.env import EnvStatus, lookup_env


class TestLookupEnv:
    def test_found(self):
        found = lookup_env("X", {"X": "value"})
        assert found.status is EnvStatus.FOUND
        assert found.value == "value"

    def test_empty_is_found(self):
        assert lookup_env("X", {"X": ""}).found

    def test_absent(self):
        found = lookup_env("X", {})
        assert found.status is EnvStatus.ABSENT
        assert found.value is None
        assert not found.invalid

    def test_invalid(self):
        found = lookup_env("X", {"X": "ab\udcffcd"})
        assert found.status is EnvStatus.INVALID
        assert found.value is None
        assert "position 2" in found.reason

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX only")
    def test_reads_process_environment(self, clean_env):
        clean_env.setenv("BX_CONF", "/from/env.toml")
        assert lookup_env("BX_CONF").value == "/from/env.toml"


class TestLoadEnvFiles:
    def test_applies_variables(self, workdir, env_file):
        applied = load_env_files([".env"])
        assert applied == {"SHORTGREETING": "Hello", "LONGGREETING": "Hello there"}
        assert os.environ["SHORTGREETING"] == "Hello"
        assert os.environ["LONGGREETING"] == "Hello there"

    def test_later_files_override(self, workdir, env_file):
        (workdir / ".env.local").write_text("SHORTGREETING=Hi\n")
        load_env_files([".env", ".env.local"])
        assert os.environ["SHORTGREETING"] == "Hi"

    def test_overwrites_existing_value(self, workdir, env_file, clean_env):
        clean_env.setenv("SHORTGREETING", "old")
        load_env_files([str(env_file)])
        assert os.environ["SHORTGREETING"] == "Hello"

    def test_key_without_value_skipped(self, workdir):
        (workdir / ".env").write_text("SHORTGREETING\nLONGGREETING=yes\n")
        applied = load_env_files([".env"])
        assert applied == {"LONGGREETING": "yes"}
        assert "SHORTGREETING" not in os.environ

    def test_log_counts_applied_keys_only(self, workdir, caplog):
        (workdir / ".env").write_text("SHORTGREETING\nLONGGREETING=yes\n")
        with caplog.at_level(logging.INFO, logger="bx_cli.settings.env_files"):
            load_env_files([".env"])
        assert "loaded 1 variable(s) from .env" in caplog.text

    def test_missing_file(self, workdir, env_file):
        with pytest.raises(EnvFileLoadFailed) as exc:
            load_env_files([".env", "missing.env"])
        assert exc.value.path == "missing.env"
        # earlier files stay applied
        assert os.environ["SHORTGREETING"] == "Hello"

    def test_no_files(self):
        assert load_env_files([]) == {}
