"""Test fixtures."""

from pathlib import Path

import pytest

from bx_cli import __version__
from bx_cli.settings.models import DefaultShell, FinalConfig
from bx_cli.settings.parser import parse_config

# Variables that bx reads or that the sample env file sets.
TOUCHED_VARS = (
    "BX_CONF",
    "BONNIE_CONF",
    "BX_CACHE",
    "BONNIE_CACHE",
    "SHORTGREETING",
    "LONGGREETING",
)

CFG_BODY = '''
env_files = [".env"]
default_shell.generic = ["sh", "-c", "{COMMAND}"]
default_shell.targets.linux = ["bash", "-c", "{COMMAND}"]
[scripts]
basic.subcommands.test.cmd.generic = "exit 5"
basic.subcommands.test.cmd.targets.linux.exec = [
    "echo %SHORTGREETING %%",
    "echo %name && exit 1"
]
basic.subcommands.test.env_vars = ["SHORTGREETING"]
basic.subcommands.nested.subcommands.test = "exit 2"
basic.subcommands.nested.subcommands.other = "exit 3"
basic.args = ["name"]
basic.order = """
test {
    Any => nested
}
"""
'''


def _cfg_text(version: str = __version__) -> str:
    return f'version = "{version}"\n' + CFG_BODY


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every variable bx looks at; restored after the test."""
    for name in TOUCHED_VARS:
        # setenv first so monkeypatch remembers the original state,
        # even for variables the code under test sets directly.
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def workdir(tmp_path, clean_env) -> Path:
    """Run the test from an empty directory with a clean environment."""
    clean_env.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def env_file(workdir) -> Path:
    path = workdir / ".env"
    path.write_text("SHORTGREETING=Hello\nLONGGREETING='Hello there'\n")
    return path


@pytest.fixture
def project(workdir, env_file) -> Path:
    """A working directory with a bx.toml for the running version and its .env."""
    (workdir / "bx.toml").write_text(_cfg_text())
    return workdir


@pytest.fixture
def final_config() -> FinalConfig:
    return parse_config(_cfg_text(), __version__)


def _make_config(version: str, env_files=None) -> FinalConfig:
    return FinalConfig(
        version=version,
        env_files=list(env_files or []),
        default_shell=DefaultShell(),
        scripts={"build": "echo building"},
    )


@pytest.fixture
def cfg_text():
    """Factory: bx.toml text declaring the given version."""
    return _cfg_text


@pytest.fixture
def make_config():
    """Factory: a small FinalConfig stamped with the given version."""
    return _make_config
