"""
resolver.py — Locate and read the bx configuration file
-------------------------------------------------------

Order of precedence (first match wins):
    1. BX_CONF environment variable
    2. BONNIE_CONF environment variable (legacy)
    3. ./bx.toml, if it exists
    4. ./bonnie.toml, without checking it exists

The decision itself lives in resolve_cfg_path(), which does no I/O.
get_cfg_path() gathers its inputs from the environment and filesystem.
get_cfg() reads the chosen file; the read is what decides success, the
existence check above only picks a candidate.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from bx_cli.settings.errors import ConfigReadFailed, EnvironmentValueInvalid
from bx_cli.shared.env import EnvLookup, lookup_env
from bx_cli.shared.paths import (
    BONNIE_CONF_VAR,
    BX_CONF_VAR,
    DEFAULT_BONNIE_CFG_PATH,
    DEFAULT_BX_CFG_PATH,
)
from bx_cli.shared.utils import read_text

logger = logging.getLogger(__name__)


# -------------------------------------------------------------
# Pure decision
# -------------------------------------------------------------


def resolve_cfg_path(
    override_a: Optional[str],
    override_b: Optional[str],
    default_a_exists: bool,
) -> str:
    """
    Pick the config path from the two overrides and the presence of ./bx.toml.

    None means "not set". An empty string is a set value and is returned
    as-is.
    """
    if override_a is not None:
        return override_a
    if override_b is not None:
        return override_b
    if default_a_exists:
        return DEFAULT_BX_CFG_PATH
    return DEFAULT_BONNIE_CFG_PATH


# -------------------------------------------------------------
# Environment + filesystem
# -------------------------------------------------------------


def _override(name: str) -> Optional[str]:
    found: EnvLookup = lookup_env(name)
    if found.invalid:
        raise EnvironmentValueInvalid(name, found.reason)
    return found.value


def get_cfg_source() -> Tuple[str, str]:
    """
    Resolve the config path and say where it came from.

    Returns (path, source) where source is the variable name or "default".
    Raises EnvironmentValueInvalid if a consulted variable is not valid
    Unicode. BONNIE_CONF is not looked at when BX_CONF is set.
    """
    override_a = _override(BX_CONF_VAR)
    if override_a is not None:
        return resolve_cfg_path(override_a, None, False), BX_CONF_VAR

    override_b = _override(BONNIE_CONF_VAR)
    if override_b is not None:
        return resolve_cfg_path(None, override_b, False), BONNIE_CONF_VAR

    exists = Path(DEFAULT_BX_CFG_PATH).exists()
    return resolve_cfg_path(None, None, exists), "default"


def get_cfg_path() -> str:
    """Resolve the config path from BX_CONF, BONNIE_CONF and the working directory."""
    path, source = get_cfg_source()
    logger.debug("config path %s (from %s)", path, source)
    return path


def read_cfg(path: str) -> str:
    """
    Read the raw text of the config file at `path`.

    Raises ConfigReadFailed if the file can't be read, whatever the reason
    (missing, permissions, a directory, not UTF-8).
    """
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadFailed(path) from e


def get_cfg() -> str:
    """Resolve the config path and return the file's text."""
    return read_cfg(get_cfg_path())


__all__ = [
    "resolve_cfg_path",
    "get_cfg_source",
    "get_cfg_path",
    "read_cfg",
    "get_cfg",
]
