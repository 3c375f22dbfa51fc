"""
config_loader.py — Unified configuration access for bx
------------------------------------------------------

Responsibilities:
    • Pick the cache path (flag > BX_CACHE > BONNIE_CACHE > default)
    • Load the cached FinalConfig when it is valid for this bx
    • Otherwise locate, read and parse bx.toml, then apply its env files

Design:
    - Any cache problem is a soft failure: logged, then a fresh parse
    - Errors from the fresh path are fatal and propagate to the caller
    - Nothing here writes the cache; that is `bx config cache`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from bx_cli import __version__
from bx_cli.settings.cache import load_from_cache
from bx_cli.settings.env_files import load_env_files
from bx_cli.settings.errors import CacheError, EnvironmentValueInvalid
from bx_cli.settings.models import FinalConfig
from bx_cli.settings.parser import parse_config
from bx_cli.settings.resolver import get_cfg_path, read_cfg
from bx_cli.shared.env import lookup_env
from bx_cli.shared.paths import BONNIE_CACHE_VAR, BX_CACHE_VAR, DEFAULT_CACHE_PATH

logger = logging.getLogger(__name__)


# -------------------------------------------------------------
# Cache location
# -------------------------------------------------------------


def resolve_cache_path(explicit: Optional[str] = None) -> str:
    """
    Determine where the cache lives.

    Order of precedence:
        1. explicit argument (--cache-path)
        2. BX_CACHE
        3. BONNIE_CACHE
        4. ./.bx.cache.json
    """
    if explicit is not None:
        return explicit

    for name in (BX_CACHE_VAR, BONNIE_CACHE_VAR):
        found = lookup_env(name)
        if found.invalid:
            raise EnvironmentValueInvalid(name, found.reason)
        if found.found:
            return found.value

    return DEFAULT_CACHE_PATH


# -------------------------------------------------------------
# Fresh resolve
# -------------------------------------------------------------


def load_fresh_config(
    *,
    version: str = __version__,
    log: Optional[List[str]] = None,
    apply_env: bool = True,
) -> FinalConfig:
    """
    Locate, read and parse bx.toml, bypassing any cache.
    """
    if log is None:
        log = []

    path = get_cfg_path()
    cfg = parse_config(read_cfg(path), version, log, path=path)

    if apply_env:
        load_env_files(cfg.env_files)

    return cfg


# -------------------------------------------------------------
# Public API
# -------------------------------------------------------------


def load_config(
    *,
    use_cache: bool = True,
    cache_path: Optional[str] = None,
    version: str = __version__,
    log: Optional[List[str]] = None,
) -> FinalConfig:
    """
    Return the effective FinalConfig, from the cache when possible.

    A cache that is missing, corrupt or from another bx version is skipped
    with a warning and the config is parsed fresh.
    """
    if log is None:
        log = []

    if use_cache:
        path = resolve_cache_path(cache_path)
        if Path(path).exists():
            try:
                return load_from_cache(path, version=version)
            except CacheError as e:
                logger.warning("%s Re-reading the config file.", e)
                log.append(str(e))

    return load_fresh_config(version=version, log=log)


__all__ = [
    "resolve_cache_path",
    "load_fresh_config",
    "load_config",
]
