"""
Well-known file names and environment variables for bx.

- Config discovery:
    1. BX_CONF        (path to the config file)
    2. BONNIE_CONF    (legacy name, still honoured)
    3. ./bx.toml      (if it exists)
    4. ./bonnie.toml  (legacy default, no existence check)

- Cache location:
    1. explicit --cache-path
    2. BX_CACHE
    3. BONNIE_CACHE
    4. ./.bx.cache.json

All default paths are relative to the current working directory, which is
where bx is invoked from.
"""

from __future__ import annotations

# -------------------------------------------------------------------
# Config file discovery
# -------------------------------------------------------------------
BX_CONF_VAR = "BX_CONF"
BONNIE_CONF_VAR = "BONNIE_CONF"

DEFAULT_BX_CFG_PATH = "./bx.toml"
DEFAULT_BONNIE_CFG_PATH = "./bonnie.toml"


# -------------------------------------------------------------------
# Cache file
# -------------------------------------------------------------------
BX_CACHE_VAR = "BX_CACHE"
BONNIE_CACHE_VAR = "BONNIE_CACHE"

DEFAULT_CACHE_PATH = "./.bx.cache.json"


__all__ = [
    "BX_CONF_VAR",
    "BONNIE_CONF_VAR",
    "DEFAULT_BX_CFG_PATH",
    "DEFAULT_BONNIE_CFG_PATH",
    "BX_CACHE_VAR",
    "BONNIE_CACHE_VAR",
    "DEFAULT_CACHE_PATH",
]
