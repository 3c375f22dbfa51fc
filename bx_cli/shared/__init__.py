"""
Shared namespace for bx CLI.
Only re-export stable shared utilities.
"""

from .env import EnvLookup, EnvStatus, lookup_env
from .paths import (
    BX_CONF_VAR,
    BONNIE_CONF_VAR,
    DEFAULT_BX_CFG_PATH,
    DEFAULT_BONNIE_CFG_PATH,
    BX_CACHE_VAR,
    BONNIE_CACHE_VAR,
    DEFAULT_CACHE_PATH,
)
from .utils import read_text, write_text, dump_json, dump_yaml

__all__ = [
    # env
    "EnvLookup",
    "EnvStatus",
    "lookup_env",
    # paths
    "BX_CONF_VAR",
    "BONNIE_CONF_VAR",
    "DEFAULT_BX_CFG_PATH",
    "DEFAULT_BONNIE_CFG_PATH",
    "BX_CACHE_VAR",
    "BONNIE_CACHE_VAR",
    "DEFAULT_CACHE_PATH",
    # utils
    "read_text",
    "write_text",
    "dump_json",
    "dump_yaml",
]
