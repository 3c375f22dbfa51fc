"""Settings module for bx CLI."""

from .cache import cache, load_from_cache
from .config_loader import load_config, resolve_cache_path
from .models import FinalConfig
from .resolver import get_cfg, get_cfg_path, resolve_cfg_path

__all__ = [
    "FinalConfig",
    "cache",
    "load_from_cache",
    "load_config",
    "resolve_cache_path",
    "get_cfg",
    "get_cfg_path",
    "resolve_cfg_path",
]
