"""
cache.py — Persist and revalidate a resolved FinalConfig
--------------------------------------------------------

The cache is the FinalConfig dumped as indented JSON. It is trusted only
if it was written by exactly the running version of bx: "1.2.0" and
"1.2.1" do not share caches. There is no other expiry.

Loading a cache is not side-effect free: the env files listed in the
config are applied to the process environment before the config is
returned, exactly as a fresh parse would. Pass apply_env=None to skip
that step.

Known gap: the cache is written in place, not through a temp file and
rename. An interrupted or concurrent write can leave a truncated file,
which the next load reports as CacheDeserializeFailed.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from pydantic import ValidationError

from bx_cli import __version__
from bx_cli.settings.env_files import load_env_files
from bx_cli.settings.errors import (
    CacheDeserializeFailed,
    CacheReadFailed,
    CacheVersionMismatch,
    CacheWriteFailed,
)
from bx_cli.settings.models import FinalConfig
from bx_cli.shared.paths import DEFAULT_CACHE_PATH
from bx_cli.shared.utils import read_text, write_text

logger = logging.getLogger(__name__)

ApplyEnv = Callable[[Iterable[str]], object]


def cache(config: FinalConfig, cache_path: Optional[str] = None) -> None:
    """
    Write `config` to `cache_path` (default ./.bx.cache.json), replacing any
    existing cache.
    """
    path = cache_path or DEFAULT_CACHE_PATH
    payload = config.model_dump_json(indent=2)
    try:
        write_text(path, payload)
    except OSError as e:
        raise CacheWriteFailed(path) from e
    logger.info("cache written to %s (bx v%s)", path, config.version)


def load_from_cache(
    cache_path: Optional[str] = None,
    *,
    version: str = __version__,
    apply_env: Optional[ApplyEnv] = load_env_files,
) -> FinalConfig:
    """
    Read a cached FinalConfig and check it belongs to bx `version`.

    Raises:
        CacheReadFailed:        the file is missing or unreadable
        CacheDeserializeFailed: the content is not a valid FinalConfig
        CacheVersionMismatch:   the cache was written by another version

    The environment is only touched once all checks have passed.
    """
    path = cache_path or DEFAULT_CACHE_PATH

    try:
        raw = read_text(path)
    except UnicodeDecodeError as e:
        raise CacheDeserializeFailed(path, "not UTF-8 text") from e
    except OSError as e:
        raise CacheReadFailed(path) from e

    try:
        config = FinalConfig.model_validate_json(raw)
    except ValidationError as e:
        raise CacheDeserializeFailed(path, f"{e.error_count()} validation error(s)") from e

    if config.version != version:
        raise CacheVersionMismatch(path, expected=version, found=config.version)

    if apply_env is not None:
        apply_env(config.env_files)

    logger.debug("loaded config from cache %s", path)
    return config


__all__ = [
    "cache",
    "load_from_cache",
]
