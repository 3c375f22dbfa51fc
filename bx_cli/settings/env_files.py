"""
env_files.py — Apply dotenv files to the process environment
------------------------------------------------------------

Files are applied in the order listed in bx.toml; a variable defined in
a later file overrides the same variable from an earlier one, and any
value already in the environment is overwritten.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable

from dotenv import dotenv_values

from bx_cli.settings.errors import EnvFileLoadFailed

logger = logging.getLogger(__name__)


def load_env_files(paths: Iterable[str]) -> Dict[str, str]:
    """
    Load each dotenv file and set its variables in os.environ.

    Returns the variables that were applied. Keys declared without a value
    are skipped. Stops at the first file that can't be read; earlier files
    stay applied.
    """
    applied: Dict[str, str] = {}

    for path in paths:
        if not Path(path).is_file():
            raise EnvFileLoadFailed(path, "Make sure the file exists and is readable.")
        try:
            values = dotenv_values(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileLoadFailed(path, str(e)) from e

        count = 0
        for key, value in values.items():
            if value is None:
                continue
            os.environ[key] = value
            applied[key] = value
            count += 1

        logger.info("loaded %d variable(s) from %s", count, path)

    return applied


__all__ = ["load_env_files"]
