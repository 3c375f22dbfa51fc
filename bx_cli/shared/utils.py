"""
utils.py — General Utility Helpers for bx CLI
---------------------------------------------

Small, reusable helpers that do not belong to a specific subsystem
(resolution, parsing, caching).

Guidelines:
- No bx-specific business logic should live here.
- Keep these functions pure and minimal.
- Errors from the OS are left to propagate; callers wrap them in the
  bx error hierarchy with the path that failed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


# -------------------------------------------------------------
# Text file helpers
# -------------------------------------------------------------


def read_text(path: PathLike) -> str:
    """
    Read a whole file as UTF-8 text.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: PathLike, text: str) -> None:
    """
    Write text to a file with UTF-8 encoding, replacing any existing content.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


# -------------------------------------------------------------
# Rendering helpers
# -------------------------------------------------------------


def dump_yaml(data: Any) -> str:
    """
    Render plain Python data as block-style YAML, keeping key order.
    """
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def dump_json(data: Any) -> str:
    """
    Render plain Python data as pretty-printed JSON.
    """
    return json.dumps(data, indent=2, ensure_ascii=False)


__all__ = [
    "PathLike",
    "read_text",
    "write_text",
    "dump_yaml",
    "dump_json",
]
