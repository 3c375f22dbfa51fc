"""
parser.py — Turn raw bx.toml text into a FinalConfig
----------------------------------------------------

Responsibilities:
    • Parse TOML
    • Check the config's declared `version` against the running bx
    • Validate the known top-level keys
    • Return a FinalConfig stamped with the running version

Version policy (MAJOR.MINOR.PATCH, pre-release suffixes ignored):
    - different major (or different minor while major is 0) -> error
    - config newer than bx                                   -> error
    - config older than bx                                   -> warning
Warnings are appended to the caller's log list so the CLI can print them
after the command output.
"""

from __future__ import annotations

import datetime
import logging
import math
import re
import tomllib
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bx_cli.settings.errors import ConfigParseFailed
from bx_cli.settings.models import DefaultShell, FinalConfig

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^\s*v?(\d+)\.(\d+)\.(\d+)(?:[-+].*)?\s*$")


# -------------------------------------------------------------
# Raw (as written) config
# -------------------------------------------------------------


class RawConfig(BaseModel):
    """
    bx.toml as the user wrote it.

    Unknown top-level keys are ignored so older bx versions can read
    configs with newer optional sections.
    """

    version: str
    env_files: List[str] = Field(default_factory=list)
    default_shell: Optional[DefaultShell] = None
    # Legacy name used by bonnie before v0.3.
    default_env: Optional[DefaultShell] = None
    scripts: Dict[str, Any]

    model_config = ConfigDict(extra="ignore")


# -------------------------------------------------------------
# Version helpers
# -------------------------------------------------------------


def parse_version(version: str) -> Tuple[int, int, int]:
    """Parse "1.2.3" (or "v1.2.3-beta") into (1, 2, 3)."""
    m = _VERSION_RE.match(version)
    if not m:
        raise ValueError(f"'{version}' is not a MAJOR.MINOR.PATCH version")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def check_version(declared: str, running: str, log: List[str]) -> None:
    """
    Compare the config's declared version to the running bx version.

    Raises ConfigParseFailed on incompatibility; appends a warning to `log`
    if the config is older but still compatible.
    """
    try:
        cfg_v = parse_version(declared)
    except ValueError as e:
        raise ConfigParseFailed(f"invalid version: {e}.") from e
    try:
        run_v = parse_version(running)
    except ValueError as e:
        raise ConfigParseFailed(f"bx itself has an invalid version: {e}.") from e

    breaking = cfg_v[0] != run_v[0] or (run_v[0] == 0 and cfg_v[1] != run_v[1])

    if cfg_v > run_v:
        raise ConfigParseFailed(
            f"this config was written for bx v{declared}, but you are running "
            f"v{running}. Please upgrade bx."
        )
    if breaking:
        raise ConfigParseFailed(
            f"this config was written for bx v{declared}, which is not compatible "
            f"with v{running}. Please migrate it and update the `version` key."
        )
    if cfg_v < run_v:
        msg = (
            f"Your config is written for bx v{declared}, the current version is "
            f"v{running}. Consider updating the `version` key."
        )
        logger.warning(msg)
        log.append(msg)


# -------------------------------------------------------------
# TOML -> JSON-safe data
# -------------------------------------------------------------


def _json_safe(value: Any, where: str, path: Optional[str]) -> Any:
    """
    Return `value` with TOML dates and times as ISO strings.

    inf and nan have no JSON form, so they are rejected rather than cached
    as something else.
    """
    if isinstance(value, dict):
        return {
            k: _json_safe(v, f"{where}.{k}" if where else k, path)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_json_safe(v, f"{where}[{i}]", path) for i, v in enumerate(value)]
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigParseFailed(f"{where}: inf and nan are not supported.", path)
    return value


# -------------------------------------------------------------
# Public API
# -------------------------------------------------------------


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_config(
    raw: str,
    version: str,
    log: Optional[List[str]] = None,
    path: Optional[str] = None,
) -> FinalConfig:
    """
    Parse bx.toml text into a FinalConfig for the running `version`.

    `log` collects non-fatal warnings; `path` is only used in messages.
    """
    if log is None:
        log = []

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseFailed(f"not valid TOML ({e}).", path) from e
    data = _json_safe(data, "", path)

    declared = data.get("version")
    if not isinstance(declared, str):
        raise ConfigParseFailed(
            "missing a `version` key (e.g. version = \"" + version + "\").", path
        )
    check_version(declared, version, log)

    try:
        cfg = RawConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseFailed(_format_validation_error(e), path) from e

    shell = cfg.default_shell or cfg.default_env or DefaultShell()
    if cfg.default_shell is None and cfg.default_env is not None:
        log.append("`default_env` is deprecated, please rename it to `default_shell`.")

    return FinalConfig(
        version=version,
        env_files=list(cfg.env_files),
        default_shell=shell,
        scripts=cfg.scripts,
    )


__all__ = [
    "RawConfig",
    "parse_version",
    "check_version",
    "parse_config",
]
