"""
models.py — Pydantic models for the bx configuration
----------------------------------------------------

FinalConfig is the fully-resolved configuration: what the parser produces
and what the cache stores. It must survive a JSON round trip unchanged,
so every field is plain JSON data.

Scripts are kept as opaque tables; their structure belongs to the
command runner, not to the configuration layer.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


# -------------------------------------------------------------
# Sub-models
# -------------------------------------------------------------


class DefaultShell(BaseModel):
    generic: List[str] = Field(
        default_factory=lambda: ["sh", "-c", "{COMMAND}"],
        description="Shell used when no target-specific shell matches. "
        "'{COMMAND}' is replaced with the command to run.",
    )
    targets: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Per-OS shells, keyed by target name (linux, macos, windows...).",
    )

    model_config = ConfigDict(extra="forbid")


# -------------------------------------------------------------
# FinalConfig model
# -------------------------------------------------------------


class FinalConfig(BaseModel):
    """
    Fully-resolved bx configuration.

    `version` is the version of bx that produced this object, not the one
    declared in bx.toml. The cache uses it to detect stale records.
    """

    version: str = Field(
        description="Version of bx that resolved this configuration.",
    )
    env_files: List[str] = Field(
        default_factory=list,
        description="dotenv files applied to the environment before running.",
    )
    default_shell: DefaultShell = Field(
        default_factory=DefaultShell,
        description="Shell used to run commands.",
    )
    scripts: Dict[str, Any] = Field(
        default_factory=dict,
        description="Command definitions, keyed by script name.",
    )

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "DefaultShell",
    "FinalConfig",
]
