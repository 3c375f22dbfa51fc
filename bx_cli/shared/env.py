"""
env.py — Environment variable lookup with a three-way outcome
-------------------------------------------------------------

`os.environ` hides the difference between a variable that is not set and
one that is set to bytes that are not valid text. On POSIX, undecodable
bytes come back as lone surrogates (PEP 383), so a value that cannot be
encoded as UTF-8 is treated as invalid.

Callers get one of:
    FOUND   -> value holds the text
    ABSENT  -> the variable is not set
    INVALID -> reason explains why the value was rejected
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional


class EnvStatus(enum.Enum):
    FOUND = "found"
    ABSENT = "absent"
    INVALID = "invalid"


@dataclass(frozen=True)
class EnvLookup:
    name: str
    status: EnvStatus
    value: Optional[str] = None
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is EnvStatus.FOUND

    @property
    def invalid(self) -> bool:
        return self.status is EnvStatus.INVALID


def lookup_env(name: str, environ: Optional[Mapping[str, str]] = None) -> EnvLookup:
    """
    Look up `name` in the process environment (or `environ`, for tests).

    An empty string is a set value, not an absent one.
    """
    env = os.environ if environ is None else environ
    raw = env.get(name)
    if raw is None:
        return EnvLookup(name=name, status=EnvStatus.ABSENT)

    try:
        raw.encode("utf-8")
    except UnicodeEncodeError as e:
        return EnvLookup(
            name=name,
            status=EnvStatus.INVALID,
            reason=f"byte at position {e.start} is not valid Unicode",
        )

    return EnvLookup(name=name, status=EnvStatus.FOUND, value=raw)


__all__ = [
    "EnvStatus",
    "EnvLookup",
    "lookup_env",
]
