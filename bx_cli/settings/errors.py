"""
errors.py — Error hierarchy for bx configuration handling
---------------------------------------------------------

Every failure in locating, reading, parsing or caching the configuration
is raised as a subclass of BxConfigError. Messages are written for the
end user and name the offending path or variable.

Cache failures share the CacheError base so the caller can fall back to
a fresh resolve + parse on any of them.
"""

from __future__ import annotations

from typing import Optional


class BxConfigError(RuntimeError):
    """Base class for all bx configuration errors."""


# -------------------------------------------------------------
# Locating and reading the config file
# -------------------------------------------------------------


class EnvironmentValueInvalid(BxConfigError):
    def __init__(self, variable: str, reason: Optional[str] = None):
        self.variable = variable
        self.reason = reason
        msg = (
            f"The path given in the '{variable}' environment variable contained "
            "invalid characters. Please make sure it only contains valid Unicode."
        )
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ConfigReadFailed(BxConfigError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Error reading configuration file at '{path}', make sure the file is "
            "present in this directory and you have the permissions to read it."
        )


class ConfigParseFailed(BxConfigError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        where = f" in '{path}'" if path else ""
        super().__init__(f"Invalid configuration{where}: {message}")


class EnvFileLoadFailed(BxConfigError):
    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        msg = f"Couldn't load environment variable file '{path}'."
        if detail:
            msg += f" {detail}"
        super().__init__(msg)


# -------------------------------------------------------------
# Cache
# -------------------------------------------------------------


class CacheWriteFailed(BxConfigError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Error writing cache file at '{path}', make sure the directory exists "
            "and you have the permissions to write to it."
        )


class CacheError(BxConfigError):
    """A cache could not be used; the caller should re-parse the config."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class CacheReadFailed(CacheError):
    def __init__(self, path: str):
        super().__init__(
            path,
            f"Error reading cache file at '{path}', it may not exist yet "
            "(run `bx config cache` to create it).",
        )


class CacheDeserializeFailed(CacheError):
    def __init__(self, path: str, detail: Optional[str] = None):
        msg = f"Cache file at '{path}' is corrupted or was not written by bx."
        if detail:
            msg += f" ({detail})"
        super().__init__(path, msg)


class CacheVersionMismatch(CacheError):
    def __init__(self, path: str, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(
            path,
            f"Cache file at '{path}' was written by bx v{found}, but this is "
            f"v{expected}. Please re-create it with `bx config cache`.",
        )


__all__ = [
    "BxConfigError",
    "EnvironmentValueInvalid",
    "ConfigReadFailed",
    "ConfigParseFailed",
    "EnvFileLoadFailed",
    "CacheWriteFailed",
    "CacheError",
    "CacheReadFailed",
    "CacheDeserializeFailed",
    "CacheVersionMismatch",
]
