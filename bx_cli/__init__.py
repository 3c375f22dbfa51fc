"""
bx CLI Package
--------------

This package provides the configuration layer of `bx` (formerly `bonnie`),
the command runner driven by a `bx.toml` file in the project root.

All functional logic is implemented in:
    - bx_cli/commands/
    - bx_cli/settings/
    - bx_cli/shared/

The CLI entrypoint is defined in cli.py.
"""

__version__ = "0.4.0"

__all__ = [
    "__version__",
    "commands",
    "settings",
    "shared",
]
