"""
cli.py — bx Command-Line Interface (Root Entrypoint)
----------------------------------------------------

This file defines the `bx` command and registers all subcommands.

Subcommands:
    - bx config ...

The real logic behind each command lives in the settings modules.
Commands are intentionally thin orchestrators.
"""

from __future__ import annotations

import logging

import typer

from bx_cli import __version__
from bx_cli.commands.config import app as config_app

# Root CLI application
app = typer.Typer(
    help="bx — command runner configured by bx.toml",
    add_completion=False,
)


# Register subcommands
app.add_typer(config_app, name="config")


def _version_callback(value: bool):
    if value:
        typer.echo(f"bx v{__version__}")
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolution details."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the bx version and exit.",
    ),
):
    """
    Configure logging before any subcommand runs.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def main():
    """
    Entrypoint used by the `bx` script in pyproject.toml.
    """
    app()


if __name__ == "__main__":
    main()
