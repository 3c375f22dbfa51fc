"""
config.py — Typer commands for locating, inspecting and caching bx.toml
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from bx_cli import __version__
from bx_cli.settings.cache import cache, load_from_cache
from bx_cli.settings.config_loader import (
    load_config,
    load_fresh_config,
    resolve_cache_path,
)
from bx_cli.settings.errors import BxConfigError, CacheError
from bx_cli.settings.resolver import get_cfg_source
from bx_cli.shared.utils import dump_json, dump_yaml

app = typer.Typer(help="Config tools (path / show / cache / check / clear-cache)")

CACHE_PATH_HELP = "Cache file to use (default: $BX_CACHE, $BONNIE_CACHE or ./.bx.cache.json)."


# --- helpers -----------------------------------------------------------------


def _fail(e: BxConfigError) -> NoReturn:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _print_log(log: List[str]) -> None:
    for msg in log:
        typer.echo(f"Warning: {msg}", err=True)


# --- commands ----------------------------------------------------------------


@app.command("path")
def path():
    """
    Print the config file bx would read, and why.
    """
    try:
        cfg_path, source = get_cfg_source()
    except BxConfigError as e:
        _fail(e)

    exists = Path(cfg_path).is_file()
    typer.echo(f"Config path:    {cfg_path}")
    typer.echo(f"Chosen by:      {source}")
    typer.echo(f"File present:   {'yes' if exists else 'no'}")


@app.command("show")
def show(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    as_yaml: bool = typer.Option(False, "--yaml", help="Output as YAML."),
    no_cache: bool = typer.Option(
        False, "--no-cache", help="Ignore the cache and parse bx.toml."
    ),
    cache_path: Optional[str] = typer.Option(
        None, "--cache-path", help=CACHE_PATH_HELP
    ),
):
    """
    Print the effective (resolved) configuration as bx sees it.
    """
    if as_json and as_yaml:
        raise typer.BadParameter("Use only one of --json / --yaml.")

    log: List[str] = []
    try:
        cfg = load_config(use_cache=not no_cache, cache_path=cache_path, log=log)
    except BxConfigError as e:
        _fail(e)

    if as_json:
        typer.echo(dump_json(cfg.model_dump(mode="json")))
    elif as_yaml:
        typer.echo(dump_yaml(cfg.model_dump(mode="json")), nl=False)
    else:
        typer.echo(f"version:        {cfg.version}")
        typer.echo(f"env_files:      {', '.join(cfg.env_files) or '(none)'}")
        typer.echo(f"default shell:  {' '.join(cfg.default_shell.generic)}")
        for target, shell in sorted(cfg.default_shell.targets.items()):
            typer.echo(f"  [{target}]      {' '.join(shell)}")
        typer.echo(f"scripts:        {', '.join(sorted(cfg.scripts)) or '(none)'}")

    _print_log(log)


@app.command("cache")
def cache_cmd(
    cache_path: Optional[str] = typer.Option(
        None, "--cache-path", help=CACHE_PATH_HELP
    ),
):
    """
    Parse bx.toml and write the result to the cache.
    """
    log: List[str] = []
    try:
        target = resolve_cache_path(cache_path)
        cfg = load_fresh_config(log=log, apply_env=False)
        cache(cfg, target)
    except BxConfigError as e:
        _print_log(log)
        _fail(e)

    _print_log(log)
    typer.echo(f"Cache written:  {target}")


@app.command("check")
def check(
    cache_path: Optional[str] = typer.Option(
        None, "--cache-path", help=CACHE_PATH_HELP
    ),
):
    """
    Report whether the cache can be used by this version of bx.
    """
    try:
        target = resolve_cache_path(cache_path)
    except BxConfigError as e:
        _fail(e)

    typer.echo(f"Cache path:     {target}")
    typer.echo(f"bx version:     {__version__}")

    try:
        load_from_cache(target, apply_env=None)
    except CacheError as e:
        typer.echo("Cache result:   STALE")
        typer.echo(f"  - {e}")
        raise typer.Exit(code=1)

    typer.echo("Cache result:   VALID")


@app.command("clear-cache")
def clear_cache(
    cache_path: Optional[str] = typer.Option(
        None, "--cache-path", help=CACHE_PATH_HELP
    ),
):
    """
    Delete the cache file, if there is one.
    """
    try:
        target = Path(resolve_cache_path(cache_path))
    except BxConfigError as e:
        _fail(e)

    if not target.exists():
        typer.echo(f"No cache at {target}")
        return

    try:
        target.unlink()
    except OSError as e:
        typer.echo(f"Error: couldn't delete cache at '{target}': {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Removed cache:  {target}")
