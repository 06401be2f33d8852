"""Command line entry point: rewrite a URL's query string."""
from typing import List, Optional, Tuple

import typer
from pydantic import ValidationError

from config_loader import ConfigLoader
from errors import URLManagerError, format_error
from logging_setup import get_logger, setup_logging
from parameter import URLParameter
from settings import get_settings
from urlmanager import URLManager
from urlnorm import split_pair

app = typer.Typer(add_completion=False)


def _pair(option: str, raw: str) -> Tuple[str, str]:
    key, value, has_separator = split_pair(raw)
    if not has_separator or not key:
        raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint=option)
    return key, value


def _load_config(natural_order: bool, strict: bool, options: List[str]):
    overrides = dict(_pair("--option", raw) for raw in options)
    if natural_order:
        overrides["parsing.order"] = "natural"
    if strict:
        overrides["parsing.malformed_pairs"] = "strict"

    loader = ConfigLoader(get_settings().config_path)
    loader.set_overrides(overrides)
    try:
        return loader.load()
    except (KeyError, ValidationError) as e:
        raise typer.BadParameter(str(e), param_hint="--option")


def _switch(manager: URLManager, keys: List[str], action: str) -> None:
    for key in keys:
        matches = manager.get_params(key)
        if not matches:
            typer.secho(f"No parameter named {key!r}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        for parameter in matches:
            getattr(parameter, action)()


@app.command()
def main(
    url: str = typer.Argument(..., help="URL whose query string is rewritten."),
    add: Optional[List[str]] = typer.Option(
        None, "--add", "-a", help="Append key=value, even if the key exists."
    ),
    set_: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="Update key=value, or append it if missing."
    ),
    disable: Optional[List[str]] = typer.Option(None, "--disable", "-d", help="Disable every parameter with this key."),
    enable: Optional[List[str]] = typer.Option(None, "--enable", "-e", help="Enable every parameter with this key."),
    toggle: Optional[List[str]] = typer.Option(None, "--toggle", "-t", help="Toggle every parameter with this key."),
    natural_order: bool = typer.Option(
        False, "--natural-order", help="Keep query pairs in left-to-right order."
    ),
    strict: bool = typer.Option(False, "--strict", help="Reject query pairs without '='."),
    option: Optional[List[str]] = typer.Option(
        None, "--option", "-o", help="Config override, e.g. mutation.atomic_add=true."
    ),
    list_params: bool = typer.Option(
        False, "--list", "-l", help="Print parameters with their state instead of the URL."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override URLMANAGER_LOG_LEVEL."),
) -> None:
    """Parse URL, apply the requested changes and print the result."""
    setup_logging(log_level or get_settings().log_level)
    logger = get_logger("main")

    config = _load_config(natural_order, strict, option or [])
    additions = [_pair("--add", raw) for raw in add or []]
    updates = [_pair("--set", raw) for raw in set_ or []]

    try:
        manager = URLManager(url, config=config)
        if additions:
            manager.add_param(*(URLParameter(k, v) for k, v in additions))
        for key, value in updates:
            manager.upsert_param(key, value)
    except URLManagerError as e:
        typer.echo(format_error(e), err=True, nl=False)
        raise typer.Exit(code=1)

    _switch(manager, disable or [], "disable")
    _switch(manager, enable or [], "enable")
    _switch(manager, toggle or [], "toggle")

    logger.info("cli_done", params=len(manager), enabled=sum(p.enabled for p in manager))

    if list_params:
        for parameter in manager:
            mark = "x" if parameter.enabled else " "
            typer.echo(f"[{mark}] {parameter.key}={parameter.value}")
        return

    typer.echo(manager.generate_url())


def cli():
    """Entry point for the urlmanager command."""
    app()


if __name__ == "__main__":
    cli()
