#!/usr/bin/env python3
"""Command-line interface for resolving documentation icons."""

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
import typer

from .config import IconSettings
from .errors import IconResolutionError
from .menu import dump_menu, load_menu, resolve_menu_icons
from .resolver import IconResolver
from .sources import IconSetLoader
from .utils import LOGGER_NAME, get_logger

LOGGER = get_logger(__name__)

app = typer.Typer(help="Resolve prefix:name icon identifiers to inline SVG.", no_args_is_help=True)


def _build_resolver(root: Optional[Path]) -> IconResolver:
    settings = IconSettings.from_env()
    if root is not None:
        settings = IconSettings(icons_root=root, log_level=settings.log_level)
    return IconResolver(IconSetLoader.from_settings(settings))


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.", show_default=False),
) -> None:
    """Resolve prefix:name icon identifiers to inline SVG."""

    try:
        settings = IconSettings.from_env()
    except ValidationError as exc:
        typer.echo("  Invalid settings:", err=True)
        typer.echo(exc, err=True)
        raise typer.Exit(code=1)

    level = "DEBUG" if verbose else settings.log_level
    get_logger(LOGGER_NAME).setLevel(level)


@app.command()
def resolve(
    identifier: str = typer.Argument(..., help='Icon identifier such as "lucide:book-open".'),
    root: Optional[Path] = typer.Option(None, "--root", help="Directory holding the icon set packages."),
) -> None:
    """Print the SVG markup for one icon."""

    try:
        svg = _build_resolver(root).resolve(identifier)
    except IconResolutionError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(svg)


@app.command()
def prefixes() -> None:
    """List the supported icon set prefixes."""

    for prefix in IconSetLoader.from_settings().prefixes:
        typer.echo(prefix)


@app.command()
def menu(
    path: Path = typer.Argument(..., help="JSON file with a list of mega menu items."),
    root: Optional[Path] = typer.Option(None, "--root", help="Directory holding the icon set packages."),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the resolved menu here instead of stdout."),
) -> None:
    """Resolve every icon in a mega menu definition."""

    menu_path = path.expanduser().resolve()
    if not menu_path.exists():
        raise typer.BadParameter(f"Path not found: {menu_path}", param_name="path")

    try:
        items = resolve_menu_icons(load_menu(menu_path), _build_resolver(root))
    except ValidationError as exc:
        typer.echo("  Validation error:", err=True)
        typer.echo(exc, err=True)
        raise typer.Exit(code=1)
    except IconResolutionError as exc:
        typer.echo(f"  ERROR while resolving {menu_path.name}: {exc}", err=True)
        raise typer.Exit(code=1)
    except (OSError, ValueError) as exc:
        typer.echo(f"  ERROR while reading {menu_path.name}: {exc}", err=True)
        raise typer.Exit(code=1)

    payload = json.dumps(dump_menu(items), indent=2, ensure_ascii=False)
    if out is None:
        typer.echo(payload)
        return

    out_path = out.expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        f.write(payload)
        f.write("\n")
    LOGGER.info("Saved resolved menu to %s", out_path)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
