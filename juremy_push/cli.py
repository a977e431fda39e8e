"""Command-line interface for the Juremy push client."""

import logging
from dataclasses import replace
from functools import wraps
from pathlib import Path
from typing import Optional

import click
import requests
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import config
from .errors import JuremyError
from .languages import SUPPORTED_LANGUAGES
from .messages import get_message
from .preferences import PreferenceStore
from .translation.lookup import JuremyLookup

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _handle_errors(func):
    """Print lookup errors and exit with status 1."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except JuremyError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise click.exceptions.Exit(1)
        except requests.exceptions.RequestException as e:
            console.print(f"[red]Request failed:[/red] {e}")
            raise click.exceptions.Exit(1)
    return wrapper


def _make_lookup(ctx: click.Context) -> JuremyLookup:
    return JuremyLookup(
        preferences=PreferenceStore(ctx.obj["preferences_path"]),
        base_url=ctx.obj["base_url"],
    )


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--base-url",
    default=None,
    help="Juremy server URL (defaults to JUREMY_BASE_URL)"
)
@click.option(
    "--preferences",
    "preferences_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the preferences file (defaults to JUREMY_PREFERENCES_PATH)"
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, base_url: Optional[str], preferences_path: Optional[str]):
    """Push source segments to the Juremy search interface."""
    effective_config = replace(config, base_url=base_url) if base_url else config
    errors = effective_config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    ctx.obj["preferences_path"] = preferences_path


@cli.command()
@click.option(
    "--token", "-k",
    prompt=get_message("MT_ENGINE_JUREMY_APP_TOKEN_LABEL").rstrip(":"),
    hide_input=True,
    help="App token shown in the Juremy interface"
)
@click.option(
    "--temporary",
    is_flag=True,
    help="Keep the token for this session only, do not save it"
)
@click.pass_context
@_handle_errors
def configure(ctx: click.Context, token: str, temporary: bool):
    """Store the app token and check the connection to Juremy."""
    with _make_lookup(ctx) as lookup:
        lookup.configure(token, temporary=temporary)
        if not lookup.enabled:
            lookup.enabled = True
    console.print("[green]Connected to Juremy.[/green]")
    if temporary:
        console.print("[yellow]Token kept for this session only.[/yellow]")


@cli.command()
@click.pass_context
@_handle_errors
def ping(ctx: click.Context):
    """Set up routing and ping the Juremy interface."""
    with _make_lookup(ctx) as lookup:
        lookup.setup_route_and_ping()
    console.print("[green]Ping delivered.[/green]")


@cli.command()
@click.option(
    "--source", "-s",
    "source_lang",
    required=True,
    help="Source language code (e.g., 'en')"
)
@click.option(
    "--target", "-t",
    "target_lang",
    required=True,
    help="Target language code (e.g., 'de')"
)
@click.option(
    "--file", "-f",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Push each non-blank line of this file in turn"
)
@click.argument("text", required=False)
@click.pass_context
@_handle_errors
def push(
    ctx: click.Context,
    source_lang: str,
    target_lang: str,
    input_path: Optional[str],
    text: Optional[str],
):
    """Push TEXT as a search to the Juremy interface."""
    if input_path:
        segments = [
            line.strip()
            for line in Path(input_path).read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
    elif text:
        segments = [text]
    else:
        raise click.UsageError("Provide TEXT or --file")

    with _make_lookup(ctx) as lookup:
        for segment in segments:
            lookup.translate(source_lang, target_lang, segment)
            preview = segment if len(segment) <= 60 else segment[:57] + "..."
            console.print(f"[blue]Pushed:[/blue] {preview}")

    console.print(f"[green]Done![/green] {len(segments)} search(es) pushed")


@cli.command()
def languages():
    """List the languages Juremy supports."""
    table = Table(title="Supported languages")
    table.add_column("Code", style="cyan")
    table.add_column("Juremy code", justify="right")

    for code, juremy_code in sorted(SUPPORTED_LANGUAGES.items()):
        table.add_row(code, juremy_code)

    console.print(table)


@cli.command()
@click.pass_context
@_handle_errors
def status(ctx: click.Context):
    """Show the current configuration."""
    store = PreferenceStore(ctx.obj["preferences_path"])
    token = store.get_credential(JuremyLookup.JUREMY_APP_TOKEN) or config.app_token
    enabled = bool(store.get_preference(JuremyLookup.ALLOW_JUREMY_TRANSLATE, False))

    panel_content = (
        f"[bold]Server:[/bold] {ctx.obj['base_url'] or config.base_url}\n"
        f"[bold]Preferences:[/bold] {store.path}\n"
        f"[bold]App token:[/bold] {_mask(token) if token else '[red]not set[/red]'}\n"
        f"[bold]Enabled:[/bold] {'[green]yes[/green]' if enabled else '[yellow]no[/yellow]'}"
    )

    console.print(Panel(panel_content, title="Juremy Search Push"))


@cli.command()
@click.pass_context
@_handle_errors
def enable(ctx: click.Context):
    """Enable the Juremy lookup."""
    store = PreferenceStore(ctx.obj["preferences_path"])
    store.set_preference(JuremyLookup.ALLOW_JUREMY_TRANSLATE, True)
    console.print("[green]Juremy lookup enabled[/green]")


@cli.command()
@click.pass_context
@_handle_errors
def disable(ctx: click.Context):
    """Disable the Juremy lookup."""
    store = PreferenceStore(ctx.obj["preferences_path"])
    store.set_preference(JuremyLookup.ALLOW_JUREMY_TRANSLATE, False)
    console.print("[yellow]Juremy lookup disabled[/yellow]")


if __name__ == "__main__":
    cli()
