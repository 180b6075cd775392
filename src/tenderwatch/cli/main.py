"""
TenderWatch CLI - Main entry point.

Browse active tenders of the PPRA portal from the terminal, run the
extractors over saved pages, or serve the JSON API.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.traceback import install as install_rich_traceback

from tenderwatch import __app_name__, __version__
from tenderwatch.core.config.loader import ConfigError, load_app_config
from tenderwatch.core.logging import setup_logging

# Load environment variables from .env (if present)
load_dotenv()

install_rich_traceback(show_locals=False, width=120)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name=__app_name__,
    help="Public procurement tenders as structured JSON",
    rich_markup_mode="rich",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]{__app_name__}[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to app.yaml (default: configs/app.yaml if present)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """TenderWatch - Public procurement notices as structured JSON."""
    try:
        app_config = load_app_config(config)
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        if e.details:
            err_console.print(f"[dim]{e.details}[/dim]")
        raise typer.Exit(2)
    
    log_config = app_config.logging
    setup_logging(
        level=log_level or log_config.level,
        log_file=log_config.file,
        json_format=log_config.json_format,
        rich_console=log_config.rich_console,
    )
    ctx.obj = app_config


# =============================================================================
# Import and register subcommand modules
# =============================================================================

from .commands import parse, tenders  # noqa: E402

app.add_typer(tenders.app, name="tenders", help="Browse tenders on the live portal")
app.add_typer(parse.app, name="parse", help="Extract tenders from saved HTML pages")


# =============================================================================
# Serve Command
# =============================================================================


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
) -> None:
    """Serve the JSON API."""
    import uvicorn
    
    from tenderwatch.api import create_app
    
    app_config = ctx.obj
    bind_host = host or app_config.api.host
    bind_port = port or app_config.api.port
    
    console.print(f"[bold]Serving API on[/bold] http://{bind_host}:{bind_port}")
    uvicorn.run(create_app(app_config), host=bind_host, port=bind_port, log_level="info")


if __name__ == "__main__":
    app()
