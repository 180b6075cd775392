"""
Offline extraction of saved portal pages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from tenderwatch.core.config.models import AppConfig
from tenderwatch.core.extract import DetailExtractor, InvalidTenderIdError, ListingExtractor
from .output import check_format, render_details, render_listing

err_console = Console(stderr=True)

app = typer.Typer(
    help="Extract tenders from saved HTML pages",
    no_args_is_help=True,
)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        err_console.print(f"[red]Cannot read {path}:[/red] {e}")
        raise typer.Exit(1)


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


@app.command("listing")
def parse_listing_file(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved listing page"),
    origin: Optional[str] = typer.Option(None, "--origin", help="Origin for resolving links"),
    format: str = typer.Option("json", "--format", "-f", help="Output format (table, json)", callback=check_format),
) -> None:
    """Extract tenders and pagination from a saved listing page."""
    config = _config(ctx)
    extractor = ListingExtractor(
        selectors=config.portal.listing_selectors,
        origin=origin or config.portal.origin,
    )
    render_listing(extractor.extract(_read(path)), format)


@app.command("detail")
def parse_detail_file(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved detail page"),
    tender_no: str = typer.Option(..., "--tender-no", "-t", help="Tender number the page belongs to"),
    origin: Optional[str] = typer.Option(None, "--origin", help="Origin for resolving links"),
    format: str = typer.Option("json", "--format", "-f", help="Output format (table, json)", callback=check_format),
) -> None:
    """Extract a tender's details from a saved detail page."""
    config = _config(ctx)
    extractor = DetailExtractor(
        selectors=config.portal.detail_selectors,
        origin=origin or config.portal.origin,
    )
    try:
        details = extractor.extract(_read(path), tender_no)
    except InvalidTenderIdError:
        err_console.print("[red]Invalid tender ID[/red]")
        raise typer.Exit(2)
    
    render_details(details, format)
