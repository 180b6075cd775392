"""
Live portal commands.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from tenderwatch.core.backends.base import BackendError
from tenderwatch.core.config.models import AppConfig
from tenderwatch.core.extract import InvalidTenderIdError
from tenderwatch.core.normalize.filters import (
    InvalidFilterError,
    ProcurementCategory,
    TenderFilters,
    TenderNature,
    TenderType,
    describe_options,
    normalize_filters,
)
from tenderwatch.core.portals import EpmsPortal
from .output import check_format, render_details, render_listing

console = Console()
err_console = Console(stderr=True)

TYPE_HELP = f"Tender type by name or code: {describe_options(TenderType)}"
CATEGORY_HELP = f"Procurement category by name or code: {describe_options(ProcurementCategory)}"
NATURE_HELP = f"Tender nature by name or code: {describe_options(TenderNature)}"

app = typer.Typer(
    help="Browse tenders on the live portal",
    no_args_is_help=True,
)


def _filters(
    page: str,
    keyword: str,
    tender_no: str,
    closing_date: str,
    tender_type: str,
    category: str,
    nature: str,
) -> TenderFilters:
    try:
        return normalize_filters(
            page=page,
            keyword=keyword,
            tender_no=tender_no,
            closing_date=closing_date,
            tender_type=tender_type,
            procurement_category=category,
            tender_nature=nature,
        )
    except InvalidFilterError as e:
        err_console.print(f"[red]Invalid filter:[/red] {e}")
        raise typer.Exit(2)


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()


@app.command("list")
def list_tenders(
    ctx: typer.Context,
    page: str = typer.Option("1", "--page", "-p", help="Listing page (1-based)"),
    keyword: str = typer.Option("", "--keyword", "-k", help="Free text search"),
    tender_no: str = typer.Option("", "--tender-no", "-t", help="Filter by tender number"),
    closing_date: str = typer.Option("", "--closing-date", help="Filter by closing date"),
    tender_type: str = typer.Option("", "--type", help=TYPE_HELP),
    category: str = typer.Option("", "--category", help=CATEGORY_HELP),
    nature: str = typer.Option("", "--nature", help=NATURE_HELP),
    format: str = typer.Option("table", "--format", "-f", help="Output format (table, json)", callback=check_format),
) -> None:
    """List active tenders matching the filters.
    
    Examples:
        tenderwatch tenders list --keyword hospital --type rfp
        tenderwatch tenders list --category works --page 2 --format json
    """
    filters = _filters(page, keyword, tender_no, closing_date, tender_type, category, nature)
    config = _config(ctx)
    
    async def run():
        async with EpmsPortal(config.portal) as portal:
            return await portal.list_tenders(filters)
    
    try:
        result = asyncio.run(run())
    except BackendError as e:
        err_console.print(f"[red]Failed to fetch tenders:[/red] {e}")
        raise typer.Exit(1)
    
    render_listing(result, format)


@app.command("detail")
def tender_detail(
    ctx: typer.Context,
    tender_no: str = typer.Argument(..., help="Tender number"),
    format: str = typer.Option("table", "--format", "-f", help="Output format (table, json)", callback=check_format),
) -> None:
    """Show the full record of one tender."""
    config = _config(ctx)
    
    async def run():
        async with EpmsPortal(config.portal) as portal:
            return await portal.get_tender_details(tender_no)
    
    try:
        details = asyncio.run(run())
    except InvalidTenderIdError:
        err_console.print("[red]Invalid tender ID[/red]")
        raise typer.Exit(2)
    except BackendError as e:
        err_console.print(f"[red]Failed to fetch tender details:[/red] {e}")
        raise typer.Exit(1)
    
    render_details(details, format)


@app.command("query")
def show_query(
    page: str = typer.Option("1", "--page", "-p", help="Listing page (1-based)"),
    keyword: str = typer.Option("", "--keyword", "-k", help="Free text search"),
    tender_no: str = typer.Option("", "--tender-no", "-t", help="Filter by tender number"),
    closing_date: str = typer.Option("", "--closing-date", help="Filter by closing date"),
    tender_type: str = typer.Option("", "--type", help=TYPE_HELP),
    category: str = typer.Option("", "--category", help=CATEGORY_HELP),
    nature: str = typer.Option("", "--nature", help=NATURE_HELP),
) -> None:
    """Print the canonical listing query string for the filters."""
    filters = _filters(page, keyword, tender_no, closing_date, tender_type, category, nature)
    console.print(filters.query_string, highlight=False, soft_wrap=True)
