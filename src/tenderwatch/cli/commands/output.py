"""
Rendering of extraction results for the terminal.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tenderwatch.core.extract import ListingResult, TenderDetails

console = Console()

OUTPUT_FORMATS = ("table", "json")


def check_format(value: str) -> str:
    """Validate the --format option."""
    value = value.lower()
    if value not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"must be one of: {', '.join(OUTPUT_FORMATS)}")
    return value


def print_json(data: dict[str, Any]) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def render_listing(result: ListingResult, format: str = "table") -> None:
    """Print a listing page as a table or JSON."""
    if format == "json":
        print_json(result.to_dict())
        return
    
    if not result.tenders:
        console.print("[dim]No tenders found matching criteria.[/dim]")
    else:
        table = Table(
            title=f"Tenders ({len(result.tenders)} shown)",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Tender No", style="cyan", no_wrap=True)
        table.add_column("Title", max_width=50)
        table.add_column("Organization", max_width=30)
        table.add_column("Type", justify="center")
        table.add_column("Published", justify="right")
        table.add_column("Closing", justify="right")
        
        for tender in result.tenders:
            closing = " ".join(part for part in (tender.closing_date, tender.closing_time) if part)
            table.add_row(
                tender.tender_no,
                tender.title or "[dim]-[/dim]",
                tender.organization or "[dim]-[/dim]",
                tender.type or "[dim]-[/dim]",
                tender.published_date or "[dim]-[/dim]",
                closing or "[dim]-[/dim]",
            )
        
        console.print(table)
    
    more = "[green]more available[/green]" if result.pagination.has_more else "[dim]last page[/dim]"
    console.print(f"Page {result.pagination.current_page}, {more}")


def _section_table(title: str, values: dict[str, str]) -> Table:
    table = Table(title=title, show_header=False, title_justify="left", expand=True)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for label, value in values.items():
        table.add_row(label, value or "[dim]-[/dim]")
    return table


def render_details(details: TenderDetails, format: str = "table") -> None:
    """Print a tender's details as panels or JSON."""
    if format == "json":
        print_json(details.to_dict())
        return
    
    header = f"[bold]{details.title or details.tender_no}[/bold]\n[cyan]{details.tender_no}[/cyan]"
    if details.has_corrigendum:
        header += "  [yellow]Corrigendum issued[/yellow]"
    console.print(Panel(header, expand=False))
    
    for title, values in (
        ("Organization", details.organization),
        ("Tender Information", details.tender_info),
        ("Important Dates", details.dates),
    ):
        if values:
            console.print(_section_table(title, values))
    
    documents = details.documents.to_dict()
    if documents:
        console.print(_section_table("Documents", documents))
    else:
        console.print("[dim]No documents attached.[/dim]")
