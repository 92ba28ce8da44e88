"""Komenda: dxt parts — lista części archiwum DOCX, z których czytany jest tekst."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from dxt.commands.read import _load_settings, _open_source

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = _load_settings()
    source = _open_source(args.docx_file, settings)
    try:
        parts = source.parts
    finally:
        source.close()

    if not parts:
        console.print("[yellow]Brak części tekstowych w archiwum.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("CZĘŚĆ",   no_wrap=True, style="bold cyan")
    table.add_column("SEKCJA",  no_wrap=True)
    table.add_column("BAJTY",   justify="right", no_wrap=True)

    for i, part in enumerate(parts, start=1):
        table.add_row(str(i), Text(part.name), part.section.value, str(part.size))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(parts)} części[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parts",
        help="Listuje części archiwum DOCX wybrane do odczytu tekstu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje części archiwum (word/document.xml, nagłówki, stopki, przypisy)
w kolejności archiwum wraz z sekcją, do której trafia ich tekst.

Przykłady:
  dxt parts umowa.docx
  cat umowa.docx | dxt parts -
        """,
    )
    p.add_argument(
        "docx_file",
        metavar="PLIK.docx",
        help='Ścieżka do pliku DOCX albo "-" dla stdin.',
    )
    p.set_defaults(func=run)
