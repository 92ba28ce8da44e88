"""Komenda: dxt read — ekstrakcja tekstu sekcji z pliku DOCX."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from data_model.documents import DocumentText, Section
from docx_parser import DocumentSource, DocxTextError, UnsupportedFormatError
from dxt._config import Settings, get_settings

console = Console()


# ---------------------------------------------------------------------------
# Otwieranie źródła (wspólne z dxt parts)
# ---------------------------------------------------------------------------

def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)


def _open_source(file_arg: str, settings: Settings) -> DocumentSource:
    """Otwiera DOCX ze ścieżki albo ze stdin ("-"); błędy kończą komendę kodem 1."""
    try:
        if file_arg == "-":
            return DocumentSource.from_stream(
                sys.stdin.buffer,
                tmp_dir=settings.tmp_dir,
                chunk_size=settings.chunk_size,
            )
        path = Path(file_arg)
        if not path.exists():
            console.print(f"[red]Plik nie istnieje:[/red] {path}")
            raise SystemExit(1)
        return DocumentSource.from_path(path, chunk_size=settings.chunk_size)
    except UnsupportedFormatError as e:
        console.print(f"[red]Oczekiwano pliku .docx, otrzymano:[/red] {e.path}")
        raise SystemExit(1)
    except DocxTextError as e:
        console.print(f"[red]Błąd archiwum:[/red] {e}")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Błąd pliku:[/red] {e}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(text: DocumentText, json_path: Path) -> None:
    json_path.write_text(json.dumps(text.as_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_text(text: DocumentText, sections: list[Section]) -> None:
    for section in sections:
        console.print(f"[bold cyan]{section.value.upper()}[/bold cyan]")
        value = text.get(section)
        console.print(Text(value) if value else Text("(pusto)", style="dim"))
        console.print()


def _show_table(text: DocumentText, sections: list[Section]) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("SEKCJA", no_wrap=True, style="bold cyan")
    table.add_column("ZNAKI",  justify="right", no_wrap=True)
    table.add_column("SŁOWA",  justify="right", no_wrap=True)
    table.add_column("POCZĄTEK", no_wrap=False, max_width=50)

    for section in sections:
        value = text.get(section)
        table.add_row(
            section.value,
            str(len(value)),
            str(len(value.split())),
            Text(value[:80]),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = _load_settings()
    sections = [Section(s) for s in args.section] if args.section else list(Section)

    source = _open_source(args.docx_file, settings)
    try:
        text = source.read()
    except (DocxTextError, OSError) as e:
        console.print(f"[red]Błąd odczytu:[/red] {e}")
        raise SystemExit(1)
    finally:
        source.close()

    if args.raw:
        sys.stdout.write("\n".join(text.get(s) for s in sections) + "\n")
    else:
        _show_text(text, sections)

    if args.json:
        try:
            _write_json(text, Path(args.json))
        except OSError as e:
            console.print(f"[red]Błąd zapisu JSON:[/red] {e}")
            raise SystemExit(1)

    if args.show:
        _show_table(text, sections)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "read",
        help="Wyciąga tekst nagłówków, treści, stopek i przypisów z pliku DOCX.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyciąga czysty tekst z części XML dokumentu DOCX i wypisuje go w podziale
na sekcje (header, content, footer, footnotes).

Przykłady:
  dxt read umowa.docx
  dxt read umowa.docx --section content --raw
  dxt read umowa.docx --json umowa.text.json --show
  cat umowa.docx | dxt read -
        """,
    )
    p.add_argument(
        "docx_file",
        metavar="PLIK.docx",
        help='Ścieżka do pliku DOCX albo "-" dla stdin.',
    )
    p.add_argument(
        "--section",
        action="append",
        choices=[s.value for s in Section],
        default=None,
        help="Sekcja do wypisania (można powtarzać; domyślnie wszystkie).",
    )
    p.add_argument(
        "--raw",
        action="store_true",
        help="Wypisz sam tekst (po jednej linii na sekcję), bez formatowania.",
    )
    p.add_argument(
        "--json",
        metavar="PLIK.json",
        default=None,
        help="Zapisz wszystkie cztery sekcje do pliku JSON.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę długości sekcji.",
    )
    p.set_defaults(func=run)
