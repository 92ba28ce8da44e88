"""
dxt — narzędzie CLI do ekstrakcji tekstu z plików DOCX.

Użycie:
  dxt <komenda> [opcje]

Komendy:
  read    Wyciąga tekst nagłówków, treści, stopek i przypisów.
  parts   Listuje części archiwum wybrane do odczytu tekstu.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse i w wyciągniętym tekście były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from dxt.commands import read as cmd_read
from dxt.commands import parts as cmd_parts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dxt",
        description="docx-text — ekstrakcja czystego tekstu z DOCX.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="dxt 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_read.add_parser(subparsers)
    cmd_parts.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
