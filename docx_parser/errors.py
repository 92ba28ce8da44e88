"""
docx_parser/errors.py — wyjątki ekstraktora tekstu DOCX.

DocxTextError            — klasa bazowa
  UnsupportedFormatError — ścieżka bez rozszerzenia .docx (przed otwarciem archiwum)
  ArchiveError           — niepoprawne archiwum ZIP lub nieczytelny wpis
  DecodeError            — niepoprawny XML albo akapit/tekst bez zamknięcia
  SourceStateError       — odczyt po close() lub ponowny odczyt źródła

Koniec strumienia NIE jest wyjątkiem, patrz tokens.TokenStream.next_event().
"""

from __future__ import annotations


class DocxTextError(Exception):
    """Wspólna baza wszystkich błędów ekstraktora."""


class UnsupportedFormatError(DocxTextError):
    def __init__(self, path: str, expected: str) -> None:
        super().__init__(
            f"Nieobsługiwany format pliku: {path} (oczekiwano rozszerzenia {expected})"
        )
        self.path = path
        self.expected = expected


class ArchiveError(DocxTextError):
    """Błąd warstwy ZIP; komunikat jest komunikatem biblioteki zipfile."""


class DecodeError(DocxTextError):
    def __init__(self, part_name: str, message: str) -> None:
        super().__init__(f"{part_name}: {message}")
        self.part_name = part_name
        self.message = message


class SourceStateError(DocxTextError):
    pass
