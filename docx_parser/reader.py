"""
docx_parser/reader.py — tekst jednej części i agregacja części w sekcje.

  read_part(stream)          → akapity części, każdy zakończony jedną spacją
  SectionAggregator          → cztery bufory (header/content/footer/footnotes)
  aggregate_sections(parts)  → DocumentText dla listy (ArchivePart, strumień)
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model.documents import ArchivePart, DocumentText, Section
from docx_parser.scanner import SeekResult, collect_paragraph_text, seek_next_paragraph_start
from docx_parser.tokens import TokenStream


def read_part(stream: TokenStream) -> str:
    """
    Czyta wszystkie akapity części aż do końca strumienia.

    Każdy akapit jest dopisywany z jedną spacją na końcu. Błąd w trakcie
    przerywa odczyt; częściowy bufor jest porzucany razem z wyjątkiem.
    """
    content: list[str] = []
    while seek_next_paragraph_start(stream) is SeekResult.PARAGRAPH:
        content.append(collect_paragraph_text(stream))
        content.append(" ")
    return "".join(content)


class SectionAggregator:
    """Zbiera tekst części w czterech sekcjach, w kolejności dodawania."""

    def __init__(self) -> None:
        self._buffers: dict[Section, list[str]] = {s: [] for s in Section}

    def add_text(self, section: Section, text: str) -> None:
        self._buffers[section].append(text)

    def add_part(self, part: ArchivePart, stream: TokenStream) -> None:
        # Sekcja pochodzi z ArchivePart, klasyfikacja odbywa się raz, przy wyborze części.
        self.add_text(part.section, read_part(stream))

    def result(self) -> DocumentText:
        # Części sklejamy bez separatora, read_part kończy każdy akapit spacją.
        text = {s: "".join(chunks).strip() for s, chunks in self._buffers.items()}
        return DocumentText(
            header=text[Section.HEADER],
            content=text[Section.CONTENT],
            footer=text[Section.FOOTER],
            footnotes=text[Section.FOOTNOTES],
        )


def aggregate_sections(parts: Iterable[tuple[ArchivePart, TokenStream]]) -> DocumentText:
    """Czyta części po kolei i zwraca przycięte sekcje; pierwszy błąd przerywa całość."""
    aggregator = SectionAggregator()
    for part, stream in parts:
        aggregator.add_part(part, stream)
    return aggregator.result()
