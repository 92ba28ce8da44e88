"""
docx_parser — ekstrakcja czystego tekstu z części XML archiwum DOCX.

Publiczne API:
  read_docx(path)                 → DocumentText (header, content, footer, footnotes)
  read_docx_bytes(data)           → DocumentText
  DocumentSource                  źródło z from_path / from_bytes / from_stream, read(), close()
  XmlTokenStream, TokenStream     strumień zdarzeń XML jednej części
  seek_next_paragraph_start(s)    → SeekResult
  collect_paragraph_text(s)       → str
  read_part(s)                    → str (akapity rozdzielone spacją)
  SectionAggregator, aggregate_sections
  DocxTextError i pochodne        wyjątki

Typowe użycie:
    from docx_parser import DocumentSource

    with DocumentSource.from_path("umowa.docx") as source:
        text = source.read()
    print(text.header, text.content, sep="\\n")
"""

from .errors import (
    ArchiveError,
    DecodeError,
    DocxTextError,
    SourceStateError,
    UnsupportedFormatError,
)
from .tokens import DEFAULT_CHUNK_SIZE, TokenStream, XmlTokenStream
from .scanner import (
    PARAGRAPH_TAG,
    TEXT_TAG,
    SeekResult,
    collect_paragraph_text,
    read_tab_text,
    seek_next_paragraph_start,
)
from .reader import SectionAggregator, aggregate_sections, read_part
from .source import EXPECTED_EXTENSION, DocumentSource, read_docx, read_docx_bytes

__all__ = [
    "ArchiveError",
    "DecodeError",
    "DocxTextError",
    "SourceStateError",
    "UnsupportedFormatError",
    "DEFAULT_CHUNK_SIZE",
    "TokenStream",
    "XmlTokenStream",
    "PARAGRAPH_TAG",
    "TEXT_TAG",
    "SeekResult",
    "collect_paragraph_text",
    "read_tab_text",
    "seek_next_paragraph_start",
    "SectionAggregator",
    "aggregate_sections",
    "read_part",
    "EXPECTED_EXTENSION",
    "DocumentSource",
    "read_docx",
    "read_docx_bytes",
]
