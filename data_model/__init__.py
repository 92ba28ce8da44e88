"""
data_model — struktury danych ekstraktora tekstu DOCX.

Użycie:
  from data_model import Section, DocumentText, ArchivePart, ...

Moduły:
  documents — Section, ArchivePart, DocumentText, BODY_PART_NAME, is_text_part
  events    — ElementStart, ElementEnd, CharacterData, TextEvent
"""

from .documents import (
    BODY_PART_NAME,
    ArchivePart,
    DocumentText,
    Section,
    is_text_part,
)
from .events import (
    CharacterData,
    ElementEnd,
    ElementStart,
    TextEvent,
)

__all__ = [
    # documents
    "BODY_PART_NAME",
    "ArchivePart",
    "DocumentText",
    "Section",
    "is_text_part",
    # events
    "CharacterData",
    "ElementEnd",
    "ElementStart",
    "TextEvent",
]
