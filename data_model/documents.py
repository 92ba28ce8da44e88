"""
data_model/documents.py — model części archiwum DOCX i wyniku odczytu.

ArchivePart opisuje jeden wybrany wpis archiwum ZIP; Section to jeden z
czterech koszyków wyjściowych; DocumentText to końcowy wynik odczytu
(cztery przycięte napisy).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


# Kanoniczna nazwa części z treścią dokumentu.
BODY_PART_NAME = "word/document.xml"


class Section(StrEnum):
    """Koszyk wyjściowy, do którego trafia tekst części archiwum."""
    HEADER    = "header"
    CONTENT   = "content"
    FOOTER    = "footer"
    FOOTNOTES = "footnotes"

    @classmethod
    def classify(cls, part_name: str) -> Section:
        """
        Klasyfikuje część po nazwie (zawieranie podciągu, wielkość liter ma znaczenie).

        Kolejność sprawdzania jest stała: header → footer → footnotes,
        wszystko inne (w tym word/document.xml) → content.
        """
        if "header" in part_name:
            return cls.HEADER
        if "footer" in part_name:
            return cls.FOOTER
        if "footnotes" in part_name:
            return cls.FOOTNOTES
        return cls.CONTENT


def is_text_part(part_name: str) -> bool:
    """Zwraca True dla części, z których czytamy tekst."""
    return (
        part_name == BODY_PART_NAME
        or "header" in part_name
        or "footer" in part_name
        or "footnotes" in part_name
    )


@dataclass(frozen=True, slots=True)
class ArchivePart:
    name: str            # nazwa wpisu w archiwum, np. "word/header1.xml"
    section: Section     # koszyk, do którego trafia tekst części
    size: int            # rozmiar po dekompresji (bajty)


@dataclass(frozen=True, slots=True)
class DocumentText:
    """Tekst dokumentu rozdzielony na cztery sekcje (każda przycięta)."""
    header: str
    content: str
    footer: str
    footnotes: str

    def get(self, section: Section) -> str:
        return getattr(self, section.value)

    def as_dict(self) -> dict[str, str]:
        return {s.value: self.get(s) for s in Section}
