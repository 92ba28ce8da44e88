"""
docx_parser/tokens.py — strumień zdarzeń XML dla jednej części archiwum.

Architektura:
  bajty części (ZipExtFile) → porcje po chunk_size → lxml XMLParser(target=…)
  → _EventCollector (start/end/data → kolejka zdarzeń) → next_event()

Skaner akapitów zależy wyłącznie od protokołu TokenStream, a nie od lxml.

Kontrakt next_event():
  - zwraca kolejne zdarzenie (ElementStart / ElementEnd / CharacterData),
  - zwraca None, gdy strumień się wyczerpał (to NIE jest błąd),
  - rzuca DecodeError przy niepoprawnym XML, ArchiveError przy błędzie odczytu ZIP.
"""

from __future__ import annotations

import zipfile
import zlib
from collections import deque
from typing import BinaryIO, Protocol

from lxml import etree

from data_model.events import CharacterData, ElementEnd, ElementStart, TextEvent
from docx_parser.errors import ArchiveError, DecodeError

DEFAULT_CHUNK_SIZE = 64 * 1024


class TokenStream(Protocol):
    part_name: str  # nazwa części do komunikatów błędów

    def next_event(self) -> TextEvent | None:
        ...


def _local_name(tag: str) -> str:
    """"{http://…/main}p" → "p"."""
    return etree.QName(tag).localname


class _EventCollector:
    """
    Cel (target) parsera lxml: zamienia wywołania zwrotne na kolejkę zdarzeń.

    Kolejne wywołania data() między dwoma znacznikami są sklejane w jedno
    CharacterData, bo libxml2 potrafi podzielić tekst na granicy porcji albo
    na encji (&amp;), a skaner oczekuje jednego zdarzenia na ciągły tekst.
    """

    def __init__(self) -> None:
        self.events: deque[TextEvent] = deque()
        self._text: list[str] = []

    def _flush_text(self) -> None:
        if self._text:
            self.events.append(CharacterData("".join(self._text)))
            self._text.clear()

    def start(self, tag: str, attrib: dict, nsmap: dict | None = None) -> None:
        self._flush_text()
        self.events.append(ElementStart(_local_name(tag)))

    def end(self, tag: str) -> None:
        self._flush_text()
        self.events.append(ElementEnd(_local_name(tag)))

    def data(self, data: str) -> None:
        self._text.append(data)

    # Komentarz i instrukcja przetwarzania rozdzielają tekst, ale same
    # nie są zdarzeniami.
    def comment(self, text: str) -> None:
        self._flush_text()

    def pi(self, target: str, data: str | None = None) -> None:
        self._flush_text()

    def close(self) -> None:
        self._flush_text()


class XmlTokenStream:
    """Leniwy strumień zdarzeń nad bajtami jednej części XML."""

    def __init__(
        self,
        raw: BinaryIO,
        part_name: str = "<xml>",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size musi być dodatni, otrzymano {chunk_size}")
        self.part_name = part_name
        self._raw = raw
        self._chunk_size = chunk_size
        self._collector = _EventCollector()
        self._parser = etree.XMLParser(
            target=self._collector,
            resolve_entities=False,
            no_network=True,
        )
        self._fed = False        # czy parser dostał choć jeden bajt
        self._exhausted = False  # czy źródło bajtów się skończyło

    def next_event(self) -> TextEvent | None:
        events = self._collector.events
        while not events:
            if self._exhausted:
                return None
            self._pump()
        return events.popleft()

    def close(self) -> None:
        self._raw.close()

    def _pump(self) -> None:
        """Czyta jedną porcję bajtów i przekazuje ją parserowi."""
        try:
            chunk = self._raw.read(self._chunk_size)
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError) as exc:
            raise ArchiveError(f"{self.part_name}: {exc}") from exc

        try:
            if chunk:
                self._fed = True
                self._parser.feed(chunk)
            else:
                self._exhausted = True
                # Pusta część to po prostu brak zdarzeń; close() na parserze
                # bez danych zgłosiłby "Document is empty".
                if self._fed:
                    self._parser.close()
        except etree.XMLSyntaxError as exc:
            self._exhausted = True
            raise DecodeError(self.part_name, str(exc)) from exc
