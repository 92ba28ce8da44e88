"""
docx_parser/scanner.py — odtwarzanie tekstu akapitów ze strumienia zdarzeń XML.

Stany skanera dla jednej części:
  Seeking      → szukamy <p>                    (seek_next_paragraph_start)
  InParagraph  → zbieramy tekst elementów <t>   (collect_paragraph_text)
  Done         → koniec strumienia w Seeking     → SeekResult.END_OF_STREAM
  Failed       → błąd XML albo koniec strumienia w InParagraph → DecodeError

Dopasowanie struktury wyłącznie po nazwie lokalnej; zagnieżdżenie innych
elementów (r, rPr, hyperlink…) nie ma znaczenia, ich zdarzenia są pomijane.
"""

from __future__ import annotations

from enum import StrEnum

from data_model.events import CharacterData, ElementEnd, ElementStart
from docx_parser.errors import DecodeError
from docx_parser.tokens import TokenStream

PARAGRAPH_TAG = "p"
TEXT_TAG = "t"


class SeekResult(StrEnum):
    PARAGRAPH     = "paragraph"
    END_OF_STREAM = "end_of_stream"


def seek_next_paragraph_start(stream: TokenStream) -> SeekResult:
    """Pomija zdarzenia aż do otwarcia akapitu albo do końca strumienia."""
    while True:
        event = stream.next_event()
        if event is None:
            return SeekResult.END_OF_STREAM
        if isinstance(event, ElementStart) and event.local_name == PARAGRAPH_TAG:
            return SeekResult.PARAGRAPH


def collect_paragraph_text(stream: TokenStream) -> str:
    """
    Zbiera tekst akapitu do pasującego </p>.

    Strumień musi stać tuż za <p>. Fragmenty z kolejnych <t> są sklejane
    bez separatora, w kolejności wystąpienia.
    """
    fragments: list[str] = []
    while True:
        event = stream.next_event()
        match event:
            case None:
                raise DecodeError(stream.part_name, "akapit nie został zamknięty przed końcem części")
            case ElementEnd(local_name=name) if name == PARAGRAPH_TAG:
                return "".join(fragments)
            case ElementStart(local_name=name) if name == TEXT_TAG:
                fragments.append(read_tab_text(stream))


def read_tab_text(stream: TokenStream) -> str:
    """
    Zwraca tekst elementu <t>; strumień stoi tuż za <t>.

    Bierzemy tylko PIERWSZY fragment CharacterData; dalszy tekst przed </t>
    zostaje w strumieniu i zostanie pominięty przez collect_paragraph_text.
    Pierwsze zamknięcie elementu (zwykle </t>) oznacza pusty tekst.
    """
    while True:
        event = stream.next_event()
        match event:
            case None:
                raise DecodeError(stream.part_name, "element tekstu nie został zamknięty przed końcem części")
            case CharacterData(text=text):
                return text
            case ElementEnd():
                return ""
