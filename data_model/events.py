"""
data_model/events.py — zdarzenia strumienia XML widziane przez skaner akapitów.

Tokenizer emituje trzy rodzaje zdarzeń w kolejności dokumentu:
  ElementStart(local_name)  — otwarcie elementu (nazwa lokalna, bez przestrzeni nazw)
  ElementEnd(local_name)    — zamknięcie elementu
  CharacterData(text)       — ciągły fragment tekstu między znacznikami

Zdarzenia są tworzone leniwie i konsumowane dokładnie raz.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ElementStart:
    local_name: str


@dataclass(frozen=True, slots=True)
class ElementEnd:
    local_name: str


@dataclass(frozen=True, slots=True)
class CharacterData:
    text: str


# Dowolne zdarzenie strumienia tokenów.
TextEvent: TypeAlias = ElementStart | ElementEnd | CharacterData
