"""Konfiguracja CLI — zmienne środowiskowe, opcjonalnie z pliku .env w katalogu projektu.

  DXT_CHUNK_SIZE   liczba bajtów podawana parserowi XML na raz (domyślnie 65536)
  DXT_TMPDIR       katalog na archiwa zrzucane ze stdin (domyślnie katalog systemowy)
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from docx_parser.tokens import DEFAULT_CHUNK_SIZE

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    chunk_size: int
    tmp_dir: str | None


def get_settings() -> Settings:
    load_dotenv(_ENV_FILE, override=False)

    raw_chunk = os.getenv("DXT_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
    try:
        chunk_size = int(raw_chunk)
    except ValueError:
        raise ValueError(f"DXT_CHUNK_SIZE musi być liczbą całkowitą, otrzymano {raw_chunk!r}") from None
    if chunk_size <= 0:
        raise ValueError(f"DXT_CHUNK_SIZE musi być dodatnie, otrzymano {chunk_size}")

    return Settings(
        chunk_size = chunk_size,
        tmp_dir    = os.getenv("DXT_TMPDIR") or None,
    )
