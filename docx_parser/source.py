"""
docx_parser/source.py — źródło dokumentu DOCX: archiwum, wybór części, odczyt, zwolnienie.

Architektura:
  ścieżka / bajty / strumień → zipfile.ZipFile
  → wybór części (word/document.xml, *header*, *footer*, *footnotes*) w kolejności archiwum
  → XmlTokenStream na każdą część → aggregate_sections() → DocumentText

Źródło posiada na wyłączność archiwum i wszystkie strumienie części; po
użyciu MUSI zostać zamknięte (close() albo blok with), także po błędzie.

Kluczowe funkcje publiczne:
  read_docx(path)        -> DocumentText
  read_docx_bytes(data)  -> DocumentText
"""

from __future__ import annotations

import io
import os
import shutil
import tempfile
import zipfile
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from data_model.documents import ArchivePart, DocumentText, Section, is_text_part
from docx_parser.errors import ArchiveError, SourceStateError, UnsupportedFormatError
from docx_parser.reader import aggregate_sections
from docx_parser.tokens import DEFAULT_CHUNK_SIZE, XmlTokenStream

EXPECTED_EXTENSION = ".docx"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def read_docx(path: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> DocumentText:
    """Otwiera plik .docx, czyta cztery sekcje tekstu i zwalnia zasoby."""
    source = DocumentSource.from_path(path, chunk_size=chunk_size)
    try:
        return source.read()
    finally:
        source.close()


def read_docx_bytes(data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> DocumentText:
    """Jak read_docx, ale dla archiwum w pamięci (bez kontroli rozszerzenia)."""
    source = DocumentSource.from_bytes(data, chunk_size=chunk_size)
    try:
        return source.read()
    finally:
        source.close()


class DocumentSource:
    """
    Otwarte archiwum DOCX z wybranymi częściami tekstowymi.

    Tworzenie przez from_path / from_bytes / from_stream. Źródło można
    odczytać (read) jeden raz, bo strumienie części są konsumowane.
    """

    def __init__(
        self,
        archive: zipfile.ZipFile,
        *,
        temp_path: Path | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._archive = archive
        self._temp_path = temp_path  # plik tymczasowy utworzony przez nas → usuwany w close()
        self._streams: list[tuple[ArchivePart, XmlTokenStream]] = []
        self._consumed = False
        self._closed = False
        try:
            self._open_parts(chunk_size)
        except Exception:
            self.close()
            raise

    # -- konstruktory --------------------------------------------------------

    @classmethod
    def from_path(cls, path: str | Path, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> DocumentSource:
        path = Path(path)
        if path.suffix.lower() != EXPECTED_EXTENSION:
            raise UnsupportedFormatError(str(path), EXPECTED_EXTENSION)
        return cls(_open_archive(path), chunk_size=chunk_size)

    @classmethod
    def from_bytes(cls, data: bytes, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> DocumentSource:
        return cls(_open_archive(io.BytesIO(data)), chunk_size=chunk_size)

    @classmethod
    def from_stream(
        cls,
        fileobj: BinaryIO,
        *,
        tmp_dir: str | Path | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> DocumentSource:
        """
        Zrzuca strumień (np. stdin, bez seek) do pliku tymczasowego .docx i go otwiera.

        Plik tymczasowy należy do źródła i jest usuwany przy close().
        """
        fd, name = tempfile.mkstemp(prefix="dxt-", suffix=EXPECTED_EXTENSION, dir=tmp_dir)
        temp_path = Path(name)
        try:
            with os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(fileobj, out)
            archive = _open_archive(temp_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
        return cls(archive, temp_path=temp_path, chunk_size=chunk_size)

    # -- API -----------------------------------------------------------------

    @property
    def parts(self) -> tuple[ArchivePart, ...]:
        """Wybrane części w kolejności archiwum."""
        return tuple(part for part, _ in self._streams)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> DocumentText:
        """Czyta wszystkie wybrane części i zwraca cztery przycięte sekcje."""
        if self._closed:
            raise SourceStateError("Źródło dokumentu zostało już zamknięte.")
        if self._consumed:
            raise SourceStateError("Źródło dokumentu zostało już odczytane; otwórz je ponownie.")
        self._consumed = True
        return aggregate_sections(self._streams)

    def close(self) -> None:
        """Zamyka strumienie części i archiwum, usuwa własny plik tymczasowy. Idempotentne."""
        if self._closed:
            return
        self._closed = True
        try:
            for _, stream in self._streams:
                stream.close()
            self._archive.close()
        finally:
            if self._temp_path is not None:
                self._temp_path.unlink(missing_ok=True)

    def __enter__(self) -> DocumentSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- wewnętrzne ----------------------------------------------------------

    def _open_parts(self, chunk_size: int) -> None:
        for info in self._archive.infolist():
            if info.is_dir() or not is_text_part(info.filename):
                continue
            try:
                raw = self._archive.open(info)
            except (zipfile.BadZipFile, NotImplementedError, RuntimeError) as exc:
                raise ArchiveError(f"{info.filename}: {exc}") from exc
            part = ArchivePart(
                name=info.filename,
                section=Section.classify(info.filename),
                size=info.file_size,
            )
            self._streams.append((part, XmlTokenStream(raw, info.filename, chunk_size)))


def _open_archive(file: Path | BinaryIO) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(file)
    except zipfile.BadZipFile as exc:
        raise ArchiveError(str(exc)) from exc
