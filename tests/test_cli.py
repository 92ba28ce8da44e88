import io
import json
import sys

import pytest

from conftest import EXPECTED_CONTENT
from dxt import _config
from dxt.cli import build_parser, main


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_read_raw_single_section(header_footer_docx, capsys):
    main(["read", str(header_footer_docx), "--section", "content", "--raw"])
    assert capsys.readouterr().out == EXPECTED_CONTENT + "\n"


def test_read_raw_keeps_section_order(header_footer_docx, capsys):
    main(["read", str(header_footer_docx), "--section", "footer", "--section", "header", "--raw"])
    assert capsys.readouterr().out == "test footer\ntest header\n"


def test_read_pretty_prints_all_sections(header_footer_docx, capsys):
    main(["read", str(header_footer_docx)])
    out = capsys.readouterr().out
    for label in ("HEADER", "CONTENT", "FOOTER", "FOOTNOTES"):
        assert label in out
    assert "test header" in out
    assert "(pusto)" in out


def test_read_writes_json(header_footer_docx, tmp_path, capsys):
    target = tmp_path / "out.json"
    main(["read", str(header_footer_docx), "--raw", "--json", str(target)])
    assert json.loads(target.read_text(encoding="utf-8")) == {
        "header": "test header",
        "content": EXPECTED_CONTENT,
        "footer": "test footer",
        "footnotes": "",
    }


def test_read_show_table(plain_docx, capsys):
    main(["read", str(plain_docx), "--raw", "--show"])
    out = capsys.readouterr().out
    assert "SEKCJA" in out
    assert "content" in out


def test_read_rejects_wrong_extension(tmp_path, capsys):
    doc = tmp_path / "notes.txt"
    doc.write_text("hello", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(doc)])
    assert exc_info.value.code == 1
    assert ".docx" in capsys.readouterr().out


def test_read_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(tmp_path / "nope.docx")])
    assert exc_info.value.code == 1
    assert "nie istnieje" in capsys.readouterr().out


def test_read_broken_archive(tmp_path, capsys):
    doc = tmp_path / "broken.docx"
    doc.write_bytes(b"PK but not really")
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(doc)])
    assert exc_info.value.code == 1


def test_read_from_stdin_cleans_spool(header_footer_docx, tmp_path, monkeypatch, capsys):
    spool = tmp_path / "spool"
    spool.mkdir()
    monkeypatch.setenv("DXT_TMPDIR", str(spool))
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(header_footer_docx.read_bytes())))

    main(["read", "-", "--section", "header", "--raw"])

    assert capsys.readouterr().out == "test header\n"
    assert list(spool.iterdir()) == []


def test_parts_lists_selected_entries(header_footer_docx, capsys):
    main(["parts", str(header_footer_docx)])
    out = capsys.readouterr().out
    assert "word/document.xml" in out
    assert "word/header1.xml" in out
    assert "word/footer1.xml" in out
    assert "[Content_Types].xml" not in out


def test_invalid_chunk_size_exits(plain_docx, monkeypatch, capsys):
    monkeypatch.setenv("DXT_CHUNK_SIZE", "lots")
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(plain_docx)])
    assert exc_info.value.code == 1
    assert "DXT_CHUNK_SIZE" in capsys.readouterr().out


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DXT_CHUNK_SIZE", "1024")
    monkeypatch.setenv("DXT_TMPDIR", str(tmp_path))
    settings = _config.get_settings()
    assert settings.chunk_size == 1024
    assert settings.tmp_dir == str(tmp_path)


def test_settings_reject_non_positive_chunk(monkeypatch):
    monkeypatch.setenv("DXT_CHUNK_SIZE", "0")
    with pytest.raises(ValueError):
        _config.get_settings()


def test_small_chunks_give_same_text(header_footer_docx, monkeypatch, capsys):
    monkeypatch.setenv("DXT_CHUNK_SIZE", "3")
    main(["read", str(header_footer_docx), "--section", "content", "--raw"])
    assert capsys.readouterr().out == EXPECTED_CONTENT + "\n"


def test_read_directory_named_like_docx(tmp_path, capsys):
    folder = tmp_path / "folder.docx"
    folder.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(folder)])
    assert exc_info.value.code == 1
    assert "Błąd pliku" in capsys.readouterr().out


def test_parts_directory_named_like_docx(tmp_path, capsys):
    folder = tmp_path / "folder.docx"
    folder.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        main(["parts", str(folder)])
    assert exc_info.value.code == 1


def test_read_stdin_with_missing_tmpdir(header_footer_docx, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DXT_TMPDIR", str(tmp_path / "does-not-exist"))
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(header_footer_docx.read_bytes())))
    with pytest.raises(SystemExit) as exc_info:
        main(["read", "-"])
    assert exc_info.value.code == 1
    assert "Błąd pliku" in capsys.readouterr().out


def test_read_json_into_missing_directory(plain_docx, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["read", str(plain_docx), "--raw", "--json", str(tmp_path / "no" / "out.json")])
    assert exc_info.value.code == 1
    assert "Błąd zapisu JSON" in capsys.readouterr().out
