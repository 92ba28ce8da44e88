import sys
import zipfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
XML_DECL = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

CONTENT_TYPES = (
    XML_DECL
    + '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)

ROOT_RELS = (
    XML_DECL
    + '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
    'Target="word/document.xml"/>'
    "</Relationships>"
)

BODY = (
    XML_DECL
    + f'<w:document xmlns:w="{W_NS}"><w:body>'
    '<w:p><w:pPr><w:pStyle w:val="Title"/></w:pPr><w:r><w:t>Title</w:t></w:r></w:p>\n'
    '<w:p><w:pPr><w:pStyle w:val="Subtitle"/></w:pPr><w:r><w:t>Subtitle</w:t></w:r></w:p>\n'
    '<w:p><w:r><w:t xml:space="preserve">Here is a </w:t></w:r>'
    "<w:r><w:rPr><w:b/></w:rPr><w:t>first row.</w:t></w:r></w:p>\n"
    "<w:p><w:r><w:t>Here is a second row.</w:t></w:r></w:p>\n"
    '<w:sectPr><w:pgSz w:w="11906" w:h="16838"/></w:sectPr>'
    "</w:body></w:document>"
)

EXPECTED_CONTENT = "Title Subtitle Here is a first row. Here is a second row."


def header_xml(text: str) -> str:
    return XML_DECL + f'<w:hdr xmlns:w="{W_NS}"><w:p><w:r><w:t>{text}</w:t></w:r></w:p></w:hdr>'


def footer_xml(text: str) -> str:
    return XML_DECL + f'<w:ftr xmlns:w="{W_NS}"><w:p><w:r><w:t>{text}</w:t></w:r></w:p></w:ftr>'


def footnotes_xml(*notes: str) -> str:
    separators = (
        '<w:footnote w:type="separator" w:id="-1"><w:p><w:r><w:separator/></w:r></w:p></w:footnote>'
        '<w:footnote w:type="continuationSeparator" w:id="0"><w:p><w:r><w:continuationSeparator/></w:r></w:p></w:footnote>'
    )
    body = "".join(
        f'<w:footnote w:id="{i}"><w:p><w:r><w:t>{note}</w:t></w:r></w:p></w:footnote>'
        for i, note in enumerate(notes, start=1)
    )
    return XML_DECL + f'<w:footnotes xmlns:w="{W_NS}">{separators}{body}</w:footnotes>'


def build_docx(path: Path, parts: dict[str, str | bytes]) -> Path:
    """Zapisuje archiwum z [Content_Types].xml, _rels/.rels i podanymi częściami (kolejność słownika)."""
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        zf.writestr("_rels/.rels", ROOT_RELS)
        for name, data in parts.items():
            zf.writestr(name, data)
    return path


@pytest.fixture
def make_docx(tmp_path):
    """Fabryka archiwów: make_docx({"word/document.xml": ...}, name="x.docx")."""
    def _make(parts: dict[str, str | bytes], name: str = "doc.docx") -> Path:
        return build_docx(tmp_path / name, parts)
    return _make


@pytest.fixture
def plain_docx(make_docx):
    return make_docx({"word/document.xml": BODY}, name="test.docx")


@pytest.fixture
def header_footer_docx(make_docx):
    return make_docx(
        {
            "word/document.xml": BODY,
            "word/header1.xml": header_xml("test header"),
            "word/_rels/header1.xml.rels": ROOT_RELS,
            "word/footer1.xml": footer_xml("test footer"),
        },
        name="test_header_footer.docx",
    )
