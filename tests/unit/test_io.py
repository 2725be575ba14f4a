"""Unit tests for contract import and export."""

import pytest
from docx import Document

from contract_wizard.io import (
    DocumentCorruptedError,
    UnsupportedFormatError,
    export_docx,
    export_filename,
    export_text,
    import_contract,
    render_text,
)


class TestImport:
    """Tests for import_contract."""

    def test_text_first_line_is_title(self, tmp_path):
        path = tmp_path / "contract.txt"
        path.write_text("Web Design Agreement\n\nThe Client agrees.\n", encoding="utf-8")

        imported = import_contract(path)

        assert imported.title == "Web Design Agreement"
        assert imported.content == "The Client agrees."

    def test_single_line_text(self, tmp_path):
        path = tmp_path / "one.txt"
        path.write_text("Only line", encoding="utf-8")

        imported = import_contract(path)

        assert imported.title == "Only line"
        assert imported.content == "Only line"

    def test_docx_title_from_heading(self, tmp_path):
        path = tmp_path / "contract.docx"
        doc = Document()
        doc.add_heading("Consulting Agreement", level=0)
        doc.add_paragraph("PARTIES")
        doc.add_paragraph("Client: {{clientName}}")
        doc.save(str(path))

        imported = import_contract(path)

        assert imported.title == "Consulting Agreement"
        assert imported.content == "PARTIES\nClient: {{clientName}}"

    def test_docx_without_heading_uses_stem(self, tmp_path):
        path = tmp_path / "plain.docx"
        doc = Document()
        doc.add_paragraph("Body text")
        doc.save(str(path))

        assert import_contract(path).title == "plain"

    def test_corrupted_docx(self, tmp_path):
        path = tmp_path / "broken.docx"
        path.write_bytes(b"not a zip file")

        with pytest.raises(DocumentCorruptedError) as exc_info:
            import_contract(path)

        assert exc_info.value.to_dict()["error_type"] == "DocumentCorruptedError"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "contract.rtf"
        path.write_text("{\\rtf1}", encoding="utf-8")

        with pytest.raises(UnsupportedFormatError) as exc_info:
            import_contract(path)

        assert ".docx" in exc_info.value.get_supported_formats()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            import_contract(tmp_path / "missing.txt")


class TestExport:
    """Tests for text and Word export."""

    def test_export_filename(self):
        assert export_filename("Web Design: v2", ".txt") == "Web_Design__v2.txt"
        assert export_filename("", ".docx") == "contract.docx"

    def test_render_text(self):
        assert render_text("", "Body") == "Contract Agreement\n" + "=" * 50 + "\n\nBody"

    def test_export_text(self, tmp_path):
        path = export_text("NDA", "Line", tmp_path / "out" / "nda.txt")

        assert path.read_text(encoding="utf-8") == "NDA\n" + "=" * 50 + "\n\nLine"

    def test_export_docx_round_trip(self, tmp_path):
        path = export_docx("Service Agreement", "PARTIES\nClient: Acme", tmp_path / "sa.docx")

        doc = Document(str(path))
        assert doc.paragraphs[0].text == "Service Agreement"
        assert doc.paragraphs[0].style.name == "Title"
        assert [p.text for p in doc.paragraphs[1:]] == ["PARTIES", "Client: Acme"]

        imported = import_contract(path)
        assert imported.title == "Service Agreement"
        assert imported.content == "PARTIES\nClient: Acme"
