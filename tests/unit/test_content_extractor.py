from pathlib import Path
from unittest.mock import MagicMock

import pytest
from docx import Document as DocxDocument
from pptx import Presentation
from pptx.util import Inches

from app.config.settings import Settings
from app.conversion.exceptions import ConverterNotFoundError
from app.conversion.soffice_converter import SofficeConverter
from app.extraction.base import BaseExtractor
from app.extraction.content_extractor import ContentExtractor, build_content_extractor
from app.extraction.doc_extractor import LegacyDocExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.file_kinds import FileKind, file_kind
from app.extraction.models import ExtractionResult
from app.extraction.presentation_extractor import PLACEHOLDER_TEXT, PresentationExtractor
from app.extraction.text_extractor import PlainTextExtractor


@pytest.fixture()
def extractor() -> ContentExtractor:
    return build_content_extractor(Settings(), soffice=MagicMock(spec=SofficeConverter))


class TestFileKind:
    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("notes.TXT", FileKind.TEXT),
            ("report.pdf", FileKind.PDF),
            ("letter.docx", FileKind.DOCX),
            ("old.doc", FileKind.DOC),
            ("deck.pptx", FileKind.PRESENTATION),
            ("deck.ppt", FileKind.PRESENTATION),
            ("deck.odp", FileKind.PRESENTATION),
            ("data.csv", FileKind.TABLE),
            ("data.XLS", FileKind.TABLE),
            ("data.xlsx", FileKind.TABLE),
            ("README", FileKind.TEXT),
            ("page.html", FileKind.TEXT),
        ],
    )
    def test_maps_extension(self, name: str, kind: FileKind) -> None:
        assert file_kind(name) is kind


class TestDispatch:
    def test_txt_is_read_verbatim(self, extractor: ContentExtractor, tmp_path: Path) -> None:
        path = tmp_path / "stored-1.txt"
        path.write_text("line one\n  line two\n", encoding="utf-8")

        result = extractor.extract(path, "text/plain", "notes.txt")

        assert result == ExtractionResult(extracted_text="line one\n  line two\n")

    @pytest.mark.parametrize("content", [b"line one\r\nline two\r\n", b"old mac\rline\r"])
    def test_txt_keeps_line_endings(
        self, extractor: ContentExtractor, tmp_path: Path, content: bytes
    ) -> None:
        path = tmp_path / "stored-3.txt"
        path.write_bytes(content)

        result = extractor.extract(path, "text/plain", "windows.txt")

        assert result.extracted_text == content.decode("utf-8")

    def test_errors_name_the_original_file(
        self, extractor: ContentExtractor, tmp_path: Path
    ) -> None:
        with pytest.raises(ExtractionError, match="notes.txt") as exc_info:
            extractor.extract(tmp_path / "1700000000000-000000042.txt", "text/plain", "notes.txt")

        assert "1700000000000-000000042" not in str(exc_info.value)

    def test_unknown_extension_falls_back_to_text(
        self, extractor: ContentExtractor, tmp_path: Path
    ) -> None:
        path = tmp_path / "stored-2.md"
        path.write_text("# Title", encoding="utf-8")

        result = extractor.extract(path, "text/markdown", "readme.md")

        assert result.extracted_text == "# Title"
        assert result.is_table is False

    def test_dispatch_uses_original_name_not_stored_name(self, tmp_path: Path) -> None:
        text = MagicMock(spec=BaseExtractor)
        pdf = MagicMock(spec=BaseExtractor)
        pdf.extract.return_value = ExtractionResult(extracted_text="from pdf")
        extractor = ContentExtractor({FileKind.TEXT: text, FileKind.PDF: pdf})

        result = extractor.extract(tmp_path / "blob.bin", "application/pdf", "Report.PDF")

        assert result.extracted_text == "from pdf"
        text.extract.assert_not_called()

    def test_missing_kind_uses_text_fallback(self, tmp_path: Path) -> None:
        text = MagicMock(spec=BaseExtractor)
        text.extract.return_value = ExtractionResult(extracted_text="plain")
        extractor = ContentExtractor({FileKind.TEXT: text})

        result = extractor.extract(tmp_path / "x.docx", "", "x.docx")

        assert result.extracted_text == "plain"

    def test_requires_text_fallback(self) -> None:
        with pytest.raises(ValueError, match="FileKind.TEXT"):
            ContentExtractor({})

    def test_pdf(self, extractor: ContentExtractor, sample_pdf_path: Path) -> None:
        result = extractor.extract(sample_pdf_path, "application/pdf", "sample.pdf")
        assert "Hello PDF World" in result.extracted_text

    def test_pdf_without_text_is_empty(
        self, extractor: ContentExtractor, empty_pdf_path: Path
    ) -> None:
        result = extractor.extract(empty_pdf_path, "application/pdf", "blank.pdf")
        assert result.extracted_text == ""

    def test_broken_pdf_raises_extraction_error(
        self, extractor: ContentExtractor, broken_pdf_path: Path
    ) -> None:
        with pytest.raises(ExtractionError):
            extractor.extract(broken_pdf_path, "application/pdf", "broken.pdf")

    def test_docx(self, extractor: ContentExtractor, tmp_path: Path) -> None:
        path = tmp_path / "letter.docx"
        document = DocxDocument()
        document.add_paragraph("Dear reader,")
        document.add_paragraph("Second paragraph.")
        document.save(str(path))

        result = extractor.extract(path, "application/vnd.openxmlformats", "letter.docx")

        assert result.extracted_text == "Dear reader,\nSecond paragraph."

    def test_csv_is_tabular(self, extractor: ContentExtractor, tmp_path: Path) -> None:
        path = tmp_path / "stored.csv"
        path.write_text("Name,Age\nJohn,30\n", encoding="utf-8")

        result = extractor.extract(path, "text/csv", "people.csv")

        assert result.is_table is True
        assert result.table_rows == [["Name", "Age"], ["John", "30"]]
        assert result.extracted_text == "Name\tAge\nJohn\t30"


class TestPlainTextExtractor:
    def test_latin1_fallback(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.txt"
        path.write_bytes("café".encode("latin-1"))

        assert PlainTextExtractor().extract(path).extracted_text == "café"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="missing.txt"):
            PlainTextExtractor().extract(tmp_path / "missing.txt")


class TestPresentationExtractor:
    def test_reads_slide_text(self, tmp_path: Path) -> None:
        path = tmp_path / "deck.pptx"
        presentation = Presentation()
        slide = presentation.slides.add_slide(presentation.slide_layouts[5])
        slide.shapes.title.text = "Quarterly results"
        box = slide.shapes.add_textbox(Inches(1), Inches(2), Inches(4), Inches(1))
        box.text_frame.text = "Revenue grew"
        presentation.save(str(path))

        result = PresentationExtractor().extract(path)

        assert "Quarterly results" in result.extracted_text
        assert "Revenue grew" in result.extracted_text

    def test_unreadable_presentation_returns_placeholder(self, tmp_path: Path) -> None:
        path = tmp_path / "old.ppt"
        path.write_bytes(b"\xd0\xcf\x11\xe0 legacy binary")

        result = PresentationExtractor().extract(path)

        assert result.extracted_text == PLACEHOLDER_TEXT


class TestLegacyDocExtractor:
    def test_reads_text_exported_by_soffice(self, tmp_path: Path) -> None:
        soffice = MagicMock(spec=SofficeConverter)

        def fake_convert(input_path: Path, target_format: str, out_dir: Path) -> Path:
            produced = out_dir / f"{input_path.stem}.txt"
            produced.write_text("\ufeffLegacy words\n", encoding="utf-8")
            return produced

        soffice.convert.side_effect = fake_convert

        result = LegacyDocExtractor(soffice).extract(tmp_path / "old.doc")

        assert result.extracted_text == "Legacy words"
        assert soffice.convert.call_args.args[1].startswith("txt")

    def test_missing_office_suite_raises_extraction_error(self, tmp_path: Path) -> None:
        soffice = MagicMock(spec=SofficeConverter)
        soffice.convert.side_effect = ConverterNotFoundError("no soffice")

        with pytest.raises(ExtractionError, match="no soffice"):
            LegacyDocExtractor(soffice).extract(tmp_path / "old.doc")
