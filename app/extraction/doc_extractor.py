import tempfile
from pathlib import Path

from app.conversion.exceptions import ConversionError
from app.conversion.soffice_converter import SofficeConverter
from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractionResult
from app.extraction.text_extractor import decode_text


class LegacyDocExtractor(BaseExtractor):
    """Extracts text from binary Word (.doc) files.

    python-docx cannot read the OLE2 format, so the office suite exports
    the document to plain text in a scratch directory first.
    """

    TEXT_FILTER = "txt:Text (encoded):UTF8"

    def __init__(self, soffice: SofficeConverter) -> None:
        self._soffice = soffice

    def extract(self, file_path: Path) -> ExtractionResult:
        with tempfile.TemporaryDirectory(prefix="doc-extract-") as scratch:
            try:
                produced = self._soffice.convert(file_path, self.TEXT_FILTER, Path(scratch))
                text = decode_text(produced.read_bytes(), "utf-8-sig")
            except (ConversionError, OSError) as exc:
                raise ExtractionError(
                    f"Could not extract text from {file_path.name}: {exc}"
                ) from exc
        return ExtractionResult(extracted_text=text.strip())
