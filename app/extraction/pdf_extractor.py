from pathlib import Path

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractionResult
from app.pdf.base import BasePdfTextExtractor
from app.pdf.exceptions import PdfExtractionError


class PdfContentExtractor(BaseExtractor):
    """Delegates to the configured PDF text adapter."""

    def __init__(self, pdf_extractor: BasePdfTextExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            text = self._pdf_extractor.extract(file_path)
        except PdfExtractionError as exc:
            raise ExtractionError(str(exc)) from exc
        return ExtractionResult(extracted_text=text)
