from pathlib import Path

import pdfplumber

from app.pdf.base import BasePdfTextExtractor
from app.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_path: Path) -> str:
        try:
            with pdfplumber.open(pdf_path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber could not read {pdf_path.name}: {exc}"
            ) from exc
        return "\n".join(p for p in pages if p).strip()
