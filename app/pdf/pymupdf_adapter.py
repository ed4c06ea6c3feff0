from pathlib import Path

import pymupdf

from app.pdf.base import BasePdfTextExtractor
from app.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_path: Path) -> str:
        try:
            with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf could not read {pdf_path.name}: {exc}"
            ) from exc
        return "\n".join(p.strip() for p in pages if p.strip()).strip()
