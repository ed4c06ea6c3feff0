from pathlib import Path

from docx import Document as DocxDocument

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractionResult


class DocxExtractor(BaseExtractor):
    """Extracts raw paragraph text from .docx files with python-docx."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            document = DocxDocument(str(file_path))
        except Exception as exc:
            raise ExtractionError(f"Could not open {file_path.name} as DOCX: {exc}") from exc
        paragraphs = [para.text for para in document.paragraphs]
        return ExtractionResult(extracted_text="\n".join(paragraphs).strip())
