import zipfile
from pathlib import Path

from pptx import Presentation
from pptx.exc import PackageNotFoundError

from app.extraction.base import BaseExtractor
from app.extraction.models import ExtractionResult
from app.logging.logger import Log

PLACEHOLDER_TEXT = "[Text extraction is not available for this presentation]"


class PresentationExtractor(BaseExtractor):
    """Best-effort slide text via python-pptx.

    Formats python-pptx cannot open (.ppt, .odp, damaged files) yield a
    fixed placeholder instead of an error.
    """

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            presentation = Presentation(str(file_path))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
            Log.warning(f"No slide text for {file_path.name}: {exc}")
            return ExtractionResult(extracted_text=PLACEHOLDER_TEXT)

        slides: list[str] = []
        for slide in presentation.slides:
            parts: list[str] = []
            for shape in slide.shapes:
                if shape.has_text_frame and shape.text_frame.text.strip():
                    parts.append(shape.text_frame.text.strip())
                elif getattr(shape, "has_table", False) and shape.has_table:
                    for row in shape.table.rows:
                        parts.append("\t".join(cell.text for cell in row.cells))
            if parts:
                slides.append("\n".join(parts))
        return ExtractionResult(extracted_text="\n\n".join(slides))
