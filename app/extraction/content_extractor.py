from pathlib import Path

from app.config.settings import Settings
from app.conversion.factory import ConverterFactory
from app.conversion.soffice_converter import SofficeConverter
from app.extraction.base import BaseExtractor
from app.extraction.doc_extractor import LegacyDocExtractor
from app.extraction.docx_extractor import DocxExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.file_kinds import FileKind, file_kind
from app.extraction.models import ExtractionResult
from app.extraction.pdf_extractor import PdfContentExtractor
from app.extraction.presentation_extractor import PresentationExtractor
from app.extraction.table_extractor import TableContentExtractor
from app.extraction.text_extractor import PlainTextExtractor
from app.logging.logger import Log
from app.pdf.factory import PdfExtractorFactory


class ContentExtractor:
    """Routes a file to the extractor for its extension.

    Dispatch looks only at the extension of the original file name; the
    bytes are never sniffed, so a mislabelled file simply produces wrong or
    empty content.
    """

    def __init__(self, extractors: dict[FileKind, BaseExtractor]) -> None:
        if FileKind.TEXT not in extractors:
            raise ValueError("A FileKind.TEXT extractor is required as the fallback")
        self._extractors = extractors

    def extract(
        self,
        file_path: Path,
        mime_type: str,
        original_file_name: str,
    ) -> ExtractionResult:
        kind = file_kind(original_file_name)
        extractor = self._extractors.get(kind, self._extractors[FileKind.TEXT])
        Log.debug(
            f"Extracting {original_file_name} ({mime_type}) as {kind.value} "
            f"with {type(extractor).__name__}"
        )
        try:
            result = extractor.extract(file_path)
        except ExtractionError as exc:
            # Errors name the upload, never the stored file.
            raise ExtractionError(
                str(exc).replace(file_path.name, original_file_name)
            ) from exc
        Log.info(
            f"Extracted {len(result.extracted_text)} chars from {original_file_name}"
            + (f" ({len(result.table_rows or [])} rows)" if result.is_table else "")
        )
        return result


def build_content_extractor(
    settings: Settings,
    soffice: SofficeConverter | None = None,
) -> ContentExtractor:
    """Wire every per-format extractor from application settings."""
    soffice = soffice or ConverterFactory.create_soffice(settings)
    return ContentExtractor(
        {
            FileKind.TEXT: PlainTextExtractor(),
            FileKind.PDF: PdfContentExtractor(PdfExtractorFactory.create(settings)),
            FileKind.DOCX: DocxExtractor(),
            FileKind.DOC: LegacyDocExtractor(soffice),
            FileKind.PRESENTATION: PresentationExtractor(),
            FileKind.TABLE: TableContentExtractor(),
        }
    )
