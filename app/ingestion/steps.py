from app.conversion.base import BasePdfConverter
from app.extraction.content_extractor import ContentExtractor
from app.ingestion.exceptions import CanonicalPdfMissingError
from app.ingestion.models import make_preview
from app.ingestion.pipeline import PipelineContext, PipelineStep
from app.logging.logger import Log
from app.registry.base import BaseDocumentRegistry
from app.registry.models import DocumentDraft
from app.rendering.pdf_renderer import PdfRenderer

PDF_MIME_TYPE = "application/pdf"


class ExtractOriginalStep(PipelineStep):
    """Extracts content from the uploaded file itself."""

    def __init__(self, content_extractor: ContentExtractor) -> None:
        self._content_extractor = content_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        context.extraction = self._content_extractor.extract(
            upload.path, upload.mime_type, upload.original_file_name
        )
        return context


class ExtractCanonicalPdfStep(PipelineStep):
    """Extracts content from the generated PDF rather than the original upload."""

    def __init__(self, content_extractor: ContentExtractor) -> None:
        self._content_extractor = content_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extraction = self._content_extractor.extract(
            context.pdf_path, PDF_MIME_TYPE, context.pdf_path.name
        )
        return context


class RenderCanonicalPdfStep(PipelineStep):
    def __init__(self, renderer: PdfRenderer) -> None:
        self._renderer = renderer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before rendering")
        extraction = context.extraction
        if extraction.is_table and extraction.table_rows is not None:
            self._renderer.create_pdf_from_table(extraction.table_rows, context.pdf_path)
        else:
            self._renderer.create_pdf_from_text(extraction.extracted_text, context.pdf_path)
        return context


class ConvertToPdfStep(PipelineStep):
    def __init__(self, converter: BasePdfConverter) -> None:
        self._converter = converter

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info(
            f"Converting {context.upload.original_file_name} with {self._converter.name}"
        )
        self._converter.convert_to_pdf(context.upload.path, context.pdf_path)
        return context


class VerifyCanonicalPdfStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.pdf_path.is_file():
            raise CanonicalPdfMissingError(
                f"Canonical PDF {context.pdf_path.name} was not created"
            )
        return context


class BuildPreviewStep(PipelineStep):
    def __init__(self, preview_length: int = 500) -> None:
        self._preview_length = preview_length

    def run(self, context: PipelineContext) -> PipelineContext:
        text = context.extraction.extracted_text if context.extraction else ""
        context.preview = make_preview(text, self._preview_length)
        return context


class RegisterDocumentStep(PipelineStep):
    def __init__(self, registry: BaseDocumentRegistry) -> None:
        self._registry = registry

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before registering")
        upload = context.upload
        extraction = context.extraction
        is_table = extraction.is_table and extraction.table_rows is not None
        draft = DocumentDraft(
            original_file_name=upload.original_file_name,
            stored_file_name=upload.stored_file_name,
            mime_type=upload.mime_type,
            size=upload.size,
            path=upload.path.resolve(),
            pdf_path=context.pdf_path.resolve(),
            extracted_text=extraction.extracted_text,
            preview=context.preview,
            is_table=is_table,
            table_rows=extraction.table_rows if is_table else None,
            strategy=context.strategy.value,
        )
        context.record = self._registry.add(draft)
        return context
