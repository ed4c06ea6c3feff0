from pathlib import Path

from app.config.settings import Settings
from app.conversion.base import BasePdfConverter
from app.conversion.factory import ConverterFactory
from app.conversion.soffice_converter import SofficeConverter
from app.extraction.content_extractor import ContentExtractor, build_content_extractor
from app.extraction.file_kinds import FileKind, file_kind
from app.ingestion.exceptions import ConversionUnavailableError
from app.ingestion.models import IngestOutcome, IngestStrategy, UploadedFile
from app.ingestion.pipeline import PipelineContext, PipelineStep
from app.ingestion.steps import (
    BuildPreviewStep,
    ConvertToPdfStep,
    ExtractCanonicalPdfStep,
    ExtractOriginalStep,
    RegisterDocumentStep,
    RenderCanonicalPdfStep,
    VerifyCanonicalPdfStep,
)
from app.logging.logger import Log
from app.registry.base import BaseDocumentRegistry
from app.registry.models import DocumentRecord
from app.rendering.pdf_renderer import PdfRenderer

CANONICAL_SUFFIX = "-canonical.pdf"
CONVERTIBLE_KINDS = frozenset({FileKind.PRESENTATION})


class IngestionPipeline:
    """Turns one upload into a registered document with a canonical PDF.

    Pipeline: select strategy -> produce PDF -> extract -> verify -> preview -> register.
    DIRECT extracts the original and renders the PDF from the extracted
    content; the conversion strategies produce the PDF first and extract
    from it.
    """

    def __init__(
        self,
        *,
        content_extractor: ContentExtractor,
        renderer: PdfRenderer,
        registry: BaseDocumentRegistry,
        pdf_dir: Path,
        converter: BasePdfConverter | None = None,
        preview_length: int = 500,
    ) -> None:
        self._pdf_dir = pdf_dir
        self._converter = converter
        tail: list[PipelineStep] = [
            VerifyCanonicalPdfStep(),
            BuildPreviewStep(preview_length),
            RegisterDocumentStep(registry),
        ]
        self._steps: dict[IngestStrategy, list[PipelineStep]] = {
            IngestStrategy.DIRECT: [
                ExtractOriginalStep(content_extractor),
                RenderCanonicalPdfStep(renderer),
                *tail,
            ],
        }
        if converter is not None:
            self._steps[IngestStrategy(converter.name)] = [
                ConvertToPdfStep(converter),
                ExtractCanonicalPdfStep(content_extractor),
                *tail,
            ]

    @property
    def converter(self) -> BasePdfConverter | None:
        return self._converter

    def select_strategy(self, file_name: str, force_conversion: bool = False) -> IngestStrategy:
        """Pick how the canonical PDF is produced for file_name.

        Raises:
            ConversionUnavailableError: if conversion is forced but no converter is configured.
        """
        if file_kind(file_name) not in CONVERTIBLE_KINDS:
            return IngestStrategy.DIRECT
        if self._converter is not None:
            return IngestStrategy(self._converter.name)
        if force_conversion:
            raise ConversionUnavailableError(
                "No PDF converter is configured; set CONVERSION_ENGINE"
            )
        return IngestStrategy.DIRECT

    def canonical_pdf_path(self, stored_file_name: str) -> Path:
        return self._pdf_dir / f"{Path(stored_file_name).stem}{CANONICAL_SUFFIX}"

    def ingest(self, upload: UploadedFile, force_conversion: bool = False) -> DocumentRecord:
        """Process a single upload and register it."""
        strategy = self.select_strategy(upload.original_file_name, force_conversion)
        context = PipelineContext(
            upload=upload,
            pdf_path=self.canonical_pdf_path(upload.stored_file_name),
            strategy=strategy,
        )
        Log.info(
            f"Ingesting {upload.original_file_name} ({upload.size} bytes) "
            f"via {strategy.value}"
        )
        try:
            for step in self._steps[strategy]:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Ingestion of {upload.original_file_name} failed: {exc}")
            raise

        if context.record is None:
            raise ValueError("Pipeline finished without registering a document")
        return context.record

    def ingest_many(
        self, uploads: list[UploadedFile], force_conversion: bool = False
    ) -> list[IngestOutcome]:
        """Process uploads one after another; a failure never stops the rest."""
        outcomes: list[IngestOutcome] = []
        for upload in uploads:
            try:
                record = self.ingest(upload, force_conversion=force_conversion)
            except Exception as exc:
                outcomes.append(
                    IngestOutcome(
                        original_file_name=upload.original_file_name,
                        success=False,
                        message="Error processing file",
                        error=str(exc),
                    )
                )
                continue
            outcomes.append(
                IngestOutcome(
                    original_file_name=upload.original_file_name,
                    success=True,
                    message="File processed successfully",
                    record=record,
                )
            )
        Log.info(
            f"Batch finished: {sum(o.success for o in outcomes)}/{len(outcomes)} succeeded"
        )
        return outcomes


def build_pipeline(settings: Settings, registry: BaseDocumentRegistry) -> IngestionPipeline:
    """Build an IngestionPipeline with all adapters named by settings."""
    converter = ConverterFactory.create(settings)
    soffice = converter if isinstance(converter, SofficeConverter) else None
    return IngestionPipeline(
        content_extractor=build_content_extractor(settings, soffice=soffice),
        renderer=PdfRenderer(),
        registry=registry,
        pdf_dir=settings.pdf_dir,
        converter=converter,
        preview_length=settings.preview_length,
    )
