from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from app.extraction.models import ExtractionResult
from app.ingestion.models import IngestStrategy, UploadedFile
from app.registry.models import DocumentRecord


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    pdf_path: Path
    strategy: IngestStrategy = IngestStrategy.DIRECT
    extraction: ExtractionResult | None = None
    preview: str = ""
    record: DocumentRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
