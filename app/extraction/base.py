from abc import ABC, abstractmethod
from pathlib import Path

from app.extraction.models import ExtractionResult


class BaseExtractor(ABC):
    """Contract for all per-format content extractors."""

    @abstractmethod
    def extract(self, file_path: Path) -> ExtractionResult:
        """Extract text (and rows, for tabular formats) from a file on disk.

        Raises:
            ExtractionError: if the file cannot be read.
        """
