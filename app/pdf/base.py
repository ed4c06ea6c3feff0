from abc import ABC, abstractmethod
from pathlib import Path


class BasePdfTextExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_path: Path) -> str:
        """Extract plain text from a PDF file on disk.

        Pages without a text layer contribute nothing, so a scanned or
        blank PDF yields an empty string rather than an error.

        Raises:
            PdfExtractionError: if the file is not a readable PDF.
        """
