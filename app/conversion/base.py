from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar


class BasePdfConverter(ABC):
    """Contract for adapters that turn an office document into a PDF file."""

    name: ClassVar[str]

    @abstractmethod
    def convert_to_pdf(self, input_path: Path, output_path: Path) -> Path:
        """Convert input_path to a PDF written at output_path.

        The returned path is guaranteed to exist when this method returns.

        Raises:
            ConversionError: on any failure.
        """
