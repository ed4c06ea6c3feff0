from pathlib import Path

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractionResult

FALLBACK_ENCODING = "latin-1"


def decode_text(raw: bytes, encoding: str = "utf-8") -> str:
    """Decode raw bytes without touching line endings.

    Bytes that are not valid in `encoding` are read as latin-1, which
    accepts any byte sequence (Windows cp1252 exports included).
    """
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        return raw.decode(FALLBACK_ENCODING)


class PlainTextExtractor(BaseExtractor):
    """Reads a file verbatim as text. Also the fallback for unknown extensions."""

    def extract(self, file_path: Path) -> ExtractionResult:
        try:
            raw = file_path.read_bytes()
        except OSError as exc:
            raise ExtractionError(f"Could not read {file_path.name}: {exc}") from exc
        return ExtractionResult(extracted_text=decode_text(raw))
