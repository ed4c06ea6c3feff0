from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from app.registry.models import DocumentRecord


class IngestStrategy(Enum):
    """How the canonical PDF of an upload is produced."""

    DIRECT = "direct"
    CLOUD_CONVERT = "cloudconvert"
    LOCAL_CONVERT = "soffice"


@dataclass(frozen=True)
class UploadedFile:
    """An upload already persisted to disk by the HTTP layer."""

    original_file_name: str
    stored_file_name: str
    mime_type: str
    size: int
    path: Path


@dataclass(frozen=True)
class IngestOutcome:
    """Per-file result of a batch upload."""

    original_file_name: str
    success: bool
    message: str
    record: DocumentRecord | None = None
    error: str | None = None


def make_preview(text: str, length: int = 500) -> str:
    """First `length` characters of text, with '...' appended when cut."""
    return text[:length] + "..." if len(text) > length else text
