from enum import Enum
from pathlib import PurePath


class FileKind(Enum):
    """Content families the extractor knows how to read."""

    TEXT = "text"
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    PRESENTATION = "presentation"
    TABLE = "table"


EXTENSION_KINDS: dict[str, FileKind] = {
    ".txt": FileKind.TEXT,
    ".pdf": FileKind.PDF,
    ".docx": FileKind.DOCX,
    ".doc": FileKind.DOC,
    ".ppt": FileKind.PRESENTATION,
    ".pptx": FileKind.PRESENTATION,
    ".odp": FileKind.PRESENTATION,
    ".csv": FileKind.TABLE,
    ".xls": FileKind.TABLE,
    ".xlsx": FileKind.TABLE,
}


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lower()


def file_kind(file_name: str) -> FileKind:
    """Kind for a file name; unknown extensions are read as plain text."""
    return EXTENSION_KINDS.get(file_extension(file_name), FileKind.TEXT)
