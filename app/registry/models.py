from dataclasses import dataclass, field
from pathlib import Path

from app.extraction.models import TableRows


@dataclass(frozen=True)
class DocumentDraft:
    """Everything about a processed upload except its id."""

    original_file_name: str
    stored_file_name: str
    mime_type: str
    size: int
    path: Path
    pdf_path: Path
    extracted_text: str = ""
    preview: str = ""
    is_table: bool = False
    table_rows: TableRows | None = None
    strategy: str = "direct"


@dataclass(frozen=True)
class DocumentRecord:
    """A registered document. Immutable once created."""

    id: int
    original_file_name: str
    stored_file_name: str
    mime_type: str
    size: int
    path: Path
    pdf_path: Path
    extracted_text: str = ""
    preview: str = ""
    is_table: bool = False
    table_rows: TableRows | None = field(default=None)
    strategy: str = "direct"

    @classmethod
    def from_draft(cls, document_id: int, draft: DocumentDraft) -> "DocumentRecord":
        return cls(
            id=document_id,
            original_file_name=draft.original_file_name,
            stored_file_name=draft.stored_file_name,
            mime_type=draft.mime_type,
            size=draft.size,
            path=draft.path,
            pdf_path=draft.pdf_path,
            extracted_text=draft.extracted_text,
            preview=draft.preview,
            is_table=draft.is_table,
            table_rows=draft.table_rows,
            strategy=draft.strategy,
        )
