"""Response bodies. JSON keys are camelCase for the browser client."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.extraction.models import CellValue
from app.registry.models import DocumentRecord


def pdf_url(document_id: int) -> str:
    return f"/documents/{document_id}/pdf"


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentListItem(ApiModel):
    id: int
    original_file_name: str
    stored_file_name: str
    mime_type: str
    size: int
    pdf_url: str

    @classmethod
    def from_record(cls, record: DocumentRecord) -> "DocumentListItem":
        return cls(
            id=record.id,
            original_file_name=record.original_file_name,
            stored_file_name=record.stored_file_name,
            mime_type=record.mime_type,
            size=record.size,
            pdf_url=pdf_url(record.id),
        )


class DocumentListResponse(ApiModel):
    count: int
    items: list[DocumentListItem]


class DocumentSummary(DocumentListItem):
    preview: str
    is_table: bool

    @classmethod
    def from_record(cls, record: DocumentRecord) -> "DocumentSummary":
        return cls(
            **DocumentListItem.from_record(record).model_dump(),
            preview=record.preview,
            is_table=record.is_table,
        )


class DocumentDetail(DocumentListItem):
    extracted_text: str
    preview: str
    is_table: bool
    table_rows: list[list[CellValue]] | None = None

    @classmethod
    def from_record(cls, record: DocumentRecord) -> "DocumentDetail":
        return cls(
            **DocumentListItem.from_record(record).model_dump(),
            extracted_text=record.extracted_text,
            preview=record.preview,
            is_table=record.is_table,
            table_rows=record.table_rows,
        )


class UploadResponse(ApiModel):
    message: str
    document: DocumentSummary


class BatchUploadResult(ApiModel):
    success: bool
    message: str
    document: DocumentSummary | None = None
    original_file_name: str | None = None
    error: str | None = None


class BatchUploadResponse(ApiModel):
    message: str
    results: list[BatchUploadResult]


class DeleteResponse(ApiModel):
    success: bool
    id: int
