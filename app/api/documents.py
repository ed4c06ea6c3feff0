"""
Document endpoints.

GET    /documents                      list registered documents
GET    /documents/{id}                 full record
POST   /documents/upload               `file` (single) or `files` (batch)
POST   /documents/upload-and-convert   single file, presentations must be converted
GET    /documents/{id}/pdf             canonical PDF
DELETE /documents/{id}                 remove record and backing files
"""

from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.api.dependencies import get_pipeline, get_registry, get_settings, get_upload_store
from app.api.exceptions import InvalidRequestError, PdfNotFoundError
from app.api.schemas import (
    BatchUploadResponse,
    BatchUploadResult,
    DeleteResponse,
    DocumentDetail,
    DocumentListItem,
    DocumentListResponse,
    DocumentSummary,
    UploadResponse,
)
from app.api.upload_store import UploadStore
from app.config.settings import Settings
from app.ingestion.ingestion_pipeline import IngestionPipeline
from app.ingestion.models import IngestOutcome
from app.logging.logger import Log
from app.registry.base import BaseDocumentRegistry

documents_router = APIRouter(prefix="/documents", tags=["documents"])


def parse_document_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()) or int(raw) < 1:
        raise InvalidRequestError(f"Invalid document id: {raw!r}")
    return int(raw)


def _batch_result(outcome: IngestOutcome) -> BatchUploadResult:
    if outcome.record is not None:
        return BatchUploadResult(
            success=True,
            message=outcome.message,
            document=DocumentSummary.from_record(outcome.record),
        )
    return BatchUploadResult(
        success=False,
        message=outcome.message,
        original_file_name=outcome.original_file_name,
        error=outcome.error,
    )


@documents_router.get("", response_model=DocumentListResponse)
def list_documents(registry: BaseDocumentRegistry = Depends(get_registry)):
    items = [DocumentListItem.from_record(r) for r in registry.list()]
    return DocumentListResponse(count=len(items), items=items)


@documents_router.get("/{document_id}", response_model=DocumentDetail)
def get_document(document_id: str, registry: BaseDocumentRegistry = Depends(get_registry)):
    return DocumentDetail.from_record(registry.get(parse_document_id(document_id)))


@documents_router.post(
    "/upload",
    status_code=201,
    response_model=UploadResponse | BatchUploadResponse,
    response_model_exclude_none=True,
)
def upload_documents(
    file: UploadFile | None = File(None),
    files: list[UploadFile] | None = File(None),
    settings: Settings = Depends(get_settings),
    store: UploadStore = Depends(get_upload_store),
    pipeline: IngestionPipeline = Depends(get_pipeline),
):
    """Upload one file (`file`) or several (`files`).

    A batch is processed sequentially and always answers 201 with one
    result per file; a single upload fails the whole request on error.
    """
    if files:
        if len(files) > settings.max_files_per_upload:
            raise InvalidRequestError(
                f"Too many files: {len(files)} (max {settings.max_files_per_upload})"
            )
        uploads = [store.save(f) for f in files]
        results = [_batch_result(o) for o in pipeline.ingest_many(uploads)]
        ok = sum(r.success for r in results)
        return BatchUploadResponse(
            message=f"Processed {ok} of {len(results)} files",
            results=results,
        )

    if file is None:
        raise InvalidRequestError("No file uploaded")
    record = pipeline.ingest(store.save(file))
    return UploadResponse(
        message="File processed successfully",
        document=DocumentSummary.from_record(record),
    )


@documents_router.post(
    "/upload-and-convert",
    status_code=201,
    response_model=UploadResponse,
)
def upload_and_convert(
    file: UploadFile | None = File(None),
    store: UploadStore = Depends(get_upload_store),
    pipeline: IngestionPipeline = Depends(get_pipeline),
):
    """Like a single upload, but presentations must go through the PDF converter."""
    if file is None:
        raise InvalidRequestError("No file uploaded")
    pipeline.select_strategy(file.filename or "", force_conversion=True)
    record = pipeline.ingest(store.save(file), force_conversion=True)
    return UploadResponse(
        message="File converted successfully",
        document=DocumentSummary.from_record(record),
    )


@documents_router.get("/{document_id}/pdf", response_class=FileResponse)
def download_document_pdf(
    document_id: str, registry: BaseDocumentRegistry = Depends(get_registry)
):
    record = registry.get(parse_document_id(document_id))
    if not record.pdf_path.is_file():
        Log.warning(f"PDF for document {record.id} missing at {record.pdf_path}")
        raise PdfNotFoundError(f"PDF for document {record.id} not found")
    return FileResponse(
        record.pdf_path,
        media_type="application/pdf",
        filename=f"{Path(record.original_file_name).stem}.pdf",
        content_disposition_type="inline",
    )


@documents_router.delete("/{document_id}", response_model=DeleteResponse)
def delete_document(document_id: str, registry: BaseDocumentRegistry = Depends(get_registry)):
    record = registry.delete(parse_document_id(document_id))
    return DeleteResponse(success=True, id=record.id)
