import itertools
import threading
from pathlib import Path

from app.logging.logger import Log
from app.registry.base import BaseDocumentRegistry
from app.registry.exceptions import DocumentNotFoundError
from app.registry.models import DocumentDraft, DocumentRecord


class InMemoryDocumentRegistry(BaseDocumentRegistry):
    """Process-local registry. Contents are lost on restart.

    A single lock guards id allocation and the record list so concurrent
    request threads never see duplicate or lost ids.
    """

    def __init__(self) -> None:
        self._records: list[DocumentRecord] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, draft: DocumentDraft) -> DocumentRecord:
        with self._lock:
            record = DocumentRecord.from_draft(next(self._ids), draft)
            self._records.append(record)
        Log.info(f"Registered document {record.id} ({record.original_file_name})")
        return record

    def list(self) -> list[DocumentRecord]:
        with self._lock:
            return list(self._records)

    def get(self, document_id: int) -> DocumentRecord:
        with self._lock:
            for record in self._records:
                if record.id == document_id:
                    return record
        raise DocumentNotFoundError(f"Document {document_id} not found")

    def delete(self, document_id: int) -> DocumentRecord:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == document_id:
                    del self._records[index]
                    break
            else:
                raise DocumentNotFoundError(f"Document {document_id} not found")

        for path in (record.path, record.pdf_path):
            self._remove_file(path)
        Log.info(f"Deleted document {document_id}")
        return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @staticmethod
    def _remove_file(path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            Log.debug(f"{path} already gone")
        except OSError as exc:
            Log.warning(f"Could not delete {path}: {exc}")
