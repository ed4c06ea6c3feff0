from abc import ABC, abstractmethod

from app.registry.models import DocumentDraft, DocumentRecord


class BaseDocumentRegistry(ABC):
    """Contract for document stores. Implementations own id allocation."""

    @abstractmethod
    def add(self, draft: DocumentDraft) -> DocumentRecord:
        """Assign the next id to draft and store the resulting record."""

    @abstractmethod
    def list(self) -> list[DocumentRecord]:
        """All records in insertion order."""

    @abstractmethod
    def get(self, document_id: int) -> DocumentRecord:
        """Raises:
            DocumentNotFoundError: if the id is unknown.
        """

    @abstractmethod
    def delete(self, document_id: int) -> DocumentRecord:
        """Remove a record and best-effort delete its backing files.

        Raises:
            DocumentNotFoundError: if the id is unknown.
        """

    @abstractmethod
    def __len__(self) -> int: ...
