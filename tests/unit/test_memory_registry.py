import threading
from pathlib import Path
from unittest.mock import patch

import pytest

from app.registry.exceptions import DocumentNotFoundError
from app.registry.memory_registry import InMemoryDocumentRegistry
from app.registry.models import DocumentDraft


def _draft(tmp_path: Path, name: str = "notes.txt") -> DocumentDraft:
    stored = tmp_path / f"stored-{name}"
    stored.write_text("content")
    pdf = tmp_path / f"{stored.stem}-canonical.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    return DocumentDraft(
        original_file_name=name,
        stored_file_name=stored.name,
        mime_type="text/plain",
        size=7,
        path=stored,
        pdf_path=pdf,
        extracted_text="content",
        preview="content",
    )


class TestInMemoryDocumentRegistry:
    def test_assigns_sequential_ids_from_one(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()

        first = registry.add(_draft(tmp_path, "a.txt"))
        second = registry.add(_draft(tmp_path, "b.txt"))

        assert (first.id, second.id) == (1, 2)
        assert [r.original_file_name for r in registry.list()] == ["a.txt", "b.txt"]
        assert len(registry) == 2

    def test_ids_are_never_reused(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        first = registry.add(_draft(tmp_path, "a.txt"))
        registry.delete(first.id)

        again = registry.add(_draft(tmp_path, "b.txt"))

        assert again.id == 2

    def test_get_returns_record(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        record = registry.add(_draft(tmp_path))

        assert registry.get(record.id) is record

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError, match="Document 9 not found"):
            InMemoryDocumentRegistry().get(9)

    def test_delete_removes_record_and_files(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        record = registry.add(_draft(tmp_path))

        deleted = registry.delete(record.id)

        assert deleted is record
        assert not record.path.exists()
        assert not record.pdf_path.exists()
        assert registry.list() == []
        with pytest.raises(DocumentNotFoundError):
            registry.get(record.id)

    def test_delete_unknown_raises(self) -> None:
        with pytest.raises(DocumentNotFoundError):
            InMemoryDocumentRegistry().delete(1)

    def test_delete_tolerates_missing_files(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        record = registry.add(_draft(tmp_path))
        record.pdf_path.unlink()

        registry.delete(record.id)

        assert not record.path.exists()
        assert len(registry) == 0

    def test_delete_tolerates_unlink_errors(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        record = registry.add(_draft(tmp_path))

        with patch.object(Path, "unlink", side_effect=PermissionError("locked")):
            registry.delete(record.id)

        assert len(registry) == 0

    def test_list_returns_a_copy(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        registry.add(_draft(tmp_path))

        registry.list().clear()

        assert len(registry) == 1

    def test_concurrent_adds_get_unique_ids(self, tmp_path: Path) -> None:
        registry = InMemoryDocumentRegistry()
        draft = _draft(tmp_path)

        threads = [
            threading.Thread(target=lambda: [registry.add(draft) for _ in range(25)])
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [r.id for r in registry.list()]
        assert sorted(ids) == list(range(1, 201))
