import secrets
import shutil
import time
from pathlib import Path

from fastapi import UploadFile

from app.api.exceptions import InvalidRequestError
from app.ingestion.models import UploadedFile
from app.logging.logger import Log

DEFAULT_MIME_TYPE = "application/octet-stream"


class UploadStore:
    """Persists multipart uploads under the uploads directory.

    Stored names are `<epoch millis>-<9 random digits><original extension>`,
    so two uploads of the same file never collide.
    """

    def __init__(self, uploads_dir: Path) -> None:
        self._uploads_dir = uploads_dir

    def stored_name_for(self, original_file_name: str) -> str:
        ext = Path(original_file_name).suffix.lower()
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9):09d}{ext}"

    def save(self, upload: UploadFile) -> UploadedFile:
        original_file_name = Path(upload.filename or "").name
        if not original_file_name:
            raise InvalidRequestError("Uploaded file has no file name")

        self._uploads_dir.mkdir(parents=True, exist_ok=True)
        stored_file_name = self.stored_name_for(original_file_name)
        path = (self._uploads_dir / stored_file_name).resolve()
        with path.open("wb") as out:
            shutil.copyfileobj(upload.file, out)
        size = path.stat().st_size

        Log.info(f"Stored upload {original_file_name} ({size} bytes) as {stored_file_name}")
        return UploadedFile(
            original_file_name=original_file_name,
            stored_file_name=stored_file_name,
            mime_type=upload.content_type or DEFAULT_MIME_TYPE,
            size=size,
            path=path,
        )
