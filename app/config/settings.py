from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: str = "http://localhost:5173"

    uploads_dir: Path = Path("uploads")
    max_files_per_upload: int = 50
    preview_length: int = 500

    pdf_engine: str = "pdfplumber"

    # none | cloudconvert | soffice
    conversion_engine: str = "none"
    conversion_wait_seconds: float = 60.0

    cloudconvert_api_key: str = ""
    cloudconvert_base_url: str = "https://api.cloudconvert.com/v2"
    cloudconvert_sync_base_url: str = "https://sync.api.cloudconvert.com/v2"
    cloudconvert_timeout_seconds: int = 300

    soffice_path: str = ""
    soffice_timeout_seconds: int = 120

    @property
    def pdf_dir(self) -> Path:
        """Directory holding generated canonical PDFs."""
        return self.uploads_dir / "pdfs"

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
