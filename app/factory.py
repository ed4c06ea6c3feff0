"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.documents import documents_router
from app.api.errors import register_error_handlers
from app.api.upload_store import UploadStore
from app.config.settings import Settings
from app.ingestion.ingestion_pipeline import IngestionPipeline, build_pipeline
from app.logging.logger import Log
from app.registry.base import BaseDocumentRegistry
from app.registry.memory_registry import InMemoryDocumentRegistry


def create_app(
    settings: Settings | None = None,
    registry: BaseDocumentRegistry | None = None,
    pipeline: IngestionPipeline | None = None,
) -> FastAPI:
    """Build the HTTP app. Registry and pipeline may be injected for tests."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    settings.pdf_dir.mkdir(parents=True, exist_ok=True)

    registry = registry or InMemoryDocumentRegistry()
    pipeline = pipeline or build_pipeline(settings, registry)

    app = FastAPI(title="Document ingestion backend", version="1.0.0")
    app.state.settings = settings
    app.state.registry = registry
    app.state.pipeline = pipeline
    app.state.upload_store = UploadStore(settings.uploads_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/")
    def health() -> dict[str, str]:
        return {"message": "Document backend is running"}

    app.include_router(documents_router)

    converter = pipeline.converter
    Log.info(
        f"App ready (env={settings.app_env}, uploads={settings.uploads_dir}, "
        f"converter={converter.name if converter else 'none'})"
    )
    return app
