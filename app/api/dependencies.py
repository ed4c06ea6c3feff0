from fastapi import Request

from app.api.upload_store import UploadStore
from app.config.settings import Settings
from app.ingestion.ingestion_pipeline import IngestionPipeline
from app.registry.base import BaseDocumentRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> BaseDocumentRegistry:
    return request.app.state.registry


def get_pipeline(request: Request) -> IngestionPipeline:
    return request.app.state.pipeline


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store
