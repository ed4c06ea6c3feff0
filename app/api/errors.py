"""Maps domain exceptions to HTTP responses with a `{message}` body."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.exceptions import InvalidRequestError, PdfNotFoundError
from app.conversion.exceptions import (
    ConversionError,
    ConversionQuotaExceededError,
    ConversionRateLimitedError,
)
from app.extraction.exceptions import ExtractionError
from app.ingestion.exceptions import ConversionUnavailableError, IngestionError
from app.logging.logger import Log
from app.registry.exceptions import DocumentNotFoundError
from app.rendering.exceptions import RenderError

STATUS_BY_ERROR: dict[type[Exception], int] = {
    InvalidRequestError: 400,
    DocumentNotFoundError: 404,
    PdfNotFoundError: 404,
    ConversionQuotaExceededError: 402,
    ConversionRateLimitedError: 429,
    ConversionUnavailableError: 503,
}
PROCESSING_ERRORS: tuple[type[Exception], ...] = (
    ExtractionError,
    RenderError,
    ConversionError,
    IngestionError,
    OSError,
)


async def _client_error(request: Request, exc: Exception) -> JSONResponse:
    status = next(
        code for error_cls, code in STATUS_BY_ERROR.items() if isinstance(exc, error_cls)
    )
    Log.warning(f"{request.method} {request.url.path} -> {status}: {exc}")
    return JSONResponse(status_code=status, content={"message": str(exc)})


async def _processing_error(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "Error processing file", "error": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    for error_cls in PROCESSING_ERRORS:
        app.add_exception_handler(error_cls, _processing_error)
    for error_cls in STATUS_BY_ERROR:
        app.add_exception_handler(error_cls, _client_error)
