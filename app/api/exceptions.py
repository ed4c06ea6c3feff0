class ApiError(Exception):
    """Base exception for request-level errors raised by the HTTP layer."""


class InvalidRequestError(ApiError):
    """Raised for malformed client input such as a missing file or a bad id."""


class PdfNotFoundError(ApiError):
    """Raised when a registered document's PDF is no longer on disk."""
