class IngestionError(Exception):
    """Base exception for ingestion pipeline failures."""


class ConversionUnavailableError(IngestionError):
    """Raised when conversion is required but no converter is configured."""


class CanonicalPdfMissingError(IngestionError):
    """Raised when the canonical PDF is absent after the rendering step."""
