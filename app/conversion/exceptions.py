class ConversionError(Exception):
    """Base exception for all PDF conversion failures."""


class ConverterNotFoundError(ConversionError):
    """Raised when no usable office-suite executable can be located."""


class FileWaitTimeoutError(ConversionError):
    """Raised when an expected output file never appears on disk."""


class ConversionUploadTargetMissingError(ConversionError):
    """Raised when the conversion service returns no upload form for the import task."""


class ConversionExportMissingError(ConversionError):
    """Raised when a finished conversion job exposes no exported file URL."""


class ConversionQuotaExceededError(ConversionError):
    """Raised when the conversion service reports exhausted credits (HTTP 402)."""


class ConversionRateLimitedError(ConversionError):
    """Raised when the conversion service rejects the call with HTTP 429."""
