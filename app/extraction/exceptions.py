class ExtractionError(Exception):
    """Raised when content cannot be extracted from an uploaded file."""
