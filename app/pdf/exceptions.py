class PdfExtractionError(Exception):
    """Raised when a PDF file cannot be opened or parsed."""
