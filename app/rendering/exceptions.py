class RenderError(Exception):
    """Raised when a canonical PDF cannot be written."""
