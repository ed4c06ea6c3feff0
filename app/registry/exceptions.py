class RegistryError(Exception):
    """Base exception for document registry errors."""


class DocumentNotFoundError(RegistryError):
    """Raised when no document with the requested id is registered."""
