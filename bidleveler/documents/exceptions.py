class DocumentLoadError(Exception):
    """Base exception for bid file loading errors."""


class UnsupportedFileTypeError(DocumentLoadError):
    """Raised when a bid file type has no text extraction path."""
