class PreprocessingError(Exception):
    """Base exception for all preprocessing errors."""


class InvalidDocumentError(PreprocessingError):
    """Raised when a document has no usable text content."""
