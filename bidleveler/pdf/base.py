from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for turning an uploaded bid PDF into plain text."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text layer of every page, pages joined by newlines.

        Scanned pages without a text layer yield nothing; OCR happens
        upstream, not here.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """
