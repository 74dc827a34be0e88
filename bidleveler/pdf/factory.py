from bidleveler.config.settings import Settings
from bidleveler.pdf.base import BasePdfExtractor
from bidleveler.pdf.pdfplumber_adapter import PdfPlumberAdapter
from bidleveler.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Picks the PDF engine named by ``settings.pdf_engine``."""

    ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        try:
            return cls.ENGINES[engine]()
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ENGINES)}"
            ) from None
