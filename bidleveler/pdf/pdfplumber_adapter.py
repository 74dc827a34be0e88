import io

import pdfplumber

from bidleveler.pdf.base import BasePdfExtractor
from bidleveler.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Bid PDF text via pdfplumber; keeps table rows on one line each."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                page_texts = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read bid PDF: {exc}") from exc
        return "\n".join(page_texts).strip()
