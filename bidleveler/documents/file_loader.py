from pathlib import Path
from typing import ClassVar

from bidleveler.documents.exceptions import DocumentLoadError, UnsupportedFileTypeError
from bidleveler.logging.logger import Log
from bidleveler.pdf.base import BasePdfExtractor
from bidleveler.preprocessing.models import Document


def detect_file_type(filename: str) -> str:
    """Classify a bid file by extension: pdf, word, excel or text."""
    if not filename or "." not in filename:
        return "text"
    extension = filename.rsplit(".", 1)[-1].lower()
    if extension == "pdf":
        return "pdf"
    if extension in ("doc", "docx"):
        return "word"
    if extension in ("xls", "xlsx"):
        return "excel"
    return "text"


class FileLoader:
    """Reads a bid file from disk into a Document named after the file."""

    TEXT_SUFFIXES: ClassVar[frozenset[str]] = frozenset({".txt", ".md", ".csv"})

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def load(self, path: Path) -> Document:
        """Load *path* as a Document.

        Raises:
            FileNotFoundError: if *path* does not exist.
            UnsupportedFileTypeError: for Word, Excel and unknown formats.
            DocumentLoadError: if a text file is not valid UTF-8.
            PdfExtractionError: if a PDF cannot be parsed.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if detect_file_type(path.name) == "pdf":
            content = self._pdf_extractor.extract(path.read_bytes())
        elif suffix in self.TEXT_SUFFIXES:
            content = self._read_text(path)
        else:
            raise UnsupportedFileTypeError(
                f"Cannot extract text from '{path.name}' ({detect_file_type(path.name)})"
            )

        Log.info(f"Loaded {len(content)} chars from {path.name}")
        return Document(name=path.name, content=content)

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentLoadError(f"{path.name} is not valid UTF-8: {exc}") from exc
