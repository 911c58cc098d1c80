import pymupdf

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.pdfplumber_adapter import PAGE_SEPARATOR


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, file_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=file_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text().strip() for page in doc]
            return PAGE_SEPARATOR.join(pages).strip()
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
