import io

import pdfplumber

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError

PAGE_SEPARATOR = "\n\n"


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, file_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
                pages = [(page.extract_text() or "").strip() for page in pdf.pages]
            return PAGE_SEPARATOR.join(pages).strip()
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
