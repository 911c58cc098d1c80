"""MIME-type dispatch over the format adapters."""

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import (
    EmptyExtractionError,
    ExtractionError,
    UnsupportedTypeError,
)
from app.logging.logger import Log

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
SUPPORTED_MIME_TYPES = frozenset({PDF_MIME_TYPE, DOCX_MIME_TYPE})


def is_supported_mime_type(mime_type: str) -> bool:
    return _normalize_mime_type(mime_type) in SUPPORTED_MIME_TYPES


def _normalize_mime_type(mime_type: str) -> str:
    # Drop parameters such as "; charset=binary".
    return (mime_type or "").split(";", 1)[0].strip().lower()


class TextExtractor:
    """Converts raw file bytes plus a declared MIME type into plain text."""

    def __init__(
        self,
        *,
        pdf_extractor: BaseTextExtractor,
        docx_extractor: BaseTextExtractor,
    ) -> None:
        self._adapters: dict[str, BaseTextExtractor] = {
            PDF_MIME_TYPE: pdf_extractor,
            DOCX_MIME_TYPE: docx_extractor,
        }

    def extract(self, file_bytes: bytes, mime_type: str) -> str:
        """Extract non-empty text.

        Raises:
            UnsupportedTypeError: if the MIME type is not PDF or DOCX.
            EmptyExtractionError: if the document has no textual content.
            ExtractionError: if the underlying parser fails.
        """
        adapter = self._adapters.get(_normalize_mime_type(mime_type))
        if adapter is None:
            raise UnsupportedTypeError(f"Unsupported file type: {mime_type}")

        try:
            text = adapter.extract(file_bytes)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Failed to extract text: {exc}") from exc

        if not text.strip():
            raise EmptyExtractionError(
                "No text could be extracted from the document"
            )
        Log.info(f"Extracted {len(text)} chars from {mime_type} document")
        return text
