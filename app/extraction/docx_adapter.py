import io

import mammoth

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.logging.logger import Log


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from an Office Open XML word document using mammoth.

    Paragraphs are separated by a blank line. Formatting is discarded.
    """

    def extract(self, file_bytes: bytes) -> str:
        try:
            result = mammoth.extract_raw_text(io.BytesIO(file_bytes))
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        for message in result.messages:
            Log.debug(f"mammoth {message.type}: {message.message}")
        return result.value.strip()
