from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, file_bytes: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            file_bytes: Raw file content.

        Returns:
            Extracted text as a single string, possibly empty.

        Raises:
            ExtractionError: if the file cannot be parsed.
        """
