from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.docx_adapter import DocxAdapter
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter
from app.extraction.text_extractor import TextExtractor


class PdfExtractorFactory:
    """Creates the correct PDF extractor based on settings."""

    ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor with the configured PDF engine and the DOCX adapter."""
    return TextExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        docx_extractor=DocxAdapter(),
    )
