class ExtractionError(Exception):
    """Raised when text cannot be extracted from a document."""


class UnsupportedTypeError(ExtractionError):
    """Raised when the declared MIME type is not PDF or DOCX."""


class EmptyExtractionError(ExtractionError):
    """Raised when extraction succeeds but yields only whitespace."""
