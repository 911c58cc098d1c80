class ProcessorError(Exception):
    """Base exception for all document pipeline errors."""


class DocumentNotFoundError(ProcessorError):
    """Raised when a document cannot be found in the database."""


class AlreadyAnalyzedError(ProcessorError):
    """Raised when analysis is requested for an analyzed document without force."""


class MissingExtractedTextError(ProcessorError):
    """Raised when a document has no usable extracted text."""


class AnalysisFailedError(ProcessorError):
    """Raised when the LLM provider call fails or times out."""


class FileTooLargeError(ProcessorError):
    """Raised when an uploaded file exceeds the configured size limit."""
