from app.analysis.analyzer import DocumentAnalyzer
from app.database.repositories.documents_repository import DocumentsRepository
from app.logging.logger import Log
from app.processor.exceptions import DocumentNotFoundError, MissingExtractedTextError
from app.processor.pipeline import PipelineContext, PipelineStep


class LoadDocumentStep(PipelineStep):
    """Reload the document; the job payload only carries its id and the force flag."""

    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        document = self._doc_repo.find_by_id(context.document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {context.document_id} not found")
        context.document = document
        Log.info(f"Loaded document {context.document_id} for job {context.job_id}")
        return context


class IdempotencyCheckStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before idempotency check")
        if context.document.is_analyzed and not context.force:
            context.skipped = True
            Log.warning(
                f"Document {context.document_id} already analyzed, "
                f"skipping job {context.job_id}"
            )
        return context


class ValidateTextStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before validation")
        if not context.document.has_text:
            raise MissingExtractedTextError(
                f"Document {context.document_id} has no extracted text"
            )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: DocumentAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before analysis")
        context.analysis_result = self._analyzer.analyze(context.document.extracted_text)
        return context


class PersistAnalysisStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis_result is None:
            raise ValueError("PipelineContext.analysis_result must be set before persist")
        self._doc_repo.update_by_id(
            context.document_id,
            context.analysis_result.to_document_fields(),
        )
        Log.info(f"Persisted analysis for document {context.document_id}")
        return context
