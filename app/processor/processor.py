from app.analysis.analyzer import DocumentAnalyzer
from app.config.settings import Settings
from app.database.models import JobRecord
from app.database.repositories.documents_repository import DocumentsRepository
from app.llm.factory import LLMClientFactory
from app.logging.logger import Log
from app.processor.models import ProcessorResult
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    AnalyzeStep,
    IdempotencyCheckStep,
    LoadDocumentStep,
    PersistAnalysisStep,
    ValidateTextStep,
)

ANALYZE_JOB_NAME = "analyze"


class Processor:
    """Runs the analysis pipeline for one job.

    Pipeline: load -> idempotency check -> (skip | validate -> analyze -> persist).
    Errors propagate to the caller; the job's queue state is not touched here.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, job: JobRecord) -> ProcessorResult:
        """Process an analysis job and return the value recorded on it."""
        if job.name != ANALYZE_JOB_NAME:
            raise ValueError(f"Unknown job name '{job.name}' for job {job.id}")

        Log.info(f"Processing document {job.document_id} for job {job.id}")
        context = PipelineContext(
            job_id=job.id,
            document_id=job.document_id,
            force=job.force,
        )
        for step in self._steps:
            context = step.run(context)
            if context.skipped:
                return ProcessorResult(
                    status="skipped",
                    document_id=context.document_id,
                    message="Already analyzed",
                )
        return ProcessorResult(status="completed", document_id=context.document_id)


def build_processor(
    settings: Settings,
    doc_repo: DocumentsRepository | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    doc_repo = doc_repo or DocumentsRepository()
    analyzer = DocumentAnalyzer(
        client=LLMClientFactory.create(settings),
        max_text_chars=settings.analysis_max_text_chars,
    )
    steps: list[PipelineStep] = [
        LoadDocumentStep(doc_repo),
        IdempotencyCheckStep(),
        ValidateTextStep(),
        AnalyzeStep(analyzer),
        PersistAnalysisStep(doc_repo),
    ]
    return Processor(steps)
