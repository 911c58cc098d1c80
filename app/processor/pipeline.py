from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.analysis.models import AnalysisResult
from app.processor.models import Document


@dataclass(slots=True)
class PipelineContext:
    job_id: int
    document_id: str
    force: bool = False
    document: Document | None = None
    analysis_result: AnalysisResult | None = None
    skipped: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
