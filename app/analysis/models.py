from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AnalysisResult:
    """Parsed LLM analysis of a document. Always has a summary."""

    summary: str
    type: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_document_fields(self) -> dict[str, Any]:
        """Columns written back to the document in one update."""
        return {
            "summary": self.summary,
            "doc_type": self.type,
            "metadata": dict(self.attributes),
        }
