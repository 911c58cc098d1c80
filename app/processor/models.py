from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Document:
    """Domain model for an ingested document and its analysis fields."""

    id: str
    original_name: str
    mime_type: str
    file_size: int
    blob_key: str
    extracted_text: str
    summary: str | None = None
    doc_type: str | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_analyzed(self) -> bool:
        return bool(self.summary)

    @property
    def has_text(self) -> bool:
        return bool(self.extracted_text and self.extracted_text.strip())


@dataclass(frozen=True)
class NewDocument:
    """Fields captured at ingestion, before the document has an id."""

    original_name: str
    mime_type: str
    file_size: int
    blob_key: str
    extracted_text: str


@dataclass
class ProcessorResult:
    """Return value recorded on the analysis job."""

    status: str
    document_id: str
    message: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status, "documentId": self.document_id}
        if self.message is not None:
            payload["message"] = self.message
        return payload
