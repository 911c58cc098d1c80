from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


class JobState:
    """Queue-owned states of an analysis job."""

    WAITING = "waiting"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"
    NOT_FOUND = "not_found"

    TERMINAL = frozenset({COMPLETED, FAILED})


@dataclass
class JobRecord:
    """Represents a row from the analysis_jobs table."""

    id: int
    name: str
    payload: dict[str, Any] = field(default_factory=dict)
    state: str = JobState.WAITING
    attempts: int = 0
    result: dict[str, Any] | None = None
    failure_reason: str | None = None
    locked_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def document_id(self) -> str:
        return str(self.payload.get("documentId", ""))

    @property
    def force(self) -> bool:
        return self.payload.get("force") is True
