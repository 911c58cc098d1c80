from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JobHandle:
    """Returned by request_analysis as soon as the job is enqueued."""

    job_id: int


@dataclass(frozen=True)
class JobStatus:
    """Live view of an analysis job as seen by the queue."""

    job_id: int
    state: str
    payload: dict[str, Any] | None = None
    result: dict[str, Any] | None = None
    failure_reason: str | None = None
