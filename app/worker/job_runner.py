from collections.abc import Callable
from typing import Any

from app.config.settings import Settings
from app.database.models import JobRecord
from app.database.repositories.job_repository import JobRepository
from app.logging.logger import Log
from app.processor.exceptions import DocumentNotFoundError, MissingExtractedTextError
from app.processor.processor import Processor

# Redelivery cannot fix these, so the job fails on the first attempt.
PERMANENT_ERRORS: tuple[type[Exception], ...] = (
    DocumentNotFoundError,
    MissingExtractedTextError,
    ValueError,
)


class JobRunner:
    """Run one job, catch exceptions, and apply the queue's retry policy.

    ``run`` never raises: a failure to record the outcome leaves the job
    active, and the queue redelivers it after the visibility timeout.
    """

    def __init__(
        self,
        processor: Processor,
        job_repo: JobRepository,
        settings: Settings,
    ) -> None:
        self._processor = processor
        self._job_repo = job_repo
        self._settings = settings

    def run(self, job: JobRecord) -> None:
        """Execute a single job with error handling."""
        Log.info(f"Running job {job.id} (attempt {job.attempts + 1})")
        try:
            result = self._processor.process(job)
        except PERMANENT_ERRORS as exc:
            Log.error(f"Job {job.id} failed permanently: {exc}")
            self._record(job, self._job_repo.mark_failed, str(exc))
            return
        except Exception as exc:
            self._handle_failure(job, exc)
            return

        if self._record(job, self._job_repo.mark_completed, result.to_payload()):
            Log.info(f"Job {job.id} {result.status}")

    def _handle_failure(self, job: JobRecord, exc: Exception) -> None:
        """Increment attempts; mark failed if at max, otherwise back to waiting."""
        Log.exception(f"Job {job.id} failed: {exc}")
        if job.attempts + 1 >= self._settings.max_job_attempts:
            if self._record(job, self._job_repo.mark_failed, str(exc)):
                Log.error(f"Job {job.id} permanently failed after {job.attempts + 1} attempts")
        elif self._record(job, self._job_repo.release_for_retry):
            Log.warning(f"Job {job.id} will be retried (attempt {job.attempts + 2})")

    @staticmethod
    def _record(job: JobRecord, transition: Callable[..., None], *args: Any) -> bool:
        """Apply a queue transition, returning False when it could not be stored."""
        try:
            transition(job.id, *args)
        except Exception:
            Log.exception(
                f"Could not record outcome of job {job.id}; "
                "it stays active until the visibility timeout redelivers it"
            )
            return False
        return True
