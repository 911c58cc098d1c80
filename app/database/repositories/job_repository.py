from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import get_connection
from app.database.models import JobRecord, JobState

_JOB_COLUMNS = """
    id, name, payload, state, attempts, result, failure_reason,
    locked_at, created_at, updated_at
"""


class JobRepository:
    """Durable analysis job queue backed by the analysis_jobs table.

    Delivery is at-least-once: a job claimed by a consumer that never reports
    back is handed out again once its lock is older than the visibility timeout.
    """

    def __init__(self, max_attempts: int, visibility_timeout_seconds: int = 300) -> None:
        self._max_attempts = max_attempts
        self._visibility_timeout_seconds = visibility_timeout_seconds

    def enqueue(self, name: str, payload: dict[str, Any]) -> int:
        """Insert a waiting job and return its id."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO analysis_jobs (name, payload, state, attempts)
                    VALUES (%s, %s, 'waiting', 0)
                    RETURNING id
                    """,
                    (name, Jsonb(payload)),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Failed to enqueue job '{name}'")
        return int(row[0])

    def claim_next_job(self, conn: psycopg.Connection[Any]) -> JobRecord | None:
        """Claim the next deliverable job using SELECT FOR UPDATE SKIP LOCKED."""
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(
                f"""
                SELECT {_JOB_COLUMNS}
                FROM analysis_jobs
                WHERE attempts < %s
                  AND (
                    state = 'waiting'
                    OR (
                      state = 'active'
                      AND locked_at < NOW() - make_interval(secs => %s)
                    )
                  )
                ORDER BY created_at
                LIMIT 1
                FOR UPDATE SKIP LOCKED
                """,  # noqa: S608
                (self._max_attempts, self._visibility_timeout_seconds),
            )
            row = cur.fetchone()

        if row is None:
            conn.commit()
            return None

        conn.execute(
            """
            UPDATE analysis_jobs
            SET state = 'active', locked_at = NOW(), updated_at = NOW()
            WHERE id = %s
            """,
            (row["id"],),
        )
        conn.commit()

        job = self._row_to_job(row)
        job.state = JobState.ACTIVE
        return job

    def mark_completed(self, job_id: int, result: dict[str, Any]) -> None:
        """Mark a job as completed with its return value."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analysis_jobs
                SET state = 'completed', result = %s,
                    locked_at = NULL, updated_at = NOW()
                WHERE id = %s AND state NOT IN ('completed', 'failed')
                """,
                (Jsonb(result), job_id),
            )
            conn.commit()

    def mark_failed(self, job_id: int, reason: str) -> None:
        """Mark a job as permanently failed."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analysis_jobs
                SET state = 'failed', failure_reason = %s, attempts = attempts + 1,
                    locked_at = NULL, updated_at = NOW()
                WHERE id = %s AND state NOT IN ('completed', 'failed')
                """,
                (reason, job_id),
            )
            conn.commit()

    def release_for_retry(self, job_id: int) -> None:
        """Increment attempt count and return job to waiting."""
        with get_connection() as conn:
            conn.execute(
                """
                UPDATE analysis_jobs
                SET attempts = attempts + 1, state = 'waiting',
                    locked_at = NULL, updated_at = NOW()
                WHERE id = %s AND state NOT IN ('completed', 'failed')
                """,
                (job_id,),
            )
            conn.commit()

    def find_by_id(self, job_id: int) -> JobRecord | None:
        """Find a job by ID."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_JOB_COLUMNS} FROM analysis_jobs WHERE id = %s",  # noqa: S608
                    (job_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._row_to_job(row)

    @staticmethod
    def _row_to_job(row: dict[str, Any]) -> JobRecord:
        return JobRecord(
            id=row["id"],
            name=row["name"],
            payload=dict(row.get("payload") or {}),
            state=row["state"],
            attempts=row["attempts"],
            result=row.get("result"),
            failure_reason=row.get("failure_reason"),
            locked_at=row.get("locked_at"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )
