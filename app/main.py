from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.database.repositories.job_repository import JobRepository
from app.logging.logger import Log
from app.processor.processor import build_processor
from app.worker.job_runner import JobRunner
from app.worker.pool import WorkerPool
from app.worker.worker import Worker


def build_worker_pool(settings: Settings) -> WorkerPool:
    """Build worker_concurrency consumers sharing one processor and queue."""
    processor = build_processor(settings)
    job_repo = JobRepository(
        settings.max_job_attempts, settings.job_visibility_timeout_seconds
    )
    job_runner = JobRunner(processor, job_repo, settings)
    workers = [
        Worker(job_repo, job_runner, settings, name=f"worker-{index + 1}")
        for index in range(max(1, settings.worker_concurrency))
    ]
    return WorkerPool(workers)


def main() -> None:
    """Entry point: initialize pool -> build dependencies -> start worker loops."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        build_worker_pool(settings).run()
    finally:
        close_pool()


if __name__ == "__main__":
    main()
