from concurrent.futures import ThreadPoolExecutor, wait

from app.logging.logger import Log
from app.worker.worker import Worker


class WorkerPool:
    """Runs several independent consumers of the shared job queue on threads."""

    def __init__(self, workers: list[Worker]) -> None:
        if not workers:
            raise ValueError("WorkerPool requires at least one worker")
        self._workers = workers

    def run(self) -> None:
        Log.info(f"Starting {len(self._workers)} worker(s)")
        with ThreadPoolExecutor(
            max_workers=len(self._workers), thread_name_prefix="analysis-worker"
        ) as executor:
            futures = [executor.submit(worker.run) for worker in self._workers]
            try:
                wait(futures)
            except KeyboardInterrupt:
                Log.info("Interrupt received, stopping workers")
                self.stop()
                wait(futures)
        for future in futures:
            exc = future.exception()
            if exc is not None:
                Log.error(f"Worker thread exited with error: {exc}")

    def stop(self) -> None:
        for worker in self._workers:
            worker.stop()
