from unittest.mock import MagicMock, patch

from app.config.settings import Settings
from app.main import build_worker_pool, main
from app.worker.pool import WorkerPool


class TestBuildWorkerPool:
    def test_builds_one_worker_per_concurrency_slot(self) -> None:
        settings = Settings(llm_provider="example", worker_concurrency=3)

        pool = build_worker_pool(settings)

        assert isinstance(pool, WorkerPool)
        assert [w.name for w in pool._workers] == ["worker-1", "worker-2", "worker-3"]

    def test_concurrency_below_one_still_builds_a_worker(self) -> None:
        settings = Settings(llm_provider="example", worker_concurrency=0)

        pool = build_worker_pool(settings)

        assert len(pool._workers) == 1


class TestMain:
    @patch("app.main.close_pool")
    @patch("app.main.init_pool")
    @patch("app.main.build_worker_pool")
    def test_closes_pool_after_workers_exit(
        self, mock_build: MagicMock, mock_init: MagicMock, mock_close: MagicMock
    ) -> None:
        main()

        mock_init.assert_called_once()
        mock_build.return_value.run.assert_called_once_with()
        mock_close.assert_called_once_with()

    @patch("app.main.close_pool")
    @patch("app.main.init_pool")
    @patch("app.main.build_worker_pool")
    def test_closes_pool_when_workers_crash(
        self, mock_build: MagicMock, mock_init: MagicMock, mock_close: MagicMock
    ) -> None:
        mock_build.return_value.run.side_effect = RuntimeError("boom")

        try:
            main()
        except RuntimeError:
            pass

        mock_close.assert_called_once_with()
