import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from app.config.settings import Settings
from app.database.connection import apply_schema, close_pool, get_connection, init_pool
from app.database.repositories.documents_repository import DocumentsRepository
from app.processor.models import Document, NewDocument


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docanalysis_test")
    return Settings(llm_provider="example", job_poll_interval_seconds=0)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        apply_schema()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    """Connection to a test database emptied before each test."""
    with get_connection() as conn:
        conn.execute("DELETE FROM analysis_jobs")
        conn.execute("DELETE FROM documents")
        conn.commit()
        yield conn


@pytest.fixture
def seed_document(db_conn: psycopg.Connection[Any]) -> Document:
    return DocumentsRepository().create(
        NewDocument(
            original_name="invoice.pdf",
            mime_type="application/pdf",
            file_size=1024,
            blob_key="1700000000000-abcd1234-invoice.pdf",
            extracted_text="Invoice 42\nTotal due: 100 EUR",
        )
    )
