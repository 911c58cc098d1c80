"""Command-line boundary over DocumentService and the worker process."""

import json
import mimetypes
import sys
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer

from app.config.settings import Settings
from app.database.connection import apply_schema, close_pool, init_pool
from app.extraction.exceptions import ExtractionError
from app.extraction.text_extractor import DOCX_MIME_TYPE
from app.logging.logger import Log
from app.main import main as run_worker
from app.processor.exceptions import ProcessorError
from app.service.document_service import DocumentService, build_document_service
from app.storage.exceptions import BlobStoreError

app = typer.Typer(no_args_is_help=True, add_completion=False)

DOMAIN_ERRORS = (ProcessorError, ExtractionError, BlobStoreError)

mimetypes.add_type(DOCX_MIME_TYPE, ".docx")


@contextmanager
def _service() -> Generator[DocumentService, None, None]:
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    init_pool(settings)
    try:
        yield build_document_service(settings)
    except DOMAIN_ERRORS as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        close_pool()


def _echo_json(data: dict[str, Any]) -> None:
    typer.echo(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@app.command("init-db")
def init_db() -> None:
    """Create the documents and analysis_jobs tables."""
    settings = Settings()
    init_pool(settings)
    try:
        apply_schema()
    finally:
        close_pool()
    typer.echo("Schema applied")


@app.command("ingest")
def ingest(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    mime_type: Optional[str] = typer.Option(None, help="Override the guessed MIME type"),
) -> None:
    """Extract, store and register a PDF or DOCX file."""
    resolved_type = mime_type or mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    data = path.read_bytes()
    with _service() as service:
        document = service.ingest(data, path.name, resolved_type, len(data))
    _echo_json({k: v for k, v in asdict(document).items() if k != "extracted_text"})


@app.command("analyze")
def analyze(
    document_id: str = typer.Argument(...),
    force: str = typer.Option("false", help="Re-analyze even if a summary exists"),
) -> None:
    """Enqueue AI analysis for a document."""
    with _service() as service:
        handle = service.request_analysis(document_id, force=_parse_bool(force))
    _echo_json({"jobId": handle.job_id})


@app.command("status")
def status(job_id: int = typer.Argument(...)) -> None:
    """Show the queue state of an analysis job."""
    with _service() as service:
        job_status = service.get_job_status(job_id)
    _echo_json(
        {
            "jobId": job_status.job_id,
            "state": job_status.state,
            "payload": job_status.payload,
            "result": job_status.result,
            "failureReason": job_status.failure_reason,
        }
    )


@app.command("show")
def show(document_id: str = typer.Argument(...)) -> None:
    """Show a document and its analysis."""
    with _service() as service:
        document = service.get_document(document_id)
    _echo_json(asdict(document))


@app.command("worker")
def worker() -> None:
    """Run the analysis worker until interrupted."""
    run_worker()


if __name__ == "__main__":
    app()
