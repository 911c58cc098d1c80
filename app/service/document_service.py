from app.config.settings import Settings
from app.database.models import JobState
from app.database.repositories.documents_repository import DocumentsRepository
from app.database.repositories.job_repository import JobRepository
from app.extraction.exceptions import UnsupportedTypeError
from app.extraction.factory import build_text_extractor
from app.extraction.text_extractor import TextExtractor, is_supported_mime_type
from app.logging.logger import Log
from app.processor.exceptions import (
    AlreadyAnalyzedError,
    DocumentNotFoundError,
    FileTooLargeError,
    MissingExtractedTextError,
)
from app.processor.models import Document, NewDocument
from app.processor.processor import ANALYZE_JOB_NAME
from app.service.models import JobHandle, JobStatus
from app.storage.base import BaseBlobStore
from app.storage.factory import BlobStoreFactory
from app.storage.keys import build_blob_key


class DocumentService:
    """Request-path operations: ingest, request analysis, and status queries.

    Holds no per-request state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        *,
        extractor: TextExtractor,
        blob_store: BaseBlobStore,
        doc_repo: DocumentsRepository,
        job_repo: JobRepository,
        max_upload_bytes: int | None = None,
    ) -> None:
        self._extractor = extractor
        self._blob_store = blob_store
        self._doc_repo = doc_repo
        self._job_repo = job_repo
        self._max_upload_bytes = max_upload_bytes

    def ingest(
        self,
        file_bytes: bytes,
        original_name: str,
        mime_type: str,
        file_size: int | None = None,
    ) -> Document:
        """Extract text, store the raw file and create the document record.

        Nothing is persisted unless extraction and the blob upload both succeed.

        Raises:
            UnsupportedTypeError: before any work, for non PDF/DOCX files.
            FileTooLargeError: when the file exceeds max_upload_bytes.
            ExtractionError: including EmptyExtractionError, from the extractor.
            BlobStoreError: when the upload fails.
        """
        if not is_supported_mime_type(mime_type):
            raise UnsupportedTypeError(f"Unsupported file type: {mime_type}")
        size = file_size if file_size is not None else len(file_bytes)
        if self._max_upload_bytes is not None and size > self._max_upload_bytes:
            raise FileTooLargeError(
                f"File is too large ({size} bytes). Max size is {self._max_upload_bytes} bytes"
            )

        extracted_text = self._extractor.extract(file_bytes, mime_type)

        blob_key = build_blob_key(original_name)
        self._blob_store.put(blob_key, file_bytes, mime_type)
        Log.info(f"Stored {size} bytes of '{original_name}' as blob {blob_key}")

        document = self._doc_repo.create(
            NewDocument(
                original_name=original_name,
                mime_type=mime_type,
                file_size=size,
                blob_key=blob_key,
                extracted_text=extracted_text,
            )
        )
        Log.info(f"Ingested document {document.id} ({len(extracted_text)} chars)")
        return document

    def request_analysis(self, document_id: str, force: bool = False) -> JobHandle:
        """Enqueue an analysis job without waiting for it.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            AlreadyAnalyzedError: if it has a summary and force is false.
            MissingExtractedTextError: if its stored text is blank.
        """
        document = self.get_document(document_id)
        if document.is_analyzed and not force:
            raise AlreadyAnalyzedError(
                f"Document {document_id} is already analyzed. Use force=true to re-analyze"
            )
        if not document.has_text:
            raise MissingExtractedTextError(f"Document {document_id} has no extracted text")

        job_id = self._job_repo.enqueue(
            ANALYZE_JOB_NAME, {"documentId": document.id, "force": bool(force)}
        )
        Log.info(f"Enqueued analysis job {job_id} for document {document_id} (force={force})")
        return JobHandle(job_id=job_id)

    def get_job_status(self, job_id: int) -> JobStatus:
        """Report the queue's view of a job. Unknown ids are not an error."""
        job = self._job_repo.find_by_id(job_id)
        if job is None:
            return JobStatus(job_id=job_id, state=JobState.NOT_FOUND)
        return JobStatus(
            job_id=job.id,
            state=job.state,
            payload=job.payload,
            result=job.result,
            failure_reason=job.failure_reason,
        )

    def get_document(self, document_id: str) -> Document:
        document = self._doc_repo.find_by_id(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document


def build_document_service(settings: Settings) -> DocumentService:
    """Build a DocumentService with the configured adapters."""
    return DocumentService(
        extractor=build_text_extractor(settings),
        blob_store=BlobStoreFactory.create(settings),
        doc_repo=DocumentsRepository(),
        job_repo=JobRepository(
            settings.max_job_attempts, settings.job_visibility_timeout_seconds
        ),
        max_upload_bytes=settings.max_upload_bytes,
    )
