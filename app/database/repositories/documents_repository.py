import uuid
from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import get_connection
from app.processor.exceptions import DocumentNotFoundError
from app.processor.models import Document, NewDocument

_DOCUMENT_COLUMNS = """
    id, original_name, mime_type, file_size, blob_key, extracted_text,
    summary, doc_type, metadata, created_at, updated_at
"""

_UPDATABLE_COLUMNS = frozenset({"summary", "doc_type", "metadata"})


class DocumentsRepository:
    """Database operations for the documents table."""

    def create(self, fields: NewDocument) -> Document:
        """Insert a new document with a freshly generated id."""
        document_id = str(uuid.uuid4())
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO documents
                    (id, original_name, mime_type, file_size, blob_key, extracted_text)
                    VALUES (%s::uuid, %s, %s, %s, %s, %s)
                    RETURNING {_DOCUMENT_COLUMNS}
                    """,  # noqa: S608
                    (
                        document_id,
                        fields.original_name,
                        fields.mime_type,
                        fields.file_size,
                        fields.blob_key,
                        fields.extracted_text,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError(f"Insert of document {document_id} returned no row")
        return self._row_to_document(row)

    def find_by_id(self, document_id: str) -> Document | None:
        """Find a document by ID. Malformed ids are treated as missing."""
        if not _is_uuid(document_id):
            return None
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE id = %s::uuid",  # noqa: S608
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._row_to_document(row)

    def update_by_id(self, document_id: str, fields: dict[str, Any]) -> Document:
        """Apply a partial update of analysis fields in a single write.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
            ValueError: if a field is not an updatable analysis column.
        """
        unknown = set(fields) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Cannot update document columns: {sorted(unknown)}")
        if not fields:
            raise ValueError("update_by_id requires at least one field")
        if not _is_uuid(document_id):
            raise DocumentNotFoundError(f"Document {document_id} not found")

        columns = sorted(fields)
        assignments = ", ".join(f"{column} = %s" for column in columns)
        values = [
            Jsonb(fields[column]) if column == "metadata" and fields[column] is not None
            else fields[column]
            for column in columns
        ]
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    UPDATE documents
                    SET {assignments}, updated_at = NOW()
                    WHERE id = %s::uuid
                    RETURNING {_DOCUMENT_COLUMNS}
                    """,  # noqa: S608
                    (*values, document_id),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return self._row_to_document(row)

    @staticmethod
    def _row_to_document(row: dict[str, Any]) -> Document:
        return Document(
            id=str(row["id"]),
            original_name=row["original_name"],
            mime_type=row["mime_type"],
            file_size=row["file_size"],
            blob_key=row["blob_key"],
            extracted_text=row["extracted_text"],
            summary=row.get("summary"),
            doc_type=row.get("doc_type"),
            metadata=row.get("metadata"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
