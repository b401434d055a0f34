from psycopg.rows import dict_row

from textinsight.database.connection import get_connection
from textinsight.database.models import TextDocument
from textinsight.database.repositories.base import BaseTextDocumentRepository
from textinsight.processor.exceptions import DocumentNotFoundError


class TextDocumentsRepository(BaseTextDocumentRepository):
    """Database operations for the text_documents table."""

    def find_by_id(self, document_id: int) -> TextDocument:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, content, language, status
                    FROM text_documents
                    WHERE id = %s
                    """,
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")

        return TextDocument(
            id=row["id"],
            content=row["content"],
            language=row["language"],
            status=row["status"],
        )

    def mark_analyzed(self, document_id: int) -> None:
        """Set the document status to 'analyzed'.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE text_documents
                    SET status = 'analyzed', updated_at = NOW()
                    WHERE id = %s
                    """,
                    (document_id,),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()
