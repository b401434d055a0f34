from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from textinsight.analyzers.models import AnalysisStatus, AnalysisType
from textinsight.database.connection import get_connection
from textinsight.database.models import AnalysisResultRecord
from textinsight.database.repositories.base import BaseAnalysisResultRepository

_SELECT_COLUMNS = """
    SELECT text_document_id, analysis_type, status, model_id, results,
           processing_time, error_code, error_message, created_at, updated_at
    FROM analysis_results
"""


class AnalysisResultsRepository(BaseAnalysisResultRepository):
    """Database operations for the analysis_results table."""

    def mark_processing(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        model_id: str | None,
    ) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO analysis_results
                    (text_document_id, analysis_type, model_id, status)
                VALUES (%s, %s, %s, 'processing')
                ON CONFLICT (text_document_id, analysis_type) DO UPDATE
                SET model_id = EXCLUDED.model_id,
                    status = 'processing',
                    results = NULL,
                    processing_time = NULL,
                    error_code = NULL,
                    error_message = NULL,
                    updated_at = NOW()
                """,
                (document_id, analysis_type.value, model_id),
            )
            conn.commit()

    def mark_completed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        results: dict[str, Any],
        processing_time: int,
    ) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO analysis_results
                    (text_document_id, analysis_type, status, results, processing_time)
                VALUES (%s, %s, 'completed', %s, %s)
                ON CONFLICT (text_document_id, analysis_type) DO UPDATE
                SET status = 'completed',
                    results = EXCLUDED.results,
                    processing_time = EXCLUDED.processing_time,
                    error_code = NULL,
                    error_message = NULL,
                    updated_at = NOW()
                """,
                (document_id, analysis_type.value, Jsonb(results), processing_time),
            )
            conn.commit()

    def mark_failed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        error_code: str,
        error_message: str,
    ) -> None:
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO analysis_results
                    (text_document_id, analysis_type, status, error_code, error_message)
                VALUES (%s, %s, 'failed', %s, %s)
                ON CONFLICT (text_document_id, analysis_type) DO UPDATE
                SET status = 'failed',
                    results = NULL,
                    error_code = EXCLUDED.error_code,
                    error_message = EXCLUDED.error_message,
                    updated_at = NOW()
                """,
                (document_id, analysis_type.value, error_code, error_message),
            )
            conn.commit()

    def find(
        self,
        document_id: int,
        analysis_type: AnalysisType,
    ) -> AnalysisResultRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    _SELECT_COLUMNS + " WHERE text_document_id = %s AND analysis_type = %s",
                    (document_id, analysis_type.value),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return self._to_record(row)

    def find_by_document(self, document_id: int) -> list[AnalysisResultRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    _SELECT_COLUMNS + " WHERE text_document_id = %s ORDER BY analysis_type",
                    (document_id,),
                )
                rows = cur.fetchall()

        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: dict[str, Any]) -> AnalysisResultRecord:
        return AnalysisResultRecord(
            document_id=row["text_document_id"],
            analysis_type=AnalysisType(row["analysis_type"]),
            status=AnalysisStatus(row["status"]),
            model_id=row["model_id"],
            results=row["results"],
            processing_time=row["processing_time"],
            error_code=row["error_code"],
            error_message=row["error_message"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
