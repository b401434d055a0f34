"""In-process repositories.

No database needed. Useful for local development, tests, and as the
reference behavior the PostgreSQL repositories must match.
"""

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from textinsight.analyzers.models import AnalysisStatus, AnalysisType, ModelRef
from textinsight.database.models import AnalysisResultRecord, TextDocument
from textinsight.database.repositories.base import (
    BaseAnalysisResultRepository,
    BaseModelRepository,
    BaseTextDocumentRepository,
)
from textinsight.processor.exceptions import DocumentNotFoundError

_ResultKey = tuple[int, AnalysisType]


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAnalysisResultRepository(BaseAnalysisResultRepository):
    def __init__(self) -> None:
        self._records: dict[_ResultKey, AnalysisResultRecord] = {}
        self._lock = threading.Lock()

    def mark_processing(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        model_id: str | None,
    ) -> None:
        with self._lock:
            existing = self._records.get((document_id, analysis_type))
            self._records[(document_id, analysis_type)] = AnalysisResultRecord(
                document_id=document_id,
                analysis_type=analysis_type,
                status=AnalysisStatus.PROCESSING,
                model_id=model_id,
                created_at=existing.created_at if existing else _now(),
                updated_at=_now(),
            )

    def mark_completed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        results: dict[str, Any],
        processing_time: int,
    ) -> None:
        with self._lock:
            record = self._get_or_create(document_id, analysis_type)
            self._records[(document_id, analysis_type)] = replace(
                record,
                status=AnalysisStatus.COMPLETED,
                results=results,
                processing_time=processing_time,
                error_code=None,
                error_message=None,
                updated_at=_now(),
            )

    def mark_failed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        error_code: str,
        error_message: str,
    ) -> None:
        with self._lock:
            record = self._get_or_create(document_id, analysis_type)
            self._records[(document_id, analysis_type)] = replace(
                record,
                status=AnalysisStatus.FAILED,
                results=None,
                error_code=error_code,
                error_message=error_message,
                updated_at=_now(),
            )

    def find(
        self,
        document_id: int,
        analysis_type: AnalysisType,
    ) -> AnalysisResultRecord | None:
        with self._lock:
            return self._records.get((document_id, analysis_type))

    def find_by_document(self, document_id: int) -> list[AnalysisResultRecord]:
        with self._lock:
            records = [r for (doc_id, _t), r in self._records.items() if doc_id == document_id]
        return sorted(records, key=lambda r: r.analysis_type.value)

    def _get_or_create(
        self,
        document_id: int,
        analysis_type: AnalysisType,
    ) -> AnalysisResultRecord:
        record = self._records.get((document_id, analysis_type))
        if record is None:
            record = AnalysisResultRecord(
                document_id=document_id,
                analysis_type=analysis_type,
                status=AnalysisStatus.PENDING,
                created_at=_now(),
            )
        return record


class InMemoryTextDocumentRepository(BaseTextDocumentRepository):
    def __init__(self, documents: list[TextDocument] | None = None) -> None:
        self._documents: dict[int, TextDocument] = {d.id: d for d in documents or []}
        self._lock = threading.Lock()

    def add(self, document: TextDocument) -> None:
        with self._lock:
            self._documents[document.id] = document

    def find_by_id(self, document_id: int) -> TextDocument:
        with self._lock:
            document = self._documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document

    def mark_analyzed(self, document_id: int) -> None:
        with self._lock:
            document = self._documents.get(document_id)
            if document is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            self._documents[document_id] = replace(document, status="analyzed")


class InMemoryModelRepository(BaseModelRepository):
    """Model catalog with one built-in model per analysis type."""

    def __init__(
        self,
        languages: list[str] | None = None,
        models: list[ModelRef] | None = None,
    ) -> None:
        if models is None:
            supported = tuple(languages or ["en"])
            models = [
                ModelRef(
                    id=f"builtin-{analysis_type.value}",
                    name=f"Built-in {analysis_type.value}",
                    analysis_type=analysis_type,
                    languages=supported,
                )
                for analysis_type in AnalysisType
            ]
        self._models = list(models)

    def find_default_for_language(
        self,
        analysis_type: AnalysisType,
        language: str,
    ) -> ModelRef | None:
        for model in self._models:
            if model.analysis_type is analysis_type and language in model.languages:
                return model
        return None
