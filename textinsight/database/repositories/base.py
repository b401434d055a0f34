from abc import ABC, abstractmethod
from typing import Any

from textinsight.analyzers.models import AnalysisType, ModelRef
from textinsight.database.models import AnalysisResultRecord, TextDocument


class BaseAnalysisResultRepository(ABC):
    """Contract for analysis result storage.

    Writes are keyed by (document_id, analysis_type): a second write for the
    same key replaces the first.
    """

    @abstractmethod
    def mark_processing(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        model_id: str | None,
    ) -> None:
        """Create the result or reset an existing one to processing."""

    @abstractmethod
    def mark_completed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        results: dict[str, Any],
        processing_time: int,
    ) -> None:
        """Store the payload and timing of a successful run."""

    @abstractmethod
    def mark_failed(
        self,
        document_id: int,
        analysis_type: AnalysisType,
        error_code: str,
        error_message: str,
    ) -> None:
        """Record a failed run."""

    @abstractmethod
    def find(
        self,
        document_id: int,
        analysis_type: AnalysisType,
    ) -> AnalysisResultRecord | None:
        """Fetch the result for one (document, type) pair."""

    @abstractmethod
    def find_by_document(self, document_id: int) -> list[AnalysisResultRecord]:
        """Fetch every result of a document."""


class BaseTextDocumentRepository(ABC):
    """Contract for the document store."""

    @abstractmethod
    def find_by_id(self, document_id: int) -> TextDocument:
        """Raises DocumentNotFoundError if no document with this ID exists."""

    @abstractmethod
    def mark_analyzed(self, document_id: int) -> None:
        """Raises DocumentNotFoundError if no document with this ID exists."""


class BaseModelRepository(ABC):
    """Contract for the model catalog lookup."""

    @abstractmethod
    def find_default_for_language(
        self,
        analysis_type: AnalysisType,
        language: str,
    ) -> ModelRef | None:
        """Best active model of this type that supports the language."""
