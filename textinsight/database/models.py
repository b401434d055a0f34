from dataclasses import dataclass
from datetime import datetime
from typing import Any

from textinsight.analyzers.models import AnalysisStatus, AnalysisType


@dataclass(frozen=True)
class TextDocument:
    """A stored document as consumed by the analysis pipeline (read-only)."""

    id: int
    content: str
    language: str
    status: str = "draft"


@dataclass
class AnalysisResultRecord:
    """Represents a row from the analysis_results table.

    At most one row exists per (document_id, analysis_type).
    """

    document_id: int
    analysis_type: AnalysisType
    status: AnalysisStatus
    model_id: str | None = None
    results: dict[str, Any] | None = None
    processing_time: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def error(self) -> dict[str, str] | None:
        """``{code, message}`` for failed results, otherwise None."""
        if self.status is not AnalysisStatus.FAILED:
            return None
        return {"code": self.error_code or "", "message": self.error_message or ""}
