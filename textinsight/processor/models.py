from dataclasses import dataclass

from textinsight.analyzers.models import AnalysisType, ModelRef


@dataclass(frozen=True)
class AnalysisJob:
    """One unit of work: a single analysis type over one document's text."""

    document_id: int
    analysis_type: AnalysisType
    text: str
    language: str
    model: ModelRef | None = None
