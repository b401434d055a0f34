from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from textinsight.analyzers.models import AnalysisOutput, AnalysisType, ModelRef


@dataclass(slots=True)
class PipelineContext:
    document_id: int
    analysis_type: AnalysisType
    text: str
    language: str = "en"
    model: ModelRef | None = None
    output: AnalysisOutput | None = None
    results_payload: dict[str, Any] = field(default_factory=dict)
    processing_time: int = 0
    error_code: str = ""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
