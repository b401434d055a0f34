from collections.abc import Mapping
from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.exceptions import AnalysisError, AnalyzerError
from textinsight.analyzers.models import AnalysisType, CompleteResult, ErrorInfo, ModelRef
from textinsight.logging.logger import Log


class CompleteAnalysisError(AnalyzerError):
    """Raised when every sub-analysis of a complete run failed."""

    code = "COMPLETE_ANALYSIS_FAILED"

    def __init__(self, message: str, errors: dict[AnalysisType, ErrorInfo]) -> None:
        super().__init__(message)
        self.errors = errors


class CompleteAnalyzer(BaseAnalyzer):
    """Runs each single analyzer in turn, isolating their failures.

    A failing sub-analysis is recorded in ``CompleteResult.errors`` and the
    remaining ones still run.
    """

    analysis_type: ClassVar[AnalysisType] = AnalysisType.COMPLETE

    def __init__(self, analyzers: Mapping[AnalysisType, BaseAnalyzer]) -> None:
        self._analyzers = dict(analyzers)

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> CompleteResult:
        outputs: dict[AnalysisType, object] = {}
        errors: dict[AnalysisType, ErrorInfo] = {}
        for analysis_type, analyzer in self._analyzers.items():
            try:
                outputs[analysis_type] = analyzer.analyze(text, model, language)
            except AnalysisError as exc:
                Log.warning(f"Complete analysis: {analysis_type.value} failed: {exc}")
                errors[analysis_type] = ErrorInfo(code=exc.code, message=str(exc))

        if errors and not outputs:
            raise CompleteAnalysisError(
                f"All analyses failed: {', '.join(t.value for t in errors)}",
                errors,
            )
        return CompleteResult(outputs=outputs, errors=errors)
