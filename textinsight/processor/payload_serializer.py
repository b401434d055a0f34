from typing import Any

from textinsight.analyzers.models import (
    AnalysisOutput,
    AnalysisType,
    CompleteResult,
    Entity,
    ErrorInfo,
    Keyword,
    ReadabilityResult,
    SentimentResult,
    SummaryResult,
)


class PayloadSerializer:
    """Converts analyzer outputs into the JSON-ready ``results`` mapping.

    Field names follow the camelCase shape the dashboard reads.
    """

    def serialize(self, analysis_type: AnalysisType, output: AnalysisOutput) -> dict[str, Any]:
        """Return ``{type_name: payload}``; a complete run yields one key per sub-analysis."""
        if isinstance(output, CompleteResult):
            return self._complete_to_dict(output)
        return {analysis_type.value: self._output_to_dict(output)}

    def _output_to_dict(self, output: object) -> Any:
        if isinstance(output, SentimentResult):
            return self._sentiment_to_dict(output)
        if isinstance(output, SummaryResult):
            return self._summary_to_dict(output)
        if isinstance(output, ReadabilityResult):
            return self._readability_to_dict(output)
        if isinstance(output, list):
            return [self._item_to_dict(item) for item in output]
        raise TypeError(f"Cannot serialize analyzer output of type {type(output).__name__}")

    def _item_to_dict(self, item: object) -> dict[str, Any]:
        if isinstance(item, Keyword):
            return {"word": item.word, "score": item.score, "count": item.count}
        if isinstance(item, Entity):
            return {
                "entity": item.entity,
                "type": item.type.value,
                "count": item.count,
                "positions": [[start, end] for start, end in item.positions],
            }
        raise TypeError(f"Cannot serialize list item of type {type(item).__name__}")

    def _complete_to_dict(self, result: CompleteResult) -> dict[str, Any]:
        payload: dict[str, Any] = {
            analysis_type.value: self._output_to_dict(output)
            for analysis_type, output in result.outputs.items()
        }
        if result.errors:
            payload["errors"] = {
                analysis_type.value: self._error_to_dict(error)
                for analysis_type, error in result.errors.items()
            }
        return payload

    def _sentiment_to_dict(self, result: SentimentResult) -> dict[str, Any]:
        return {
            "score": result.score,
            "comparative": result.comparative,
            "positive": list(result.positive),
            "negative": list(result.negative),
            "neutral": list(result.neutral),
        }

    def _summary_to_dict(self, result: SummaryResult) -> dict[str, Any]:
        return {
            "abstractive": result.abstractive,
            "extractive": list(result.extractive),
            "length": result.length,
        }

    def _readability_to_dict(self, result: ReadabilityResult) -> dict[str, float]:
        return {
            "fleschKincaid": result.flesch_kincaid,
            "gunningFog": result.gunning_fog,
            "colemanLiau": result.coleman_liau,
            "automatedReadability": result.automated_readability,
            "readingTime": result.reading_time,
        }

    def _error_to_dict(self, error: ErrorInfo) -> dict[str, str]:
        return {"code": error.code, "message": error.message}
