import time

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.database.repositories.base import BaseAnalysisResultRepository
from textinsight.logging.logger import Log
from textinsight.processor.payload_serializer import PayloadSerializer
from textinsight.processor.pipeline import PipelineContext, PipelineStep


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        started = time.perf_counter()
        context.output = self._analyzer.analyze(context.text, context.model, context.language)
        context.processing_time = int((time.perf_counter() - started) * 1000)
        Log.info(
            f"Completed {context.analysis_type.value} analysis for document "
            f"{context.document_id} in {context.processing_time}ms"
        )
        return context


class PersistCompletedStep(PipelineStep):
    def __init__(
        self,
        result_repo: BaseAnalysisResultRepository,
        serializer: PayloadSerializer,
    ) -> None:
        self._result_repo = result_repo
        self._serializer = serializer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.output is None:
            raise ValueError("PipelineContext.output must be set before persist")
        context.results_payload = self._serializer.serialize(context.analysis_type, context.output)
        self._result_repo.mark_completed(
            context.document_id,
            context.analysis_type,
            results=context.results_payload,
            processing_time=context.processing_time,
        )
        return context


class MarkFailedStep(PipelineStep):
    def __init__(self, result_repo: BaseAnalysisResultRepository) -> None:
        self._result_repo = result_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        self._result_repo.mark_failed(
            context.document_id,
            context.analysis_type,
            error_code=context.error_code,
            error_message=context.error_message,
        )
        Log.error(
            f"{context.analysis_type.value} analysis for document {context.document_id} "
            f"marked as failed: [{context.error_code}] {context.error_message}"
        )
        return context
