from textinsight.analyzers.exceptions import AnalysisError
from textinsight.analyzers.factory import AnalyzerFactory
from textinsight.analyzers.models import AnalysisType
from textinsight.database.repositories.base import BaseAnalysisResultRepository
from textinsight.logging.logger import Log
from textinsight.processor.payload_serializer import PayloadSerializer
from textinsight.processor.pipeline import PipelineContext, PipelineStep
from textinsight.processor.steps import AnalyzeStep, MarkFailedStep, PersistCompletedStep

DEFAULT_ERROR_CODE = AnalysisError.code


class Processor:
    """Runs pipeline steps in order; on any error runs the failed step and re-raises."""

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, context: PipelineContext) -> PipelineContext:
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.exception(
                f"{context.analysis_type.value} analysis for document {context.document_id} "
                f"failed: {exc}"
            )
            context.error_code = exc.code if isinstance(exc, AnalysisError) else DEFAULT_ERROR_CODE
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context


def build_processor(
    analysis_type: AnalysisType,
    result_repo: BaseAnalysisResultRepository,
) -> Processor:
    """Build a Processor for one analysis type with a fresh analyzer.

    The result record is expected to be in 'processing' already.
    """
    analyzer = AnalyzerFactory.create(analysis_type)
    return Processor(
        steps=[
            AnalyzeStep(analyzer),
            PersistCompletedStep(result_repo, PayloadSerializer()),
        ],
        failed_step=MarkFailedStep(result_repo),
    )
