from textinsight.analyzers.models import AnalysisStatus
from textinsight.database.repositories.base import BaseAnalysisResultRepository
from textinsight.logging.logger import Log
from textinsight.processor.models import AnalysisJob
from textinsight.processor.pipeline import PipelineContext
from textinsight.processor.processor import build_processor


class JobRunner:
    """Run one analysis job and catch its exceptions. Failed jobs are not retried."""

    def __init__(self, result_repo: BaseAnalysisResultRepository) -> None:
        self._result_repo = result_repo

    def run(self, job: AnalysisJob) -> AnalysisStatus:
        """Execute a single job; the returned status mirrors what was persisted."""
        label = f"{job.analysis_type.value} job for document {job.document_id}"
        Log.info(f"Running {label}")
        context = PipelineContext(
            document_id=job.document_id,
            analysis_type=job.analysis_type,
            text=job.text,
            language=job.language,
            model=job.model,
        )
        try:
            build_processor(job.analysis_type, self._result_repo).process(context)
        except Exception as exc:
            Log.error(f"{label} failed: {exc}")
            return AnalysisStatus.FAILED
        Log.info(f"{label} completed successfully")
        return AnalysisStatus.COMPLETED
