from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType

from textinsight.analyzers.models import AnalysisStatus
from textinsight.config.settings import Settings
from textinsight.logging.logger import Log
from textinsight.processor.models import AnalysisJob
from textinsight.worker.job_runner import JobRunner


class Worker:
    """Thread pool that runs analysis jobs off the caller's thread."""

    def __init__(self, job_runner: JobRunner, settings: Settings) -> None:
        self._job_runner = job_runner
        self._executor = ThreadPoolExecutor(
            max_workers=settings.analysis_max_workers,
            thread_name_prefix="textinsight-analysis",
        )
        Log.info(f"Worker started with {settings.analysis_max_workers} threads")

    def submit(self, job: AnalysisJob) -> Future[AnalysisStatus]:
        Log.debug(f"Dispatching {job.analysis_type.value} job for document {job.document_id}")
        return self._executor.submit(self._job_runner.run, job)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
        Log.info("Worker shut down")

    def __enter__(self) -> "Worker":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()
