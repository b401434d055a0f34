import argparse
import sys
from collections.abc import Sequence

from textinsight.analyzers.exceptions import AnalysisError
from textinsight.analyzers.models import AnalysisStatus, AnalysisType
from textinsight.config.settings import Settings
from textinsight.database.connection import close_pool, init_pool
from textinsight.database.repositories.factory import RepositoryFactory
from textinsight.logging.logger import Log
from textinsight.orchestration.orchestrator import AnalysisOrchestrator
from textinsight.processor.exceptions import ProcessorError
from textinsight.worker.job_runner import JobRunner
from textinsight.worker.worker import Worker


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="textinsight",
        description="Run text analyses on a stored document.",
    )
    parser.add_argument("document_id", type=int, help="ID of the text document")
    parser.add_argument(
        "--types",
        nargs="+",
        metavar="TYPE",
        help=f"analysis types to run ({', '.join(t.value for t in AnalysisType)})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> build dependencies -> analyze one document."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    if settings.storage_backend.lower() != "postgres":
        Log.error(
            f"The CLI analyzes stored documents and needs STORAGE_BACKEND=postgres, "
            f"got '{settings.storage_backend}'"
        )
        return 1
    init_pool(settings)

    try:
        repositories = RepositoryFactory.create(settings)
        job_runner = JobRunner(repositories.results)
        with Worker(job_runner, settings) as worker:
            orchestrator = AnalysisOrchestrator(repositories, worker, settings)
            records = orchestrator.analyze_document(
                args.document_id,
                args.types or settings.default_analysis_types,
            )
    except (AnalysisError, ProcessorError) as exc:
        Log.error(f"Analysis of document {args.document_id} not started: {exc}")
        return 1
    finally:
        close_pool()

    for analysis_type, record in records.items():
        print(f"{analysis_type.value}: {record.status.value} ({record.processing_time or 0} ms)")
    all_completed = all(r.status is AnalysisStatus.COMPLETED for r in records.values())
    return 0 if records and all_completed else 1


if __name__ == "__main__":
    sys.exit(main())
