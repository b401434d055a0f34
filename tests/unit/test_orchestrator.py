from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from textinsight.analyzers.exceptions import (
    AnalysisInputError,
    MissingModelError,
    TextTooLongError,
    UnsupportedAnalysisTypeError,
    UnsupportedLanguageError,
)
from textinsight.analyzers.models import AnalysisStatus, AnalysisType, ModelRef
from textinsight.config.settings import Settings
from textinsight.database.models import TextDocument
from textinsight.database.repositories.factory import Repositories
from textinsight.database.repositories.memory import (
    InMemoryAnalysisResultRepository,
    InMemoryModelRepository,
    InMemoryTextDocumentRepository,
)
from textinsight.orchestration.models import AnalysisRequest
from textinsight.orchestration.orchestrator import AnalysisOrchestrator
from textinsight.processor.exceptions import DocumentNotFoundError
from textinsight.worker.job_runner import JobRunner
from textinsight.worker.worker import Worker

DOCUMENT_TEXT = "This is wonderful. I love it. Acme Inc. pays $500 on 4/5/2024."


def _repositories(models: list[ModelRef] | None = None) -> Repositories:
    return Repositories(
        results=InMemoryAnalysisResultRepository(),
        documents=InMemoryTextDocumentRepository(
            [TextDocument(id=1, content=DOCUMENT_TEXT, language="en")]
        ),
        models=InMemoryModelRepository(languages=["en", "es", "fr", "de"], models=models),
    )


@pytest.fixture()
def settings() -> Settings:
    return Settings(storage_backend="memory", analysis_max_workers=2)


@pytest.fixture()
def repositories() -> Repositories:
    return _repositories()


@pytest.fixture()
def orchestrator(
    repositories: Repositories, settings: Settings
) -> Generator[AnalysisOrchestrator, None, None]:
    with Worker(JobRunner(repositories.results), settings) as worker:
        yield AnalysisOrchestrator(repositories, worker, settings)


def _request(
    models: dict[AnalysisType, ModelRef],
    *types: str,
    language: str | None = "en",
) -> AnalysisRequest:
    return AnalysisRequest.create(
        1,
        types,
        {t: models[AnalysisType(t)] for t in types},
        language=language,
    )


class TestRunAnalysis:
    def test_completes_each_requested_type(
        self,
        orchestrator: AnalysisOrchestrator,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        records = orchestrator.run_analysis(
            _request(builtin_models, "sentiment", "entities"), DOCUMENT_TEXT, timeout=10
        )

        assert set(records) == {AnalysisType.SENTIMENT, AnalysisType.ENTITIES}
        assert all(r.status is AnalysisStatus.COMPLETED for r in records.values())
        assert records[AnalysisType.SENTIMENT].model_id == "builtin-sentiment"
        assert records[AnalysisType.SENTIMENT].processing_time is not None

    def test_marks_document_analyzed(
        self,
        orchestrator: AnalysisOrchestrator,
        repositories: Repositories,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        orchestrator.run_analysis(_request(builtin_models, "keywords"), DOCUMENT_TEXT, timeout=10)

        assert repositories.documents.find_by_id(1).status == "analyzed"

    def test_analyzer_failure_is_recorded_not_raised(
        self,
        orchestrator: AnalysisOrchestrator,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        records = orchestrator.run_analysis(
            _request(builtin_models, "readability", "sentiment"), "", timeout=10
        )

        readability = records[AnalysisType.READABILITY]
        assert readability.status is AnalysisStatus.FAILED
        assert readability.error is not None
        assert readability.error["code"] == "UNDEFINED_METRIC"
        assert records[AnalysisType.SENTIMENT].status is AnalysisStatus.COMPLETED

    def test_complete_stores_every_sub_result(
        self,
        orchestrator: AnalysisOrchestrator,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        records = orchestrator.run_analysis(
            _request(builtin_models, "complete"), DOCUMENT_TEXT, timeout=10
        )

        record = records[AnalysisType.COMPLETE]
        assert record.status is AnalysisStatus.COMPLETED
        assert record.results is not None
        assert set(record.results) == {
            "sentiment",
            "keywords",
            "entities",
            "summary",
            "readability",
        }

    def test_repeat_request_overwrites_result(
        self,
        orchestrator: AnalysisOrchestrator,
        repositories: Repositories,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        request = _request(builtin_models, "sentiment")

        orchestrator.run_analysis(request, DOCUMENT_TEXT, timeout=10)
        orchestrator.run_analysis(request, DOCUMENT_TEXT, timeout=10)

        assert len(repositories.results.find_by_document(1)) == 1


class TestSubmit:
    def test_returns_before_jobs_run(
        self,
        repositories: Repositories,
        settings: Settings,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        worker = MagicMock(spec=Worker)
        orchestrator = AnalysisOrchestrator(repositories, worker, settings)

        ticket = orchestrator.submit(_request(builtin_models, "summary", "sentiment"), DOCUMENT_TEXT)

        assert ticket.analysis_types == (AnalysisType.SENTIMENT, AnalysisType.SUMMARY)
        assert worker.submit.call_count == 2
        for analysis_type in ticket.analysis_types:
            record = repositories.results.find(1, analysis_type)
            assert record is not None
            assert record.status is AnalysisStatus.PROCESSING

    def test_detects_language_when_not_given(
        self,
        orchestrator: AnalysisOrchestrator,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        ticket = orchestrator.submit(
            _request(builtin_models, "keywords", language=None),
            "El perro y la casa de la ciudad que es grande.",
        )
        ticket.wait(timeout=10)

        assert ticket.language == "es"


class TestValidation:
    def test_unknown_type(self, builtin_models: dict[AnalysisType, ModelRef]) -> None:
        with pytest.raises(UnsupportedAnalysisTypeError):
            AnalysisRequest.create(1, ["sentiment", "topics"], builtin_models)

    def test_empty_type_set(self, orchestrator: AnalysisOrchestrator) -> None:
        with pytest.raises(AnalysisInputError):
            orchestrator.submit(AnalysisRequest.create(1, []), DOCUMENT_TEXT)

    def test_missing_model_lists_every_type(
        self,
        orchestrator: AnalysisOrchestrator,
        repositories: Repositories,
    ) -> None:
        request = AnalysisRequest.create(1, ["keywords", "sentiment"], language="en")

        with pytest.raises(MissingModelError, match="No available models for: sentiment, keywords"):
            orchestrator.submit(request, DOCUMENT_TEXT)
        assert repositories.results.find_by_document(1) == []

    def test_text_too_long(
        self,
        repositories: Repositories,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        settings = Settings(max_text_length=10)
        orchestrator = AnalysisOrchestrator(repositories, MagicMock(spec=Worker), settings)

        with pytest.raises(TextTooLongError):
            orchestrator.submit(_request(builtin_models, "sentiment"), DOCUMENT_TEXT)
        assert repositories.results.find_by_document(1) == []

    def test_unsupported_language(
        self,
        orchestrator: AnalysisOrchestrator,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        with pytest.raises(UnsupportedLanguageError, match="Unsupported language: it"):
            orchestrator.submit(_request(builtin_models, "sentiment", language="it"), "Ciao.")

    def test_unknown_document_writes_no_results(
        self,
        repositories: Repositories,
        settings: Settings,
        builtin_models: dict[AnalysisType, ModelRef],
    ) -> None:
        worker = MagicMock(spec=Worker)
        orchestrator = AnalysisOrchestrator(repositories, worker, settings)
        request = AnalysisRequest.create(
            99, ["sentiment"], {"sentiment": builtin_models[AnalysisType.SENTIMENT]}, language="en"
        )

        with pytest.raises(DocumentNotFoundError):
            orchestrator.submit(request, "Hello there.")
        assert repositories.results.find_by_document(99) == []
        worker.submit.assert_not_called()


class TestAnalyzeDocument:
    def test_resolves_default_models(self, orchestrator: AnalysisOrchestrator) -> None:
        records = orchestrator.analyze_document(1, ["sentiment", "keywords"], timeout=10)

        assert records[AnalysisType.SENTIMENT].model_id == "builtin-sentiment"
        assert records[AnalysisType.KEYWORDS].status is AnalysisStatus.COMPLETED

    def test_explicit_model_wins(self, orchestrator: AnalysisOrchestrator) -> None:
        model = ModelRef(id="custom", name="custom", analysis_type=AnalysisType.SENTIMENT)

        records = orchestrator.analyze_document(1, ["sentiment"], {"sentiment": model}, timeout=10)

        assert records[AnalysisType.SENTIMENT].model_id == "custom"

    def test_no_model_available(self, settings: Settings) -> None:
        repositories = _repositories(models=[])
        orchestrator = AnalysisOrchestrator(repositories, MagicMock(spec=Worker), settings)

        with pytest.raises(MissingModelError, match="No available models for: summary"):
            orchestrator.analyze_document(1, ["summary"])

    def test_unknown_document(self, orchestrator: AnalysisOrchestrator) -> None:
        with pytest.raises(DocumentNotFoundError):
            orchestrator.analyze_document(42, ["sentiment"])
