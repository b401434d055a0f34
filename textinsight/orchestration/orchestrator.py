from collections.abc import Iterable, Mapping

from textinsight.analyzers.exceptions import (
    AnalysisInputError,
    MissingModelError,
    TextTooLongError,
    UnsupportedLanguageError,
)
from textinsight.analyzers.models import AnalysisType, ModelRef
from textinsight.config.settings import Settings
from textinsight.database.models import AnalysisResultRecord
from textinsight.database.repositories.factory import Repositories
from textinsight.logging.logger import Log
from textinsight.orchestration.models import AnalysisRequest, AnalysisTicket
from textinsight.processor.models import AnalysisJob
from textinsight.text.language import detect_language
from textinsight.worker.worker import Worker

_RUN_ORDER = {analysis_type: index for index, analysis_type in enumerate(AnalysisType)}


class AnalysisOrchestrator:
    """Validates analysis requests, records them as processing and dispatches jobs.

    Configuration errors (unknown type, missing model, oversized text,
    unsupported language) are raised before any result is written. Analyzer
    failures are recorded on the result and never raised from here.
    """

    def __init__(
        self,
        repositories: Repositories,
        worker: Worker,
        settings: Settings,
    ) -> None:
        self._repos = repositories
        self._worker = worker
        self._settings = settings

    def submit(self, request: AnalysisRequest, text: str) -> AnalysisTicket:
        """Queue one job per requested type and return without waiting."""
        types = self._ordered_types(request.requested_types)
        self._check_models(types, request.model_by_type)
        self._check_length(text)
        language = self._resolve_language(request.language, text)
        # Raises DocumentNotFoundError before any result record is written.
        self._repos.documents.mark_analyzed(request.document_id)

        jobs = []
        for analysis_type in types:
            model = request.model_by_type[analysis_type]
            self._repos.results.mark_processing(request.document_id, analysis_type, model.id)
            jobs.append(
                AnalysisJob(
                    document_id=request.document_id,
                    analysis_type=analysis_type,
                    text=text,
                    language=language,
                    model=model,
                )
            )

        futures = {job.analysis_type: self._worker.submit(job) for job in jobs}
        Log.info(
            f"Queued {', '.join(t.value for t in types)} for document {request.document_id}"
        )
        return AnalysisTicket(request.document_id, language, futures)

    def run_analysis(
        self,
        request: AnalysisRequest,
        text: str,
        timeout: float | None = None,
    ) -> dict[AnalysisType, AnalysisResultRecord]:
        """Submit, wait for every job, then read the stored results back."""
        ticket = self.submit(request, text)
        ticket.wait(timeout)
        records: dict[AnalysisType, AnalysisResultRecord] = {}
        for analysis_type in ticket.analysis_types:
            record = self._repos.results.find(request.document_id, analysis_type)
            if record is not None:
                records[analysis_type] = record
        return records

    def analyze_document(
        self,
        document_id: int,
        types: Iterable["str | AnalysisType"],
        models: Mapping["str | AnalysisType", ModelRef] | None = None,
        timeout: float | None = None,
    ) -> dict[AnalysisType, AnalysisResultRecord]:
        """Analyze a stored document, looking up default models for types without one."""
        document = self._repos.documents.find_by_id(document_id)
        request = AnalysisRequest.create(document_id, types, models, document.language)

        model_by_type = dict(request.model_by_type)
        for analysis_type in request.requested_types - model_by_type.keys():
            model = self._repos.models.find_default_for_language(
                analysis_type, document.language
            )
            if model is not None:
                model_by_type[analysis_type] = model

        resolved = AnalysisRequest(
            document_id=document_id,
            requested_types=request.requested_types,
            model_by_type=model_by_type,
            language=document.language,
        )
        return self.run_analysis(resolved, document.content, timeout)

    def _ordered_types(self, requested: Iterable[AnalysisType]) -> list[AnalysisType]:
        types = sorted(set(requested), key=_RUN_ORDER.__getitem__)
        if not types:
            raise AnalysisInputError("At least one analysis type must be requested")
        return types

    def _check_models(
        self,
        types: list[AnalysisType],
        model_by_type: Mapping[AnalysisType, ModelRef],
    ) -> None:
        missing = [t.value for t in types if t not in model_by_type]
        if missing:
            raise MissingModelError(f"No available models for: {', '.join(missing)}")

    def _check_length(self, text: str) -> None:
        if len(text) > self._settings.max_text_length:
            raise TextTooLongError(
                f"Text has {len(text)} characters; the limit is {self._settings.max_text_length}"
            )

    def _resolve_language(self, language: str | None, text: str) -> str:
        if language is None:
            if self._settings.detect_language:
                language = detect_language(text)
            else:
                language = self._settings.default_language
        if language not in self._settings.supported_languages:
            raise UnsupportedLanguageError(f"Unsupported language: {language}")
        return language
