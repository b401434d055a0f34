from dataclasses import dataclass
from typing import ClassVar

from textinsight.config.settings import Settings
from textinsight.database.repositories.analysis_results_repository import (
    AnalysisResultsRepository,
)
from textinsight.database.repositories.base import (
    BaseAnalysisResultRepository,
    BaseModelRepository,
    BaseTextDocumentRepository,
)
from textinsight.database.repositories.memory import (
    InMemoryAnalysisResultRepository,
    InMemoryModelRepository,
    InMemoryTextDocumentRepository,
)
from textinsight.database.repositories.models_repository import ModelsRepository
from textinsight.database.repositories.text_documents_repository import (
    TextDocumentsRepository,
)


@dataclass(frozen=True)
class Repositories:
    """The three storage collaborators of the analysis service."""

    results: BaseAnalysisResultRepository
    documents: BaseTextDocumentRepository
    models: BaseModelRepository


class RepositoryFactory:
    """Creates the repositories for the configured storage backend."""

    BACKENDS: ClassVar[tuple[str, ...]] = ("postgres", "memory")

    @classmethod
    def create(cls, settings: Settings) -> Repositories:
        backend = settings.storage_backend.lower()
        if backend == "postgres":
            return Repositories(
                results=AnalysisResultsRepository(),
                documents=TextDocumentsRepository(),
                models=ModelsRepository(),
            )
        if backend == "memory":
            return Repositories(
                results=InMemoryAnalysisResultRepository(),
                documents=InMemoryTextDocumentRepository(),
                models=InMemoryModelRepository(languages=settings.supported_languages),
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
