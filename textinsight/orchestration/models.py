from collections.abc import Iterable, Mapping
from concurrent.futures import Future, wait
from dataclasses import dataclass, field

from textinsight.analyzers.models import AnalysisStatus, AnalysisType, ModelRef


@dataclass(frozen=True)
class AnalysisRequest:
    """What to run for one document. Built per call, never persisted."""

    document_id: int
    requested_types: frozenset[AnalysisType]
    model_by_type: Mapping[AnalysisType, ModelRef] = field(default_factory=dict)
    language: str | None = None

    @classmethod
    def create(
        cls,
        document_id: int,
        requested_types: Iterable["str | AnalysisType"],
        model_by_type: Mapping["str | AnalysisType", ModelRef] | None = None,
        language: str | None = None,
    ) -> "AnalysisRequest":
        """Build a request from type names; unknown names raise UnsupportedAnalysisTypeError."""
        return cls(
            document_id=document_id,
            requested_types=frozenset(AnalysisType.parse(t) for t in requested_types),
            model_by_type={
                AnalysisType.parse(t): model for t, model in (model_by_type or {}).items()
            },
            language=language,
        )


@dataclass(frozen=True)
class AnalysisTicket:
    """Acknowledgement for queued analyses; wait() to observe completion."""

    document_id: int
    language: str
    futures: Mapping[AnalysisType, Future[AnalysisStatus]]

    @property
    def analysis_types(self) -> tuple[AnalysisType, ...]:
        return tuple(self.futures)

    def done(self) -> bool:
        return all(future.done() for future in self.futures.values())

    def wait(self, timeout: float | None = None) -> dict[AnalysisType, AnalysisStatus]:
        """Block until every job finishes; raises TimeoutError if the timeout expires first."""
        _, pending = wait(list(self.futures.values()), timeout=timeout)
        if pending:
            raise TimeoutError(
                f"{len(pending)} analyses for document {self.document_id} still running"
            )
        return {analysis_type: future.result() for analysis_type, future in self.futures.items()}
