from abc import ABC, abstractmethod
from typing import ClassVar

from textinsight.analyzers.exceptions import AnalysisError, AnalyzerError
from textinsight.analyzers.models import AnalysisOutput, AnalysisType, ModelRef


class BaseAnalyzer(ABC):
    """Contract for all analyzers.

    Subclasses implement ``_analyze``. Unexpected exceptions are wrapped in
    AnalyzerError so callers only ever see the AnalysisError hierarchy.
    """

    analysis_type: ClassVar[AnalysisType]

    def analyze(
        self,
        text: str,
        model: ModelRef | None = None,
        language: str = "en",
    ) -> AnalysisOutput:
        """Run the analysis over raw document text.

        Args:
            text: Document content.
            model: Selected model configuration, if any.
            language: Two-letter language code of the document.

        Raises:
            AnalysisError: on any failure.
        """
        try:
            return self._analyze(text, model, language)
        except AnalysisError:
            raise
        except Exception as exc:
            raise AnalyzerError(
                f"{self.analysis_type.value} analysis failed: {exc}"
            ) from exc

    @abstractmethod
    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> AnalysisOutput:
        raise NotImplementedError
