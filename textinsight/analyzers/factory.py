from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.complete import CompleteAnalyzer
from textinsight.analyzers.entities import EntityAnalyzer
from textinsight.analyzers.keywords import KeywordAnalyzer
from textinsight.analyzers.models import AnalysisType
from textinsight.analyzers.readability import ReadabilityAnalyzer
from textinsight.analyzers.sentiment import SentimentAnalyzer
from textinsight.analyzers.summarizer import SummaryAnalyzer


class AnalyzerFactory:
    """Creates a fresh analyzer for an analysis type."""

    ANALYZERS: ClassVar[dict[AnalysisType, type[BaseAnalyzer]]] = {
        AnalysisType.SENTIMENT: SentimentAnalyzer,
        AnalysisType.KEYWORDS: KeywordAnalyzer,
        AnalysisType.ENTITIES: EntityAnalyzer,
        AnalysisType.SUMMARY: SummaryAnalyzer,
        AnalysisType.READABILITY: ReadabilityAnalyzer,
    }

    @classmethod
    def create(cls, analysis_type: "AnalysisType | str") -> BaseAnalyzer:
        """Raises UnsupportedAnalysisTypeError for unknown type names."""
        resolved = AnalysisType.parse(analysis_type)
        if resolved is AnalysisType.COMPLETE:
            return CompleteAnalyzer(
                {t: cls.ANALYZERS[t]() for t in AnalysisType.individual()}
            )
        return cls.ANALYZERS[resolved]()
