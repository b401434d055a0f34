from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from textinsight.analyzers.exceptions import UnsupportedAnalysisTypeError


class AnalysisType(str, Enum):
    SENTIMENT = "sentiment"
    KEYWORDS = "keywords"
    ENTITIES = "entities"
    SUMMARY = "summary"
    READABILITY = "readability"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, value: "str | AnalysisType") -> "AnalysisType":
        """Resolve a type name, raising UnsupportedAnalysisTypeError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedAnalysisTypeError(
                f"Unsupported analysis type: {value}"
            ) from None

    @classmethod
    def individual(cls) -> tuple["AnalysisType", ...]:
        """The five single analyses that make up a complete run, in run order."""
        return (cls.SENTIMENT, cls.KEYWORDS, cls.ENTITIES, cls.SUMMARY, cls.READABILITY)


class AnalysisStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class EntityType(str, Enum):
    PERSON = "person"
    ORGANIZATION = "organization"
    LOCATION = "location"
    DATE = "date"
    MONEY = "money"


@dataclass(frozen=True)
class ModelRef:
    """Model configuration selected for one analysis type.

    The built-in analyzers are deterministic; ``parameters`` is an optional
    configuration bag they may read.
    """

    id: str
    name: str
    analysis_type: AnalysisType
    languages: tuple[str, ...] = ("en",)
    version: str = "1.0"
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ErrorInfo:
    code: str
    message: str


@dataclass(frozen=True)
class SentimentResult:
    score: float
    comparative: float
    positive: list[str] = field(default_factory=list)
    negative: list[str] = field(default_factory=list)
    neutral: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Keyword:
    word: str
    score: float
    count: int


@dataclass(frozen=True)
class KeyPhrase:
    phrase: str
    score: float


@dataclass(frozen=True)
class Entity:
    entity: str
    type: EntityType
    count: int
    positions: list[tuple[int, int]] = field(default_factory=list)


@dataclass(frozen=True)
class SummaryResult:
    # No generative model exists: ``abstractive`` is the extractive
    # selection joined with single spaces.
    abstractive: str
    extractive: list[str]
    length: int


@dataclass(frozen=True)
class ReadabilityResult:
    flesch_kincaid: float
    gunning_fog: float
    coleman_liau: float
    automated_readability: float
    reading_time: float


@dataclass(frozen=True)
class TextComplexity:
    type_token_ratio: float
    avg_sentence_length: float
    avg_word_length: float
    avg_syllables_per_word: float
    complex_word_percentage: float


@dataclass(frozen=True)
class CompleteResult:
    """Outputs of every sub-analysis that succeeded, plus per-type failures."""

    outputs: dict[AnalysisType, object] = field(default_factory=dict)
    errors: dict[AnalysisType, ErrorInfo] = field(default_factory=dict)


AnalysisOutput = (
    SentimentResult
    | list[Keyword]
    | list[Entity]
    | SummaryResult
    | ReadabilityResult
    | CompleteResult
)
