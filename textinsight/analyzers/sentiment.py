"""Lexicon-based sentiment scoring.

Token valences come from the VADER polarity lexicon. A token preceded by a
negation word has its valence flipped.
"""

from functools import lru_cache
from typing import ClassVar

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.models import AnalysisType, ModelRef, SentimentResult
from textinsight.text.tokenizer import tokenize_sentences, tokenize_words

POSITIVE_THRESHOLD = 0.2
NEGATIVE_THRESHOLD = -0.2

# "t" is the tail of a split "n't" contraction (don't -> don, t).
_NEGATIONS = frozenset(
    {
        "not", "no", "never", "neither", "nor", "none", "nobody", "nothing",
        "nowhere", "cannot", "without", "t",
    }
)


@lru_cache(maxsize=1)
def _lexicon() -> dict[str, float]:
    return dict(SentimentIntensityAnalyzer().lexicon)


def score_tokens(tokens: list[str]) -> float:
    """Sum of lexicon valences over a token sequence."""
    lexicon = _lexicon()
    score = 0.0
    previous = ""
    for token in tokens:
        valence = lexicon.get(token, 0.0)
        if previous in _NEGATIONS:
            valence = -valence
        score += valence
        previous = token
    return score


class SentimentAnalyzer(BaseAnalyzer):
    """Scores the whole document and buckets each sentence by polarity."""

    analysis_type: ClassVar[AnalysisType] = AnalysisType.SENTIMENT

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> SentimentResult:
        tokens = tokenize_words(text)
        score = score_tokens(tokens)
        comparative = score / len(tokens) if tokens else 0.0

        positive: list[str] = []
        negative: list[str] = []
        neutral: list[str] = []
        for sentence in tokenize_sentences(text):
            sentence_score = score_tokens(tokenize_words(sentence))
            if sentence_score > POSITIVE_THRESHOLD:
                positive.append(sentence)
            elif sentence_score < NEGATIVE_THRESHOLD:
                negative.append(sentence)
            else:
                neutral.append(sentence)

        return SentimentResult(
            score=score,
            comparative=comparative,
            positive=positive,
            negative=negative,
            neutral=neutral,
        )
