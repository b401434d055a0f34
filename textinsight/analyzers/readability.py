"""Classic readability formulas.

The four scores are grade-level style indices, not a 0-100 scale. The
dashboard's single "readability score" gauge has no agreed mapping from these
values, so none is applied here.
"""

import re
from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.exceptions import UndefinedMetricError
from textinsight.analyzers.models import (
    AnalysisType,
    ModelRef,
    ReadabilityResult,
    TextComplexity,
)
from textinsight.text.tokenizer import (
    average_syllables_per_word,
    count_syllables,
    tokenize_sentences,
    tokenize_words,
)

WORDS_PER_MINUTE = 200
_WHITESPACE_RE = re.compile(r"\s")


def analyze_readability(text: str) -> ReadabilityResult:
    """Compute Flesch-Kincaid, Gunning Fog, Coleman-Liau, ARI and reading time.

    Raises:
        UndefinedMetricError: if the text has no words or no sentences.
    """
    words = tokenize_words(text)
    sentences = tokenize_sentences(text)
    if not words or not sentences:
        raise UndefinedMetricError(
            f"Readability is undefined for {len(words)} words in {len(sentences)} sentences"
        )

    word_count = len(words)
    sentence_count = len(sentences)
    syllables = [count_syllables(word) for word in words]
    complex_words = sum(1 for count in syllables if count > 2)
    word_characters = sum(len(word) for word in words)
    characters = len(_WHITESPACE_RE.sub("", text))

    words_per_sentence = word_count / sentence_count
    flesch_kincaid = 0.39 * words_per_sentence + 11.8 * (sum(syllables) / word_count) - 15.59
    gunning_fog = 0.4 * (words_per_sentence + 100 * (complex_words / word_count))
    letters_per_100 = (word_characters / word_count) * 100
    sentences_per_100 = (sentence_count / word_count) * 100
    coleman_liau = 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8
    automated_readability = 4.71 * (characters / word_count) + 0.5 * words_per_sentence - 21.43

    return ReadabilityResult(
        flesch_kincaid=round(flesch_kincaid, 2),
        gunning_fog=round(gunning_fog, 2),
        coleman_liau=round(coleman_liau, 2),
        automated_readability=round(automated_readability, 2),
        reading_time=round(word_count / WORDS_PER_MINUTE, 2),
    )


def text_complexity(text: str) -> TextComplexity:
    """Vocabulary and length statistics. All zero for empty text."""
    words = tokenize_words(text)
    sentences = tokenize_sentences(text)
    if not words:
        return TextComplexity(
            type_token_ratio=0.0,
            avg_sentence_length=0.0,
            avg_word_length=0.0,
            avg_syllables_per_word=0.0,
            complex_word_percentage=0.0,
        )

    complex_words = [word for word in words if count_syllables(word) > 2]
    return TextComplexity(
        type_token_ratio=len(set(words)) / len(words),
        avg_sentence_length=len(words) / len(sentences) if sentences else 0.0,
        avg_word_length=sum(len(word) for word in words) / len(words),
        avg_syllables_per_word=average_syllables_per_word(text),
        complex_word_percentage=len(complex_words) / len(words) * 100,
    )


class ReadabilityAnalyzer(BaseAnalyzer):
    analysis_type: ClassVar[AnalysisType] = AnalysisType.READABILITY

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> ReadabilityResult:
        return analyze_readability(text)
