import math
from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.models import AnalysisType, ModelRef, SummaryResult
from textinsight.text.tfidf import TermWeightingIndex
from textinsight.text.tokenizer import preprocess_text, tokenize_sentences

MIN_SUMMARY_SENTENCES = 3
SUMMARY_RATIO = 0.3


def summarize(text: str, language: str = "en") -> SummaryResult:
    """Pick the highest-weighted sentences and return them in source order.

    Texts of three sentences or fewer are returned unchanged.
    """
    sentences = tokenize_sentences(text)
    if len(sentences) <= MIN_SUMMARY_SENTENCES:
        return SummaryResult(abstractive=text, extractive=sentences, length=len(sentences))

    terms_per_sentence = [preprocess_text(sentence, language) for sentence in sentences]
    index = TermWeightingIndex(terms_per_sentence)

    scores: list[tuple[int, float]] = []
    for position, terms in enumerate(terms_per_sentence):
        total = sum(index.tfidf(term, position) for term in terms)
        scores.append((position, total / len(terms) if terms else 0.0))

    selected_count = max(MIN_SUMMARY_SENTENCES, math.ceil(len(sentences) * SUMMARY_RATIO))
    ranked = sorted(scores, key=lambda item: item[1], reverse=True)
    selected = sorted(position for position, _score in ranked[:selected_count])

    extractive = [sentences[position] for position in selected]
    return SummaryResult(
        abstractive=" ".join(extractive),
        extractive=extractive,
        length=len(extractive),
    )


class SummaryAnalyzer(BaseAnalyzer):
    analysis_type: ClassVar[AnalysisType] = AnalysisType.SUMMARY

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> SummaryResult:
        return summarize(text, language)
