from collections import Counter
from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.exceptions import AnalysisInputError
from textinsight.analyzers.models import AnalysisType, KeyPhrase, Keyword, ModelRef
from textinsight.text.stopwords import ENGLISH_STOPWORDS
from textinsight.text.tfidf import TermWeightingIndex
from textinsight.text.tokenizer import tokenize_sentences, tokenize_words

DEFAULT_KEYWORD_LIMIT = 20

_FUNCTION_WORDS = frozenset(
    {
        "the", "and", "that", "have", "for", "not", "this", "but", "with", "you",
        "are", "his", "her", "they", "will", "from", "all", "can", "has", "been",
    }
)


def filter_terms(text: str) -> list[str]:
    """Lowercase tokens without stopwords or tokens of length <= 2."""
    return [
        token
        for token in tokenize_words(text)
        if token not in ENGLISH_STOPWORDS and len(token) > 2
    ]


def extract_keywords(text: str, limit: int = DEFAULT_KEYWORD_LIMIT) -> list[Keyword]:
    """Rank unique terms by TF-IDF over a single-document corpus.

    Ties keep first-occurrence order.
    """
    terms = filter_terms(text)
    index = TermWeightingIndex([terms])
    counts = Counter(terms)
    keywords = [
        Keyword(word=word, score=index.tfidf(word, 0), count=count)
        for word, count in counts.items()
    ]
    keywords.sort(key=lambda keyword: keyword.score, reverse=True)
    return keywords[:limit]


def _is_content_word(word: str) -> bool:
    return len(word) >= 3 and word not in _FUNCTION_WORDS


def extract_key_phrases(text: str, limit: int = 10) -> list[KeyPhrase]:
    """Score two- and three-word phrases by the TF-IDF of their words.

    Bigrams need two content words; trigrams need content words at both ends.
    """
    terms = filter_terms(text)
    index = TermWeightingIndex([terms])
    weights = {term: index.tfidf(term, 0) for term in terms}

    phrases: dict[str, float] = {}
    for sentence in tokenize_sentences(text):
        words = tokenize_words(sentence)
        for first, second in zip(words, words[1:]):
            if _is_content_word(first) and _is_content_word(second):
                phrase = f"{first} {second}"
                phrases.setdefault(phrase, weights.get(first, 0.0) + weights.get(second, 0.0))
        for first, middle, last in zip(words, words[1:], words[2:]):
            if _is_content_word(first) and _is_content_word(last):
                phrase = f"{first} {middle} {last}"
                phrases.setdefault(
                    phrase,
                    weights.get(first, 0.0) + weights.get(middle, 0.0) + weights.get(last, 0.0),
                )

    ranked = [KeyPhrase(phrase=phrase, score=score) for phrase, score in phrases.items()]
    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]


class KeywordAnalyzer(BaseAnalyzer):
    analysis_type: ClassVar[AnalysisType] = AnalysisType.KEYWORDS

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> list[Keyword]:
        limit = DEFAULT_KEYWORD_LIMIT
        if model is not None:
            limit = int(model.parameters.get("limit", DEFAULT_KEYWORD_LIMIT))
        if limit < 1:
            raise AnalysisInputError(f"Keyword limit must be at least 1, got {limit}")
        return extract_keywords(text, limit=limit)
