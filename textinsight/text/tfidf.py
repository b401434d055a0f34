"""Per-call TF-IDF index over a small corpus of token lists.

Each analyzer builds its own ``TermWeightingIndex`` for the text it is
analyzing (one document per sentence, or a single document). Nothing is
cached between calls.
"""

from collections.abc import Sequence

from sklearn.feature_extraction.text import TfidfVectorizer


def _identity(tokens: Sequence[str]) -> Sequence[str]:
    return tokens


class TermWeightingIndex:
    """Raw term counts weighted by smoothed, log-scaled inverse document frequency.

    ``tfidf(term, i) = count(term, doc_i) * (1 + ln((1 + N) / (1 + df(term))))``
    """

    def __init__(self, documents: Sequence[Sequence[str]]) -> None:
        self._documents = [list(doc) for doc in documents]
        self._vectorizer = TfidfVectorizer(
            analyzer=_identity,
            lowercase=False,
            token_pattern=None,
            norm=None,
            smooth_idf=True,
        )
        self._matrix = None
        self._vocabulary: dict[str, int] = {}
        if any(self._documents):
            self._matrix = self._vectorizer.fit_transform(self._documents).tocsr()
            self._vocabulary = self._vectorizer.vocabulary_

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def idf(self, term: str) -> float:
        column = self._vocabulary.get(term)
        if column is None:
            return 0.0
        return float(self._vectorizer.idf_[column])

    def tfidf(self, term: str, document_index: int) -> float:
        """Weight of ``term`` in the document at ``document_index``."""
        if not 0 <= document_index < len(self._documents):
            raise IndexError(f"Document index {document_index} out of range")
        column = self._vocabulary.get(term)
        if column is None or self._matrix is None:
            return 0.0
        return float(self._matrix[document_index, column])

    def rank(self, query_terms: Sequence[str], limit: int = 5) -> list[tuple[int, float]]:
        """Rank corpus documents by mean TF-IDF of the query terms.

        Returns ``(document_index, similarity)`` pairs, best first.
        """
        scores: list[tuple[int, float]] = []
        for index in range(len(self._documents)):
            total = sum(self.tfidf(term, index) for term in query_terms)
            similarity = total / len(query_terms) if query_terms else 0.0
            scores.append((index, similarity))
        scores.sort(key=lambda item: item[1], reverse=True)
        return scores[:limit]
