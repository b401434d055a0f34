"""Tokenization and text-metric helpers used by every analyzer.

All helpers are pure functions. Empty input degrades to ``0`` or an empty
sequence; nothing here raises on blank text.
"""

import re
from collections import Counter

from nltk.stem import PorterStemmer, SnowballStemmer
from nltk.stem.api import StemmerI
from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer
from nltk.util import ngrams

from textinsight.text.stopwords import ENGLISH_STOPWORDS

_ABBREVIATIONS = frozenset(
    {
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt", "ave", "blvd",
        "inc", "corp", "co", "ltd", "dept", "univ", "vs", "etc", "e.g", "i.e",
        "u.s", "u.k", "no", "fig", "approx", "jan", "feb", "mar", "apr", "jun",
        "jul", "aug", "sep", "sept", "oct", "nov", "dec",
    }
)

_SNOWBALL_LANGUAGES = {"es": "spanish", "fr": "french", "de": "german"}

_WORD_TOKENIZER = RegexpTokenizer(r"\w+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_NON_ALPHA_RE = re.compile(r"[^a-z]")
_SILENT_ENDING_RE = re.compile(r"(?:[^laeiouy]|ed|[^laeiouy]e)$")
_LEADING_Y_RE = re.compile(r"^y")
_VOWEL_RUN_RE = re.compile(r"[aeiouy]{1,2}")


def _build_sentence_tokenizer() -> PunktSentenceTokenizer:
    params = PunktParameters()
    params.abbrev_types = set(_ABBREVIATIONS)
    return PunktSentenceTokenizer(params)


_SENTENCE_TOKENIZER = _build_sentence_tokenizer()


def tokenize_words(text: str, remove_stopwords: bool = False) -> list[str]:
    """Split text into lowercase word tokens on non-word boundaries."""
    tokens = _WORD_TOKENIZER.tokenize(text.lower())
    if remove_stopwords:
        return [token for token in tokens if token not in ENGLISH_STOPWORDS]
    return tokens


def tokenize_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping abbreviations such as "Dr." intact."""
    return [
        sentence.strip()
        for sentence in _SENTENCE_TOKENIZER.tokenize(text)
        if sentence.strip()
    ]


def count_words(text: str) -> int:
    return len(tokenize_words(text))


def count_sentences(text: str) -> int:
    return len(tokenize_sentences(text))


def count_paragraphs(text: str) -> int:
    """Count blocks of text separated by blank lines."""
    return len([block for block in _PARAGRAPH_SPLIT_RE.split(text) if block.strip()])


def count_syllables(word: str) -> int:
    """Estimate the syllable count of a single word. Always at least 1."""
    word = _NON_ALPHA_RE.sub("", word.lower())
    if len(word) <= 3:
        return 1
    word = _SILENT_ENDING_RE.sub("", word, count=1)
    word = _LEADING_Y_RE.sub("", word, count=1)
    syllables = _VOWEL_RUN_RE.findall(word)
    return len(syllables) if syllables else 1


def average_syllables_per_word(text: str) -> float:
    words = tokenize_words(text)
    if not words:
        return 0.0
    return sum(count_syllables(word) for word in words) / len(words)


def average_words_per_sentence(text: str) -> float:
    sentences = tokenize_sentences(text)
    if not sentences:
        return 0.0
    return sum(count_words(sentence) for sentence in sentences) / len(sentences)


def get_word_frequency(text: str, remove_stopwords: bool = True) -> dict[str, int]:
    """Count word occurrences, skipping single-character tokens."""
    tokens = tokenize_words(text, remove_stopwords)
    return dict(Counter(token for token in tokens if len(token) > 1))


def stemmer_for(language: str) -> StemmerI:
    """Porter for English, Snowball for the other supported languages."""
    snowball_language = _SNOWBALL_LANGUAGES.get(language)
    if snowball_language is None:
        return PorterStemmer()
    return SnowballStemmer(snowball_language)


def stem_words(words: list[str], language: str = "en") -> list[str]:
    stemmer = stemmer_for(language)
    return [stemmer.stem(word) for word in words]


def preprocess_text(text: str, language: str = "en") -> list[str]:
    """Tokenize, drop stopwords and tokens of length <= 2, then stem."""
    tokens = [
        token
        for token in tokenize_words(text)
        if token not in ENGLISH_STOPWORDS and len(token) > 2
    ]
    return stem_words(tokens, language)


def generate_ngrams(text: str, n: int = 2) -> list[list[str]]:
    """Contiguous windows of ``n`` word tokens."""
    if n < 1:
        return []
    return [list(gram) for gram in ngrams(tokenize_words(text), n)]


def calculate_term_frequency(term: str, document: str) -> float:
    """Share of the document's tokens equal to ``term``."""
    tokens = tokenize_words(document)
    if not tokens:
        return 0.0
    return tokens.count(term) / len(tokens)
