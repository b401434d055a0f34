from textinsight.text.tokenizer import tokenize_words

# Ten frequent function words per supported language.
_COMMON_WORDS: dict[str, frozenset[str]] = {
    "en": frozenset({"the", "and", "of", "to", "in", "that", "is", "was", "it", "for"}),
    "es": frozenset({"el", "la", "de", "que", "y", "a", "en", "un", "ser", "se"}),
    "fr": frozenset({"le", "la", "de", "et", "à", "en", "un", "est", "que", "dans"}),
    "de": frozenset({"der", "die", "das", "und", "zu", "in", "den", "ist", "von", "nicht"}),
}

DEFAULT_LANGUAGE = "en"


def detect_language(text: str) -> str:
    """Guess the document language from function-word hits.

    Returns "en" when no language scores above zero or when the best
    score is shared by several languages.
    """
    scores = dict.fromkeys(_COMMON_WORDS, 0)
    for token in tokenize_words(text):
        for language, words in _COMMON_WORDS.items():
            if token in words:
                scores[language] += 1

    best = max(scores.values())
    leaders = [language for language, score in scores.items() if score == best]
    if best == 0 or len(leaders) > 1:
        return DEFAULT_LANGUAGE
    return leaders[0]
