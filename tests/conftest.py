import pytest

from textinsight.analyzers.models import AnalysisType, ModelRef


@pytest.fixture()
def positive_text() -> str:
    return "This is wonderful. I love it."


@pytest.fixture()
def neutral_text() -> str:
    return "The train arrives at noon. The table has four legs."


@pytest.fixture()
def readability_text() -> str:
    """10 words, 2 sentences, 14 syllables, one complex word."""
    return "This is a simple test sentence. It has two sentences."


@pytest.fixture()
def entity_text() -> str:
    return "Dr. Jane Smith works at Acme Inc. in Springfield City."


@pytest.fixture()
def long_text() -> str:
    """Six sentences; the fifth repeats rare terms and scores highest."""
    return (
        "Cats sleep during the afternoon. "
        "Dogs bark at passing cars. "
        "Birds sing early every morning. "
        "Fish swim around the small pond. "
        "Quantum entanglement puzzles quantum physicists studying entanglement. "
        "Horses run across open fields."
    )


@pytest.fixture()
def builtin_models() -> dict[AnalysisType, ModelRef]:
    return {
        analysis_type: ModelRef(
            id=f"builtin-{analysis_type.value}",
            name=f"Built-in {analysis_type.value}",
            analysis_type=analysis_type,
            languages=("en", "es", "fr", "de"),
        )
        for analysis_type in AnalysisType
    }
