"""Pattern-based named-entity recognition.

Each ``EntityMatcher`` finds literal mentions of one entity type. The
extractor records every non-overlapping occurrence of each distinct literal
with its character offsets. No canonicalization is done: "ACME Inc." and
"Acme Inc." are separate entries.
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar

from textinsight.analyzers.base import BaseAnalyzer
from textinsight.analyzers.models import AnalysisType, Entity, EntityType, ModelRef

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October|November|December"
)


class EntityMatcher(ABC):
    """Finds mentions of one entity type in raw text."""

    entity_type: EntityType

    @abstractmethod
    def find(self, text: str) -> list[str]:
        """Return matched literals in text order (duplicates allowed)."""


class RegexEntityMatcher(EntityMatcher):
    def __init__(self, entity_type: EntityType, pattern: re.Pattern[str]) -> None:
        self.entity_type = entity_type
        self._pattern = pattern

    def find(self, text: str) -> list[str]:
        return [match.group(0) for match in self._pattern.finditer(text)]


PERSON_RE = re.compile(
    r"\b(?:Mr|Mrs|Ms|Dr)\. [A-Z][a-z]+ [A-Z][a-z]+\b"
    r"|\b[A-Z][a-z]+ [A-Z][a-z]+\b"
)
# Dotted suffixes end on punctuation, where \b cannot follow.
ORGANIZATION_RE = re.compile(
    r"\b[A-Z][a-z]* (?:(?:Corporation|Company|LLC)\b|(?:Inc|Corp|Co|Ltd)\.)"
)
LOCATION_RE = re.compile(
    r"\b[A-Z][a-z]+ (?:City|Town|Village|County|State|Province|Country)\b"
)
DATE_RE = re.compile(
    r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"
    rf"|\b(?:{_MONTHS}) \d{{1,2}}(?:st|nd|rd|th)?, \d{{4}}\b"
)
MONEY_RE = re.compile(r"\$\d{1,3}(?:,\d{3})+(?:\.\d{2})?|\$\d+(?:\.\d{2})?")


def default_matchers() -> list[EntityMatcher]:
    return [
        RegexEntityMatcher(EntityType.PERSON, PERSON_RE),
        RegexEntityMatcher(EntityType.ORGANIZATION, ORGANIZATION_RE),
        RegexEntityMatcher(EntityType.LOCATION, LOCATION_RE),
        RegexEntityMatcher(EntityType.DATE, DATE_RE),
        RegexEntityMatcher(EntityType.MONEY, MONEY_RE),
    ]


def find_all_positions(text: str, literal: str) -> list[tuple[int, int]]:
    """Every non-overlapping ``[start, end)`` occurrence of ``literal``."""
    if not literal:
        return []
    positions: list[tuple[int, int]] = []
    start = text.find(literal)
    while start != -1:
        end = start + len(literal)
        positions.append((start, end))
        start = text.find(literal, end)
    return positions


class EntityAnalyzer(BaseAnalyzer):
    analysis_type: ClassVar[AnalysisType] = AnalysisType.ENTITIES

    def __init__(self, matchers: list[EntityMatcher] | None = None) -> None:
        self._matchers = matchers if matchers is not None else default_matchers()

    def _analyze(
        self,
        text: str,
        model: ModelRef | None,
        language: str,
    ) -> list[Entity]:
        entities: list[Entity] = []
        for matcher in self._matchers:
            seen: set[str] = set()
            for literal in matcher.find(text):
                if literal in seen:
                    continue
                seen.add(literal)
                positions = find_all_positions(text, literal)
                entities.append(
                    Entity(
                        entity=literal,
                        type=matcher.entity_type,
                        count=len(positions),
                        positions=positions,
                    )
                )
        return entities
