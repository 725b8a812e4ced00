"""Finding deduplication and overall risk scoring."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .config import DEFAULT_SETTINGS
from .models import Risk, Severity

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = DEFAULT_SETTINGS.similarity_threshold

#: Overall score thresholds on the average severity weight.
HIGH_AVERAGE_WEIGHT = 2.5
MEDIUM_AVERAGE_WEIGHT = 1.8


def word_similarity(a: str, b: str) -> float:
    """Jaccard word-overlap similarity between two strings.

    Words are lower-cased and split on whitespace. Returns a value between
    0.0 (nothing shared) and 1.0 (same word set).
    """
    words_a = set(a.lower().split())
    words_b = set(b.lower().split())
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def is_duplicate(
    existing: Risk, candidate: Risk, threshold: float = DEFAULT_SIMILARITY_THRESHOLD
) -> bool:
    return (
        existing.category == candidate.category
        and existing.severity == candidate.severity
        and word_similarity(existing.description, candidate.description) > threshold
    )


def deduplicate_risks(
    risks: Sequence[Risk], threshold: float = DEFAULT_SIMILARITY_THRESHOLD
) -> list[Risk]:
    """Drop near-duplicate findings, keeping the first of each group.

    A finding is dropped when an already-kept finding has the same category
    and severity and a description similarity strictly above ``threshold``.
    Order of the surviving findings is preserved.
    """
    unique: list[Risk] = []
    for risk in risks:
        if any(is_duplicate(kept, risk, threshold) for kept in unique):
            logger.debug("Dropping duplicate finding: %s", risk.description)
            continue
        unique.append(risk)
    return unique


def score_risks(risks: Sequence[Risk]) -> Severity:
    """Reduce a list of findings to one overall risk level.

    Rules, first match wins:

    * no findings -> low
    * two or more high findings, or average weight >= 2.5 -> high
    * any high finding, three or more medium findings, or average
      weight >= 1.8 -> medium
    * otherwise -> low
    """
    if not risks:
        return Severity.LOW

    high_count = sum(1 for r in risks if r.severity == Severity.HIGH)
    medium_count = sum(1 for r in risks if r.severity == Severity.MEDIUM)
    average_weight = sum(r.severity.weight for r in risks) / len(risks)

    if high_count >= 2 or average_weight >= HIGH_AVERAGE_WEIGHT:
        return Severity.HIGH
    if high_count >= 1 or medium_count >= 3 or average_weight >= MEDIUM_AVERAGE_WEIGHT:
        return Severity.MEDIUM
    return Severity.LOW
