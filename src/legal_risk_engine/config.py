"""Tunable settings for the risk assessment engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssessmentSettings:
    """Thresholds, caps and excerpt sizes used across the engine.

    Attributes:
        similarity_threshold: Word-overlap similarity above which two
            findings of the same category and severity count as duplicates.
        max_recommendations: Hard cap on the recommendation list.
        max_risk_recommendations: How many high-severity findings may
            contribute their own recommendation line.
        sentence_excerpt_length: Maximum length of a sentence excerpt taken
            from the full document.
        clause_excerpt_length: Maximum length of a clause excerpt.
        context_window: Characters kept on each side of a match when no
            sentence boundary can be used.
        complex_clause_length: Clause length beyond which nested exceptions
            are flagged.
    """

    similarity_threshold: float = 0.8
    max_recommendations: int = 8
    max_risk_recommendations: int = 3
    sentence_excerpt_length: int = 300
    clause_excerpt_length: int = 200
    context_window: int = 100
    complex_clause_length: int = 1000

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(
                f"similarity_threshold must be between 0 and 1, got {self.similarity_threshold}"
            )
        for name in (
            "max_recommendations",
            "max_risk_recommendations",
            "sentence_excerpt_length",
            "clause_excerpt_length",
            "context_window",
            "complex_clause_length",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


DEFAULT_SETTINGS = AssessmentSettings()
