"""Pattern matching of document and clause text against the risk catalog."""

from __future__ import annotations

import logging
import re

from .config import DEFAULT_SETTINGS, AssessmentSettings
from .models import Clause, DocumentType, Risk
from .patterns import PatternDatabase, RiskPattern

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

FALLBACK_EXCERPT = "Pattern found in document"


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, adding ``...`` when shortened."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def extract_affected_clause(
    text: str,
    phrase: str,
    settings: AssessmentSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the excerpt of ``text`` that contains ``phrase``.

    Prefers the whole sentence holding the phrase. When the phrase straddles
    a sentence boundary, falls back to a window of context around the first
    occurrence.
    """
    needle = phrase.lower()
    for sentence in _SENTENCE_SPLIT_RE.split(text):
        if needle in sentence.lower():
            return truncate(sentence.strip(), settings.sentence_excerpt_length)

    index = text.lower().find(needle)
    if index >= 0:
        start = max(0, index - settings.context_window)
        end = min(len(text), index + len(phrase) + settings.context_window)
        return f"...{text[start:end]}..."

    return FALLBACK_EXCERPT


def first_matching_phrase(lower_text: str, phrases: tuple[str, ...] | list[str]) -> str | None:
    """Return the first phrase found in already lower-cased text."""
    for phrase in phrases:
        if phrase.lower() in lower_text:
            return phrase
    return None


class PatternMatcher:
    """Scan text for the trigger phrases of a pattern catalog.

    Each applicable pattern contributes at most one finding per scanned unit
    (the whole document, or a single clause). Phrases are tried in catalog
    order and the first hit wins.

    Example::

        matcher = PatternMatcher()
        risks = matcher.match_document(text, "contract")

    Args:
        database: Pattern catalog. Uses the built-in catalog if None.
        settings: Excerpt sizes.
    """

    def __init__(
        self,
        database: PatternDatabase | None = None,
        settings: AssessmentSettings | None = None,
    ) -> None:
        self.database = database if database is not None else PatternDatabase()
        self.settings = settings or DEFAULT_SETTINGS

    def match_document(self, text: str, document_type: DocumentType | str) -> list[Risk]:
        """Match the full document text.

        Args:
            text: Full document text.
            document_type: Type used to filter restricted patterns.

        Returns:
            One finding per matching pattern, excerpted from the sentence
            that triggered it.
        """
        risks: list[Risk] = []
        lower = text.lower()

        for pattern, phrase in self._matches(lower, document_type):
            risks.append(
                Risk(
                    category=pattern.category,
                    severity=pattern.severity,
                    description=pattern.description,
                    affected_clause=extract_affected_clause(text, phrase, self.settings),
                    recommendation=pattern.recommendation,
                )
            )

        logger.debug("Document pattern scan produced %d finding(s)", len(risks))
        return risks

    def match_clause(self, clause: Clause, document_type: DocumentType | str) -> list[Risk]:
        """Match a single clause; findings name the clause they came from."""
        risks: list[Risk] = []
        excerpt = truncate(clause.content, self.settings.clause_excerpt_length)

        for pattern, _phrase in self._matches(clause.content.lower(), document_type):
            risks.append(
                Risk(
                    category=pattern.category,
                    severity=pattern.severity,
                    description=f'{pattern.description} Found in clause: "{clause.title}"',
                    affected_clause=excerpt,
                    recommendation=pattern.recommendation,
                )
            )
        return risks

    def _matches(
        self, lower_text: str, document_type: DocumentType | str
    ) -> list[tuple[RiskPattern, str]]:
        """Pair each applicable pattern with its first matching phrase."""
        if not lower_text:
            return []
        found: list[tuple[RiskPattern, str]] = []
        for pattern in self.database.applicable(document_type):
            phrase = first_matching_phrase(lower_text, pattern.patterns)
            if phrase is not None:
                found.append((pattern, phrase))
        return found
