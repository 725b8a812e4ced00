"""Risk assessment engine orchestrating matching, analysis and reporting.

The ``RiskAssessmentEngine`` class is the primary entry point. It takes the
extracted text of a document plus a list of pre-segmented clauses and
returns a ``RiskAssessmentResult``. It does no I/O and holds no mutable
state after construction, so one instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

from .clause_analyzer import ClauseAnalyzer
from .config import DEFAULT_SETTINGS, AssessmentSettings
from .contextual import ContextualAnalyzer
from .matcher import PatternMatcher
from .models import (
    Clause,
    ClauseRiskAnalysis,
    DocumentType,
    Risk,
    RiskAssessmentResult,
    normalize_document_type,
)
from .patterns import PatternDatabase
from .report import generate_recommendations, generate_summary
from .scoring import deduplicate_risks, score_risks

logger = logging.getLogger(__name__)


class RiskAssessmentEngine:
    """High-level legal document risk assessor.

    Runs the pattern matcher over the whole document and over every clause,
    the structural clause checks, and the document-type heuristics, then
    deduplicates the findings, scores them and writes the report.

    Example::

        engine = RiskAssessmentEngine()
        result = engine.assess_document_risks(text, clauses, "lease")

        print(result.overall_risk_score.value)
        for risk in result.risks:
            print(f"[{risk.severity.value}] {risk.description}")

    Args:
        patterns: Custom pattern catalog (optional).
        settings: Thresholds and caps (optional).
        matcher: Custom PatternMatcher instance (optional).
        contextual_analyzer: Custom ContextualAnalyzer instance (optional).
        clause_analyzer: Custom ClauseAnalyzer instance (optional).
    """

    def __init__(
        self,
        patterns: PatternDatabase | None = None,
        settings: AssessmentSettings | None = None,
        matcher: PatternMatcher | None = None,
        contextual_analyzer: ContextualAnalyzer | None = None,
        clause_analyzer: ClauseAnalyzer | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._matcher = matcher or PatternMatcher(patterns, self.settings)
        self._contextual = contextual_analyzer or ContextualAnalyzer(self.settings)
        self._clause_analyzer = clause_analyzer or ClauseAnalyzer(self.settings)

    @property
    def patterns(self) -> PatternDatabase:
        return self._matcher.database

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def assess_document_risks(
        self,
        document_text: str,
        clauses: Sequence[Clause],
        document_type: DocumentType | str,
        jurisdiction: str = "US",
    ) -> RiskAssessmentResult:
        """Run the full assessment on a document.

        Args:
            document_text: Extracted text of the whole document.
            clauses: Clauses segmented upstream; may be empty.
            document_type: One of the ``DocumentType`` values, or any other
                string (which only disables type-specific rules).
            jurisdiction: Passed through to the contextual heuristics.

        Returns:
            Deduplicated findings with score, summary and recommendations.

        Raises:
            TypeError: If ``document_text`` is not a string, ``clauses`` is
                not a list or tuple, or it holds something other than
                ``Clause`` objects.
        """
        _check_text(document_text)
        _check_clauses(clauses)
        doc_type = normalize_document_type(document_type)

        all_risks: list[Risk] = []
        all_risks.extend(self._matcher.match_document(document_text, doc_type))
        all_risks.extend(self.analyze_clause_risks(clauses, doc_type))
        all_risks.extend(self._contextual.analyze(document_text, doc_type, jurisdiction))

        risks = deduplicate_risks(all_risks, self.settings.similarity_threshold)
        score = score_risks(risks)

        logger.info(
            "Assessed %s document: %d finding(s) (%d before dedup), overall risk %s",
            doc_type,
            len(risks),
            len(all_risks),
            score.value,
        )

        return RiskAssessmentResult(
            risks=risks,
            overall_risk_score=score,
            risk_summary=generate_summary(risks, score),
            recommendations=generate_recommendations(risks, doc_type, score, self.settings),
        )

    def analyze_clause_risks(
        self, clauses: Sequence[Clause], document_type: DocumentType | str
    ) -> list[Risk]:
        """Collect pattern and structural findings for every clause, in order."""
        _check_clauses(clauses)
        risks: list[Risk] = []
        for clause in clauses:
            risks.extend(self._clause_findings(clause, document_type))
        logger.debug("Clause analysis over %d clause(s) produced %d finding(s)",
                      len(clauses), len(risks))
        return risks

    def assess_clause(
        self, clause: Clause, document_type: DocumentType | str
    ) -> ClauseRiskAnalysis:
        """Assess one clause in isolation and score it."""
        _check_clauses([clause])
        risks = deduplicate_risks(
            self._clause_findings(clause, document_type), self.settings.similarity_threshold
        )
        return ClauseRiskAnalysis(clause=clause, risks=risks, risk_score=score_risks(risks))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _clause_findings(self, clause: Clause, document_type: DocumentType | str) -> list[Risk]:
        risks = self._matcher.match_clause(clause, document_type)
        risks.extend(self._clause_analyzer.analyze_clause_specific(clause, document_type))
        return risks


def _check_text(document_text: object) -> None:
    if not isinstance(document_text, str):
        raise TypeError(
            f"document_text must be a str, got {type(document_text).__name__}"
        )


def _check_clauses(clauses: object) -> None:
    if not isinstance(clauses, (list, tuple)):
        raise TypeError(f"clauses must be a list of Clause, got {type(clauses).__name__}")
    for index, clause in enumerate(clauses):
        if not isinstance(clause, Clause):
            raise TypeError(
                f"clauses[{index}] must be a Clause, got {type(clause).__name__}"
            )


@lru_cache(maxsize=1)
def default_engine() -> RiskAssessmentEngine:
    """Shared engine built on the built-in catalog and default settings."""
    return RiskAssessmentEngine()


def assess_document_risks(
    document_text: str,
    clauses: Sequence[Clause],
    document_type: DocumentType | str,
    jurisdiction: str = "US",
) -> RiskAssessmentResult:
    """Assess a document with the shared default engine."""
    return default_engine().assess_document_risks(
        document_text, clauses, document_type, jurisdiction
    )
