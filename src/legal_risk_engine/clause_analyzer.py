"""Structural risk checks on individual clauses.

These checks look at the shape of a clause (length, nested exceptions,
deadlines) rather than at catalogued trigger phrases.
"""

from __future__ import annotations

import re

from .config import DEFAULT_SETTINGS, AssessmentSettings
from .matcher import truncate
from .models import Clause, DocumentType, Risk, RiskCategory, Severity

# Deadline wording, tried in order. None of these nest quantifiers, so
# matching stays linear in the clause length.
_TIME_OBLIGATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"within \d+ days"),
    re.compile(r"by [a-z]+ \d+"),
    re.compile(r"no later than"),
    re.compile(r"immediately"),
)


class ClauseAnalyzer:
    """Flag complex exception chains and time-bound obligations in a clause.

    Example::

        analyzer = ClauseAnalyzer()
        risks = analyzer.analyze_clause_specific(clause, "contract")
    """

    def __init__(self, settings: AssessmentSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def analyze_clause_specific(
        self, clause: Clause, document_type: DocumentType | str
    ) -> list[Risk]:
        """Run the structural checks on one clause.

        Args:
            clause: Clause to inspect.
            document_type: Currently unused by the checks.

        Returns:
            At most one complexity finding and one deadline finding.
        """
        risks: list[Risk] = []
        lower = clause.content.lower()
        excerpt = truncate(clause.content, self.settings.clause_excerpt_length)

        if (
            len(clause.content) > self.settings.complex_clause_length
            and "provided that" in lower
            and "except" in lower
        ):
            risks.append(
                Risk(
                    category=RiskCategory.LEGAL,
                    severity=Severity.MEDIUM,
                    description=(
                        "Complex clause with multiple exceptions may hide important limitations"
                    ),
                    affected_clause=excerpt,
                    recommendation=(
                        "Break down this clause and ensure you understand all conditions"
                        " and exceptions"
                    ),
                )
            )

        if any(pattern.search(lower) for pattern in _TIME_OBLIGATION_PATTERNS):
            risks.append(
                Risk(
                    category=RiskCategory.OPERATIONAL,
                    severity=Severity.MEDIUM,
                    description="Time-sensitive obligation that requires prompt action",
                    affected_clause=excerpt,
                    recommendation="Note all deadlines and set reminders to ensure compliance",
                )
            )

        return risks
