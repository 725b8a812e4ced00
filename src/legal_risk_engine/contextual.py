"""Document-type specific risk heuristics.

These rules look for absences or combinations of terms that a plain
keyword pattern cannot express, e.g. a lease that never mentions a
security deposit. Each document type maps to one pure function taking the
original text and its lower-cased form.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import DEFAULT_SETTINGS, AssessmentSettings
from .matcher import extract_affected_clause, first_matching_phrase
from .models import DocumentType, Risk, RiskCategory, Severity, normalize_document_type

logger = logging.getLogger(__name__)

_Analyzer = Callable[[str, str, str, AssessmentSettings], list[Risk]]


def _excerpt(text: str, lower: str, phrases: tuple[str, ...], settings: AssessmentSettings) -> str:
    phrase = first_matching_phrase(lower, phrases) or phrases[0]
    return extract_affected_clause(text, phrase, settings)


def lease_risks(text: str, lower: str, jurisdiction: str, settings: AssessmentSettings) -> list[Risk]:
    """Missing deposit terms and renewal lock-in."""
    risks: list[Risk] = []

    # "deposit" also covers "security deposit"
    if "deposit" not in lower:
        risks.append(
            Risk(
                category=RiskCategory.FINANCIAL,
                severity=Severity.MEDIUM,
                description="No mention of security deposit terms, which could lead to disputes",
                affected_clause="Document lacks security deposit clause",
                recommendation="Ensure security deposit terms are clearly defined before signing",
            )
        )

    renewal = ("automatic renewal", "auto-renew")
    if any(phrase in lower for phrase in renewal):
        risks.append(
            Risk(
                category=RiskCategory.LEGAL,
                severity=Severity.MEDIUM,
                description="Automatic renewal clause may lock you into extended lease terms",
                affected_clause=_excerpt(text, lower, renewal, settings),
                recommendation="Review renewal terms and ensure you can opt out with proper notice",
            )
        )

    return risks


def loan_risks(text: str, lower: str, jurisdiction: str, settings: AssessmentSettings) -> list[Risk]:
    """Floating interest rates and prepayment penalties."""
    risks: list[Risk] = []

    variable = ("variable rate", "adjustable rate")
    if any(phrase in lower for phrase in variable):
        risks.append(
            Risk(
                category=RiskCategory.FINANCIAL,
                severity=Severity.HIGH,
                description=(
                    "Variable interest rate can significantly increase your payment obligations"
                ),
                affected_clause=_excerpt(text, lower, variable, settings),
                recommendation=(
                    "Understand rate adjustment terms and consider fixed-rate alternatives"
                ),
            )
        )

    prepayment = ("prepayment penalty", "early payment fee")
    if any(phrase in lower for phrase in prepayment):
        risks.append(
            Risk(
                category=RiskCategory.FINANCIAL,
                severity=Severity.MEDIUM,
                description="Prepayment penalties restrict your ability to pay off the loan early",
                affected_clause=_excerpt(text, lower, prepayment, settings),
                recommendation="Negotiate removal of prepayment penalties if possible",
            )
        )

    return risks


def contract_risks(
    text: str, lower: str, jurisdiction: str, settings: AssessmentSettings
) -> list[Risk]:
    """Indemnity paired with a hold-harmless undertaking."""
    if "indemnify" in lower and "hold harmless" in lower:
        return [
            Risk(
                category=RiskCategory.LEGAL,
                severity=Severity.HIGH,
                description=(
                    "Broad indemnification clause may make you liable for third-party claims"
                ),
                affected_clause=extract_affected_clause(text, "indemnify", settings),
                recommendation=(
                    "Limit indemnification to specific scenarios and exclude gross negligence"
                ),
            )
        ]
    return []


def terms_of_service_risks(
    text: str, lower: str, jurisdiction: str, settings: AssessmentSettings
) -> list[Risk]:
    """Provider may rewrite the terms whenever it likes."""
    if "modify these terms" in lower and "at any time" in lower:
        return [
            Risk(
                category=RiskCategory.LEGAL,
                severity=Severity.MEDIUM,
                description="Service provider can change terms at any time without your consent",
                affected_clause=extract_affected_clause(text, "modify these terms", settings),
                recommendation=(
                    "Look for notification requirements and your right to terminate"
                    " if terms change"
                ),
            )
        ]
    return []


def privacy_policy_risks(
    text: str, lower: str, jurisdiction: str, settings: AssessmentSettings
) -> list[Risk]:
    """Personal data handed to third parties."""
    if "share" in lower and "third parties" in lower:
        return [
            Risk(
                category=RiskCategory.PRIVACY,
                severity=Severity.MEDIUM,
                description="Your personal data may be shared with third parties",
                affected_clause=extract_affected_clause(text, "share", settings),
                recommendation=(
                    "Review what data is shared and with whom, consider opting out if possible"
                ),
            )
        ]
    return []


_ANALYZERS: dict[str, _Analyzer] = {
    DocumentType.LEASE.value: lease_risks,
    DocumentType.LOAN_AGREEMENT.value: loan_risks,
    DocumentType.CONTRACT.value: contract_risks,
    DocumentType.TERMS_OF_SERVICE.value: terms_of_service_risks,
    DocumentType.PRIVACY_POLICY.value: privacy_policy_risks,
}


class ContextualAnalyzer:
    """Run the heuristics registered for a document type.

    Unknown document types and blank text produce no findings.
    ``jurisdiction`` is handed to every heuristic but none of them vary on
    it yet.

    Args:
        settings: Excerpt sizes.
        analyzers: Override of the document-type dispatch table.
    """

    def __init__(
        self,
        settings: AssessmentSettings | None = None,
        analyzers: dict[str, _Analyzer] | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._analyzers = dict(_ANALYZERS if analyzers is None else analyzers)

    @property
    def document_types(self) -> list[str]:
        return list(self._analyzers)

    def analyze(
        self,
        text: str,
        document_type: DocumentType | str,
        jurisdiction: str = "US",
    ) -> list[Risk]:
        """Apply the heuristics for ``document_type`` to the full text."""
        doc_type = normalize_document_type(document_type)
        if not text.strip():
            return []

        analyzer = self._analyzers.get(doc_type)
        if analyzer is None:
            logger.debug("No contextual rules for document type %r", doc_type)
            return []

        risks = analyzer(text, text.lower(), jurisdiction, self.settings)
        logger.debug(
            "Contextual analysis (%s, jurisdiction=%s) produced %d finding(s)",
            doc_type,
            jurisdiction,
            len(risks),
        )
        return risks
