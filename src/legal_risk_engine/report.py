"""Human-readable summary and recommendation list for a risk report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .config import DEFAULT_SETTINGS, AssessmentSettings
from .models import DocumentType, Risk, RiskCategory, Severity, normalize_document_type

NO_RISKS_SUMMARY = "No significant risks identified in this document."

HIGH_RISK_BANNER = (
    "⚠️ HIGH RISK: Strongly consider consulting with a lawyer before signing this document."
)
MEDIUM_RISK_BANNER = (
    "⚠️ MEDIUM RISK: Review carefully and consider legal consultation for complex terms."
)
FINANCIAL_BANNER = (
    "💰 Review all financial obligations carefully and ensure you can meet payment terms."
)
PRIVACY_BANNER = (
    "🔒 Consider privacy implications and whether you're comfortable with data handling practices."
)
LEGAL_BANNER = "⚖️ Pay special attention to legal obligations and dispute resolution terms."
DEFAULT_RECOMMENDATION = (
    "✅ Document appears to have standard terms, but always read carefully before signing."
)
RISK_RECOMMENDATION_PREFIX = "🎯 "

DOCUMENT_TYPE_BANNERS: dict[str, str] = {
    DocumentType.LEASE.value: (
        "🏠 Verify all lease terms including rent, deposits, and maintenance responsibilities."
    ),
    DocumentType.LOAN_AGREEMENT.value: (
        "💳 Understand all interest rates, fees, and repayment terms before committing."
    ),
    DocumentType.TERMS_OF_SERVICE.value: (
        "📱 Review what rights you're granting and what happens to your data."
    ),
}


def generate_summary(risks: Sequence[Risk], score: Severity) -> str:
    """Summarize findings by severity and by leading category.

    Example output::

        Overall risk level: HIGH. Found 3 potential risks: 2 high-severity,
        1 medium-severity. Primary risk areas: legal (2), financial (1).
    """
    if not risks:
        return NO_RISKS_SUMMARY

    severity_counts = Counter(r.severity for r in risks)
    severity_parts = [
        f"{severity_counts[level]} {level.value}-severity"
        for level in (Severity.HIGH, Severity.MEDIUM, Severity.LOW)
        if severity_counts[level] > 0
    ]

    noun = "risk" if len(risks) == 1 else "risks"
    summary = f"Overall risk level: {score.value.upper()}. "
    summary += f"Found {len(risks)} potential {noun}: {', '.join(severity_parts)}. "

    # most_common keeps first-seen order among equal counts
    top_categories = Counter(r.category for r in risks).most_common(2)
    areas = ", ".join(f"{category.value} ({count})" for category, count in top_categories)
    summary += f"Primary risk areas: {areas}."

    return summary


def generate_recommendations(
    risks: Sequence[Risk],
    document_type: DocumentType | str,
    score: Severity,
    settings: AssessmentSettings = DEFAULT_SETTINGS,
) -> list[str]:
    """Build the ordered, capped recommendation list for a report."""
    recommendations: list[str] = []

    if score == Severity.HIGH:
        recommendations.append(HIGH_RISK_BANNER)
    elif score == Severity.MEDIUM:
        recommendations.append(MEDIUM_RISK_BANNER)

    if any(r.category == RiskCategory.FINANCIAL and r.severity == Severity.HIGH for r in risks):
        recommendations.append(FINANCIAL_BANNER)
    if any(r.category == RiskCategory.PRIVACY for r in risks):
        recommendations.append(PRIVACY_BANNER)
    if any(r.category == RiskCategory.LEGAL and r.severity == Severity.HIGH for r in risks):
        recommendations.append(LEGAL_BANNER)

    banner = DOCUMENT_TYPE_BANNERS.get(normalize_document_type(document_type))
    if banner:
        recommendations.append(banner)

    top_risks = [r for r in risks if r.severity == Severity.HIGH]
    for risk in top_risks[: settings.max_risk_recommendations]:
        line = f"{RISK_RECOMMENDATION_PREFIX}{risk.recommendation}"
        if risk.recommendation and line not in recommendations:
            recommendations.append(line)

    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)

    return recommendations[: settings.max_recommendations]
