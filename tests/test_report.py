"""Tests for the summary and recommendation generators."""

from __future__ import annotations

from legal_risk_engine.config import AssessmentSettings
from legal_risk_engine.models import DocumentType, RiskCategory, Severity
from legal_risk_engine.report import (
    DEFAULT_RECOMMENDATION,
    DOCUMENT_TYPE_BANNERS,
    FINANCIAL_BANNER,
    HIGH_RISK_BANNER,
    LEGAL_BANNER,
    MEDIUM_RISK_BANNER,
    NO_RISKS_SUMMARY,
    PRIVACY_BANNER,
    generate_recommendations,
    generate_summary,
)

from .conftest import make_risk

# ---------------------------------------------------------------------------
# generate_summary
# ---------------------------------------------------------------------------


class TestGenerateSummary:
    """Tests for the one-paragraph risk summary."""

    def test_no_risks(self) -> None:
        assert generate_summary([], Severity.LOW) == NO_RISKS_SUMMARY
        assert NO_RISKS_SUMMARY == "No significant risks identified in this document."

    def test_full_summary(self) -> None:
        risks = [
            make_risk("a", category=RiskCategory.LEGAL, severity=Severity.HIGH),
            make_risk("b", category=RiskCategory.FINANCIAL, severity=Severity.MEDIUM),
            make_risk("c", category=RiskCategory.LEGAL, severity=Severity.HIGH),
        ]
        assert generate_summary(risks, Severity.HIGH) == (
            "Overall risk level: HIGH. Found 3 potential risks: 2 high-severity, "
            "1 medium-severity. Primary risk areas: legal (2), financial (1)."
        )

    def test_singular_risk(self) -> None:
        risks = [make_risk("a", category=RiskCategory.OPERATIONAL, severity=Severity.LOW)]
        assert generate_summary(risks, Severity.LOW) == (
            "Overall risk level: LOW. Found 1 potential risk: 1 low-severity. "
            "Primary risk areas: operational (1)."
        )

    def test_only_two_categories_listed(self) -> None:
        risks = [
            make_risk("a", category=RiskCategory.PRIVACY),
            make_risk("b", category=RiskCategory.LEGAL),
            make_risk("c", category=RiskCategory.OPERATIONAL),
            make_risk("d", category=RiskCategory.OPERATIONAL),
        ]
        summary = generate_summary(risks, Severity.MEDIUM)
        assert summary.endswith("Primary risk areas: operational (2), privacy (1).")

    def test_ties_keep_first_seen_order(self) -> None:
        """Categories with equal counts are listed in order of first appearance."""
        risks = [
            make_risk("a", category=RiskCategory.PRIVACY),
            make_risk("b", category=RiskCategory.LEGAL),
            make_risk("c", category=RiskCategory.FINANCIAL),
        ]
        summary = generate_summary(risks, Severity.MEDIUM)
        assert summary.endswith("Primary risk areas: privacy (1), legal (1).")


# ---------------------------------------------------------------------------
# generate_recommendations
# ---------------------------------------------------------------------------


class TestGenerateRecommendations:
    """Tests for the ordered recommendation list."""

    def test_default_when_nothing_applies(self) -> None:
        assert generate_recommendations([], "other", Severity.LOW) == [DEFAULT_RECOMMENDATION]

    def test_low_risks_only_get_default(self) -> None:
        """Low findings alone trigger no banner, so the default line is used."""
        risks = [make_risk("a", category=RiskCategory.OPERATIONAL, severity=Severity.LOW)]
        assert generate_recommendations(risks, "contract", Severity.LOW) == [
            DEFAULT_RECOMMENDATION
        ]

    def test_medium_banner(self) -> None:
        risks = [make_risk("a", category=RiskCategory.OPERATIONAL)]
        assert generate_recommendations(risks, "contract", Severity.MEDIUM) == [
            MEDIUM_RISK_BANNER
        ]

    def test_banner_order(self) -> None:
        risks = [
            make_risk("a", RiskCategory.LEGAL, Severity.HIGH, recommendation="Limit scope"),
            make_risk("b", RiskCategory.PRIVACY, Severity.MEDIUM),
            make_risk("c", RiskCategory.FINANCIAL, Severity.HIGH, recommendation="Cap it"),
        ]
        assert generate_recommendations(risks, "lease", Severity.HIGH) == [
            HIGH_RISK_BANNER,
            FINANCIAL_BANNER,
            PRIVACY_BANNER,
            LEGAL_BANNER,
            DOCUMENT_TYPE_BANNERS["lease"],
            "🎯 Limit scope",
            "🎯 Cap it",
        ]

    def test_document_type_banners(self) -> None:
        for doc_type in ("lease", "loan_agreement", "terms_of_service"):
            recs = generate_recommendations([], doc_type, Severity.LOW)
            assert recs == [DOCUMENT_TYPE_BANNERS[doc_type]]
        assert generate_recommendations([], DocumentType.PRIVACY_POLICY, Severity.LOW) == [
            DEFAULT_RECOMMENDATION
        ]

    def test_lease_banner_mentions_rent(self) -> None:
        recs = generate_recommendations([], DocumentType.LEASE, Severity.LOW)
        assert any("lease" in r or "rent" in r for r in recs)

    def test_duplicate_risk_recommendations_skipped(self) -> None:
        """Two high findings with the same advice add only one line."""
        risks = [
            make_risk("a", RiskCategory.OPERATIONAL, Severity.HIGH, recommendation="Same"),
            make_risk("b", RiskCategory.OPERATIONAL, Severity.HIGH, recommendation="Same"),
        ]
        recs = generate_recommendations(risks, "other", Severity.HIGH)
        assert recs == [HIGH_RISK_BANNER, "🎯 Same"]

    def test_only_first_three_high_risks_used(self) -> None:
        risks = [
            make_risk(str(i), RiskCategory.OPERATIONAL, Severity.HIGH, recommendation=f"Fix {i}")
            for i in range(5)
        ]
        recs = generate_recommendations(risks, "other", Severity.HIGH)
        assert recs == [HIGH_RISK_BANNER, "🎯 Fix 0", "🎯 Fix 1", "🎯 Fix 2"]

    def test_medium_findings_do_not_add_lines(self) -> None:
        risks = [make_risk("a", RiskCategory.OPERATIONAL, Severity.MEDIUM, recommendation="X")]
        assert "🎯 X" not in generate_recommendations(risks, "other", Severity.MEDIUM)

    def test_capped_at_eight(self) -> None:
        risks = [
            make_risk("a", RiskCategory.FINANCIAL, Severity.HIGH, recommendation="One"),
            make_risk("b", RiskCategory.LEGAL, Severity.HIGH, recommendation="Two"),
            make_risk("c", RiskCategory.PRIVACY, Severity.HIGH, recommendation="Three"),
            make_risk("d", RiskCategory.FINANCIAL, Severity.HIGH, recommendation="Four"),
        ]
        recs = generate_recommendations(risks, "lease", Severity.HIGH)
        assert len(recs) == 8
        assert len(set(recs)) == len(recs)
        assert recs[-1] == "🎯 Three"

    def test_custom_cap(self) -> None:
        risks = [
            make_risk("a", RiskCategory.FINANCIAL, Severity.HIGH, recommendation="One"),
            make_risk("b", RiskCategory.LEGAL, Severity.HIGH, recommendation="Two"),
        ]
        settings = AssessmentSettings(max_recommendations=3)
        recs = generate_recommendations(risks, "lease", Severity.HIGH, settings)
        assert recs == [HIGH_RISK_BANNER, FINANCIAL_BANNER, LEGAL_BANNER]
