"""Data models for legal document risk assessment."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RiskCategory(str, Enum):
    """Broad areas a risk finding can fall into."""

    FINANCIAL = "financial"
    LEGAL = "legal"
    PRIVACY = "privacy"
    OPERATIONAL = "operational"


class Severity(str, Enum):
    """Risk severity levels, also used for the overall risk score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return _SEVERITY_WEIGHTS[self]


_SEVERITY_WEIGHTS = {Severity.HIGH: 3, Severity.MEDIUM: 2, Severity.LOW: 1}


class DocumentType(str, Enum):
    """Coarse document classes that drive type-specific rules."""

    CONTRACT = "contract"
    LEASE = "lease"
    LOAN_AGREEMENT = "loan_agreement"
    TERMS_OF_SERVICE = "terms_of_service"
    PRIVACY_POLICY = "privacy_policy"
    OTHER = "other"


def normalize_document_type(document_type: DocumentType | str) -> str:
    """Return the plain string form of a document type.

    Enum members and raw strings are both accepted so callers can pass
    whatever their classifier produced. Unknown strings are kept as-is.
    """
    if isinstance(document_type, Enum):
        return str(document_type.value)
    return str(document_type).strip().lower()


@dataclass
class TextLocation:
    """Character offsets of a clause within the source document."""

    start_index: int
    end_index: int
    page_number: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "pageNumber": self.page_number,
        }


@dataclass
class Clause:
    """A caller-supplied, pre-segmented unit of document text.

    The engine only reads clauses. ``risk_level`` and ``explanation`` belong
    to whatever produced the clause and have no influence on the assessment.
    """

    id: str
    title: str
    content: str
    location: Optional[TextLocation] = None
    risk_level: Severity = Severity.LOW
    explanation: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Clause:
        """Build a clause from a JSON-style mapping.

        Accepts snake_case keys as well as the camelCase keys used by the
        document API (``riskLevel``, ``startIndex``, ...).

        Raises:
            ValueError: If ``content`` is missing or not a string, or the
                risk level is not a known severity.
        """
        content = data.get("content")
        if not isinstance(content, str):
            raise ValueError("Clause 'content' must be a string")

        location = None
        raw_location = data.get("location")
        if isinstance(raw_location, dict):
            location = TextLocation(
                start_index=int(raw_location.get("startIndex", raw_location.get("start_index", 0))),
                end_index=int(raw_location.get("endIndex", raw_location.get("end_index", 0))),
                page_number=raw_location.get("pageNumber", raw_location.get("page_number")),
            )

        raw_level = data.get("riskLevel", data.get("risk_level", Severity.LOW.value))
        try:
            risk_level = Severity(str(raw_level).lower())
        except ValueError:
            raise ValueError(f"Unknown clause risk level: {raw_level!r}") from None

        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            content=content,
            location=location,
            risk_level=risk_level,
            explanation=str(data.get("explanation", "")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "location": self.location.to_dict() if self.location else None,
            "riskLevel": self.risk_level.value,
            "explanation": self.explanation,
        }


@dataclass
class Risk:
    """A single risk finding."""

    category: RiskCategory
    severity: Severity
    description: str
    affected_clause: str
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "description": self.description,
            "affectedClause": self.affected_clause,
            "recommendation": self.recommendation,
        }


@dataclass
class ClauseRiskAnalysis:
    """Findings and score for one clause assessed on its own."""

    clause: Clause
    risks: list[Risk] = field(default_factory=list)
    risk_score: Severity = Severity.LOW

    def to_dict(self) -> dict:
        return {
            "clauseId": self.clause.id,
            "title": self.clause.title,
            "risks": [r.to_dict() for r in self.risks],
            "riskScore": self.risk_score.value,
        }


@dataclass
class RiskAssessmentResult:
    """Complete risk report for a document."""

    risks: list[Risk] = field(default_factory=list)
    overall_risk_score: Severity = Severity.LOW
    risk_summary: str = ""
    recommendations: list[str] = field(default_factory=list)

    @property
    def high_risks(self) -> list[Risk]:
        return [r for r in self.risks if r.severity == Severity.HIGH]

    def risks_by_category(self) -> dict[RiskCategory, int]:
        """Count findings per category, in order of first appearance."""
        return dict(Counter(r.category for r in self.risks))

    def to_dict(self) -> dict:
        return {
            "risks": [r.to_dict() for r in self.risks],
            "overallRiskScore": self.overall_risk_score.value,
            "riskSummary": self.risk_summary,
            "recommendations": list(self.recommendations),
        }
