"""Risk pattern database.

A pattern couples a handful of trigger phrases with a fixed category,
severity, explanation and recommendation. The built-in catalog lives in
``DEFAULT_PATTERNS``; alternate catalogs can be injected through
``PatternDatabase`` for testing or tenant-specific rules.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import DocumentType, RiskCategory, Severity, normalize_document_type


@dataclass(frozen=True)
class RiskPattern:
    """A static risk rule.

    Attributes:
        id: Unique key within a catalog.
        name: Short human-readable label.
        category: Risk area the pattern belongs to.
        severity: Severity every finding from this pattern carries.
        patterns: Trigger phrases, matched case-insensitively as substrings
            in the order given.
        description: Explanation attached to findings.
        recommendation: Suggested action attached to findings.
        document_types: Document types the pattern is restricted to, or
            ``None`` when it applies everywhere.
    """

    id: str
    name: str
    category: RiskCategory
    severity: Severity
    patterns: tuple[str, ...]
    description: str
    recommendation: str
    document_types: Optional[frozenset[str]] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Risk pattern id must not be empty")
        if not self.patterns or not all(p.strip() for p in self.patterns):
            raise ValueError(f"Risk pattern {self.id!r} needs at least one non-empty phrase")
        if not self.description or not self.recommendation:
            raise ValueError(f"Risk pattern {self.id!r} needs a description and recommendation")

    def applies_to(self, document_type: DocumentType | str) -> bool:
        """Check whether the pattern should run for a document type."""
        if self.document_types is None:
            return True
        return normalize_document_type(document_type) in self.document_types

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "severity": self.severity.value,
            "patterns": list(self.patterns),
            "description": self.description,
            "recommendation": self.recommendation,
            "documentTypes": sorted(self.document_types) if self.document_types else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RiskPattern:
        """Build a pattern from a JSON-style mapping.

        Raises:
            ValueError: On unknown category/severity or missing fields.
        """
        try:
            raw_types = data.get("documentTypes", data.get("document_types"))
            return cls(
                id=str(data["id"]),
                name=str(data.get("name", data["id"])),
                category=RiskCategory(data["category"]),
                severity=Severity(data["severity"]),
                patterns=tuple(str(p) for p in data["patterns"]),
                description=str(data["description"]),
                recommendation=str(data["recommendation"]),
                document_types=(
                    frozenset(normalize_document_type(t) for t in raw_types)
                    if raw_types
                    else None
                ),
            )
        except KeyError as e:
            raise ValueError(f"Risk pattern is missing field {e.args[0]!r}") from None


# Master pattern catalog
DEFAULT_PATTERNS: tuple[RiskPattern, ...] = (
    # Financial
    RiskPattern(
        id="unlimited-liability",
        name="Unlimited Liability",
        category=RiskCategory.FINANCIAL,
        severity=Severity.HIGH,
        patterns=("unlimited liability", "unlimited damages", "without limitation"),
        description="You may be liable for unlimited damages or losses",
        recommendation="Negotiate caps on liability or exclude consequential damages",
    ),
    RiskPattern(
        id="automatic-renewal",
        name="Automatic Renewal",
        category=RiskCategory.FINANCIAL,
        severity=Severity.MEDIUM,
        patterns=("automatic renewal", "auto-renew", "automatically renew"),
        description="Contract automatically renews, potentially locking you into unwanted terms",
        recommendation="Ensure you can cancel before renewal and understand notice requirements",
    ),
    RiskPattern(
        id="penalty-fees",
        name="Penalty Fees",
        category=RiskCategory.FINANCIAL,
        severity=Severity.MEDIUM,
        patterns=("penalty fee", "late fee", "cancellation fee", "early termination fee"),
        description="Significant fees may apply for late payments or early termination",
        recommendation="Understand all fee structures and when they apply",
    ),
    RiskPattern(
        id="variable-pricing",
        name="Variable Pricing",
        category=RiskCategory.FINANCIAL,
        severity=Severity.MEDIUM,
        patterns=("subject to change", "may increase", "variable rate", "adjustable"),
        description="Pricing or rates may change during the contract term",
        recommendation="Understand how and when prices can change, seek caps if possible",
    ),
    # Legal
    RiskPattern(
        id="broad-indemnification",
        name="Broad Indemnification",
        category=RiskCategory.LEGAL,
        severity=Severity.HIGH,
        patterns=("indemnify and hold harmless", "defend, indemnify", "indemnification"),
        description="You may be required to cover legal costs and damages for the other party",
        recommendation=(
            "Limit indemnification scope and exclude gross negligence or willful misconduct"
        ),
    ),
    RiskPattern(
        id="mandatory-arbitration",
        name="Mandatory Arbitration",
        category=RiskCategory.LEGAL,
        severity=Severity.MEDIUM,
        patterns=("binding arbitration", "mandatory arbitration", "waive right to jury trial"),
        description="You cannot sue in court and must use arbitration for disputes",
        recommendation=(
            "Understand arbitration process and consider if you're comfortable"
            " waiving court rights"
        ),
    ),
    RiskPattern(
        id="class-action-waiver",
        name="Class Action Waiver",
        category=RiskCategory.LEGAL,
        severity=Severity.MEDIUM,
        patterns=("class action waiver", "waive class action", "individual basis only"),
        description="You cannot join class action lawsuits against the other party",
        recommendation="Consider whether individual arbitration is adequate for potential disputes",
    ),
    RiskPattern(
        id="unilateral-modification",
        name="Unilateral Modification Rights",
        category=RiskCategory.LEGAL,
        severity=Severity.MEDIUM,
        patterns=("modify at any time", "change these terms", "unilateral right to modify"),
        description="The other party can change contract terms without your agreement",
        recommendation="Ensure you receive notice of changes and have right to terminate",
    ),
    # Privacy
    RiskPattern(
        id="broad-data-collection",
        name="Broad Data Collection",
        category=RiskCategory.PRIVACY,
        severity=Severity.MEDIUM,
        patterns=("collect personal information", "any information", "all data"),
        description="Extensive personal data may be collected beyond what's necessary",
        recommendation="Review what specific data is collected and why it's needed",
    ),
    RiskPattern(
        id="third-party-sharing",
        name="Third Party Data Sharing",
        category=RiskCategory.PRIVACY,
        severity=Severity.HIGH,
        patterns=("share with third parties", "sell your information", "disclose to partners"),
        description="Your personal data may be shared or sold to other companies",
        recommendation="Understand who receives your data and opt out if possible",
    ),
    RiskPattern(
        id="indefinite-retention",
        name="Indefinite Data Retention",
        category=RiskCategory.PRIVACY,
        severity=Severity.MEDIUM,
        patterns=("retain indefinitely", "keep forever", "no deletion"),
        description="Your data may be kept indefinitely without deletion rights",
        recommendation="Request data deletion rights and reasonable retention periods",
    ),
    # Operational
    RiskPattern(
        id="exclusive-dealing",
        name="Exclusive Dealing Requirements",
        category=RiskCategory.OPERATIONAL,
        severity=Severity.MEDIUM,
        patterns=("exclusively", "sole provider", "cannot use competitors"),
        description="You may be restricted from using competing services or providers",
        recommendation="Consider if exclusivity restrictions are reasonable for your needs",
    ),
    RiskPattern(
        id="broad-restrictions",
        name="Broad Use Restrictions",
        category=RiskCategory.OPERATIONAL,
        severity=Severity.MEDIUM,
        patterns=("prohibited uses", "may not use", "restricted activities"),
        description="Extensive restrictions on how you can use the service or product",
        recommendation="Ensure restrictions don't interfere with your intended use",
    ),
    RiskPattern(
        id="compliance-obligations",
        name="Complex Compliance Requirements",
        category=RiskCategory.OPERATIONAL,
        severity=Severity.MEDIUM,
        patterns=("comply with all laws", "regulatory compliance", "certification required"),
        description="You may have ongoing compliance obligations that could be costly",
        recommendation="Understand all compliance requirements and associated costs",
    ),
    # Document-type specific
    RiskPattern(
        id="lease-joint-liability",
        name="Joint and Several Liability",
        category=RiskCategory.FINANCIAL,
        severity=Severity.HIGH,
        patterns=("joint and several", "jointly and severally liable"),
        description="Each tenant is responsible for the full rent amount, not just their share",
        recommendation="Understand that you could be liable for roommates' unpaid rent",
        document_types=frozenset({DocumentType.LEASE.value}),
    ),
    RiskPattern(
        id="loan-cross-default",
        name="Cross-Default Provisions",
        category=RiskCategory.FINANCIAL,
        severity=Severity.HIGH,
        patterns=("cross-default", "default under other agreements"),
        description="Default on other loans could trigger default on this loan",
        recommendation="Understand how other financial obligations could affect this loan",
        document_types=frozenset({DocumentType.LOAN_AGREEMENT.value}),
    ),
)


class PatternDatabase:
    """Immutable, ordered collection of risk patterns.

    Example::

        db = PatternDatabase()
        for pattern in db.applicable("lease"):
            print(pattern.id, pattern.severity.value)

    Args:
        patterns: Custom patterns. Uses the built-in catalog if None.

    Raises:
        ValueError: If two patterns share an id.
    """

    def __init__(self, patterns: Iterable[RiskPattern] | None = None) -> None:
        self._patterns: tuple[RiskPattern, ...] = tuple(
            DEFAULT_PATTERNS if patterns is None else patterns
        )
        seen: set[str] = set()
        for pattern in self._patterns:
            if pattern.id in seen:
                raise ValueError(f"Duplicate risk pattern id: {pattern.id!r}")
            seen.add(pattern.id)

    @classmethod
    def from_dicts(cls, records: Iterable[dict]) -> PatternDatabase:
        """Build a database from JSON-style pattern records."""
        return cls(RiskPattern.from_dict(record) for record in records)

    @classmethod
    def load_json(cls, path: str | Path) -> PatternDatabase:
        """Load a catalog from a JSON file holding a list of pattern records.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the JSON is not a list of valid pattern records.
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("Pattern file must contain a JSON list of patterns")
        return cls.from_dicts(data)

    def __iter__(self) -> Iterator[RiskPattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    @property
    def patterns(self) -> tuple[RiskPattern, ...]:
        return self._patterns

    def get(self, pattern_id: str) -> RiskPattern | None:
        for pattern in self._patterns:
            if pattern.id == pattern_id:
                return pattern
        return None

    def applicable(self, document_type: DocumentType | str) -> list[RiskPattern]:
        """Patterns that apply to the given document type, in catalog order."""
        return [p for p in self._patterns if p.applies_to(document_type)]
