"""Shared test fixtures for legal-risk-engine tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from legal_risk_engine.engine import RiskAssessmentEngine
from legal_risk_engine.models import Clause, Risk, RiskCategory, Severity

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def make_clause(content: str, title: str = "Test Clause", clause_id: str = "clause-1") -> Clause:
    """Build a clause with only the fields the engine reads."""
    return Clause(id=clause_id, title=title, content=content)


def make_risk(
    description: str,
    category: RiskCategory = RiskCategory.LEGAL,
    severity: Severity = Severity.MEDIUM,
    recommendation: str = "Review this term.",
) -> Risk:
    """Build a synthetic finding."""
    return Risk(
        category=category,
        severity=severity,
        description=description,
        affected_clause="Excerpt",
        recommendation=recommendation,
    )


@pytest.fixture
def engine() -> RiskAssessmentEngine:
    return RiskAssessmentEngine()


@pytest.fixture
def sample_lease_path() -> Path:
    """Path to the sample lease text file."""
    return EXAMPLES_DIR / "sample_lease.txt"


@pytest.fixture
def sample_lease_text(sample_lease_path: Path) -> str:
    """Full text of the sample lease."""
    return sample_lease_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_clauses_path() -> Path:
    """Path to the clause list matching the sample lease."""
    return EXAMPLES_DIR / "sample_lease_clauses.json"


@pytest.fixture
def sample_clauses(sample_clauses_path: Path) -> list[Clause]:
    data = json.loads(sample_clauses_path.read_text(encoding="utf-8"))
    return [Clause.from_dict(item) for item in data]


@pytest.fixture
def high_risk_lease_text() -> str:
    """Lease text that trips several high-severity patterns at once."""
    return (
        "Tenants are jointly and severally liable for the rent. "
        "Tenant shall indemnify and hold harmless the Landlord. "
        "Landlord may share with third parties any tenant records. "
        "Tenant accepts unlimited liability for damage to the premises."
    )
