"""Legal Risk Engine -- explainable risk assessment for legal documents."""

__version__ = "0.1.0"

from .clause_analyzer import ClauseAnalyzer
from .config import AssessmentSettings
from .contextual import ContextualAnalyzer
from .engine import RiskAssessmentEngine, assess_document_risks
from .matcher import PatternMatcher
from .models import (
    Clause,
    ClauseRiskAnalysis,
    DocumentType,
    Risk,
    RiskAssessmentResult,
    RiskCategory,
    Severity,
    TextLocation,
)
from .patterns import DEFAULT_PATTERNS, PatternDatabase, RiskPattern
from .report import generate_recommendations, generate_summary
from .scoring import deduplicate_risks, score_risks, word_similarity

__all__ = [
    # Core
    "RiskAssessmentEngine",
    "assess_document_risks",
    "AssessmentSettings",
    # Models
    "Clause",
    "ClauseRiskAnalysis",
    "DocumentType",
    "Risk",
    "RiskAssessmentResult",
    "RiskCategory",
    "Severity",
    "TextLocation",
    # Patterns
    "DEFAULT_PATTERNS",
    "PatternDatabase",
    "RiskPattern",
    "PatternMatcher",
    # Analyzers
    "ContextualAnalyzer",
    "ClauseAnalyzer",
    # Scoring and reporting
    "deduplicate_risks",
    "score_risks",
    "word_similarity",
    "generate_summary",
    "generate_recommendations",
]
