"""Hukuk Analyzer -- rule-based analysis of Turkish contracts."""

__version__ = "0.1.0"

from .analyzer import ClauseAnalyzer
from .assessment import (
    CaseRiskInput,
    ComplianceRiskInput,
    ContractRiskInput,
    RiskAssessor,
)
from .catalog import (
    CatalogValidationError,
    ClauseTypeDefinition,
    HukukAnalyzerError,
    PatternCatalog,
    RiskPattern,
)
from .config import Settings
from .extractors import ClauseExtractor, EntityExtractor, ObligationExtractor
from .ids import SequentialIdGenerator, UuidIdGenerator
from .models import (
    ClauseCategory,
    ConfidenceLevel,
    Evidence,
    EvidenceType,
    ExplainableResult,
    ExtractedClause,
    ExtractedEntity,
    ExtractedObligation,
    ExtractedRight,
    ExtractionResult,
    ExtractionSummary,
    ReasoningContext,
    RiskAssessment,
    RiskFactor,
    RiskFlag,
    RiskLevel,
    Severity,
)
from .reasoning import ReasoningEngine, export_for_audit, validate_reasoning_chain
from .report import (
    format_explainable_result,
    format_extraction_report,
    format_risk_assessment,
    format_risk_score,
)
from .risk import RiskFlagDetector

__all__ = [
    # Core
    "ClauseAnalyzer",
    "ExtractionResult",
    "ExtractionSummary",
    "ExtractedClause",
    "ExtractedEntity",
    "ExtractedObligation",
    "ExtractedRight",
    "RiskFlag",
    "ClauseCategory",
    "Severity",
    "Settings",
    # Pipeline components
    "PatternCatalog",
    "ClauseTypeDefinition",
    "RiskPattern",
    "ClauseExtractor",
    "EntityExtractor",
    "ObligationExtractor",
    "RiskFlagDetector",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    # Errors
    "HukukAnalyzerError",
    "CatalogValidationError",
    # Explainable reasoning
    "ReasoningEngine",
    "ReasoningContext",
    "Evidence",
    "EvidenceType",
    "ConfidenceLevel",
    "ExplainableResult",
    "validate_reasoning_chain",
    "export_for_audit",
    # Risk assessment
    "RiskAssessor",
    "CaseRiskInput",
    "ContractRiskInput",
    "ComplianceRiskInput",
    "RiskAssessment",
    "RiskFactor",
    "RiskLevel",
    # Reports
    "format_extraction_report",
    "format_explainable_result",
    "format_risk_assessment",
    "format_risk_score",
]
