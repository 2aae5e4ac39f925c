"""Data models for Turkish contract analysis.

Every structure here is a frozen dataclass: extraction builds fresh values
per call and nothing is mutated afterwards. ``to_dict()`` returns plain,
JSON-serialisable data for UI layers and report renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ClauseCategory(str, Enum):
    """Main clause categories (fixed enumeration)."""

    PARTY_INFO = "taraf_bilgileri"
    SUBJECT_MATTER = "sozlesme_konusu"
    RIGHTS_OBLIGATIONS = "hak_ve_yukumlulukler"
    FINANCIAL = "mali_hukumler"
    TERM = "sure_ve_vade"
    LIABILITY = "sorumluluk"
    CONFIDENTIALITY = "gizlilik"
    INTELLECTUAL_PROPERTY = "fikri_mulkiyet"
    TERMINATION = "fesih_sona_erme"
    DISPUTE_RESOLUTION = "uyusmazlik"
    GENERAL = "genel_hukumler"
    SPECIAL = "ozel_hukumler"


class EntityType(str, Enum):
    """Typed spans recognised inside clause text."""

    AMOUNT = "amount"
    PERCENTAGE = "percentage"
    DATE = "date"
    DURATION = "duration"
    PARTY = "party"
    LOCATION = "location"
    REFERENCE = "reference"


class Severity(str, Enum):
    """Risk severity, also used for the document-level risk level."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskFlagType(str, Enum):
    HIGH_RISK = "high_risk"
    UNUSUAL = "unusual"
    MISSING = "missing"
    CONFLICT = "conflict"
    AMBIGUOUS = "ambiguous"


class RiskLevel(str, Enum):
    """Five-band level used by weighted-factor risk assessments."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    MINIMAL = "minimal"


class RiskCategory(str, Enum):
    LEGAL = "legal"
    FINANCIAL = "financial"
    OPERATIONAL = "operational"
    COMPLIANCE = "compliance"
    REPUTATIONAL = "reputational"
    CONTRACTUAL = "contractual"


class AssessmentType(str, Enum):
    CASE = "case"
    CONTRACT = "contract"
    COMPLIANCE = "compliance"
    GENERAL = "general"


class EvidenceType(str, Enum):
    """Kinds of legal sources that can support a reasoning step."""

    STATUTE = "kanun"
    REGULATION = "yonetmelik"
    CASE_LAW = "ictihat"
    DOCTRINE = "doktrin"
    CUSTOM = "teamul"
    COMPARATIVE = "karsilastirmali"
    EXPERT_OPINION = "uzman_gorusu"


class ReasoningType(str, Enum):
    DEDUCTIVE = "deductive"
    INDUCTIVE = "inductive"
    ANALOGICAL = "analogical"
    ABDUCTIVE = "abductive"
    STATUTORY = "statutory"
    PRECEDENTIAL = "precedential"


class ConfidenceLevel(str, Enum):
    VERY_HIGH = "very_high"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "very_low"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Reliability weight of each evidence type (statutes are authoritative,
# comparative law only persuasive).
EVIDENCE_RELIABILITY: dict[EvidenceType, float] = {
    EvidenceType.STATUTE: 1.0,
    EvidenceType.REGULATION: 0.95,
    EvidenceType.CASE_LAW: 0.90,
    EvidenceType.DOCTRINE: 0.75,
    EvidenceType.CUSTOM: 0.60,
    EvidenceType.COMPARATIVE: 0.50,
    EvidenceType.EXPERT_OPINION: 0.70,
}

NormalizedValue = Union[str, tuple[str, str], None]


# ---------------------------------------------------------------------------
# Extraction results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExtractedEntity:
    """A typed, normalised span extracted from clause text."""

    type: EntityType
    text: str
    normalized: NormalizedValue = None
    start_char: int = 0
    end_char: int = 0
    confidence: float = 1.0

    def to_dict(self) -> dict:
        normalized = self.normalized
        if isinstance(normalized, tuple):
            normalized = list(normalized)
        return {
            "type": self.type.value,
            "text": self.text,
            "normalized": normalized,
            "start_char": self.start_char,
            "end_char": self.end_char,
            "confidence": round(self.confidence, 3),
        }


@dataclass(frozen=True)
class ExtractedObligation:
    """A party's required (or prohibited) action derived from clause phrasing."""

    obligor: str
    obligee: str
    action: str
    condition: Optional[str] = None
    deadline: Optional[str] = None
    is_conditional: bool = False
    is_periodic: bool = False

    def to_dict(self) -> dict:
        return {
            "obligor": self.obligor,
            "obligee": self.obligee,
            "action": self.action,
            "condition": self.condition,
            "deadline": self.deadline,
            "is_conditional": self.is_conditional,
            "is_periodic": self.is_periodic,
        }


@dataclass(frozen=True)
class ExtractedRight:
    """An entitlement held by a party."""

    holder: str
    right: str
    is_exclusive: bool = False
    is_transferable: bool = True
    scope: Optional[str] = None
    limitations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "holder": self.holder,
            "right": self.right,
            "is_exclusive": self.is_exclusive,
            "is_transferable": self.is_transferable,
            "scope": self.scope,
            "limitations": list(self.limitations),
        }


@dataclass(frozen=True)
class RiskFlag:
    """A severity-tagged issue raised on a clause or on the whole document.

    ``clause_id`` is empty for document-level flags such as missing clauses.
    ``rule_id`` names the risk pattern (or required clause type) that raised it.
    """

    id: str
    type: RiskFlagType
    severity: Severity
    description: str
    recommendation: str
    clause_id: str = ""
    rule_id: str = ""

    @property
    def is_document_level(self) -> bool:
        return not self.clause_id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "recommendation": self.recommendation,
            "clause_id": self.clause_id,
            "rule_id": self.rule_id,
        }


@dataclass(frozen=True)
class ExtractedClause:
    """A paragraph classified as an instance of a catalog clause type."""

    id: str
    type: str
    category: ClauseCategory
    title: str
    content: str
    start_char: int
    end_char: int
    line_number: int
    confidence: float
    entities: tuple[ExtractedEntity, ...] = ()
    obligations: tuple[ExtractedObligation, ...] = ()
    rights: tuple[ExtractedRight, ...] = ()
    risk_flags: tuple[RiskFlag, ...] = ()
    related_clauses: tuple[str, ...] = ()
    inherent_severity: Optional[Severity] = None

    @property
    def is_risky(self) -> bool:
        return any(f.severity in (Severity.CRITICAL, Severity.HIGH) for f in self.risk_flags)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category.value,
            "title": self.title,
            "content": self.content,
            "start_char": self.start_char,
            "end_char": self.end_char,
            "line_number": self.line_number,
            "confidence": round(self.confidence, 3),
            "entities": [e.to_dict() for e in self.entities],
            "obligations": [o.to_dict() for o in self.obligations],
            "rights": [r.to_dict() for r in self.rights],
            "risk_flags": [f.to_dict() for f in self.risk_flags],
            "related_clauses": list(self.related_clauses),
            "inherent_severity": self.inherent_severity.value if self.inherent_severity else None,
        }


@dataclass(frozen=True)
class ExtractionSummary:
    """Document-level aggregate of an extraction run."""

    total_clauses: int = 0
    clauses_by_category: Mapping[ClauseCategory, int] = field(default_factory=dict)
    total_entities: int = 0
    total_obligations: int = 0
    total_rights: int = 0
    risk_score: int = 0
    risk_level: Severity = Severity.LOW
    critical_risks: int = 0
    high_risks: int = 0
    missing_clauses: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # read-only copy; the caller's dict stays independent
        object.__setattr__(self, "clauses_by_category", MappingProxyType(dict(self.clauses_by_category)))

    def to_dict(self) -> dict:
        return {
            "total_clauses": self.total_clauses,
            "clauses_by_category": {c.value: n for c, n in self.clauses_by_category.items()},
            "total_entities": self.total_entities,
            "total_obligations": self.total_obligations,
            "total_rights": self.total_rights,
            "risk_score": self.risk_score,
            "risk_level": self.risk_level.value,
            "critical_risks": self.critical_risks,
            "high_risks": self.high_risks,
            "missing_clauses": list(self.missing_clauses),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Complete output of one analysis call; owns every clause, entity and flag."""

    id: str
    document_name: str
    document_type: str
    clauses: tuple[ExtractedClause, ...] = ()
    entities: tuple[ExtractedEntity, ...] = ()
    obligations: tuple[ExtractedObligation, ...] = ()
    rights: tuple[ExtractedRight, ...] = ()
    risk_flags: tuple[RiskFlag, ...] = ()
    summary: ExtractionSummary = field(default_factory=ExtractionSummary)
    extracted_at: Optional[datetime] = None
    processing_time_ms: float = 0.0
    truncated: bool = False

    @property
    def clause_types_found(self) -> set[str]:
        return {c.type for c in self.clauses}

    @property
    def high_risk_clauses(self) -> list[ExtractedClause]:
        """Clauses carrying at least one critical or high severity flag."""
        return [c for c in self.clauses if c.is_risky]

    def clauses_in_category(self, category: ClauseCategory) -> list[ExtractedClause]:
        return [c for c in self.clauses if c.category == category]

    def search_clauses(self, keyword: str) -> list[ExtractedClause]:
        """Return clauses whose content or title contains *keyword* (case-insensitive)."""
        from .text import fold

        needle = fold(keyword)
        return [c for c in self.clauses if needle in fold(c.content) or needle in fold(c.title)]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "document_name": self.document_name,
            "document_type": self.document_type,
            "clauses": [c.to_dict() for c in self.clauses],
            "entities": [e.to_dict() for e in self.entities],
            "obligations": [o.to_dict() for o in self.obligations],
            "rights": [r.to_dict() for r in self.rights],
            "risk_flags": [f.to_dict() for f in self.risk_flags],
            "summary": self.summary.to_dict(),
            "extracted_at": self.extracted_at.isoformat() if self.extracted_at else None,
            "processing_time_ms": round(self.processing_time_ms, 3),
            "truncated": self.truncated,
        }


# ---------------------------------------------------------------------------
# Explainable reasoning
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Evidence:
    """A cited legal source supporting a reasoning step."""

    id: str
    type: EvidenceType
    source: str
    citation: str
    content: str = ""
    relevance_score: float = 0.8
    reliability: ConfidenceLevel = ConfidenceLevel.MEDIUM
    is_verified: bool = False

    @property
    def weighted_relevance(self) -> float:
        """Relevance scaled by the reliability of the evidence type."""
        return self.relevance_score * EVIDENCE_RELIABILITY[self.type]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "source": self.source,
            "citation": self.citation,
            "content": self.content,
            "relevance_score": round(self.relevance_score, 3),
            "reliability": self.reliability.value,
            "is_verified": self.is_verified,
        }


@dataclass(frozen=True)
class ReasoningStep:
    id: str
    order: int
    type: ReasoningType
    premise: str
    inference: str
    conclusion: str
    evidences: tuple[Evidence, ...] = ()
    confidence: float = 0.3
    alternative_interpretations: tuple[str, ...] = ()
    potential_weaknesses: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order": self.order,
            "type": self.type.value,
            "premise": self.premise,
            "inference": self.inference,
            "conclusion": self.conclusion,
            "evidences": [e.id for e in self.evidences],
            "confidence": round(self.confidence, 3),
            "alternative_interpretations": list(self.alternative_interpretations),
            "potential_weaknesses": list(self.potential_weaknesses),
        }


@dataclass(frozen=True)
class CounterArgument:
    id: str
    argument: str
    basis: str
    strength: ConfidenceLevel
    rebuttal: Optional[str] = None

    @property
    def is_strong(self) -> bool:
        return self.strength in (ConfidenceLevel.HIGH, ConfidenceLevel.VERY_HIGH)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "argument": self.argument,
            "basis": self.basis,
            "strength": self.strength.value,
            "rebuttal": self.rebuttal,
        }


@dataclass(frozen=True)
class UncertaintyFactor:
    factor: str
    description: str
    impact: Impact
    mitigation_suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "factor": self.factor,
            "description": self.description,
            "impact": self.impact.value,
            "mitigation_suggestion": self.mitigation_suggestion,
        }


@dataclass(frozen=True)
class ReasoningContext:
    """Facts and setting of a legal question."""

    legal_area: str
    jurisdiction: str
    key_facts: tuple[str, ...] = ()
    legal_questions: tuple[str, ...] = ()
    case_type: Optional[str] = None


@dataclass(frozen=True)
class ExplainableResult:
    id: str
    query: str
    conclusion: str
    confidence_score: float
    confidence_level: ConfidenceLevel
    confidence_justification: str
    reasoning_chain: tuple[ReasoningStep, ...] = ()
    evidences: tuple[Evidence, ...] = ()
    counter_arguments: tuple[CounterArgument, ...] = ()
    uncertainty_factors: tuple[UncertaintyFactor, ...] = ()
    limitations: tuple[str, ...] = ()
    assumptions: tuple[str, ...] = ()
    suggested_next_steps: tuple[str, ...] = ()
    generated_at: Optional[datetime] = None
    model_version: str = "1.0.0-xai"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "query": self.query,
            "conclusion": self.conclusion,
            "confidence_score": round(self.confidence_score, 4),
            "confidence_level": self.confidence_level.value,
            "confidence_justification": self.confidence_justification,
            "reasoning_chain": [s.to_dict() for s in self.reasoning_chain],
            "evidences": [e.to_dict() for e in self.evidences],
            "counter_arguments": [c.to_dict() for c in self.counter_arguments],
            "uncertainty_factors": [u.to_dict() for u in self.uncertainty_factors],
            "limitations": list(self.limitations),
            "assumptions": list(self.assumptions),
            "suggested_next_steps": list(self.suggested_next_steps),
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
            "model_version": self.model_version,
        }


# ---------------------------------------------------------------------------
# Weighted-factor risk assessment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RiskFactor:
    """One weighted contributor to a risk assessment (score 0-100)."""

    id: str
    name: str
    category: RiskCategory
    description: str
    weight: float
    score: int
    level: RiskLevel
    mitigation_suggestions: tuple[str, ...] = ()
    legal_basis: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "weight": self.weight,
            "score": self.score,
            "level": self.level.value,
            "mitigation_suggestions": list(self.mitigation_suggestions),
            "legal_basis": self.legal_basis,
        }


@dataclass(frozen=True)
class CategoryScore:
    score: int
    level: RiskLevel

    def to_dict(self) -> dict:
        return {"score": self.score, "level": self.level.value}


@dataclass(frozen=True)
class RiskAssessment:
    id: str
    assessment_type: AssessmentType
    overall_score: int
    overall_level: RiskLevel
    factors: tuple[RiskFactor, ...] = ()
    category_breakdown: Mapping[RiskCategory, CategoryScore] = field(default_factory=dict)
    summary: str = ""
    recommendations: tuple[str, ...] = ()
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_breakdown", MappingProxyType(dict(self.category_breakdown)))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "assessment_type": self.assessment_type.value,
            "overall_score": self.overall_score,
            "overall_level": self.overall_level.value,
            "factors": [f.to_dict() for f in self.factors],
            "category_breakdown": {c.value: s.to_dict() for c, s in self.category_breakdown.items()},
            "summary": self.summary,
            "recommendations": list(self.recommendations),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
