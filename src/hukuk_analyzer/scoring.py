"""Scoring procedures.

Three related but separate scores live here:

* the additive document risk score and its banded level, driven by the
  severities of risk flags;
* the explainable-reasoning confidence score in [0, 1], a weighted sum of
  five evidence and reasoning components minus uncertainty deductions;
* the generic weighted-factor risk score used by case, contract and
  compliance assessments.

All functions are pure and guard against empty inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from .models import (
    EVIDENCE_RELIABILITY,
    CategoryScore,
    ConfidenceLevel,
    CounterArgument,
    Evidence,
    EvidenceType,
    Impact,
    ReasoningStep,
    RiskCategory,
    RiskFactor,
    RiskFlag,
    RiskLevel,
    Severity,
    UncertaintyFactor,
)

# ---------------------------------------------------------------------------
# Document risk score
# ---------------------------------------------------------------------------

SEVERITY_POINTS: dict[Severity, int] = {
    Severity.CRITICAL: 25,
    Severity.HIGH: 15,
    Severity.MEDIUM: 5,
    Severity.LOW: 1,
}

MAX_RISK_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (48.5 -> 49).

    Built-in ``round`` sends halves to the even neighbour instead.
    """
    # absorb float noise such as 72.49999999999999
    return math.floor(round(value, 9) + 0.5)


def document_risk_score(flags: Iterable[RiskFlag]) -> int:
    """Sum severity points over *flags*, clamped to [0, 100]."""
    total = sum(SEVERITY_POINTS[f.severity] for f in flags)
    return max(0, min(MAX_RISK_SCORE, total))


def document_risk_level(score: int, critical_count: int, high_count: int) -> Severity:
    """Band a document risk score. The first matching rule wins.

    1. ``critical`` if any critical flag exists or score >= 70
    2. ``high`` if more than one high flag exists or score >= 40
    3. ``medium`` if any high flag exists or score >= 20
    4. ``low`` otherwise
    """
    if critical_count > 0 or score >= 70:
        return Severity.CRITICAL
    if high_count > 1 or score >= 40:
        return Severity.HIGH
    if high_count > 0 or score >= 20:
        return Severity.MEDIUM
    return Severity.LOW


def level_for_flags(flags: Sequence[RiskFlag]) -> tuple[int, Severity]:
    """Return ``(score, level)`` for a collection of flags."""
    score = document_risk_score(flags)
    critical = sum(1 for f in flags if f.severity is Severity.CRITICAL)
    high = sum(1 for f in flags if f.severity is Severity.HIGH)
    return score, document_risk_level(score, critical, high)


# ---------------------------------------------------------------------------
# Explainable-reasoning confidence
# ---------------------------------------------------------------------------

CONFIDENCE_WEIGHTS: dict[str, float] = {
    "evidence_quality": 0.30,
    "evidence_quantity": 0.15,
    "source_reliability": 0.25,
    "reasoning_coherence": 0.20,
    "precedent_alignment": 0.10,
}

NO_EVIDENCE_STEP_CONFIDENCE = 0.3
HIGH_IMPACT_DEDUCTION = 0.15
MEDIUM_IMPACT_DEDUCTION = 0.05
STRONG_COUNTER_DEDUCTION = 0.05


def confidence_level(score: float) -> ConfidenceLevel:
    """Band a [0, 1] confidence score."""
    if score >= 0.9:
        return ConfidenceLevel.VERY_HIGH
    if score >= 0.75:
        return ConfidenceLevel.HIGH
    if score >= 0.5:
        return ConfidenceLevel.MEDIUM
    if score >= 0.25:
        return ConfidenceLevel.LOW
    return ConfidenceLevel.VERY_LOW


def evidence_quality(evidences: Sequence[Evidence]) -> float:
    """Mean of relevance x type reliability, or 0.0 without evidence."""
    if not evidences:
        return 0.0
    return sum(e.weighted_relevance for e in evidences) / len(evidences)


def step_confidence(evidences: Sequence[Evidence]) -> float:
    """Reliability-weighted mean relevance of a step's evidence (0.3 if none)."""
    if not evidences:
        return NO_EVIDENCE_STEP_CONFIDENCE
    return evidence_quality(evidences)


@dataclass(frozen=True)
class ConfidenceBreakdown:
    """Components of a confidence score, each already in [0, 1]."""

    evidence_quality: float
    evidence_quantity: float
    source_reliability: float
    reasoning_coherence: float
    precedent_alignment: float
    evidence_count: int
    precedent_count: int
    uncertainty_deduction: float
    strong_counter_arguments: int
    score: float

    @property
    def level(self) -> ConfidenceLevel:
        return confidence_level(self.score)

    def justification(self) -> str:
        """Turkish one-line explanation of how the score was composed."""
        parts = []
        if self.evidence_count:
            parts.append(f"Kanıt kalitesi: {self.evidence_quality * 100:.0f}%")
        parts.append(f"Kanıt sayısı: {self.evidence_count}")
        parts.append(f"Kaynak güvenilirliği: {self.source_reliability * 100:.0f}%")
        if self.reasoning_coherence:
            parts.append(f"Muhakeme tutarlılığı: {self.reasoning_coherence * 100:.0f}%")
        parts.append(f"Emsal desteği: {self.precedent_count} karar")
        if self.uncertainty_deduction > 0:
            parts.append(f"Belirsizlik faktörleri: -{self.uncertainty_deduction * 100:.0f}%")
        if self.strong_counter_arguments:
            parts.append(f"Güçlü karşı argümanlar: {self.strong_counter_arguments}")
        return " | ".join(parts)


def confidence_breakdown(
    evidences: Sequence[Evidence],
    steps: Sequence[ReasoningStep],
    counter_arguments: Sequence[CounterArgument] = (),
    uncertainty_factors: Sequence[UncertaintyFactor] = (),
) -> ConfidenceBreakdown:
    """Compute the weighted confidence score and its components.

    Components (weight): evidence quality (0.30), evidence quantity
    min(n/5, 1) (0.15), source reliability as the mean of the verified ratio
    and the statute-or-precedent ratio (0.25), reasoning coherence as the
    mean step confidence (0.20), precedent alignment min(precedents/2, 1)
    (0.10). The sum is reduced by 0.15 per high-impact and 0.05 per
    medium-impact uncertainty factor and by 0.05 per strong counter-argument,
    then clamped to [0, 1].
    """
    count = len(evidences)
    denominator = max(count, 1)
    quality = evidence_quality(evidences)
    quantity = min(count / 5, 1.0)
    verified_ratio = sum(1 for e in evidences if e.is_verified) / denominator
    authority_ratio = (
        sum(1 for e in evidences if e.type in (EvidenceType.STATUTE, EvidenceType.CASE_LAW)) / denominator
    )
    reliability = (verified_ratio + authority_ratio) / 2
    coherence = sum(s.confidence for s in steps) / len(steps) if steps else 0.0
    precedents = sum(1 for e in evidences if e.type is EvidenceType.CASE_LAW)
    alignment = min(precedents / 2, 1.0)

    w = CONFIDENCE_WEIGHTS
    score = (
        quality * w["evidence_quality"]
        + quantity * w["evidence_quantity"]
        + reliability * w["source_reliability"]
        + coherence * w["reasoning_coherence"]
        + alignment * w["precedent_alignment"]
    )

    high = sum(1 for f in uncertainty_factors if f.impact is Impact.HIGH)
    medium = sum(1 for f in uncertainty_factors if f.impact is Impact.MEDIUM)
    deduction = high * HIGH_IMPACT_DEDUCTION + medium * MEDIUM_IMPACT_DEDUCTION
    strong = sum(1 for c in counter_arguments if c.is_strong)
    score -= deduction + strong * STRONG_COUNTER_DEDUCTION

    return ConfidenceBreakdown(
        evidence_quality=quality,
        evidence_quantity=quantity,
        source_reliability=reliability,
        reasoning_coherence=coherence,
        precedent_alignment=alignment,
        evidence_count=count,
        precedent_count=precedents,
        uncertainty_deduction=deduction,
        strong_counter_arguments=strong,
        score=min(1.0, max(0.0, score)),
    )


def reliability_level(evidence_type: EvidenceType) -> ConfidenceLevel:
    """Confidence band of an evidence type's reliability weight."""
    return confidence_level(EVIDENCE_RELIABILITY[evidence_type])


# ---------------------------------------------------------------------------
# Weighted-factor risk score
# ---------------------------------------------------------------------------


def risk_level(score: float) -> RiskLevel:
    """Band a 0-100 factor score."""
    if score >= 80:
        return RiskLevel.CRITICAL
    if score >= 60:
        return RiskLevel.HIGH
    if score >= 40:
        return RiskLevel.MEDIUM
    if score >= 20:
        return RiskLevel.LOW
    return RiskLevel.MINIMAL


def weighted_risk_score(factors: Sequence[RiskFactor]) -> int:
    """Weighted mean of factor scores, renormalised by the weight sum.

    Returns 0 when there are no factors or the weights sum to zero.
    """
    total_weight = sum(f.weight for f in factors)
    if total_weight <= 0:
        return 0
    return round_half_up(sum(f.score * f.weight for f in factors) / total_weight)


def category_breakdown(factors: Sequence[RiskFactor]) -> dict[RiskCategory, CategoryScore]:
    """Rounded mean factor score per category; empty categories score 0 / minimal."""
    breakdown = {}
    for category in RiskCategory:
        scores = [f.score for f in factors if f.category is category]
        mean = round_half_up(sum(scores) / len(scores)) if scores else 0
        breakdown[category] = CategoryScore(score=mean, level=risk_level(mean))
    return breakdown
