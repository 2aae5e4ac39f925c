"""Plain-text report rendering.

These functions only read the result objects they are given; rendering
never changes a score, a level or a recommendation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .assessment import ASSESSMENT_TYPE_NAMES, RISK_CATEGORY_NAMES, RISK_LEVEL_NAMES
from .catalog import PatternCatalog
from .models import (
    ConfidenceLevel,
    ExplainableResult,
    ExtractionResult,
    Impact,
    RiskAssessment,
    RiskLevel,
    Severity,
)
from .reasoning import confidence_description
from .scoring import risk_level, round_half_up

WIDTH = 60
HEAVY_RULE = "═" * WIDTH
LIGHT_RULE = "─" * WIDTH
BAR_CELLS = 10
ACTION_SCORE_THRESHOLD = 40

SEVERITY_ICONS = {
    Severity.CRITICAL: "🔴",
    Severity.HIGH: "🟠",
    Severity.MEDIUM: "🟡",
    Severity.LOW: "🟢",
}

_IMPACT_ICONS = {Impact.HIGH: "🔴", Impact.MEDIUM: "🟡", Impact.LOW: "🟢"}


def _header(*titles: str) -> list[str]:
    return [HEAVY_RULE, *(t.center(WIDTH).rstrip() for t in titles), HEAVY_RULE, ""]


def _section(title: str) -> list[str]:
    return [title, LIGHT_RULE]


# ---------------------------------------------------------------------------
# Clause extraction
# ---------------------------------------------------------------------------


def format_extraction_report(result: ExtractionResult, catalog: Optional[PatternCatalog] = None) -> str:
    """Render an extraction result as a Turkish plain-text report.

    Args:
        result: The analysis to render.
        catalog: Supplies category and document-type display names
            (optional, the bundled catalog by default).
    """
    catalog = catalog or PatternCatalog.default()
    summary = result.summary
    lines = _header("MADDE ÇIKARIM RAPORU")
    lines += [
        f"📄 Belge: {result.document_name}",
        f"📋 Tür: {catalog.document_type_name(result.document_type)}",
        "",
    ]
    if result.truncated:
        lines += ["⚠️ Belge uzunluk sınırını aştığı için kısaltılarak incelendi.", ""]

    lines += _section("📊 ÖZET")
    lines += [
        f"   Tespit Edilen Madde: {summary.total_clauses}",
        f"   Çıkarılan Varlık: {summary.total_entities}",
        f"   Yükümlülük: {summary.total_obligations}",
        f"   Hak: {summary.total_rights}",
        f"   {SEVERITY_ICONS[summary.risk_level]} Risk Seviyesi: "
        f"{summary.risk_level.value.upper()} ({summary.risk_score}/100)",
        "",
    ]

    lines += _section("📑 KATEGORİ BAZLI MADDELER")
    for category, count in summary.clauses_by_category.items():
        if count > 0:
            lines.append(f"   {catalog.category_name(category)}: {count}")
    lines.append("")

    if result.risk_flags:
        lines += _section("⚠️ RİSK BAYRAKLARI")
        for flag in result.risk_flags:
            lines.append(f"   {SEVERITY_ICONS[flag.severity]} [{flag.severity.value.upper()}] {flag.description}")
            lines.append(f"      💡 {flag.recommendation}")
        lines.append("")

    if summary.missing_clauses:
        lines += _section("❌ EKSİK MADDELER")
        lines += [f"   • {title}" for title in summary.missing_clauses]
        lines.append("")

    if summary.recommendations:
        lines += _section("💼 ÖNERİLER")
        lines += [f"   • {rec}" for rec in summary.recommendations]
        lines.append("")

    lines += [HEAVY_RULE, f"İşlem Süresi: {result.processing_time_ms:.1f} ms"]
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Explainable reasoning
# ---------------------------------------------------------------------------


def _confidence_icon(level: ConfidenceLevel) -> str:
    if level in (ConfidenceLevel.VERY_HIGH, ConfidenceLevel.HIGH):
        return "✅"
    return "⚠️" if level == ConfidenceLevel.MEDIUM else "❌"


def format_explainable_result(result: ExplainableResult) -> str:
    """Render a reasoning result with its chain, sources and caveats."""
    lines = _header("HUKUKİ ANALİZ RAPORU", "(Açıklanabilir Muhakeme)")
    lines += ["📋 SORU/KONU:", f"   {result.query}", ""]
    lines += ["📌 SONUÇ:", f"   {result.conclusion}", ""]
    lines += [
        f"{_confidence_icon(result.confidence_level)} GÜVENİLİRLİK: "
        f"{result.confidence_score * 100:.0f}% ({confidence_description(result.confidence_level)})",
        f"   Gerekçe: {result.confidence_justification}",
        "",
    ]

    if result.reasoning_chain:
        lines += _section("🔗 MUHAKEME ZİNCİRİ:")
        for step in result.reasoning_chain:
            lines += [
                "",
                f"   Adım {step.order} [{step.type.value.upper()}]:",
                f"   ├─ Öncül: {step.premise}",
                f"   ├─ Çıkarım: {step.inference}",
                f"   └─ Sonuç: {step.conclusion}",
            ]
            if step.evidences:
                lines.append(f"   📚 Dayanak: {', '.join(e.citation for e in step.evidences)}")
            if step.alternative_interpretations:
                lines.append(f"   ⚖️ Alternatif yorumlar: {'; '.join(step.alternative_interpretations)}")
            if step.potential_weaknesses:
                lines.append(f"   ⚡ Olası zayıf noktalar: {'; '.join(step.potential_weaknesses)}")
        lines.append("")

    if result.evidences:
        lines += _section("📚 KAYNAKLAR VE DAYANAKLAR:")
        for evidence in result.evidences:
            mark = "✓" if evidence.is_verified else "?"
            lines.append(f"   [{mark}] {evidence.citation}")
            lines.append(f"       Tür: {evidence.type.value} | İlgililik: {evidence.relevance_score * 100:.0f}%")
        lines.append("")

    if result.counter_arguments:
        lines += _section("⚔️ KARŞI ARGÜMANLAR:")
        for counter in result.counter_arguments:
            lines += [
                f"   • {counter.argument}",
                f"     Dayanak: {counter.basis}",
                f"     Güç: {counter.strength.value}",
            ]
            if counter.rebuttal:
                lines.append(f"     Çürütme: {counter.rebuttal}")
        lines.append("")

    if result.uncertainty_factors:
        lines += _section("⚠️ BELİRSİZLİK FAKTÖRLERİ:")
        for factor in result.uncertainty_factors:
            lines.append(f"   {_IMPACT_ICONS[factor.impact]} {factor.factor}")
            lines.append(f"      {factor.description}")
            if factor.mitigation_suggestion:
                lines.append(f"      💡 Öneri: {factor.mitigation_suggestion}")
        lines.append("")

    for title, items in (
        ("📝 VARSAYIMLAR:", result.assumptions),
        ("🚧 SINIRLAMALAR:", result.limitations),
        ("➡️ ÖNERİLEN ADIMLAR:", result.suggested_next_steps),
    ):
        if items:
            lines.append(title)
            lines += [f"   • {item}" for item in items]
            lines.append("")

    lines += [
        HEAVY_RULE,
        f"Model: {result.model_version}",
        "Bu analiz hukuki tavsiye niteliği taşımaz.",
    ]
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Weighted-factor assessments
# ---------------------------------------------------------------------------


def format_risk_score(score: int, level: Optional[RiskLevel] = None) -> str:
    """Render a score as a ten-cell bar, e.g. ``"███████░░░ %65 (Yüksek)"``."""
    level = level or risk_level(score)
    filled = min(BAR_CELLS, max(0, round_half_up(score / 10)))
    return f"{'█' * filled}{'░' * (BAR_CELLS - filled)} %{score} ({RISK_LEVEL_NAMES[level]})"


def _format_date(value: Optional[datetime]) -> str:
    return value.strftime("%d.%m.%Y %H:%M") if value else "-"


def format_risk_assessment(assessment: RiskAssessment) -> str:
    """Render a risk assessment with category scores, factors and actions."""
    lines = _header("RİSK DEĞERLENDİRME RAPORU")
    lines += [
        f"Tarih: {_format_date(assessment.created_at)}",
        f"Tür: {ASSESSMENT_TYPE_NAMES[assessment.assessment_type]}",
        f"ID: {assessment.id}",
        "",
        f"GENEL RİSK SKORU: %{assessment.overall_score}",
        f"Seviye: {RISK_LEVEL_NAMES[assessment.overall_level]}",
        f"Bar: {format_risk_score(assessment.overall_score, assessment.overall_level)}",
        "",
        "ÖZET:",
        assessment.summary,
        "",
    ]

    lines += _section("KATEGORİ BAZLI ANALİZ")
    for category, entry in assessment.category_breakdown.items():
        if entry.score > 0:
            lines.append(f"{RISK_CATEGORY_NAMES[category]}: %{entry.score} ({RISK_LEVEL_NAMES[entry.level]})")
    lines.append("")

    lines += _section("RİSK FAKTÖRLERİ")
    for factor in sorted(assessment.factors, key=lambda f: f.score, reverse=True):
        lines += [
            "",
            f"● {factor.name}",
            f"  Risk Skoru: %{factor.score} ({RISK_LEVEL_NAMES[factor.level]})",
            f"  {factor.description}",
        ]
        if factor.legal_basis:
            lines.append(f"  Yasal Dayanak: {factor.legal_basis}")
        if factor.score >= ACTION_SCORE_THRESHOLD and factor.mitigation_suggestions:
            lines.append("  Önerilen Aksiyonlar:")
            lines += [f"    - {m}" for m in factor.mitigation_suggestions]
    lines.append("")

    lines += _section("ÖNERİLER")
    lines += [f"{i}. {rec}" for i, rec in enumerate(assessment.recommendations, 1)]
    lines += [
        "",
        HEAVY_RULE,
        "Bu rapor otomatik olarak oluşturulmuştur.",
        "Kesin hukuki değerlendirme için avukata danışınız.",
    ]
    return "\n".join(lines) + "\n"
