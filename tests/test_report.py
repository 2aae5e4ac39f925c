"""Tests for the plain-text report renderers."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from hukuk_analyzer.analyzer import ClauseAnalyzer
from hukuk_analyzer.assessment import ContractRiskInput, RiskAssessor
from hukuk_analyzer.config import Settings
from hukuk_analyzer.ids import SequentialIdGenerator
from hukuk_analyzer.models import AssessmentType, EvidenceType, ReasoningContext, RiskAssessment, RiskLevel
from hukuk_analyzer.reasoning import ReasoningEngine
from hukuk_analyzer.report import (
    HEAVY_RULE,
    format_explainable_result,
    format_extraction_report,
    format_risk_assessment,
    format_risk_score,
)


class TestExtractionReport:
    @pytest.fixture
    def report(self, analyzer: ClauseAnalyzer, employment_text: str) -> str:
        return format_extraction_report(
            analyzer.analyze(employment_text, document_type="is_sozlesmesi", document_name="is.txt")
        )

    def test_header(self, report: str) -> None:
        lines = report.splitlines()
        assert lines[0] == HEAVY_RULE
        assert lines[1].strip() == "MADDE ÇIKARIM RAPORU"
        assert "📄 Belge: is.txt" in lines
        assert "📋 Tür: İş Sözleşmesi" in lines

    def test_summary(self, report: str) -> None:
        assert "   Tespit Edilen Madde: 3" in report
        assert "🔴 Risk Seviyesi: CRITICAL (55/100)" in report

    def test_categories_with_clauses_only(self, report: str) -> None:
        assert "   Sorumluluk: 1" in report
        assert "   Mali Hükümler: 1" in report
        assert "Gizlilik:" not in report

    def test_flags_and_missing(self, report: str) -> None:
        assert "[CRITICAL] Sınırsız sorumluluk kaydı tespit edildi" in report
        assert "❌ EKSİK MADDELER" in report
        assert "   • Konu Tanımı" in report
        assert "   • 6 eksik madde tamamlanmalıdır" in report

    def test_footer(self, report: str) -> None:
        assert report.rstrip().splitlines()[-1].startswith("İşlem Süresi: ")
        assert report.rstrip().endswith(" ms")

    def test_clean_lease_has_no_flag_sections(self, analyzer: ClauseAnalyzer, lease_text: str) -> None:
        report = format_extraction_report(analyzer.analyze(lease_text, document_type="kira_sozlesmesi"))
        assert "RİSK BAYRAKLARI" not in report
        assert "EKSİK MADDELER" not in report
        assert "📋 Tür: Kira Sözleşmesi" in report

    def test_truncation_note(self, ids: SequentialIdGenerator, employment_text: str) -> None:
        analyzer = ClauseAnalyzer(settings=Settings(max_document_chars=20), id_generator=ids)
        report = format_extraction_report(analyzer.analyze(employment_text))
        assert "kısaltılarak incelendi" in report


class TestExplainableReport:
    def test_sections(self, fixed_clock: Callable[[], datetime]) -> None:
        engine = ReasoningEngine(SequentialIdGenerator(), fixed_clock)
        statute = engine.create_evidence(
            EvidenceType.STATUTE, "Türk Borçlar Kanunu", "TBK m.344", relevance=0.8, is_verified=True
        )
        context = ReasoningContext(
            legal_area="kira", jurisdiction="İstanbul", key_facts=("Kira artışı", "Konut", "5 yıllık kira")
        )
        report = format_explainable_result(engine.explain("Kira artış oranı sınırı nedir?", context, [statute]))

        assert "HUKUKİ ANALİZ RAPORU" in report
        assert "   Kira artış oranı sınırı nedir?" in report
        assert "⚠️ GÜVENİLİRLİK: 58% (Orta - " in report
        assert "   Adım 2 [STATUTORY]:" in report
        assert "   📚 Dayanak: TBK m.344" in report
        assert "   [✓] TBK m.344" in report
        assert "Tür: kanun | İlgililik: 80%" in report
        assert "     Güç: high" in report
        assert "🟢 Tek Tip Kaynak" in report
        assert "🚧 SINIRLAMALAR:" in report
        assert report.rstrip().endswith("Bu analiz hukuki tavsiye niteliği taşımaz.")

    def test_without_chain_or_evidence(self) -> None:
        context = ReasoningContext(legal_area="genel", jurisdiction="belirsiz")
        report = format_explainable_result(ReasoningEngine().explain("Sonuç nedir?", context))
        assert "MUHAKEME ZİNCİRİ" not in report
        assert "KAYNAKLAR VE DAYANAKLAR" not in report
        assert "❌ GÜVENİLİRLİK: 0%" in report
        assert "🔴 Yetki Belirsizliği" in report


class TestRiskScoreBar:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, "░░░░░░░░░░ %0 (Minimal)"),
            (65, "███████░░░ %65 (Yüksek)"),
            (49, "█████░░░░░ %49 (Orta)"),
            (100, "██████████ %100 (Kritik)"),
        ],
    )
    def test_bar(self, score: int, expected: str) -> None:
        assert format_risk_score(score) == expected

    def test_explicit_level(self) -> None:
        assert format_risk_score(10, RiskLevel.HIGH).endswith("(Yüksek)")


class TestAssessmentReport:
    @pytest.fixture
    def report(self, fixed_clock: Callable[[], datetime]) -> str:
        assessment = RiskAssessor(SequentialIdGenerator(), fixed_clock).assess_contract(
            ContractRiskInput(contract_type="hizmet")
        )
        return format_risk_assessment(assessment)

    def test_header(self, report: str) -> None:
        assert "RİSK DEĞERLENDİRME RAPORU" in report
        assert "Tarih: 01.03.2024 09:30" in report
        assert "Tür: Sözleşme Risk Değerlendirmesi" in report
        assert "ID: assessment_1" in report
        assert "GENEL RİSK SKORU: %49" in report
        assert "Seviye: Orta" in report
        assert "Bar: █████░░░░░ %49 (Orta)" in report

    def test_categories_with_score_only(self, report: str) -> None:
        assert "Hukuki Risk: %40 (Orta)" in report
        assert "İtibar Riski" not in report

    def test_factors_sorted_by_score(self, report: str) -> None:
        first = report.index("● Karşı Taraf Güvenilirliği")
        assert first < report.index("● Sorumluluk Sınırı Eksik") < report.index("● Yetki Maddesi")

    def test_actions_and_legal_basis(self, report: str) -> None:
        assert "  Yasal Dayanak: HMK m. 17-18 - Yetki Sözleşmesi" in report
        assert "    - Karşı taraf hakkında detaylı araştırma yapılmalı" in report
        assert "1. Karşı taraf hakkında detaylı araştırma yapılmalı" in report

    def test_missing_date(self) -> None:
        assessment = RiskAssessment(
            id="a", assessment_type=AssessmentType.GENERAL, overall_score=0, overall_level=RiskLevel.MINIMAL
        )
        report = format_risk_assessment(assessment)
        assert "Tarih: -" in report
        assert "Tür: Genel Risk Değerlendirmesi" in report
