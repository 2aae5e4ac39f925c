"""Tests for clause-level and missing-clause risk flags."""

from __future__ import annotations

import pytest

from hukuk_analyzer.catalog import PatternCatalog
from hukuk_analyzer.ids import SequentialIdGenerator
from hukuk_analyzer.models import ClauseCategory, ExtractedClause, RiskFlagType, Severity
from hukuk_analyzer.risk import MISSING_CLAUSE_SEVERITY, RiskFlagDetector


def _clause(content: str) -> ExtractedClause:
    return ExtractedClause(
        id="clause_7",
        type="sorumluluk_sinirsiz",
        category=ClauseCategory.LIABILITY,
        title="Sınırsız Sorumluluk",
        content=content,
        start_char=0,
        end_char=len(content),
        line_number=1,
        confidence=0.85,
    )


@pytest.fixture
def detector(catalog: PatternCatalog) -> RiskFlagDetector:
    return RiskFlagDetector(catalog, SequentialIdGenerator())


class TestClauseFlags:
    def test_multiple_patterns_in_catalog_order(self, detector: RiskFlagDetector) -> None:
        flags = detector.detect_clause_flags(
            _clause("Yüklenici her türlü zarardan sınırsız olarak sorumludur.")
        )
        assert [f.rule_id for f in flags] == ["sinirsiz_sorumluluk", "her_turlu_zarar"]
        assert [f.severity for f in flags] == [Severity.CRITICAL, Severity.HIGH]
        assert [f.id for f in flags] == ["flag_1", "flag_2"]
        assert all(f.clause_id == "clause_7" for f in flags)
        assert all(f.type is RiskFlagType.HIGH_RISK for f in flags)

    def test_flag_text_comes_from_catalog(self, detector: RiskFlagDetector) -> None:
        flag = detector.detect_clause_flags(_clause("Satıcı makul bir süre içinde bildirir."))[0]
        assert flag.type is RiskFlagType.AMBIGUOUS
        assert flag.description == "Belirsiz süre ifadesi (makul süre)"
        assert flag.recommendation == "Süre gün veya ay olarak açıkça belirlenmelidir"

    def test_uppercase_content(self, detector: RiskFlagDetector) -> None:
        flags = detector.detect_clause_flags(_clause("SÖZLEŞME OTOMATİK OLARAK YENİLENİR."))
        assert [f.rule_id for f in flags] == ["otomatik_yenileme"]

    def test_clean_clause(self, detector: RiskFlagDetector) -> None:
        assert detector.detect_clause_flags(_clause("Taraflar iyi niyetle davranır.")) == []


class TestMissingClauses:
    def test_missing_types_keep_required_order(self, detector: RiskFlagDetector) -> None:
        missing = detector.missing_clause_types(["bedel_sabit", "taraf_tanimlama"], "kira_sozlesmesi")
        assert missing == ["konu_kira", "sure_belirli", "odeme_vadesi", "fesih_ihbar"]

    def test_missing_flags(self, detector: RiskFlagDetector) -> None:
        flags = detector.missing_clause_flags(
            ["taraf_tanimlama", "bedel_sabit", "sure_belirli", "odeme_vadesi", "fesih_ihbar"],
            "kira_sozlesmesi",
        )
        assert len(flags) == 1
        flag = flags[0]
        assert flag.type is RiskFlagType.MISSING
        assert flag.severity is MISSING_CLAUSE_SEVERITY
        assert flag.description == "Eksik madde: Kiralanan"
        assert flag.recommendation == '"Kiralanan" maddesi eklenmesi önerilir'
        assert flag.rule_id == "konu_kira"
        assert flag.is_document_level

    def test_all_present(self, detector: RiskFlagDetector, catalog: PatternCatalog) -> None:
        required = catalog.required_clause_types("is_sozlesmesi")
        assert detector.missing_clause_flags(required, "is_sozlesmesi") == []

    @pytest.mark.parametrize("document_type", ["genel", "bilinmeyen", None])
    def test_generic_has_no_requirements(self, detector: RiskFlagDetector, document_type) -> None:
        assert detector.missing_clause_flags([], document_type) == []
