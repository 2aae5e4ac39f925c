"""Tests for the document-level ClauseAnalyzer."""

from __future__ import annotations

import logging

import pytest

from hukuk_analyzer.analyzer import (
    CRITICAL_RISK_ADVICE,
    OBLIGATION_BALANCE_ADVICE,
    ClauseAnalyzer,
    build_recommendations,
)
from hukuk_analyzer.catalog import PatternCatalog
from hukuk_analyzer.config import Settings
from hukuk_analyzer.extractors import split_paragraphs
from hukuk_analyzer.ids import SequentialIdGenerator
from hukuk_analyzer.models import (
    ClauseCategory,
    EntityType,
    RiskFlagType,
    Severity,
)
from hukuk_analyzer.text import fold


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestEmploymentScenario:
    """Parties, overtime and unlimited liability in an employment contract."""

    @pytest.fixture
    def result(self, analyzer: ClauseAnalyzer, employment_text: str):
        return analyzer.analyze(employment_text, document_type="is_sozlesmesi")

    def test_clause_types(self, result) -> None:
        assert [c.type for c in result.clauses] == [
            "taraf_tanimlama",
            "bedel_fazla_calisma",
            "sorumluluk_sinirsiz",
        ]
        assert result.clauses[1].category == ClauseCategory.FINANCIAL

    def test_critical_flag_for_unlimited_liability(self, result) -> None:
        clause = result.clauses[2]
        critical = [f for f in clause.risk_flags if f.severity == Severity.CRITICAL]
        assert len(critical) == 1
        assert critical[0].rule_id == "sinirsiz_sorumluluk"
        assert critical[0].clause_id == clause.id
        assert clause.inherent_severity == Severity.CRITICAL
        assert clause.is_risky

    def test_missing_dispute_resolution(self, result) -> None:
        missing = [f for f in result.risk_flags if f.type == RiskFlagType.MISSING]
        assert {f.rule_id for f in missing} == {
            "konu_tanim",
            "bedel_sabit",
            "sure_baslangic",
            "yukumluluk_ifa",
            "fesih_ihbar",
            "uyusmazlik_yetki",
        }
        assert all(f.is_document_level for f in missing)
        assert all(f.severity == Severity.MEDIUM for f in missing)
        assert "Yetki Şartı" in result.summary.missing_clauses

    def test_score_and_level(self, result) -> None:
        # one critical (25) + six missing (6 x 5)
        assert result.summary.risk_score == 55
        assert result.summary.risk_level == Severity.CRITICAL
        assert result.summary.critical_risks == 1
        assert result.summary.high_risks == 0

    def test_recommendations(self, result) -> None:
        recs = result.summary.recommendations
        assert recs[0] == CRITICAL_RISK_ADVICE
        assert recs[1] == "6 eksik madde tamamlanmalıdır"
        assert "Sorumluluk sınırı belirlenmeli veya sigorta teminatı alınmalıdır" in recs
        assert len(recs) == len(set(recs))

    def test_histogram_covers_every_category(self, result) -> None:
        histogram = result.summary.clauses_by_category
        assert set(histogram) == set(ClauseCategory)
        assert histogram[ClauseCategory.PARTY_INFO] == 1
        assert histogram[ClauseCategory.FINANCIAL] == 1
        assert histogram[ClauseCategory.LIABILITY] == 1
        assert sum(histogram.values()) == result.summary.total_clauses == 3

    def test_deterministic_ids(self, result) -> None:
        assert [c.id for c in result.clauses] == ["clause_1", "clause_2", "clause_3"]
        assert result.risk_flags[0].id == "flag_1"
        assert result.id == "extraction_1"
        assert result.extracted_at is not None


class TestLeaseScenario:
    def test_complete_lease_has_no_missing_clauses(self, analyzer: ClauseAnalyzer, lease_text: str) -> None:
        result = analyzer.analyze(lease_text, document_type="kira_sozlesmesi")
        assert [c.type for c in result.clauses] == [
            "taraf_tanimlama",
            "konu_kira",
            "bedel_sabit",
            "odeme_vadesi",
            "sure_belirli",
            "fesih_ihbar",
        ]
        assert result.summary.missing_clauses == ()
        assert result.risk_flags == ()
        assert result.summary.risk_score == 0
        assert result.summary.risk_level == Severity.LOW

    def test_lease_entities_and_obligations(self, analyzer: ClauseAnalyzer, lease_text: str) -> None:
        result = analyzer.analyze(lease_text, document_type="kira_sozlesmesi")
        amounts = [e for e in result.entities if e.type == EntityType.AMOUNT]
        assert [a.normalized for a in amounts] == ["25000"]
        assert lease_text[amounts[0].start_char : amounts[0].end_char] == amounts[0].text

        assert len(result.obligations) == 1
        assert result.obligations[0].obligor == "Kiracı"
        assert result.summary.total_rights == 0
        assert OBLIGATION_BALANCE_ADVICE in result.summary.recommendations


class TestSampleContract:
    def test_sample_contract(self, analyzer: ClauseAnalyzer, sample_contract_text: str) -> None:
        result = analyzer.analyze(sample_contract_text, "is_sozlesmesi", "ornek_is_sozlesmesi.txt")
        types = result.clause_types_found
        assert "taraf_tanimlama" in types
        assert "sorumluluk_sinirsiz" in types
        assert result.summary.risk_level == Severity.CRITICAL
        assert result.document_name == "ornek_is_sozlesmesi.txt"
        assert any(e.type == EntityType.PARTY for e in result.entities)
        assert result.high_risk_clauses


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------

class TestInputHandling:
    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_blank_input(self, analyzer: ClauseAnalyzer, catalog: PatternCatalog, text: str) -> None:
        result = analyzer.analyze(text, document_type="is_sozlesmesi")
        assert result.clauses == ()
        assert result.risk_flags == ()
        assert result.summary.total_clauses == 0
        assert result.summary.risk_score == 0
        assert result.summary.risk_level == Severity.LOW
        assert result.summary.missing_clauses == catalog.required_clause_titles("is_sozlesmesi")
        assert result.summary.recommendations == ()

    def test_unknown_document_type_is_generic(self, analyzer: ClauseAnalyzer, employment_text: str) -> None:
        result = analyzer.analyze(employment_text, document_type="bilinmeyen_tur")
        assert result.document_type == "genel"
        assert result.summary.missing_clauses == ()
        assert not any(f.type == RiskFlagType.MISSING for f in result.risk_flags)

    def test_default_document_type_from_settings(self, employment_text: str) -> None:
        analyzer = ClauseAnalyzer(settings=Settings(default_document_type="is_sozlesmesi"))
        result = analyzer.analyze(employment_text)
        assert result.document_type == "is_sozlesmesi"
        assert result.summary.missing_clauses

    def test_truncation(self, employment_text: str, caplog: pytest.LogCaptureFixture) -> None:
        limit = employment_text.index("Fazla") - 2
        analyzer = ClauseAnalyzer(settings=Settings(max_document_chars=limit))
        with caplog.at_level(logging.WARNING, logger="hukuk_analyzer.analyzer"):
            result = analyzer.analyze(employment_text)
        assert result.truncated
        assert [c.type for c in result.clauses] == ["taraf_tanimlama"]
        assert "truncating" in caplog.text

    def test_not_truncated_by_default(self, analyzer: ClauseAnalyzer, employment_text: str) -> None:
        assert not analyzer.analyze(employment_text).truncated


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestProperties:
    def test_one_clause_per_matched_paragraph(
        self, analyzer: ClauseAnalyzer, catalog: PatternCatalog, sample_contract_text: str
    ) -> None:
        result = analyzer.analyze(sample_contract_text)
        expected = sum(
            1 for p in split_paragraphs(sample_contract_text) if catalog.first_match(p.text) is not None
        )
        assert len(result.clauses) == expected

    def test_category_comes_from_catalog(
        self, analyzer: ClauseAnalyzer, catalog: PatternCatalog, sample_contract_text: str
    ) -> None:
        for clause in analyzer.analyze(sample_contract_text).clauses:
            assert clause.category == catalog.get(clause.type).category
            assert clause.title == catalog.get(clause.type).title

    def test_missing_is_set_difference(
        self, analyzer: ClauseAnalyzer, catalog: PatternCatalog, sample_contract_text: str
    ) -> None:
        result = analyzer.analyze(sample_contract_text, "is_sozlesmesi")
        observed = {c.title for c in result.clauses}
        required = catalog.required_clause_titles("is_sozlesmesi")
        assert set(result.summary.missing_clauses) == set(required) - observed

    def test_idempotent(self, sample_contract_text: str) -> None:
        first = ClauseAnalyzer().analyze(sample_contract_text, "is_sozlesmesi")
        second = ClauseAnalyzer().analyze(sample_contract_text, "is_sozlesmesi")
        assert first.clauses == second.clauses
        assert first.summary.risk_score == second.summary.risk_score

    def test_same_analyzer_twice_differs_only_in_ids(
        self, analyzer: ClauseAnalyzer, employment_text: str
    ) -> None:
        first = analyzer.analyze(employment_text)
        second = analyzer.analyze(employment_text)
        assert [c.content for c in first.clauses] == [c.content for c in second.clauses]
        assert first.entities == second.entities
        assert first.obligations == second.obligations
        assert first.summary == second.summary
        assert first.id != second.id

    def test_score_bounds(self, analyzer: ClauseAnalyzer) -> None:
        text = "\n\n".join(["İşçi her türlü zarardan sınırsız olarak sorumludur."] * 10)
        result = analyzer.analyze(text)
        assert result.summary.risk_score == 100
        assert result.summary.risk_level == Severity.CRITICAL

    def test_offsets_slice_original_text(self, analyzer: ClauseAnalyzer, sample_contract_text: str) -> None:
        for clause in analyzer.analyze(sample_contract_text).clauses:
            assert sample_contract_text[clause.start_char : clause.end_char] == clause.content

    def test_related_clauses_are_symmetric(self, analyzer: ClauseAnalyzer) -> None:
        text = (
            "Mücbir sebep halinde taraflar sorumlu değildir.\n\n"
            "Mücbir sebep maddesindeki haller için depozito iade edilmez."
        )
        first, second = analyzer.analyze(text).clauses
        assert (first.type, second.type) == ("sorumluluk_mucbir_sebep", "odeme_depozito")
        assert first.related_clauses == (second.id,)
        assert second.related_clauses == (first.id,)


class TestQueries:
    def test_search_and_category_filters(self, analyzer: ClauseAnalyzer, employment_text: str) -> None:
        result = analyzer.analyze(employment_text)
        assert [c.type for c in result.search_clauses("FAZLA ÇALIŞMA")] == ["bedel_fazla_calisma"]
        assert [c.type for c in result.search_clauses("SINIRSIZ")] == ["sorumluluk_sinirsiz"]
        assert len(result.clauses_in_category(ClauseCategory.PARTY_INFO)) == 1
        assert result.clauses_in_category(ClauseCategory.CONFIDENTIALITY) == []
        assert fold("SINIRSIZ") == "sınırsız"


class TestSharedIds:
    def test_clause_and_flag_ids_come_from_one_generator(self, employment_text: str) -> None:
        ids = SequentialIdGenerator(start=10)
        result = ClauseAnalyzer(id_generator=ids).analyze(employment_text)
        assert result.clauses[0].id == "clause_10"
        assert result.risk_flags[0].id == "flag_10"


class TestBuildRecommendations:
    def test_empty(self) -> None:
        assert build_recommendations([], 0, 0, 0, 0) == []

    def test_missing_only(self) -> None:
        assert build_recommendations([], 0, 2, 0, 0) == ["2 eksik madde tamamlanmalıdır"]

    def test_balance_threshold(self) -> None:
        assert build_recommendations([], 0, 0, 2, 1) == []
        assert build_recommendations([], 0, 0, 3, 1) == [OBLIGATION_BALANCE_ADVICE]
